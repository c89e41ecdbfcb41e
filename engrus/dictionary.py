"""An English-Russian dictionary mapping each word to a sorted set of translations."""

from __future__ import annotations

from typing import Iterator, Tuple

from engrus.avl_map import AvlTreeMap
from engrus.avl_set import AvlTreeSet


class EngRusDictionary:
    """Words in ascending order, each with its translations in ascending order.

    A word stays in the dictionary after its last translation is removed; it
    then has no translations.
    """

    def __init__(self) -> None:
        self._entries = AvlTreeMap()

    def add(self, word: str, translation: str) -> bool:
        """Add ``translation`` for ``word``; return False if it was already there."""
        translations = self._entries.get(word)
        if translations is None:
            translations = AvlTreeSet()
            self._entries.insert(word, translations)
        return translations.add(translation)

    def translations(self, word: str) -> Tuple[str, ...]:
        """Return the translations of ``word`` in order; raise KeyError if unknown."""
        return tuple(self._entries[word])

    def remove(self, word: str, translation: str) -> bool:
        """Remove one translation of ``word``; return False if there was none to remove."""
        translations = self._entries.get(word)
        if translations is None:
            return False
        return translations.discard(translation)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def items(self) -> Iterator[Tuple[str, Tuple[str, ...]]]:
        """Yield ``(word, translations)`` pairs in ascending word order."""
        return ((word, tuple(translations)) for word, translations in self._entries.items())

    def copy(self) -> "EngRusDictionary":
        """Return an independent dictionary with the same contents."""
        duplicate = type(self)()
        duplicate._entries = AvlTreeMap(
            (word, translations.copy()) for word, translations in self._entries.items()
        )
        return duplicate