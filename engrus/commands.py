"""Text command interpreter for the dictionary: INSERT, SEARCH and REMOVE."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence, TextIO

from engrus.dictionary import EngRusDictionary

INVALID_COMMAND = "<INVALID_COMMAND>"


class _TokenStream:
    """Whitespace-separated tokens of a text stream, able to drop the rest of a line."""

    def __init__(self, stream: Iterable[str]) -> None:
        self._lines = iter(stream)
        self._pending: deque = deque()

    def __iter__(self) -> "_TokenStream":
        return self

    def __next__(self) -> str:
        while not self._pending:
            self._pending.extend(next(self._lines).split())
        return self._pending.popleft()

    def skip_line(self) -> None:
        self._pending.clear()


class CommandProcessor:
    """Runs dictionary commands read from a stream of words."""

    def __init__(self, dictionary: EngRusDictionary) -> None:
        self.dictionary = dictionary
        self._commands: Dict[str, Callable[[Iterable[str]], List[str]]] = {
            "INSERT": self.insert,
            "SEARCH": self.search,
            "REMOVE": self.remove,
        }

    def insert(self, tokens: Iterable[str]) -> List[str]:
        """Read a word and a translation and add them; return the output lines."""
        tokens = iter(tokens)
        word = next(tokens, "")
        translation = next(tokens, "")
        return [] if self.dictionary.add(word, translation) else [INVALID_COMMAND]

    def search(self, tokens: Iterable[str]) -> List[str]:
        """Read a word; return its translations, one per line."""
        word = next(iter(tokens), "")
        try:
            translations = self.dictionary.translations(word)
        except KeyError:
            return [INVALID_COMMAND]
        return list(translations) if translations else [INVALID_COMMAND]

    def remove(self, tokens: Iterable[str]) -> List[str]:
        """Read a word and a translation and remove the translation."""
        tokens = iter(tokens)
        word = next(tokens, "")
        translation = next(tokens, "")
        return [] if self.dictionary.remove(word, translation) else [INVALID_COMMAND]

    def run(self, stream: Iterable[str]) -> Iterator[str]:
        """Execute every command in ``stream``, yielding the output lines."""
        tokens = _TokenStream(stream)
        for name in tokens:
            command = self._commands.get(name)
            if command is None:
                tokens.skip_line()
                yield INVALID_COMMAND
            else:
                yield from command(tokens)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read commands from standard input and print the results."""
    parser = argparse.ArgumentParser(
        description="English-Russian dictionary driven by INSERT, SEARCH and REMOVE commands on stdin."
    )
    parser.parse_args(argv)
    processor = CommandProcessor(EngRusDictionary())
    out: TextIO = sys.stdout
    for line in processor.run(sys.stdin):
        out.write(line + "\n")
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())