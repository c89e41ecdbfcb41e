# engrus

An English–Russian dictionary. Each English word is kept with a sorted set of
its Russian translations. The dictionary is built on AVL trees.
`AvlTreeSet` and `AvlTreeMap` are self-balancing ordered containers, and you
can also use them on their own.

No third-party packages are needed at run time.

## Installing

```
pip install .
```

## Command line

The `engrus` command reads commands from standard input. It prints its results
to standard output. Input is read as whitespace-separated words:

```
INSERT <word> <translation>
SEARCH <word>
REMOVE <word> <translation>
```

- `INSERT` adds a translation for a word.
- `SEARCH` prints every translation of a word in sorted order, one per line.
- `REMOVE` deletes one translation of a word.

In the following cases the program prints `<INVALID_COMMAND>`:

- The command name is unknown. The rest of that input line is skipped.
- `INSERT` is given a translation the word already has.
- `SEARCH` is given a word that is unknown or has no translations left.
- `REMOVE` is given a word or translation that is not present.

Each successful `INSERT` and `REMOVE` prints nothing.

```
$ printf 'INSERT good хороший\nINSERT good товар\nSEARCH good\n' | engrus
товар
хороший
```

`engrus --help` shows a short usage message.

The dictionary lives in memory only. It starts empty on every run, and nothing
is saved when the program ends.

## Library use

### The dictionary

```python
from engrus.dictionary import EngRusDictionary

d = EngRusDictionary()
d.add("good", "хороший")              # True
d.add("good", "товар")                # True
d.add("good", "товар")                # False: already present
print(d.translations("good"))         # ('товар', 'хороший')
d.remove("good", "товар")             # True
print(list(d.items()))                # [('good', ('хороший',))]
```

`translations()` raises `KeyError` for a word that was never added. A word
stays in the dictionary after its last translation is removed. From then on it
has an empty tuple of translations.

Iterating over the dictionary yields its words in sorted order. `len()` gives
the number of words. `copy()` returns an independent copy.

### The command interpreter

`engrus.commands.CommandProcessor` wraps a dictionary. Its `run()` method takes
an iterable of text lines and yields the output lines:

```python
from engrus.commands import CommandProcessor
from engrus.dictionary import EngRusDictionary

processor = CommandProcessor(EngRusDictionary())
print(list(processor.run(["INSERT bad плохой", "SEARCH bad", "SEARCH x"])))
# ['плохой', '<INVALID_COMMAND>']
```

### The containers

`AvlTreeSet` and `AvlTreeMap` work much like Python's own sets and mappings.
The difference is that they keep their contents in sorted order.
`reversed()` walks them from the largest key down.

```python
from engrus.avl_set import AvlTreeSet
from engrus.avl_map import AvlTreeMap

s = AvlTreeSet([7, 2, 9, 10, 28, 65, 37])
print(list(s))            # [2, 7, 9, 10, 28, 37, 65]
s.add(5)                  # True
s.discard(100)            # False
s.remove(7)               # raises KeyError if absent

m = AvlTreeMap([(2, 3), (4, 2), (13, 0)])
print(list(m.items()))    # [(2, 3), (4, 2), (13, 0)]
m.insert(2, 99)           # False: an existing value is left as it is
m[2] = 99                 # replaces the value
del m[4]
print(m.get(4, "none"))   # none
```

Both containers have a `copy()` method. They compare equal to other containers
of the same kind, and to plain `set`s and `dict`s, when the contents match.

The balancing itself is done by `engrus.avl_tree.AvlTree`.
`height()` and `is_balanced()` report on the shape of the tree.

## Running the tests

```
pip install .[test]
pytest
```