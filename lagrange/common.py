"""Utility functions and classes not found in the standard libraries.

Important functions:
 - open_maybe_stdin: open a path, treating "-" as standard input
 - unique: order-preserving deduplication

Extra collection types:
 - FrozenDict: a hashable immutable dictionary
"""

# builtins
from functools import total_ordering
import sys
import os

# 3rd party
from ordered_set import OrderedSet
from dictionaries import FrozenDict as _FrozenDict

@total_ordering
class FrozenDict(_FrozenDict):
    """Hashable, immutable dictionary.

    Option snapshots are FrozenDicts so they can be compared and stored in
    sets.  Two FrozenDicts order by their items sorted by key.
    """

    def _sorted_items(self):
        return tuple(sorted(self.items(), key=lambda item: item[0]))

    def __lt__(self, other):
        return self._sorted_items() < other._sorted_items()

    def __repr__(self):
        return "FrozenDict({!r})".format(dict(self._sorted_items()))

def open_maybe_stdin(f : str, mode="r"):
    """Open file f, or open standard input if f is "-".

    In any case, the caller is responsible for closing the returned handle.
    The safest usage of this function is

        with open_maybe_stdin(path) as f:
            ...
    """
    if f == "-":
        return os.fdopen(os.dup(sys.stdin.fileno()), mode)
    return open(f, mode)

def unique(iter):
    """
    Yields a stream of deduplicated elements.
    Elements are returned in the same order as the input iterator.
    """
    yield from OrderedSet(iter)
