"""Prefix trie for fast entry and prefix lookups."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Iterator

from prefixtrie.errors import EmptySequenceError, InvalidInputError

log = logging.getLogger("prefixtrie")


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_terminal")

    def __init__(self):
        self.children: dict[Hashable, TrieNode] = {}
        self.is_terminal: bool = False

    def get_child(self, symbol: Hashable) -> TrieNode | None:
        return self.children.get(symbol)

    def nearest_child(self, symbol: Hashable) -> TrieNode:
        """Child for *symbol*, created and linked if it does not exist yet."""
        node = self.children.get(symbol)
        if node is None:
            node = self.children[symbol] = TrieNode()
        return node

    def remove_child(self, symbol: Hashable) -> TrieNode | None:
        return self.children.pop(symbol, None)

    def has_children(self) -> bool:
        return bool(self.children)

    def is_leaf(self) -> bool:
        return not self.children

    def __repr__(self) -> str:
        if self.children:
            inner = ", ".join(f"{sym!s}={child!r}" for sym, child in self.children.items())
            return f"{{{inner}}}, {self.is_terminal}"
        return str(self.is_terminal)


def _symbols(sequence) -> tuple:
    """Validate *sequence* and return its symbols as a tuple.

    Everything is checked before the caller touches the tree, so a bad
    symbol halfway through never leaves a partial path behind.
    """
    if sequence is None:
        raise InvalidInputError("expected a sequence of symbols, got None")
    if isinstance(sequence, str):
        return tuple(sequence)
    if not isinstance(sequence, Iterable):
        raise InvalidInputError(
            f"expected a sequence of symbols, got {type(sequence).__name__}"
        )
    symbols = tuple(sequence)
    for sym in symbols:
        try:
            hash(sym)
        except TypeError as exc:
            raise InvalidInputError(f"unhashable symbol {sym!r}") from exc
    return symbols


class Trie:
    """Prefix trie over sequences of hashable symbols.

    Strings are the common case: each character is one symbol. Any other
    iterable of hashable, mutually comparable symbols works the same way
    (tuples of ints, lists of tokens).

    The empty sequence is never stored. ``insert`` rejects it, so the root
    is never terminal.
    """

    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    @classmethod
    def empty(cls) -> Trie:
        return cls()

    # mutation

    def insert(self, sequence: Iterable[Hashable]) -> bool:
        """Store *sequence* as a complete entry.

        Returns True if the entry is new, False if it was already present.
        Raises InvalidInputError for None or unhashable symbols and
        EmptySequenceError for an empty sequence.
        """
        symbols = _symbols(sequence)
        if not symbols:
            raise EmptySequenceError("cannot insert an empty sequence")

        node = self.root
        for sym in symbols:
            node = node.nearest_child(sym)
        if node.is_terminal:
            return False
        node.is_terminal = True
        self._size += 1
        log.debug("Inserted %r (%d entries)", sequence, self._size)
        return True

    def remove(self, sequence: Iterable[Hashable]) -> bool:
        """Remove *sequence* and prune nodes that no longer lead anywhere.

        Returns False without touching the tree when *sequence* is not a
        stored entry (including when it only exists as a prefix).
        """
        symbols = _symbols(sequence)
        if not symbols:
            return False

        # Descend, remembering each edge so pruning can walk back up.
        path: list[tuple[TrieNode, Hashable, TrieNode]] = []
        node = self.root
        for sym in symbols:
            child = node.get_child(sym)
            if child is None:
                return False
            path.append((node, sym, child))
            node = child

        if not node.is_terminal:
            return False
        node.is_terminal = False
        self._size -= 1

        pruned = 0
        for parent, sym, child in reversed(path):
            if child.has_children() or child.is_terminal:
                break
            parent.remove_child(sym)
            pruned += 1
        log.debug("Removed %r, pruned %d node(s)", sequence, pruned)
        return True

    def clear(self) -> None:
        self.root.children.clear()
        self._size = 0

    # queries

    def find_node(self, sequence: Iterable[Hashable]) -> TrieNode | None:
        """Node reached by following *sequence* from the root, or None."""
        node = self.root
        for sym in _symbols(sequence):
            node = node.get_child(sym)
            if node is None:
                return None
        return node

    def contains(self, sequence: Iterable[Hashable]) -> bool:
        node = self.find_node(sequence)
        return node is not None and node.is_terminal

    def starts_with(self, prefix: Iterable[Hashable]) -> bool:
        return self.find_node(prefix) is not None

    def longest_prefix(self, sequence: Iterable[Hashable]) -> tuple | None:
        """Longest stored entry that is a prefix of *sequence*."""
        symbols = _symbols(sequence)
        node = self.root
        best = None
        for i, sym in enumerate(symbols):
            node = node.get_child(sym)
            if node is None:
                break
            if node.is_terminal:
                best = i + 1
        return None if best is None else symbols[:best]

    def entries(self, prefix: Iterable[Hashable] = ()) -> Iterator[tuple]:
        """Yield every stored entry starting with *prefix*, in sorted order.

        Children are visited in sorted symbol order, so symbols within one
        trie must be mutually comparable.
        """
        start = _symbols(prefix)
        node = self.find_node(start)
        if node is None:
            return
        stack: list[tuple[TrieNode, tuple]] = [(node, start)]
        while stack:
            node, seq = stack.pop()
            if node.is_terminal:
                yield seq
            for sym in sorted(node.children, reverse=True):
                stack.append((node.children[sym], seq + (sym,)))

    def words(self, prefix: str = "") -> Iterator[str]:
        for seq in self.entries(prefix):
            yield "".join(seq)

    def node_count(self) -> int:
        """Number of nodes in the tree, root included."""
        count = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children.values())
        return count

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, sequence) -> bool:
        return self.contains(sequence)

    def __repr__(self) -> str:
        if not self.root.children:
            return "{}"
        return "\n".join(
            f"{{{sym!s} -> {child!r}}}" for sym, child in self.root.children.items()
        )
