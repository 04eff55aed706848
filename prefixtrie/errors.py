"""Exceptions raised by the trie."""

from __future__ import annotations


class TrieError(Exception):
    """Base class for trie errors."""


class InvalidInputError(TrieError, TypeError):
    """A sequence was required but None, a non-iterable, or a sequence
    holding an unhashable symbol was given."""


class EmptySequenceError(TrieError, ValueError):
    """The empty sequence cannot be stored as an entry."""
