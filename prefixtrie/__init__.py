"""Prefix trie -- insertion, exact and prefix lookup, deletion with pruning."""

from prefixtrie.errors import EmptySequenceError, InvalidInputError, TrieError
from prefixtrie.trie import Trie, TrieNode
from prefixtrie.wordlist import WordList

__all__ = [
    "EmptySequenceError",
    "InvalidInputError",
    "Trie",
    "TrieError",
    "TrieNode",
    "WordList",
]
