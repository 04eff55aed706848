"""Shared settings for the word-list loader and the terminal shell."""

from __future__ import annotations

import os

LOG_FORMAT = "[%(levelname)s] %(message)s"

# Tried in order when no explicit word list is given.
WORDLIST_SEARCH_PATHS: list[str] = [
    "words.txt",
    "dictionary.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "words.txt"),
    "/usr/share/dict/words",
]

COMMENT_PREFIX = "#"

# Used when no word list file can be found.
BUILTIN_WORDS: frozenset[str] = frozenset({
    "bat", "bar", "barn", "barm", "cat", "car", "carp", "card",
    "cell", "cola", "cut", "dog", "door", "dot", "tea", "ten", "to",
    "tree", "trie", "try",
})
