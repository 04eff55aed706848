"""Word list loaded from a text file into a trie."""

from __future__ import annotations

import itertools
import logging
import os

from prefixtrie.constants import BUILTIN_WORDS, COMMENT_PREFIX, WORDLIST_SEARCH_PATHS
from prefixtrie.trie import Trie

log = logging.getLogger("prefixtrie")


class WordList:
    """Trie-backed word list with membership and completion lookups.

    Words are read one per line. Blank lines and ``#`` comments are
    skipped. Case is left alone unless *casefold* is set.
    """

    def __init__(self, path: str | None = None, casefold: bool = False, strict: bool = False):
        self.casefold = casefold
        self.trie = Trie()
        self.source: str | None = None
        self._load(path, strict)

    def _normalize(self, word: str) -> str:
        word = word.strip()
        return word.casefold() if self.casefold else word

    def _load(self, path: str | None, strict: bool) -> None:
        search_paths: list[str] = []
        if path:
            if not os.path.exists(path):
                if strict:
                    raise FileNotFoundError(path)
                log.warning("Word list %s not found, searching defaults", path)
            search_paths.append(path)
        search_paths.extend(WORDLIST_SEARCH_PATHS)

        for candidate in search_paths:
            if not os.path.exists(candidate):
                continue
            try:
                loaded = self.load_file(candidate)
            except (OSError, UnicodeDecodeError) as exc:
                log.warning("Could not read word list %s: %s", candidate, exc)
                self.trie.clear()
                continue
            if loaded:
                self.source = candidate
                log.info("Loaded %s words from %s", f"{loaded:,}", candidate)
                return
            log.debug("No words in %s", candidate)

        log.warning("No word list found -- using built-in minimal word list.")
        for word in BUILTIN_WORDS:
            self.trie.insert(self._normalize(word))

    def load_file(self, path: str) -> int:
        """Add every word in *path*; return how many were new."""
        added = 0
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                word = self._normalize(line)
                if not word or word.startswith(COMMENT_PREFIX):
                    continue
                if self.trie.insert(word):
                    added += 1
        return added

    def complete(self, prefix: str, limit: int | None = None) -> list[str]:
        """Stored words starting with *prefix*, sorted."""
        words = self.trie.words(self._normalize(prefix))
        return list(itertools.islice(words, limit))

    def is_valid(self, word: str) -> bool:
        word = self._normalize(word)
        return bool(word) and self.trie.contains(word)

    def __contains__(self, word: str) -> bool:
        return self.is_valid(word)

    def __len__(self) -> int:
        return len(self.trie)
