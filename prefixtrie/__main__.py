"""Command-line entry point: ``python -m prefixtrie``."""

from __future__ import annotations

import argparse
import logging

from prefixtrie.cli import run_cli
from prefixtrie.constants import LOG_FORMAT
from prefixtrie.wordlist import WordList


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Prefix trie shell -- load a word list and query it",
    )
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to word list file (one word per line)")
    parser.add_argument("--casefold", action="store_true",
                        help="Case-fold words on load and lookup")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    words = WordList(args.dict, casefold=args.casefold)
    run_cli(words.trie)


if __name__ == "__main__":
    main()
