"""Interactive terminal shell over a trie."""

from __future__ import annotations

import time

from prefixtrie.errors import TrieError
from prefixtrie.trie import Trie

_LIST_LIMIT = 50
_WORD_COMMANDS = ("add", "has", "prefix", "del", "longest")

HELP = """Commands:
  add WORD      -- insert a word            (e.g. add cart)
  has WORD      -- exact membership
  prefix P      -- is P a prefix of any word
  del WORD      -- remove a word
  list [P]      -- words starting with P
  longest WORD  -- longest stored word that prefixes WORD
  size          -- number of stored words
  show          -- print the node structure
  clear         -- remove everything
  help          -- show this list
  done          -- leave the shell (also: quit, exit)"""


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


def handle_command(trie: Trie, line: str) -> str | None:
    """Run one shell command and return the text to print.

    Returns None when the shell should stop.
    """
    parts = line.split(maxsplit=1)
    if not parts:
        return ""
    cmd = parts[0].lower()
    arg = parts[1].strip() if len(parts) > 1 else ""

    if cmd in ("done", "quit", "exit"):
        return None
    if cmd == "help":
        return HELP
    if cmd == "size":
        return f"  {len(trie)} word(s), {trie.node_count()} node(s)"
    if cmd == "show":
        return str(trie)
    if cmd == "clear":
        trie.clear()
        return "  Trie cleared."
    if cmd == "list":
        words = []
        for word in trie.words(arg):
            if len(words) == _LIST_LIMIT:
                words.append("...")
                break
            words.append(word)
        return "  " + (" ".join(words) if words else "(none)")

    if cmd not in _WORD_COMMANDS:
        return f"  Unknown command {cmd!r}. Type 'help'."
    if not arg:
        return f"  Usage: {cmd} WORD"

    try:
        if cmd == "add":
            added = trie.insert(arg)
            return f"  Added '{arg}'" if added else f"  '{arg}' already present"
        if cmd == "has":
            return f"  {_yes_no(trie.contains(arg))}"
        if cmd == "prefix":
            return f"  {_yes_no(trie.starts_with(arg))}"
        if cmd == "del":
            removed = trie.remove(arg)
            return f"  Removed '{arg}'" if removed else f"  '{arg}' not found"
        match = trie.longest_prefix(arg)
        return f"  {''.join(match)}" if match else "  (none)"
    except TrieError as exc:
        return f"  Error: {exc}"


def run_cli(trie: Trie) -> None:
    """Run the shell until 'done' or end of input."""
    print("\n" + "=" * 60)
    print("  PREFIX TRIE -- Interactive Shell")
    print("=" * 60)
    print()
    print(HELP)
    print()

    while True:
        try:
            inp = input("  trie> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        t0 = time.perf_counter()
        out = handle_command(trie, inp)
        elapsed = time.perf_counter() - t0
        if out is None:
            break
        if out:
            print(out)
        if inp.lower().startswith("list"):
            print(f"  ({elapsed * 1000:.2f} ms)")

    print(f"\n{len(trie)} word(s) in trie.")
