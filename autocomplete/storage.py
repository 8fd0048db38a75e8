"""Reading and writing the word-frequency list."""

from __future__ import annotations

import os
import re
from pathlib import Path

from autocomplete.trie import Trie

DEFAULT_DATA_PATH = Path("data") / "words.txt"
_LEADING_INT = re.compile(r"[+-]?\d+")


def load_word_freqs(
    trie: Trie, path: str | os.PathLike[str] = DEFAULT_DATA_PATH
) -> list[tuple[str, int]]:
    """Add every ``word frequency`` line of ``path`` to ``trie``.

    A missing or unreadable file adds nothing; malformed lines are skipped.
    Returns the pairs that were added.
    """
    loaded: list[tuple[str, int]] = []
    try:
        handle = open(path, encoding="utf-8")
    except OSError:
        return loaded
    with handle:
        for line in handle:
            tokens = line.split()
            if len(tokens) < 2:
                continue
            match = _LEADING_INT.match(tokens[1])
            if match is None:
                continue
            word, freq = tokens[0], int(match.group())
            try:
                trie.add(word, freq)
            except ValueError:
                continue
            loaded.append((word, freq))
    return loaded


def save_word_freqs(trie: Trie, path: str | os.PathLike[str] = DEFAULT_DATA_PATH) -> None:
    """Write every word of ``trie`` to ``path``, least frequent first."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        for freq, word in trie.search_default("", True):
            handle.write(f"{word} {freq}\n")