"""Prefix tree of words with usage frequencies and several search orders."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterator

ALPHABET_SIZE = 60
_BASE = ord(" ")


def char_id(char: str) -> int:
    """Return the child slot used for ``char``; letters are case-insensitive."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    if "a" <= char <= "z":
        char = char.upper()
    index = ord(char) - _BASE
    if not 0 <= index < ALPHABET_SIZE:
        raise ValueError(f"unsupported character {char!r}")
    return index


def id_char(index: int) -> str:
    """Return the character stored in child slot ``index`` (letters in lower case)."""
    if not 0 <= index < ALPHABET_SIZE:
        raise ValueError(f"child index out of range: {index}")
    char = chr(index + _BASE)
    return char.lower() if "A" <= char <= "Z" else char


@dataclass
class _Node:
    children: dict[int, _Node] = field(default_factory=dict)
    freq: int = 0
    end: int = 0

    def child(self, index: int) -> _Node | None:
        """Return the child at ``index`` if it still carries any frequency."""
        node = self.children.get(index)
        if node is None or node.freq == 0:
            return None
        return node

    def live_children(self) -> Iterator[tuple[str, _Node]]:
        for index in sorted(self.children):
            node = self.children[index]
            if node.freq != 0:
                yield id_char(index), node


class Trie:
    """Words with counts, searchable by prefix, breadth, order and wildcard."""

    def __init__(self) -> None:
        self._root = _Node()
        self.searched_words: dict[str, int] = {}

    def _path(self, prefix: str) -> list[_Node] | None:
        path = [self._root]
        for char in prefix:
            node = path[-1].child(char_id(char))
            if node is None:
                return None
            path.append(node)
        return path

    def _find(self, prefix: str) -> _Node | None:
        path = self._path(prefix)
        return None if path is None else path[-1]

    def _walk(self, node: _Node, word: str) -> Iterator[tuple[str, _Node]]:
        if node.end:
            yield word, node
        for char, child in node.live_children():
            yield from self._walk(child, word + char)

    def add(self, word: str, count: int = 1) -> None:
        """Add ``count`` uses of ``word``."""
        indices = [char_id(char) for char in word]
        self.searched_words.pop(word, None)
        node = self._root
        for index in indices:
            child = node.child(index)
            if child is None:
                child = node.children[index] = _Node()
            child.freq += count
            node = child
        node.end += count

    def search_default(self, prefix: str, ascending: bool = True) -> list[tuple[int, str]]:
        """Return ``(frequency, word)`` pairs under ``prefix`` sorted by frequency, then word."""
        node = self._find(prefix)
        if node is None:
            return []
        entries = [(found.end, word) for word, found in self._walk(node, prefix)]
        return sorted(entries, reverse=not ascending)

    def search_shortest(self, prefix: str, ascending: bool = True) -> list[str]:
        """Return words under ``prefix``, shortest first (longest first if descending)."""
        start = self._find(prefix)
        words: list[str] = []
        if start is not None:
            queue: deque[tuple[_Node, str]] = deque([(start, prefix)])
            while queue:
                node, word = queue.popleft()
                if node.end:
                    words.append(word)
                queue.extend((child, word + char) for char, child in node.live_children())
        if not ascending:
            words.reverse()
        return words

    def search_lexicographical(self, prefix: str, ascending: bool = True) -> list[str]:
        """Return words under ``prefix`` in alphabet order."""
        node = self._find(prefix)
        if node is None:
            return []
        words = [word for word, _ in self._walk(node, prefix)]
        if not ascending:
            words.reverse()
        return words

    def erase(self, word: str) -> None:
        """Remove every use of ``word``; raise KeyError if its path is absent."""
        path = self._path(word)
        if path is None:
            raise KeyError(word)
        amount = path[-1].end
        for node in path[1:]:
            node.freq -= amount
        path[-1].end -= amount

    def word_exists(self, word: str) -> bool:
        node = self._find(word)
        return node is not None and node.end != 0

    def prefix_frequency(self, prefix: str) -> int:
        """Return the total count of words passing through ``prefix``."""
        node = self._find(prefix)
        return 0 if node is None else node.freq

    def search_fuzzy(self, pattern: str) -> list[str]:
        """Return sorted words matching ``pattern``: '.' is one character, '*' any run."""
        collapsed: list[str] = []
        for char in pattern:
            if char == "*" and collapsed and collapsed[-1] == "*":
                continue
            collapsed.append(char)
        found: set[str] = set()
        self._match(self._root, collapsed, 0, "", found)
        return sorted(found)

    def _match(self, node: _Node, pattern: list[str], pos: int, word: str, found: set[str]) -> None:
        if pos == len(pattern):
            if node.end:
                found.add(word)
            return
        symbol = pattern[pos]
        if symbol == ".":
            for char, child in node.live_children():
                self._match(child, pattern, pos + 1, word + char, found)
        elif symbol == "*":
            self._match(node, pattern, pos + 1, word, found)
            for char, child in node.live_children():
                self._match(child, pattern, pos, word + char, found)
        else:
            index = char_id(symbol)
            child = node.child(index)
            if child is not None:
                self._match(child, pattern, pos + 1, word + id_char(index), found)