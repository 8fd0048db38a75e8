"""Interaction state of the autocomplete window, independent of any toolkit."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from autocomplete.trie import Trie

SEARCH_REPEAT_THRESHOLD = 3


class SearchMode(enum.IntEnum):
    """How suggestions are gathered and ordered."""

    DEFAULT = 0
    SHORTEST = 1
    LEXICOGRAPHICAL = 2
    FUZZY = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


class InvalidCharacterError(ValueError):
    """The last character typed cannot be stored in the trie."""


@dataclass(frozen=True)
class ResultItem:
    """One suggestion row: the word, the count shown next to it and whether it matches the text."""

    word: str
    frequency: int
    highlighted: bool = False


def _accepted(char: str) -> bool:
    if "a" <= char <= "z":
        char = char.upper()
    return " " <= char <= "Z"


class AutocompleteSession:
    """Search text, mode and sort order, applied to a trie."""

    def __init__(self, trie: Trie) -> None:
        self.trie = trie
        self.text = ""
        self.mode = SearchMode.DEFAULT
        self.ascending = True

    @property
    def sort_enabled(self) -> bool:
        return self.mode is not SearchMode.FUZZY

    def set_text(self, text: str) -> None:
        """Set the search text; a rejected last character is dropped and reported."""
        if text and not _accepted(text[-1]):
            self.text = text[:-1]
            raise InvalidCharacterError(f"unsupported character {text[-1]!r}")
        self.text = text

    def set_mode(self, mode: SearchMode | int) -> None:
        """Switch search mode; fuzzy mode starts from an empty pattern."""
        self.mode = SearchMode(mode)
        if self.mode is SearchMode.FUZZY:
            self.text = ""

    def toggle_sort(self) -> bool:
        """Flip the sort order and return whether it is now ascending."""
        self.ascending = not self.ascending
        return self.ascending

    def clear(self) -> None:
        self.text = ""

    def add_word(self, frequency: int) -> bool:
        """Add the current text with ``frequency``; return whether a word was added."""
        if not self.text:
            return False
        self.trie.add(self.text, frequency)
        self.text = ""
        return True

    def delete_word(self, word: str) -> None:
        """Remove every use of ``word``; raise KeyError if it is not present."""
        self.trie.erase(word)

    def register_search(self) -> bool:
        """Count a finished search for the current text; return whether the trie changed.

        A known word gains one use. An unknown word is added once it has been
        searched for ``SEARCH_REPEAT_THRESHOLD`` times.
        """
        word = self.text
        if not word:
            return False
        try:
            known = self.trie.word_exists(word)
        except ValueError:
            return False
        if known:
            self.trie.add(word, 1)
            return True
        searched = self.trie.searched_words
        searched[word] = searched.get(word, 0) + 1
        if searched[word] == SEARCH_REPEAT_THRESHOLD:
            self.trie.add(word, 1)
            searched.pop(word, None)
            return True
        return False

    def results(self) -> list[ResultItem]:
        """Return the suggestions for the current text, mode and order."""
        text = self.text
        try:
            if self.mode is SearchMode.DEFAULT:
                return [
                    ResultItem(word, freq, word == text)
                    for freq, word in self.trie.search_default(text, self.ascending)
                ]
            if self.mode is SearchMode.SHORTEST:
                words = self.trie.search_shortest(text, self.ascending)
            elif self.mode is SearchMode.LEXICOGRAPHICAL:
                words = self.trie.search_lexicographical(text, self.ascending)
            else:
                words = self.trie.search_fuzzy(text)
        except ValueError:
            return []
        return [ResultItem(word, self.trie.prefix_frequency(word), word == text) for word in words]