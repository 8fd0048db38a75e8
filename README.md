# autocomplete

A word-completion tool built on a trie that counts how often each word is used.
Type a prefix and see the words that start with it. You can order them by frequency,
by length or alphabetically, or match them against a wildcard pattern.
Words you keep searching for are learned automatically.

## Installation

```
pip install .
```

The package needs nothing beyond the Python standard library. The desktop window uses
tkinter, which ships with most Python builds. To run the test suite:

```
pip install ".[test]"
pytest
```

## The desktop application

```
autocomplete
autocomplete --data path/to/words.txt
```

The window loads its vocabulary from the word file given by `--data`. The default is
`data/words.txt`, relative to the current directory. The window offers:

- a search field and a "Clear" button;
- a search-mode selector: Default, Shortest, Lexicographical, Fuzzy;
- a sort toggle showing "Ascending" or "Descending";
- a frequency spinner with an "Add word" button;
- a list of matching words, each with its frequency.

How it behaves:

- Typing refreshes the list at once. An entry equal to the typed text is highlighted.
- If the last character typed is outside the supported alphabet, it is removed again
  and the window rings the bell.
- Two seconds after the last edit or sort change, the search is counted (see
  `register_search` below).
- Selecting entries and pressing the Delete key or the "Delete selected" button removes
  those words from the vocabulary.
- Fuzzy mode clears the search field and disables the sort toggle.
- When the window closes, the vocabulary is written back to the word file.

## Using the library

### The trie

```python
from autocomplete.trie import Trie

trie = Trie()
trie.add("hello", 5)
trie.add("help", 2)
trie.add("hero", 7)

trie.search_default("he", True)          # (frequency, word) pairs, by frequency then word
trie.search_shortest("he", True)         # words, shortest first (breadth-first)
trie.search_lexicographical("he", True)  # words in alphabet order
trie.search_fuzzy("h.l*")                # sorted list of words matching the pattern

trie.word_exists("help")      # True
trie.prefix_frequency("hel")  # total frequency of words under the prefix: 7
trie.erase("help")            # removes every use of the word
```

Each search takes a prefix and an `ascending` flag. False reverses the order.
An empty prefix covers every word.

Adding a word that is already present increases its frequency.

`erase` raises `KeyError` when the word's path is not in the trie.

**Alphabet.** Each trie node has 60 child slots, one per character from space (`" "`)
to `"["`. Lower-case letters are folded into upper case and come back in lower case.
`char_id` and `id_char` convert between a character and its slot. Both raise
`ValueError` for anything outside the alphabet, and so does any trie method given
such a character.

**Fuzzy patterns.** `.` matches exactly one character. `*` matches any run of characters,
including an empty one. Repeated stars count as one.

### Word files

```python
from autocomplete.storage import load_word_freqs, save_word_freqs

added = load_word_freqs(trie, "data/words.txt")  # list of (word, frequency) pairs added
save_word_freqs(trie, "data/words.txt")
```

A word file has one `word frequency` pair per line, separated by whitespace.

- Loading skips lines that do not parse and words with unsupported characters.
- Loading a missing or unreadable file adds nothing.
- Saving creates the parent directory when needed.
- Saving writes words in ascending order of frequency, then word.

Both functions use `data/words.txt` when no path is given.

### Sessions without a window

`autocomplete.session.AutocompleteSession` holds the state behind the window: the
current text, a `SearchMode` and the sort direction. From these it builds the list of
`ResultItem`s (`word`, `frequency`, `highlighted`) to display:

```python
from autocomplete.session import AutocompleteSession, SearchMode

session = AutocompleteSession(trie)
session.set_mode(SearchMode.DEFAULT)
session.set_text("he")
session.toggle_sort()        # returns True if the order is now ascending
for item in session.results():
    print(item)

session.add_word(3)          # adds the current text with frequency 3, then clears it
session.delete_word("hero")
session.register_search()    # counts a finished search of the current text
session.clear()
```

What each mode reports as the frequency:

- In `SearchMode.DEFAULT` it is the word's own count.
- In the other modes it is `prefix_frequency` of the word, which includes longer words
  beginning with it.

Other behaviour:

- `set_text` raises `InvalidCharacterError`, a `ValueError`, when the last character is
  outside the alphabet. The text is then kept without that character.
- Switching to `SearchMode.FUZZY` empties the text.

`register_search` returns whether the trie changed. It raises the frequency of a known
word by one. An unknown word is counted in `trie.searched_words` and is added with
frequency 1 once it has been searched for three times.