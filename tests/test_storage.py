from autocomplete.storage import load_word_freqs, save_word_freqs
from autocomplete.trie import Trie


def test_save_format(tmp_path):
    trie = Trie()
    trie.add("apple", 5)
    trie.add("bee", 2)
    path = tmp_path / "words.txt"
    save_word_freqs(trie, path)
    assert path.read_text(encoding="utf-8") == "bee 2\napple 5\n"


def test_save_creates_directories(tmp_path):
    trie = Trie()
    trie.add("zebra", 1)
    path = tmp_path / "nested" / "data" / "words.txt"
    save_word_freqs(trie, path)
    assert path.read_text(encoding="utf-8") == "zebra 1\n"


def test_round_trip(tmp_path):
    original = Trie()
    for word, freq in [("apple", 5), ("apply", 3), ("banana", 9)]:
        original.add(word, freq)
    path = tmp_path / "words.txt"
    save_word_freqs(original, path)
    restored = Trie()
    load_word_freqs(restored, path)
    assert restored.search_default("", True) == original.search_default("", True)


def test_load_returns_added_pairs(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("apple 5\nbee 2\n", encoding="utf-8")
    trie = Trie()
    assert load_word_freqs(trie, path) == [("apple", 5), ("bee", 2)]
    assert trie.prefix_frequency("apple") == 5


def test_load_skips_malformed_lines(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("lonely\n\nbad x\ngood 4\nodd{ 3\n", encoding="utf-8")
    trie = Trie()
    loaded = load_word_freqs(trie, path)
    assert loaded == [("good", 4)]
    assert trie.search_default("", True) == [(4, "good")]


def test_load_missing_file(tmp_path):
    trie = Trie()
    assert load_word_freqs(trie, tmp_path / "absent.txt") == []
    assert trie.search_default("", True) == []