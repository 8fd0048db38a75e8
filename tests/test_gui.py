from unittest import mock

import pytest

from autocomplete.gui import AutocompleteWindow, main
from autocomplete.session import AutocompleteSession, ResultItem
from autocomplete.storage import load_word_freqs
from autocomplete.trie import Trie


@pytest.fixture
def fake_tk():
    with mock.patch("autocomplete.gui.tk") as tk_mod, mock.patch("autocomplete.gui.ttk") as ttk_mod:
        yield tk_mod, ttk_mod


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("apple 3\nbanana 1\n", encoding="utf-8")
    return path


def make_window(data_file):
    master = mock.MagicMock()
    session = AutocompleteSession(Trie())
    return AutocompleteWindow(master, session, data_file), master, session


def test_window_loads_words(fake_tk, data_file):
    window, _, _ = make_window(data_file)
    assert window.items == [ResultItem("banana", 1, False), ResultItem("apple", 3, False)]


def test_window_with_missing_file(fake_tk, tmp_path):
    window, _, session = make_window(tmp_path / "absent.txt")
    assert window.items == []
    assert session.trie.search_default("") == []


def test_refresh_follows_session(fake_tk, data_file):
    window, _, session = make_window(data_file)
    session.set_text("app")
    window.refresh()
    assert window.items == [ResultItem("apple", 3, False)]


def test_refresh_inserts_one_row_per_item(fake_tk, data_file):
    _, ttk_mod = fake_tk
    window, _, _ = make_window(data_file)
    tree = ttk_mod.Treeview.return_value
    tree.insert.reset_mock()
    window.refresh()
    texts = [call.kwargs["text"] for call in tree.insert.call_args_list]
    assert texts == [item.word for item in window.items]


def test_close_saves_and_destroys(fake_tk, data_file):
    window, master, session = make_window(data_file)
    session.set_text("cherry")
    session.add_word(4)
    window.close()
    master.destroy.assert_called_once()
    reloaded = load_word_freqs(Trie(), data_file)
    assert set(reloaded) == {("apple", 3), ("banana", 1), ("cherry", 4)}


def test_main_runs_event_loop(fake_tk, data_file):
    tk_mod, _ = fake_tk
    assert main(["--data", str(data_file)]) == 0
    tk_mod.Tk.return_value.mainloop.assert_called_once()