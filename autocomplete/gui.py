"""Tk window for browsing, adding and deleting suggested words."""

from __future__ import annotations

import argparse
import os
import tkinter as tk
from pathlib import Path
from tkinter import ttk

from autocomplete.session import (
    AutocompleteSession,
    InvalidCharacterError,
    ResultItem,
    SearchMode,
)
from autocomplete.storage import DEFAULT_DATA_PATH, load_word_freqs, save_word_freqs
from autocomplete.trie import Trie

SEARCH_DELAY_MS = 2000
HIGHLIGHT_COLOUR = "#3c3c3c"


class AutocompleteWindow:
    """Main window: search field, mode and order controls, and the suggestion list."""

    def __init__(
        self,
        master,
        session: AutocompleteSession,
        data_path: str | os.PathLike[str] = DEFAULT_DATA_PATH,
    ) -> None:
        self.master = master
        self.session = session
        self.data_path = Path(data_path)
        self.items: list[ResultItem] = []
        self._timer = None
        self._syncing = False
        load_word_freqs(session.trie, self.data_path)
        self._build()
        master.protocol("WM_DELETE_WINDOW", self.close)
        self.refresh()

    def _build(self) -> None:
        master = self.master
        master.title("Autocomplete")
        frame = ttk.Frame(master, padding=10)
        frame.pack(fill="both", expand=True)

        self._text_var = tk.StringVar(master=master)
        self._text_var.trace_add("write", self._on_text_edited)
        entry = ttk.Entry(frame, textvariable=self._text_var)
        entry.grid(row=0, column=0, columnspan=3, sticky="ew")
        ttk.Button(frame, text="Clear", command=self._on_clear).grid(row=0, column=3)

        self._mode_box = ttk.Combobox(
            frame, values=[mode.label for mode in SearchMode], state="readonly"
        )
        self._mode_box.current(int(self.session.mode))
        self._mode_box.bind("<<ComboboxSelected>>", self._on_mode_changed)
        self._mode_box.grid(row=1, column=0, sticky="ew")

        self._sort_button = ttk.Button(frame, text=self._sort_label(), command=self._on_sort)
        self._sort_button.grid(row=1, column=1)

        self._freq_var = tk.IntVar(master=master, value=1)
        ttk.Spinbox(frame, from_=1, to=1_000_000, textvariable=self._freq_var, width=8).grid(
            row=1, column=2
        )
        ttk.Button(frame, text="Add word", command=self._on_add).grid(row=1, column=3)

        self._tree = ttk.Treeview(frame, columns=("frequency",), show="tree headings")
        self._tree.heading("#0", text="Word")
        self._tree.heading("frequency", text="Frequency")
        self._tree.tag_configure("highlighted", background=HIGHLIGHT_COLOUR)
        self._tree.bind("<Delete>", self._on_delete)
        self._tree.grid(row=2, column=0, columnspan=4, sticky="nsew")
        ttk.Button(frame, text="Delete selected", command=self._on_delete).grid(
            row=3, column=3, sticky="e"
        )

        frame.columnconfigure(0, weight=1)
        frame.rowconfigure(2, weight=1)

    def _sort_label(self) -> str:
        return "Ascending" if self.session.ascending else "Descending"

    def _show_text(self, text: str) -> None:
        self._syncing = True
        try:
            self._text_var.set(text)
        finally:
            self._syncing = False

    def _restart_timer(self) -> None:
        if self._timer is not None:
            self.master.after_cancel(self._timer)
        self._timer = self.master.after(SEARCH_DELAY_MS, self._on_timeout)

    def _on_text_edited(self, *_args) -> None:
        if self._syncing:
            return
        try:
            self.session.set_text(self._text_var.get())
        except InvalidCharacterError:
            self._show_text(self.session.text)
            self.master.bell()
            return
        self._restart_timer()
        self.refresh()

    def _on_clear(self) -> None:
        self.session.clear()
        self._show_text("")
        self.refresh()

    def _on_mode_changed(self, _event=None) -> None:
        self.session.set_mode(self._mode_box.current())
        self._show_text(self.session.text)
        self._sort_button.state(["!disabled"] if self.session.sort_enabled else ["disabled"])
        self.refresh()

    def _on_sort(self) -> None:
        self.session.toggle_sort()
        self._sort_button.configure(text=self._sort_label())
        self._restart_timer()
        self.refresh()

    def _on_add(self) -> None:
        try:
            frequency = int(self._freq_var.get())
        except (tk.TclError, ValueError):
            self.master.bell()
            return
        if self.session.add_word(frequency):
            self._show_text("")
            self._freq_var.set(1)
            self.refresh()

    def _on_delete(self, _event=None) -> None:
        for iid in self._tree.selection():
            item = self._rows.pop(iid, None)
            if item is None:
                continue
            self.session.delete_word(item.word)
            self._tree.delete(iid)
            self.items.remove(item)

    def _on_timeout(self) -> None:
        self._timer = None
        if self.session.register_search():
            self.refresh()

    def refresh(self) -> None:
        """Rebuild the suggestion list from the session."""
        self._tree.delete(*self._tree.get_children())
        self.items = self.session.results()
        self._rows: dict[str, ResultItem] = {}
        for index, item in enumerate(self.items):
            iid = str(index)
            self._rows[iid] = item
            self._tree.insert(
                "",
                "end",
                iid=iid,
                text=item.word,
                values=(item.frequency,),
                tags=("highlighted",) if item.highlighted else (),
            )

    def close(self) -> None:
        """Save the words and close the window."""
        if self._timer is not None:
            self.master.after_cancel(self._timer)
            self._timer = None
        save_word_freqs(self.session.trie, self.data_path)
        self.master.destroy()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="autocomplete", description="Word autocompletion.")
    parser.add_argument(
        "--data", type=Path, default=DEFAULT_DATA_PATH, help="word frequency file"
    )
    args = parser.parse_args(argv)
    root = tk.Tk()
    AutocompleteWindow(root, AutocompleteSession(Trie()), args.data)
    root.mainloop()
    return 0