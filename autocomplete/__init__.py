"""Frequency-ranked word autocompletion backed by a trie, with word files, a session model and a Tk window."""

__version__ = "1.0.0"

__all__ = ["gui", "session", "storage", "trie"]