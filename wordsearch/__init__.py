"""Inverted-index word search over plain-text books, with an interactive prompt."""

__version__ = "0.1.0"
__all__ = ["cli", "filemanager", "hashtable", "inverted_index", "occurrence"]