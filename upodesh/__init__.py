"""Bangla word suggestions for phonetic Roman-letter input, with tries, input normalisation and a command line."""

__version__ = "0.1.0"
__all__ = ["cli", "suggest", "trie", "utils"]