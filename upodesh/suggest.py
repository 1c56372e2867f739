"""Word suggestions for romanised Bengali input."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from os import PathLike
from pathlib import Path

from .trie import Trie, TrieNode
from .utils import fix_string

PATTERNS_FILE = "preprocessed-patterns.json"
WORDS_FILE = "source-words.txt"
COMMON_FILE = "source-common-patterns.json"


class Suggest:
    """Suggests dictionary words that a romanised input may stand for.

    ``patterns`` maps romanised fragments to the Bengali strings they may
    produce; an empty string among them marks the fragment as optional.
    """

    def __init__(
        self,
        patterns: Mapping[str, Iterable[str]],
        words: Iterable[str],
        common_suffixes: Iterable[str],
    ) -> None:
        self._patterns = {key: list(values) for key, values in patterns.items()}
        self._patterns_trie = Trie.from_strings(self._patterns)
        self._words = Trie.from_strings(words)
        self._common_suffixes = list(common_suffixes)

    @classmethod
    def from_files(
        cls,
        patterns_path: str | PathLike[str],
        words_path: str | PathLike[str],
        common_path: str | PathLike[str],
    ) -> Suggest:
        """Load the pattern table, word list and common suffixes from files."""
        patterns = json.loads(Path(patterns_path).read_text(encoding="utf-8"))
        words_text = Path(words_path).read_text(encoding="utf-8")
        common = json.loads(Path(common_path).read_text(encoding="utf-8"))
        return cls(patterns, (line.strip() for line in words_text.splitlines()), common)

    @classmethod
    def from_directory(cls, path: str | PathLike[str]) -> Suggest:
        """Load the standard data files from one directory."""
        base = Path(path)
        return cls.from_files(base / PATTERNS_FILE, base / WORDS_FILE, base / COMMON_FILE)

    def _patterns_for(self, key: str) -> list[str]:
        try:
            return self._patterns[key]
        except KeyError:
            raise ValueError(f"no pattern for {key!r}") from None

    def _with_suffixes(self, nodes: list[TrieNode]) -> list[TrieNode]:
        extra = [
            found
            for node in nodes
            for suffix in self._common_suffixes
            if (found := node.get_matching_node(suffix)) is not None
        ]
        return nodes + extra

    def suggest(self, text: str) -> list[str]:
        """Return the distinct dictionary words matching ``text``, sorted."""
        text = fix_string(text)
        trie = self._patterns_trie

        matched, remaining, _ = trie.match_longest_common_prefix(text)
        nodes = [
            node
            for pattern in self._patterns_for(matched)
            if (node := self._words.matching_node(pattern)) is not None
        ]
        nodes = self._with_suffixes(nodes)

        while remaining:
            matched, rest, complete = trie.match_longest_common_prefix(remaining)
            if complete:
                remaining = rest
            else:
                for cut in range(len(remaining) - 1, 0, -1):
                    matched, _, complete = trie.match_longest_common_prefix(remaining[:cut])
                    if complete:
                        remaining = remaining[cut:]
                        break
                else:
                    raise ValueError(f"no pattern matches {remaining!r}")

            patterns = self._patterns_for(matched)
            nodes = [
                found
                for node in nodes
                for pattern in patterns
                if (found := node.get_matching_node(pattern)) is not None
            ]
            nodes = self._with_suffixes(nodes)

        return sorted({node.word for node in nodes if node.word is not None})