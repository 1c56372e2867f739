"""A character trie that stores complete words at their terminal nodes."""

from __future__ import annotations

from collections.abc import Iterable


class TrieNode:
    """A node in a :class:`Trie`; ``word`` is set when a stored word ends here."""

    __slots__ = ("children", "word")

    def __init__(self) -> None:
        self.children: dict[str, TrieNode] = {}
        self.word: str | None = None

    def __repr__(self) -> str:
        return f"TrieNode(word={self.word!r}, children={sorted(self.children)!r})"

    def is_complete_word(self) -> bool:
        """Return True if a stored word ends at this node."""
        return self.word is not None

    def _sorted_children(self) -> list[TrieNode]:
        return [self.children[ch] for ch in sorted(self.children)]

    def find_complete_words(self) -> list[str]:
        """Return every word stored below this node, depth first in character order."""
        words: list[str] = []
        for node in self._sorted_children():
            if node.word is not None:
                words.append(node.word)
            words.extend(node.find_complete_words())
        return words

    def get_matching_node(self, word: str) -> TrieNode | None:
        """Follow ``word`` from this node and return where it ends, or None."""
        node = self
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                return None
            node = child
        return node


class Trie:
    """A prefix tree over strings."""

    def __init__(self) -> None:
        self.root = TrieNode()

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self.root
        for ch in word:
            node = node.children.setdefault(ch, TrieNode())
        node.word = word

    @classmethod
    def from_strings(cls, words: Iterable[str]) -> Trie:
        """Build a trie holding every string in ``words``."""
        trie = cls()
        for word in words:
            trie.insert(word)
        return trie

    def matching_node(self, word: str) -> TrieNode | None:
        """Return the node reached by following ``word`` from the root, or None."""
        return self.root.get_matching_node(word)

    def longest_prefix(self, word: str) -> tuple[TrieNode, int]:
        """Return the deepest node reachable along ``word`` and the prefix length."""
        node = self.root
        length = 0
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                break
            node = child
            length += 1
        return node, length

    def match_prefix(self, prefix: str) -> list[str]:
        """Return the stored words under the longest matched part of ``prefix``."""
        if not prefix:
            return []
        node, length = self.longest_prefix(prefix)
        if length == 0:
            return []
        result = node.find_complete_words()
        if node.word is not None:
            result.append(node.word)
        return result

    def match_longest_common_prefix(self, prefix: str) -> tuple[str, str, bool]:
        """Split ``prefix`` into its longest path in the trie and the rest.

        The flag tells whether the matched part ends on a stored word.
        """
        if not prefix:
            return "", "", False
        node, length = self.longest_prefix(prefix)
        return prefix[:length], prefix[length:], node.word is not None