"""Prefix tree used for tab completion."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

COMPLETE_MARKER = " "


@dataclass
class TrieNode:
    children: dict[str, TrieNode] = field(default_factory=dict)
    is_word: bool = False


class Trie:
    """Prefix tree over a fixed vocabulary.

    The tree is built once and only read afterwards, so lookups never
    mutate it and an unknown prefix simply yields no result.
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        self.root = TrieNode()
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        node = self.root
        for char in word:
            node = node.children.setdefault(char, TrieNode())
        node.is_word = True

    def lookup(self, prefix: str) -> TrieNode | None:
        """Return the node reached by walking ``prefix``, or None."""
        node = self.root
        for char in prefix:
            child = node.children.get(char)
            if child is None:
                return None
            node = child
        return node

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        node = self.lookup(word)
        return node is not None and node.is_word

    def unique_completion(self, prefix: str) -> str | None:
        """Return the text that uniquely extends ``prefix``.

        A trailing space is appended once the completed word cannot be
        extended any further. A prefix that already names such a word
        completes to a single space. None means there is no unique
        completion: the prefix is unknown or branches right away.
        """
        start = self.lookup(prefix)
        if start is None:
            return None
        if start.is_word and not start.children:
            return COMPLETE_MARKER

        node = start
        suffix: list[str] = []
        while not node.is_word and len(node.children) == 1:
            (char, child), = node.children.items()
            suffix.append(char)
            node = child
        if node is start:
            return None
        if not node.children:
            suffix.append(COMPLETE_MARKER)
        return "".join(suffix)

    def all_completions(self, prefix: str) -> list[str]:
        """Every vocabulary word starting with ``prefix``."""
        start = self.lookup(prefix)
        if start is None:
            return []
        words: list[str] = []
        stack: list[tuple[TrieNode, str]] = [(start, prefix)]
        while stack:
            node, built = stack.pop()
            if node.is_word:
                words.append(built)
            for char in sorted(node.children, reverse=True):
                stack.append((node.children[char], built + char))
        return words
