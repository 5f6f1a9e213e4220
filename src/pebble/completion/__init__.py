"""Prefix completion over the builtin vocabulary."""

from .trie import Trie, TrieNode

__all__ = ["Trie", "TrieNode"]
