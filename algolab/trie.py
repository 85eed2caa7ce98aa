"""Prefix tree over lower-case ASCII words with prefix counts and completion."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(slots=True)
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    is_word: bool = False
    word_count: int = 0


def _is_lowercase_ascii(text: str) -> bool:
    return all("a" <= ch <= "z" for ch in text)


class Trie:
    """Trie of words made of the letters a to z."""

    def __init__(self) -> None:
        self._root = _TrieNode()
        self._total_words = 0

    def insert(self, word: str) -> None:
        """Add ``word``; every node on its path counts the insertion."""
        if not _is_lowercase_ascii(word):
            raise ValueError(f"only lower-case letters a-z are allowed: {word!r}")
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
            node.word_count += 1
        if not node.is_word:
            node.is_word = True
            self._total_words += 1

    def _walk(self, prefix: str) -> _TrieNode | None:
        if not _is_lowercase_ascii(prefix):
            return None
        node = self._root
        for ch in prefix:
            child = node.children.get(ch)
            if child is None:
                return None
            node = child
        return node

    def search(self, word: str) -> bool:
        """Return True when ``word`` was inserted as a whole word."""
        node = self._walk(word)
        return node is not None and node.is_word

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    def count_prefix(self, prefix: str) -> int:
        """Return how many insertions passed through the node for ``prefix``."""
        node = self._walk(prefix)
        return 0 if node is None else node.word_count

    def autocomplete(self, prefix: str) -> list[str]:
        """Return the stored words starting with ``prefix`` in alphabetical order."""
        node = self._walk(prefix)
        if node is None:
            return []

        def _words(current: _TrieNode, text: str) -> Iterator[str]:
            if current.is_word:
                yield text
            for ch in sorted(current.children):
                yield from _words(current.children[ch], text + ch)

        return list(_words(node, prefix))

    def __len__(self) -> int:
        return self._total_words