"""Small container types: LRU cache, min stack, tries and a k-th largest tracker."""

from __future__ import annotations

import heapq
from collections import OrderedDict
from collections.abc import Iterable
from dataclasses import dataclass, field


class LRUCache:
    """A fixed-capacity map that evicts the least recently used key."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: OrderedDict[int, int] = OrderedDict()

    def __len__(self) -> int:
        return len(self._items)

    def get(self, key: int) -> int:
        """Return the value for ``key`` and mark it recently used, or -1 if absent."""
        if key not in self._items:
            return -1
        self._items.move_to_end(key)
        return self._items[key]

    def put(self, key: int, value: int) -> None:
        """Store ``value`` under ``key``, evicting the oldest entry when full."""
        if key in self._items:
            self._items.move_to_end(key)
        elif len(self._items) >= self.capacity:
            self._items.popitem(last=False)
        self._items[key] = value


class MinStack:
    """A stack that also reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._entries: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, val: int) -> None:
        """Push ``val``."""
        smallest = min(val, self._entries[-1][1]) if self._entries else val
        self._entries.append((val, smallest))

    def pop(self) -> None:
        """Remove the top element."""
        if not self._entries:
            raise IndexError("pop from empty stack")
        self._entries.pop()

    def top(self) -> int:
        """Return the top element."""
        if not self._entries:
            raise IndexError("top of empty stack")
        return self._entries[-1][0]

    def get_min(self) -> int:
        """Return the smallest element on the stack."""
        if not self._entries:
            raise IndexError("minimum of empty stack")
        return self._entries[-1][1]


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    is_word: bool = False


def _insert(root: _TrieNode, word: str) -> None:
    node = root
    for ch in word:
        node = node.children.setdefault(ch, _TrieNode())
    node.is_word = True


def _walk(root: _TrieNode, text: str) -> _TrieNode | None:
    node: _TrieNode | None = root
    for ch in text:
        node = node.children.get(ch)
        if node is None:
            return None
    return node


class Trie:
    """A prefix tree of words."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, word: str) -> None:
        """Add ``word``."""
        _insert(self._root, word)

    def search(self, word: str) -> bool:
        """Return whether ``word`` was inserted."""
        node = _walk(self._root, word)
        return node is not None and node.is_word

    def starts_with(self, prefix: str) -> bool:
        """Return whether some inserted word begins with ``prefix``."""
        return _walk(self._root, prefix) is not None


class WordDictionary:
    """A set of words searchable with ``.`` standing for any one letter."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def add_word(self, word: str) -> None:
        """Add ``word``."""
        _insert(self._root, word)

    def search(self, word: str) -> bool:
        """Return whether some added word matches the pattern ``word``."""
        return self._matches(self._root, word, 0)

    def _matches(self, node: _TrieNode, word: str, start: int) -> bool:
        for i in range(start, len(word)):
            ch = word[i]
            if ch == ".":
                return any(
                    self._matches(child, word, i + 1)
                    for child in node.children.values()
                )
            child = node.children.get(ch)
            if child is None:
                return False
            node = child
        return node.is_word


class KthLargest:
    """Tracks the k-th largest value of a growing collection."""

    def __init__(self, k: int, nums: Iterable[int]) -> None:
        if k < 1:
            raise ValueError("k must be at least 1")
        self.k = k
        self._heap = list(nums)
        heapq.heapify(self._heap)
        while len(self._heap) > k:
            heapq.heappop(self._heap)

    def add(self, val: int) -> int:
        """Add ``val`` and return the k-th largest value seen so far.

        While fewer than ``k`` values are known, the smallest of them is returned.
        """
        heapq.heappush(self._heap, val)
        if len(self._heap) > self.k:
            heapq.heappop(self._heap)
        return self._heap[0]