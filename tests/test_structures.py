import random

import pytest

from algokit.structures import KthLargest, LRUCache, MinStack, Trie, WordDictionary


def test_lru_cache_evicts_least_recently_used():
    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    assert cache.get(1) == 1
    cache.put(3, 3)
    assert cache.get(2) == -1
    cache.put(4, 4)
    assert cache.get(1) == -1
    assert cache.get(3) == 3
    assert cache.get(4) == 4


def test_lru_cache_update_does_not_evict():
    cache = LRUCache(2)
    cache.put(1, 10)
    cache.put(2, 20)
    cache.put(1, 11)
    assert len(cache) == 2
    assert cache.get(1) == 11
    assert cache.get(2) == 20


def test_lru_cache_update_refreshes_recency():
    cache = LRUCache(2)
    cache.put(1, 10)
    cache.put(2, 20)
    cache.put(1, 11)
    cache.put(3, 30)
    assert cache.get(2) == -1
    assert cache.get(1) == 11


def test_lru_cache_never_exceeds_capacity():
    cache = LRUCache(3)
    for key in range(10):
        cache.put(key, key * 2)
        assert len(cache) <= 3
    assert [cache.get(key) for key in (7, 8, 9)] == [14, 16, 18]


def test_lru_cache_rejects_zero_capacity():
    with pytest.raises(ValueError):
        LRUCache(0)


def test_min_stack_example():
    stack = MinStack()
    stack.push(-2)
    stack.push(0)
    stack.push(-3)
    assert stack.get_min() == -3
    stack.pop()
    assert stack.top() == 0
    assert stack.get_min() == -2


def test_min_stack_tracks_minimum_of_contents():
    rng = random.Random(7)
    stack = MinStack()
    first = rng.randint(-50, 50)
    stack.push(first)
    shadow = [first]
    for _ in range(200):
        if len(shadow) > 1 and rng.random() < 0.4:
            stack.pop()
            shadow.pop()
        else:
            value = rng.randint(-50, 50)
            stack.push(value)
            shadow.append(value)
        assert stack.get_min() == min(shadow)
        assert stack.top() == shadow[-1]
    assert len(stack) == len(shadow)


def test_min_stack_duplicate_minimum_survives_pop():
    stack = MinStack()
    stack.push(1)
    stack.push(1)
    stack.pop()
    assert stack.get_min() == 1


@pytest.mark.parametrize("method", ["pop", "top", "get_min"])
def test_min_stack_empty_raises(method):
    with pytest.raises(IndexError):
        getattr(MinStack(), method)()


def test_trie_example():
    trie = Trie()
    trie.insert("apple")
    assert trie.search("apple") is True
    assert trie.search("app") is False
    assert trie.starts_with("app") is True
    trie.insert("app")
    assert trie.search("app") is True


def test_trie_missing_prefix():
    trie = Trie()
    trie.insert("hello")
    assert trie.starts_with("help") is False
    assert trie.search("hellos") is False


def test_trie_empty_prefix_always_matches():
    trie = Trie()
    assert trie.starts_with("") is True
    assert trie.search("") is False


def test_trie_every_prefix_of_inserted_word():
    trie = Trie()
    word = "interstellar"
    trie.insert(word)
    assert all(trie.starts_with(word[:i]) for i in range(len(word) + 1))
    assert [trie.search(word[:i]) for i in range(len(word) + 1)].count(True) == 1


def test_word_dictionary_example():
    words = WordDictionary()
    for word in ("bad", "dad", "mad"):
        words.add_word(word)
    assert words.search("pad") is False
    assert words.search("bad") is True
    assert words.search(".ad") is True
    assert words.search("b..") is True


def test_word_dictionary_wildcards_respect_length():
    words = WordDictionary()
    words.add_word("abc")
    assert words.search("...") is True
    assert words.search("..") is False
    assert words.search("....") is False
    assert words.search("") is False


def test_word_dictionary_wildcard_backtracks():
    words = WordDictionary()
    words.add_word("ax")
    words.add_word("by")
    assert words.search(".y") is True
    assert words.search(".z") is False


def test_kth_largest_example():
    tracker = KthLargest(3, [4, 5, 8, 2])
    assert [tracker.add(v) for v in (3, 5, 10, 9, 4)] == [4, 5, 5, 8, 8]


def test_kth_largest_matches_sorted_order():
    rng = random.Random(3)
    k = 4
    seen = [rng.randint(0, 100) for _ in range(6)]
    tracker = KthLargest(k, seen)
    for _ in range(50):
        value = rng.randint(-20, 120)
        seen.append(value)
        assert tracker.add(value) == sorted(seen, reverse=True)[k - 1]


def test_kth_largest_with_too_few_values_returns_smallest():
    tracker = KthLargest(3, [])
    assert tracker.add(7) == 7
    assert tracker.add(2) == 2
    assert tracker.add(9) == 2
    assert tracker.add(8) == 7


def test_kth_largest_rejects_non_positive_k():
    with pytest.raises(ValueError):
        KthLargest(0, [1, 2])