import os
import sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pytest

import completion_cache
from completion_cache import LRUCache, cached_complete, cache_stats, reset_cache
from trie import PrefixTrie


@pytest.fixture(autouse=True)
def fresh_cache(monkeypatch):
    monkeypatch.setattr(completion_cache, "CACHE_DISABLED", False)
    reset_cache()
    yield
    reset_cache()


def test_lru_cache_evicts_oldest():
    cache = LRUCache(maxsize=2)
    cache["a"] = 1
    cache["b"] = 2
    assert cache["a"] == 1  # touch "a" so "b" is oldest
    cache["c"] = 3
    assert "b" not in cache
    assert set(cache) == {"a", "c"}


def test_cached_complete_matches_trie():
    trie = PrefixTrie(["hello", "help", "helm"])
    first = cached_complete(trie, "hel", 10)
    second = cached_complete(trie, "HEL", 10)
    assert first == second == trie.complete("hel", 10)
    assert cache_stats() == (1, 1)


def test_cached_result_cannot_be_mutated():
    trie = PrefixTrie(["hello", "help"])
    result = cached_complete(trie, "hel", 10)
    result.append("bogus")
    assert cached_complete(trie, "hel", 10) == ["help", "hello"]


def test_insert_invalidates_entries():
    trie = PrefixTrie(["hello"])
    assert cached_complete(trie, "hel", 10) == ["hello"]
    trie.insert("help")
    assert cached_complete(trie, "hel", 10) == ["help", "hello"]
    assert cache_stats() == (0, 2)


def test_separate_tries_do_not_share_entries():
    a = PrefixTrie(["cat"])
    b = PrefixTrie(["cow"])
    assert cached_complete(a, "c", 5) == ["cat"]
    assert cached_complete(b, "c", 5) == ["cow"]


def test_cache_disabled(monkeypatch):
    monkeypatch.setattr(completion_cache, "CACHE_DISABLED", True)
    trie = PrefixTrie(["cat"])
    cached_complete(trie, "c", 5)
    cached_complete(trie, "c", 5)
    assert cache_stats() == (0, 0)


def test_explicit_cache_and_non_positive_bound():
    cache = LRUCache(maxsize=10)
    trie = PrefixTrie(["cat"])
    assert cached_complete(trie, "c", 0, cache=cache) == []
    assert cached_complete(trie, "c", 1, cache=cache) == ["cat"]
    assert len(cache) == 1


def test_print_cache_summary(capsys):
    trie = PrefixTrie(["cat"])
    cached_complete(trie, "c", 5)
    cached_complete(trie, "c", 5)
    completion_cache.print_cache_summary()
    out = capsys.readouterr().out
    assert "Cached completions: 1" in out
    assert "Actual cache hits: 1" in out
    assert "Actual cache misses: 1" in out
