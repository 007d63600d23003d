from collections import OrderedDict

from trie import canonicalize

_actual_hits = 0
_actual_misses = 0
CACHE_DISABLED = False

# LRU cache using OrderedDict
MAX_CACHE_SIZE = 50000
class LRUCache(OrderedDict):
    def __init__(self, maxsize=MAX_CACHE_SIZE, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.maxsize = maxsize
    def __getitem__(self, key):
        value = super().__getitem__(key)
        self.move_to_end(key)
        return value
    def __setitem__(self, key, value):
        if key in self:
            self.move_to_end(key)
        super().__setitem__(key, value)
        if len(self) > self.maxsize:
            oldest = next(iter(self))
            del self[oldest]


def _default_cache():
    cache = getattr(cached_complete, "_cache", None)
    if cache is None:
        cache = LRUCache(MAX_CACHE_SIZE)
        cached_complete._cache = cache
    return cache


def cached_complete(trie, prefix, max_results, cache=None):
    """Compute or retrieve ``trie.complete(prefix, max_results)``.

    Entries are keyed on the trie's state key, so anything cached before an
    insert that changed the trie is simply never hit again. Returns a new list
    each time. When CACHE_DISABLED is True, always recomputes without touching
    cache counters.
    """
    global _actual_hits, _actual_misses

    if CACHE_DISABLED or max_results <= 0:
        return trie.complete(prefix, max_results)

    if cache is None:
        cache = _default_cache()

    key = (trie.state_key(), canonicalize(prefix), max_results)
    if key in cache:
        _actual_hits += 1
        return list(cache[key])

    _actual_misses += 1
    val = trie.complete(prefix, max_results)
    cache[key] = tuple(val)
    return val


def cache_stats():
    return _actual_hits, _actual_misses


def reset_cache():
    global _actual_hits, _actual_misses
    _actual_hits = 0
    _actual_misses = 0
    cache = getattr(cached_complete, "_cache", None)
    if cache is not None:
        cache.clear()


def print_cache_summary():
    cache = getattr(cached_complete, "_cache", None)
    print(f"[CACHE SUMMARY] Cached completions: {len(cache) if cache is not None else 0}")
    print(f"[CACHE SUMMARY] Actual cache hits: {_actual_hits}")
    print(f"[CACHE SUMMARY] Actual cache misses: {_actual_misses}")
