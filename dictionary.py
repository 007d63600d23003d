# dictionary.py
# Word sources for bulk-loading a PrefixTrie: local files and remote word lists.

import time
import requests
from colorama import Fore

import utils
from utils import log_with_time, vlog
from trie import PrefixTrie, DictionaryLoadError

__all__ = ["DictionaryLoadError", "read_word_file", "fetch_word_list", "load_trie"]


def read_word_file(path):
    """Yield the lines of a UTF-8 word file, one candidate word per line.
    A leading byte-order mark is dropped.

    Open and read errors are raised as DictionaryLoadError when the generator
    is consumed.
    """
    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            for line in f:
                yield line
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryLoadError(path, e) from e


def fetch_word_list(url, timeout=None):
    """Download a line-oriented word list and return its lines."""
    if timeout is None:
        timeout = utils.DICT_TIMEOUT
    t0 = time.time()
    log_with_time("⟳ Downloading dictionary…")
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise DictionaryLoadError(url, e) from e
    lines = resp.text.splitlines()
    vlog(f"Downloaded {len(lines)} lines from {url}", t0)
    return lines


def load_trie(path=None, url=None):
    """
    Build a PrefixTrie from ``path``, else ``url``, else the configured
    defaults (utils.DICT_URL if set, otherwise utils.DEFAULT_DICT_PATH).
    Raises DictionaryLoadError if the source cannot be read.
    """
    t0 = time.time()
    if path is None and url is None:
        url = utils.DICT_URL
        if url is None:
            path = utils.DEFAULT_DICT_PATH

    if path is not None:
        source, name = read_word_file(path), path
    else:
        source, name = fetch_word_list(url), url

    trie = PrefixTrie.from_word_source(source, name=name)
    vlog(f"Dictionary loaded from {name} ({trie.node_count()} nodes)", t0)
    log_with_time(f"✅ {trie.word_count()} words", color=Fore.GREEN)
    return trie
