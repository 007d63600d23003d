import argparse
import sys
import time
from colorama import Fore

import utils
from utils import log_with_time, vlog
import completion_cache
from completion_cache import cached_complete, print_cache_summary
from dictionary import load_trie
from trie import PrefixTrie, DictionaryLoadError


def format_completions(prefix, completions):
    return f"{prefix}: [{', '.join(completions)}]"


def _build_parser():
    parser = argparse.ArgumentParser(description="Dictionary autocompletion")
    parser.add_argument("prefixes", nargs="*", help="Prefixes to complete")
    parser.add_argument("--dict", dest="dict_path", type=str, default=None,
                        help=f"Path to a word list, one word per line (default: {utils.DEFAULT_DICT_PATH})")
    parser.add_argument("--url", type=str, default=None, help="Download the word list from this URL instead")
    parser.add_argument("-n", "--max-results", type=int, default=utils.DEFAULT_MAX_RESULTS,
                        help=f"Maximum completions per prefix (default: {utils.DEFAULT_MAX_RESULTS})")
    parser.add_argument("--add", action="append", default=[], metavar="WORD",
                        help="Insert WORD after loading (repeatable)")
    parser.add_argument("--check", action="append", default=[], metavar="WORD",
                        help="Report whether WORD is in the dictionary (repeatable)")
    parser.add_argument("--interactive", action="store_true", help="Read prefixes from stdin until EOF or a blank line")
    parser.add_argument("--no-cache", action="store_true", help="Disable completion caching")
    parser.add_argument("--allow-empty", action="store_true",
                        help="Continue with a partial or empty dictionary if loading fails")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser


def _load(args):
    try:
        return load_trie(path=args.dict_path, url=args.url)
    except DictionaryLoadError as e:
        log_with_time(f"Dictionary load failed: {e}", color=Fore.RED)
        if not args.allow_empty:
            return None
        trie = e.partial_trie if e.partial_trie is not None else PrefixTrie.new()
        log_with_time(f"Continuing with {trie.word_count()} words", color=Fore.YELLOW)
        return trie


def _complete_and_print(trie, prefix, max_results):
    t0 = time.time()
    completions = cached_complete(trie, prefix, max_results)
    print(format_completions(prefix, completions))
    vlog(f"Completed {prefix!r}", t0)


def run_autocomplete(argv=None):
    args = _build_parser().parse_args(argv)

    utils.start_time = time.time()
    utils.VERBOSE = args.verbose
    completion_cache.CACHE_DISABLED = args.no_cache

    trie = _load(args)
    if trie is None:
        return 1

    for word in args.add:
        try:
            added = trie.insert(word)
        except ValueError as e:
            log_with_time(f"Skipping {word!r}: {e}", color=Fore.YELLOW)
            continue
        vlog(f"{'Added' if added else 'Already present'}: {word.lower()}")

    for prefix in args.prefixes:
        _complete_and_print(trie, prefix, args.max_results)

    for word in args.check:
        print(f"{word}: {trie.contains(word)}")

    if args.interactive:
        for line in sys.stdin:
            prefix = line.strip()
            if not prefix:
                break
            _complete_and_print(trie, prefix, args.max_results)

    if utils.VERBOSE and not args.no_cache:
        print_cache_summary()
    return 0
