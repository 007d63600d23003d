# trie.py
# Prefix trie for dictionary membership and autocompletion.
# Nodes live in a flat list and refer to children by index; node 0 is the root.

import itertools
from collections import deque
from typing import Dict, Iterable, List, Optional, Tuple


class DictionaryLoadError(Exception):
    """Raised when a word source cannot be opened or read.

    ``partial_trie`` holds whatever was inserted before the failure (or None
    if nothing was built yet). The caller decides whether to keep it.
    """

    def __init__(self, source, cause=None, partial_trie=None):
        self.source = source
        self.cause = cause
        self.partial_trie = partial_trie
        msg = f"could not load dictionary from {source}"
        if cause is not None:
            msg += f": {cause}"
        super().__init__(msg)


def canonicalize(word: str) -> str:
    """Lower-case ``word``; every trie operation compares this form only."""
    return word.lower()


class TrieNode:
    __slots__ = ("label", "children", "is_terminal")

    def __init__(self, label: str = ""):
        self.label = label
        # char -> index of the child node in the owning trie's arena
        self.children: Dict[str, int] = {}
        self.is_terminal = False

    def __repr__(self):
        return f"TrieNode({self.label!r}, terminal={self.is_terminal}, children={len(self.children)})"


class PrefixTrie:
    """
    Unweighted prefix trie with the API we want:
      - PrefixTrie.new() / PrefixTrie.from_word_source(lines)
      - insert(word) -> bool          (True if the word is new)
      - contains(word) -> bool        (complete words only, not bare prefixes)
      - has_prefix(prefix) -> bool
      - complete(prefix, max_results) -> List[str]   (breadth-first order)
      - word_count() -> int
    All input is lower-cased first. Children are visited in the order their
    edges were created, so completion results are reproducible.
    """

    __slots__ = ("_nodes", "_word_count", "_serial")

    _serials = itertools.count()

    def __init__(self, words: Optional[Iterable[str]] = None):
        self._nodes: List[TrieNode] = [TrieNode("")]  # root at 0
        self._word_count = 0
        self._serial = next(PrefixTrie._serials)
        if words is not None:
            for w in words:
                self.insert(w)

    # ---------- Construction ----------
    @classmethod
    def new(cls) -> "PrefixTrie":
        return cls()

    @classmethod
    def from_word_source(cls, source: Iterable[str], name: Optional[str] = None) -> "PrefixTrie":
        """
        Build a trie from an iterable of text lines, one word per line.
        Surrounding whitespace is stripped and blank lines are skipped.

        Read failures surface as DictionaryLoadError; the words inserted
        before the failure stay in ``error.partial_trie``.
        """
        trie = cls()
        try:
            for line in source:
                word = line.strip()
                if word:
                    trie.insert(word)
        except DictionaryLoadError as e:
            if e.partial_trie is None:
                e.partial_trie = trie
            raise
        except (OSError, UnicodeDecodeError) as e:
            raise DictionaryLoadError(name or repr(source), e, partial_trie=trie) from e
        return trie

    # ---------- Public API ----------
    def insert(self, word: str) -> bool:
        """Add ``word``. Returns True if it was not already a word, False for a duplicate."""
        word = canonicalize(word)
        if not word:
            raise ValueError("cannot insert an empty word")
        nodes = self._nodes
        cur = nodes[0]
        for ch in word:
            nxt = cur.children.get(ch)
            if nxt is None:
                nodes.append(TrieNode(cur.label + ch))
                nxt = len(nodes) - 1
                cur.children[ch] = nxt
            cur = nodes[nxt]
        if cur.is_terminal:
            return False
        cur.is_terminal = True
        self._word_count += 1
        return True

    def contains(self, word: str) -> bool:
        """True if ``word`` was inserted as a word (a bare prefix does not count)."""
        idx = self._walk(canonicalize(word))
        return idx is not None and self._nodes[idx].is_terminal

    def has_prefix(self, prefix: str) -> bool:
        """True if some stored word starts with ``prefix`` (the empty string always does)."""
        return self._walk(canonicalize(prefix)) is not None

    def complete(self, prefix: str, max_results: int) -> List[str]:
        """
        Up to ``max_results`` stored words starting with ``prefix``, shortest first.

        Walks the subtree under the prefix node level by level and emits each
        terminal node as it is dequeued. Expansion stops as soon as the bound
        is reached. An absent prefix or a non-positive bound gives [].
        """
        if max_results <= 0:
            return []
        idx = self._walk(canonicalize(prefix))
        if idx is None:
            return []

        nodes = self._nodes
        completions: List[str] = []
        queue = deque([idx])
        while queue:
            node = nodes[queue.popleft()]
            if node.is_terminal:
                completions.append(node.label)
                if len(completions) >= max_results:
                    break
            queue.extend(node.children.values())
        return completions

    def word_count(self) -> int:
        return self._word_count

    def node_count(self) -> int:
        """Number of nodes including the root."""
        return len(self._nodes)

    def state_key(self) -> Tuple[int, int, int]:
        # Unique per trie instance; append-only, so any insert that adds a
        # word or a node changes the key.
        return self._serial, len(self._nodes), self._word_count

    def __len__(self):
        return self._word_count

    def __contains__(self, word):
        return isinstance(word, str) and self.contains(word)

    def __repr__(self):
        return f"PrefixTrie(words={self._word_count}, nodes={len(self._nodes)})"

    # ---------- Helpers ----------
    def _walk(self, s: str) -> Optional[int]:
        """Return node index after consuming s, or None if no such path."""
        idx = 0
        nodes = self._nodes
        for ch in s:
            nxt = nodes[idx].children.get(ch)
            if nxt is None:
                return None
            idx = nxt
        return idx
