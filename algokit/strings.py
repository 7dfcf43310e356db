"""Aho-Corasick automaton, prefix and Z functions, suffix arrays and trees, and cyclic ranks."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class _TrieNode:
    parent: int
    char: object
    nxt: dict = field(default_factory=dict)
    go: dict = field(default_factory=dict)
    link: int = -1
    occ_link: int = -1


class AhoCorasick:
    """Multi-pattern matcher; nodes are identified by integers, the root is 0."""

    def __init__(self):
        root = _TrieNode(0, "")
        root.link = root.occ_link = 0
        self.nodes = [root]

    def add_string(self, s):
        """Insert a pattern and return the node that marks its end."""
        u = 0
        for c in s:
            node = self.nodes[u]
            if c not in node.nxt:
                v = len(self.nodes)
                node.nxt[c] = node.go[c] = v
                child = _TrieNode(u, c)
                if u == 0:
                    child.link = 0
                self.nodes.append(child)
            u = node.nxt[c]
        self.nodes[u].occ_link = u
        return u

    def get_link(self, u):
        """Suffix link of node ``u``."""
        nodes = self.nodes
        start = u
        path = []
        while nodes[u].link == -1:
            path.append(u)
            u = nodes[u].parent
        for v in reversed(path):
            node = nodes[v]
            node.link = self.go(nodes[node.parent].link, node.char)
        return nodes[start].link

    def go(self, u, c):
        """Automaton transition from node ``u`` on symbol ``c``."""
        nodes = self.nodes
        chain = []
        while c not in nodes[u].go and u != 0:
            chain.append(u)
            u = self.get_link(u)
        target = nodes[u].go.setdefault(c, 0)
        for w in chain:
            nodes[w].go[c] = target
        return target

    def get_occurrence(self, u):
        """Nearest node on the suffix-link chain of ``u`` (itself included) that ends a pattern."""
        nodes = self.nodes
        chain = []
        while nodes[u].occ_link == -1:
            chain.append(u)
            u = self.get_link(u)
        occ = nodes[u].occ_link
        for w in chain:
            nodes[w].occ_link = occ
        return occ

    def occurrences(self, text):
        """Yield ``(i, node)`` for every pattern ending at position ``i`` of ``text``."""
        u = 0
        for i, c in enumerate(text):
            u = self.go(u, c)
            v = self.get_occurrence(u)
            while v != 0:
                yield i, v
                v = self.get_occurrence(self.get_link(v))


def prefix_function(s):
    """``p[k]`` is the length of the longest proper border of ``s[:k]``; ``len(p) == len(s) + 1``."""
    n = len(s)
    p = [0] * (n + 1)
    for length in range(2, n + 1):
        x = p[length - 1]
        while x and s[length - 1] != s[x]:
            x = p[x]
        if s[length - 1] == s[x]:
            x += 1
        p[length] = x
    return p


def z_function(p):
    """Z-function of a string given its prefix function."""
    n = len(p) - 1
    if n <= 0:
        return []
    z = [0] * n
    for length in range(1, n + 1):
        if p[length]:
            z[length - p[length]] = p[length]
    z[0] = n
    last = 1
    for i in range(1, n):
        if i + z[i] > last + z[last]:
            last = i
        z[i] = min(z[i - last], last + z[last] - i)
    return z


def _classes(order, key):
    cls = [0] * len(order)
    for a, b in zip(order, order[1:]):
        cls[b] = cls[a] + (key(a) != key(b))
    return cls


def _doubling(s):
    """Yield the order and equivalence classes of cyclic substrings of lengths 1, 2, 4, ..."""
    n = len(s)
    order = sorted(range(n), key=s.__getitem__)
    cls = _classes(order, s.__getitem__)
    yield order, cls
    shift = 1
    while shift < n:

        def key(i, cls=cls, shift=shift):
            return cls[i], cls[(i + shift) % n]

        order = sorted(order, key=key)
        cls = _classes(order, key)
        yield order, cls
        shift *= 2


def sort_cyclic_shifts(s):
    """Starting positions of the cyclic shifts of ``s`` in sorted order."""
    order = []
    for order, _ in _doubling(s):
        pass
    return order


class SuffixArray:
    """Suffix array with LCP array; a sentinel smaller than every symbol is appended.

    Strings are compared by code point; other sequences must hold non-negative integers.
    """

    def __init__(self, s):
        codes = [ord(c) for c in s] if isinstance(s, str) else list(s)
        codes.append(-1)
        self.n = n = len(codes)
        self.p = p = sort_cyclic_shifts(codes)
        self.pos = pos = [0] * n
        for rank, i in enumerate(p):
            pos[i] = rank
        self.lcp = lcp = [0] * n
        k = 0
        for i in range(n - 1):
            if pos[i] == n - 1:
                k = 0
                continue
            j = p[pos[i] + 1]
            while max(i, j) + k < n and codes[i + k] == codes[j + k]:
                k += 1
            lcp[pos[i]] = k
            k = max(0, k - 1)

    def lcp_query(self, i, j, rmq):
        """Longest common prefix of the suffixes at ``i`` and ``j``; ``rmq`` answers ``[l, r)`` minima of ``lcp``."""
        if i == j:
            return self.n - i - 1
        a, b = sorted((self.pos[i], self.pos[j]))
        return rmq.query(a, b)


@dataclass
class SuffixTreeNode:
    """Node of a suffix tree: label length, a start position of the label, and the parent."""

    length: int
    idx: int
    link: int = -1


def build_suffix_tree(p, lcp):
    """Suffix tree from a suffix array and its LCP array; nodes are sorted by label length."""
    nodes = []
    stack = []

    def create(length, idx):
        stack.append(len(nodes))
        nodes.append(SuffixTreeNode(length, idx))

    create(0, -1)
    n = len(p)
    for i in range(1, n):
        for length in (n - 1 - p[i], lcp[i]):
            l = p[i]
            while nodes[stack[-1]].length > length:
                v = stack.pop()
                l = nodes[v].idx
                if length > nodes[stack[-1]].length:
                    create(length, l)
                nodes[v].link = stack[-1]
            if length > nodes[stack[-1]].length:
                create(length, l)

    order = sorted(range(len(nodes)), key=lambda u: nodes[u].length)
    label = {u: j for j, u in enumerate(order)}
    relabeled = [SuffixTreeNode(nodes[u].length, nodes[u].idx, nodes[u].link) for u in order]
    for node in relabeled[1:]:
        if node.link != -1:
            node.link = label[node.link]
    return relabeled


class DBF:
    """Ranks of cyclic substrings of power-of-two lengths (doubling table)."""

    def __init__(self, s):
        self.s = s
        self.n = n = len(s)
        self.log = [0] * (n + 1)
        for x in range(2, n + 1):
            self.log[x] = 1 + self.log[x >> 1]
        self.p = []
        self.rank = []
        for order, cls in _doubling(s):
            self.p.append(order)
            self.rank.append(cls)
        self.k = len(self.rank)

    def key(self, i, length):
        """Comparable key of the cyclic substring of ``length`` symbols starting at ``i``."""
        if length == 0:
            return (-1, -1)
        k = self.log[length]
        return self.rank[k][i], self.rank[k][(i + length - (1 << k)) % self.n]

    def compare(self, s, t):
        """True when substring ``s = (start, end)`` is less than substring ``t``."""
        len_s, len_t = s[1] - s[0], t[1] - t[0]
        m = min(len_s, len_t)
        key_s, key_t = self.key(s[0], m), self.key(t[0], m)
        return key_s < key_t if key_s != key_t else len_s < len_t

    def lcp_query(self, i, j):
        """Cyclic lcp of the rotations starting at ``i`` and ``j`` (assumed different)."""
        length = 0
        for k in range(self.k - 1, -1, -1):
            if self.rank[k][i] == self.rank[k][j]:
                step = 1 << k
                length += step
                i = (i + step) % self.n
                j = (j + step) % self.n
        return length