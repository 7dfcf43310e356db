"""Disjoint sets, Fenwick and segment trees, sparse tables, monoid queues and Li Chao trees."""

from __future__ import annotations


class DSU:
    """Disjoint-set union with union by rank and path compression."""

    def __init__(self, n):
        self.parent = list(range(n))
        self.rank = [0] * n

    def find(self, u):
        root = u
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[u] != root:
            self.parent[u], u = root, self.parent[u]
        return root

    def unite(self, u, v):
        """Merge the sets of ``u`` and ``v``; return False if they were already one."""
        u, v = self.find(u), self.find(v)
        if u == v:
            return False
        if self.rank[u] < self.rank[v]:
            u, v = v, u
        self.parent[v] = u
        if self.rank[u] == self.rank[v]:
            self.rank[u] += 1
        return True


class FenwickTree:
    """Prefix sums over ``n`` positions with point updates."""

    def __init__(self, n):
        self.n = n
        self._h = n.bit_length() - 1
        self._ft = [0] * (n + 1)

    @classmethod
    def from_iterable(cls, values):
        values = list(values)
        tree = cls(len(values))
        ft = tree._ft
        for i, v in enumerate(values, 1):
            ft[i] = v + ft[i - 1]
        for i in range(tree.n, 0, -1):
            ft[i] = ft[i] - ft[i - (i & -i)]
        return tree

    def query(self, p):
        """Sum of the first ``p`` values."""
        res = 0
        while p >= 1:
            res = res + self._ft[p]
            p -= p & -p
        return res

    def range_query(self, l, r):
        """Sum of the values at positions ``l`` to ``r - 1``."""
        return self.query(r) - self.query(l)

    def update(self, p, value):
        """Add ``value`` at position ``p``."""
        p += 1
        while p <= self.n:
            self._ft[p] = self._ft[p] + value
            p += p & -p

    def find_right(self, pred):
        """Largest ``r`` with ``pred(query(r))`` true, for a monotone predicate."""
        prefix = 0
        pos = 0
        for x in range(self._h, -1, -1):
            npos = pos + (1 << x)
            if npos > self.n:
                continue
            nprefix = prefix + self._ft[npos]
            if pred(nprefix):
                pos = npos
                prefix = nprefix
        return pos

    def lower_bound(self, value):
        return self.find_right(lambda x: x < value)


class SegmentTree:
    """Point updates and range products of a monoid under ``+``."""

    def __init__(self, values, identity=0):
        values = list(values)
        self.n = n = len(values)
        self.identity = identity
        self._st = [identity] * n + values
        st = self._st
        for p in range(n - 1, 0, -1):
            st[p] = st[2 * p] + st[2 * p + 1]

    def modify(self, p, value):
        st = self._st
        p += self.n
        st[p] = value
        while p > 1:
            p >>= 1
            st[p] = st[2 * p] + st[2 * p + 1]

    def query(self, l, r):
        """Ordered product of the values at positions ``l`` to ``r - 1``."""
        st = self._st
        resl = resr = self.identity
        l += self.n
        r += self.n
        while l < r:
            if l & 1:
                resl = resl + st[l]
                l += 1
            if r & 1:
                r -= 1
                resr = st[r] + resr
            l >>= 1
            r >>= 1
        return resl + resr


class SparseTable:
    """Static range queries for an idempotent operation."""

    def __init__(self, values, op=min):
        values = list(values)
        self.n = n = len(values)
        self.op = op
        self._log = [0] * (n + 1)
        for x in range(2, n + 1):
            self._log[x] = 1 + self._log[x >> 1]
        self._st = [values]
        levels = self._log[n] if n else 0
        for x in range(levels):
            prev = self._st[-1]
            step = 1 << x
            self._st.append([op(prev[i], prev[i + step]) for i in range(n - 2 * step + 1)])

    def query(self, l, r):
        """Result of the operation over positions ``l`` to ``r - 1``; needs ``l < r``."""
        if l >= r:
            raise ValueError("empty range")
        x = self._log[r - l]
        row = self._st[x]
        return self.op(row[l], row[r - (1 << x)])


def rmq(values):
    """Range minimum table."""
    return SparseTable(values, min)


class MonoidStack:
    """Stack that keeps the product of its elements under ``+``."""

    def __init__(self, identity=0, top_down=False):
        self.identity = identity
        self.top_down = top_down
        self._items = []

    def top(self):
        return self._items[-1][0]

    def result(self):
        """Product bottom-to-top, or top-to-bottom when ``top_down``."""
        return self._items[-1][1] if self._items else self.identity

    def push(self, value):
        acc = value + self.result() if self.top_down else self.result() + value
        self._items.append((value, acc))

    def pop(self):
        return self._items.pop()[0]

    def __len__(self):
        return len(self._items)


class MonoidQueue:
    """Queue that keeps the front-to-back product of its elements under ``+``."""

    def __init__(self, identity=0):
        self._in = MonoidStack(identity, False)
        self._out = MonoidStack(identity, True)

    def _move(self):
        if not self._out:
            while self._in:
                self._out.push(self._in.pop())

    def front(self):
        self._move()
        return self._out.top()

    def result(self):
        return self._out.result() + self._in.result()

    def push(self, value):
        self._in.push(value)

    def pop(self):
        self._move()
        return self._out.pop()

    def __len__(self):
        return len(self._in) + len(self._out)


class _LiChaoNode:
    __slots__ = ("f", "l", "r", "m", "left", "right")

    def __init__(self, l, r):
        self.f = None
        self.l = l
        self.r = r
        self.m = l + (r - l) // 2
        self.left = None
        self.right = None


class LiChaoTree:
    """Lower (or upper) envelope of functions over integer points in ``[lo, hi)``."""

    def __init__(self, lo, hi, minimize=True):
        if lo >= hi:
            raise ValueError("empty domain")
        self.lo = lo
        self.hi = hi
        self.minimize = minimize
        self._root = None

    def _better(self, a, b):
        return a < b if self.minimize else a > b

    def add(self, f):
        """Insert a function; any two must cross at most once on the domain."""
        if self._root is None:
            self._root = _LiChaoNode(self.lo, self.hi)
        p, g = self._root, f
        while True:
            if p.f is None:
                p.f = g
                return
            if self._better(g(p.m), p.f(p.m)):
                p.f, g = g, p.f
            if p.r - p.l <= 1:
                return
            if self._better(g(p.l), p.f(p.l)):
                if p.left is None:
                    p.left = _LiChaoNode(p.l, p.m)
                p = p.left
            elif self._better(g(p.r - 1), p.f(p.r - 1)):
                if p.right is None:
                    p.right = _LiChaoNode(p.m, p.r)
                p = p.right
            else:
                return

    def query(self, x):
        """Best value at ``x`` among the added functions."""
        if self._root is None:
            raise ValueError("no functions added")
        if not self.lo <= x < self.hi:
            raise ValueError("point outside the domain")
        p = self._root
        res = p.f(x)
        while True:
            if x < p.m and p.left is not None:
                p = p.left
            elif x > p.m and p.right is not None:
                p = p.right
            else:
                return res
            y = p.f(x)
            if self._better(y, res):
                res = y