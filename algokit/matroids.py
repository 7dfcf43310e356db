"""Graphic, partition and binary matroids, and (weighted) matroid intersection."""

from __future__ import annotations

import heapq
import math
from collections import deque


class GraphicMatroid:
    """Forests of a graph on ``n`` vertices; ground set elements are edge indices."""

    def __init__(self, n, edges):
        self.n = n
        self.edges = [tuple(e) for e in edges]
        self.component = list(range(n))
        self.L = [-1] * n
        self.R = [0] * n

    def build(self, independent):
        """Prepare oracles for the independent edge set ``independent``."""
        n = self.n
        adj = [[] for _ in range(n)]
        for e in independent:
            u, v = self.edges[e]
            adj[u].append(v)
            adj[v].append(u)
        L = [-1] * n
        R = [0] * n
        comp = [0] * n
        timer = 0
        for root in range(n):
            if L[root] != -1:
                continue
            comp[root] = root
            L[root] = timer
            timer += 1
            stack = [(root, iter(adj[root]))]
            while stack:
                u, it = stack[-1]
                for v in it:
                    if L[v] == -1:
                        comp[v] = comp[u]
                        L[v] = timer
                        timer += 1
                        stack.append((v, iter(adj[v])))
                        break
                else:
                    R[u] = timer
                    stack.pop()
        self.component, self.L, self.R = comp, L, R

    def is_ancestor(self, u, v):
        return self.L[u] <= self.L[v] < self.R[u]

    def oracle(self, e, f=None):
        """``oracle(e)``: can ``e`` be added; ``oracle(e, f)``: is ``I - e + f`` independent."""
        if f is None:
            a, b = self.edges[e]
            return self.component[a] != self.component[b]
        if self.oracle(f):
            return True
        a, b = self.edges[e]
        u = b if self.L[a] < self.L[b] else a
        x, y = self.edges[f]
        return self.is_ancestor(u, x) != self.is_ancestor(u, y)


class PartitionMatroid:
    """Sets with at most ``cap[c]`` elements of each colour ``c``."""

    def __init__(self, cap, color):
        self.cap = list(cap)
        self.color = list(color)
        self.count = [0] * len(self.cap)

    def build(self, independent):
        self.count = [0] * len(self.cap)
        for u in independent:
            self.count[self.color[u]] += 1

    def oracle(self, u, v=None):
        """``oracle(u)``: can ``u`` be added; ``oracle(u, v)``: is ``I - u + v`` independent."""
        if v is None:
            c = self.color[u]
            return self.count[c] < self.cap[c]
        return self.color[u] == self.color[v] or self.oracle(v)


class _Z2Basis:
    """Incremental basis over GF(2) recording how each basis vector combines inserted ones."""

    def __init__(self, n):
        self.n = n
        self.basis = [0] * n
        self.alpha = [0] * n
        self.dim = 0

    def _reduce(self, x):
        coef = 0
        for i in range(self.n):
            if not (x >> i) & 1:
                continue
            if not self.basis[i]:
                return i, x, coef
            x ^= self.basis[i]
            coef ^= self.alpha[i]
        return -1, x, coef

    def insert(self, x):
        i, x, coef = self._reduce(x)
        if i == -1:
            return False
        self.basis[i] = x
        self.alpha[i] = coef | (1 << self.dim)
        self.dim += 1
        return True

    def solve(self, x):
        i, _, coef = self._reduce(x)
        return i == -1, coef


class Z2Matroid:
    """Linearly independent sets of ``n``-bit vectors (given as integers) over GF(2)."""

    def __init__(self, n, matrix):
        self.n = n
        self.matrix = list(matrix)
        if any(not 0 <= x < (1 << n) for x in self.matrix):
            raise ValueError("vectors must fit in n bits")
        self.idx = [0] * len(self.matrix)
        self._basis = _Z2Basis(n)

    def build(self, independent):
        self._basis = _Z2Basis(self.n)
        for rank, u in enumerate(independent):
            if not self._basis.insert(self.matrix[u]):
                raise ValueError("set is not independent")
            self.idx[u] = rank

    def oracle(self, u, v=None):
        """``oracle(u)``: can ``u`` be added; ``oracle(u, v)``: is ``I - u + v`` independent."""
        if v is None:
            return not self._basis.solve(self.matrix[u])[0]
        good, coef = self._basis.solve(self.matrix[v])
        return not good or bool((coef >> self.idx[u]) & 1)


def matroid_intersection(n, m1, m2):
    """A maximum common independent set of two matroids on ``range(n)`` (sorted).

    Put the matroid with the more expensive oracle second.
    """
    in_set = [False] * n
    while True:
        outside = [u for u in range(n) if not in_set[u]]
        inside = [u for u in range(n) if in_set[u]]
        m1.build(inside)
        m2.build(inside)
        target = [False] * n
        pushed = [False] * n
        parent = [-1] * n
        queue = deque()
        for u in outside:
            target[u] = m2.oracle(u)
            if m1.oracle(u):
                pushed[u] = True
                queue.append(u)
        augmented = False
        while queue:
            u = queue.popleft()
            if target[u]:
                v = u
                while v != -1:
                    in_set[v] = not in_set[v]
                    v = parent[v]
                augmented = True
                break
            for v in outside if in_set[u] else inside:
                if pushed[v]:
                    continue
                if (in_set[u] and m1.oracle(u, v)) or (in_set[v] and m2.oracle(v, u)):
                    parent[v] = u
                    pushed[v] = True
                    queue.append(v)
        if not augmented:
            return inside


def weighted_matroid_intersection(n, w, m1, m2):
    """A maximum common independent set of least total weight; weights must be non-negative."""
    w = list(w)
    if any(x < 0 for x in w):
        raise ValueError("weights must be non-negative")
    in_set = [False] * n
    pot = [[0, 0] for _ in range(n)]
    unreached = (math.inf, math.inf)

    def check_edge(u, v):
        return (in_set[u] and m1.oracle(u, v)) or (in_set[v] and m2.oracle(v, u))

    while True:
        groups = ([u for u in range(n) if not in_set[u]], [u for u in range(n) if in_set[u]])
        m1.build(groups[1])
        m2.build(groups[1])
        d = [unreached] * n
        target = [False] * n
        parent = [-1] * n
        heap = []
        for u in groups[0]:
            target[u] = m2.oracle(u)
            if m1.oracle(u):
                d[u] = (w[u] + pot[u][0] - pot[u][1], 0)
                heap.append((d[u], -u))
        heapq.heapify(heap)
        augmented = False
        while heap:
            du, neg_u = heapq.heappop(heap)
            u = -neg_u
            if du != d[u]:
                continue
            if target[u]:
                best = d[u][0]
                for v in range(n):
                    bv = int(in_set[v])
                    cost = w[v] + pot[v][bv] - pot[v][1 - bv]
                    pot[v][bv] += min(d[v][0] - cost, best)
                    pot[v][1 - bv] += min(d[v][0], best)
                v = u
                while v != -1:
                    in_set[v] = not in_set[v]
                    w[v] = -w[v]
                    v = parent[v]
                augmented = True
                break
            bu = int(in_set[u])
            for v in groups[1 - bu]:
                if not check_edge(u, v):
                    continue
                nd = (d[u][0] + w[v] + pot[u][1 - bu] - pot[v][bu], d[u][1] + 1)
                if nd < d[v]:
                    parent[v] = u
                    d[v] = nd
                    heapq.heappush(heap, (nd, -v))
        if not augmented:
            return groups[1]