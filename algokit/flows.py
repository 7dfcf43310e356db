"""Maximum flow, minimum cost flow and bipartite matching."""

from __future__ import annotations

import heapq
import math
from bisect import bisect_left
from collections import deque
from dataclasses import dataclass

INF = math.inf


@dataclass
class FlowEdge:
    """Directed residual edge from ``tail`` to ``head``."""

    tail: int
    head: int
    cap: int
    flow: int = 0
    cost: int = 0

    @property
    def free(self):
        return self.cap - self.flow


class Dinic:
    """Maximum flow by blocking flows on level graphs."""

    def __init__(self, n):
        self.n = n
        self.edges = []
        self.adj = [[] for _ in range(n)]
        self.level = [-1] * n
        self._ptr = [0] * n

    def add_edge(self, u, v, cap):
        """Add an edge of capacity ``cap``; return its index (the reverse edge is index + 1)."""
        if cap < 0:
            raise ValueError("capacity must be non-negative")
        j = len(self.edges)
        self.edges.append(FlowEdge(u, v, cap))
        self.edges.append(FlowEdge(v, u, 0))
        self.adj[u].append(j)
        self.adj[v].append(j + 1)
        return j

    def _bfs(self, s, t):
        level = [-1] * self.n
        level[s] = 0
        queue = deque([s])
        while queue:
            u = queue.popleft()
            for j in self.adj[u]:
                e = self.edges[j]
                if level[e.head] != -1 or e.free == 0:
                    continue
                level[e.head] = level[u] + 1
                queue.append(e.head)
        self.level = level
        return level[t] != -1

    def _push(self, u, t, pushed):
        if u == t:
            return pushed
        adj = self.adj[u]
        level = self.level
        while self._ptr[u] < len(adj):
            j = adj[self._ptr[u]]
            e = self.edges[j]
            if level[e.head] == level[u] + 1 and e.free > 0:
                pushing = self._push(e.head, t, min(pushed, e.free))
                if pushing:
                    e.flow += pushing
                    self.edges[j ^ 1].flow -= pushing
                    return pushing
            self._ptr[u] += 1
        return 0

    def flow(self, s, t):
        """Value of a maximum flow from ``s`` to ``t``; edge flows are recomputed."""
        if s == t:
            raise ValueError("source and sink must differ")
        for e in self.edges:
            e.flow = 0
        total = 0
        while self._bfs(s, t):
            self._ptr = [0] * self.n
            while pushed := self._push(s, t, INF):
                total += pushed
        return total

    def cut(self, j):
        """True when edge ``j`` crosses the minimum cut found by the last ``flow`` call."""
        e = self.edges[j]
        return self.level[e.tail] != -1 and self.level[e.head] == -1


@dataclass
class Slope:
    """Breakpoint of the cost curve: ``cost`` for ``flow`` units, marginal ``slope`` before it."""

    flow: int
    cost: int
    slope: float


def compute_cost(slopes, flow):
    """Minimum cost of sending ``flow`` units, or infinity if that much cannot pass."""
    i = bisect_left(slopes, flow, key=lambda sl: sl.flow)
    if i == len(slopes):
        return INF
    sl = slopes[i]
    return sl.cost - (sl.flow - flow) * sl.slope


class MinimumCostFlow:
    """Successive shortest paths with potentials."""

    def __init__(self, n):
        self.n = n
        self.edges = []
        self.adj = [[] for _ in range(n)]
        self.negative_cost = False

    def add_edge(self, u, v, cap, cost):
        if cost < 0:
            self.negative_cost = True
        j = len(self.edges)
        self.edges.append(FlowEdge(u, v, cap, 0, cost))
        self.edges.append(FlowEdge(v, u, 0, 0, -cost))
        self.adj[u].append(j)
        self.adj[v].append(j + 1)
        return j

    def dual_feasible(self, s):
        """Initial potentials: zero, or shortest distances from ``s`` when costs can be negative."""
        if not self.negative_cost:
            return [0] * self.n
        d = [INF] * self.n
        on = [False] * self.n
        queue = deque([s])
        on[s] = True
        d[s] = 0
        while queue:
            u = queue.popleft()
            on[u] = False
            for j in self.adj[u]:
                e = self.edges[j]
                if e.cap == 0:
                    continue
                nd = d[u] + e.cost
                if nd < d[e.head]:
                    d[e.head] = nd
                    if not on[e.head]:
                        queue.append(e.head)
                        on[e.head] = True
        return d

    def slope(self, s, t, dual=None):
        """Return the breakpoints of the cost curve and the optimal potentials."""
        if s == t:
            raise ValueError("source and sink must differ")
        dual = list(dual) if dual else self.dual_feasible(s)
        edges, adj, n = self.edges, self.adj, self.n
        for e in edges:
            e.flow = 0
        parent_edge = [0] * n

        def dijkstra():
            dist = [INF] * n
            vis = [False] * n
            dist[s] = 0
            heap = [(0, -s)]
            while heap:
                _, neg_u = heapq.heappop(heap)
                u = -neg_u
                if vis[u]:
                    continue
                vis[u] = True
                if u == t:
                    break
                for j in adj[u]:
                    e = edges[j]
                    if e.free == 0:
                        continue
                    v = e.head
                    nd = dist[u] + dual[u] - dual[v] + e.cost
                    if nd < dist[v]:
                        parent_edge[v] = j
                        dist[v] = nd
                        heapq.heappush(heap, (nd, -v))
            if not vis[t]:
                return False
            for u in range(n):
                if vis[u]:
                    dual[u] += dist[u] - dist[t]
            return True

        result = [Slope(0, 0, -INF)]
        flow = cost = 0
        while dijkstra():
            path = []
            u = t
            while u != s:
                path.append(parent_edge[u])
                u = edges[parent_edge[u]].tail
            f = min(edges[j].free for j in path)
            for j in path:
                edges[j].flow += f
                edges[j ^ 1].flow -= f
            d = dual[t] - dual[s]
            if d == result[-1].slope:
                result.pop()
            flow += f
            cost += f * d
            result.append(Slope(flow, cost, d))
        return result, dual

    def min_cost_flow(self, s, t, dual=None):
        """Return ``(max flow, its minimum cost, optimal potentials)``."""
        slopes, dual = self.slope(s, t, dual)
        return slopes[-1].flow, slopes[-1].cost, dual


class Hungarian:
    """Minimum-weight matching that saturates the left rows, built one row at a time."""

    def __init__(self, n, m):
        if n > m:
            raise ValueError("need at least as many columns as rows")
        self.n, self.m = n, m
        self.cost = 0
        self.match = [-1] * m
        self.ldual = [0] * n
        self.rdual = [0] * m
        self.costs = [None] * n

    def insert(self, u, row):
        """Add row ``u`` with its costs per column and re-optimise the matching."""
        row = list(row)
        m = self.m
        if len(row) != m:
            raise ValueError("row length must equal the number of columns")
        C, ldual, rdual, match = self.costs, self.ldual, self.rdual, self.match
        C[u] = row
        ldual[u] = min(c - r for c, r in zip(row, rdual))
        dmin = [INF] * m
        best = [-1] * m
        vis = [False] * m
        last = -1
        z = u
        while z != -1:
            delta = INF
            nxt = -1
            for v in range(m):
                if vis[v]:
                    continue
                d = C[z][v] - ldual[z] - rdual[v]
                if d < dmin[v]:
                    dmin[v] = d
                    best[v] = last
                if dmin[v] < delta:
                    delta = dmin[v]
                    nxt = v
            for v in range(m):
                if vis[v]:
                    ldual[match[v]] += delta
                    rdual[v] -= delta
                else:
                    dmin[v] -= delta
            ldual[u] += delta
            last = nxt
            vis[last] = True
            z = match[last]
        v = last
        while v != -1:
            if best[v] == -1:
                match[v] = u
            else:
                w = match[best[v]]
                self.cost -= C[w][best[v]]
                match[v] = w
            self.cost += C[match[v]][v]
            v = best[v]


class Kuhn:
    """Maximum bipartite matching by augmenting paths, with a minimum vertex cover."""

    def __init__(self, n, m):
        self.n, self.m = n, m
        self.adj = [[] for _ in range(n)]
        self.match_left = [-1] * n
        self.match_right = [-1] * m
        self._vis = [False] * n
        self._size = 0

    def add_edge(self, u, v):
        self.adj[u].append(v)

    def _augment(self, u):
        self._vis[u] = True
        for v in self.adj[u]:
            w = self.match_right[v]
            if w == -1 or (not self._vis[w] and self._augment(w)):
                self.match_left[u] = v
                self.match_right[v] = u
                return True
        return False

    def maximum_matching(self):
        """Size of a maximum matching."""
        while True:
            converged = True
            self._vis = [False] * self.n
            for u in range(self.n):
                if not self._vis[u] and self.match_left[u] == -1 and self._augment(u):
                    converged = False
                    self._size += 1
            if converged:
                return self._size

    def left_cover(self):
        """Left vertices of a minimum vertex cover (after ``maximum_matching``)."""
        return [u for u, seen in enumerate(self._vis) if not seen]

    def right_cover(self):
        """Right vertices of a minimum vertex cover (after ``maximum_matching``)."""
        return [v for v, u in enumerate(self.match_right) if u != -1 and self._vis[u]]