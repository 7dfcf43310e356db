"""Strongly connected components and 2-satisfiability."""

from __future__ import annotations

from enum import Enum


class _State(Enum):
    UNVISITED = 0
    ACTIVE = 1
    VISITED = 2


def tarjan(graph):
    """Component id per vertex; an edge ``u -> v`` implies ``scc[v] <= scc[u]``."""
    n = len(graph)
    state = [_State.UNVISITED] * n
    low = [-1] * n
    num = [-1] * n
    scc = [-1] * n
    stk = []
    timer = 0
    count = 0
    for start in range(n):
        if num[start] != -1:
            continue
        calls = []

        def enter(u):
            nonlocal timer
            low[u] = num[u] = timer
            timer += 1
            state[u] = _State.ACTIVE
            stk.append(u)
            calls.append((u, iter(graph[u])))

        enter(start)
        while calls:
            u, it = calls[-1]
            descended = False
            for v in it:
                if state[v] is _State.UNVISITED:
                    enter(v)
                    descended = True
                    break
                if state[v] is _State.ACTIVE:
                    low[u] = min(low[u], low[v])
            if descended:
                continue
            if low[u] == num[u]:
                while True:
                    v = stk.pop()
                    scc[v] = count
                    state[v] = _State.VISITED
                    if not stk or num[stk[-1]] < num[u]:
                        break
                count += 1
            calls.pop()
            if calls:
                w = calls[-1][0]
                if state[u] is _State.ACTIVE:
                    low[w] = min(low[w], low[u])
    return scc


class TwoSat:
    """2-SAT over ``n`` variables; literal ``u < n`` is variable ``u``, ``neg(u)`` its negation."""

    def __init__(self, n):
        self.n = n
        self.graph = [[] for _ in range(2 * n)]

    def neg(self, u):
        return (u + self.n) % (2 * self.n)

    def add_clause(self, u, v):
        """Require ``u or v``."""
        self.graph[self.neg(u)].append(v)
        self.graph[self.neg(v)].append(u)

    def solve(self):
        """A satisfying assignment as a list of booleans, or None if there is none."""
        scc = tarjan(self.graph)
        res = []
        for u in range(self.n):
            a, b = scc[u], scc[self.neg(u)]
            if a == b:
                return None
            res.append(b > a)
        return res