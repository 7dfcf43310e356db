"""Heavy-light decomposition, binary lifting, Mo's algorithm on trees and virtual trees."""

from __future__ import annotations

from itertools import groupby


def _preorder(graph, root):
    """Parents, depths and the recursive DFS preorder following adjacency order."""
    n = len(graph)
    parent = [-1] * n
    depth = [0] * n
    order = []
    stack = [root]
    while stack:
        u = stack.pop()
        order.append(u)
        for v in reversed(graph[u]):
            if v == parent[u]:
                continue
            parent[v] = u
            depth[v] = depth[u] + 1
            stack.append(v)
    return parent, depth, order


def _subtree_sizes(parent, order):
    size = [1] * len(parent)
    for u in reversed(order):
        if parent[u] != -1:
            size[parent[u]] += size[u]
    return size


class HLD:
    """Heavy-light decomposition of a tree given by adjacency lists."""

    def __init__(self, graph, root):
        self.graph = graph = [list(adj) for adj in graph]
        n = len(graph)
        parent, depth, order = _preorder(graph, root)
        size = _subtree_sizes(parent, order)
        for u in order:
            adj = graph[u]
            mx = 0
            for i, v in enumerate(adj):
                if v == parent[u]:
                    continue
                if size[v] > mx:
                    mx = size[v]
                    adj[i], adj[0] = adj[0], adj[i]
        self.parent, self.depth = parent, depth
        self.head = [0] * n
        self.L = [0] * n
        self.R = [0] * n
        self.head[root] = root
        _, _, order = _preorder(graph, root)
        for timer, u in enumerate(order):
            self.L[u] = timer
            self.R[u] = timer + size[u]
            for v in graph[u]:
                if v != parent[u]:
                    self.head[v] = self.head[u] if v == graph[u][0] else v

    def get_path(self, u, v):
        """Ranges ``(reversed, l, r)`` of positions covering the path from ``u`` to ``v`` in order.

        ``reversed`` is true where the range must be read from ``r - 1`` down to ``l``.
        """
        head, depth, L, parent = self.head, self.depth, self.L, self.parent
        left, right = [], []
        while head[u] != head[v]:
            if depth[head[u]] > depth[head[v]]:
                left.append((True, L[head[u]], L[u] + 1))
                u = parent[head[u]]
            else:
                right.append((False, L[head[v]], L[v] + 1))
                v = parent[head[v]]
        if depth[u] > depth[v]:
            left.append((True, L[v], L[u] + 1))
        else:
            right.append((False, L[u], L[v] + 1))
        return left + right[::-1]

    def lca(self, u, v):
        head, depth, parent = self.head, self.depth, self.parent
        while head[u] != head[v]:
            if depth[head[u]] < depth[head[v]]:
                u, v = v, u
            u = parent[head[u]]
        return u if depth[u] < depth[v] else v


class LCA:
    """Lowest common ancestors by binary lifting; needs ``2**k`` above the tree height."""

    def __init__(self, graph, root, k=20):
        n = len(graph)
        self.k = k
        parent, depth, order = _preorder(graph, root)
        size = _subtree_sizes(parent, order)
        self.h = depth
        self.L = [0] * n
        self.R = [0] * n
        self.inv = order
        self.up = [[0] * k for _ in range(n)]
        for timer, u in enumerate(order):
            self.L[u] = timer
            self.R[u] = timer + size[u]
            row = self.up[u]
            row[0] = root if u == root else parent[u]
            for i in range(k - 1):
                row[i + 1] = self.up[row[i]][i]

    def is_ancestor(self, u, v):
        """True when ``u`` is ``v`` or an ancestor of it."""
        return self.L[u] <= self.L[v] and self.R[v] <= self.R[u]

    def lca(self, u, v):
        if self.is_ancestor(u, v):
            return u
        if self.is_ancestor(v, u):
            return v
        for i in range(self.k - 1, -1, -1):
            w = self.up[u][i]
            if not self.is_ancestor(w, v):
                u = w
        return self.up[u][0]

    def dist(self, u, v):
        w = self.lca(u, v)
        return self.h[u] + self.h[v] - 2 * self.h[w]


class MoOnTree:
    """Orders path queries on a tree rooted at 0 so that endpoints move little."""

    def __init__(self, graph, k):
        n = len(graph)
        if n == 0:
            raise ValueError("tree must have at least one vertex")
        self.n, self.k = n, k
        self.block = [0] * n
        self.parent = [-1] * n
        self.L = [0] * n
        self.R = [0] * n
        self.num_blocks = 0
        self.L[0] = 0
        timer = 1
        stack = [(0, iter(graph[0]))]
        pending = [[]]
        final = []
        while stack:
            u, it = stack[-1]
            for v in it:
                if v == self.parent[u]:
                    continue
                self.parent[v] = u
                self.L[v] = timer
                timer += 1
                stack.append((v, iter(graph[v])))
                pending.append([])
                break
            else:
                stack.pop()
                self.R[u] = timer
                group = pending.pop()
                group.append(u)
                if pending:
                    acc = pending[-1]
                    acc.extend(group)
                    if len(acc) > k:
                        self._mark(acc)
                else:
                    final = group
        if final:
            self._mark(final)

    def _mark(self, group):
        for u in group:
            self.block[u] = self.num_blocks
        self.num_blocks += 1
        group.clear()

    def is_ancestor(self, u, v):
        return self.L[u] <= self.L[v] and self.R[v] <= self.R[u]

    def traverse(self, a, b, update):
        """Call ``update`` on each vertex of the path from ``a`` to ``b`` except their lca."""
        ends = [a, b]
        for t in (0, 1):
            while not self.is_ancestor(ends[t], ends[t ^ 1]):
                update(ends[t])
                ends[t] = self.parent[ends[t]]

    def run(self, queries, evaluate, update):
        """Process path queries ``(u, v)``; ``evaluate(i)`` is called once per query index."""
        order = sorted(range(len(queries)), key=lambda i: (self.block[queries[i][0]], self.L[queries[i][1]]))
        ends = [0, 0]
        for z in order:
            for t in (0, 1):
                self.traverse(ends[t], queries[z][t], update)
                ends[t] = queries[z][t]
            evaluate(z)


def build_virtual_tree(vertices, children, lca):
    """Build the virtual tree of ``vertices`` into ``children`` and return its root.

    ``vertices`` is extended with the needed lowest common ancestors and left sorted by
    decreasing entry time ``lca.L``.
    """
    if not vertices:
        raise ValueError("at least one vertex is required")
    vertices.sort(key=lambda u: lca.L[u], reverse=True)
    k = len(vertices)
    vertices.extend([lca.lca(a, b) for a, b in zip(vertices[: k - 1], vertices[1:k])])
    vertices.sort(key=lambda u: lca.L[u], reverse=True)
    vertices[:] = [u for u, _ in groupby(vertices)]
    stack = []
    for u in vertices:
        while stack and lca.is_ancestor(u, stack[-1]):
            children[u].append(stack.pop())
        stack.append(u)
    return stack[-1]