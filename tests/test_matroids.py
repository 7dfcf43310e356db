import itertools
import random
from collections import Counter

import pytest

from algokit.flows import Hungarian, Kuhn
from algokit.matroids import (
    GraphicMatroid,
    PartitionMatroid,
    Z2Matroid,
    matroid_intersection,
    weighted_matroid_intersection,
)
from algokit.structures import DSU


def _is_forest(n, edges, subset):
    dsu = DSU(n)
    return all(dsu.unite(*edges[e]) for e in subset)


def _partition_ok(cap, color, subset):
    counts = Counter(color[u] for u in subset)
    return all(counts[c] <= cap[c] for c in counts)


def _z2_independent(vectors):
    for r in range(1, len(vectors) + 1):
        for combo in itertools.combinations(vectors, r):
            acc = 0
            for x in combo:
                acc ^= x
            if acc == 0:
                return False
    return True


def _random_graph(seed, n, m):
    rnd = random.Random(seed)
    return [(rnd.randrange(n), rnd.randrange(n)) for _ in range(m)]


def test_partition_oracles():
    pm = PartitionMatroid([1, 2], [0, 0, 1, 1, 1])
    pm.build([0, 2])
    assert pm.oracle(1) is False
    assert pm.oracle(3) is True
    assert pm.oracle(0, 1) is True
    assert pm.oracle(2, 1) is False


def test_z2_oracles():
    zm = Z2Matroid(3, [0b001, 0b010, 0b011, 0b100])
    zm.build([0, 1])
    assert zm.oracle(2) is False
    assert zm.oracle(3) is True
    assert zm.oracle(0, 2) is True
    assert zm.oracle(1, 2) is True


def test_z2_build_dependent_raises():
    zm = Z2Matroid(2, [0b01, 0b10, 0b11])
    with pytest.raises(ValueError):
        zm.build([0, 1, 2])


def test_z2_vector_too_wide():
    with pytest.raises(ValueError):
        Z2Matroid(2, [0b100])


@pytest.mark.parametrize("seed", range(5))
def test_graphic_exchange_oracle(seed):
    n = 6
    edges = _random_graph(seed, n, 9)
    gm = GraphicMatroid(n, edges)
    dsu = DSU(n)
    forest = [e for e, (u, v) in enumerate(edges) if dsu.unite(u, v)]
    gm.build(forest)
    for f in range(len(edges)):
        if f in forest:
            continue
        assert gm.oracle(f) == _is_forest(n, edges, forest + [f])
        for e in forest:
            swapped = [x for x in forest if x != e] + [f]
            assert gm.oracle(e, f) == _is_forest(n, edges, swapped)


@pytest.mark.parametrize("seed", range(6))
def test_graphic_partition_intersection_is_maximum(seed):
    n = 5
    edges = _random_graph(seed, n, 8)
    rnd = random.Random(100 + seed)
    color = [rnd.randrange(3) for _ in edges]
    cap = [1, 2, 1]
    res = matroid_intersection(len(edges), GraphicMatroid(n, edges), PartitionMatroid(cap, color))
    assert _is_forest(n, edges, res)
    assert _partition_ok(cap, color, res)
    best = max(
        len(s)
        for r in range(len(edges) + 1)
        for s in itertools.combinations(range(len(edges)), r)
        if _is_forest(n, edges, s) and _partition_ok(cap, color, s)
    )
    assert len(res) == best


@pytest.mark.parametrize("seed", range(6))
def test_bipartite_matching_matches_kuhn(seed):
    rnd = random.Random(seed)
    left, right = 5, 4
    pairs = sorted({(rnd.randrange(left), rnd.randrange(right)) for _ in range(10)})
    m1 = PartitionMatroid([1] * left, [u for u, _ in pairs])
    m2 = PartitionMatroid([1] * right, [v for _, v in pairs])
    res = matroid_intersection(len(pairs), m1, m2)
    kuhn = Kuhn(left, right)
    for u, v in pairs:
        kuhn.add_edge(u, v)
    assert len(res) == kuhn.maximum_matching()
    assert len({pairs[e][0] for e in res}) == len(res)
    assert len({pairs[e][1] for e in res}) == len(res)


@pytest.mark.parametrize("seed", range(5))
def test_z2_partition_intersection_is_maximum(seed):
    rnd = random.Random(seed)
    vectors = [rnd.randrange(1, 16) for _ in range(7)]
    color = [rnd.randrange(3) for _ in vectors]
    cap = [2, 1, 2]
    res = matroid_intersection(len(vectors), Z2Matroid(4, vectors), PartitionMatroid(cap, color))
    assert _z2_independent([vectors[u] for u in res])
    assert _partition_ok(cap, color, res)
    best = max(
        len(s)
        for r in range(len(vectors) + 1)
        for s in itertools.combinations(range(len(vectors)), r)
        if _z2_independent([vectors[u] for u in s]) and _partition_ok(cap, color, s)
    )
    assert len(res) == best


@pytest.mark.parametrize("seed", range(6))
def test_weighted_assignment_matches_hungarian(seed):
    rnd = random.Random(seed)
    n, m = 3, 4
    costs = [[rnd.randrange(20) for _ in range(m)] for _ in range(n)]
    weights = [costs[i][j] for i in range(n) for j in range(m)]
    m1 = PartitionMatroid([1] * n, [e // m for e in range(n * m)])
    m2 = PartitionMatroid([1] * m, [e % m for e in range(n * m)])
    res = weighted_matroid_intersection(n * m, weights, m1, m2)
    hung = Hungarian(n, m)
    for i, row in enumerate(costs):
        hung.insert(i, row)
    assert len(res) == n
    assert sorted(e // m for e in res) == list(range(n))
    assert len({e % m for e in res}) == n
    assert sum(weights[e] for e in res) == hung.cost


@pytest.mark.parametrize("seed", range(5))
def test_weighted_graphic_partition_is_optimal(seed):
    n = 5
    edges = _random_graph(seed, n, 7)
    rnd = random.Random(200 + seed)
    color = [rnd.randrange(2) for _ in edges]
    weights = [rnd.randrange(10) for _ in edges]
    cap = [2, 2]
    res = weighted_matroid_intersection(
        len(edges), weights, GraphicMatroid(n, edges), PartitionMatroid(cap, color)
    )
    feasible = [
        s
        for r in range(len(edges) + 1)
        for s in itertools.combinations(range(len(edges)), r)
        if _is_forest(n, edges, s) and _partition_ok(cap, color, s)
    ]
    size = max(len(s) for s in feasible)
    best = min(sum(weights[e] for e in s) for s in feasible if len(s) == size)
    assert _is_forest(n, edges, res)
    assert _partition_ok(cap, color, res)
    assert len(res) == size
    assert sum(weights[e] for e in res) == best


def test_weighted_rejects_negative_weights():
    pm = PartitionMatroid([1], [0, 0])
    with pytest.raises(ValueError):
        weighted_matroid_intersection(2, [1, -1], pm, PartitionMatroid([1], [0, 0]))