# algokit

Classic algorithms and data structures in pure Python, with no dependencies outside
the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

- `algokit.modular`: `ModInt` (an integer modulo a prime with the usual operators),
  `mod_pow`, `mod_sqrt` (raises `ValueError` for a non-residue), and factorial and
  binomial tables: `Combinatorics` and the cached `combinatorics(mod)`, which has
  2**20 entries.
- `algokit.number_theory`: `extended_gcd`, `CRT` (add two congruences with `+`; an
  inconsistent system gives `a == -1`), `diophantine` (returns `None` when there is no
  solution), `discrete_log` (returns `None` when there is none), and a linear `Sieve`
  that gives each number's least prime power as a `PrimePower`.
- `algokit.linear_algebra`: list-of-lists matrices (`zero_matrix`, `identity`, `mat_mul`,
  `mat_vec`, `mat_pow`), `determinant`, `GaussianElimination` (`solve`, `kernel_basis`,
  `inverse`), `characteristic_polynomial`, and `Z2GaussianElimination`, which stores
  GF(2) vectors as integers.
- `algokit.sequences`: `berlekamp_massey`, Lagrange `interpolate` at the points
  0..n-1, `fwht` and `fwht_convolution` with `OR_MATRIX`, `AND_MATRIX` and `XOR_MATRIX`,
  and `Pointwise`, a tuple with element-wise arithmetic.
- `algokit.fft`: `fft`, `ntt`, and `convolve_naive`, `convolve_complex`, `convolve_mod`
  and `convolve_ntt`. `convolve(p, q, mod=None)` picks the method: NTT for 998244353,
  15-bit splitting over complex FFT for other moduli, and schoolbook or complex FFT
  when no modulus is given.
- `algokit.linear_recurrence`: `one_coeff` and `solve_linear_recurrence`, which find the
  n-th term of a linear recurrence by repeated polynomial halving.
- `algokit.power_series`: `FormalPowerSeries`, a list of coefficients modulo a prime with
  `+`, `-`, `*`, `/`, `%`, `euclidean_division` and evaluation by calling, plus `inv`,
  `derivative`, `integral`, `log`, `exp`, `power`, `composition`, `product` and the sparse
  variants `sparse_inv`, `sparse_exp`, `sparse_log`, `sparse_pow`.
- `algokit.polynomial_tools`: `Interpolator` (multipoint `evaluate`, `interpolate`,
  `to_newton_basis`), `chirp_z_transform`, `scaled_exp`, `borel`, `laplace`,
  `taylor_shift`, the falling-factorial helpers (`falling_interpolate`,
  `falling_evaluate`, `falling_evaluate_at`, `falling_taylor_shift`),
  `shift_of_sampling_points`, `stirling_first`, `stirling_second` and
  `partition_function`.
- `algokit.structures`: `DSU`, `FenwickTree`, `SegmentTree`, `SparseTable` and `rmq`,
  `MonoidStack`, `MonoidQueue`, and `LiChaoTree` over an integer domain.
- `algokit.flows`: `Dinic` (maximum flow and minimum cut), `MinimumCostFlow` (cost curve
  as `Slope` breakpoints, `compute_cost`, `min_cost_flow`), `Hungarian` (rows inserted
  one at a time) and `Kuhn` (maximum bipartite matching and minimum vertex cover).
- `algokit.tree_algorithms`: `HLD`, `LCA` by binary lifting, `MoOnTree` for path queries,
  and `build_virtual_tree`.
- `algokit.scc`: `tarjan` (strongly connected components, in reverse topological order)
  and `TwoSat`.
- `algokit.strings`: `AhoCorasick`, `prefix_function`, `z_function`,
  `sort_cyclic_shifts`, `SuffixArray`, `build_suffix_tree` and `DBF`.
- `algokit.matroids`: `GraphicMatroid`, `PartitionMatroid`, `Z2Matroid`,
  `matroid_intersection` and `weighted_matroid_intersection`.

## Examples

```python
from algokit.flows import Dinic
from algokit.linear_recurrence import solve_linear_recurrence
from algokit.modular import combinatorics
from algokit.power_series import FormalPowerSeries, inv
from algokit.scc import TwoSat
from algokit.structures import DSU, FenwickTree

dsu = DSU(5)
dsu.unite(0, 1)
assert dsu.find(0) == dsu.find(1)

ft = FenwickTree.from_iterable([1, 2, 3, 4])
assert ft.range_query(1, 3) == 5

comb = combinatorics(998244353)
assert int(comb.binomial(5, 2)) == 10

assert solve_linear_recurrence([1, 1], [0, 1], 10) == 55

assert inv(FormalPowerSeries([1, -1, 0, 0])) == [1, 1, 1, 1]

net = Dinic(4)
net.add_edge(0, 1, 3)
net.add_edge(1, 3, 2)
net.add_edge(0, 2, 1)
net.add_edge(2, 3, 5)
assert net.flow(0, 3) == 3

sat = TwoSat(2)
sat.add_clause(0, 1)
assignment = sat.solve()  # a list of booleans, or None if unsatisfiable
```

Ranges are half-open, `[l, r)`, throughout. Modular code assumes a prime modulus; the
fastest paths use the NTT-friendly prime 998244353, which is the default for
`FormalPowerSeries`.

## What is not included

- No computational geometry: there are no point, line, segment or convex hull routines.
- No segment tree with lazy range updates; `SegmentTree` supports point updates and
  range queries only.
- It is a library only; it installs no command-line program.