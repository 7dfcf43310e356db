"""Dense matrices over a field, elimination, determinants and GF(2) bases."""

from __future__ import annotations


def zero_matrix(n, m):
    return [[0] * m for _ in range(n)]


def identity(n):
    res = zero_matrix(n, n)
    for i, row in enumerate(res):
        row[i] = 1
    return res


def mat_mul(a, b):
    if len(a[0]) != len(b):
        raise ValueError("dimension mismatch")
    cols = list(zip(*b))
    return [[sum((x * y for x, y in zip(row, col)), 0) for col in cols] for row in a]


def mat_vec(a, b):
    if len(a[0]) != len(b):
        raise ValueError("dimension mismatch")
    return [sum((x * y for x, y in zip(row, b)), 0) for row in a]


def mat_pow(a, n):
    res = identity(len(a))
    while n:
        if n & 1:
            res = mat_mul(a, res)
        a = mat_mul(a, a)
        n >>= 1
    return res


def determinant(a):
    """Determinant by Gauss-Jordan elimination; entries must support division."""
    a = [list(row) for row in a]
    n = len(a)
    if n != len(a[0]):
        raise ValueError("matrix must be square")
    det = 1
    for x in range(n):
        sel = next((i for i in range(x, n) if a[i][x] != 0), None)
        if sel is None:
            return 0
        if sel != x:
            a[sel], a[x] = a[x], a[sel]
            det *= -1
        det *= a[x][x]
        for i in range(n):
            if i == x:
                continue
            c = a[i][x] / a[x][x]
            for j in range(x, n):
                a[i][j] -= c * a[x][j]
    return det


class GaussianElimination:
    """Reduced row echelon form of ``a`` together with the row operations used."""

    def __init__(self, a):
        self.a = [list(row) for row in a]
        A = self.a
        self.n, self.m = n, m = len(A), len(A[0])
        self.e = E = identity(n)
        self.rank, self.nullity = 0, m
        self.pivot = [-1] * m
        row = 0
        for col in range(m):
            if row >= n:
                break
            sel = next((i for i in range(row, n) if A[i][col] != 0), None)
            if sel is None:
                continue
            if sel != row:
                A[sel], A[row] = A[row], A[sel]
                E[sel], E[row] = E[row], E[sel]
            for i in range(n):
                if i == row:
                    continue
                c = A[i][col] / A[row][col]
                for j in range(col, m):
                    A[i][j] -= c * A[row][j]
                for j in range(n):
                    E[i][j] -= c * E[row][j]
            self.pivot[col] = row
            row += 1
            self.rank += 1
            self.nullity -= 1

    def solve(self, b, reduced=False):
        """Return ``(solvable, x)``; ``x`` solves the system when solvable."""
        if len(b) != self.n:
            raise ValueError("dimension mismatch")
        b = list(b) if reduced else mat_vec(self.e, b)
        x = [0] * self.m
        for j, r in enumerate(self.pivot):
            if r == -1:
                continue
            x[j] = b[r] / self.a[r][j]
            b[r] = 0
        return all(v == 0 for v in b), x

    def kernel_basis(self):
        basis = []
        e = [0] * self.m
        for j, r in enumerate(self.pivot):
            if r != -1:
                continue
            e[j] = 1
            y = self.solve(mat_vec(self.a, e), True)[1]
            e[j] = 0
            y[j] = -1
            basis.append(y)
        return basis

    def inverse(self):
        if self.n != self.m or self.rank != self.n:
            raise ValueError("matrix is not invertible")
        n = self.n
        res = zero_matrix(n, n)
        e = [0] * n
        for i in range(n):
            e[i] = 1
            x = self.solve(e)[1]
            for j in range(n):
                res[j][i] = x[j]
            e[i] = 0
        return res


def _upper_hessenberg(a):
    a = [list(row) for row in a]
    n = len(a)
    for i in range(n - 2):
        pivot = next((j for j in range(i + 1, n) if a[j][i] != 0), None)
        if pivot is None:
            continue
        a[i + 1], a[pivot] = a[pivot], a[i + 1]
        for row in a:
            row[i + 1], row[pivot] = row[pivot], row[i + 1]
        for j in range(i + 2, n):
            if a[j][i] == 0:
                continue
            c = a[j][i] / a[i + 1][i]
            for k in range(i, n):
                a[j][k] -= c * a[i + 1][k]
            for row in a:
                row[i + 1] += c * row[j]
    return a


def _hessenberg_determinant(a):
    if not a:
        return 1
    a = [list(row) for row in a]
    n = len(a[0])
    det = 1
    for i in range(n):
        if a[i][i] == 0:
            det *= -1
            if i + 1 == n or a[i + 1][i] == 0:
                return 0
            a[i], a[i + 1] = a[i + 1], a[i]
        det *= a[i][i]
        if i + 1 < n:
            c = a[i + 1][i] / a[i][i]
            for j in range(i, n):
                a[i + 1][j] -= c * a[i][j]
    return det


def _convolve(p, q):
    r = [0] * (len(p) + len(q) - 1)
    for i, x in enumerate(p):
        for j, y in enumerate(q):
            r[i + j] += x * y
    return r


def characteristic_polynomial(a):
    """Coefficients (ascending) of ``det(xI - a)``."""
    n = len(a)
    if n == 0:
        return [1]
    one = a[0][0] * 0 + 1
    a = _upper_hessenberg(a)
    y = []
    for _ in range(n + 1):
        det = _hessenberg_determinant(a)
        y.append(-det if n % 2 else det)
        for j in range(n):
            a[j][j] -= 1
    p, f = [y[0]], [one]
    for i in range(1, len(y)):
        inv = one / i
        f = _convolve([-(1 - inv), inv], f)
        v, pw = y[i], 1
        for c in p:
            v -= c * pw
            pw *= i
        p.append(0)
        p = [c + v * fj for c, fj in zip(p, f)]
    return p


class Z2GaussianElimination:
    """Incremental basis of GF(2)^n; vectors are ints with bit ``i`` as entry ``i``."""

    def __init__(self, n):
        self.n = n
        self.basis = [0] * n
        self.alpha = [0] * n
        self.first = [0] * n
        self.dim = 0

    def reduce(self, x):
        """Return ``(i, coef, residue)``; ``i`` is -1 when ``x`` lies in the span."""
        coef = 0
        for i in range(self.n):
            if not (x >> i) & 1:
                continue
            if self.basis[i] == 0:
                return i, coef, x
            x ^= self.basis[i]
            coef ^= self.alpha[i]
        return -1, coef, x

    def insert(self, x):
        i, coef, x = self.reduce(x)
        if i == -1:
            return False
        self.basis[i] = x
        self.alpha[i] = coef | (1 << self.dim)
        self.first[self.dim] = i
        self.dim += 1
        return True

    def solve(self, x):
        """Return ``(in_span, coef)``; set bits of ``coef`` pick inserted vectors."""
        i, coef, _ = self.reduce(x)
        return i == -1, coef

    def exchange(self, r, x):
        """Replace the ``r``-th inserted vector by ``x`` in the coefficient tables."""
        k, coef, _ = self.reduce(x)
        if k != -1:
            raise ValueError("vector is not in the span")
        if not (coef >> r) & 1:
            raise ValueError("vector does not depend on the replaced one")
        for i in range(self.n):
            if (self.alpha[i] >> r) & 1:
                self.alpha[i] ^= coef
                self.alpha[i] |= 1 << r