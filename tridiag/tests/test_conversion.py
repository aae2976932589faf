import unittest

import numpy as np

from tridiag import ArgumentError, SymTridiagonal, Tridiagonal
from tridiag import from_dense, to_dense, to_symtridiagonal, to_tridiagonal


class TestConversion(unittest.TestCase):
    def test_round_trip(self):
        n = int(np.ceil(10*np.random.uniform()))
        S = SymTridiagonal(np.random.normal(size=n), np.random.normal(size=n-1))
        T = Tridiagonal(np.random.normal(size=n-1), np.random.normal(size=n), np.random.normal(size=n-1))
        self.assertTrue(from_dense(to_dense(S), symmetric=True) == S)
        self.assertTrue(from_dense(to_dense(T)) == T)
        self.assertTrue(np.array_equal(np.asarray(S), S.to_dense()))

    def test_from_dense_ignores_outer_bands(self):
        A = np.arange(16).reshape(4, 4)
        T = Tridiagonal.from_dense(A)
        self.assertTrue(np.array_equal(T.to_dense(), np.triu(np.tril(A, 1), -1)))
        with self.assertRaises(ArgumentError):
            SymTridiagonal.from_dense(A)
        with self.assertRaises(ArgumentError):
            Tridiagonal.from_dense(np.ones(3))

    def test_to_symtridiagonal(self):
        n = int(np.ceil(10*np.random.uniform())) + 1
        e = np.random.normal(size=n-1)
        d = np.random.normal(size=n)
        S = to_symtridiagonal(Tridiagonal(e, d, e))
        self.assertIsInstance(S, SymTridiagonal)
        self.assertTrue(np.array_equal(S.dv, d))
        self.assertTrue(np.array_equal(S.ev, e))
        f = e.copy()
        f[-1] += 1.0
        with self.assertRaises(ArgumentError):
            to_symtridiagonal(Tridiagonal(e, d, f))
        self.assertTrue(to_symtridiagonal(S) == S)

    def test_block_symmetry_required(self):
        b = np.array([[1, 2], [3, 4]])
        T = Tridiagonal(np.array([b.T]), np.array([b, b]), np.array([b]))
        self.assertTrue(np.array_equal(T.dl[0], np.transpose(T.du[0])))
        self.assertFalse(T.issymmetric())
        with self.assertRaises(ArgumentError):
            to_symtridiagonal(T)
        with self.assertRaises(ArgumentError):
            SymTridiagonal.from_tridiagonal(T)
        with self.assertRaises(ArgumentError):
            from_dense(T.to_dense(), symmetric=True)
        s = b + b.T
        U = Tridiagonal(np.array([b.T]), np.array([s, s]), np.array([b]))
        S = to_symtridiagonal(U)
        self.assertTrue(np.array_equal(S.to_dense(), U.to_dense()))

    def test_to_tridiagonal(self):
        S = SymTridiagonal([1.0, 2.0, 3.0], [4.0, 5.0, 6.0])
        T = to_tridiagonal(S)
        self.assertIsInstance(T, Tridiagonal)
        self.assertTrue(np.array_equal(T.to_dense(), S.to_dense()))
        self.assertTrue(T == S)
        T[0, 1] = 10.0
        self.assertEqual(S[0, 1], 4.0)
        self.assertTrue(to_tridiagonal(T) == T)

    def test_banded_layouts(self):
        T = Tridiagonal([1.0, 2.0], [3.0, 4.0, 5.0], [6.0, 7.0])
        ab = T.to_banded()
        self.assertTrue(np.array_equal(ab, [[0.0, 6.0, 7.0], [3.0, 4.0, 5.0], [1.0, 2.0, 0.0]]))
        self.assertTrue(np.array_equal(T.to_sparse().toarray(), T.to_dense()))
        S = SymTridiagonal([1.0], [])
        self.assertTrue(np.array_equal(S.to_sparse().toarray(), [[1.0]]))
        self.assertEqual(SymTridiagonal([], []).to_sparse().shape, (0, 0))


if __name__ == '__main__':
    unittest.main()
