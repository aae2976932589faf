import unittest

import numpy as np

from tridiag import ArgumentError, DimensionMismatch, SymTridiagonal, Tridiagonal


def random_tridiagonal(n: int) -> Tridiagonal:
    return Tridiagonal(
        np.random.normal(size=n-1),
        np.random.normal(size=n) + 4.0,
        np.random.normal(size=n-1))


class TestTridiagonal(unittest.TestCase):
    def test_construction(self):
        T = Tridiagonal([1, 2, 3], [7, 8, 9, 0], [4, 5, 6])
        self.assertEqual(T.shape, (4, 4))
        self.assertTrue(np.array_equal(T.to_dense(), [[7, 4, 0, 0], [1, 8, 5, 0], [0, 2, 9, 6], [0, 0, 3, 0]]))
        self.assertEqual(Tridiagonal([], [], []).shape, (0, 0))
        with self.assertRaises(ArgumentError):
            Tridiagonal([1], [1, 2, 3], [1, 2])
        with self.assertRaises(ArgumentError):
            Tridiagonal([1, 2], [1, 2, 3], [1, 2, 3])
        with self.assertRaises(ArgumentError):
            Tridiagonal([1], [], [])

    def test_second_superdiagonal(self):
        T = Tridiagonal([1.0, 2.0], [3.0, 4.0, 5.0], [6.0, 7.0])
        self.assertFalse(T.has_du2)
        self.assertIsNone(T.du2)
        U = Tridiagonal([1.0, 2.0], [3.0, 4.0, 5.0], [6.0, 7.0], [8.0])
        self.assertTrue(U.has_du2)
        self.assertTrue(U == T)
        E = Tridiagonal([1.0], [3.0, 4.0], [6.0], [])
        self.assertTrue(E.has_du2)
        self.assertEqual(len(E.du2), 0)
        with self.assertRaises(ArgumentError):
            Tridiagonal([1.0, 2.0], [3.0, 4.0, 5.0], [6.0, 7.0], [8.0, 9.0])

    def test_size(self):
        T = random_tridiagonal(5)
        self.assertEqual(T.size(), (5, 5))
        self.assertEqual(T.size(1), 5)
        self.assertEqual(T.size(3), 1)
        with self.assertRaises(ArgumentError):
            T.size(-2)

    def test_getindex(self):
        T = Tridiagonal([1, 2], [3, 4, 5], [6, 7])
        A = T.to_dense()
        for i in range(3):
            for j in range(3):
                self.assertEqual(T[i, j], A[i, j])
        with self.assertRaises(IndexError):
            T[0, 3]
        with self.assertRaises(IndexError):
            T[0]

    def test_setindex(self):
        n = int(np.ceil(10*np.random.uniform())) + 2
        T = random_tridiagonal(n)
        A = T.to_dense()
        with self.assertRaises(ArgumentError):
            T[0, 2] = 5.0
        T[0, 2] = 0.0
        self.assertTrue(np.array_equal(T.to_dense(), A))
        T[1, 0] = 11.0
        T[1, 1] = 12.0
        T[1, 2] = 13.0
        self.assertEqual(T.dl[0], 11.0)
        self.assertEqual(T.d[1], 12.0)
        self.assertEqual(T.du[1], 13.0)
        U = Tridiagonal([1, 2], [3, 4, 5], [6, 7])
        with self.assertRaises(ArgumentError):
            U[0, 0] = 2.7
        with self.assertRaises(ArgumentError):
            U[1, 0] = 2.7
        self.assertEqual(U[0, 0], 3)
        U[0, 1] = 9
        self.assertEqual(U[0, 1], 9)

    def test_diag(self):
        T = Tridiagonal([1, 2], [3, 4, 5], [6, 7])
        self.assertTrue(np.array_equal(T.diag(), [3, 4, 5]))
        self.assertTrue(np.array_equal(T.diag(-1), [1, 2]))
        self.assertTrue(np.array_equal(T.diag(1), [6, 7]))
        self.assertTrue(np.array_equal(T.diag(2), [0]))
        self.assertEqual(len(T.diag(-3)), 0)
        with self.assertRaises(ArgumentError):
            T.diag(4)
        d = T.diag(1)
        d[0] = 100
        self.assertEqual(T[0, 1], 6)

    def test_determinant(self):
        self.assertEqual(Tridiagonal([], [], []).det(), 1)
        n = int(np.ceil(10*np.random.uniform()))
        T = random_tridiagonal(n)
        self.assertTrue(np.allclose(T.det(), np.linalg.det(T.to_dense())))
        sign, logdet = T.slogdet()
        esign, elogdet = np.linalg.slogdet(T.to_dense())
        self.assertTrue(np.allclose(sign, esign))
        self.assertTrue(np.allclose(logdet, elogdet))

    def test_trim_in_place(self):
        n = int(np.ceil(10*np.random.uniform())) + 1
        T = random_tridiagonal(n)
        A = T.to_dense()
        for k in range(-n - 1, n):
            U = T.copy()
            self.assertIs(U.tril_(k), U)
            self.assertTrue(np.array_equal(U.to_dense(), np.tril(A, k)))
        for k in range(-n + 1, n + 2):
            U = T.copy()
            self.assertIs(U.triu_(k), U)
            self.assertTrue(np.array_equal(U.to_dense(), np.triu(A, k)))
        self.assertTrue(np.array_equal(T.tril(0).to_dense(), np.tril(A)))
        self.assertTrue(np.array_equal(T.to_dense(), A))
        with self.assertRaises(ArgumentError):
            T.tril_(n)
        with self.assertRaises(ArgumentError):
            T.triu_(-n)
        self.assertTrue(np.array_equal(T.to_dense(), A))

    def test_triangular_predicates(self):
        T = Tridiagonal([1.0, 2.0], [3.0, 4.0, 5.0], [6.0, 7.0])
        self.assertTrue(T.istriu(-1))
        self.assertFalse(T.istriu(0))
        self.assertTrue(T.istril(1))
        self.assertFalse(T.istril(0))
        self.assertTrue(T.triu(0).istriu(0))
        self.assertTrue(T.triu(1).istriu(1))
        self.assertTrue(T.triu(2).istriu(2))
        self.assertTrue(T.tril(-1).istril(-1))
        self.assertTrue(T.tril(-2).istril(-2))
        self.assertFalse(T.isdiag())
        self.assertTrue(T.triu(0).tril(0).isdiag())
        self.assertTrue(Tridiagonal([0.0], [1.0, 1.0], [0.0]).isone())
        self.assertTrue(Tridiagonal([0.0], [0.0, 0.0], [0.0]).iszero())

    def test_symmetry(self):
        T = Tridiagonal([1.0, 2.0], [3.0, 4.0, 5.0], [1.0, 2.0])
        self.assertTrue(T.issymmetric())
        self.assertTrue(T.ishermitian())
        self.assertFalse(Tridiagonal([1.0, 2.0], [3.0, 4.0, 5.0], [1.0, 3.0]).issymmetric())
        H = Tridiagonal([1.0 - 1.0j], [1.0, 2.0], [1.0 + 1.0j])
        self.assertTrue(H.ishermitian())
        self.assertFalse(H.issymmetric())
        self.assertFalse(Tridiagonal([1.0], [1.0j, 2.0], [1.0]).ishermitian())

    def test_cross_type_equality(self):
        S = SymTridiagonal([1, 2, 3], [4, 5])
        self.assertTrue(Tridiagonal([4, 5], [1, 2, 3], [4, 5]) == S)
        self.assertTrue(S == Tridiagonal([4, 5], [1, 2, 3], [4, 5]))
        self.assertFalse(Tridiagonal([4, 6], [1, 2, 3], [4, 5]) == S)
        self.assertFalse(S == Tridiagonal([4, 5], [1, 2, 3], [4, 6]))
        self.assertFalse(S == Tridiagonal([4], [1, 2], [4]))

    def test_arithmetic(self):
        n = int(np.ceil(10*np.random.uniform()))
        T, U = random_tridiagonal(n), random_tridiagonal(n)
        A, B = T.to_dense(), U.to_dense()
        self.assertTrue(np.allclose((T + U).to_dense(), A + B))
        self.assertTrue(np.allclose((T - U).to_dense(), A - B))
        self.assertTrue(np.allclose((-T).to_dense(), -A))
        self.assertTrue(np.allclose((3.0*T).to_dense(), 3.0*A))
        self.assertTrue(np.allclose((T / 3.0).to_dense(), A / 3.0))
        self.assertTrue((T + U) + T == T + (U + T))
        Z = T - T
        self.assertIsInstance(Z, Tridiagonal)
        self.assertTrue(Z.iszero())
        self.assertEqual(Z.shape, T.shape)
        with self.assertRaises(DimensionMismatch):
            T - random_tridiagonal(n + 1)

    def test_transpose(self):
        T = Tridiagonal([1.0j, 2.0], [3.0, 4.0, 5.0 - 1.0j], [6.0, 7.0])
        A = T.to_dense()
        self.assertTrue(np.array_equal(T.T.to_dense(), A.T))
        self.assertTrue(np.array_equal(T.H.to_dense(), np.conj(A).T))
        self.assertTrue(np.array_equal(T.conj().to_dense(), np.conj(A)))

    def test_maps_keep_second_superdiagonal(self):
        T = Tridiagonal([1, 2], [3, 4, 5], [6, 7], [8])
        U = T.astype(np.float64)
        self.assertTrue(U.has_du2)
        self.assertEqual(U.du2.dtype, np.float64)
        for V in (T.copy(), T.conj(), T.real, -T, 2*T):
            self.assertTrue(V.has_du2)
            self.assertEqual(len(V.du2), 1)
        self.assertTrue(np.array_equal((2*T).du2, [16]))
        self.assertFalse((T + T).has_du2)

    def test_copyto(self):
        T = random_tridiagonal(4)
        U = random_tridiagonal(4)
        T.copyto(U)
        self.assertTrue(T == U)
        with self.assertRaises(DimensionMismatch):
            T.copyto(random_tridiagonal(3))

    def test_sum(self):
        n = int(np.ceil(10*np.random.uniform()))
        T = random_tridiagonal(n)
        A = T.to_dense()
        self.assertTrue(np.allclose(T.sum(), A.sum()))
        self.assertTrue(np.allclose(T.sum(0), A.sum(0)))
        self.assertTrue(np.allclose(T.sum(1), A.sum(1)))

    def test_block_entries(self):
        rng = np.random.RandomState(0)
        T = Tridiagonal(rng.normal(size=(2, 3, 3)), rng.normal(size=(3, 3, 3)), rng.normal(size=(2, 3, 3)))
        A = T.to_dense()
        self.assertEqual(A.shape, (3, 3, 3, 3))
        self.assertTrue(Tridiagonal.from_dense(A) == T)
        self.assertTrue(np.array_equal(T[2, 1], T.dl[1]))
        self.assertTrue(np.array_equal(T.T[1, 2], T.dl[1].T))
        T[0, 2] = np.zeros((3, 3))
        with self.assertRaises(ArgumentError):
            T[0, 2] = np.ones((3, 3))
        with self.assertRaises(ArgumentError):
            T.lu()


if __name__ == '__main__':
    unittest.main()
