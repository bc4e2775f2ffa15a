import math
import unittest

import numpy as np

from vector import Vec3


class Vec3ArithmeticTests(unittest.TestCase):
    def test_create_and_compare(self) -> None:
        v = Vec3(1.0, 2.0, 3.0)
        self.assertEqual((v.x, v.y, v.z), (1.0, 2.0, 3.0))
        self.assertEqual(v, Vec3(1.0, 2.0, 3.0))
        self.assertNotEqual(v, Vec3(1.0, 2.0, 4.0))

    def test_copy_is_independent(self) -> None:
        v1 = Vec3(1.0, 2.0, 3.0)
        v2 = v1.copy()
        self.assertEqual(v1, v2)
        v2.x = 10.0
        self.assertEqual(v1.x, 1.0)

    def test_add_sub_neg(self) -> None:
        a = Vec3(1.0, 2.0, 3.0)
        b = Vec3(4.0, 5.0, 6.0)
        self.assertEqual(a + b, Vec3(5.0, 7.0, 9.0))
        self.assertEqual(a - b, Vec3(-3.0, -3.0, -3.0))
        self.assertEqual(-a, Vec3(-1.0, -2.0, -3.0))

    def test_in_place_add_sub(self) -> None:
        a = Vec3(1.0, 2.0, 3.0)
        alias = a
        a += Vec3(4.0, 5.0, 6.0)
        self.assertIs(a, alias)
        self.assertEqual(a, Vec3(5.0, 7.0, 9.0))
        a -= Vec3(5.0, 5.0, 5.0)
        self.assertEqual(a, Vec3(0.0, 2.0, 4.0))

    def test_scalar_mul_div(self) -> None:
        v = Vec3(1.0, 2.0, 3.0)
        self.assertEqual(v * 2.0, Vec3(2.0, 4.0, 6.0))
        self.assertEqual(2.0 * v, Vec3(2.0, 4.0, 6.0))
        self.assertEqual(v / 2.0, Vec3(0.5, 1.0, 1.5))
        v *= 2.0
        self.assertEqual(v, Vec3(2.0, 4.0, 6.0))
        v /= 4.0
        self.assertEqual(v, Vec3(0.5, 1.0, 1.5))

    def test_numpy_scalar_on_the_left_scales(self) -> None:
        r = np.float64(2.0) * Vec3(1.0, 2.0, 3.0)
        self.assertIsInstance(r, Vec3)
        self.assertEqual(r, Vec3(2.0, 4.0, 6.0))
        self.assertEqual(Vec3(1.0, 2.0, 3.0) * np.float64(2.0), r)

    def test_vector_mul_is_dot_product(self) -> None:
        a = Vec3(1.0, 2.0, 3.0)
        b = Vec3(4.0, 5.0, 6.0)
        self.assertEqual(a * b, 32.0)
        self.assertEqual(a * b, a.dot(b))

    def test_in_place_vector_mul_rejected(self) -> None:
        v = Vec3(1.0, 2.0, 3.0)
        with self.assertRaises(TypeError):
            v *= Vec3(1.0, 1.0, 1.0)

    def test_unsupported_operands(self) -> None:
        v = Vec3(1.0, 2.0, 3.0)
        with self.assertRaises(TypeError):
            v + 1.0
        with self.assertRaises(TypeError):
            v / Vec3(1.0, 1.0, 1.0)

    def test_division_by_zero_propagates_inf_and_nan(self) -> None:
        r = Vec3(1.0, -1.0, 0.0) / 0.0
        self.assertEqual(r.x, math.inf)
        self.assertEqual(r.y, -math.inf)
        self.assertTrue(math.isnan(r.z))

    def test_str(self) -> None:
        self.assertEqual(str(Vec3(1.252, 2.2, 0)), "Vec3(x: 1.25, y: 2.20, z: 0.00)")


class Vec3AlgebraTests(unittest.TestCase):
    def test_dot_is_commutative(self) -> None:
        a = Vec3(0.3, -1.7, 2.9)
        b = Vec3(4.1, 0.05, -3.3)
        self.assertEqual(a.dot(b), b.dot(a))

    def test_cross_regression(self) -> None:
        r = Vec3(4.24, 242.21, 12.0).cross(Vec3(1.1422, 124.0, 0.52))
        self.assertAlmostEqual(r.x, -1362.0508, delta=1e-4)
        self.assertAlmostEqual(r.y, 11.5016, delta=1e-4)
        self.assertAlmostEqual(r.z, 249.107738, delta=1e-4)

    def test_cross_operator(self) -> None:
        a = Vec3(1.0, 2.0, 3.0)
        b = Vec3(4.0, 5.0, 6.0)
        self.assertEqual(a % b, Vec3(-3.0, 6.0, -3.0))
        self.assertEqual(a % b, a.cross(b))
        a %= b
        self.assertEqual(a, Vec3(-3.0, 6.0, -3.0))

    def test_cross_is_anticommutative(self) -> None:
        a = Vec3(0.3, -1.7, 2.9)
        b = Vec3(4.1, 0.05, -3.3)
        self.assertEqual(a.cross(b), -b.cross(a))

    def test_right_handed_basis(self) -> None:
        self.assertEqual(Vec3(1.0, 0.0, 0.0).cross(Vec3(0.0, 1.0, 0.0)), Vec3(0.0, 0.0, 1.0))

    def test_norm(self) -> None:
        v = Vec3(1.0, 2.0, 3.0)
        self.assertEqual(v.norm(), math.sqrt(14.0))
        self.assertEqual(v.magnitude(), v.norm())

    def test_get_normalize(self) -> None:
        r = Vec3(1.0, 2.0, 3.0).get_normalize()
        self.assertAlmostEqual(r.x, 0.26726124, delta=1e-6)
        self.assertAlmostEqual(r.y, 0.53452248, delta=1e-6)
        self.assertAlmostEqual(r.z, 0.8017837, delta=1e-6)

    def test_normalize_matches_get_normalize(self) -> None:
        v1 = Vec3(1.0, 2.0, 3.0)
        v2 = v1.copy()
        v1.normalize()
        self.assertEqual(v1, v2.get_normalize())

    def test_normalized_vectors_have_unit_length(self) -> None:
        for v in (Vec3(3.0, 4.0, 0.0), Vec3(-1e-3, 2e-3, 5e-4), Vec3(1e6, -2e6, 3e5)):
            self.assertAlmostEqual(v.get_normalize().magnitude(), 1.0, places=12)

    def test_zero_vector_normalizes_to_itself(self) -> None:
        v = Vec3(0.0, 0.0, 0.0)
        with self.assertLogs("hamilton.vector", level="DEBUG"):
            v.normalize()
        self.assertEqual(v, Vec3(0.0, 0.0, 0.0))
        copy = v.get_normalize()
        self.assertEqual(copy, v)
        self.assertIsNot(copy, v)

    def test_perpendicular_scales_by_dot(self) -> None:
        v = Vec3(1.0, 2.0, 3.0)
        self.assertEqual(v.perpendicular(Vec3(4.0, 5.0, 6.0)), Vec3(32.0, 64.0, 96.0))


class Vec3ConversionTests(unittest.TestCase):
    def test_from_iterable_and_back(self) -> None:
        v = Vec3.from_iterable(np.array([1, 2, 3]))
        self.assertEqual(v, Vec3(1.0, 2.0, 3.0))
        self.assertEqual(v.as_tuple(), (1.0, 2.0, 3.0))
        self.assertEqual(list(v), [1.0, 2.0, 3.0])
        self.assertEqual(len(v), 3)
        np.testing.assert_array_equal(v.to_numpy(), np.array([1.0, 2.0, 3.0]))

    def test_from_iterable_rejects_bad_shapes(self) -> None:
        with self.assertRaises(TypeError):
            Vec3.from_iterable([1.0, 2.0])
        with self.assertRaises(TypeError):
            Vec3.from_iterable(5.0)

    def test_indexing(self) -> None:
        v = Vec3(1.0, 2.0, 3.0)
        self.assertEqual(v[2], 3.0)
        v[0] = 7
        self.assertEqual(v.x, 7.0)
        with self.assertRaises(IndexError):
            v[3]
        with self.assertRaises(IndexError):
            v[3] = 1.0


if __name__ == "__main__":
    unittest.main()
