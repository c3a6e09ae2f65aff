import unittest

from quadtri.delaunay.preds import orient2d, incircle, \
    orientation_is_clockwise, is_point_in_circumcircle
from quadtri.delaunay.tds import Vertex


class TestOrientation(unittest.TestCase):

    def test_determinant(self):
        self.assertEqual(orient2d((0, 0), (1, 0), (0, 1)), 1.0)
        self.assertEqual(orient2d((0, 0), (0, 1), (1, 0)), -1.0)
        # twice the signed area
        self.assertEqual(orient2d((0, 0), (10, 0), (5, 10)), 100.0)

    def test_clockwise(self):
        self.assertFalse(orientation_is_clockwise((0, 0), (1, 0), (0, 1)))
        self.assertTrue(orientation_is_clockwise((0, 0), (0, 1), (1, 0)))

    def test_colinear_is_not_clockwise(self):
        self.assertFalse(orientation_is_clockwise((0, 0), (1, 1), (2, 2)))
        self.assertFalse(orientation_is_clockwise((0, 0), (2, 2), (1, 1)))

    def test_vertices(self):
        a, b, c = Vertex(0, 0), Vertex(0, 1), Vertex(1, 0)
        self.assertTrue(orientation_is_clockwise(a, b, c))

    def test_exact(self):
        self.assertFalse(
            orientation_is_clockwise((0, 0), (1, 0), (0, 1), exact=True))
        self.assertTrue(
            orientation_is_clockwise((0, 0), (0, 1), (1, 0), exact=True))
        self.assertFalse(
            orientation_is_clockwise((0, 0), (1, 1), (2, 2), exact=True))


class TestInCircle(unittest.TestCase):

    def test_inside(self):
        self.assertTrue(
            is_point_in_circumcircle((0, 0), (1, 0), (0, 1), (0.5, 0.5)))
        self.assertTrue(incircle((0, 0), (1, 0), (0, 1), (0.5, 0.5)) > 0)

    def test_outside(self):
        self.assertFalse(
            is_point_in_circumcircle((0, 0), (1, 0), (0, 1), (2, 2)))

    def test_winding_inverts(self):
        # the other winding silently gives the opposite answer
        self.assertFalse(
            is_point_in_circumcircle((0, 0), (0, 1), (1, 0), (0.5, 0.5)))
        self.assertTrue(
            is_point_in_circumcircle((0, 0), (0, 1), (1, 0), (2, 2)))

    def test_cocircular_is_not_inside(self):
        self.assertEqual(incircle((0, 0), (1, 0), (0, 1), (1, 1)), 0.0)
        self.assertFalse(
            is_point_in_circumcircle((0, 0), (1, 0), (0, 1), (1, 1)))

    def test_translated(self):
        # lifting with |v|^2 - |p|^2 gives the same sign far from the origin
        a, b, c = (100, 100), (101, 100), (100, 101)
        self.assertTrue(is_point_in_circumcircle(a, b, c, (100.5, 100.5)))
        self.assertFalse(is_point_in_circumcircle(a, b, c, (102, 102)))

    def test_exact(self):
        self.assertTrue(is_point_in_circumcircle(
            (0, 0), (1, 0), (0, 1), (0.5, 0.5), exact=True))
        self.assertFalse(is_point_in_circumcircle(
            (0, 0), (1, 0), (0, 1), (1, 1), exact=True))


if __name__ == "__main__":
    unittest.main()
