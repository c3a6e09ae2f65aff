import unittest
from io import StringIO

from quadtri.delaunay.insert import triangulate
from quadtri.delaunay.inout import output_vertices, output_triangles, \
    output_edges


class TestOutput(unittest.TestCase):

    def setUp(self):
        self.dt = triangulate([(0, 0), (10, 0), (10, 10), (0, 11)],
                              infos=['a', 'b', 'c', 'd'])

    def test_vertices(self):
        fh = StringIO()
        output_vertices(self.dt.vertices, fh)
        lines = fh.getvalue().splitlines()
        self.assertEqual(lines[0], "id;wkt;finite;info")
        self.assertEqual(len(lines), 1 + 4)
        self.assertTrue(lines[1].endswith(";POINT(0.0 0.0);True;a"))

    def test_triangles(self):
        fh = StringIO()
        output_triangles(self.dt.triangles(), fh)
        lines = fh.getvalue().splitlines()
        self.assertEqual(len(lines), 1 + 2)
        for line in lines[1:]:
            fields = line.split(";")
            self.assertEqual(len(fields), 6)
            self.assertTrue(fields[1].startswith("POLYGON(("))
            # closed ring
            ring = fields[1][len("POLYGON(("):-2].split(", ")
            self.assertEqual(len(ring), 4)
            self.assertEqual(ring[0], ring[-1])
            self.assertEqual(fields[5], "True")

    def test_edges(self):
        fh = StringIO()
        edges = list(self.dt.edges())
        output_edges(edges, fh)
        lines = fh.getvalue().splitlines()
        self.assertEqual(lines[0], "id;quad;wkt")
        self.assertEqual(len(lines), 1 + 3 + 3 * 4)
        for line in lines[1:]:
            self.assertIn(";LINESTRING(", line)


if __name__ == "__main__":
    unittest.main()
