"""quadtri.delaunay - Incremental Delaunay triangulation on a quad-edge mesh
"""

from quadtri.delaunay.insert import triangulate, PointInserter, \
    CircularWalkError, super_triangle
from quadtri.delaunay.tds import Triangulation, Vertex, create_triangle, \
    insert_point
from quadtri.delaunay.iter import enumerate_edges, EdgeIterator, \
    FaceIterator, StarEdgeIterator
from quadtri.delaunay.inout import output_vertices, output_triangles, \
    output_edges


__version__ = '0.1.0.dev0'
__license__ = 'MIT License'
__all__ = ("triangulate", "PointInserter", "CircularWalkError",
           "super_triangle", "Triangulation", "Vertex", "create_triangle",
           "insert_point", "enumerate_edges", "EdgeIterator", "FaceIterator",
           "StarEdgeIterator", "output_vertices", "output_triangles",
           "output_edges")

