"""quadtri - Incremental Delaunay triangulation on a quad-edge mesh (pure Python)
"""

__version__ = '0.1.0.dev0'
__license__ = 'MIT License'
__author__ = 'Martijn Meijers'

from quadtri.delaunay import triangulate, Triangulation, Vertex, \
    CircularWalkError

__all__ = ["triangulate", "Triangulation", "Vertex", "CircularWalkError"]
