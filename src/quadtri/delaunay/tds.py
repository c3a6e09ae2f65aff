'''
Triangulation data structure: vertices, the builders that grow a quad-edge
mesh one triangle at a time and the Triangulation container.
'''
from math import hypot

from quadtri.delaunay.quadedge import Mesh, make_edge, splice, connect
from quadtri.delaunay.iter import EdgeIterator, FaceIterator


def box(points):
    """Obtain a tight fitting axis-aligned box around point set"""
    xmin = min(points, key=lambda x: x[0])[0]
    ymin = min(points, key=lambda x: x[1])[1]
    xmax = max(points, key=lambda x: x[0])[0]
    ymax = max(points, key=lambda x: x[1])[1]
    return (xmin, ymin), (xmax, ymax)


class Vertex(object):
    """A vertex in the mesh.

    Vertices of the bounding triangle are flagged as boundary, inserted
    points are interior. Can carry extra information via its info property.
    """
    __slots__ = ('x', 'y', 'info', 'boundary')

    def __init__(self, x, y, info=None, boundary=False):
        self.x = float(x)
        self.y = float(y)
        self.info = info
        self.boundary = boundary

    def __str__(self):
        return "{0} {1}".format(self.x, self.y)

    def __repr__(self):
        return "Vertex({0}, {1})".format(self.x, self.y)

    def __getitem__(self, i):
        if i == 0:
            return self.x
        elif i == 1:
            return self.y
        else:
            raise IndexError("No such ordinate: {}".format(i))

    def __len__(self):
        return 2

    def __eq__(self, other):
        if other is None:
            return False
        return True if self.x == other[0] and self.y == other[1] else False

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self.x, self.y))

    def distance(self, other):
        """Cartesian distance to other point """
        return hypot(self.x - other[0], self.y - other[1])

    @property
    def is_finite(self):
        return not self.boundary

    @property
    def xy(self):
        return (self.x, self.y)


def as_vertex(point, boundary=False):
    """Wrap a point (a 2-tuple or similar) in a Vertex, if it is not one"""
    if isinstance(point, Vertex):
        return point
    return Vertex(point[0], point[1], boundary=boundary)


def create_triangle(mesh, p0, p1, p2):
    """Builds the three quad-edges p0->p1, p1->p2 and p2->p0 and splices
    them at their shared vertices, so that they bound one triangular face.

    Returns the quarter-edge p0->p1.
    """
    p0, p1, p2 = as_vertex(p0), as_vertex(p1), as_vertex(p2)
    ab = make_edge(mesh, p0, p1)
    bc = make_edge(mesh, p1, p2)
    ca = make_edge(mesh, p2, p0)
    splice(ab.sym, bc)
    splice(bc.sym, ca)
    splice(ca.sym, ab)
    return ab


def insert_point(containing, point):
    """Subdivides the face left of containing by a new vertex at point.

    Pre-condition: point lies strictly inside the triangle bounded by
    containing, containing.lnext and containing.lnext.lnext (not checked)

    A first spoke is made from the origin of containing to point, the other
    spokes are connected while walking around the face. The first spoke is
    returned; its origin stays in the mesh, so it remains a valid reference
    after later flips.
    """
    point = as_vertex(point)
    first = make_edge(containing.mesh, containing.origin, point)
    splice(first, containing)
    spoke = first
    edge = containing
    while True:
        spoke = connect(edge, spoke.sym)
        edge = spoke.prev
        if edge.lnext == first:
            break
    return first


class Triangulation(object):
    """Triangulation data structure.

    Holds the quad-edge mesh, the three vertices of the bounding triangle,
    the identities of its three edges and the vertices inserted so far.
    The start edge is a reference from which the whole mesh can be reached
    (and from where the next walk starts).
    """

    def __init__(self, p0, p1, p2):
        self.mesh = Mesh()
        self.corners = [as_vertex(p, boundary=True) for p in (p0, p1, p2)]
        for v in self.corners:
            v.boundary = True
        self.start = create_triangle(self.mesh, *self.corners)
        e = self.start
        self.boundary = set()
        for _ in range(3):
            self.boundary.add(e.quad)
            e = e.lnext
        self.vertices = []

    def is_boundary_edge(self, edge):
        """Whether edge is one of the three edges of the bounding triangle
        (by identity, not by location)
        """
        return edge.quad in self.boundary

    def edges(self, finite_only=False):
        """Iterator over all undirected edges (as quarter-edges).

        With finite_only, edges touching the bounding triangle are skipped.
        """
        for e in EdgeIterator(self.start):
            if finite_only and (e.origin.boundary or e.dest.boundary):
                continue
            yield e

    def segments(self, finite_only=False):
        """List of ((x0, y0), (x1, y1)) pairs, one per edge"""
        return [(e.origin.xy, e.dest.xy) for e in self.edges(finite_only)]

    def triangles(self, finite_only=True):
        """List of triangles as 3-tuples of vertices.

        By default only triangles without a vertex of the bounding triangle
        are returned. Otherwise, all faces are returned, including the
        outside of the bounding triangle.
        """
        result = []
        for face in FaceIterator(self.start):
            if finite_only and any(v.boundary for v in face):
                continue
            result.append(face)
        return result
