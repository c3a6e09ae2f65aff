'''
Quad-edge data structure (Guibas & Stolfi, 1985).

@article{Guibas1985,
  doi = {10.1145/282918.282923},
  year = {1985},
  volume = {4},
  number = {2},
  pages = {74--123},
  author = {Leonidas Guibas and Jorge Stolfi},
  title = {Primitives for the manipulation of general subdivisions and
           the computation of Voronoi diagrams},
  journal = {ACM Transactions on Graphics}
}

All quarter-edges live in one arena (Mesh) and are addressed by an integer
index. Quarter-edge 4 * q + r is rotation r of quad-edge q:

    r = 0: start -> end
    r = 1: dual, between the two faces
    r = 2: end -> start
    r = 3: dual, reversed

so rot is computed from the index and never stored.
'''


class Mesh(object):
    """Arena holding the next pointers and origins of all quarter-edges"""

    __slots__ = ('next', 'origin')

    def __init__(self):
        self.next = []
        self.origin = []

    def __len__(self):
        """Number of quad-edges allocated in the arena"""
        return len(self.next) // 4

    def edge(self, index):
        """Handle to the quarter-edge with given index"""
        return QuarterEdge(self, index)


class QuarterEdge(object):
    """Handle to one quarter-edge in a Mesh.

    Two handles are equal when they refer to the same record of the same
    mesh, so handles can be created freely while traversing.
    """

    __slots__ = ('mesh', 'index')

    def __init__(self, mesh, index):
        self.mesh = mesh
        self.index = index

    def __eq__(self, other):
        if not isinstance(other, QuarterEdge):
            return False
        return self.mesh is other.mesh and self.index == other.index

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((id(self.mesh), self.index))

    def __repr__(self):
        return "QuarterEdge({0}: {1} -> {2})".format(
            self.index, self.origin, self.dest)

    @property
    def quad(self):
        """Index of the quad-edge this quarter-edge belongs to"""
        return self.index >> 2

    @property
    def is_primal(self):
        return self.index & 1 == 0

    @property
    def rot(self):
        i = self.index
        return QuarterEdge(self.mesh, (i & ~3) | ((i + 1) & 3))

    @property
    def sym(self):
        i = self.index
        return QuarterEdge(self.mesh, (i & ~3) | ((i + 2) & 3))

    @property
    def rot_inv(self):
        i = self.index
        return QuarterEdge(self.mesh, (i & ~3) | ((i + 3) & 3))

    @property
    def next(self):
        """Next quarter-edge counterclockwise around the origin (or face)"""
        return QuarterEdge(self.mesh, self.mesh.next[self.index])

    @property
    def prev(self):
        return self.rot.next.rot

    @property
    def lnext(self):
        """Next quarter-edge around the left face"""
        return self.rot_inv.next.rot

    @property
    def lprev(self):
        """Previous quarter-edge around the left face"""
        return self.next.sym

    @property
    def origin(self):
        return self.mesh.origin[self.index]

    @origin.setter
    def origin(self, point):
        self.mesh.origin[self.index] = point

    @property
    def dest(self):
        return self.sym.origin

    @property
    def segment(self):
        return (self.origin, self.dest)


def make_edge(mesh, start, end):
    """Allocates a new quad-edge from start to end, not connected to anything.

    Returns the quarter-edge that has start as origin.
    """
    base = len(mesh.next)
    # vertex quarter-edges are their own next,
    # the two face quarter-edges point to each other
    mesh.next.extend([base, base + 3, base + 2, base + 1])
    mesh.origin.extend([start, None, end, None])
    return QuarterEdge(mesh, base)


def _swap_next(mesh, a, b):
    mesh.next[a], mesh.next[b] = mesh.next[b], mesh.next[a]


def splice(a, b):
    """Merges the orbits of a and b when they are distinct,
    splits them when they are the same.

    The dual orbits are changed correspondingly.
    """
    assert a.mesh is b.mesh
    mesh = a.mesh
    alpha = a.next.rot
    beta = b.next.rot
    _swap_next(mesh, a.index, b.index)
    _swap_next(mesh, alpha.index, beta.index)


def flip(edge):
    """Turns edge into the other diagonal of the quadrilateral formed by its
    two adjacent triangles.

    Pre-condition: both faces of edge are triangles (not checked)
    """
    a = edge.prev
    b = edge.sym.prev
    splice(edge, a)
    splice(edge.sym, b)
    splice(edge, a.lnext)
    splice(edge.sym, b.lnext)
    edge.origin = a.dest
    edge.sym.origin = b.dest


def connect(a, b):
    """Adds a new edge from the destination of a to the origin of b,
    so that a, the new edge and b share the same left face.
    """
    e = make_edge(a.mesh, a.dest, b.origin)
    splice(e, a.lnext)
    splice(e.sym, b)
    return e


def sever(edge):
    """Disconnects edge from the rest of the mesh (the records stay in the
    arena, but are no longer reachable)
    """
    splice(edge, edge.prev)
    splice(edge.sym, edge.sym.prev)


def check_consistency(start):
    """Asserts the quad-edge invariants for all quarter-edges that can be
    reached from start via next and rot.

    Returns the number of quad-edges visited.
    """
    seen = set()
    stack = [start]
    while stack:
        e = stack.pop()
        if e.index in seen:
            continue
        seen.add(e.index)
        assert e.rot.rot.rot.rot == e
        assert e.sym.sym == e
        assert e.rot_inv.rot == e
        # next stays within primal or dual records
        assert e.next.is_primal == e.is_primal
        # next is a permutation: prev undoes it
        assert e.next.prev == e, "broken orbit at {}".format(e.index)
        if e.is_primal:
            assert e.origin is not None
            assert e.origin is not e.dest, "loop edge {}".format(e.index)
            assert e.lnext.origin is e.dest
        else:
            assert e.origin is None
        # the orbit of next closes without passing e twice
        ct = 0
        cur = e.next
        while cur != e:
            ct += 1
            assert ct <= len(e.mesh.next), "open orbit at {}".format(e.index)
            cur = cur.next
        stack.append(e.next)
        stack.append(e.rot)
    return len(set(i >> 2 for i in seen))
