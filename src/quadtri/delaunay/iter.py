'''
Iterators over the quad-edge mesh.
'''

# ------------------------------------------------------------------------------
# Iterators
#


class EdgeIterator(object):
    """Iterator over all undirected edges that can be reached from start.

    Depth first: all quarter-edges in the orbit around a vertex are visited
    via next, for an edge not seen before the walk continues around its
    destination. Every edge is returned once (as one of its two primal
    quarter-edges), edges are told apart by their quad-edge index, not by
    the location of their end points.
    """

    def __init__(self, start):
        self.seen = set()  # quad-edges returned
        self.visited = set()  # primal quarter-edges whose orbit was walked
        self.to_visit_stack = [start]
        self.pending = []

    def __iter__(self):
        return self

    def __next__(self):
        while self.pending or self.to_visit_stack:
            if self.pending:
                return self.pending.pop()
            edge = self.to_visit_stack.pop()
            if edge.index in self.visited:
                continue
            found = []
            cur = edge
            while True:
                self.visited.add(cur.index)
                if cur.quad not in self.seen:
                    self.seen.add(cur.quad)
                    found.append(cur)
                    self.to_visit_stack.append(cur.sym)
                cur = cur.next
                if cur == edge:
                    break
            # return in the order encountered around the vertex
            found.reverse()
            self.pending = found
        raise StopIteration()


def enumerate_edges(start):
    """Iterator over every undirected edge reachable from start"""
    return EdgeIterator(start)


class StarEdgeIterator(object):
    """Returns iterator over edges in the star of the origin of edge

    The edges are returned in the order of next (counterclockwise in the
    frame of the mesh), starting with edge itself.
    """

    def __init__(self, edge):
        self.start = edge
        self.edge = edge
        self.done = False

    def __iter__(self):
        return self

    def __next__(self):
        if not self.done:
            e = self.edge
            self.edge = e.next
            if self.edge == self.start:
                self.done = True
            return e
        else:  # we are at start again
            raise StopIteration()


class FaceIterator(object):
    """Iterator over all faces that can be reached from start.

    A face is the orbit of lnext; it is returned as tuple of its vertices.
    Note that the outside of the bounding triangle is also a face.
    """

    def __init__(self, start):
        self.edges = EdgeIterator(start)
        self.visited = set()
        self.pending = []

    def __iter__(self):
        return self

    def __next__(self):
        while True:
            while self.pending:
                edge = self.pending.pop()
                if edge.index in self.visited:
                    continue
                vertices = []
                cur = edge
                while True:
                    self.visited.add(cur.index)
                    vertices.append(cur.origin)
                    cur = cur.lnext
                    if cur == edge:
                        break
                return tuple(vertices)
            # raises StopIteration when all edges are exhausted
            edge = next(self.edges)
            self.pending = [edge.sym, edge]
