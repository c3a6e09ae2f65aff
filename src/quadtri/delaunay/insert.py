'''
Incremental Delaunay triangulation on a quad-edge mesh.

Points are inserted one at a time: the triangle containing the point is
located by walking the mesh, the triangle is split around the new vertex
and the Delaunay criterion is restored by flipping edges (Lawson's
incremental algorithm, in the formulation of Guibas & Stolfi).
'''

import logging
import time

from quadtri.delaunay.tds import box, Vertex, Triangulation, insert_point
from quadtri.delaunay.quadedge import flip
from quadtri.delaunay.iter import StarEdgeIterator
from quadtri.delaunay.preds import orientation_is_clockwise, \
    is_point_in_circumcircle

# states of the inserter, reported to the diagnostic hook
WALKING = "walking"
LEGALIZING = "legalizing"
DONE = "done"

# padding used when all points share the same location
PAD_FALLBACK = 1.0


class CircularWalkError(RuntimeError):
    """The walk to locate a point came back to an edge it already tested.

    Happens for points that lie outside of the bounding triangle.
    """


def super_triangle(bounds):
    """Large triangle around the axis-aligned box bounds, given as
    ((xmin, ymin), (xmax, ymax)).

    The padding is the sum of the width and height of the box, so that
    the triangle stays well away from the points inside.
    """
    (xmin, ymin), (xmax, ymax) = bounds
    xspan = float(xmax - xmin)
    yspan = float(ymax - ymin)
    pad = xspan + yspan
    if pad == 0:
        pad = PAD_FALLBACK
    lower_left = Vertex(xmin - 0.5 * xspan - pad, ymin - pad, boundary=True)
    lower_right = Vertex(xmax + 0.5 * xspan + pad, ymin - pad, boundary=True)
    upper = Vertex(xmin + 0.5 * xspan, ymax + 0.5 * yspan + pad, boundary=True)
    return lower_left, lower_right, upper


class PointInserter(object):
    """Class to insert points into a Triangulation.

    It is ensured that the triangles that are made, are obeying the Delaunay
    criterion by flipping. The edges of the bounding triangle are never
    flipped.

    The optional hook is called as hook(state, edge, point) for every edge
    tested during walking and legalizing, and once with DONE when a point
    is fully inserted.
    """

    __slots__ = ('triangulation', 'flips', 'visits', 'exact', 'hook')

    def __init__(self, triangulation, exact=False, hook=None):
        self.triangulation = triangulation
        self.flips = 0
        self.visits = 0
        self.exact = exact
        self.hook = hook

    def insert(self, points, infos=None):
        """Insert a list of points into the triangulation.

        When given, infos should hold one item per point.
        """
        if infos is not None and len(infos) != len(points):
            raise ValueError(
                "Got {} infos for {} points".format(len(infos), len(points)))
        for j, pt in enumerate(points):
            v = self.append(pt)
            if infos is not None:
                v.info = infos[j]
            if (j % 10000) == 0:
                logging.debug(" inserted {} points".format(j + 1))

    def append(self, pt):
        """Appends one point to the triangulation, returns its Vertex.

        This method assumes that the point lies inside the bounding
        triangle of the triangulation.
        """
        v = Vertex(pt[0], pt[1])
        logging.debug(" - inserting {}".format(v))
        containing = self.locate(v)
        spoke = insert_point(containing, v)
        self.triangulation.vertices.append(v)
        self.legalize(spoke)
        # the spoke survives all flips, start the next walk from here
        self.triangulation.start = spoke
        if self.hook is not None:
            self.hook(DONE, spoke, v)
        return v

    def left_of(self, p, edge):
        return orientation_is_clockwise(edge.origin, edge.dest, p,
                                        exact=self.exact)

    def right_of(self, p, edge):
        return orientation_is_clockwise(p, edge.dest, edge.origin,
                                        exact=self.exact)

    def separates(self, p, q, a, b):
        """Whether a and b lie strictly on opposite sides of the line p-q.

        For a diagonal p-q of quadrilateral p, a, q, b this means the
        quadrilateral is convex at a and b.
        """
        cw = orientation_is_clockwise
        exact = self.exact
        return (cw(p, q, a, exact) and cw(q, p, b, exact)) or \
            (cw(q, p, a, exact) and cw(p, q, b, exact))

    def locate(self, p, start=None):
        """Walk from start (or the start edge of the triangulation) to an
        edge that has p inside its left face.

        The triangle under consideration is the left face of the current
        edge. If p lies beyond the current edge, the walk crosses over to
        the neighbouring triangle, if p lies beyond one of the two other
        edges it continues in the triangle across that edge.

        Points on an edge are not specially handled: they end up in one of
        the two triangles sharing that edge.

        Every quarter-edge is tested at most once, coming back to one means
        the walk would cycle forever, which is raised as CircularWalkError.
        """
        cur = self.triangulation.start if start is None else start
        visited = set()
        while True:
            if cur.index in visited:
                raise CircularWalkError(
                    "trapped in circular loop while locating {} "
                    "({} edges tested)".format(p, len(visited)))
            visited.add(cur.index)
            self.visits += 1
            if self.hook is not None:
                self.hook(WALKING, cur, p)
            if cur.origin == p or cur.dest == p:
                raise ValueError("Duplicate point found for insertion")
            if self.left_of(p, cur):
                lnext = cur.lnext
                if self.right_of(p, lnext.lnext):
                    # rotate to next triangle around the origin
                    cur = cur.next
                elif self.right_of(p, lnext):
                    cur = lnext.sym
                else:
                    # skip insertion of point, if it is on same location
                    # already there
                    if lnext.dest == p:
                        raise ValueError(
                            "Duplicate point found for insertion")
                    return cur
            elif self.right_of(p, cur):
                # cross over to the neighbouring triangle
                cur = cur.sym
            else:
                # p on the line through cur, turn away from it
                cur = cur.next

    def legalize(self, spoke):
        """Flips edges around the vertex just inserted (the destination of
        spoke) until all triangles around it are Delaunay.

        The edges on the ring around the new vertex are visited starting
        at the ring edge before spoke. After a flip the two edges that
        became part of the ring are tested next.
        """
        e = spoke.lprev
        while True:
            if self.hook is not None:
                self.hook(LEGALIZING, e, spoke.dest)
            if self.should_flip(e, spoke.dest):
                flip(e)
                self.flips += 1
                e = e.prev
            elif e.next == spoke:
                break
            else:
                e = e.next.lprev

    def should_flip(self, e, x):
        """Whether ring edge e (with the new vertex x on its left) violates
        the Delaunay criterion and can be flipped safely.
        """
        if self.triangulation.is_boundary_edge(e):
            return False
        a, b = e.origin, e.dest
        d = e.prev.dest
        if not self.right_of(d, e):
            return False
        if (a.boundary or b.boundary) and not self.separates(x, d, a, b):
            return False
        # a flip would duplicate an edge x-d that is already there
        for spoke in StarEdgeIterator(e.next.sym):
            if spoke.dest is d:
                return False
        return is_point_in_circumcircle(a, x, b, d, exact=self.exact) or \
            is_point_in_circumcircle(a, b, d, x, exact=self.exact)


def triangulate(points, infos=None, bounds=None, exact=False, hook=None):
    """Triangulate a set of points.

    The points are inserted in the order given into a large triangle
    around bounds (defaults to the bounding box of the points).
    """
    if bounds is None:
        if not points:
            raise ValueError("Cannot determine bounds without points")
        bounds = box(points)
    start = time.perf_counter()
    dt = Triangulation(*super_triangle(bounds))
    incremental = PointInserter(dt, exact=exact, hook=hook)
    incremental.insert(points, infos)
    end = time.perf_counter()

    logging.debug("Triangulating took: " + str(end - start) + " secs")
    logging.debug("{} vertices".format(len(dt.vertices)))
    logging.debug("{} quad-edges".format(len(dt.mesh)))
    logging.debug("{} flips".format(incremental.flips))
    logging.debug("{} visits".format(incremental.visits))
    if len(dt.vertices) > 0:
        logging.debug(str(float(incremental.flips) /
                          len(dt.vertices)) + " flips per insert")
    return dt
