'''
Geometric predicates used for walking and legalizing the mesh.

By default these are evaluated with ordinary floating point arithmetic,
so colinear and cocircular configurations are decided by the sign of a
noisy determinant. Passing exact=True evaluates the same signs with
Shewchuk's adaptive precision predicates (geompreds).
'''

from geompreds import orient2d as robust_orient2d
from geompreds import incircle as robust_incircle


def orient2d(pa, pb, pc):
    """Determinant of the 3x3 matrix with rows [x, y, 1] for pa, pb and pc.

    positive: pa, pb, pc turn counterclockwise
    zero:     colinear
    negative: clockwise

    returns twice signed area under triangle pa, pb, pc
    """
    detleft = (pa[0] - pc[0]) * (pb[1] - pc[1])
    detright = (pa[1] - pc[1]) * (pb[0] - pc[0])
    det = detleft - detright
    return det


def incircle(pa, pb, pc, pd):
    """Determinant of the 3x3 matrix with rows
    [x - pd.x, y - pd.y, |v|^2 - |pd|^2] for v in pa, pb and pc.

    Positive when pd lies inside the circle through pa, pb, pc and these
    three have a positive orientation, the sign flips for the other winding.
    """
    adx = pa[0] - pd[0]
    bdx = pb[0] - pd[0]
    cdx = pc[0] - pd[0]
    ady = pa[1] - pd[1]
    bdy = pb[1] - pd[1]
    cdy = pc[1] - pd[1]
    dlift = pd[0] * pd[0] + pd[1] * pd[1]
    alift = pa[0] * pa[0] + pa[1] * pa[1] - dlift
    blift = pb[0] * pb[0] + pb[1] * pb[1] - dlift
    clift = pc[0] * pc[0] + pc[1] * pc[1] - dlift
    det = alift * (bdx * cdy - cdx * bdy) + \
        blift * (cdx * ady - adx * cdy) + \
        clift * (adx * bdy - bdx * ady)
    return det


def orientation_is_clockwise(a, b, c, exact=False):
    """True when the orientation determinant of a, b, c is strictly negative.

    In the frame of the mesh this means that c lies left of the directed
    line a -> b. Colinear points are not clockwise.
    """
    if exact:
        return robust_orient2d(a, b, c) < 0
    return orient2d(a, b, c) < 0


def is_point_in_circumcircle(a, b, c, p, exact=False):
    """True when the in-circle determinant of a, b, c and p is strictly
    positive.

    The answer means 'p inside the circumcircle' only when a, b, c are
    given with a positive orientation determinant (the reverse of what
    orientation_is_clockwise reports); otherwise it is silently inverted.
    Points on the circle are not inside.
    """
    if exact:
        return robust_incircle(a, b, c, p) > 0
    return incircle(a, b, c, p) > 0
