"""
Segment crossing predicates.

`segments_intersect` is the boolean orientation test used while building
the graph. Its strict comparisons make collinear segments count as not
crossing. Segments sharing an endpoint are not exempt: the result then
depends on which endpoints are passed as which argument.
`segments_intersect_strict` is an opt-in signed-orientation variant.
"""


def ccw(p1, p2, p3) -> bool:
    """True when p1, p2, p3 turn counter-clockwise (y axis up)."""
    return (p3.y - p1.y) * (p2.x - p1.x) > (p2.y - p1.y) * (p3.x - p1.x)


def segments_intersect(a, b, c, d) -> bool:
    """Check whether segment AB crosses segment CD."""
    return ccw(a, c, d) != ccw(b, c, d) and ccw(a, b, c) != ccw(a, b, d)


def _orientation(p1, p2, p3) -> float:
    return (p2.x - p1.x) * (p3.y - p1.y) - (p2.y - p1.y) * (p3.x - p1.x)


def _on_segment(p, q, r) -> bool:
    """For collinear p, q, r: True when q lies within the box of pr."""
    return (min(p.x, r.x) <= q.x <= max(p.x, r.x)
            and min(p.y, r.y) <= q.y <= max(p.y, r.y))


def _same_point(p, q) -> bool:
    return p.x == q.x and p.y == q.y


def _collinear_overlap(a, b, c, d) -> bool:
    """For collinear AB and CD: True when they share more than a point."""
    if abs(b.x - a.x) >= abs(b.y - a.y):
        a_lo, a_hi = sorted((a.x, b.x))
        c_lo, c_hi = sorted((c.x, d.x))
    else:
        a_lo, a_hi = sorted((a.y, b.y))
        c_lo, c_hi = sorted((c.y, d.y))
    return min(a_hi, c_hi) - max(a_lo, c_lo) > 0


def segments_intersect_strict(a, b, c, d) -> bool:
    """
    Symmetric crossing test that also reports touching and collinear overlap.

    Segments sharing an endpoint may meet there, but not overlap beyond it.
    Not used by the default pipeline.
    """
    o1 = _orientation(a, b, c)
    o2 = _orientation(a, b, d)
    o3 = _orientation(c, d, a)
    o4 = _orientation(c, d, b)

    if o1 * o2 < 0 and o3 * o4 < 0:
        return True

    if any(_same_point(p, q) for p in (a, b) for q in (c, d)):
        return o1 == 0 and o2 == 0 and _collinear_overlap(a, b, c, d)

    # An endpoint resting on the other segment
    return ((o1 == 0 and _on_segment(a, c, b))
            or (o2 == 0 and _on_segment(a, d, b))
            or (o3 == 0 and _on_segment(c, a, d))
            or (o4 == 0 and _on_segment(c, b, d)))
