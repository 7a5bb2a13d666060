"""2D segment geometry used by conflict detection."""
from typing import Tuple

Point = Tuple[float, float]

COLLINEAR = 0
CLOCKWISE = 1
COUNTER_CLOCKWISE = 2


def orientation(p: Point, q: Point, r: Point) -> int:
    """Orientation of the ordered triplet (p, q, r)."""
    val = (q[1] - p[1]) * (r[0] - q[0]) - (q[0] - p[0]) * (r[1] - q[1])
    if val == 0:
        return COLLINEAR
    return CLOCKWISE if val > 0 else COUNTER_CLOCKWISE


def on_segment(p: Point, q: Point, r: Point) -> bool:
    """Check if q lies on segment p-r, given the three points are collinear."""
    return (min(p[0], r[0]) <= q[0] <= max(p[0], r[0]) and
            min(p[1], r[1]) <= q[1] <= max(p[1], r[1]))


def segments_intersect(p1: Point, q1: Point, p2: Point, q2: Point) -> bool:
    """
    Check if segment (p1->q1) intersects segment (p2->q2).

    Touching endpoints and collinear overlap count as intersection.
    """
    o1 = orientation(p1, q1, p2)
    o2 = orientation(p1, q1, q2)
    o3 = orientation(p2, q2, p1)
    o4 = orientation(p2, q2, q1)

    if o1 != o2 and o3 != o4:
        return True

    # Collinear special cases
    if o1 == COLLINEAR and on_segment(p1, p2, q1):
        return True
    if o2 == COLLINEAR and on_segment(p1, q2, q1):
        return True
    if o3 == COLLINEAR and on_segment(p2, p1, q2):
        return True
    if o4 == COLLINEAR and on_segment(p2, q1, q2):
        return True

    return False
