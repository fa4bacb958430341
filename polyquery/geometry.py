"""Integer-coordinate polygons and the queries run over collections of them."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import pairwise
from typing import Iterable, Sequence

EVEN = "EVEN"
ODD = "ODD"
AREA = "AREA"
VERTEXES = "VERTEXES"


@dataclass(frozen=True)
class Point:
    """A point on the integer grid."""

    x: int
    y: int


@dataclass(frozen=True)
class Polygon:
    """A polygon given by its vertices in order."""

    points: tuple[Point, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))

    def area(self) -> float:
        """Return the area enclosed by the vertices (shoelace formula)."""
        return polygon_area(self.points)

    def vertex_count(self) -> int:
        """Return the number of vertices."""
        return len(self.points)


def _edges(points: Sequence[Point]):
    """Yield each edge as a pair of consecutive vertices, closing the ring."""
    if not points:
        return iter(())
    return pairwise((*points, points[0]))


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def polygon_area(points: Sequence[Point]) -> float:
    """Return the area of the polygon with the given vertices."""
    doubled = sum(p1.x * p2.y - p1.y * p2.x for p1, p2 in _edges(points))
    return abs(float(doubled)) / 2.0


def _is_even(polygon: Polygon) -> bool:
    return polygon.vertex_count() % 2 == 0


def area_even_odd(parity: str, polygons: Iterable[Polygon]) -> float:
    """Sum the areas of polygons with an even ("EVEN") or odd vertex count."""
    want_even = parity == EVEN
    return sum((p.area() for p in polygons if _is_even(p) == want_even), 0.0)


def area_mean(polygons: Sequence[Polygon]) -> float:
    """Return the mean area, or 0.0 when there are no polygons."""
    if not polygons:
        return 0.0
    return sum((p.area() for p in polygons), 0.0) / len(polygons)


def area_num_of_vertexes(count: int, polygons: Iterable[Polygon]) -> float:
    """Sum the areas of polygons having exactly ``count`` vertices."""
    return sum((p.area() for p in polygons if p.vertex_count() == count), 0.0)


def _metric_key(kind: str):
    if kind == AREA:
        return Polygon.area
    if kind == VERTEXES:
        return Polygon.vertex_count
    raise ValueError(f"unknown metric: {kind!r}")


def max_metric(kind: str, polygons: Sequence[Polygon]) -> float | int:
    """Return the largest area ("AREA") or vertex count ("VERTEXES")."""
    key = _metric_key(kind)
    if not polygons:
        raise ValueError("no polygons to compare")
    return key(max(polygons, key=key))


def min_metric(kind: str, polygons: Sequence[Polygon]) -> float | int:
    """Return the smallest area ("AREA") or vertex count ("VERTEXES")."""
    key = _metric_key(kind)
    if not polygons:
        raise ValueError("no polygons to compare")
    return key(min(polygons, key=key))


def count_even_odd(parity: str, polygons: Iterable[Polygon]) -> int:
    """Count polygons with an even ("EVEN") or odd vertex count."""
    want_even = parity == EVEN
    return sum(1 for p in polygons if _is_even(p) == want_even)


def count_vertexes(count: int, polygons: Iterable[Polygon]) -> int:
    """Count polygons having exactly ``count`` vertices."""
    return sum(1 for p in polygons if p.vertex_count() == count)


def is_right_angle(a: Point, b: Point, c: Point) -> bool:
    """Tell whether the angle a-b-c at vertex b is a right angle."""
    return (a.x - b.x) * (c.x - b.x) + (a.y - b.y) * (c.y - b.y) == 0


def is_rect(polygon: Polygon) -> bool:
    """Tell whether the polygon is a rectangle."""
    if polygon.vertex_count() != 4:
        return False
    p0, p1, p2, p3 = polygon.points
    return is_right_angle(p0, p1, p2) and is_right_angle(p1, p2, p3) and is_right_angle(p2, p3, p0)


def count_rects(polygons: Iterable[Polygon]) -> int:
    """Count the rectangles among the polygons."""
    return sum(1 for p in polygons if is_rect(p))


def orientation(a: Point, b: Point, point: Point) -> int:
    """Return 0 if collinear, -1 if ``point`` is left of a->b, 1 if right."""
    pos = (b.x - a.x) * (point.y - a.y) - (b.y - a.y) * (point.x - a.x)
    if pos == 0:
        return 0
    return -1 if pos > 0 else 1


def point_on_segment(a: Point, b: Point, point: Point) -> bool:
    """Tell whether ``b`` lies within the bounding box of ``a`` and ``point``."""
    return (
        min(a.x, point.x) <= b.x <= max(a.x, point.x)
        and min(a.y, point.y) <= b.y <= max(a.y, point.y)
    )


def segments_intersect(a1: Point, b1: Point, a2: Point, b2: Point) -> bool:
    """Tell whether segment a1-b1 meets segment a2-b2."""
    o1 = orientation(a1, b1, a2)
    o2 = orientation(a1, b1, b2)
    o3 = orientation(a2, b2, a1)
    o4 = orientation(a2, b2, b1)
    if o1 * o2 < 0 and o3 * o4 < 0:
        return True
    return (
        (o1 == 0 and point_on_segment(a1, a2, b1))
        or (o2 == 0 and point_on_segment(a1, b2, b1))
        or (o3 == 0 and point_on_segment(a2, a1, b2))
        or (o4 == 0 and point_on_segment(a2, b1, b2))
    )


def point_in_polygon(point: Point, polygon: Polygon) -> bool:
    """Ray-casting test for a point strictly inside the polygon."""
    points = polygon.points
    if len(points) < 3:
        return False
    inside = False
    for pj, pi in pairwise((points[-1], *points)):
        if (pi.y > point.y) != (pj.y > point.y):
            crossing_x = _trunc_div((pj.x - pi.x) * (point.y - pi.y), pj.y - pi.y) + pi.x
            if point.x < crossing_x:
                inside = not inside
    return inside


def polygons_intersect(a: Polygon, b: Polygon) -> bool:
    """Tell whether two polygons share any point."""
    if any(
        segments_intersect(a1, a2, b1, b2)
        for a1, a2 in _edges(a.points)
        for b1, b2 in _edges(b.points)
    ):
        return True
    if a.points and b.points:
        return point_in_polygon(a.points[0], b) or point_in_polygon(b.points[0], a)
    return False


def count_intersecting(polygons: Iterable[Polygon], target: Polygon) -> int:
    """Count the polygons that intersect ``target``."""
    return sum(1 for p in polygons if polygons_intersect(p, target))