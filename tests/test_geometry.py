import pytest

from polyquery.geometry import (
    Point,
    Polygon,
    area_even_odd,
    area_mean,
    area_num_of_vertexes,
    count_even_odd,
    count_intersecting,
    count_rects,
    count_vertexes,
    is_rect,
    is_right_angle,
    max_metric,
    min_metric,
    orientation,
    point_in_polygon,
    point_on_segment,
    polygon_area,
    polygons_intersect,
    segments_intersect,
)


def poly(*coords):
    return Polygon(tuple(Point(x, y) for x, y in coords))


def square(x0, y0, size):
    return poly((x0, y0), (x0, y0 + size), (x0 + size, y0 + size), (x0 + size, y0))


SQUARE = square(0, 0, 2)
TRIANGLE = poly((0, 0), (0, 2), (2, 2))
PENTAGON = poly((0, 0), (0, 3), (2, 4), (4, 3), (4, 0))
HEXAGON = poly((1, 0), (0, 1), (0, 2), (1, 3), (2, 2), (2, 1))
SAMPLE = [SQUARE, TRIANGLE, PENTAGON, HEXAGON, square(5, 5, 3)]


def test_square_area():
    assert polygon_area(SQUARE.points) == 4.0


def test_empty_points_have_zero_area():
    assert polygon_area(()) == 0.0


def test_area_invariant_under_reversal_and_translation():
    reversed_pentagon = Polygon(tuple(reversed(PENTAGON.points)))
    moved = Polygon(tuple(Point(p.x + 7, p.y - 3) for p in PENTAGON.points))
    assert reversed_pentagon.area() == PENTAGON.area()
    assert moved.area() == PENTAGON.area()


def test_triangle_is_half_of_square():
    triangle_area = polygon_area(TRIANGLE.points)
    assert triangle_area == 2.0
    assert triangle_area * 2 == polygon_area(SQUARE.points)


def test_polygon_area_method_matches_function():
    assert HEXAGON.area() == polygon_area(HEXAGON.points)


def test_vertex_count_and_points_tuple():
    polygon = Polygon([Point(0, 0), Point(1, 0), Point(0, 1)])
    assert polygon.vertex_count() == 3
    assert polygon.points == (Point(0, 0), Point(1, 0), Point(0, 1))


def test_even_and_odd_areas_split_the_total():
    total = sum(p.area() for p in SAMPLE)
    assert area_even_odd("EVEN", SAMPLE) + area_even_odd("ODD", SAMPLE) == pytest.approx(total)
    assert area_even_odd("ODD", SAMPLE) == TRIANGLE.area() + PENTAGON.area()


def test_area_even_odd_without_matches():
    assert area_even_odd("ODD", [SQUARE, HEXAGON]) == 0.0


def test_area_mean_times_count_is_total():
    total = sum(p.area() for p in SAMPLE)
    assert area_mean(SAMPLE) * len(SAMPLE) == pytest.approx(total)


def test_area_mean_of_nothing_is_zero():
    assert area_mean([]) == 0.0


def test_area_num_of_vertexes():
    quads = [p for p in SAMPLE if p.vertex_count() == 4]
    assert area_num_of_vertexes(4, SAMPLE) == sum(p.area() for p in quads)
    assert area_num_of_vertexes(9, SAMPLE) == 0.0


def test_max_and_min_area():
    areas = [p.area() for p in SAMPLE]
    assert max_metric("AREA", SAMPLE) == max(areas)
    assert min_metric("AREA", SAMPLE) == min(areas)


def test_max_and_min_vertexes():
    counts = [p.vertex_count() for p in SAMPLE]
    assert max_metric("VERTEXES", SAMPLE) == max(counts)
    assert min_metric("VERTEXES", SAMPLE) == min(counts)


@pytest.mark.parametrize("func", [max_metric, min_metric])
def test_metric_on_empty_raises(func):
    with pytest.raises(ValueError):
        func("AREA", [])


@pytest.mark.parametrize("func", [max_metric, min_metric])
def test_unknown_metric_raises(func):
    with pytest.raises(ValueError):
        func("PERIMETER", SAMPLE)


def test_count_even_odd_partitions():
    even = count_even_odd("EVEN", SAMPLE)
    odd = count_even_odd("ODD", SAMPLE)
    assert even + odd == len(SAMPLE)
    assert odd == len([TRIANGLE, PENTAGON])


def test_count_vertexes_matches_filter():
    for n in (3, 4, 5, 6, 7):
        assert count_vertexes(n, SAMPLE) == len([p for p in SAMPLE if p.vertex_count() == n])


def test_is_right_angle():
    assert is_right_angle(Point(1, 0), Point(0, 0), Point(0, 1)) is True
    assert is_right_angle(Point(1, 0), Point(0, 0), Point(1, 1)) is False


def test_is_rect():
    assert is_rect(SQUARE) is True
    assert is_rect(poly((0, 1), (1, 2), (2, 1), (1, 0))) is True
    assert is_rect(poly((0, 0), (1, 2), (4, 2), (3, 0))) is False
    assert is_rect(TRIANGLE) is False


def test_count_rects():
    parallelogram = poly((0, 0), (1, 2), (4, 2), (3, 0))
    data = [SQUARE, parallelogram, TRIANGLE, square(5, 5, 3)]
    assert count_rects(data) == len([SQUARE, square(5, 5, 3)])


def test_orientation_sign_and_symmetry():
    a, b, p = Point(0, 0), Point(1, 0), Point(0, 1)
    assert orientation(a, b, p) == -1
    assert orientation(b, a, p) == -orientation(a, b, p)
    assert orientation(a, b, Point(5, 0)) == 0


def test_point_on_segment():
    assert point_on_segment(Point(0, 0), Point(1, 1), Point(2, 2)) is True
    assert point_on_segment(Point(0, 0), Point(3, 3), Point(2, 2)) is False


def test_crossing_segments():
    assert segments_intersect(Point(0, 0), Point(2, 2), Point(0, 2), Point(2, 0)) is True


def test_parallel_segments_do_not_meet():
    assert segments_intersect(Point(0, 0), Point(2, 0), Point(0, 1), Point(2, 1)) is False


def test_touching_segments_meet():
    assert segments_intersect(Point(0, 0), Point(2, 0), Point(2, 0), Point(2, 2)) is True


def test_collinear_segments():
    assert segments_intersect(Point(0, 0), Point(3, 0), Point(2, 0), Point(5, 0)) is True
    assert segments_intersect(Point(0, 0), Point(1, 0), Point(3, 0), Point(4, 0)) is False


def test_segments_intersect_is_symmetric():
    args = (Point(0, 0), Point(4, 1), Point(1, -2), Point(2, 3))
    a1, b1, a2, b2 = args
    assert segments_intersect(a1, b1, a2, b2) == segments_intersect(a2, b2, a1, b1)


def test_point_in_polygon():
    big = square(0, 0, 10)
    assert point_in_polygon(Point(5, 5), big) is True
    assert point_in_polygon(Point(15, 5), big) is False


def test_point_in_degenerate_polygon():
    assert point_in_polygon(Point(0, 0), poly((-1, -1), (1, 1))) is False


def test_polygons_overlap():
    assert polygons_intersect(square(0, 0, 2), square(1, 1, 2)) is True


def test_polygons_disjoint():
    assert polygons_intersect(square(0, 0, 1), square(5, 5, 1)) is False


def test_polygon_containment_counts_as_intersection():
    big, small = square(0, 0, 10), square(2, 2, 2)
    assert polygons_intersect(big, small) is True
    assert polygons_intersect(small, big) is True


def test_count_intersecting():
    target = square(1, 1, 2)
    data = [square(0, 0, 2), square(5, 5, 1), square(2, 2, 1), square(20, 20, 3)]
    expected = [p for p in data if polygons_intersect(p, target)]
    assert count_intersecting(data, target) == len(expected)
    assert count_intersecting([], target) == 0