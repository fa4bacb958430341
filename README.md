# polyquery

`polyquery` reads a file of polygons with integer coordinates. It then answers queries about them, read from standard input.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install .[test]
```

## Polygon file format

Each line holds one polygon. A line starts with the vertex count, which must be at least 3. The vertices follow, each written as `(x;y)`:

```
3 (0;0) (0;3) (4;0)
4 (0;0) (0;2) (2;2) (2;0)
5 (0;0) (1;3) (4;4) (5;1) (2;-1)
```

Whitespace may appear between the parts of a point. The last vertex must be followed directly by the end of the line or the end of the file, so trailing spaces make a line invalid. Coordinates must fit in a signed 32-bit integer.

A line is skipped if it is malformed, if it has fewer or more vertices than its count says, or if it ends early. Reading carries on with the next line. Blank lines are ignored.

## Running

```
polyquery shapes.txt < queries.txt
```

Exactly one file name is expected. If more or fewer are given, the program prints `Error: incorrect file` to standard error and exits with status 1. If the file cannot be opened, it prints `Error: cannot open file` and exits with status 1.

Each query prints one line. When a query cannot be answered, the program prints `<INVALID COMMAND>` and discards the rest of the line the query was on.

## Queries

| Query | Result |
|-------|--------|
| `AREA EVEN` / `AREA ODD` | Total area of the polygons with an even / odd vertex count |
| `AREA MEAN` | Mean area of all polygons; invalid if no polygons were loaded |
| `AREA <n>` | Total area of the polygons with exactly `n` vertices (`n` made of digits, `n >= 3`) |
| `MAX AREA` / `MIN AREA` | Largest / smallest polygon area |
| `MAX VERTEXES` / `MIN VERTEXES` | Largest / smallest vertex count |
| `COUNT EVEN` / `COUNT ODD` | Number of polygons with an even / odd vertex count |
| `COUNT <n>` | Number of polygons with exactly `n` vertices (`n` made of digits, `n >= 3`) |
| `RECTS` | Number of four-vertex polygons whose corners are right angles |
| `INTERSECTIONS <polygon>` | Number of loaded polygons that share a point with the given polygon; the polygon uses the file format and must end at the end of its line |

The results of `AREA`, `MAX` and `MIN` are printed with one decimal place. This includes `MAX VERTEXES` and `MIN VERTEXES`, so five vertices prints as `5.0`. The results of `COUNT`, `RECTS` and `INTERSECTIONS` are printed as whole numbers. `MAX` and `MIN` are invalid when no polygons were loaded.

## Library use

```python
import io

from polyquery.parser import load_polygons, parse_polygon
from polyquery.geometry import area_mean, count_intersecting
from polyquery.cli import process_commands

polygons = load_polygons(io.StringIO("4 (0;0) (0;2) (2;2) (2;0)\n"))
print(area_mean(polygons))                                                 # 4.0
print(count_intersecting(polygons, parse_polygon("3 (1;1) (5;1) (1;5)")))  # 1
print(list(process_commands(io.StringIO("COUNT EVEN\nRECTS\n"), polygons)))  # ['1', '1']
```

The modules:

- `polyquery.geometry` has the `Point` and `Polygon` dataclasses and the query functions. These are `polygon_area`, `area_even_odd`, `area_mean`, `area_num_of_vertexes`, `max_metric`, `min_metric`, `count_even_odd`, `count_vertexes`, `count_rects`, `count_intersecting`, and the lower-level tests `is_right_angle`, `is_rect`, `orientation`, `point_on_segment`, `segments_intersect`, `point_in_polygon` and `polygons_intersect`.
- `polyquery.parser` has `parse_point`, `parse_polygon` and `load_polygons`. The parse functions raise `PolygonParseError`, a subclass of `ValueError`, on malformed text.
- `polyquery.cli` has `process_commands(stream, polygons)`, which yields one answer line per query. It also has `main(argv)`, the command-line entry point.