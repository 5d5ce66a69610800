"""Bresenham traversal of the grid cells between two cells."""

from __future__ import annotations

GridCell = tuple[int, int]


def grid_line_core(start: GridCell, end: GridCell) -> list[GridCell]:
    """Cells on the segment, walked from the lower end of the major axis."""
    sx, sy = start
    ex, ey = end
    dx = abs(ex - sx)
    dy = abs(ey - sy)

    if dy <= dx:
        d = 2 * dy - dx
        incr1 = 2 * dy
        incr2 = 2 * (dy - dx)
        if sx > ex:
            x, y, direction, xend = ex, ey, -1, sx
        else:
            x, y, direction, xend = sx, sy, 1, ex
        step = 1 if (ey - sy) * direction > 0 else -1
        points = [(x, y)]
        while x < xend:
            x += 1
            if d < 0:
                d += incr1
            else:
                y += step
                d += incr2
            points.append((x, y))
    else:
        d = 2 * dx - dy
        incr1 = 2 * dx
        incr2 = 2 * (dx - dy)
        if sy > ey:
            x, y, direction, yend = ex, ey, -1, sy
        else:
            x, y, direction, yend = sx, sy, 1, ey
        step = 1 if (ex - sx) * direction > 0 else -1
        points = [(x, y)]
        while y < yend:
            y += 1
            if d < 0:
                d += incr1
            else:
                x += step
                d += incr2
            points.append((x, y))
    return points


def grid_line(start: GridCell, end: GridCell) -> list[GridCell]:
    """Cells on the segment from ``start`` to ``end``, in that order."""
    start = (int(start[0]), int(start[1]))
    end = (int(end[0]), int(end[1]))
    points = grid_line_core(start, end)
    if points[0] != start:
        points.reverse()
    return points