"""Oriented bounding box of a planar point set, aligned with its principal axes."""

from __future__ import annotations

import math
from typing import Iterable

from gridmapping.geometry import Point


class OrientedBoundingBox:
    """The bounding box of a point set along the eigenvectors of its covariance."""

    def __init__(self, points: Iterable[Point]) -> None:
        pts = list(points)
        if not pts:
            raise ValueError("an oriented bounding box needs at least one point")
        count = len(pts)
        cx = sum(p.x for p in pts) / count
        cy = sum(p.y for p in pts) / count

        x1 = sum((p.x - cx) ** 2 for p in pts) / count
        x2 = sum((p.x - cx) * (p.y - cy) for p in pts) / count
        x3 = x2
        x4 = sum((p.y - cy) ** 2 for p in pts) / count

        term = x4 * x4 - 2.0 * x1 * x4 + x1 * x1 + 4.0 * x2 * x3
        if x3 == 0 or x2 == 0 or term < 0:
            raise ValueError(
                f"cannot compute the eigenvectors: x3={x3}, x2={x2}, term={term}"
            )
        root = math.sqrt(term)
        lambda1 = 0.5 * (x4 + x1 + root)
        lambda2 = 0.5 * (x4 + x1 - root)

        def eigenvector(value: float) -> tuple[float, float]:
            vx = -(x4 - value) * (x4 - value) * (x1 - value) / (x2 * x3 * x3)
            vy = (x4 - value) * (x1 - value) / (x2 * x3)
            norm = math.hypot(vx, vy)
            return vx / norm, vy / norm

        v1x, v1y = eigenvector(lambda1)
        v2x, v2y = eigenvector(lambda2)

        along1 = [(p.x - cx) * v1x + (p.y - cy) * v1y for p in pts]
        along2 = [(p.x - cx) * v2x + (p.y - cy) * v2y for p in pts]
        xmin, xmax = min(along1), max(along1)
        ymin, ymax = min(along2), max(along2)

        def corner(a: float, b: float) -> Point:
            return Point(cx + a * v1x + b * v2x, cy + a * v1y + b * v2y)

        self.upper_left = corner(xmin, ymin)
        self.upper_right = corner(xmax, ymin)
        self.lower_left = corner(xmin, ymax)
        self.lower_right = corner(xmax, ymax)

    @property
    def corners(self) -> tuple[Point, Point, Point, Point]:
        return (self.upper_left, self.upper_right, self.lower_left, self.lower_right)

    def area(self) -> float:
        """Area of the box."""
        ul, ur, ll = self.upper_left, self.upper_right, self.lower_left
        return math.hypot(ul.x - ll.x, ul.y - ll.y) * math.hypot(ul.x - ur.x, ul.y - ur.y)