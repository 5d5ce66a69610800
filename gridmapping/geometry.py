"""Planar points, poses and forward/sideward/rotate movements."""

from __future__ import annotations

import math
from dataclasses import dataclass

_TWO_PI = 2.0 * math.pi


def _normalize_angle(angle: float) -> float:
    """Bring an angle into the half-open interval [-pi, pi)."""
    if -math.pi <= angle < math.pi:
        return angle
    multiplier = int(angle / _TWO_PI)
    angle -= multiplier * _TWO_PI
    if angle >= math.pi:
        angle -= _TWO_PI
    if angle < -math.pi:
        angle += _TWO_PI
    return angle


@dataclass(frozen=True)
class Point:
    """A point in the plane."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point:
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)


@dataclass(frozen=True)
class OrientedPoint:
    """A planar pose: position plus heading in radians."""

    x: float = 0.0
    y: float = 0.0
    theta: float = 0.0

    def __add__(self, other: OrientedPoint) -> OrientedPoint:
        return OrientedPoint(self.x + other.x, self.y + other.y, self.theta + other.theta)

    def __sub__(self, other: OrientedPoint) -> OrientedPoint:
        return OrientedPoint(self.x - other.x, self.y - other.y, self.theta - other.theta)

    def __mul__(self, factor: float) -> OrientedPoint:
        return OrientedPoint(self.x * factor, self.y * factor, self.theta * factor)

    __rmul__ = __mul__

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    def normalized(self) -> OrientedPoint:
        """Return the same pose with its heading in [-pi, pi)."""
        return OrientedPoint(self.x, self.y, _normalize_angle(self.theta))


@dataclass(frozen=True)
class FSRMovement:
    """A relative motion: forward ``f``, sideward ``s`` and rotation ``r``."""

    f: float = 0.0
    s: float = 0.0
    r: float = 0.0

    def normalized(self) -> FSRMovement:
        """Return the movement with its rotation in [-pi, pi)."""
        return FSRMovement(self.f, self.s, _normalize_angle(self.r))

    def inverted(self) -> FSRMovement:
        """Return the movement that undoes this one."""
        c, s = math.cos(self.r), math.sin(self.r)
        return FSRMovement(
            -c * self.f - s * self.s,
            s * self.f - c * self.s,
            -self.r,
        ).normalized()

    def compose(self, other: FSRMovement) -> FSRMovement:
        """Return this movement followed by ``other``."""
        c, s = math.cos(self.r), math.sin(self.r)
        return FSRMovement(
            c * other.f - s * other.s + self.f,
            s * other.f + c * other.s + self.s,
            self.r + other.r,
        ).normalized()

    def move(self, pose: OrientedPoint) -> OrientedPoint:
        """Apply this movement to ``pose``."""
        c, s = math.cos(pose.theta), math.sin(pose.theta)
        return OrientedPoint(
            pose.x + self.f * c - self.s * s,
            pose.y + self.f * s + self.s * c,
            self.r + pose.theta,
        ).normalized()

    @staticmethod
    def between(pose1: OrientedPoint, pose2: OrientedPoint) -> FSRMovement:
        """Return the movement that takes ``pose1`` to ``pose2``."""
        dx = pose2.x - pose1.x
        dy = pose2.y - pose1.y
        c, s = math.cos(pose1.theta), math.sin(pose1.theta)
        return FSRMovement(
            dy * s + dx * c,
            dy * c - dx * s,
            pose2.theta - pose1.theta,
        ).normalized()


def frame_transformation(
    reference_frame1: OrientedPoint,
    reference_frame2: OrientedPoint,
    pose_frame1: OrientedPoint,
) -> OrientedPoint:
    """Express ``pose_frame1`` in the frame where ``reference_frame1`` sits at ``reference_frame2``."""
    zero = OrientedPoint()
    inverse_reference1 = FSRMovement.between(zero, reference_frame1).inverted()
    to_reference2 = FSRMovement.between(zero, reference_frame2)
    to_pose = FSRMovement.between(zero, pose_frame1)
    combined = to_reference2.compose(inverse_reference1).compose(to_pose)
    return combined.move(zero)