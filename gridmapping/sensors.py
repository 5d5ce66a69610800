"""Sensors and the readings they produce."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator, Sequence

from gridmapping.geometry import OrientedPoint, Point


class Sensor:
    """A named sensor."""

    def __init__(self, name: str = "") -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class OdometrySensor(Sensor):
    """An odometry source; ``ideal`` marks a noise-free one."""

    def __init__(self, name: str = "", ideal: bool = False) -> None:
        super().__init__(name)
        self.ideal = ideal


@dataclass
class Beam:
    """One beam of a range sensor, with its cached sine and cosine."""

    pose: OrientedPoint = field(default_factory=OrientedPoint)
    span: float = 0.0
    max_range: float = 0.0
    s: float = 0.0
    c: float = 1.0


class RangeSensor(Sensor):
    """A laser-like sensor with ``beams`` evenly spaced by ``resolution``."""

    def __init__(
        self,
        name: str = "",
        beams: int = 0,
        resolution: float = 0.0,
        pose: OrientedPoint | None = None,
        span: float = 0.0,
        max_range: float = 0.0,
    ) -> None:
        super().__init__(name)
        self.pose = pose if pose is not None else OrientedPoint()
        self.beams: list[Beam] = []
        angle = -0.5 * resolution * beams
        for _ in range(beams):
            self.beams.append(
                Beam(pose=OrientedPoint(0.0, 0.0, angle), span=span, max_range=max_range)
            )
            angle += resolution
        self.new_format = False
        self.update_beams_lookup()

    def update_beams_lookup(self) -> None:
        """Refresh the cached sine and cosine of every beam."""
        for beam in self.beams:
            beam.s = math.sin(beam.pose.theta)
            beam.c = math.cos(beam.pose.theta)


class SensorReading:
    """A reading taken by ``sensor`` at ``time``."""

    def __init__(self, sensor: Sensor | None = None, time: float = 0.0) -> None:
        self.sensor = sensor
        self.time = time


class OdometryReading(SensorReading):
    """A reading from an odometry sensor."""

    def __init__(self, sensor: OdometrySensor | None = None, time: float = 0.0) -> None:
        super().__init__(sensor, time)


class RangeReading(SensorReading):
    """One range per beam of a range sensor, taken at ``pose``."""

    def __init__(
        self,
        sensor: RangeSensor | None = None,
        ranges: Iterable[float] | None = None,
        time: float = 0.0,
        pose: OrientedPoint | None = None,
    ) -> None:
        super().__init__(sensor, time)
        self.pose = pose if pose is not None else OrientedPoint()
        self.ranges: list[float] = []
        if ranges is not None:
            values = [float(r) for r in ranges]
            if not isinstance(sensor, RangeSensor) or len(values) != len(sensor.beams):
                raise ValueError("the number of ranges must match the sensor's beams")
            self.ranges = values

    def __len__(self) -> int:
        return len(self.ranges)

    def __getitem__(self, index):
        return self.ranges[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self.ranges)

    def _range_sensor(self) -> RangeSensor:
        if not isinstance(self.sensor, RangeSensor):
            raise TypeError("the reading does not come from a range sensor")
        return self.sensor

    def _kept_beams(self, density: float) -> Iterator[bool]:
        beams: Sequence[Beam] = self._range_sensor().beams
        last = Point(0.0, 0.0)
        for beam, rho in zip(beams, self.ranges):
            theta = beam.pose.theta
            point = Point(math.cos(theta) * rho, math.sin(theta) * rho)
            if math.hypot(last.x - point.x, last.y - point.y) < density:
                yield False
            else:
                last = point
                yield True

    def raw_view(self, density: float = 0.0) -> list[float]:
        """The ranges, with beams closer than ``density`` to the last kept one
        replaced by the largest float."""
        if density == 0:
            return list(self.ranges)
        return [
            rho if kept else sys.float_info.max
            for rho, kept in zip(self.ranges, self._kept_beams(density))
        ]

    def active_beams(self, density: float = 0.0) -> int:
        """How many beams ``raw_view`` keeps at this density."""
        if density == 0:
            return len(self.ranges)
        return sum(self._kept_beams(density))

    def cartesian_form(self, max_range: float = math.inf) -> list[Point]:
        """Beam end points in the frame of the sensor's pose.

        Beams at or beyond ``max_range`` map to the origin.
        """
        sensor = self._range_sensor()
        if not sensor.beams:
            raise ValueError("the sensor has no beams")
        px, py = sensor.pose.x, sensor.pose.y
        ps, pc = math.sin(sensor.pose.theta), math.cos(sensor.pose.theta)
        points = []
        for i, beam in enumerate(sensor.beams):
            rho = self.ranges[i]
            if rho >= max_range:
                points.append(Point(0.0, 0.0))
                continue
            bx = beam.pose.x + beam.c * rho
            by = beam.pose.y + beam.s * rho
            points.append(Point(px + pc * bx - ps * by, py + ps * bx + pc * by))
        return points

    def with_pose(self, pose: OrientedPoint) -> RangeReading:
        """A copy of this reading taken at ``pose``."""
        copy = RangeReading(self.sensor, None, self.time, pose)
        copy.ranges = list(self.ranges)
        return copy


__all__ = [
    "Beam",
    "OdometryReading",
    "OdometrySensor",
    "RangeReading",
    "RangeSensor",
    "Sensor",
    "SensorReading",
    "replace",
]