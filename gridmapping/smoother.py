"""Parzen-window smoothing of one-dimensional weighted samples."""

from __future__ import annotations

import bisect
import math
from dataclasses import dataclass
from typing import Iterator, TextIO

from gridmapping.stats import sample_gaussian, sample_uniform

_SQRT_TWO_PI = math.sqrt(2.0 * math.pi)


def gauss(x: float, mean: float, sigma: float) -> float:
    """Gaussian density at ``x``."""
    return math.exp(-0.5 * ((x - mean) / sigma) ** 2) / (_SQRT_TWO_PI * sigma)


def _steps(start: float, stop: float, step: float) -> Iterator[float]:
    x = start
    while x <= stop:
        yield x
        x += step


@dataclass
class _DataPoint:
    x: float
    y: float


class DataSmoother:
    """Kernel density estimate built from weighted points ``(x, p)``."""

    def __init__(self, parzen_window: float) -> None:
        self.reset(parzen_window)

    def reset(self, parzen_window: float) -> None:
        """Drop all data and set a new window width."""
        self._data: list[_DataPoint] = []
        self._cumulated: list[float] = []
        self._integral = -1.0
        self.parzen_window = parzen_window
        self._from = math.inf
        self._to = -math.inf
        self._last_step = 0.001

    @property
    def data(self) -> list[tuple[float, float]]:
        return [(d.x, d.y) for d in self._data]

    @property
    def bounds(self) -> tuple[float, float]:
        """The interval evaluated by the numeric methods."""
        return self._from, self._to

    def _require_data(self) -> None:
        if not self._data:
            raise ValueError("the smoother holds no data")

    def add(self, x: float, p: float) -> None:
        """Add a point at ``x`` with weight ``p``."""
        self._data.append(_DataPoint(x, p))
        self._integral = -1.0
        margin = 3.0 * self.parzen_window
        self._from = min(self._from, x - margin)
        self._to = max(self._to, x + margin)
        self._cumulated.clear()

    def set_min_to_zero(self) -> None:
        """Shift all weights so the smallest becomes zero."""
        if self._data:
            lowest = min(d.y for d in self._data)
            for d in self._data:
                d.y -= lowest
        self._cumulated.clear()

    def integrate(self, step: float) -> float:
        """Integrate the smoothed density over the bounds and remember it."""
        self._last_step = step
        self._integral = sum(self.smoothed(x) * step for x in _steps(self._from, self._to, step))
        return self._integral

    def integral(self, step: float, x_to: float) -> float:
        """Integrate the smoothed density from the lower bound to ``x_to``."""
        return sum(self.smoothed(x) * step for x in _steps(self._from, x_to, step))

    def smoothed(self, x: float) -> float:
        """The smoothed density at ``x``."""
        self._require_data()
        p = 0.0
        sum_y = 0.0
        for d in self._data:
            dist = abs(x - d.x)
            p += d.y * math.exp(-0.5 * (dist / self.parzen_window) ** 2)
            sum_y += d.y
        return p / (_SQRT_TWO_PI * sum_y * self.parzen_window)

    def sample_numeric(self, step: float) -> float:
        """Sample by walking the numerically integrated density."""
        self._require_data()
        if self._integral < 0 or step != self._last_step:
            self.integrate(step)
        r = sample_uniform(0.0, self._integral)
        acc = 0.0
        for x in _steps(self._from, self._to, step):
            acc += self.smoothed(x) * step
            if acc > r:
                return x - 0.5 * step
        return self._to

    def _compute_cumulated(self) -> None:
        self._require_data()
        total = 0.0
        self._cumulated = []
        for d in self._data:
            total += d.y
            self._cumulated.append(total)

    def sample(self) -> float:
        """Pick a data point by weight and perturb it by the window."""
        self._require_data()
        if not self._cumulated:
            self._compute_cumulated()
        r = sample_uniform(0.0, self._cumulated[-1])
        acc = 0.0
        for value, d in zip(self._cumulated, self._data):
            acc += value
            if acc >= r:
                return d.x + sample_gaussian(self.parzen_window)
        raise RuntimeError("sampling failed to select a data point")

    def sample_multiple(self, num: int) -> list[float]:
        """Draw ``num`` samples in one pass over the data."""
        self._require_data()
        if not self._cumulated:
            self._compute_cumulated()
        maxval = self._cumulated[-1]
        randoms = sorted(sample_uniform(0.0, maxval) for _ in range(num))
        samples: list[float] = []
        acc = 0.0
        j = 0
        for value, d in zip(self._cumulated, self._data):
            if j >= num:
                break
            acc += value
            while j < num and acc >= randoms[j]:
                samples.append(d.x + sample_gaussian(self.parzen_window))
                j += 1
        return samples

    def approx_gauss(self, step: float) -> tuple[float, float]:
        """Return ``(mean, sigma)`` of a Gaussian fitted to the smoothed density."""
        self._require_data()
        grid = list(_steps(self._from, self._to, step))
        densities = [self.smoothed(x) for x in grid]
        total = sum(densities)
        mean = sum(x * d for x, d in zip(grid, densities)) / total
        var = sum((x - mean) ** 2 * d for x, d in zip(grid, densities)) / total
        return mean, math.sqrt(var)

    def cramer_von_mises_to_gauss(self, step: float, mean: float, sigma: float) -> float:
        """Sum of squared differences between the two cumulative distributions."""
        p = 0.0
        sint = 0.0
        gint = 0.0
        for x in _steps(self._from, self._to, step):
            sint += self.smoothed(x) * step
            gint += gauss(x, mean, sigma) * step
            p += (sint - gint) ** 2
        return p

    def kld_to_gauss(self, step: float, mean: float, sigma: float) -> float:
        """Kullback-Leibler divergence from the smoothed density to a Gaussian.

        Raises ``ValueError`` when the two masses over the bounds differ by
        more than 0.1.
        """
        p = 0.0
        sd = 0.0
        sg = 0.0
        for x in _steps(self._from, self._to, step):
            d = 1e-10 + self.smoothed(x)
            g = 1e-10 + gauss(x, mean, sigma)
            sd += d
            sg += g
            p += d * math.log(d / g)
        if abs(sd * step - sg * step) > 0.1:
            raise ValueError("densities have different mass over the bounds")
        return p * step

    def dump_data(self, stream: TextIO) -> None:
        """Write the raw points, one ``x y`` pair per line."""
        for d in self._data:
            stream.write(f"{d.x:f} {d.y:f}\n")

    def dump_smoothed(self, stream: TextIO, step: float) -> None:
        """Write the smoothed density over the bounds, one ``x p`` pair per line."""
        for x in _steps(self._from, self._to, step):
            stream.write(f"{x:f} {self.smoothed(x):f}\n")