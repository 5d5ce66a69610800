"""Random sampling and Gaussian helpers."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Sequence

from gridmapping.geometry import OrientedPoint

_rng = random.Random()


def _nonzero_uniform() -> float:
    while True:
        r = _rng.random()
        if r != 0.0:
            return r


def sample_gaussian(sigma: float, seed: int = 0) -> float:
    """Draw from a zero-mean Gaussian with standard deviation ``sigma``.

    A non-zero ``seed`` reseeds the shared generator first.
    Uses the polar form of the Box-Muller transform.
    """
    if seed != 0:
        _rng.seed(seed)
    if sigma == 0:
        return 0.0
    while True:
        x1 = 2.0 * _nonzero_uniform() - 1.0
        _nonzero_uniform()
        x2 = 2.0 * _rng.random() - 1.0
        w = x1 * x1 + x2 * x2
        if 0.0 < w <= 1.0:
            break
    return sigma * x2 * math.sqrt(-2.0 * math.log(w) / w)


def sample_uniform(low: float, high: float) -> float:
    """Draw uniformly from the interval between ``low`` and ``high``."""
    return low + _rng.random() * (high - low)


def eval_log_gaussian(sigma_square: float, delta: float) -> float:
    """Log density of a zero-mean Gaussian with variance ``sigma_square`` at ``delta``."""
    if sigma_square <= 0:
        sigma_square = 1e-4
    return -0.5 * delta * delta / sigma_square - 0.5 * math.log(2.0 * math.pi * sigma_square)


def _identity() -> tuple[tuple[float, ...], ...]:
    return ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))


@dataclass
class Gaussian3:
    """A Gaussian over planar poses, held as mean and eigen-decomposed covariance.

    ``eigenvectors`` holds the eigenvectors in its columns, matching
    ``eigenvalues`` by position.
    """

    mean: OrientedPoint = field(default_factory=OrientedPoint)
    eigenvalues: Sequence[float] = (1.0, 1.0, 1.0)
    eigenvectors: Sequence[Sequence[float]] = field(default_factory=_identity)

    def eval(self, pose: OrientedPoint) -> float:
        """Log density of ``pose``; the heading difference is wrapped."""
        dtheta = pose.theta - self.mean.theta
        q = (
            pose.x - self.mean.x,
            pose.y - self.mean.y,
            math.atan2(math.sin(dtheta), math.cos(dtheta)),
        )
        vec = self.eigenvectors
        total = 0.0
        for j, value in enumerate(self.eigenvalues):
            projection = sum(vec[i][j] * q[i] for i in range(3))
            total += eval_log_gaussian(value, projection)
        return total