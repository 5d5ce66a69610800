"""Hill-climbing pose search against a likelihood function."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from gridmapping.geometry import OrientedPoint

Likelihood = Callable[[Any, Any, OrientedPoint, float], float]


@dataclass
class OptimizerParams:
    """Search parameters."""

    discretization: float = 0.05
    angular_step: float = 0.05
    linear_step: float = 0.05
    iterations: int = 4
    max_range: float = 80.0


class Move(Enum):
    """Single-axis moves tried at every step, in this order."""

    FORWARD = (1, 0, 0)
    BACKWARD = (-1, 0, 0)
    LEFT = (0, 1, 0)
    RIGHT = (0, -1, 0)
    TURN_RIGHT = (0, 0, -1)
    TURN_LEFT = (0, 0, 1)

    def apply(self, pose: OrientedPoint, linear: float, angular: float) -> OrientedPoint:
        mx, my, mt = self.value
        return OrientedPoint(
            pose.x + mx * linear if mx else pose.x,
            pose.y + my * linear if my else pose.y,
            pose.theta + mt * angular if mt else pose.theta,
        )


class Optimizer:
    """Searches for the pose that maximises ``likelihood(map, reading, pose, max_range)``."""

    def __init__(self, params: OptimizerParams, likelihood: Likelihood) -> None:
        self.params = params
        self.likelihood = likelihood

    def _score(self, local_map: Any, reading: Any, pose: OrientedPoint) -> float:
        return self.likelihood(local_map, reading, pose, self.params.max_range)

    def gradient_descent(self, reading: Any, pose: OrientedPoint, local_map: Any) -> OrientedPoint:
        """Climb from ``pose``, halving the steps each time no move helps."""
        best_pose = pose
        best_score = self._score(local_map, reading, best_pose)
        failures = 0
        linear = self.params.linear_step
        angular = self.params.angular_step
        while True:
            it_pose, it_score = best_pose, best_score
            while True:
                test_pose, test_score = it_pose, it_score
                for move in Move:
                    candidate = move.apply(it_pose, linear, angular)
                    score = self._score(local_map, reading, candidate)
                    if score > test_score:
                        test_pose, test_score = candidate, score
                if test_score > it_score:
                    it_pose, it_score = test_pose, test_score
                else:
                    break
            if it_score > best_score:
                best_pose, best_score = it_pose, it_score
            else:
                failures += 1
                linear *= 0.5
                angular *= 0.5
            if failures >= self.params.iterations:
                return best_pose