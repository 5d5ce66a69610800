from gridmapping.geometry import OrientedPoint
from gridmapping.optimizer import Move, Optimizer, OptimizerParams


def _towards(target):
    def likelihood(local_map, reading, pose, max_range):
        return -(
            (pose.x - target.x) ** 2
            + (pose.y - target.y) ** 2
            + (pose.theta - target.theta) ** 2
        )

    return likelihood


def test_reaches_target():
    target = OrientedPoint(1.0, -0.5, 0.25)
    params = OptimizerParams(linear_step=0.25, angular_step=0.25, iterations=5)
    result = Optimizer(params, _towards(target)).gradient_descent(None, OrientedPoint(), {})
    assert result == target


def test_zero_iterations_still_climbs_once():
    target = OrientedPoint(0.5, 0.25, -0.25)
    params = OptimizerParams(linear_step=0.25, angular_step=0.25, iterations=0)
    result = Optimizer(params, _towards(target)).gradient_descent(None, OrientedPoint(), {})
    assert result == target


def test_passes_map_reading_and_range():
    seen = []
    local_map = {"cells": []}
    reading = object()
    start = OrientedPoint(1.0, 2.0, 0.5)

    def likelihood(m, r, pose, max_range):
        seen.append((m, r, max_range))
        return 0.0

    params = OptimizerParams(iterations=2, max_range=12.5)
    result = Optimizer(params, likelihood).gradient_descent(reading, start, local_map)
    assert result == start
    assert seen
    assert all(m is local_map and r is reading and rng == 12.5 for m, r, rng in seen)


def test_flat_likelihood_keeps_start():
    start = OrientedPoint(2.0, 3.0, 0.5)
    params = OptimizerParams(iterations=3)
    result = Optimizer(params, lambda m, r, p, rng: 1.0).gradient_descent(None, start, None)
    assert result == start


def test_first_better_move_wins_ties():
    start = OrientedPoint(0.0, 0.0, 0.0)
    params = OptimizerParams(linear_step=0.5, angular_step=0.5, iterations=2)

    def likelihood(m, r, pose, max_range):
        return 0.0 if pose == start else 1.0

    result = Optimizer(params, likelihood).gradient_descent(None, start, None)
    assert result == Move.FORWARD.apply(start, params.linear_step, params.angular_step)
    assert result.x == start.x + params.linear_step


def test_move_order_and_effects():
    start = OrientedPoint(1.0, 2.0, 0.25)
    moves = list(Move)
    assert moves[0] is Move.FORWARD
    assert moves[-1] is Move.TURN_LEFT
    assert Move.FORWARD.apply(start, 0.5, 0.125) == OrientedPoint(1.5, 2.0, 0.25)
    assert Move.TURN_LEFT.apply(start, 0.5, 0.125) == OrientedPoint(1.0, 2.0, 0.375)