import math
import statistics

import pytest
from hypothesis import given, strategies as st

from gridmapping.eigen import eigen_decomposition
from gridmapping.geometry import OrientedPoint
from gridmapping.stats import (
    Gaussian3,
    eval_log_gaussian,
    sample_gaussian,
    sample_uniform,
)


@given(
    st.floats(min_value=1e-3, max_value=100.0),
    st.floats(min_value=-10.0, max_value=10.0),
)
def test_eval_log_gaussian_matches_normal_pdf(variance, delta):
    expected = statistics.NormalDist(0.0, math.sqrt(variance)).pdf(delta)
    assert math.exp(eval_log_gaussian(variance, delta)) == pytest.approx(expected, rel=1e-9, abs=1e-300)


@given(st.floats(min_value=-5.0, max_value=5.0))
def test_eval_log_gaussian_is_symmetric(delta):
    assert eval_log_gaussian(0.5, delta) == eval_log_gaussian(0.5, -delta)


@pytest.mark.parametrize("variance", [0.0, -1.0])
def test_eval_log_gaussian_nonpositive_variance_clamped(variance):
    assert eval_log_gaussian(variance, 0.01) == eval_log_gaussian(1e-4, 0.01)


def test_sample_gaussian_zero_sigma():
    assert sample_gaussian(0.0) == 0.0


def test_sample_gaussian_seed_reproducible():
    first = [sample_gaussian(1.0, 42)] + [sample_gaussian(1.0) for _ in range(5)]
    second = [sample_gaussian(1.0, 42)] + [sample_gaussian(1.0) for _ in range(5)]
    assert first == second


def test_sample_gaussian_moments():
    sample_gaussian(1.0, 7)
    samples = [sample_gaussian(2.0) for _ in range(20000)]
    assert statistics.fmean(samples) == pytest.approx(0.0, abs=0.1)
    assert statistics.pstdev(samples) == pytest.approx(2.0, rel=0.05)


def test_sample_uniform_in_range():
    values = [sample_uniform(-3.0, 5.0) for _ in range(2000)]
    assert all(-3.0 <= v <= 5.0 for v in values)
    assert statistics.fmean(values) == pytest.approx(1.0, abs=0.3)


def test_gaussian3_diagonal_matches_product_of_normals():
    variances = (0.5, 2.0, 0.1)
    g = Gaussian3(mean=OrientedPoint(1.0, -1.0, 0.2), eigenvalues=variances)
    pose = OrientedPoint(1.5, 0.0, 0.4)
    deltas = (0.5, 1.0, 0.2)
    expected = sum(
        math.log(statistics.NormalDist(0.0, math.sqrt(v)).pdf(d))
        for v, d in zip(variances, deltas)
    )
    assert g.eval(pose) == pytest.approx(expected)


def test_gaussian3_heading_wraps():
    g = Gaussian3(mean=OrientedPoint(0.0, 0.0, 0.1), eigenvalues=(1.0, 1.0, 0.3))
    pose = OrientedPoint(0.2, 0.3, 0.5)
    wrapped = OrientedPoint(0.2, 0.3, 0.5 + 2.0 * math.pi)
    assert g.eval(wrapped) == pytest.approx(g.eval(pose))


def test_gaussian3_peak_at_mean():
    cov = [[1.0, 0.3, 0.0], [0.3, 0.5, 0.1], [0.0, 0.1, 0.2]]
    values, vectors = eigen_decomposition(cov)
    mean = OrientedPoint(2.0, 3.0, 0.5)
    g = Gaussian3(mean=mean, eigenvalues=values, eigenvectors=vectors)
    at_mean = g.eval(mean)
    for offset in (OrientedPoint(0.1, 0, 0), OrientedPoint(0, -0.2, 0), OrientedPoint(0, 0, 0.3)):
        assert g.eval(mean + offset) < at_mean