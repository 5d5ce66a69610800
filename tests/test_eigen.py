import pytest
from hypothesis import given
from hypothesis import strategies as st

from gridmapping.eigen import eigen_decomposition


def reconstruct(values, vectors):
    return [
        [sum(vectors[i][k] * values[k] * vectors[j][k] for k in range(3)) for j in range(3)]
        for i in range(3)
    ]


def test_covariance_from_stat_test():
    # xx=1, yy=0.01, tt=0.01, no correlations
    cov = [[1.0, 0.0, 0.0], [0.0, 0.01, 0.0], [0.0, 0.0, 0.01]]
    values, vectors = eigen_decomposition(cov)
    assert values == pytest.approx([0.01, 0.01, 1.0])
    # the eigenvector for the largest eigenvalue is the x axis
    assert abs(vectors[0][2]) == pytest.approx(1.0)
    assert vectors[1][2] == pytest.approx(0.0, abs=1e-12)
    assert vectors[2][2] == pytest.approx(0.0, abs=1e-12)


def test_zero_matrix():
    values, vectors = eigen_decomposition([[0.0] * 3 for _ in range(3)])
    assert values == [0.0, 0.0, 0.0]
    assert reconstruct(values, vectors) == [[0.0] * 3 for _ in range(3)]


def test_known_eigenvalues():
    values, _ = eigen_decomposition([[2, 1, 0], [1, 2, 0], [0, 0, 3]])
    assert values == pytest.approx([1.0, 3.0, 3.0])


def test_rejects_wrong_shape():
    with pytest.raises(ValueError):
        eigen_decomposition([[1, 0], [0, 1]])


entry = st.floats(min_value=-100, max_value=100, allow_nan=False)


@given(st.lists(entry, min_size=6, max_size=6))
def test_reconstruction_orthonormality_and_order(e):
    a = [[e[0], e[3], e[4]], [e[3], e[1], e[5]], [e[4], e[5], e[2]]]
    values, vectors = eigen_decomposition(a)
    assert values == sorted(values)
    rebuilt = reconstruct(values, vectors)
    for i in range(3):
        for j in range(3):
            assert rebuilt[i][j] == pytest.approx(a[i][j], abs=1e-7)
    for i in range(3):
        for j in range(3):
            dot = sum(vectors[k][i] * vectors[k][j] for k in range(3))
            assert dot == pytest.approx(1.0 if i == j else 0.0, abs=1e-9)