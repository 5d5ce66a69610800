"""A small dense matrix over any numeric type."""

from __future__ import annotations

import numbers
from typing import Any, Iterable, Iterator


class MatrixError(ArithmeticError):
    """Base class for matrix errors."""


class NotInvertibleMatrixError(MatrixError):
    """The matrix has no inverse."""


class IncompatibleMatrixError(MatrixError):
    """The operands' shapes do not fit the operation."""


class NotSquareMatrixError(MatrixError):
    """The operation needs a square matrix."""


class Matrix:
    """A dense ``rows`` x ``columns`` matrix; each dimension is at least 1."""

    def __init__(self, rows: int = 0, columns: int = 0) -> None:
        rows = max(rows, 1)
        columns = max(columns, 1)
        self._data: list[list[Any]] = [[0] * columns for _ in range(rows)]

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Any]]) -> Matrix:
        """Build a matrix from an iterable of equally long rows."""
        data = [list(row) for row in rows]
        if not data or not data[0] or any(len(row) != len(data[0]) for row in data):
            raise ValueError("rows must be non-empty and of equal length")
        matrix = cls.__new__(cls)
        matrix._data = data
        return matrix

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """The ``n`` x ``n`` identity matrix."""
        matrix = cls(n, n)
        for i in range(matrix.rows):
            matrix._data[i][i] = 1
        return matrix

    @property
    def rows(self) -> int:
        return len(self._data)

    @property
    def columns(self) -> int:
        return len(self._data[0])

    def __getitem__(self, key):
        if isinstance(key, tuple):
            i, j = key
            return self._data[i][j]
        return self._data[key]

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        i, j = key
        self._data[i][j] = value

    def __iter__(self) -> Iterator[tuple[Any, ...]]:
        return (tuple(row) for row in self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._data == other._data

    def _copy_rows(self) -> list[list[Any]]:
        return [row[:] for row in self._data]

    def det(self):
        """Determinant, by Gaussian elimination."""
        if self.rows != self.columns:
            raise NotSquareMatrixError("determinant needs a square matrix")
        n = self.rows
        a = self._copy_rows()
        d = 1
        for i in range(n):
            k = next((k for k in range(i, n) if a[k][i] != 0), None)
            if k is None:
                return 0
            val = a[k][i]
            a[k] = [v / val for v in a[k]]
            d = d * val
            if k != i:
                a[k], a[i] = a[i], a[k]
                d = -d
            for j in range(i + 1, n):
                tmp = a[j][i]
                if tmp != 0:
                    a[j] = [x - tmp * y for x, y in zip(a[j], a[i])]
        return d

    def inverse(self) -> Matrix:
        """Inverse, by Gauss-Jordan elimination."""
        if self.rows != self.columns:
            raise NotInvertibleMatrixError("only square matrices are invertible")
        n = self.rows
        a = self._copy_rows()
        b = Matrix.identity(n)._data
        for i in range(n):
            k = next((k for k in range(i, n) if a[k][i] != 0), None)
            if k is None:
                raise NotInvertibleMatrixError("matrix is singular")
            val = a[k][i]
            a[k] = [v / val for v in a[k]]
            b[k] = [v / val for v in b[k]]
            if k != i:
                a[k], a[i] = a[i], a[k]
                b[k], b[i] = b[i], b[k]
            for j in range(n):
                if j != i:
                    tmp = a[j][i]
                    a[j] = [x - tmp * y for x, y in zip(a[j], a[i])]
                    b[j] = [x - tmp * y for x, y in zip(b[j], b[i])]
        return Matrix.from_rows(b)

    def transpose(self) -> Matrix:
        return Matrix.from_rows(zip(*self._data))

    def _check_same_shape(self, other: Matrix) -> None:
        if self.rows != other.rows or self.columns != other.columns:
            raise IncompatibleMatrixError("matrices differ in shape")

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix.from_rows(
            [x + y for x, y in zip(r1, r2)] for r1, r2 in zip(self._data, other._data)
        )

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix.from_rows(
            [x - y for x, y in zip(r1, r2)] for r1, r2 in zip(self._data, other._data)
        )

    def __mul__(self, other):
        if isinstance(other, Matrix):
            if self.columns != other.rows:
                raise IncompatibleMatrixError("inner dimensions differ")
            columns = list(zip(*other._data))
            return Matrix.from_rows(
                [sum((a * b for a, b in zip(row, col)), 0) for col in columns]
                for row in self._data
            )
        if isinstance(other, numbers.Number):
            return Matrix.from_rows([v * other for v in row] for row in self._data)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Number):
            return self * other
        return NotImplemented

    def __str__(self) -> str:
        return "{" + ",".join(
            "{" + ",".join(str(v) for v in row) + "}" for row in self._data
        ) + "}"

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self._data!r})"