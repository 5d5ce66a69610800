"""Writing a grid of values as a binary PGM image."""

from __future__ import annotations

from typing import BinaryIO, Sequence


def write_pgm(stream: BinaryIO, matrix: Sequence[Sequence[float]]) -> BinaryIO:
    """Write ``matrix`` (indexed ``matrix[x][y]``) as a P5 image to ``stream``.

    A cell value ``v`` becomes the grey level ``255 * |1 - v|``; the top row
    of the image is the highest ``y``.
    """
    columns = [list(column) for column in matrix]
    xsize = len(columns)
    ysize = len(columns[0]) if columns else 0
    if any(len(column) != ysize for column in columns):
        raise ValueError("all columns must have the same length")

    pixels = bytearray()
    for y in reversed(range(ysize)):
        for column in columns:
            level = int(255 * abs(1.0 - column[y]))
            if not 0 <= level <= 255:
                raise ValueError(f"value {column[y]!r} does not map to a grey level")
            pixels.append(level)

    stream.write(f"P5\n{xsize}\n{ysize}\n255\n".encode("ascii"))
    stream.write(bytes(pixels))
    return stream