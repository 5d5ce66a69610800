import io

import pytest

from gridmapping.pgm import write_pgm


def test_header():
    out = write_pgm(io.BytesIO(), [[1.0, 1.0, 1.0], [1.0, 1.0, 1.0]])
    assert out.getvalue().startswith(b"P5\n2\n3\n255\n")


def test_pixel_order_and_levels():
    matrix = [[1.0, 0.0, 1.0], [0.0, 1.0, 0.0]]
    data = write_pgm(io.BytesIO(), matrix).getvalue()
    header = b"P5\n2\n3\n255\n"
    assert data[len(header):] == bytes([0, 255, 255, 0, 0, 255])


def test_payload_size():
    matrix = [[0.5] * 7 for _ in range(4)]
    data = write_pgm(io.BytesIO(), matrix).getvalue()
    header = b"P5\n4\n7\n255\n"
    assert len(data) == len(header) + 4 * 7


def test_returns_same_stream():
    stream = io.BytesIO()
    assert write_pgm(stream, [[0.0]]) is stream


def test_out_of_range_value_raises():
    with pytest.raises(ValueError):
        write_pgm(io.BytesIO(), [[-1.0]])


def test_ragged_matrix_raises():
    with pytest.raises(ValueError):
        write_pgm(io.BytesIO(), [[0.0, 1.0], [0.0]])