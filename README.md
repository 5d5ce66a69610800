# gridmapping

Building blocks for laser-based occupancy grid mapping, written in plain Python
with no third-party dependencies.

## Modules

- `gridmapping.geometry`: the frozen dataclasses `Point` and `OrientedPoint`
  (position plus heading). Both support `+`, `-` and scaling by a number.
  `OrientedPoint.normalized()` wraps the heading into [-pi, pi). `FSRMovement`
  is a forward/sideward/rotate motion. It offers `normalized`, `inverted`,
  `compose`, `move` and the static `FSRMovement.between(pose1, pose2)`.
  `frame_transformation(reference_frame1, reference_frame2, pose_frame1)`
  moves a pose from one reference frame into another.
- `gridmapping.eigen`: `eigen_decomposition(matrix)` for symmetric 3x3 matrices.
  It returns `(values, vectors)`, with the eigenvalues in ascending order and
  the unit eigenvectors as the columns of `vectors`. It raises `ValueError` if
  the matrix is not 3x3.
- `gridmapping.gridline`: `grid_line(start, end)` returns the Bresenham cells from
  `start` to `end`, in that order. `grid_line_core` returns the same cells,
  walked from the lower end of the major axis.
- `gridmapping.matrix`: a small dense `Matrix`. You build one with
  `Matrix(rows, columns)`, `Matrix.from_rows(...)` or `Matrix.identity(n)`. It
  supports `+`, `-`, `*` with a matrix or a scalar, and offers `det()`,
  `inverse()` and `transpose()`. Errors are raised as `NotInvertibleMatrixError`,
  `IncompatibleMatrixError` and `NotSquareMatrixError`, all of them subclasses of
  `ArithmeticError`.
- `gridmapping.alignment`: `lu_miles_step(source, destination)` gives the
  closed-form rigid transform, as an `OrientedPoint`, that maps one list of
  corresponding points onto another.
- `gridmapping.stats`:
  - `sample_gaussian(sigma, seed=0)` draws from a zero-mean Gaussian using the
    polar Box-Muller method. A non-zero seed reseeds the generator first.
  - `sample_uniform(low, high)` draws uniformly from the interval.
  - `eval_log_gaussian(sigma_square, delta)` returns the log density.
  - `Gaussian3` is a pose density built from a mean and an eigen-decomposed
    covariance. `Gaussian3.eval(pose)` returns the log density of a pose.
- `gridmapping.smoother`: `DataSmoother(parzen_window)` is a Parzen-window density
  built from weighted points.
  - Setting up: `add`, `reset`, `set_min_to_zero`.
  - Evaluating and integrating: `smoothed`, `integrate`, `integral`.
  - Sampling: `sample`, `sample_multiple`, `sample_numeric`.
  - Comparing with a Gaussian: `approx_gauss`, `cramer_von_mises_to_gauss`,
    `kld_to_gauss`.
  - Writing plain `x y` text: `dump_data`, `dump_smoothed`.

  The module-level `gauss(x, mean, sigma)` is the Gaussian density.
- `gridmapping.bbox`: `OrientedBoundingBox(points)` is the box of a 2D point set
  along the principal axes of the set. It exposes its `corners` and its
  `area()`. It raises `ValueError` when the set is empty or its covariance is
  degenerate.
- `gridmapping.pgm`: `write_pgm(stream, matrix)` writes a grid indexed
  `matrix[x][y]` as a binary P5 image. A cell value `v` becomes the grey level
  `255 * |1 - v|`.
- `gridmapping.memusage`:
  - `parse_memory_status(text)` extracts `VmData` and `VmSize` from a proc
    status text.
  - `memory_usage(pid=None)` reads `/proc/<pid>/status`.
  - `print_memory_usage(stream=None)` writes the figures for the current
    process, to stderr by default. It writes nothing where `/proc` cannot be
    read.
- `gridmapping.sensors`: `Sensor`, `OdometrySensor`, and `RangeSensor` with its
  evenly spaced `Beam`s. Readings come as `SensorReading`, `OdometryReading`
  and `RangeReading`. A `RangeReading` offers:
  - `raw_view(density)`: beams that are too dense are replaced by the largest
    float.
  - `active_beams(density)`: the number of beams kept.
  - `cartesian_form(max_range)`: the beam end points.
  - `with_pose(pose)`: a copy of the reading taken at that pose.
- `gridmapping.optimizer`: `Optimizer(params, likelihood)` with `OptimizerParams`.
  `gradient_descent(reading, pose, local_map)` climbs from a pose by
  single-axis moves and halves its steps each time no move improves the
  likelihood that you supply.

## What it does not do

The package provides utilities only. It contains no scan matcher, no
particle-filter mapper and no occupancy-grid map type, and it has no
command-line program. You supply the map and the likelihood function that the
`Optimizer` evaluates.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from gridmapping.geometry import OrientedPoint, FSRMovement
from gridmapping.gridline import grid_line

start = OrientedPoint(0.0, 0.0, 0.0)
goal = OrientedPoint(1.0, 1.0, 1.5707963)
step = FSRMovement.between(start, goal)
print(step.move(start))           # close to goal

print(grid_line((0, 0), (3, 1)))  # cells from (0, 0) to (3, 1)
```