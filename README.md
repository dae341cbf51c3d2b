# bemstokes

Building blocks for boundary element simulations of Stokes flow, written
with NumPy and SciPy.

## Modules

### `bemstokes.kernel`

`StokesKernel(epsilon=0.0)` evaluates the free-space fundamental solution of
Stokes flow at a separation vector `p` of dimension 2 or 3. The dimension
comes from the length of `p`. A positive `epsilon` is added to the distance
to regularise the kernel.

- `value_tens(p)`: the Stokeslet `G`, a `dim x dim` array.
- `value_tens2(p)`: the stress kernel `W`, a `dim x dim x dim` array.
- `value_tens3(p)`: the fourth-order kernel `L`, a `dim x dim x dim x dim` array.
- `gradient_tens(p)`: the derivative of `G`, with `result[i, j, k] = dG_ij/dp_k`.

A vector of any other shape raises `ValueError`.

### `bemstokes.free_surface_kernel`

`FreeSurfaceStokesKernel(epsilon=0.0, wall_orientation=0)` is a
`StokesKernel` that adds the image across a perfect-slip (free-surface)
plane wall. The wall normal is the coordinate axis `wall_orientation`, which
can also be set later as an attribute. Negative values raise `ValueError`.

Each image method takes the separation `p` and the image separation
`p_image`. It combines the free-space term at `p` with the one at `p_image`.
Components along the wall normal take the image term with a minus sign,
the other components with a plus sign:

- `value_tens_image(p, p_image)`: Stokeslet, signed by row.
- `value_tens_image_old(p, p_image)` and `value_tens_image_pimponi(p, p_image)`:
  Stokeslet, signed by column.
- `value_tens_image2(p, p_image)`: stress kernel, signed by the first index.
- `value_tens_image2_pimponi(p, p_image)`: stress kernel, signed by the second index.
- `value_tens_image2_old(p, p_image)`: stress kernel, signed by the product
  of the second and third indices.

The image methods work in three dimensions only. Two-dimensional vectors, or
vectors of different shapes, raise `ValueError`.

### `bemstokes.direct_preconditioner`

`DirectPreconditioner` factorises a square matrix once with a sparse LU
decomposition (`scipy.sparse.linalg.splu`). The matrix may be a dense array
or a SciPy sparse matrix.

- `initialize(matrix)` factorises the matrix. It raises `ValueError` when
  the matrix is not square, is empty, or cannot be factorised.
- `vmult(src)`, or calling the object, returns the solution of `A x = src`.
  Using it before `initialize` raises `RuntimeError`. A right-hand side of
  the wrong length raises `ValueError`.
- `is_initialized` and `size` report the current state.

### `bemstokes.flagellar_geometry`

- `rotation_matrix(theta)`: the 3x3 matrix that rotates by `theta` about the
  x axis.
- `FlagellarGeometryHandler`: a dataclass that holds the flagellum
  parameters. The fields and their defaults are `n_lambda=1.5`,
  `length=7.17952051265`, `alpha=0.761770785745`, `k=1.31273083546`,
  `ke=1.31273083546`, `delta_head_flagellum=0.125` and `a=0.1`.
  `FlagellarGeometryHandler.from_parameters(mapping)` builds one from a
  mapping keyed by the long names in `PARAMETER_NAMES`, such as
  `"Flagellar Amplitude"`. Unknown names raise `KeyError`, and non-numeric
  values raise `ValueError`.
  - `compute_reference_euler(positions, flagellum_dofs=None)` moves the
    points beyond the head separation onto a helix. The helix amplitude
    grows from zero near the head.
  - `compute_reference_euler_constant_spiral(positions, flagellum_dofs=None)`
    moves the points onto a helix of constant amplitude. The cross-section
    radius tapers over the first and last 0.2 units of length.
  - `compute_euler_at_theta(reference_euler, theta, flagellum_dofs=None)`
    rotates the flagellum points by `theta` about the x axis.

  `flagellum_dofs` is an iterable of the indices of the support points that
  belong to the flagellum. With `None`, every point is included. The other
  points are returned unchanged, and the input array is not modified.

Position vectors use a component-blocked layout. For `n` support points,
entries `0..n-1` hold the x coordinates, `n..2n-1` the y coordinates and
`2n..3n-1` the z coordinates.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
import numpy as np
from bemstokes.kernel import StokesKernel
from bemstokes.free_surface_kernel import FreeSurfaceStokesKernel
from bemstokes.direct_preconditioner import DirectPreconditioner
from bemstokes.flagellar_geometry import FlagellarGeometryHandler

kernel = StokesKernel(0.0)
r = np.array([0.3, 0.3, 0.3])
G = kernel.value_tens(r)      # 3x3 Stokeslet
W = kernel.value_tens2(r)     # 3x3x3 stress kernel

wall = FreeSurfaceStokesKernel(0.0, wall_orientation=2)
r_image = np.array([0.3, 0.3, -1.7])
G_wall = wall.value_tens_image(r, r_image)

pre = DirectPreconditioner()
pre.initialize(np.array([[4.0, 1.0], [1.0, 3.0]]))
x = pre.vmult(np.array([1.0, 2.0]))

flagellum = FlagellarGeometryHandler()
positions = np.array([1.0, 2.0, 0.05, 0.05, 0.05, -0.05])  # two points
reference = flagellum.compute_reference_euler(positions)
rotated = flagellum.compute_euler_at_theta(reference, np.pi / 4)
```

## What this package does not do

This package provides kernels, a preconditioner and geometry transforms
only. It does not:

- generate or read meshes;
- assemble or solve boundary element systems;
- write results to files;
- provide a command-line program.

You supply the positions and matrices as NumPy or SciPy arrays.