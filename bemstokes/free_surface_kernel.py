"""Stokes kernels with an image system for a free-slip (free-surface) wall."""

from __future__ import annotations

import math

import numpy as np

from bemstokes.kernel import StokesKernel

__all__ = ["FreeSurfaceStokesKernel"]


class FreeSurfaceStokesKernel(StokesKernel):
    """Stokeslet and stresslet corrected by the image across a free-slip wall.

    The wall normal is the coordinate axis ``wall_orientation``. Every image
    kernel combines the free-space term at ``p`` with the one at the image
    separation ``p_image``; components along the wall normal take the image
    term with a minus sign, the others with a plus sign. Only the
    three-dimensional case is supported.
    """

    def __init__(self, epsilon: float = 0.0, wall_orientation: int = 0) -> None:
        super().__init__(epsilon)
        self.wall_orientation = wall_orientation

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(epsilon={self.epsilon!r}, "
            f"wall_orientation={self.wall_orientation!r})"
        )

    @property
    def wall_orientation(self) -> int:
        """Index of the coordinate axis normal to the wall."""
        return self._wall_orientation

    @wall_orientation.setter
    def wall_orientation(self, orientation: int) -> None:
        orientation = int(orientation)
        if orientation < 0:
            raise ValueError(f"wall orientation must be non-negative, got {orientation}")
        self._wall_orientation = orientation

    # -- helpers -----------------------------------------------------------

    def _pair(self, p, p_image) -> tuple[np.ndarray, np.ndarray]:
        p = np.asarray(p, dtype=float)
        p_image = np.asarray(p_image, dtype=float)
        if p.ndim != 1 or p_image.ndim != 1:
            raise ValueError("separations must be vectors")
        if p.shape != p_image.shape:
            raise ValueError(
                f"separation and image separation differ in shape: "
                f"{p.shape} vs {p_image.shape}"
            )
        if p.shape[0] == 2:
            raise ValueError("image kernels are impossible in dimension 2")
        if p.shape[0] != 3:
            raise ValueError(f"expected a vector of dimension 3, got shape {p.shape}")
        return p, p_image

    def _signs(self, dim: int) -> np.ndarray:
        signs = np.ones(dim)
        if self._wall_orientation < dim:
            signs[self._wall_orientation] = -1.0
        return signs

    def _stokeslet(self, p: np.ndarray) -> np.ndarray:
        r = self._distance(p)
        with np.errstate(divide="ignore", invalid="ignore"):
            return np.outer(p, p) / r**3 + np.eye(p.shape[0]) / r

    def _stresslet(self, p: np.ndarray) -> np.ndarray:
        dim = p.shape[0]
        r = self._distance(p)
        ppp = np.einsum("i,j,k->ijk", p, p, p)
        with np.errstate(divide="ignore", invalid="ignore"):
            return -dim * ppp / r ** (dim + 2) / (2.0 * math.pi * (dim - 1))

    def _image_g(self, p, p_image, axis: int) -> np.ndarray:
        p, p_image = self._pair(p, p_image)
        dim = p.shape[0]
        signs = self._signs(dim)
        signs = signs[:, None] if axis == 0 else signs[None, :]
        g = self._stokeslet(p) + signs * self._stokeslet(p_image)
        return g / (4.0 * math.pi * (dim - 1))

    # -- rank 2 ------------------------------------------------------------

    def value_tens_image(self, p, p_image) -> np.ndarray:
        """Image Stokeslet; the row along the wall normal subtracts the image."""
        return self._image_g(p, p_image, axis=0)

    def value_tens_image_old(self, p, p_image) -> np.ndarray:
        """Image Stokeslet; the column along the wall normal subtracts the image."""
        return self._image_g(p, p_image, axis=1)

    def value_tens_image_pimponi(self, p, p_image) -> np.ndarray:
        """Image Stokeslet in the column-signed form of the reference solution."""
        return self._image_g(p, p_image, axis=1)

    # -- rank 3 ------------------------------------------------------------

    def value_tens_image2(self, p, p_image) -> np.ndarray:
        """Image stresslet; the first index along the wall normal subtracts."""
        p, p_image = self._pair(p, p_image)
        signs = self._signs(p.shape[0])[:, None, None]
        return self._stresslet(p) + signs * self._stresslet(p_image)

    def value_tens_image2_pimponi(self, p, p_image) -> np.ndarray:
        """Image stresslet; the second index along the wall normal subtracts."""
        p, p_image = self._pair(p, p_image)
        signs = self._signs(p.shape[0])[None, :, None]
        return self._stresslet(p) + signs * self._stresslet(p_image)

    def value_tens_image2_old(self, p, p_image) -> np.ndarray:
        """Image stresslet signed by the second and third indices together."""
        p, p_image = self._pair(p, p_image)
        s = self._signs(p.shape[0])
        signs = s[None, :, None] * s[None, None, :]
        return self._stresslet(p) + signs * self._stresslet(p_image)