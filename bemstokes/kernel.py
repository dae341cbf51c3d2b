"""Free-space Stokes fundamental solution and its derived tensors."""

from __future__ import annotations

import math

import numpy as np

__all__ = ["StokesKernel"]


def _as_point(p) -> np.ndarray:
    """Return ``p`` as a float vector of dimension 2 or 3."""
    arr = np.asarray(p, dtype=float)
    if arr.ndim != 1 or arr.shape[0] not in (2, 3):
        raise ValueError(
            f"expected a vector of dimension 2 or 3, got shape {arr.shape}"
        )
    return arr


class StokesKernel:
    """Stokeslet ``G``, stresslet ``W`` and higher-order kernel ``L``.

    The dimension is taken from the length of the evaluation vector. A
    positive ``epsilon`` is added to the distance to regularise the kernel.
    """

    def __init__(self, epsilon: float = 0.0) -> None:
        self.epsilon = float(epsilon)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(epsilon={self.epsilon!r})"

    def _distance(self, p: np.ndarray) -> float:
        return math.sqrt(float(p @ p)) + self.epsilon

    def value_tens(self, p) -> np.ndarray:
        """Rank-2 Stokeslet tensor evaluated at the separation ``p``."""
        p = _as_point(p)
        dim = p.shape[0]
        r = self._distance(p)
        identity = np.eye(dim)
        outer = np.outer(p, p)
        with np.errstate(divide="ignore", invalid="ignore"):
            if dim == 2:
                g = outer / (r * r) - identity * math.log(r) if r > 0 else (
                    outer / (r * r) - identity * -math.inf
                )
            else:
                g = outer / r**3 + identity / r
        return g / (4.0 * math.pi * (dim - 1))

    def value_tens2(self, p) -> np.ndarray:
        """Rank-3 stresslet tensor evaluated at the separation ``p``."""
        p = _as_point(p)
        dim = p.shape[0]
        r = self._distance(p)
        ppp = np.einsum("i,j,k->ijk", p, p, p)
        with np.errstate(divide="ignore", invalid="ignore"):
            return -dim * ppp / r ** (dim + 2) / (2.0 * math.pi * (dim - 1))

    def value_tens3(self, p) -> np.ndarray:
        """Rank-4 kernel tensor evaluated at the separation ``p``."""
        p = _as_point(p)
        dim = p.shape[0]
        r = self._distance(p)
        eye = np.eye(dim)
        term1 = np.einsum("im,jk->ijkm", eye, eye)
        term2 = np.einsum("k,jm,i->ijkm", p, eye, p) + np.einsum(
            "k,ij,m->ijkm", p, eye, p
        )
        term3 = np.einsum("j,mk,i->ijkm", p, eye, p) + np.einsum(
            "j,ik,m->ijkm", p, eye, p
        )
        term4 = np.einsum("i,j,k,m->ijkm", p, p, p, p)
        with np.errstate(divide="ignore", invalid="ignore"):
            tensor = (
                -4.0 * term1 / r**3
                - 6.0 * term2 / r**5
                - 6.0 * term3 / r**5
                + 60.0 * term4 / r**7
            )
        return tensor / (-4.0 * math.pi * (dim - 1))

    def gradient_tens(self, p) -> np.ndarray:
        """Derivative of the Stokeslet: ``result[i, j, k] = dG_ij / dp_k``."""
        p = _as_point(p)
        dim = p.shape[0]
        norm = math.sqrt(float(p @ p))
        r = norm + self.epsilon
        eye = np.eye(dim)
        with np.errstate(divide="ignore", invalid="ignore"):
            d_r = p / norm
            sym = np.einsum("ik,j->ijk", eye, p) + np.einsum("jk,i->ijk", eye, p)
            outer_dr = np.einsum("i,j,k->ijk", p, p, d_r)
            delta_dr = np.einsum("ij,k->ijk", eye, d_r)
            if dim == 2:
                grad = sym / r**2 - 2.0 * outer_dr / r**3 - delta_dr / r
            else:
                grad = sym / r**3 - 3.0 * outer_dr / r**4 - delta_dr / r**2
        return grad / (4.0 * math.pi * (dim - 1))