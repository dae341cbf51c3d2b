"""Reference geometry of a helical flagellum expressed as an Euler vector.

An Euler vector stores the positions of ``n`` support points in three
blocks: all x coordinates, then all y coordinates, then all z coordinates,
so coordinate ``d`` of point ``i`` sits at index ``i + d * n``.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

import numpy as np

__all__ = ["FlagellarGeometryHandler", "rotation_matrix"]

_DIM = 3


def rotation_matrix(theta: float) -> np.ndarray:
    """Rotation by ``theta`` about the x axis."""
    c, s = math.cos(theta), math.sin(theta)
    return np.array(
        [
            [1.0, 0.0, 0.0],
            [0.0, c, -s],
            [0.0, s, c],
        ]
    )


def _split(positions) -> np.ndarray:
    arr = np.array(positions, dtype=float)
    if arr.ndim != 1:
        raise ValueError(f"expected a flat Euler vector, got shape {arr.shape}")
    if arr.shape[0] % _DIM:
        raise ValueError(
            f"Euler vector length {arr.shape[0]} is not a multiple of {_DIM}"
        )
    return arr.reshape(_DIM, arr.shape[0] // _DIM)


def _selection(flagellum_dofs: Iterable[int] | None, n: int) -> np.ndarray:
    if flagellum_dofs is None:
        return np.arange(n)
    idx = np.unique(np.fromiter((int(i) for i in flagellum_dofs), dtype=int))
    if idx.size and (idx[0] < 0 or idx[-1] >= n):
        raise ValueError(f"flagellum support point index out of range 0..{n - 1}")
    return idx


@dataclass
class FlagellarGeometryHandler:
    """Parameters and deformations of a flagellum along the x axis."""

    n_lambda: float = 1.5
    length: float = 7.17952051265
    alpha: float = 0.761770785745
    k: float = 1.31273083546
    ke: float = 1.31273083546
    delta_head_flagellum: float = 0.125
    a: float = 0.1

    PARAMETER_NAMES = {
        "Number of turns for the spiral": "n_lambda",
        "Length over x axis": "length",
        "Flagellar Amplitude": "alpha",
        "Flagellar wave number": "k",
        "Reduction parameter": "ke",
        "Head Flagellum Separation": "delta_head_flagellum",
        "Flagellum cross section radius": "a",
    }

    @classmethod
    def from_parameters(cls, parameters: Mapping[str, object]) -> "FlagellarGeometryHandler":
        """Build a handler from a mapping keyed by the parameter-file names."""
        values = {}
        for name, raw in parameters.items():
            try:
                field = cls.PARAMETER_NAMES[name]
            except KeyError:
                raise KeyError(f"unknown flagellum parameter {name!r}") from None
            try:
                values[field] = float(raw)
            except (TypeError, ValueError) as exc:
                raise ValueError(f"parameter {name!r} is not a number: {raw!r}") from exc
        return cls(**values)

    def compute_reference_euler(self, positions, flagellum_dofs=None) -> np.ndarray:
        """Deform a straight cylinder into the damped helix of the flagellum.

        Points of the flagellum beyond the head separation are moved onto a
        helix whose amplitude grows from zero near the head; all others keep
        their position.
        """
        coords = _split(positions)
        idx = _selection(flagellum_dofs, coords.shape[1])
        xs, ys, zs = coords[0, idx], coords[1, idx], coords[2, idx]
        x = xs - self.delta_head_flagellum
        active = x > 0.0
        idx, x, ys, zs = idx[active], x[active], ys[active], zs[active]

        phi = np.arctan2(ys, zs)
        a = np.hypot(zs, ys)
        ke, k, alpha = self.ke, self.k, self.alpha
        decay = np.exp(-(ke * x * ke * x))
        e = 1.0 - decay
        e2 = 1.0 - np.exp(-(ke**4 * x * x))
        e_prime = 2.0 * ke * ke * x * decay
        theta = k * x - math.pi
        slope2 = e * k * e * k + e_prime * e_prime
        d = np.sqrt(1.0 + alpha * alpha * slope2)
        g = np.sqrt(slope2)
        h = alpha * a * d / g * np.sin(phi)
        u = e * k * np.sin(theta) - e_prime * np.cos(theta)
        v = e_prime * np.sin(theta) + e * k * np.cos(theta)
        m = a / g * (u / d * np.sin(phi) + v * np.cos(phi))
        n = a / g * (u * np.cos(phi) - v / d * np.sin(phi))

        coords[0, idx] = x + e2 * h + self.delta_head_flagellum
        coords[1, idx] = alpha * e * np.cos(theta) + m
        coords[2, idx] = alpha * e * np.sin(theta) + n
        return coords.reshape(-1)

    def compute_reference_euler_constant_spiral(
        self, positions, flagellum_dofs=None
    ) -> np.ndarray:
        """Deform a straight cylinder into a helix of constant amplitude.

        The cross-section radius is tapered linearly to zero over the first
        and last 0.2 units of length so that the ends close.
        """
        coords = _split(positions)
        idx = _selection(flagellum_dofs, coords.shape[1])
        x = coords[0, idx] - self.delta_head_flagellum
        ys, zs = coords[1, idx], coords[2, idx]

        phi = np.arctan2(ys, zs)
        radius = np.hypot(zs, ys)
        head = x < 0.2
        tail = ~head & (self.length - x < 0.2)
        e3 = np.where(head, (x + 0.1) / 0.3, 1.0)
        e4 = np.where(tail, (self.length + 0.1 - x) / 0.3, 1.0)
        a = e3 * e4 * radius

        k, alpha = self.k, self.alpha
        theta = k * x - math.pi
        d = math.sqrt(1.0 + alpha * alpha * k * k)
        h = alpha * a * d / k * np.sin(phi)
        m = a / k * (k * np.sin(theta) / d * np.sin(phi) + k * np.cos(theta) * np.cos(phi))
        n = a / k * (k * np.sin(theta) / d * np.cos(phi) - k * np.cos(theta) * np.sin(phi) / d)

        coords[0, idx] = x + h + self.delta_head_flagellum
        coords[1, idx] = alpha * np.cos(theta) + m
        coords[2, idx] = alpha * np.sin(theta) + n
        return coords.reshape(-1)

    def compute_euler_at_theta(self, reference_euler, theta, flagellum_dofs=None) -> np.ndarray:
        """Rotate the flagellum points of ``reference_euler`` by ``theta`` about x."""
        coords = _split(reference_euler)
        idx = _selection(flagellum_dofs, coords.shape[1])
        coords[:, idx] = rotation_matrix(theta) @ coords[:, idx]
        return coords.reshape(-1)