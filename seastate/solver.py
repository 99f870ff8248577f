"""Newton inversion of a Gerstner wave field to find the surface height above a point."""

from __future__ import annotations

import math
from typing import Iterable, NamedTuple, Sequence

from seastate.gerstner import WaveComponent

Vector2 = tuple[float, float]
Matrix2 = tuple[tuple[float, float], tuple[float, float]]


class Residual(NamedTuple):
    """Residual, Jacobian and surface height of the inversion problem at one guess."""

    f: Vector2
    jacobian: Matrix2
    height: float


def wave_residual(
    components: Iterable[WaveComponent],
    x: Sequence[float],
    p: Sequence[float],
    time: float,
) -> Residual:
    """Evaluate the residual ``p - X(x)`` and its Jacobian for rest position ``x``.

    ``X(x)`` is the horizontal position that the point at rest position ``x``
    is carried to by the waves. The residual uses each component's amplitude,
    the Jacobian its steepness times amplitude; component phases are not
    included in the angle. The height is the summed vertical displacement at
    ``x``, which comes at no extra cost.
    """
    x0, x1 = float(x[0]), float(x[1])
    f0 = float(p[0]) - x0
    f1 = float(p[1]) - x1
    j00, j01, j10, j11 = -1.0, 0.0, 0.0, -1.0
    height = 0.0
    for wave in components:
        dx, dy = wave.direction
        a = wave.amplitude
        k = wave.wavenumber
        theta = k * (x0 * dx + x1 * dy) - wave.angular_frequency * time
        s = math.sin(theta)
        c = math.cos(theta)
        qakc = wave.steepness * a * k * c
        height += a * c
        f0 += a * dx * s
        f1 += a * dy * s
        j00 += qakc * dx * dx
        j01 += qakc * dx * dy
        j10 += qakc * dx * dy
        j11 += qakc * dy * dy
    return Residual((f0, f1), ((j00, j01), (j10, j11)), height)


def _solve_step(jacobian: Matrix2, f: Vector2) -> Vector2:
    (a, b), (c, d) = jacobian
    det = a * d - b * c
    if det == 0.0:
        raise ValueError("Jacobian is singular")
    return ((d * f[0] - b * f[1]) / det, (-c * f[0] + a * f[1]) / det)


def invert_gerstner(
    components: Iterable[WaveComponent],
    p: Sequence[float],
    time: float,
    tol: float = 1.0e-10,
    max_iterations: int = 30,
) -> tuple[Vector2, float]:
    """Find the rest position whose displaced point lies above ``p``.

    Newton iteration starting from ``p`` itself. Returns the rest position and
    the surface height from the last residual evaluation. Raises ``ValueError``
    if the Jacobian becomes singular.
    """
    waves = tuple(components)
    x: Vector2 = (float(p[0]), float(p[1]))
    err = 1.0
    height = 0.0
    iterations = 0
    while abs(err) > tol and iterations < max_iterations:
        residual = wave_residual(waves, x, p, time)
        height = residual.height
        step = _solve_step(residual.jacobian, residual.f)
        x = (x[0] - step[0], x[1] - step[1])
        err = math.hypot(*residual.f)
        iterations += 1
    return x, height


def compute_depth_directly(
    components: Iterable[WaveComponent],
    point: Sequence[float],
    time: float,
) -> float:
    """Depth of ``point`` below the wave surface (negative when above it)."""
    _, height = invert_gerstner(components, (point[0], point[1]), time, 1.0e-10, 30)
    return height - float(point[2])