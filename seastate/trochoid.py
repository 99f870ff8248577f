"""Trochoidal wave heights and displacements sampled on a square grid."""

from __future__ import annotations

import math
from typing import Iterable, Iterator

from seastate.gerstner import WaveComponent


class TrochoidSimulation:
    """Sum of trochoidal waves sampled on an ``n`` by ``n`` grid of side ``size``.

    Results are flat lists in row-major order: index ``iy * n + ix``.
    """

    def __init__(self, n: int, size: float, components: Iterable[WaveComponent]) -> None:
        if n <= 0:
            raise ValueError("n must be positive")
        if size <= 0:
            raise ValueError("size must be positive")
        self.n = int(n)
        self.size = float(size)
        self.components: tuple[WaveComponent, ...] = tuple(components)
        self.time = 0.0
        self.wind_velocity = (0.0, 0.0)

    def set_wind_velocity(self, ux: float, uy: float) -> None:
        """Record the wind velocity; trochoidal waves are not driven by it."""
        self.wind_velocity = (ux, uy)

    def set_time(self, time: float) -> None:
        """Set the simulation time used by subsequent computations."""
        self.time = time

    def _grid(self) -> Iterator[tuple[int, float, float]]:
        step = self.size / self.n
        half = self.size / 2.0
        for iy in range(self.n):
            vy = iy * step - half
            for ix in range(self.n):
                yield iy * self.n + ix, ix * step - half, vy

    def compute_heights(self) -> list[float]:
        """Surface elevation at every grid point."""
        heights = [0.0] * (self.n * self.n)
        for wave in self.components:
            for idx, vx, vy in self._grid():
                heights[idx] += wave.amplitude * math.cos(wave.angle(vx, vy, self.time))
        return heights

    def compute_displacements(self) -> tuple[list[float], list[float]]:
        """Horizontal displacements ``(sx, sy)`` at every grid point."""
        count = self.n * self.n
        sx = [0.0] * count
        sy = [0.0] * count
        for wave in self.components:
            dx, dy = wave.direction
            qa = wave.steepness * wave.amplitude
            for idx, vx, vy in self._grid():
                s = math.sin(wave.angle(vx, vy, self.time))
                sx[idx] -= dx * qa * s
                sy[idx] -= dy * qa * s
        return sx, sy