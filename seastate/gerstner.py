"""Gerstner (trochoidal) wave components and a regular surface grid driven by them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

Point3 = tuple[float, float, float]


@dataclass(frozen=True)
class WaveComponent:
    """One sinusoidal component of a Gerstner wave field."""

    amplitude: float
    wavenumber: float
    angular_frequency: float
    phase: float = 0.0
    steepness: float = 0.0
    direction: tuple[float, float] = (1.0, 0.0)

    def angle(self, x: float, y: float, time: float) -> float:
        """Phase angle of this component at horizontal position ``(x, y)``."""
        dx, dy = self.direction
        return (dx * x + dy * y) * self.wavenumber - self.angular_frequency * time + self.phase


def gerstner_offset(
    components: Iterable[WaveComponent], x: float, y: float, time: float
) -> Point3:
    """Summed displacement of the surface point whose rest position is ``(x, y)``."""
    ox = oy = oz = 0.0
    for wave in components:
        angle = wave.angle(x, y, time)
        s = math.sin(angle)
        c = math.cos(angle)
        dx, dy = wave.direction
        qa = wave.steepness * wave.amplitude
        ox -= dx * qa * s
        oy -= dy * qa * s
        oz += wave.amplitude * c
    return (ox, oy, oz)


def tile_modulo(x: float, tile_size: float) -> float:
    """Map ``x`` into a tile of width ``tile_size`` centred on the origin."""
    half = tile_size / 2.0
    if x < 0.0:
        return math.fmod(x - half, tile_size) + half
    return math.fmod(x + half, tile_size) - half


def _regular_grid(size: Sequence[float], cell_count: Sequence[int]) -> tuple[Point3, ...]:
    lx, ly = size
    nx, ny = cell_count
    dx = lx / nx
    dy = ly / ny
    return tuple(
        (ix * dx - lx / 2.0, iy * dy - ly / 2.0, 0.0)
        for iy in range(ny + 1)
        for ix in range(nx + 1)
    )


class GerstnerSurface:
    """A regular grid of surface points displaced by a sum of Gerstner waves.

    Points are stored row by row, ``(cell_count[0] + 1)`` to a row.
    """

    def __init__(
        self,
        size: Sequence[float] = (1000.0, 1000.0),
        cell_count: Sequence[int] = (50, 50),
        components: Iterable[WaveComponent] = (),
    ) -> None:
        if len(size) != 2 or len(cell_count) != 2:
            raise ValueError("size and cell_count must each have two entries")
        if any(n <= 0 for n in cell_count):
            raise ValueError("cell_count entries must be positive")
        if any(length <= 0 for length in size):
            raise ValueError("size entries must be positive")
        self.size = (float(size[0]), float(size[1]))
        self.cell_count = (int(cell_count[0]), int(cell_count[1]))
        self.components: tuple[WaveComponent, ...] = tuple(components)
        self.initial_points = _regular_grid(self.size, self.cell_count)
        self.points: list[Point3] = list(self.initial_points)
        self.time = 0.0
        self.update(0.0)

    def set_components(self, components: Iterable[WaveComponent]) -> None:
        """Replace the wave components; takes effect on the next update."""
        if components is None:
            raise ValueError("components must not be None")
        self.components = tuple(components)

    def update(self, time: float) -> None:
        """Move every point to its displaced position at ``time``."""
        self.time = time
        moved = []
        for x, y, z in self.initial_points:
            ox, oy, oz = gerstner_offset(self.components, x, y, time)
            moved.append((x + ox, y + oy, z + oz))
        self.points = moved