"""Named, typed wave parameters as exchanged between configuration and simulation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union

Vector3 = tuple[float, float, float]
ParamValue = Union[int, float, Vector3]


class ParamType(Enum):
    """Type tag carried by each parameter value."""

    INT32 = "int32"
    DOUBLE = "double"
    VECTOR3D = "vector3d"


_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


@dataclass(frozen=True)
class Param:
    """A single named parameter with a typed value."""

    name: str
    type: ParamType
    value: ParamValue

    def __post_init__(self) -> None:
        if self.type is ParamType.INT32:
            if isinstance(self.value, bool) or not isinstance(self.value, int):
                raise TypeError(f"parameter {self.name!r} must hold an int")
            if not _INT32_MIN <= self.value <= _INT32_MAX:
                raise ValueError(f"parameter {self.name!r} is out of the int32 range")
        elif self.type is ParamType.DOUBLE:
            if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
                raise TypeError(f"parameter {self.name!r} must hold a number")
            object.__setattr__(self, "value", float(self.value))
        elif self.type is ParamType.VECTOR3D:
            if not isinstance(self.value, tuple) or len(self.value) != 3:
                raise TypeError(f"parameter {self.name!r} must hold a 3-tuple")
            object.__setattr__(self, "value", tuple(float(v) for v in self.value))


@dataclass(frozen=True)
class WaveConfig:
    """Configuration of a multi-component Gerstner wave field."""

    number: int
    scale: float
    steepness: float
    angle: float
    period: float
    amplitude: float
    direction: tuple[float, float]


@dataclass(frozen=True)
class WaveSinusoidConfig:
    """Configuration of a single sinusoidal wave."""

    wave_angle: float
    wave_period: float
    wave_amplitude: float


@dataclass(frozen=True)
class WaveTileConfig:
    """Configuration of an ocean tile."""

    tile_size: float
    tile_resolution: int


@dataclass(frozen=True)
class WaveWindConfig:
    """Wind driving the ocean tile, in polar form."""

    wind_angle: float
    wind_speed: float


def _double(name: str, value: float) -> Param:
    return Param(name, ParamType.DOUBLE, value)


def _int(name: str, value: int) -> Param:
    return Param(name, ParamType.INT32, value)


def wave_params(config: WaveConfig) -> list[Param]:
    """Parameters describing a wave field configuration."""
    dx, dy = config.direction
    return [
        _int("number", config.number),
        _double("scale", config.scale),
        _double("steepness", config.steepness),
        _double("angle", config.angle),
        _double("period", config.period),
        _double("amplitude", config.amplitude),
        Param("direction", ParamType.VECTOR3D, (dx, dy, 0.0)),
    ]


def wave_sinusoid_params(config: WaveSinusoidConfig) -> list[Param]:
    """Parameters describing a sinusoidal wave configuration."""
    return [
        _double("wave_angle", config.wave_angle),
        _double("wave_period", config.wave_period),
        _double("wave_amplitude", config.wave_amplitude),
    ]


def wave_tile_params(config: WaveTileConfig) -> list[Param]:
    """Parameters describing an ocean tile configuration."""
    return [
        _double("tile_size", config.tile_size),
        _int("tile_resolution", config.tile_resolution),
    ]


def wave_wind_params(config: WaveWindConfig) -> list[Param]:
    """Parameters describing the wind configuration."""
    return [
        _double("wind_angle", config.wind_angle),
        _double("wind_speed", config.wind_speed),
    ]


def param_double(params: Iterable[Param], name: str, default: float) -> float:
    """Value of the first scalar parameter called ``name``, or ``default``.

    Integer parameters are converted to float; a parameter of that name
    holding a vector yields ``default``.
    """
    for param in params:
        if param.name != name:
            continue
        if param.type in (ParamType.DOUBLE, ParamType.INT32):
            return float(param.value)
        return default
    return default


def wind_velocity_from_params(params: Iterable[Param]) -> tuple[float, float]:
    """Cartesian wind velocity from ``wind_angle`` and ``wind_speed`` parameters."""
    items = tuple(params)
    angle = param_double(items, "wind_angle", 0.0)
    speed = param_double(items, "wind_speed", 0.0)
    return (speed * math.cos(angle), speed * math.sin(angle))