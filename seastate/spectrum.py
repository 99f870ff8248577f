"""Deep-water dispersion relations and the Pierson-Moskowitz wave spectrum."""

from __future__ import annotations

import math

GRAVITY = 9.8
OMEGA_0 = 10.0

PIERSON_MOSKOWITZ_ALPHA = 0.0081
PIERSON_MOSKOWITZ_BETA = 0.74

_EPSILON = 1.0e-8


def dispersion(k: float) -> float:
    """Angular frequency of a deep-water wave with wavenumber ``k``."""
    return math.sqrt(GRAVITY * abs(k))


def inv_dispersion(omega: float) -> float:
    """Wavenumber of a deep-water wave with angular frequency ``omega``."""
    return omega * omega / GRAVITY


def quantised_dispersion(k: float) -> float:
    """Angular frequency rounded down to a multiple of ``OMEGA_0``."""
    return math.floor(dispersion(k) / OMEGA_0) * OMEGA_0


def significant_wave_height(u: float) -> float:
    """Significant wave height for a wind speed ``u``."""
    return 0.21 * u * u / GRAVITY


def pierson_moskowitz_k0(u: float) -> float:
    """Peak wavenumber scale of the Pierson-Moskowitz spectrum."""
    return GRAVITY / u / u


def pierson_moskowitz_spectrum(
    k: float, kx: float, ky: float, u: float, ux: float, uy: float
) -> float:
    """Directional Pierson-Moskowitz spectrum at wavevector ``(kx, ky)``.

    Returns zero when either the wavenumber or the wind speed vanishes.
    """
    if abs(k) < _EPSILON or abs(u) < _EPSILON:
        return 0.0
    k0 = pierson_moskowitz_k0(u)
    k4 = (k * k) ** 2
    r = k0 / k
    c = (kx * ux + ky * uy) / k / u
    return (
        (PIERSON_MOSKOWITZ_ALPHA / k4 / math.pi)
        * math.exp(-PIERSON_MOSKOWITZ_BETA * r * r)
        * c
        * c
    )


class WaveSpectrum:
    """A wave spectrum driven by a wind velocity."""

    def __init__(self) -> None:
        self.ux = 0.0
        self.uy = 0.0
        self.u = 0.0

    def set_wind_velocity(self, ux: float, uy: float) -> None:
        """Set the wind velocity components and derived speed."""
        self.ux = ux
        self.uy = uy
        self.u = math.hypot(ux, uy)

    def spectrum(self, k: float, kx: float, ky: float) -> float:
        """Spectral density at wavevector ``(kx, ky)`` for the current wind."""
        return pierson_moskowitz_spectrum(k, kx, ky, self.u, self.ux, self.uy)

    def __repr__(self) -> str:
        return f"WaveSpectrum(ux={self.ux!r}, uy={self.uy!r})"