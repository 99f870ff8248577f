import math

import pytest

from seastate.spectrum import (
    GRAVITY,
    OMEGA_0,
    WaveSpectrum,
    dispersion,
    inv_dispersion,
    pierson_moskowitz_k0,
    pierson_moskowitz_spectrum,
    quantised_dispersion,
    significant_wave_height,
)


@pytest.mark.parametrize("omega", [0.1, 0.5, 1.0, 2.5, 7.0])
def test_dispersion_round_trip(omega):
    assert dispersion(inv_dispersion(omega)) == pytest.approx(omega)


def test_dispersion_is_even_in_k():
    assert dispersion(-0.3) == pytest.approx(dispersion(0.3))


def test_dispersion_of_zero():
    assert dispersion(0.0) == 0.0


def test_inv_dispersion_uses_gravity():
    assert inv_dispersion(math.sqrt(GRAVITY)) == pytest.approx(1.0)


@pytest.mark.parametrize("k", [0.01, 1.0, 15.0, 50.0, 400.0])
def test_quantised_dispersion_is_multiple_below(k):
    q = quantised_dispersion(k)
    assert q <= dispersion(k)
    assert dispersion(k) - q < OMEGA_0
    assert (q / OMEGA_0) == pytest.approx(round(q / OMEGA_0))


def test_significant_wave_height_scales_quadratically():
    assert significant_wave_height(4.0) == pytest.approx(
        4.0 * significant_wave_height(2.0)
    )


def test_significant_wave_height_pinned():
    assert significant_wave_height(math.sqrt(GRAVITY)) == pytest.approx(0.21)


def test_k0_times_u_squared_is_gravity():
    u = 3.7
    assert pierson_moskowitz_k0(u) * u * u == pytest.approx(GRAVITY)


def test_spectrum_zero_for_small_k_or_u():
    assert pierson_moskowitz_spectrum(0.0, 0.0, 0.0, 5.0, 5.0, 0.0) == 0.0
    assert pierson_moskowitz_spectrum(1.0, 1.0, 0.0, 0.0, 0.0, 0.0) == 0.0


def test_spectrum_zero_across_wind():
    assert pierson_moskowitz_spectrum(1.0, 0.0, 1.0, 5.0, 5.0, 0.0) == pytest.approx(0.0)


def test_spectrum_symmetric_along_and_against_wind():
    along = pierson_moskowitz_spectrum(0.5, 0.5, 0.0, 5.0, 5.0, 0.0)
    against = pierson_moskowitz_spectrum(0.5, -0.5, 0.0, 5.0, 5.0, 0.0)
    assert along > 0.0
    assert along == pytest.approx(against)


def test_wave_spectrum_defaults_to_calm():
    spectrum = WaveSpectrum()
    assert (spectrum.ux, spectrum.uy, spectrum.u) == (0.0, 0.0, 0.0)
    assert spectrum.spectrum(1.0, 1.0, 0.0) == 0.0


def test_wave_spectrum_wind_speed():
    spectrum = WaveSpectrum()
    spectrum.set_wind_velocity(3.0, 4.0)
    assert spectrum.u == pytest.approx(5.0)


def test_wave_spectrum_matches_function():
    spectrum = WaveSpectrum()
    spectrum.set_wind_velocity(3.0, 4.0)
    k = math.hypot(0.2, 0.3)
    assert spectrum.spectrum(k, 0.2, 0.3) == pytest.approx(
        pierson_moskowitz_spectrum(k, 0.2, 0.3, spectrum.u, 3.0, 4.0)
    )