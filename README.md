# seastate

Models of an ocean surface for use in simulations of small vessels. The
package is plain Python and needs only the standard library.

## Install

    pip install .

To run the test suite:

    pip install ".[test]"
    pytest

## Modules

- `seastate.spectrum` holds the deep-water dispersion relation
  (`dispersion`, `inv_dispersion`, `quantised_dispersion`), the
  significant wave height for a wind speed (`significant_wave_height`) and
  the directional Pierson–Moskowitz spectrum (`pierson_moskowitz_k0`,
  `pierson_moskowitz_spectrum`). The spectrum is zero when the wavenumber or
  the wind speed is zero. `WaveSpectrum` stores a wind velocity
  (`set_wind_velocity`) and evaluates the spectrum for it (`spectrum`).
- `seastate.gerstner` has `WaveComponent`, a frozen dataclass for one wave
  (amplitude, wavenumber, angular frequency, phase, steepness, direction).
  `gerstner_offset` sums the displacement that a set of components gives to
  the surface point at a rest position. `GerstnerSurface` is a regular grid
  of points, by default 1000 × 1000 m in 50 × 50 cells, stored row by row;
  `update(time)` moves every point to its displaced position and
  `set_components` replaces the waves for the next update. `tile_modulo`
  wraps a coordinate into a periodic tile whose origin is at its centre.
- `seastate.trochoid` has `TrochoidSimulation`, which samples a sum of
  waves on an `n × n` grid of side `size`. `compute_heights` returns the
  surface elevations and `compute_displacements` the horizontal
  displacements `(sx, sy)`, as flat lists in row-major order. The wind
  velocity can be set but does not affect the result.
- `seastate.solver` inverts the Gerstner mapping by Newton iteration.
  `wave_residual` gives the residual, its Jacobian and the surface height
  at one guess; `invert_gerstner` iterates from the query point and raises
  `ValueError` if the Jacobian becomes singular. `compute_depth_directly`
  returns the depth of a point below the surface (negative above it). The
  solver leaves component phases out of the wave angle.
- `seastate.messages` holds typed parameters (`Param`, `ParamType` with
  `INT32`, `DOUBLE` and `VECTOR3D`) and the configuration records
  `WaveConfig`, `WaveSinusoidConfig`, `WaveTileConfig` and
  `WaveWindConfig`. `wave_params`, `wave_sinusoid_params`,
  `wave_tile_params` and `wave_wind_params` turn each record into a list of
  parameters. `param_double` reads a scalar back by name with a default, and
  `wind_velocity_from_params` turns `wind_angle` and `wind_speed` into a
  Cartesian velocity.

## Example

    import math

    from seastate.gerstner import WaveComponent
    from seastate.solver import compute_depth_directly
    from seastate.spectrum import inv_dispersion

    omega = 2.0 * math.pi / 8.0
    swell = [
        WaveComponent(
            amplitude=1.0,
            wavenumber=inv_dispersion(omega),
            angular_frequency=omega,
            steepness=0.5,
            direction=(1.0, 0.0),
        )
    ]
    depth = compute_depth_directly(swell, (2.0, 3.0, -0.5), time=0.0)

A positive depth means that the point lies below the water surface.

## What it does not do

There is no command-line program and no rendering. Parameter lists are only
built and read; nothing here sends or receives them over a network. There is
no spectral (FFT) ocean tile simulation: `WaveSpectrum` evaluates spectral
densities but no surface is generated from them.