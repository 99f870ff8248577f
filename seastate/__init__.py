"""Ocean surface wave models, wave spectra, depth sampling and wave parameter records."""

__version__ = "0.1.0"
__all__ = ["gerstner", "messages", "solver", "spectrum", "trochoid"]