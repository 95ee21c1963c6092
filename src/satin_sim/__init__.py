"""Gaussian-beam saturation model for CO2 laser output power."""
