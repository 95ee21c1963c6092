"""Numerical kernels for the saturated Gaussian-beam model."""

from satin_sim.physics.saturation import (
    SATURATION_INTENSITIES,
    axial_correction_table,
    build_axial_correction_table,
    compute_gaussians,
)

__all__ = [
    "SATURATION_INTENSITIES",
    "axial_correction_table",
    "build_axial_correction_table",
    "compute_gaussians",
]
