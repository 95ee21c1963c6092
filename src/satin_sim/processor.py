from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

import numpy as np

from satin_sim.errors import ReportWriteError
from satin_sim.models.laser import Laser
from satin_sim.physics.saturation import compute_gaussians
from satin_sim.reporting.report import Clock, LaserReport

logger = logging.getLogger(__name__)


def process_laser(
    laser: Laser,
    input_powers: Sequence[int],
    *,
    output_dir: Path,
    table: np.ndarray | None = None,
    clock: Clock | None = None,
) -> Path:
    """Write the full saturation sweep for one laser and return the report path."""
    path = Path(output_dir) / laser.output_file
    try:
        with LaserReport(path, laser, clock=clock or datetime.now) as report:
            for input_power in input_powers:
                report.write_block(
                    compute_gaussians(input_power, laser.small_signal_gain, table=table)
                )
    except OSError as exc:
        raise ReportWriteError(laser.output_file, exc) from exc

    logger.info("Wrote %s", path)
    return path
