from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from satin_sim.inputs import load_input_powers, load_lasers, resolve_data_path
from satin_sim.models.config import RunConfig
from satin_sim.models.laser import Laser
from satin_sim.reporting.report import Clock
from satin_sim.scheduler import LaserScheduler

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RunSummary:
    lasers: tuple[Laser, ...]
    input_powers: tuple[int, ...]
    reports: tuple[Path, ...]


def run(cfg: RunConfig, *, clock: Clock | None = None) -> RunSummary:
    """Load both input resources, then write one report per laser."""
    input_powers = load_input_powers(resolve_data_path(cfg.pin_file, cfg.data_dir))
    lasers = load_lasers(resolve_data_path(cfg.laser_file, cfg.data_dir))
    if not lasers:
        logger.warning("No laser descriptors found in %s", cfg.laser_file)

    output_dir = Path(cfg.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    scheduler = LaserScheduler(cfg.execution)
    reports = scheduler.run(lasers, input_powers, output_dir=output_dir, clock=clock)
    return RunSummary(lasers=lasers, input_powers=input_powers, reports=tuple(reports))
