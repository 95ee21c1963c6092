from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import ALL_COMPLETED, Future, ThreadPoolExecutor, wait
from functools import partial
from pathlib import Path
from typing import Protocol

import numpy as np

from satin_sim.errors import LaserRunError
from satin_sim.models.config import ExecutionPolicy
from satin_sim.models.laser import Laser
from satin_sim.physics.saturation import axial_correction_table
from satin_sim.processor import process_laser
from satin_sim.reporting.report import Clock

logger = logging.getLogger(__name__)


class LaserUnit(Protocol):
    def __call__(
        self,
        laser: Laser,
        input_powers: Sequence[int],
        *,
        output_dir: Path,
        table: np.ndarray | None = None,
        clock: Clock | None = None,
    ) -> Path: ...


class LaserScheduler:
    """Run one unit of work per laser under a sequential or concurrent policy.

    Sequential runs stop at the first failure. Concurrent runs attempt every
    laser, wait for all of them, and then raise ``LaserRunError`` listing every
    failure.
    """

    def __init__(self, policy: ExecutionPolicy | None = None, *, unit: LaserUnit = process_laser):
        self.policy = policy or ExecutionPolicy()
        self.unit = unit

    def run(
        self,
        lasers: Sequence[Laser],
        input_powers: Sequence[int],
        *,
        output_dir: Path,
        clock: Clock | None = None,
    ) -> list[Path]:
        table = axial_correction_table()
        powers = tuple(input_powers)
        tasks = [
            partial(self.unit, laser, powers, output_dir=output_dir, table=table, clock=clock)
            for laser in lasers
        ]
        logger.info(
            "Processing %d laser(s) x %d input power(s) in %s mode",
            len(tasks),
            len(powers),
            self.policy.mode,
        )
        if self.policy.mode == "concurrent":
            return self._run_concurrent(lasers, tasks)
        return [task() for task in tasks]

    def _run_concurrent(
        self, lasers: Sequence[Laser], tasks: list[Callable[[], Path]]
    ) -> list[Path]:
        if not tasks:
            return []
        max_workers = self.policy.max_workers or len(tasks)
        with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="satin") as executor:
            futures: list[Future[Path]] = [executor.submit(task) for task in tasks]
            wait(futures, return_when=ALL_COMPLETED)

        paths: list[Path] = []
        failures: dict[str, BaseException] = {}
        for laser, future in zip(lasers, futures):
            exc = future.exception()
            if exc is None:
                paths.append(future.result())
                continue
            logger.error("Laser %s failed: %s", laser.output_file, exc)
            failures[laser.output_file] = exc

        if failures:
            raise LaserRunError(failures) from next(iter(failures.values()))
        return paths
