from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import datetime
from pathlib import Path
from types import TracebackType
from typing import TextIO

from satin_sim.models.laser import GaussianResult, Laser

Clock = Callable[[], datetime]

COLUMN_HEADER = (
    "Pin\t\tPout\t\tSat. Int\tln(Pout/Pin)\tPout-Pin\n"
    "(watts)\t\t(watts)\t\t(watts/cm2)\t\t\t(watts)\n"
)


def render_header(laser: Laser, *, started: datetime) -> str:
    return (
        f"Start date: {started.isoformat()}\n"
        "\n"
        "Gaussian Beam\n"
        "\n"
        f"Pressure in Main Discharge = {laser.discharge_pressure}kPa\n"
        f"Small-signal Gain = {laser.small_signal_gain}\n"
        f"CO2 via {laser.isotope.name}\n"
        "\n"
        f"{COLUMN_HEADER}"
    )


def render_row(result: GaussianResult) -> str:
    return (
        f"{result.input_power}\t\t"
        f"{result.output_power:.3f}\t\t"
        f"{result.saturation_intensity}\t\t"
        f"{result.log_ratio:.3f}\t\t"
        f"{result.delta:.3f}\n"
    )


def render_footer(*, finished: datetime) -> str:
    return f"\nEnd date: {finished.isoformat()}\n"


class LaserReport:
    """Owns one laser's report file from header to footer.

    The file is truncated on open and closed on every exit path. The footer is
    only written when the block exits without an exception.
    """

    def __init__(self, path: Path, laser: Laser, *, clock: Clock = datetime.now):
        self.path = Path(path)
        self.laser = laser
        self._clock = clock
        self._fh: TextIO | None = None

    def __enter__(self) -> LaserReport:
        self._fh = self.path.open("w", encoding="utf-8", newline="\n")
        try:
            self._fh.write(render_header(self.laser, started=self._clock()))
        except BaseException:
            self._fh.close()
            self._fh = None
            raise
        return self

    def write_block(self, results: Iterable[GaussianResult]) -> None:
        if self._fh is None:
            raise RuntimeError(f"Report {self.path.name} is not open.")
        self._fh.write("".join(render_row(result) for result in results))

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        fh, self._fh = self._fh, None
        if fh is None:
            return
        try:
            if exc_type is None:
                fh.write(render_footer(finished=self._clock()))
        finally:
            fh.close()
