from __future__ import annotations

import logging
from decimal import Decimal
from pathlib import Path

from satin_sim.errors import InputParseError, MissingInputError
from satin_sim.models.laser import CarbonDioxide, Laser, is_valid_output_file

logger = logging.getLogger(__name__)

PACKAGED_DATA_DIR = Path(__file__).resolve().parent / "data"


def resolve_data_path(file_name: str, data_dir: Path | None = None) -> Path:
    """Locate an input resource, raising ``MissingInputError`` when it is absent."""
    base = PACKAGED_DATA_DIR if data_dir is None else Path(data_dir)
    path = base / file_name
    if not path.is_file():
        raise MissingInputError(f"Failed to find resource {file_name} in {base}")
    return path


def _read_lines(path: Path) -> list[str]:
    try:
        return path.read_text(encoding="utf-8").splitlines()
    except FileNotFoundError as exc:
        raise MissingInputError(f"Failed to find resource {path}") from exc


def load_input_powers(path: Path) -> tuple[int, ...]:
    """Read one non-negative integer input power (watts) per line, in file order."""
    powers: list[int] = []
    for line_no, line in enumerate(_read_lines(path), start=1):
        if not (line.isascii() and line.isdigit()):
            raise InputParseError(
                f"{path.name}:{line_no}: expected a non-negative integer input power, "
                f"got {line!r}."
            )
        powers.append(int(line))
    return tuple(powers)


def _is_pressure(text: str) -> bool:
    return (
        len(text) == 4
        and text.isascii()
        and text[:2].isdigit()
        and text[2] == "."
        and text[3].isdigit()
    )


def parse_laser_line(line: str) -> Laser | None:
    """Parse ``<file>.out <pressure> <gain> <isotope>``; ``None`` if the line does not match."""
    fields = line.split()
    if len(fields) != 4:
        return None
    output_file, pressure, gain, trailing_code = fields

    if not is_valid_output_file(output_file):
        return None
    if not _is_pressure(pressure):
        return None
    if not (gain.isascii() and gain.isdigit()):
        return None
    leading_code = output_file[:2]
    if trailing_code.lower() != leading_code:
        return None

    return Laser(
        output_file=output_file,
        isotope=CarbonDioxide.from_code(leading_code),
        discharge_pressure=Decimal(pressure),
        small_signal_gain=int(gain),
    )


def load_lasers(path: Path) -> tuple[Laser, ...]:
    """Read every well-formed laser descriptor, skipping lines that do not match."""
    lasers: list[Laser] = []
    for line_no, line in enumerate(_read_lines(path), start=1):
        laser = parse_laser_line(line)
        if laser is None:
            logger.debug("Skipping %s:%d: %r", path.name, line_no, line)
            continue
        lasers.append(laser)
    return tuple(lasers)
