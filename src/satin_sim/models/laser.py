from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

OUTPUT_FILE_SUFFIX = ".out"


class CarbonDioxide(str, Enum):
    """CO2 gas variant used in the main discharge, keyed by its two-letter code."""

    MD = "MD"
    PI = "PI"

    @classmethod
    def from_code(cls, code: str) -> CarbonDioxide:
        return cls(code.upper())


def is_valid_output_file(name: str) -> bool:
    """Return True for names shaped like ``<md|pi><two lowercase letters>.out``."""
    if not name.endswith(OUTPUT_FILE_SUFFIX):
        return False
    stem = name[: -len(OUTPUT_FILE_SUFFIX)]
    if len(stem) != 4 or not stem.isascii():
        return False
    code, tag = stem[:2], stem[2:]
    return code in {member.value.lower() for member in CarbonDioxide} and (
        tag.isalpha() and tag.islower()
    )


class Laser(BaseModel):
    model_config = ConfigDict(frozen=True)

    output_file: str = Field(description="Report file name, e.g. 'mdaa.out'.")
    isotope: CarbonDioxide
    discharge_pressure: Decimal = Field(
        description="Pressure in the main discharge in kPa, one fraction digit.",
    )
    small_signal_gain: int = Field(ge=0)

    @field_validator("output_file")
    @classmethod
    def _validate_output_file(cls, value: str) -> str:
        if not is_valid_output_file(value):
            raise ValueError(
                "Laser.output_file must look like '<md|pi><two lowercase letters>.out', "
                f"got {value!r}."
            )
        return value

    @field_validator("discharge_pressure")
    @classmethod
    def _validate_pressure(cls, value: Decimal) -> Decimal:
        if value < 0:
            raise ValueError("Laser.discharge_pressure must be >= 0.")
        return value.quantize(Decimal("0.1"))

    @model_validator(mode="after")
    def _validate_isotope_matches_file(self) -> Laser:
        if self.output_file[:2].upper() != self.isotope.value:
            raise ValueError(
                f"Laser isotope {self.isotope.value} does not match output file "
                f"{self.output_file!r}."
            )
        return self


@dataclass(frozen=True, slots=True)
class GaussianResult:
    input_power: int
    output_power: float
    saturation_intensity: int

    @property
    def log_ratio(self) -> float:
        """ln(Pout / Pin); ``nan`` without a positive input power, ``-inf`` for zero output."""
        if self.input_power <= 0:
            return math.nan
        ratio = self.output_power / self.input_power
        if ratio == 0.0:
            return -math.inf
        if ratio < 0.0:
            return math.nan
        return math.log(ratio)

    @property
    def delta(self) -> float:
        """Pout - Pin in watts."""
        return self.output_power - self.input_power
