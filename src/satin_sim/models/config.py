from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

ExecutionMode = Literal["sequential", "concurrent"]


class ExecutionPolicy(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: ExecutionMode = "sequential"
    max_workers: int | None = Field(
        default=None,
        description="Worker pool size in concurrent mode; defaults to one worker per laser.",
    )

    @field_validator("max_workers")
    @classmethod
    def _validate_max_workers(cls, value: int | None) -> int | None:
        if value is not None and value < 1:
            raise ValueError("ExecutionPolicy.max_workers must be >= 1.")
        return value


class RunConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    data_dir: Path | None = Field(
        default=None,
        description="Directory holding the input resources; the packaged data when unset.",
    )
    laser_file: str = "laser.dat"
    pin_file: str = "pin.dat"
    output_dir: Path = Path(".")
    execution: ExecutionPolicy = Field(default_factory=ExecutionPolicy)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value
