from __future__ import annotations


class SatinError(Exception):
    """Base class for run failures raised by satin-sim."""


class MissingInputError(SatinError, FileNotFoundError):
    """An input resource (input powers or laser descriptors) does not exist."""


class InputParseError(SatinError, ValueError):
    """A line of the input-power resource is not a non-negative integer."""


class ReportWriteError(SatinError):
    """Writing one laser's report failed."""

    def __init__(self, output_file: str, cause: BaseException):
        super().__init__(f"Failed to write report {output_file}: {cause}")
        self.output_file = output_file
        self.cause = cause


class LaserRunError(SatinError):
    """One or more concurrently scheduled lasers failed."""

    def __init__(self, failures: dict[str, BaseException]):
        names = ", ".join(failures)
        first = next(iter(failures.values()), None)
        detail = f": {first}" if first is not None else ""
        super().__init__(f"{len(failures)} laser(s) failed [{names}]{detail}")
        self.failures = dict(failures)
