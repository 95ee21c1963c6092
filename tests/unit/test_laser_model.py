from __future__ import annotations

import math
from decimal import Decimal

import pytest
from pydantic import ValidationError

from satin_sim.models import CarbonDioxide, GaussianResult, Laser


@pytest.mark.unit
def test_laser_accepts_matching_file_and_isotope() -> None:
    laser = Laser(
        output_file="piab.out",
        isotope=CarbonDioxide.PI,
        discharge_pressure=Decimal("17.5"),
        small_signal_gain=310,
    )

    assert laser.isotope is CarbonDioxide.PI
    assert laser.discharge_pressure == Decimal("17.5")


@pytest.mark.unit
@pytest.mark.parametrize("output_file", ["mdaa.txt", "xxaa.out", "mdAA.out", "mda.out", "md1a.out"])
def test_laser_rejects_malformed_output_file(output_file: str) -> None:
    with pytest.raises(ValidationError, match="Laser.output_file must look like"):
        Laser(
            output_file=output_file,
            isotope=CarbonDioxide.MD,
            discharge_pressure=Decimal("15.0"),
            small_signal_gain=275,
        )


@pytest.mark.unit
def test_laser_rejects_isotope_that_differs_from_file_prefix() -> None:
    with pytest.raises(ValidationError, match="does not match output file"):
        Laser(
            output_file="mdaa.out",
            isotope=CarbonDioxide.PI,
            discharge_pressure=Decimal("15.0"),
            small_signal_gain=275,
        )


@pytest.mark.unit
def test_laser_is_immutable() -> None:
    laser = Laser(
        output_file="mdaa.out",
        isotope=CarbonDioxide.MD,
        discharge_pressure=Decimal("15.0"),
        small_signal_gain=275,
    )

    with pytest.raises(ValidationError):
        laser.small_signal_gain = 1  # type: ignore[misc]


@pytest.mark.unit
def test_carbon_dioxide_from_code_is_case_insensitive() -> None:
    assert CarbonDioxide.from_code("md") is CarbonDioxide.MD
    assert CarbonDioxide.from_code("Pi") is CarbonDioxide.PI


@pytest.mark.unit
def test_gaussian_result_derived_columns() -> None:
    result = GaussianResult(input_power=100, output_power=250.0, saturation_intensity=10000)

    assert result.delta == pytest.approx(150.0)
    assert result.log_ratio == pytest.approx(math.log(2.5))


@pytest.mark.unit
def test_gaussian_result_log_ratio_is_nan_for_zero_input_power() -> None:
    result = GaussianResult(input_power=0, output_power=0.0, saturation_intensity=10000)

    assert math.isnan(result.log_ratio)
    assert result.delta == 0.0


@pytest.mark.unit
def test_gaussian_result_log_ratio_is_negative_infinity_for_zero_output() -> None:
    result = GaussianResult(input_power=10, output_power=0.0, saturation_intensity=10000)

    assert result.log_ratio == -math.inf
