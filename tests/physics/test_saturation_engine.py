from __future__ import annotations

import math

import pytest

from satin_sim.physics import SATURATION_INTENSITIES, axial_correction_table, compute_gaussians
from satin_sim.physics.saturation import AREA, DZ, EXPR, INCR, RAD, radial_grid


def _scalar_output_power(input_power: int, small_signal_gain: float, saturation: int) -> float:
    table = axial_correction_table().tolist()
    input_intensity = 2 * input_power / AREA
    sat_term = saturation * ((small_signal_gain / 32e3) * DZ)
    output_power = 0.0
    for r in radial_grid().tolist():
        intensity = input_intensity * math.exp(-2 * (r * r) / (RAD * RAD))
        for j in range(INCR):
            intensity *= 1 + sat_term / (saturation + intensity) - table[j]
        output_power += intensity * EXPR * r
    return output_power


@pytest.mark.physics
def test_returns_one_result_per_saturation_intensity_in_ascending_order() -> None:
    results = compute_gaussians(10, 2.75)

    assert len(results) == 16
    assert [result.saturation_intensity for result in results] == list(range(10000, 25001, 1000))
    assert tuple(result.saturation_intensity for result in results) == SATURATION_INTENSITIES
    assert all(result.input_power == 10 for result in results)


@pytest.mark.physics
def test_log_ratio_matches_difference_of_logs() -> None:
    for result in compute_gaussians(150, 275):
        expected = math.log(result.output_power) - math.log(result.input_power)
        assert result.log_ratio == pytest.approx(expected, rel=1e-9)
        assert result.delta == result.output_power - result.input_power


@pytest.mark.physics
def test_output_power_is_non_decreasing_in_input_power() -> None:
    sweeps = [compute_gaussians(power, 275) for power in (1, 5, 10, 20, 40)]

    for index in range(len(SATURATION_INTENSITIES)):
        outputs = [sweep[index].output_power for sweep in sweeps]
        assert outputs == sorted(outputs)
        assert outputs[0] > 0.0


@pytest.mark.physics
def test_repeated_computation_is_bit_identical() -> None:
    first = compute_gaussians(200, 230)
    second = compute_gaussians(200, 230)

    assert first == second
    assert [r.output_power.hex() for r in first] == [r.output_power.hex() for r in second]


@pytest.mark.physics
def test_vectorised_kernel_matches_scalar_fold_exactly() -> None:
    results = compute_gaussians(150, 275)

    for index in (0, len(SATURATION_INTENSITIES) - 1):
        expected = _scalar_output_power(150, 275, SATURATION_INTENSITIES[index])
        assert results[index].output_power == expected


@pytest.mark.physics
def test_zero_input_power_yields_zero_output() -> None:
    results = compute_gaussians(0, 275)

    assert all(result.output_power == 0.0 for result in results)
    assert all(math.isnan(result.log_ratio) for result in results)


@pytest.mark.physics
def test_gain_saturates_more_strongly_at_lower_saturation_intensity() -> None:
    results = compute_gaussians(400, 275)
    gains = [result.output_power / result.input_power for result in results]

    assert gains == sorted(gains)
