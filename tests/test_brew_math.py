# tests/test_brew_math.py
import pytest

from brew_math import BrewMath


@pytest.mark.parametrize("gravity", [0.990, 1.000, 1.050, 1.120])
@pytest.mark.parametrize("temp_f", [32.0, 60.0, 68.0, 100.0])
def test_correction_identity_at_calibration_temp(gravity, temp_f):
    assert BrewMath.hydrometer_temp_correction(gravity, temp_f, temp_f) == pytest.approx(gravity)


def test_correction_warm_sample_reads_low():
    assert BrewMath.hydrometer_temp_correction(1.080, 75, 60) == pytest.approx(1.0818, abs=1e-3)
    assert BrewMath.hydrometer_temp_correction(1.010, 76, 60) == pytest.approx(1.0118, abs=1e-3)


def test_correction_cold_sample_reads_high():
    assert BrewMath.hydrometer_temp_correction(1.050, 40, 60) < 1.050


@pytest.mark.parametrize("gravity", [1.000, 1.040, 1.100])
def test_abv_zero_when_no_drop(gravity):
    assert BrewMath.calculate_abv(gravity, gravity) == 0


@pytest.mark.parametrize("og, fg, expected", [
    (1.040, 1.005, 4.59),
    (1.080, 1.011, 9.62),
    (1.080, 0.990, 12.28),
    (1.110, 1.010, 14.55),
    (1.135, 1.050, 13.36),
])
def test_abv_reference_values(og, fg, expected):
    assert BrewMath.calculate_abv(og, fg) == pytest.approx(expected, abs=0.02)


def test_abv_undefined_at_og_1775():
    with pytest.raises(ZeroDivisionError):
        BrewMath.calculate_abv(1.775, 1.010)


def test_temperature_conversions():
    assert BrewMath.c_to_f(100) == pytest.approx(212.0)
    assert BrewMath.f_to_c(32) == pytest.approx(0.0)
    assert BrewMath.f_to_c(BrewMath.c_to_f(15.5)) == pytest.approx(15.5)
