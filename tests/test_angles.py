import numpy as np
import pytest

from lineargradient.angles import (
    normalize_angle,
    css_to_cartesian,
    normalize_for_convention,
    np_normalize_angle,
    np_css_to_cartesian,
    np_normalize_for_convention,
)
from lineargradient.types.angle_types import AngleConvention

SAMPLE_ANGLES = [-1235.0, -720.5, -360.0, -1.0, 0.0, 0.5, 45.0, 359.5, 360.0, 390.0, 1000.25]


def test_normalize_angle_range():
    for angle in SAMPLE_ANGLES:
        assert 0.0 <= normalize_angle(angle) < 360.0


def test_normalize_angle_full_turns():
    for angle in SAMPLE_ANGLES:
        for k in (-3, -1, 1, 2):
            assert normalize_angle(angle + 360.0 * k) == normalize_angle(angle)


def test_normalize_angle_known_values():
    assert normalize_angle(-1235) == 205.0
    assert normalize_angle(390) == 30.0
    assert normalize_angle(360) == 0.0
    assert normalize_angle(-90) == 270.0


def test_normalize_angle_tiny_negative_wraps_to_zero():
    assert normalize_angle(-1e-14) == 0.0
    assert np_normalize_angle([-1e-14])[0] == 0.0


def test_normalize_angle_negative_zero():
    result = normalize_angle(-0.0)
    assert result == 0.0
    assert np.copysign(1.0, result) == 1.0


def test_normalize_angle_rejects_non_finite():
    with pytest.raises(ValueError, match="finite"):
        normalize_angle(float("nan"))
    with pytest.raises(ValueError, match="finite"):
        np_normalize_angle([0.0, float("inf")])


def test_css_to_cartesian():
    assert css_to_cartesian(0) == 90.0
    assert css_to_cartesian(90) == 0.0
    assert css_to_cartesian(180) == 270.0
    assert css_to_cartesian(270) == 180.0
    assert css_to_cartesian(-45) == 135.0


def test_normalize_for_convention():
    assert normalize_for_convention(45, AngleConvention.CARTESIAN) == 45.0
    assert normalize_for_convention(45, AngleConvention.CSS) == 45.0
    assert normalize_for_convention(30, "css") == 60.0
    assert normalize_for_convention(390) == 30.0


def test_normalize_for_convention_unknown():
    with pytest.raises(ValueError):
        normalize_for_convention(10, "polar")


def test_np_variants_match_scalar():
    angles = np.array(SAMPLE_ANGLES)
    assert np.array_equal(np_normalize_angle(angles), [normalize_angle(a) for a in SAMPLE_ANGLES])
    assert np.array_equal(np_css_to_cartesian(angles), [css_to_cartesian(a) for a in SAMPLE_ANGLES])
    assert np.array_equal(
        np_normalize_for_convention(angles, "css"),
        [normalize_for_convention(a, "css") for a in SAMPLE_ANGLES],
    )


def test_np_normalize_keeps_shape():
    angles = np.arange(-720.0, 720.0, 45.0).reshape(4, 8)
    result = np_normalize_angle(angles)
    assert result.shape == (4, 8)
    assert np.all((result >= 0.0) & (result < 360.0))


def test_normalize_angle_full_turns_inexact():
    # a + 360k is rounded, so periodicity only holds to a few ulps
    for angle in (0.1, 22.5 / 7, -33.3, 123.456, 359.9):
        for k in (-2, -1, 1, 3):
            assert normalize_angle(angle + 360.0 * k) == pytest.approx(normalize_angle(angle), abs=1e-9)
    assert normalize_angle(360.1) != 0.1
