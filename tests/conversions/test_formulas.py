import math

import pytest

from chromalab.conversions import (
    srgb_to_linear,
    linear_to_srgb,
    rgb_to_xyz,
    xyz_to_rgb,
    xyz_to_lab,
    lab_to_xyz,
    xyz_to_luv,
    luv_to_xyz,
    lab_to_lch,
    lch_to_lab,
    unit_rgb_to_hsv,
    hsv_to_unit_rgb,
    unit_rgb_to_hsl,
    hsl_to_unit_rgb,
    hsv_to_hsl,
    hsl_to_hsv,
    SRGB,
    ADOBE_RGB,
    PROPHOTO_RGB,
)
from chromalab.conversions.companding import (
    gamma_to_linear,
    linear_to_gamma,
    prophoto_to_linear,
    linear_to_prophoto,
)
from chromalab.errors import DomainError
from chromalab.illuminants import Illuminant
from ..samples import samples_rgb_hsv, samples_rgb_hsl, samples_rgb_xyz

D65 = Illuminant.D65.white_point

tolerance = 1e-3


def test_srgb_companding_inverse():
    for c in [0.0, 0.002, 0.04, 0.05, 0.5, 1.0]:
        assert linear_to_srgb(srgb_to_linear(c)) == pytest.approx(c, abs=1e-12)
    assert srgb_to_linear(1.0) == pytest.approx(1.0)
    assert srgb_to_linear(0.5) == pytest.approx(0.21404, abs=1e-5)


def test_gamma_companding_mirrors_negative_values():
    assert gamma_to_linear(-0.5, 2.2) == pytest.approx(-(0.5 ** 2.2))
    assert linear_to_gamma(gamma_to_linear(0.3, 2.2), 2.2) == pytest.approx(0.3)


def test_prophoto_companding_inverse():
    for c in [0.0, 0.01, 16 / 512, 0.2, 1.0]:
        assert linear_to_prophoto(prophoto_to_linear(c)) == pytest.approx(c, abs=1e-12)


def test_rgb_to_xyz_samples():
    for rgb, expected in samples_rgb_xyz.items():
        assert rgb_to_xyz(*rgb) == pytest.approx(expected, abs=tolerance)


def test_white_maps_to_reference_white():
    assert rgb_to_xyz(1.0, 1.0, 1.0, space=SRGB) == pytest.approx(D65, abs=1e-12)
    assert rgb_to_xyz(1.0, 1.0, 1.0, space=ADOBE_RGB) == pytest.approx(D65, abs=1e-12)
    assert rgb_to_xyz(1.0, 1.0, 1.0, space=PROPHOTO_RGB) == pytest.approx(
        Illuminant.D50.white_point, abs=1e-12
    )


def test_xyz_to_rgb_is_not_clamped():
    r, g, b = xyz_to_rgb(0.0, 1.0, 0.0)
    assert r < 0.0 and g > 1.0 and b < 0.0


def test_lab_reference_points():
    assert xyz_to_lab(*D65, white=D65) == pytest.approx((100.0, 0.0, 0.0), abs=1e-9)
    assert xyz_to_lab(0.0, 0.0, 0.0, white=D65) == pytest.approx((0.0, 0.0, 0.0), abs=1e-12)


def test_lab_linear_segment_round_trip():
    xyz = (0.001, 0.002, 0.003)
    assert lab_to_xyz(*xyz_to_lab(*xyz, white=D65), white=D65) == pytest.approx(xyz, abs=1e-12)


def test_lab_rejects_negative_luminance():
    with pytest.raises(DomainError):
        xyz_to_lab(0.1, -0.1, 0.1, white=D65)
    with pytest.raises(DomainError):
        lab_to_xyz(-1.0, 0.0, 0.0, white=D65)


def test_lab_accepts_rounding_noise_below_zero():
    L, _, _ = xyz_to_lab(0.0, -1e-15, 0.0, white=D65)
    assert L == pytest.approx(0.0, abs=1e-9)


def test_luv_black_and_white():
    assert xyz_to_luv(0.0, 0.0, 0.0, white=D65) == (0.0, 0.0, 0.0)
    assert luv_to_xyz(0.0, 25.0, -10.0, white=D65) == (0.0, 0.0, 0.0)
    assert xyz_to_luv(*D65, white=D65) == pytest.approx((100.0, 0.0, 0.0), abs=1e-9)


def test_luv_round_trip():
    xyz = (0.3, 0.2, 0.6)
    assert luv_to_xyz(*xyz_to_luv(*xyz, white=D65), white=D65) == pytest.approx(xyz, abs=1e-12)


def test_luv_rejects_negative_lightness():
    with pytest.raises(DomainError):
        luv_to_xyz(-0.5, 0.0, 0.0, white=D65)
    with pytest.raises(DomainError):
        xyz_to_luv(0.2, -0.5, 0.2, white=D65)


def test_lch_polar_form():
    L, c, h = lab_to_lch(50.0, 0.0, 10.0)
    assert (L, c, h) == pytest.approx((50.0, 10.0, 90.0))
    assert lab_to_lch(50.0, -10.0, -10.0)[2] == pytest.approx(225.0)
    assert lch_to_lab(50.0, 10.0, 180.0) == pytest.approx((50.0, -10.0, 0.0), abs=1e-12)


def test_lch_gray_hue_is_zero():
    L, c, h = lab_to_lch(70.0, 1e-12, -1e-12)
    assert c < 1e-10
    assert h == 0.0


def test_rgb_to_hsv_samples():
    for rgb, expected in samples_rgb_hsv.items():
        assert unit_rgb_to_hsv(*rgb) == pytest.approx(expected, abs=tolerance)


def test_rgb_to_hsl_samples():
    for rgb, expected in samples_rgb_hsl.items():
        assert unit_rgb_to_hsl(*rgb) == pytest.approx(expected, abs=tolerance)


def test_hsv_hsl_back_to_rgb():
    for rgb in list(samples_rgb_hsv) + list(samples_rgb_hsl):
        assert hsv_to_unit_rgb(*unit_rgb_to_hsv(*rgb)) == pytest.approx(rgb, abs=1e-12)
        assert hsl_to_unit_rgb(*unit_rgb_to_hsl(*rgb)) == pytest.approx(rgb, abs=1e-12)


def test_hsv_hsl_direct():
    assert hsv_to_hsl(210.0, 2.0 / 3.0, 0.6) == pytest.approx((210.0, 0.5, 0.4))
    assert hsl_to_hsv(210.0, 0.5, 0.4) == pytest.approx((210.0, 2.0 / 3.0, 0.6))
    assert hsv_to_hsl(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)
    assert hsl_to_hsv(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)


def test_hsv_hue_wraps_at_360():
    assert hsv_to_unit_rgb(360.0, 1.0, 1.0) == pytest.approx((1.0, 0.0, 0.0))
    h, _, _ = unit_rgb_to_hsv(1.0, 0.0, 0.5)
    assert 0.0 <= h < 360.0
    assert math.isclose(h, 330.0)
