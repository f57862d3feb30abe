import logging

import pytest

from chromalab.colors import (
    ColorUnitRGB,
    ColorAdobeRGB,
    ColorProPhotoRGB,
    ColorXYZ,
    ColorLab,
    ColorLuv,
    ColorLCHab,
    UnitHSV,
)
from chromalab.conversions import convert
from chromalab.conversions.wrapper import resolve_color_class, target_illuminant
from chromalab.illuminants import Illuminant
from chromalab.types.color_types import ColorSpace
from ..samples import samples_rgb_lab, samples_rgb_luv


def test_convert_to_same_space_returns_color():
    rgb = ColorUnitRGB((0.1, 0.2, 0.3))
    assert convert(rgb) is rgb
    assert convert(rgb, ColorUnitRGB) is rgb
    lab = ColorLab((50.0, 1.0, 2.0), illuminant=Illuminant.D50)
    assert lab.convert(ColorLab) is lab


def test_convert_accepts_names_enums_and_classes():
    rgb = ColorUnitRGB((0.2, 0.4, 0.6))
    assert isinstance(convert(rgb, "lab"), ColorLab)
    assert isinstance(convert(rgb, ColorSpace.LCHAB), ColorLCHab)
    assert isinstance(convert(rgb, UnitHSV), UnitHSV)
    assert rgb.convert("LAB") == rgb.convert(ColorLab)


def test_rgb_to_lab_samples():
    for rgb, expected in samples_rgb_lab.items():
        lab = ColorUnitRGB(rgb).convert(ColorLab)
        assert lab.illuminant is Illuminant.D65
        assert lab.value == pytest.approx(expected, abs=0.1)


def test_rgb_to_luv_samples():
    for rgb, expected in samples_rgb_luv.items():
        assert ColorUnitRGB(rgb).convert(ColorLuv).value == pytest.approx(expected, abs=0.1)


def test_rgb_to_xyz_under_other_whites():
    rgb = ColorUnitRGB((0.482, 0.784, 0.196))
    assert rgb.to_xyz().value == pytest.approx((0.294, 0.457, 0.103), abs=2e-3)
    d50 = rgb.convert(ColorXYZ, illuminant=Illuminant.D50)
    assert d50.illuminant is Illuminant.D50
    assert d50.value == pytest.approx((0.313, 0.460, 0.082), abs=2e-3)


def test_adobe_rgb_to_xyz():
    adobe = ColorAdobeRGB((0.482, 0.784, 0.196))
    assert adobe.to_xyz().value == pytest.approx((0.230, 0.429, 0.074), abs=2e-3)
    assert adobe.to_xyz(Illuminant.D50).value == pytest.approx((0.247, 0.431, 0.060), abs=2e-3)


def test_relative_target_keeps_source_illuminant():
    lab = ColorLab((50.0, 10.0, 10.0), illuminant=Illuminant.D50)
    assert lab.convert(ColorXYZ).illuminant is Illuminant.D50
    assert lab.convert(ColorLCHab).illuminant is Illuminant.D50


def test_device_source_defaults_to_d65():
    assert ColorUnitRGB((0.1, 0.2, 0.3)).convert(ColorLab).illuminant is Illuminant.D65
    # ProPhoto is defined under D50 but relative targets still default to D65
    assert ColorProPhotoRGB((0.1, 0.2, 0.3)).convert(ColorLab).illuminant is Illuminant.D65


def test_explicit_illuminant_is_used():
    white = ColorLab((100.0, 0.0, 0.0), illuminant=Illuminant.D50)
    adapted = white.convert(ColorLab, illuminant="d65")
    assert adapted.illuminant is Illuminant.D65
    assert adapted.value == pytest.approx((100.0, 0.0, 0.0), abs=1e-9)


def test_device_target_uses_native_white():
    lab = ColorLab((60.0, 20.0, -30.0), illuminant=Illuminant.A)
    assert lab.convert(ColorProPhotoRGB).illuminant is Illuminant.D50
    assert lab.convert(ColorUnitRGB).illuminant is Illuminant.D65


def test_target_illuminant_policy():
    rgb = ColorUnitRGB((0.1, 0.2, 0.3))
    lab = ColorLab((50.0, 0.0, 0.0), illuminant=Illuminant.A)
    assert target_illuminant(rgb, ColorLab) is Illuminant.D65
    assert target_illuminant(lab, ColorLab) is Illuminant.A
    assert target_illuminant(lab, ColorLab, "E") is Illuminant.E
    assert target_illuminant(lab, ColorProPhotoRGB, Illuminant.E) is Illuminant.D50


def test_unknown_space_raises():
    with pytest.raises(ValueError):
        ColorUnitRGB((0.1, 0.2, 0.3)).convert("cmyk")


def test_non_color_input_raises():
    with pytest.raises(TypeError):
        convert((0.1, 0.2, 0.3), "lab")
    with pytest.raises(TypeError):
        resolve_color_class(int)


def test_converting_out_of_gamut_keeps_values():
    rgb = ColorLab((50.0, 120.0, 0.0)).convert(ColorUnitRGB)
    assert rgb.value[0] > 1.0
    assert rgb.value[1] < 0.0


def test_conversion_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="chromalab")
    ColorUnitRGB((0.1, 0.2, 0.3)).convert(ColorLab, illuminant=Illuminant.A)
    assert "ColorUnitRGB[D65] -> ColorLab[A]" in caplog.text
