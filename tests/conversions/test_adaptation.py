import numpy as np
import pytest

from chromalab.colors import ColorXYZ
from chromalab.conversions import adapt, adaptation_matrix
from chromalab.illuminants import Illuminant


def test_same_white_returns_input():
    xyz = (0.2, 0.3, 0.4)
    assert adapt(xyz, Illuminant.D65, Illuminant.D65) is xyz


@pytest.mark.parametrize("method", ["bradford", "von_kries", "xyz_scaling"])
def test_white_maps_to_white(method):
    for source in Illuminant:
        for dest in (Illuminant.D65, Illuminant.D50, Illuminant.A):
            out = adapt(source.white_point, source, dest, method)
            assert out == pytest.approx(dest.white_point, abs=1e-9)


def test_unknown_method_raises():
    with pytest.raises(ValueError):
        adapt((0.2, 0.3, 0.4), Illuminant.D65, Illuminant.D50, "cat02")


def test_matrix_is_cached_and_read_only():
    m = adaptation_matrix(Illuminant.D65, Illuminant.D50)
    assert adaptation_matrix(Illuminant.D65, Illuminant.D50) is m
    assert not m.flags.writeable
    with pytest.raises(ValueError):
        m[0, 0] = 1.0


def test_forward_and_back_are_inverse():
    forward = adaptation_matrix(Illuminant.D65, Illuminant.A)
    back = adaptation_matrix(Illuminant.A, Illuminant.D65)
    assert np.allclose(back @ forward, np.eye(3), atol=1e-12)


def test_bradford_c_to_d65():
    xyz = ColorXYZ((0.5, 0.4, 0.1), illuminant=Illuminant.C)
    adapted = xyz.adapt_to(Illuminant.D65)
    assert adapted.illuminant is Illuminant.D65
    assert adapted.value == pytest.approx((0.491, 0.400, 0.093), abs=2e-3)


def test_adapt_to_same_white_is_identity():
    xyz = ColorXYZ((0.5, 0.4, 0.1))
    assert xyz.adapt_to("d65") is xyz


def test_methods_differ_off_white():
    xyz = ColorXYZ((0.3, 0.5, 0.2), illuminant=Illuminant.A)
    bradford = xyz.adapt_to(Illuminant.D65, method="bradford")
    scaling = xyz.adapt_to(Illuminant.D65, method="xyz_scaling")
    assert bradford.value != pytest.approx(scaling.value, abs=1e-4)
    # plain scaling is a per-channel ratio of the whites
    ratio = np.array(Illuminant.D65.white_point) / np.array(Illuminant.A.white_point)
    assert scaling.value == pytest.approx(tuple(np.array(xyz.value) * ratio))
