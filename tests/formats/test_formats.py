import numpy as np
import pytest

from pixfmt.alpha import AlphaMode, Opaque, Translucent
from pixfmt.channels import Ch8, Ch16, Ch32
from pixfmt.formats import (
    Gray, Gray8, GrayAlpha32p, Mask, Mask8, Mask16, Mask32, Rgb, Rgb8, Rgba8, Rgba8p, Rgba16,
    SGray32, SRgba16p, format_registry, get_format_class,
)
from pixfmt.gamma import GammaMode
from pixfmt.types import BitDepth


def test_registry_is_complete():
    assert len(format_registry) == 39
    assert len(set(format_registry.values())) == 39
    names = {cls.__name__ for cls in format_registry.values()}
    assert {"Rgb8", "SRgba16p", "GrayAlpha32", "SGrayAlpha8p", "Mask32"} <= names


def test_format_tags():
    assert Rgba8p.chan is Ch8
    assert Rgba8p.depth is BitDepth.INT8
    assert Rgba8p.alpha_channel is Translucent
    assert Rgba8p.alpha_mode is AlphaMode.PREMULTIPLIED
    assert Rgba8p.gamma_mode is GammaMode.LINEAR
    assert SRgba16p.gamma_mode is GammaMode.SRGB
    assert Rgb8.alpha_channel is Opaque
    assert SGray32.model == "gray"
    assert Mask16.alpha_channel is Translucent


def test_get_format_class():
    assert get_format_class("rgb", BitDepth.INT8, translucent=True, alpha_mode=AlphaMode.PREMULTIPLIED) is Rgba8p
    assert get_format_class("RGB", "int8") is Rgb8
    assert get_format_class("mask", "int16") is Mask16
    assert get_format_class("gray", "float32", gamma_mode=GammaMode.SRGB) is SGray32
    assert get_format_class(
        "rgb", "int16", translucent=True, alpha_mode="premultiplied", gamma_mode="srgb"
    ) is SRgba16p
    with pytest.raises(ValueError):
        get_format_class("cmyk", "int8")
    with pytest.raises(ValueError):
        get_format_class("rgb", "int12")


def test_color_models_are_not_formats():
    with pytest.raises(TypeError):
        Rgb(1, 2, 3)
    with pytest.raises(TypeError):
        Gray(1)
    with pytest.raises(TypeError):
        Mask(1)


def test_components():
    assert Rgba8(1, 2, 3, 4).raw_components() == (1, 2, 3, 4)
    assert Rgb8(1, 2, 3).raw_components() == (1, 2, 3, 255)
    assert Gray8(7).raw_components() == (7, 7, 7, 255)
    assert Mask8(9).raw_components() == (255, 255, 255, 9)
    assert GrayAlpha32p(0.5, 0.25).raw_components() == (0.5, 0.5, 0.5, 0.25)


def test_channel_accessors():
    pixel = Rgba16(1, 2, 3, 4)
    assert pixel.red == Ch16(1)
    assert pixel.green == Ch16(2)
    assert pixel.blue == Ch16(3)
    assert pixel.alpha == Ch16(4)
    assert Gray8(7).value == Ch8(7)
    assert Mask32(0.5).alpha == Ch32(0.5)


def test_constructor_accepts_channels_and_alpha_objects():
    assert Rgba8(Ch16(0x8000), 0.0, 255, Translucent(Ch16(0xFFFF))) == Rgba8(0x80, 0, 255, 255)
    assert Rgba8(1, 2, 3, Opaque(Ch8)) == Rgba8(1, 2, 3, 255)
    assert Rgba8(1, 2, 3) == Rgba8(1, 2, 3, 255)


def test_to_array():
    arr = Rgba16(1, 2, 3, 4).to_array()
    assert arr.dtype == np.uint16
    np.testing.assert_array_equal(arr, [1, 2, 3, 4])
    assert Mask32(0.5).to_array().dtype == np.float32


def test_difference():
    a = Rgba8(10, 20, 30, 40)
    b = Rgba8(15, 10, 30, 50)
    assert a.difference(b) == Rgba8(5, 10, 0, 10)
    assert b.difference(a) == Rgba8(5, 10, 0, 10)


def test_within_threshold():
    diff = Rgba8(5, 10, 0, 10)
    assert diff.within_threshold(Rgba8(5, 10, 0, 10))
    assert diff.within_threshold(Rgba8(255, 255, 255, 255))
    assert not diff.within_threshold(Rgba8(4, 10, 0, 10))


def test_is_close():
    assert Rgba8(10, 20, 30, 40).is_close(Rgba8(11, 19, 30, 40), Rgba8(1, 1, 1, 1))
    assert not Rgba8(10, 20, 30, 40).is_close(Rgba8(12, 20, 30, 40), Rgba8(1, 1, 1, 1))


def test_difference_with_itself_is_within_zero(all_formats):
    for fmt in all_formats:
        pixel = fmt.from_components([fmt.chan(0.1), fmt.chan(0.5), fmt.chan(0.9), fmt.chan(0.3)])
        zero = fmt.from_components([fmt.chan.MIN] * 4)
        assert pixel.difference(pixel).within_threshold(zero)


def test_comparing_different_formats_fails():
    with pytest.raises(TypeError):
        Rgba8(1, 2, 3, 4).difference(Rgba8p(1, 2, 3, 4))
    with pytest.raises(TypeError):
        Rgba8(1, 2, 3, 4).within_threshold(Rgba16(1, 2, 3, 4))
    assert Rgba8(1, 2, 3, 4) != Rgba8p(1, 2, 3, 4)


def test_mask_multiplication():
    assert Mask8(0x80) * Mask8(0x80) == Mask8(0x40)
    assert Mask8(0xFF) * Mask8(0x33) == Mask8(0x33)
    with pytest.raises(TypeError):
        Mask8(0x80) * Mask16(0x8000)


def test_value_semantics():
    assert Rgba8(1, 2, 3, 4) == Rgba8(1, 2, 3, 4)
    assert hash(Rgba8(1, 2, 3, 4)) == hash(Rgba8(1, 2, 3, 4))
    assert len({Gray8(3), Gray8(3), Gray8(4)}) == 2


def test_pixels_are_immutable():
    pixel = Rgba8(1, 2, 3, 4)
    with pytest.raises(AttributeError):
        pixel._channels = ()
    with pytest.raises(AttributeError):
        pixel.red = Ch8(9)


def test_repr():
    assert repr(Rgba8(1, 2, 3, 4)) == "Rgba8(1, 2, 3, 4)"
    assert repr(Rgb8(1, 2, 3)) == "Rgb8(1, 2, 3)"
    assert repr(Mask8(9)) == "Mask8(9)"
    assert repr(Rgba8(0x20, 0x40, 0x80, 0x80).convert(Rgba8p)) == "Rgba8p(16, 32, 64, 128)"


def test_format_docstrings_name_their_tags():
    assert "premultiplied" in Rgba8p.__doc__
    assert "sRGB" in SRgba16p.__doc__
    assert "opaque" in Rgb8.__doc__
