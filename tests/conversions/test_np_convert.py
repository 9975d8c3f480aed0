import warnings
import numpy as np
import pytest

from pixfmt.conversions.wrapper import convert_rgba, np_convert, np_from_components
from pixfmt.formats import (
    Gray8, GrayAlpha16, Mask8, Mask16, Rgb8, Rgb32, Rgba8, Rgba8p, Rgba16, Rgba16p, Rgba32,
    SGray16, SRgb8, SRgba8, SRgba8p, SRgba16p, SRgba32,
)
from pixfmt.types import depth_dtypes, max_raw

DESTINATIONS = [Rgba8p, SRgba16p, SRgba32, Gray8, Mask16, Rgb32]


def random_buffer(fmt, rng, n=8):
    if fmt.depth.is_float:
        return rng.random((n, 4), dtype=np.float32)
    return rng.integers(0, max_raw[fmt.depth] + 1, size=(n, 4)).astype(depth_dtypes[fmt.depth])


def test_known_values():
    src = np.array([[0x20, 0x40, 0x80, 0x80]], dtype=np.uint8)
    np.testing.assert_array_equal(np_convert(src, Rgba8, Rgba8p), [[0x10, 0x20, 0x40, 0x80]])
    np.testing.assert_array_equal(np_convert(src, SRgba8, SRgba8p), [[0x16, 0x2A, 0x5C, 0x80]])
    src16 = np.array([[0x1000, 0x4000, 0x2000, 0x4000]], dtype=np.uint16)
    np.testing.assert_array_equal(np_convert(src16, Rgba16p, Rgba8), [[0x40, 0xFF, 0x80, 0x40]])


def test_matches_per_pixel_conversion(all_formats, rng):
    for src in all_formats:
        buffer = random_buffer(src, rng)
        pixels = [src.from_components(list(row)) for row in buffer]
        for dest in DESTINATIONS:
            expected = np.array(
                [p.convert(dest).raw_components() for p in pixels],
                dtype=depth_dtypes[dest.depth],
            )
            result = np_convert(buffer, src, dest)
            np.testing.assert_array_equal(result, expected, err_msg=f"{src.__name__} -> {dest.__name__}")


@pytest.mark.parametrize("dest", [Rgba8, Rgba16, Rgba32])
def test_output_dtype(dest):
    src = np.zeros((2, 4), dtype=np.uint8)
    assert np_convert(src, Rgba8, dest).dtype == depth_dtypes[dest.depth]


def test_keeps_leading_shape():
    src = np.zeros((2, 3, 4), dtype=np.uint16)
    assert np_convert(src, Rgba16, SRgba8p).shape == (2, 3, 4)
    assert np_convert(np.zeros((0, 4), dtype=np.uint8), Rgba8, Rgba32).shape == (0, 4)


def test_same_format_round_trips_buffer(rng):
    buffer = random_buffer(Rgba16, rng, n=32)
    np.testing.assert_array_equal(np_convert(buffer, Rgba16, Rgba16), buffer)


def test_model_and_alpha_rules_apply():
    src = np.array([[10, 200, 30, 64]], dtype=np.uint8)
    np.testing.assert_array_equal(np_convert(src, Rgba8, Gray8), [[200, 200, 200, 255]])
    np.testing.assert_array_equal(np_convert(src, Rgba8, Mask8), [[255, 255, 255, 64]])
    np.testing.assert_array_equal(np_convert(src, Rgb8, Rgba8), [[10, 200, 30, 255]])
    np.testing.assert_array_equal(np_convert(src, Gray8, GrayAlpha16), [[0xC8C8, 0xC8C8, 0xC8C8, 0xFFFF]])


def test_from_components_on_arrays():
    arr = np.array([[1, 5, 3, 9]])
    np.testing.assert_array_equal(np_from_components(arr, SGray16), [[5, 5, 5, 65535]])
    np.testing.assert_array_equal(np_from_components(arr, Mask8), [[255, 255, 255, 9]])


def test_rejects_wrong_shape():
    with pytest.raises(ValueError):
        np_convert(np.zeros((4, 3), dtype=np.uint8), Rgba8, Rgba8p)
    with pytest.raises(ValueError):
        np_convert(np.uint8(3), Rgba8, Rgba8p)


def test_rejects_wrong_dtype():
    with pytest.raises(TypeError):
        np_convert(np.zeros((1, 4), dtype=np.float32), Rgba8, Rgba8p)
    with pytest.raises(TypeError):
        np_convert(np.zeros((1, 4), dtype=np.uint8), Rgba32, Rgba8p)


def test_warns_and_clamps_out_of_range_ints():
    src = np.array([[300, -5, 0, 255]], dtype=np.int32)
    with pytest.warns(RuntimeWarning, match="clamping"):
        result = np_convert(src, Rgba8, Rgba8)
    np.testing.assert_array_equal(result, [[255, 0, 0, 255]])


def test_warns_and_clamps_out_of_range_floats():
    src = np.array([[1.5, np.nan, -1.0, 0.5]], dtype=np.float32)
    with pytest.warns(RuntimeWarning, match="clamping"):
        result = np_convert(src, Rgba32, Rgba32)
    np.testing.assert_array_equal(result, np.array([[1.0, 0.0, 0.0, 0.5]], dtype=np.float32))


def test_valid_input_is_silent(rng):
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        np_convert(random_buffer(Rgba8, rng), Rgba8, SRgba32)
        np_convert(random_buffer(Rgba32, rng), Rgba32, Rgba16p)


def test_convert_rgba():
    assert convert_rgba((0x20, 0x40, 0x80, 0x80), Rgba8, Rgba8p) == (0x10, 0x20, 0x40, 0x80)
    assert convert_rgba((0x337F, 0, 0, 0xFFFF), SGray16, SRgba8) == (0x33, 0x33, 0x33, 0xFF)
    result = convert_rgba((0.5, 0.25, 0.75, 0.75), Rgba32, Rgba8)
    assert result == (0x80, 0x40, 0xBF, 0xBF)
    assert all(type(v) is int for v in result)


def test_srgb_and_float_buffers():
    srgb = np.array([[0xEF, 0x8C, 0xC7, 0xFF], [0, 0, 0, 0xFF]], dtype=np.uint8)
    np.testing.assert_array_equal(np_convert(srgb, SRgb8, Rgb8), [[0xDC, 0x43, 0x92, 0xFF], [0, 0, 0, 0xFF]])
    floats = np.array([[0.5, 1.0, 0.75, 0.75], [0.0, 0.0, 0.0, 0.0]], dtype=np.float32)
    np.testing.assert_array_equal(np_convert(floats, Rgba32, Rgba8p), [[0x60, 0xBF, 0x8F, 0xBF], [0, 0, 0, 0]])
