import numpy as np
import pytest

from pixfmt.types import BitDepth, depth_dtypes, depth_valid_dtypes, max_raw, min_raw
from pixfmt.types.format_types import COLOR_MODELS, rgba_to_array


def test_bit_depth_values():
    assert BitDepth("int8") is BitDepth.INT8
    assert BitDepth("float32").is_float
    assert not BitDepth.INT16.is_float
    with pytest.raises(ValueError):
        BitDepth("int32")


def test_depth_tables():
    assert max_raw[BitDepth.INT8] == 255
    assert max_raw[BitDepth.INT16] == 65535
    assert max_raw[BitDepth.FLOAT32] == 1.0
    assert all(min_raw[depth] == 0 for depth in BitDepth)
    assert depth_dtypes[BitDepth.INT16] == np.uint16
    assert isinstance(np.uint8(1), depth_valid_dtypes[BitDepth.INT8])
    assert not isinstance(np.float32(1), depth_valid_dtypes[BitDepth.INT8])


def test_rgba_to_array():
    arr = np.zeros(4)
    assert rgba_to_array(arr) is arr
    np.testing.assert_array_equal(rgba_to_array((1, 2, 3, 4)), [1, 2, 3, 4])
    assert set(COLOR_MODELS) == {"rgb", "gray", "mask"}
