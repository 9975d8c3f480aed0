from enum import Enum
import numpy as np


class BitDepth(str, Enum):
    INT8 = "int8"
    INT16 = "int16"
    FLOAT32 = "float32"

    @property
    def is_float(self) -> bool:
        return self is BitDepth.FLOAT32


max_raw = {
    BitDepth.INT8: 255,
    BitDepth.INT16: 65535,
    BitDepth.FLOAT32: 1.0,
}

min_raw = {
    BitDepth.INT8: 0,
    BitDepth.INT16: 0,
    BitDepth.FLOAT32: 0.0,
}

# storage dtype of a raw buffer in this depth
depth_dtypes = {
    BitDepth.INT8: np.uint8,
    BitDepth.INT16: np.uint16,
    BitDepth.FLOAT32: np.float32,
}

# dtype the kernels compute in; signed so lerp and difference never wrap
work_dtypes = {
    BitDepth.INT8: np.int64,
    BitDepth.INT16: np.int64,
    BitDepth.FLOAT32: np.float32,
}

depth_valid_dtypes = {
    BitDepth.INT8: (int, np.integer),
    BitDepth.INT16: (int, np.integer),
    BitDepth.FLOAT32: (float, np.floating),
}
