"""
Bit-depth kernels.

Every function here works on numpy arrays and on plain scalars alike; the
scalar channel classes call the same kernels as the vectorized buffer path,
so both produce bit-identical results.

Rules
-----
- 8 -> 16 replicates the byte into both halves (``v << 8 | v``)
- 16 -> 8 keeps the high byte (truncation, not rounding)
- float -> int multiplies by the maximum in float32, then rounds half away
  from zero
- int -> float divides by the maximum in float32
"""
from __future__ import annotations
from typing import Callable, Dict, Tuple
import numpy as np
from boundednumbers.np_functions import clamp01

from ..types.bit_depth import BitDepth, max_raw, work_dtypes
from ..types.format_types import RawValue

F32_ZERO = np.float32(0.0)
F32_ONE = np.float32(1.0)


def as_work(values: RawValue, depth: BitDepth) -> np.ndarray:
    """View raw values in the dtype the kernels compute in for ``depth``."""
    return np.asarray(values, dtype=work_dtypes[depth])


def round_half_up(x: np.ndarray) -> np.ndarray:
    """Round non-negative values to the nearest integer, ties away from zero."""
    floor = np.floor(x)
    return floor + (x - floor >= 0.5)


def np_clamp_unit(values: RawValue) -> np.ndarray:
    """Clamp to float32 ``[0, 1]``; NaN becomes 0."""
    v = np.asarray(values, dtype=np.float32)
    v = np.where(np.isnan(v), F32_ZERO, v)
    return np.asarray(clamp01(v), dtype=np.float32)


def _widen_8_to_16(v: np.ndarray) -> np.ndarray:
    return (v << 8) | v


def _narrow_16_to_8(v: np.ndarray) -> np.ndarray:
    return v >> 8


def _int_to_float(v: np.ndarray, maxval: int) -> np.ndarray:
    return np.asarray(v, dtype=np.float32) / np.float32(maxval)


def _float_to_int(v: np.ndarray, maxval: int) -> np.ndarray:
    scaled = np_clamp_unit(v) * np.float32(maxval)
    return round_half_up(scaled).astype(np.int64)


RESCALE: Dict[Tuple[BitDepth, BitDepth], Callable[[np.ndarray], np.ndarray]] = {
    (BitDepth.INT8, BitDepth.INT16): _widen_8_to_16,
    (BitDepth.INT16, BitDepth.INT8): _narrow_16_to_8,
    (BitDepth.INT8, BitDepth.FLOAT32): lambda v: _int_to_float(v, max_raw[BitDepth.INT8]),
    (BitDepth.INT16, BitDepth.FLOAT32): lambda v: _int_to_float(v, max_raw[BitDepth.INT16]),
    (BitDepth.FLOAT32, BitDepth.INT8): lambda v: _float_to_int(v, max_raw[BitDepth.INT8]),
    (BitDepth.FLOAT32, BitDepth.INT16): lambda v: _float_to_int(v, max_raw[BitDepth.INT16]),
}


def np_rescale(values: RawValue, from_depth: BitDepth, to_depth: BitDepth) -> np.ndarray:
    """
    Rescale raw channel values from one bit depth to another.

    Args:
        values: Raw values in ``from_depth`` (scalar or array)
        from_depth: Depth the values are stored in
        to_depth: Depth to produce

    Returns:
        Array of raw values in the working dtype of ``to_depth``
    """
    values = as_work(values, from_depth)
    if from_depth is to_depth:
        return values
    return RESCALE[(from_depth, to_depth)](values)


def rescale(value: RawValue, from_depth: BitDepth, to_depth: BitDepth) -> int | float:
    """Scalar version of :func:`np_rescale`."""
    return np_rescale(value, from_depth, to_depth).item()
