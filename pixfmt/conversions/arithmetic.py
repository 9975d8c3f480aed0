"""
Channel arithmetic kernels.

All values are raw channel values treated as the closed interval [0, 1].
Integer depths saturate, the float depth clamps. Nothing here raises for
in-range input: division by a zero divisor yields zero.
"""
from __future__ import annotations
from typing import Callable, Dict
import numpy as np

from ..types.bit_depth import BitDepth, max_raw
from ..types.format_types import RawValue
from .depth import F32_ONE, F32_ZERO, as_work, np_clamp_unit, np_rescale

Kernel = Callable[[np.ndarray, np.ndarray], np.ndarray]

# ---------------------------------------------------------------------------
# integer depths
# ---------------------------------------------------------------------------

def _add_int(a: np.ndarray, b: np.ndarray, maxval: int) -> np.ndarray:
    return np.minimum(a + b, maxval)


def _sub_int(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return np.maximum(a - b, 0)


def _mul_8(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    # replicate the top nibble into the low bits so MAX * MAX == MAX
    l = (a << 4) | (a >> 4)
    r = (b << 4) | (b >> 4)
    return (l * r) >> 16


def _mul_16(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    l = (a << 8) | (a >> 8)
    r = (b << 8) | (b >> 8)
    return (l * r) >> 32


def _div_int(a: np.ndarray, b: np.ndarray, bits: int, maxval: int) -> np.ndarray:
    divisor = np.where(b > 0, b, 1)
    return np.where(b > 0, np.minimum((a << bits) // divisor, maxval), 0)


def _lerp_int(v0: np.ndarray, v1: np.ndarray, t: np.ndarray, maxval: int) -> np.ndarray:
    c = (v1 - v0) * t
    # c / maxval rounded half up; floor division keeps negative steps exact
    return np.clip(v0 + (2 * c + maxval) // (2 * maxval), 0, maxval)


# ---------------------------------------------------------------------------
# float depth
# ---------------------------------------------------------------------------

def _add_float(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return np.minimum(a + b, F32_ONE)


def _sub_float(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return np.maximum(a - b, F32_ZERO)


def _mul_float(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return a * b


def _div_float(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    divisor = np.where(b > 0, b, F32_ONE)
    return np.where(b > 0, np.minimum(a / divisor, F32_ONE), F32_ZERO)


def _lerp_float(v0: np.ndarray, v1: np.ndarray, t: np.ndarray) -> np.ndarray:
    return np_clamp_unit(v0 + (v1 - v0) * t)


_8 = max_raw[BitDepth.INT8]
_16 = max_raw[BitDepth.INT16]

ADD: Dict[BitDepth, Kernel] = {
    BitDepth.INT8: lambda a, b: _add_int(a, b, _8),
    BitDepth.INT16: lambda a, b: _add_int(a, b, _16),
    BitDepth.FLOAT32: _add_float,
}

SUB: Dict[BitDepth, Kernel] = {
    BitDepth.INT8: _sub_int,
    BitDepth.INT16: _sub_int,
    BitDepth.FLOAT32: _sub_float,
}

MUL: Dict[BitDepth, Kernel] = {
    BitDepth.INT8: _mul_8,
    BitDepth.INT16: _mul_16,
    BitDepth.FLOAT32: _mul_float,
}

DIV: Dict[BitDepth, Kernel] = {
    BitDepth.INT8: lambda a, b: _div_int(a, b, 8, _8),
    BitDepth.INT16: lambda a, b: _div_int(a, b, 16, _16),
    BitDepth.FLOAT32: _div_float,
}

LERP: Dict[BitDepth, Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]] = {
    BitDepth.INT8: lambda v0, v1, t: _lerp_int(v0, v1, t, _8),
    BitDepth.INT16: lambda v0, v1, t: _lerp_int(v0, v1, t, _16),
    BitDepth.FLOAT32: _lerp_float,
}


def np_add(a: RawValue, b: RawValue, depth: BitDepth) -> np.ndarray:
    return ADD[depth](as_work(a, depth), as_work(b, depth))


def np_sub(a: RawValue, b: RawValue, depth: BitDepth) -> np.ndarray:
    return SUB[depth](as_work(a, depth), as_work(b, depth))


def np_mul(a: RawValue, b: RawValue, depth: BitDepth) -> np.ndarray:
    """Multiply as if both operands were in [0, 1]."""
    return MUL[depth](as_work(a, depth), as_work(b, depth))


def np_div(a: RawValue, b: RawValue, depth: BitDepth) -> np.ndarray:
    """Divide as if both operands were in [0, 1]; clamps to MAX, zero divisor -> MIN."""
    return DIV[depth](as_work(a, depth), as_work(b, depth))


def np_lerp(v0: RawValue, v1: RawValue, t: RawValue, depth: BitDepth) -> np.ndarray:
    """Interpolate from ``v0`` toward ``v1`` by ``t`` (all raw values of ``depth``)."""
    return LERP[depth](as_work(v0, depth), as_work(v1, depth), as_work(t, depth))


def np_powf(values: RawValue, exponent: float, depth: BitDepth) -> np.ndarray:
    """Raise to ``exponent`` through the float32 path."""
    unit = np_rescale(values, depth, BitDepth.FLOAT32)
    with np.errstate(divide="ignore", invalid="ignore"):
        powered = np.power(unit, np.float32(exponent))
    return np_rescale(np_clamp_unit(powered), BitDepth.FLOAT32, depth)
