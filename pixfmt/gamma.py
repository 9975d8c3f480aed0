"""
Gamma modes: how a stored channel value relates to linear light.

- LINEAR: the stored value is linear intensity
- SRGB: the stored value is encoded with the sRGB transfer function

Gamma applies to color channels only, never to alpha.
"""
from __future__ import annotations
from enum import Enum
from typing import Callable, Dict
import numpy as np
from numpy import ndarray as NDArray

from .channels import Channel
from .conversions.depth import as_work, np_clamp_unit, np_rescale
from .types.bit_depth import BitDepth
from .types.format_types import RawValue

SRGB_DECODE_THRESHOLD = 0.04045
SRGB_ENCODE_THRESHOLD = 0.0031308
SRGB_LINEAR_SLOPE = 12.92
SRGB_EXPONENT = 2.4
SRGB_SCALE = 1.055
SRGB_OFFSET = 0.055


def srgb_to_linear(c: float) -> float:
    """Convert nonlinear sRGB (0..1) to linear-light RGB."""
    if c <= SRGB_DECODE_THRESHOLD:
        return c / SRGB_LINEAR_SLOPE
    return ((c + SRGB_OFFSET) / SRGB_SCALE) ** SRGB_EXPONENT


def linear_to_srgb(c: float) -> float:
    """Convert linear-light RGB (0..1) to nonlinear sRGB."""
    if c <= SRGB_ENCODE_THRESHOLD:
        return SRGB_LINEAR_SLOPE * c
    return SRGB_SCALE * (c ** (1 / SRGB_EXPONENT)) - SRGB_OFFSET


def np_srgb_to_linear(c: NDArray) -> NDArray:
    """Vectorized: Convert nonlinear sRGB (0..1) to linear-light RGB."""
    c = np.asarray(c, dtype=float)
    return np.where(
        c <= SRGB_DECODE_THRESHOLD,
        c / SRGB_LINEAR_SLOPE,
        ((c + SRGB_OFFSET) / SRGB_SCALE) ** SRGB_EXPONENT,
    )


def np_linear_to_srgb(c: NDArray) -> NDArray:
    """Vectorized: Convert linear-light RGB (0..1) to nonlinear sRGB."""
    c = np.clip(np.asarray(c, dtype=float), 0.0, None)
    return np.where(
        c <= SRGB_ENCODE_THRESHOLD,
        SRGB_LINEAR_SLOPE * c,
        SRGB_SCALE * (c ** (1 / SRGB_EXPONENT)) - SRGB_OFFSET,
    )


def _through_float(curve: Callable[[NDArray], NDArray]) -> Callable[[RawValue, BitDepth], np.ndarray]:
    """Apply a unit-float curve to raw values of any depth, rounding back to that depth."""
    def kernel(values: RawValue, depth: BitDepth) -> np.ndarray:
        unit = np_rescale(values, depth, BitDepth.FLOAT32)
        return np_rescale(np_clamp_unit(curve(unit)), BitDepth.FLOAT32, depth)
    return kernel


def _np_identity(values: RawValue, depth: BitDepth) -> np.ndarray:
    return as_work(values, depth)


class GammaMode(Enum):
    LINEAR = "linear"
    SRGB = "srgb"

    def to_linear(self, value: Channel) -> Channel:
        """Decode a stored color channel to linear intensity."""
        return value._from_kernel(_TO_LINEAR[self](value.value, value.depth))

    def from_linear(self, value: Channel) -> Channel:
        """Encode a linear color channel into this mode."""
        return value._from_kernel(_FROM_LINEAR[self](value.value, value.depth))

    def np_to_linear(self, values: RawValue, depth: BitDepth) -> np.ndarray:
        return _TO_LINEAR[self](values, depth)

    def np_from_linear(self, values: RawValue, depth: BitDepth) -> np.ndarray:
        return _FROM_LINEAR[self](values, depth)


_TO_LINEAR: Dict[GammaMode, Callable[[RawValue, BitDepth], np.ndarray]] = {
    GammaMode.LINEAR: _np_identity,
    GammaMode.SRGB: _through_float(np_srgb_to_linear),
}

_FROM_LINEAR: Dict[GammaMode, Callable[[RawValue, BitDepth], np.ndarray]] = {
    GammaMode.LINEAR: _np_identity,
    GammaMode.SRGB: _through_float(np_linear_to_srgb),
}
