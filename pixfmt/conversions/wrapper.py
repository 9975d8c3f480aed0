"""
Vectorized pixel conversion.

``np_convert`` runs the same kernels, in the same order, as
``PixelFormat.convert``, over a whole buffer of raw RGBA values at once. The
results are bit-identical to converting each pixel on its own.
"""
from __future__ import annotations
from typing import Sequence, TYPE_CHECKING
import warnings
import numpy as np

from ..types.bit_depth import BitDepth, depth_dtypes, depth_valid_dtypes, max_raw
from ..types.format_types import RawRGBA, Scalar, rgba_to_array
from .depth import as_work, np_clamp_unit, np_rescale

if TYPE_CHECKING:
    from ..formats.format_base import PixelFormat


def _ingest(rgba: np.ndarray, fmt: type[PixelFormat]) -> np.ndarray:
    """Validate a raw buffer for ``fmt`` and bring it into range."""
    arr = np.asarray(rgba)
    depth = fmt.depth

    if arr.ndim == 0 or arr.shape[-1] != 4:
        raise ValueError(f"{fmt.__name__} buffers need a last dimension of 4 (RGBA), got shape {arr.shape}")

    valid_types = depth_valid_dtypes[depth]
    if not isinstance(arr.dtype.type(0), valid_types):
        raise TypeError(
            f"{fmt.__name__} expects dtype compatible with {valid_types}, got {arr.dtype}"
        )

    if depth is BitDepth.FLOAT32:
        out_of_range = arr.size and bool(np.any(np.isnan(arr) | (arr < 0.0) | (arr > 1.0)))
        if out_of_range:
            warnings.warn(
                f"{fmt.__name__} buffer holds values outside [0, 1] or NaN; clamping",
                RuntimeWarning,
                stacklevel=3,
            )
        return np_clamp_unit(arr)

    hi = max_raw[depth]
    if arr.size and (arr.min() < 0 or arr.max() > hi):
        warnings.warn(
            f"{fmt.__name__} buffer holds values outside [0, {hi}]; clamping",
            RuntimeWarning,
            stacklevel=3,
        )
        arr = np.clip(arr, 0, hi)
    return as_work(arr, depth)


def np_from_components(rgba: np.ndarray, fmt: type[PixelFormat]) -> np.ndarray:
    """Array version of ``fmt.from_components``: apply the color model and alpha kind."""
    red, green, blue, alpha = (rgba[..., i] for i in range(4))
    full = np.full_like(alpha, max_raw[fmt.depth])
    if fmt.model == "gray":
        red = green = blue = np.maximum(np.maximum(red, green), blue)
    elif fmt.model == "mask":
        red = green = blue = full
    if not fmt.alpha_channel.translucent:
        alpha = full
    return np.stack([red, green, blue, alpha], axis=-1)


def _convert_core(
    rgba: np.ndarray,
    from_format: type[PixelFormat],
    to_format: type[PixelFormat],
) -> np.ndarray:
    depth = to_format.depth

    # depth first, all four channels alike
    rgba = np_rescale(rgba, from_format.depth, depth)

    if from_format.alpha_mode is not to_format.alpha_mode or from_format.gamma_mode is not to_format.gamma_mode:
        colors = rgba[..., :3]
        alpha = rgba[..., 3:]
        colors = from_format.gamma_mode.np_to_linear(colors, depth)
        if from_format.alpha_mode is not to_format.alpha_mode:
            colors = from_format.alpha_mode.np_decode(colors, alpha, depth)
            colors = to_format.alpha_mode.np_encode(colors, alpha, depth)
        colors = to_format.gamma_mode.np_from_linear(colors, depth)
        rgba = np.concatenate([colors, alpha], axis=-1)

    return np_from_components(rgba, to_format)


def np_convert(
    rgba: np.ndarray,
    from_format: type[PixelFormat],
    to_format: type[PixelFormat],
) -> np.ndarray:
    """
    Convert a buffer of raw RGBA pixels between formats.

    Args:
        rgba: Array of shape (..., 4) holding raw values of ``from_format``
              (uint8 / uint16 / float32 or any compatible dtype)
        from_format: Source pixel format class
        to_format: Destination pixel format class

    Returns:
        Array of shape (..., 4) in the storage dtype of ``to_format``
    """
    arr = _ingest(rgba, from_format)
    arr = np_from_components(arr, from_format)
    result = _convert_core(arr, from_format, to_format)
    return result.astype(depth_dtypes[to_format.depth])


def convert_rgba(
    rgba: Sequence[Scalar],
    from_format: type[PixelFormat],
    to_format: type[PixelFormat],
) -> RawRGBA:
    """Convert one pixel given as raw RGBA values; returns raw RGBA values."""
    result = np_convert(rgba_to_array(rgba), from_format, to_format)
    return tuple(result.tolist())
