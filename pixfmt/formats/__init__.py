"""
pixfmt pixel formats
====================

Naming scheme:

- Gamma: ``S`` prefix for sRGB; linear if omitted
- Color model: ``Gray`` / ``GrayAlpha`` / ``Rgb`` / ``Rgba`` / ``Mask``
- Bit depth: ``8`` / ``16`` / ``32``
- Alpha mode: ``p`` suffix for premultiplied; straight if omitted
"""
from __future__ import annotations
from typing import Dict, Tuple

from ..alpha import AlphaMode
from ..gamma import GammaMode
from ..types.bit_depth import BitDepth
from .format_base import PixelFormat, build_registry, convert_alpha_gamma, define_format
from .rgb import (
    Rgb,
    Rgb8, Rgb16, Rgb32,
    SRgb8, SRgb16, SRgb32,
    Rgba8, Rgba16, Rgba32,
    Rgba8p, Rgba16p, Rgba32p,
    SRgba8, SRgba16, SRgba32,
    SRgba8p, SRgba16p, SRgba32p,
    rgb_formats,
)
from .gray import (
    Gray,
    Gray8, Gray16, Gray32,
    SGray8, SGray16, SGray32,
    GrayAlpha8, GrayAlpha16, GrayAlpha32,
    GrayAlpha8p, GrayAlpha16p, GrayAlpha32p,
    SGrayAlpha8, SGrayAlpha16, SGrayAlpha32,
    SGrayAlpha8p, SGrayAlpha16p, SGrayAlpha32p,
    gray_formats,
)
from .mask import Mask, Mask8, Mask16, Mask32, mask_formats

FormatKey = Tuple[str, BitDepth, bool, AlphaMode, GammaMode]

format_registry: Dict[FormatKey, type[PixelFormat]] = {**rgb_formats, **gray_formats, **mask_formats}


def get_format_class(
    model: str,
    depth: BitDepth | str,
    *,
    translucent: bool = False,
    alpha_mode: AlphaMode = AlphaMode.STRAIGHT,
    gamma_mode: GammaMode = GammaMode.LINEAR,
) -> type[PixelFormat]:
    """
    Look up a named format by its tags.

    >>> get_format_class("rgb", "int8", translucent=True, alpha_mode=AlphaMode.PREMULTIPLIED)
    <class 'pixfmt.formats.rgb.Rgba8p'>
    """
    model = model.lower()
    if model == "mask":
        translucent = True
    key = (model, BitDepth(depth), translucent, AlphaMode(alpha_mode), GammaMode(gamma_mode))
    format_class = format_registry.get(key)
    if format_class is None:
        raise ValueError(
            f"Unsupported format combination: {model}/{depth}/"
            f"{'translucent' if translucent else 'opaque'}/{alpha_mode}/{gamma_mode}"
        )
    return format_class


__all__ = [
    "PixelFormat", "Rgb", "Gray", "Mask",
    "Rgb8", "Rgb16", "Rgb32",
    "SRgb8", "SRgb16", "SRgb32",
    "Rgba8", "Rgba16", "Rgba32",
    "Rgba8p", "Rgba16p", "Rgba32p",
    "SRgba8", "SRgba16", "SRgba32",
    "SRgba8p", "SRgba16p", "SRgba32p",
    "Gray8", "Gray16", "Gray32",
    "SGray8", "SGray16", "SGray32",
    "GrayAlpha8", "GrayAlpha16", "GrayAlpha32",
    "GrayAlpha8p", "GrayAlpha16p", "GrayAlpha32p",
    "SGrayAlpha8", "SGrayAlpha16", "SGrayAlpha32",
    "SGrayAlpha8p", "SGrayAlpha16p", "SGrayAlpha32p",
    "Mask8", "Mask16", "Mask32",
    "format_registry", "get_format_class",
    "build_registry", "define_format", "convert_alpha_gamma",
]
