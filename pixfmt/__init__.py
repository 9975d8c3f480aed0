"""pixfmt: pixel format conversion between bit depths, alpha modes and gamma modes."""

from .types.bit_depth import BitDepth
from .channels import Channel, InvalidChannelValue, Ch8, Ch16, Ch32
from .alpha import AlphaChannel, Opaque, Translucent, AlphaMode
from .gamma import GammaMode, srgb_to_linear, linear_to_srgb, np_srgb_to_linear, np_linear_to_srgb
from .formats import (
    PixelFormat,
    Rgb,
    Gray,
    Mask,
    Rgb8, Rgb16, Rgb32,
    SRgb8, SRgb16, SRgb32,
    Rgba8, Rgba16, Rgba32,
    Rgba8p, Rgba16p, Rgba32p,
    SRgba8, SRgba16, SRgba32,
    SRgba8p, SRgba16p, SRgba32p,
    Gray8, Gray16, Gray32,
    SGray8, SGray16, SGray32,
    GrayAlpha8, GrayAlpha16, GrayAlpha32,
    GrayAlpha8p, GrayAlpha16p, GrayAlpha32p,
    SGrayAlpha8, SGrayAlpha16, SGrayAlpha32,
    SGrayAlpha8p, SGrayAlpha16p, SGrayAlpha32p,
    Mask8, Mask16, Mask32,
    format_registry,
    get_format_class,
)
from .conversions.wrapper import np_convert, convert_rgba

__version__ = "0.1.0"

__all__ = [
    # channels
    "BitDepth",
    "Channel",
    "InvalidChannelValue",
    "Ch8",
    "Ch16",
    "Ch32",
    # alpha and gamma
    "AlphaChannel",
    "Opaque",
    "Translucent",
    "AlphaMode",
    "GammaMode",
    "srgb_to_linear",
    "linear_to_srgb",
    "np_srgb_to_linear",
    "np_linear_to_srgb",
    # formats
    "PixelFormat",
    "Rgb",
    "Gray",
    "Mask",
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
    "format_registry",
    "get_format_class",
    # conversions
    "np_convert",
    "convert_rgba",
    # version
    "__version__",
]
