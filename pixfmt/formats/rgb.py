from __future__ import annotations
from typing import ClassVar, List, Optional, Sequence

from ..alpha import AlphaLike, AlphaMode, Opaque, Translucent
from ..channels import Ch8, Ch16, Ch32, Channel
from ..channels.channel_base import ChannelLike
from ..gamma import GammaMode
from ..types.format_types import ColorModel
from .format_base import PixelFormat, build_registry, define_format


class Rgb(PixelFormat):
    """
    Red, green and blue color model, with optional alpha.

    >>> Rgba8(0x20, 0x40, 0x80, 0x80).convert(Rgba8p)
    Rgba8p(16, 32, 64, 128)
    """

    __slots__ = ()
    model: ClassVar[ColorModel] = "rgb"

    def __init__(
        self,
        red: ChannelLike,
        green: ChannelLike,
        blue: ChannelLike,
        alpha: Optional[AlphaLike] = None,
    ) -> None:
        self._check_concrete()
        chan = self.chan
        self._channels = (chan(red), chan(green), chan(blue))
        self._alpha = self._make_alpha(alpha)
        self._freeze()

    @property
    def red(self) -> Channel:
        return self._channels[0]

    @property
    def green(self) -> Channel:
        return self._channels[1]

    @property
    def blue(self) -> Channel:
        return self._channels[2]

    @property
    def alpha(self) -> Channel:
        return self._alpha.value()

    def components(self) -> List[Channel]:
        return [*self._channels, self._alpha.value()]

    @classmethod
    def from_components(cls, rgba: Sequence[ChannelLike]) -> Rgb:
        red, green, blue, alpha = rgba
        return cls(red, green, blue, alpha)


_S, _P = AlphaMode.STRAIGHT, AlphaMode.PREMULTIPLIED
_LIN, _SRGB = GammaMode.LINEAR, GammaMode.SRGB

# Opaque, linear gamma
Rgb8 = define_format("Rgb8", Rgb, Ch8, Opaque, _S, _LIN, __name__)
Rgb16 = define_format("Rgb16", Rgb, Ch16, Opaque, _S, _LIN, __name__)
Rgb32 = define_format("Rgb32", Rgb, Ch32, Opaque, _S, _LIN, __name__)

# Opaque, sRGB gamma
SRgb8 = define_format("SRgb8", Rgb, Ch8, Opaque, _S, _SRGB, __name__)
SRgb16 = define_format("SRgb16", Rgb, Ch16, Opaque, _S, _SRGB, __name__)
SRgb32 = define_format("SRgb32", Rgb, Ch32, Opaque, _S, _SRGB, __name__)

# Straight alpha, linear gamma
Rgba8 = define_format("Rgba8", Rgb, Ch8, Translucent, _S, _LIN, __name__)
Rgba16 = define_format("Rgba16", Rgb, Ch16, Translucent, _S, _LIN, __name__)
Rgba32 = define_format("Rgba32", Rgb, Ch32, Translucent, _S, _LIN, __name__)

# Premultiplied alpha, linear gamma
Rgba8p = define_format("Rgba8p", Rgb, Ch8, Translucent, _P, _LIN, __name__)
Rgba16p = define_format("Rgba16p", Rgb, Ch16, Translucent, _P, _LIN, __name__)
Rgba32p = define_format("Rgba32p", Rgb, Ch32, Translucent, _P, _LIN, __name__)

# Straight alpha, sRGB gamma
SRgba8 = define_format("SRgba8", Rgb, Ch8, Translucent, _S, _SRGB, __name__)
SRgba16 = define_format("SRgba16", Rgb, Ch16, Translucent, _S, _SRGB, __name__)
SRgba32 = define_format("SRgba32", Rgb, Ch32, Translucent, _S, _SRGB, __name__)

# Premultiplied alpha, sRGB gamma
SRgba8p = define_format("SRgba8p", Rgb, Ch8, Translucent, _P, _SRGB, __name__)
SRgba16p = define_format("SRgba16p", Rgb, Ch16, Translucent, _P, _SRGB, __name__)
SRgba32p = define_format("SRgba32p", Rgb, Ch32, Translucent, _P, _SRGB, __name__)


rgb_formats = build_registry(
    Rgb8, Rgb16, Rgb32,
    SRgb8, SRgb16, SRgb32,
    Rgba8, Rgba16, Rgba32,
    Rgba8p, Rgba16p, Rgba32p,
    SRgba8, SRgba16, SRgba32,
    SRgba8p, SRgba16p, SRgba32p,
)
