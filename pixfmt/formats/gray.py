from __future__ import annotations
from typing import ClassVar, List, Optional, Sequence

from ..alpha import AlphaLike, AlphaMode, Opaque, Translucent
from ..channels import Ch8, Ch16, Ch32, Channel
from ..channels.channel_base import ChannelLike
from ..gamma import GammaMode
from ..types.format_types import ColorModel
from .format_base import PixelFormat, build_registry, define_format


class Gray(PixelFormat):
    """
    Single-intensity color model, with optional alpha.

    Read as RGBA, the value fills red, green and blue. Built from RGBA, the
    value is the largest of red, green and blue.
    """

    __slots__ = ()
    model: ClassVar[ColorModel] = "gray"

    def __init__(self, value: ChannelLike, alpha: Optional[AlphaLike] = None) -> None:
        self._check_concrete()
        self._channels = (self.chan(value),)
        self._alpha = self._make_alpha(alpha)
        self._freeze()

    @property
    def value(self) -> Channel:
        return self._channels[0]

    @property
    def alpha(self) -> Channel:
        return self._alpha.value()

    def components(self) -> List[Channel]:
        value = self._channels[0]
        return [value, value, value, self._alpha.value()]

    @classmethod
    def from_components(cls, rgba: Sequence[ChannelLike]) -> Gray:
        chan = cls.chan
        red, green, blue, alpha = (chan(c) for c in rgba)
        return cls(max(red, green, blue), alpha)


_S, _P = AlphaMode.STRAIGHT, AlphaMode.PREMULTIPLIED
_LIN, _SRGB = GammaMode.LINEAR, GammaMode.SRGB

# Opaque, linear gamma
Gray8 = define_format("Gray8", Gray, Ch8, Opaque, _S, _LIN, __name__)
Gray16 = define_format("Gray16", Gray, Ch16, Opaque, _S, _LIN, __name__)
Gray32 = define_format("Gray32", Gray, Ch32, Opaque, _S, _LIN, __name__)

# Opaque, sRGB gamma
SGray8 = define_format("SGray8", Gray, Ch8, Opaque, _S, _SRGB, __name__)
SGray16 = define_format("SGray16", Gray, Ch16, Opaque, _S, _SRGB, __name__)
SGray32 = define_format("SGray32", Gray, Ch32, Opaque, _S, _SRGB, __name__)

# Straight alpha, linear gamma
GrayAlpha8 = define_format("GrayAlpha8", Gray, Ch8, Translucent, _S, _LIN, __name__)
GrayAlpha16 = define_format("GrayAlpha16", Gray, Ch16, Translucent, _S, _LIN, __name__)
GrayAlpha32 = define_format("GrayAlpha32", Gray, Ch32, Translucent, _S, _LIN, __name__)

# Premultiplied alpha, linear gamma
GrayAlpha8p = define_format("GrayAlpha8p", Gray, Ch8, Translucent, _P, _LIN, __name__)
GrayAlpha16p = define_format("GrayAlpha16p", Gray, Ch16, Translucent, _P, _LIN, __name__)
GrayAlpha32p = define_format("GrayAlpha32p", Gray, Ch32, Translucent, _P, _LIN, __name__)

# Straight alpha, sRGB gamma
SGrayAlpha8 = define_format("SGrayAlpha8", Gray, Ch8, Translucent, _S, _SRGB, __name__)
SGrayAlpha16 = define_format("SGrayAlpha16", Gray, Ch16, Translucent, _S, _SRGB, __name__)
SGrayAlpha32 = define_format("SGrayAlpha32", Gray, Ch32, Translucent, _S, _SRGB, __name__)

# Premultiplied alpha, sRGB gamma
SGrayAlpha8p = define_format("SGrayAlpha8p", Gray, Ch8, Translucent, _P, _SRGB, __name__)
SGrayAlpha16p = define_format("SGrayAlpha16p", Gray, Ch16, Translucent, _P, _SRGB, __name__)
SGrayAlpha32p = define_format("SGrayAlpha32p", Gray, Ch32, Translucent, _P, _SRGB, __name__)


gray_formats = build_registry(
    Gray8, Gray16, Gray32,
    SGray8, SGray16, SGray32,
    GrayAlpha8, GrayAlpha16, GrayAlpha32,
    GrayAlpha8p, GrayAlpha16p, GrayAlpha32p,
    SGrayAlpha8, SGrayAlpha16, SGrayAlpha32,
    SGrayAlpha8p, SGrayAlpha16p, SGrayAlpha32p,
)
