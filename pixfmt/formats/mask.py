from __future__ import annotations
from typing import ClassVar, List, Optional, Sequence

from ..alpha import AlphaLike, AlphaMode, Translucent
from ..channels import Ch8, Ch16, Ch32, Channel
from ..channels.channel_base import ChannelLike
from ..gamma import GammaMode
from ..types.format_types import ColorModel
from .format_base import PixelFormat, build_registry, define_format


class Mask(PixelFormat):
    """
    Alpha-only color model. Read as RGBA, red, green and blue are MAX.

    Masks multiply: ``Mask8(0x80) * Mask8(0x80) == Mask8(0x40)``.
    """

    __slots__ = ()
    model: ClassVar[ColorModel] = "mask"

    def __init__(self, alpha: Optional[AlphaLike] = None) -> None:
        self._check_concrete()
        self._channels = ()
        self._alpha = self._make_alpha(alpha)
        self._freeze()

    @property
    def alpha(self) -> Channel:
        return self._alpha.value()

    def components(self) -> List[Channel]:
        full = self.chan.MAX
        return [full, full, full, self._alpha.value()]

    @classmethod
    def from_components(cls, rgba: Sequence[ChannelLike]) -> Mask:
        return cls(rgba[3])

    def __mul__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self._alpha * other._alpha)


Mask8 = define_format("Mask8", Mask, Ch8, Translucent, AlphaMode.STRAIGHT, GammaMode.LINEAR, __name__)
Mask16 = define_format("Mask16", Mask, Ch16, Translucent, AlphaMode.STRAIGHT, GammaMode.LINEAR, __name__)
Mask32 = define_format("Mask32", Mask, Ch32, Translucent, AlphaMode.STRAIGHT, GammaMode.LINEAR, __name__)


mask_formats = build_registry(Mask8, Mask16, Mask32)
