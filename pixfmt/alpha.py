"""
Alpha channels and alpha modes.

``Opaque`` and ``Translucent`` say whether a pixel carries an alpha value at
all. ``AlphaMode`` says how the color channels relate to that alpha:

- STRAIGHT: color is stored independent of alpha
- PREMULTIPLIED: color is stored already multiplied by alpha

A premultiplied color with zero alpha decodes to zero.
"""
from __future__ import annotations
from enum import Enum
from typing import Callable, ClassVar, Dict, Optional, Union
import numpy as np

from .channels import Channel
from .channels.channel_base import ChannelLike
from .conversions.arithmetic import np_div, np_mul
from .conversions.depth import as_work
from .types.bit_depth import BitDepth
from .types.format_types import RawValue
from .utils.immutable import Immutable


class AlphaChannel(Immutable):
    """Opacity of a pixel. Zero is fully transparent, one is fully opaque."""

    __slots__ = ("_chan",)

    translucent: ClassVar[bool]

    @property
    def chan(self) -> type[Channel]:
        """Channel class the alpha value is expressed in."""
        return self._chan

    def value(self) -> Channel:
        raise NotImplementedError

    def lerp(self, target: ChannelLike) -> AlphaChannel:
        raise NotImplementedError

    @classmethod
    def from_alpha(cls, alpha: AlphaChannel, chan: Optional[type[Channel]] = None) -> AlphaChannel:
        raise NotImplementedError

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._chan is other._chan and self.value() == other.value()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.value()))


class Opaque(AlphaChannel):
    """Alpha for pixels that are always fully opaque; stores nothing."""

    __slots__ = ()
    translucent: ClassVar[bool] = False

    def __init__(self, chan: type[Channel]) -> None:
        self._chan = chan
        self._freeze()

    def value(self) -> Channel:
        return self._chan.MAX

    def lerp(self, target: ChannelLike) -> Opaque:
        return self

    @classmethod
    def from_alpha(cls, alpha: AlphaChannel, chan: Optional[type[Channel]] = None) -> Opaque:
        """Any alpha becomes opaque; its value is discarded."""
        return cls(chan or alpha.chan)

    def __mul__(self, other):
        if not isinstance(other, AlphaChannel):
            return NotImplemented
        return self

    def __repr__(self) -> str:
        return f"Opaque({self._chan.__name__})"


class Translucent(AlphaChannel):
    """Alpha for pixels that may be translucent or fully transparent."""

    __slots__ = ("_value",)
    translucent: ClassVar[bool] = True

    def __init__(self, value: ChannelLike, chan: Optional[type[Channel]] = None) -> None:
        if chan is None:
            if not isinstance(value, Channel):
                raise TypeError("Translucent needs a channel class for raw alpha values")
            chan = type(value)
        self._chan = chan
        self._value = chan(value)
        self._freeze()

    def value(self) -> Channel:
        return self._value

    def lerp(self, target: ChannelLike) -> Translucent:
        """Move toward ``target``, weighted by ``target`` itself."""
        t = self._chan(target)
        return Translucent(self._value.lerp(t, t))

    @classmethod
    def from_alpha(cls, alpha: AlphaChannel, chan: Optional[type[Channel]] = None) -> Translucent:
        """Opaque alpha becomes MAX; translucent alpha is rescaled to ``chan``."""
        return cls(alpha.value(), chan or alpha.chan)

    def __mul__(self, other):
        if isinstance(other, Opaque):
            return Opaque(self._chan)
        if not isinstance(other, Translucent):
            return NotImplemented
        return Translucent(self._value * other.value())

    def __repr__(self) -> str:
        return f"Translucent({self._value!r})"


AlphaLike = Union[AlphaChannel, ChannelLike]


def _alpha_value(color: Channel, alpha: AlphaLike) -> Channel:
    if isinstance(alpha, AlphaChannel):
        alpha = alpha.value()
    return type(color)(alpha)


class AlphaMode(Enum):
    STRAIGHT = "straight"
    PREMULTIPLIED = "premultiplied"

    def encode(self, color: Channel, alpha: AlphaLike) -> Channel:
        """Turn a true (straight) color value into this mode's stored value."""
        return _ENCODERS[self](color, _alpha_value(color, alpha))

    def decode(self, color: Channel, alpha: AlphaLike) -> Channel:
        """Turn this mode's stored color value into the true (straight) value."""
        return _DECODERS[self](color, _alpha_value(color, alpha))

    def np_encode(self, color: RawValue, alpha: RawValue, depth: BitDepth) -> np.ndarray:
        return _NP_ENCODERS[self](color, alpha, depth)

    def np_decode(self, color: RawValue, alpha: RawValue, depth: BitDepth) -> np.ndarray:
        return _NP_DECODERS[self](color, alpha, depth)


def _keep(color: Channel, alpha: Channel) -> Channel:
    return color


def _premultiply(color: Channel, alpha: Channel) -> Channel:
    return color * alpha


def _unpremultiply(color: Channel, alpha: Channel) -> Channel:
    # zero alpha divides to zero
    return color / alpha


def _np_keep(color: RawValue, alpha: RawValue, depth: BitDepth) -> np.ndarray:
    return as_work(color, depth)


_ENCODERS: Dict[AlphaMode, Callable[[Channel, Channel], Channel]] = {
    AlphaMode.STRAIGHT: _keep,
    AlphaMode.PREMULTIPLIED: _premultiply,
}

_DECODERS: Dict[AlphaMode, Callable[[Channel, Channel], Channel]] = {
    AlphaMode.STRAIGHT: _keep,
    AlphaMode.PREMULTIPLIED: _unpremultiply,
}

_NP_ENCODERS: Dict[AlphaMode, Callable[[RawValue, RawValue, BitDepth], np.ndarray]] = {
    AlphaMode.STRAIGHT: _np_keep,
    AlphaMode.PREMULTIPLIED: np_mul,
}

_NP_DECODERS: Dict[AlphaMode, Callable[[RawValue, RawValue, BitDepth], np.ndarray]] = {
    AlphaMode.STRAIGHT: _np_keep,
    AlphaMode.PREMULTIPLIED: np_div,
}
