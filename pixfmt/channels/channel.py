from typing import ClassVar, Dict
from ..types.bit_depth import BitDepth
from .channel_base import Channel


class Ch8(Channel):
    """
    8-bit channel stored as an ``int`` in 0..255.

    >>> Ch8(255) * 0.5
    Ch8(128)
    >>> Ch8(Ch16(0x8000))
    Ch8(128)
    """

    __slots__ = ()
    depth: ClassVar[BitDepth] = BitDepth.INT8

    def __int__(self) -> int:
        return self._value


class Ch16(Channel):
    """16-bit channel stored as an ``int`` in 0..65535."""

    __slots__ = ()
    depth: ClassVar[BitDepth] = BitDepth.INT16

    def __int__(self) -> int:
        return self._value


class Ch32(Channel):
    """
    32-bit float channel, always within [0.0, 1.0].

    The stored value is a float32 (held as a Python ``float``).
    """

    __slots__ = ()
    depth: ClassVar[BitDepth] = BitDepth.FLOAT32


for _cls in (Ch8, Ch16, Ch32):
    _cls.MIN = _cls(0)
    _cls.MAX = _cls(1.0)


channel_classes: Dict[BitDepth, type[Channel]] = {
    BitDepth.INT8: Ch8,
    BitDepth.INT16: Ch16,
    BitDepth.FLOAT32: Ch32,
}


def channel_for_depth(depth: BitDepth) -> type[Channel]:
    chan = channel_classes.get(BitDepth(depth))
    if chan is None:
        raise ValueError(f"Unsupported bit depth: {depth}")
    return chan
