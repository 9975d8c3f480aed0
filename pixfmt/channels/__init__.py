"""
pixfmt channels
===============

Channel value classes, one per bit depth:

    - Ch8:  int 0..255, resolution 1/255
    - Ch16: int 0..65535, resolution 1/65535
    - Ch32: float32 clamped to [0.0, 1.0]

All three treat their range as [0, 1]: multiplication and division behave as
they would on unit values, addition and subtraction saturate.
"""

from .channel_base import Channel, InvalidChannelValue
from .channel import Ch8, Ch16, Ch32, channel_classes, channel_for_depth

__all__ = [
    "Channel",
    "InvalidChannelValue",
    "Ch8",
    "Ch16",
    "Ch32",
    "channel_classes",
    "channel_for_depth",
]
