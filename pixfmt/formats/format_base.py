from __future__ import annotations
from typing import ClassVar, List, Optional, Sequence, Tuple, TypeVar
import numpy as np

from ..alpha import AlphaChannel, AlphaLike, AlphaMode, Opaque, Translucent
from ..channels import Channel
from ..channels.channel_base import ChannelLike
from ..gamma import GammaMode
from ..types.bit_depth import BitDepth, depth_dtypes
from ..types.format_types import ColorModel
from ..utils.immutable import Immutable

F = TypeVar("F", bound="PixelFormat")


class PixelFormat(Immutable):
    """
    A pixel tagged with a channel depth, an alpha mode and a gamma mode.

    Every format can be read as four channels (red, green, blue, alpha) in its
    own depth, and rebuilt from them. That is all :meth:`convert` needs to go
    from any format to any other.
    """

    __slots__ = ("_channels", "_alpha")

    model:         ClassVar[ColorModel]
    chan:          ClassVar[type[Channel]]
    depth:         ClassVar[BitDepth]
    alpha_channel: ClassVar[type[AlphaChannel]]
    alpha_mode:    ClassVar[AlphaMode]
    gamma_mode:    ClassVar[GammaMode]

    def _check_concrete(self) -> None:
        if not hasattr(type(self), "chan"):
            raise TypeError(
                f"{self.__class__.__name__} is a color model; instantiate a concrete format instead"
            )

    def _make_alpha(self, alpha: Optional[AlphaLike]) -> AlphaChannel:
        if self.alpha_channel is Opaque:
            return Opaque(self.chan)
        if alpha is None:
            return Translucent(self.chan.MAX)
        if isinstance(alpha, AlphaChannel):
            return Translucent.from_alpha(alpha, self.chan)
        return Translucent(alpha, self.chan)

    # ------------------ FOUR-CHANNEL VIEW ------------------
    def components(self) -> List[Channel]:
        """Red, green, blue and alpha channels in this format's depth."""
        raise NotImplementedError

    @classmethod
    def from_components(cls: type[F], rgba: Sequence[ChannelLike]) -> F:
        """Make a pixel from red, green, blue and alpha channels."""
        raise NotImplementedError

    def raw_components(self) -> Tuple:
        """Raw values of :meth:`components` (the serialized form of the pixel)."""
        return tuple(c.value for c in self.components())

    def to_array(self) -> np.ndarray:
        return np.array(self.raw_components(), dtype=depth_dtypes[self.depth])

    # ------------------ COMPARISON ------------------
    def difference(self: F, rhs: F) -> F:
        """Channel-wise absolute difference."""
        self._check_same_format(rhs)
        diff = [
            a - b if a > b else b - a
            for a, b in zip(self.components(), rhs.components())
        ]
        return self.from_components(diff)

    def within_threshold(self: F, rhs: F) -> bool:
        """
        True if every channel is less than or equal to the same channel of ``rhs``.

        ``rhs`` is a per-channel tolerance, usually compared against the result
        of :meth:`difference`.
        """
        self._check_same_format(rhs)
        return all(c <= t for c, t in zip(self.components(), rhs.components()))

    def is_close(self: F, rhs: F, threshold: F) -> bool:
        """Shorthand for ``self.difference(rhs).within_threshold(threshold)``."""
        return self.difference(rhs).within_threshold(threshold)

    def _check_same_format(self, rhs: PixelFormat) -> None:
        if type(rhs) is not type(self):
            raise TypeError(
                f"{self.__class__.__name__} cannot be compared with {type(rhs).__name__}; convert first"
            )

    # ------------------ CONVERSION ------------------
    def convert(self, dest: type[F]) -> F:
        """
        Convert this pixel to another format.

        Channels are rescaled to the destination depth first. Alpha and gamma
        are only touched when the destination tags differ, always in the order
        decode gamma, decode alpha, encode alpha, encode gamma.
        """
        if dest is type(self):
            return self  # type: ignore[return-value]
        rgba = [dest.chan(c) for c in self.components()]
        if self.alpha_mode is not dest.alpha_mode or self.gamma_mode is not dest.gamma_mode:
            rgba = convert_alpha_gamma(type(self), dest, rgba)
        return dest.from_components(rgba)

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.components() == other.components()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.raw_components()))

    def _stored(self) -> Tuple[Channel, ...]:
        if self._alpha.translucent:
            return self._channels + (self._alpha.value(),)
        return self._channels

    def __repr__(self) -> str:
        values = ", ".join(repr(c.value) for c in self._stored())
        return f"{self.__class__.__name__}({values})"


def convert_alpha_gamma(
    src: type[PixelFormat],
    dest: type[PixelFormat],
    rgba: List[Channel],
) -> List[Channel]:
    """Move color channels (already in the destination depth) between alpha/gamma modes."""
    red, green, blue, alpha = rgba
    colors = [src.gamma_mode.to_linear(c) for c in (red, green, blue)]
    if src.alpha_mode is not dest.alpha_mode:
        colors = [src.alpha_mode.decode(c, alpha) for c in colors]
        colors = [dest.alpha_mode.encode(c, alpha) for c in colors]
    colors = [dest.gamma_mode.from_linear(c) for c in colors]
    return colors + [alpha]


def define_format(
    name: str,
    model: type[F],
    chan: type[Channel],
    alpha_channel: type[AlphaChannel],
    alpha_mode: AlphaMode,
    gamma_mode: GammaMode,
    module: str,
) -> type[F]:
    """Create a concrete pixel format of a color model."""
    gamma = "sRGB" if gamma_mode is GammaMode.SRGB else "linear"
    if alpha_channel is Opaque:
        alpha = "opaque"
    else:
        alpha = f"{alpha_mode.value} alpha"
    doc = f"{chan.__name__} {model.__name__} pixel format: {alpha}, {gamma} gamma."
    return type(name, (model,), {
        "__slots__": (),
        "__module__": module,
        "__doc__": doc,
        "chan": chan,
        "depth": chan.depth,
        "alpha_channel": alpha_channel,
        "alpha_mode": alpha_mode,
        "gamma_mode": gamma_mode,
    })


def build_registry(*classes: type[PixelFormat]):
    return {
        (cls.model, cls.depth, cls.alpha_channel.translucent, cls.alpha_mode, cls.gamma_mode): cls
        for cls in classes
    }
