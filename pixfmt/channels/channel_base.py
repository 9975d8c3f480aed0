from __future__ import annotations
from functools import total_ordering
from typing import ClassVar, Optional, Self, Union
import math
import numpy as np

from ..conversions.arithmetic import np_add, np_div, np_lerp, np_mul, np_powf, np_sub
from ..conversions.depth import np_clamp_unit, rescale
from ..types.bit_depth import BitDepth, max_raw, min_raw
from ..types.format_types import RawValue, Scalar
from ..utils.immutable import Immutable

ChannelLike = Union["Channel", int, float]

_PACKAGE = __name__.split(".")[0]


class InvalidChannelValue(ValueError):
    """A raw value lies outside the range of its bit depth."""


@total_ordering
class Channel(Immutable):
    """
    One color or alpha component, normalized to [0, 1] whatever its storage.

    Construction never fails for numbers:

    - another ``Channel`` is rescaled to this depth
    - an ``int`` is a raw value of this depth, saturated into range
    - a ``float`` is a normalized value, clamped (NaN and negatives -> MIN,
      above 1.0 -> MAX) and rounded to this depth

    Use :meth:`checked` when out-of-range raw input should be an error.

    The set of channel classes is closed: ``Ch8``, ``Ch16`` and ``Ch32``.
    """

    __slots__ = ("_value",)

    depth: ClassVar[BitDepth]
    MIN: ClassVar[Channel]
    MAX: ClassVar[Channel]

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.__module__.split(".")[0] != _PACKAGE:
            raise TypeError(f"{Channel.__name__} is sealed; {cls.__name__} cannot extend it")

    def __init__(self, value: ChannelLike = 0) -> None:
        if isinstance(value, Channel):
            raw = rescale(value._value, value.depth, self.depth)
        elif isinstance(value, (bool, np.bool_)):
            raise TypeError(f"{self.__class__.__name__} cannot be built from a bool")
        elif isinstance(value, (float, np.floating)):
            raw = rescale(np_clamp_unit(value), BitDepth.FLOAT32, self.depth)
        elif isinstance(value, (int, np.integer)):
            raw = self._saturate(value)
        else:
            raise TypeError(
                f"{self.__class__.__name__} expects a Channel, int or float, got {type(value).__name__}"
            )
        self._value = raw
        self._freeze()

    # ------------------ CONSTRUCTION HELPERS ------------------
    @classmethod
    def _saturate(cls, raw: Scalar) -> Scalar:
        if cls.depth.is_float:
            return np_clamp_unit(raw).item()
        return max(min_raw[cls.depth], min(int(raw), max_raw[cls.depth]))

    @classmethod
    def _from_raw(cls, raw: Scalar) -> Self:
        obj = cls.__new__(cls)
        object.__setattr__(obj, "_value", raw)
        obj._freeze()
        return obj

    @classmethod
    def _from_kernel(cls, result: RawValue) -> Self:
        return cls._from_raw(np.asarray(result).item())

    @classmethod
    def checked(cls, raw: Scalar) -> Self:
        """
        Build a channel from a raw value, refusing anything out of range.

        Raises:
            InvalidChannelValue: if ``raw`` is outside ``[MIN, MAX]`` or NaN.
            TypeError: if ``raw`` is not a number of this depth's kind.
        """
        lo, hi = min_raw[cls.depth], max_raw[cls.depth]
        if cls.depth.is_float:
            if not isinstance(raw, (int, float, np.integer, np.floating)):
                raise TypeError(f"{cls.__name__} expects a float raw value, got {type(raw).__name__}")
            raw = float(raw)
            if math.isnan(raw) or not lo <= raw <= hi:
                raise InvalidChannelValue(f"{cls.__name__} raw value must be in [{lo}, {hi}], got {raw}")
        else:
            if not isinstance(raw, (int, np.integer)) or isinstance(raw, bool):
                raise TypeError(f"{cls.__name__} expects an int raw value, got {type(raw).__name__}")
            if not lo <= raw <= hi:
                raise InvalidChannelValue(f"{cls.__name__} raw value must be in [{lo}, {hi}], got {raw}")
        return cls._from_raw(cls._saturate(raw))

    def _coerce(self, other) -> Optional[Channel]:
        if type(other) is type(self):
            return other
        if isinstance(other, (Channel, int, float, np.integer, np.floating)):
            return type(self)(other)
        return None

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Scalar:
        """Raw stored value (``int`` for integer depths, ``float`` for Ch32)."""
        return self._value

    def __float__(self) -> float:
        return rescale(self._value, self.depth, BitDepth.FLOAT32)

    # ------------------ ORDERING ------------------
    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    # ------------------ ARITHMETIC ------------------
    def __add__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._from_kernel(np_add(self._value, rhs._value, self.depth))

    def __sub__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._from_kernel(np_sub(self._value, rhs._value, self.depth))

    def __mul__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._from_kernel(np_mul(self._value, rhs._value, self.depth))

    def __truediv__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._from_kernel(np_div(self._value, rhs._value, self.depth))

    def __radd__(self, other):
        lhs = self._coerce(other)
        return NotImplemented if lhs is None else lhs + self

    def __rsub__(self, other):
        lhs = self._coerce(other)
        return NotImplemented if lhs is None else lhs - self

    def __rmul__(self, other):
        lhs = self._coerce(other)
        return NotImplemented if lhs is None else lhs * self

    def __rtruediv__(self, other):
        lhs = self._coerce(other)
        return NotImplemented if lhs is None else lhs / self

    def powf(self, exponent: float) -> Self:
        """Raise to a power through the float path."""
        return self._from_kernel(np_powf(self._value, exponent, self.depth))

    def lerp(self, rhs: ChannelLike, t: ChannelLike) -> Self:
        """Linear interpolation from this value toward ``rhs`` by ``t``."""
        end = self._coerce(rhs)
        weight = self._coerce(t)
        if end is None or weight is None:
            raise TypeError(f"{self.__class__.__name__}.lerp expects channels or numbers")
        return self._from_kernel(np_lerp(self._value, end._value, weight._value, self.depth))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"
