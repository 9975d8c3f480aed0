"""
pixfmt conversions
==================

Raw-value kernels shared by the scalar classes and the vectorized path.

Bit depth:
    np_rescale(values, from_depth, to_depth)
    rescale(value, from_depth, to_depth)
    np_clamp_unit(values)

Arithmetic:
    np_add, np_sub, np_mul, np_div, np_lerp, np_powf

High-level API (see ``wrapper``):
    np_convert(rgba, from_format, to_format)
    convert_rgba(rgba, from_format, to_format)
"""

from .depth import np_rescale, rescale, np_clamp_unit, round_half_up
from .arithmetic import np_add, np_sub, np_mul, np_div, np_lerp, np_powf

__all__ = [
    "np_rescale",
    "rescale",
    "np_clamp_unit",
    "round_half_up",
    "np_add",
    "np_sub",
    "np_mul",
    "np_div",
    "np_lerp",
    "np_powf",
]
