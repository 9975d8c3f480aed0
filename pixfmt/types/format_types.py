from __future__ import annotations
from typing import Literal, Sequence, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
RawRGBA = Tuple[Scalar, Scalar, Scalar, Scalar]
RawValue = Union[Scalar, ndarray]
ColorModel = Literal["rgb", "gray", "mask"]
COLOR_MODELS = ("rgb", "gray", "mask")


def rgba_to_array(rgba: Union[Sequence[Scalar], ndarray]) -> np.ndarray:
    """
    Convert raw RGBA components to a numpy array.

    Args:
        rgba: Sequence of four raw values, or an array with a last axis of 4

    Returns:
        numpy array representation
    """
    if isinstance(rgba, ndarray):
        return rgba
    return np.array(rgba)
