"""
Validation utilities for geometric and mass inputs.

Provides functions to validate dimensions, densities and coordinate frames
before they are stored on an immutable shape, object or component.
"""
from __future__ import annotations

import math
import numbers

import numpy as np
from numpy.typing import NDArray

from aircraftdesign.errors import InvalidDimension


def validate_non_negative(value: float, name: str) -> float:
    """
    Validate that a scalar is a finite real number ``>= 0``.

    Parameters
    ----------
    value : float
        Value to validate
    name : str
        Parameter name for error messages

    Returns
    -------
    float
        The value as a float

    Raises
    ------
    InvalidDimension
        If value is negative, NaN, infinite or not a real number. Strings
        and booleans are rejected.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidDimension(f"{name} must be a real number, got {value!r}")
    fvalue = float(value)
    if not math.isfinite(fvalue):
        raise InvalidDimension(f"{name} must be finite, got {value}")
    if fvalue < 0:
        raise InvalidDimension(f"{name} must be non-negative, got {value}")
    return fvalue


def validate_vector3(v, name: str) -> NDArray[np.float64]:
    """
    Validate a 3-vector and return it as a read-only float64 array.

    Raises
    ------
    InvalidDimension
        If the input does not have shape (3,) or has non-finite entries
    """
    arr = np.array(v, dtype=np.float64)
    if arr.shape != (3,):
        raise InvalidDimension(f"{name} must have shape (3,), got {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise InvalidDimension(f"{name} must be finite, got {arr}")
    arr.setflags(write=False)
    return arr


def validate_matrix3(M, name: str) -> NDArray[np.float64]:
    """
    Validate a 3x3 orientation matrix and return it as a read-only array.

    The matrix is not required to be orthonormal; frames are stored exactly
    as given.

    Raises
    ------
    InvalidDimension
        If the input does not have shape (3, 3) or has non-finite entries
    """
    arr = np.array(M, dtype=np.float64)
    if arr.shape != (3, 3):
        raise InvalidDimension(f"{name} must be 3x3, got shape {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise InvalidDimension(f"{name} must be finite")
    arr.setflags(write=False)
    return arr
