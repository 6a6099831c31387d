"""Conversion between arrays and JAX / NumPy vectors."""

from __future__ import annotations

import logging
import numbers

import jax.numpy as jnp

from .array import Array
from .errors import InvalidArgumentError

_LOGGER = logging.getLogger(__name__)


def is_numeric(arr: Array) -> bool:
    return arr.every(lambda element: isinstance(element, numbers.Number) and not isinstance(element, bool))


def to_jax(arr: Array, dtype=None):
    """Rank-1 ``jax.numpy`` array holding the elements in position order."""
    if not isinstance(arr, Array):
        raise InvalidArgumentError(f"to_jax expects an Array (received {type(arr).__name__})")
    if not is_numeric(arr):
        raise InvalidArgumentError("to_jax requires every element to be a number")
    _LOGGER.debug("Converting array of length %d to jax (dtype=%s)", arr.length, dtype)
    if arr.length == 0:
        return jnp.zeros((0,), dtype=dtype or jnp.float32)
    return jnp.asarray(arr.to_list(), dtype=dtype)


def from_jax(value) -> Array:
    """Array of Python scalars from a rank-1 JAX or NumPy array."""
    if not hasattr(value, "ndim") or not hasattr(value, "tolist"):
        raise InvalidArgumentError(f"from_jax expects a JAX or NumPy array (received {type(value).__name__})")
    if value.ndim != 1:
        raise InvalidArgumentError(f"from_jax requires a rank-1 array (received rank {value.ndim})")
    _LOGGER.debug("Converting jax array of shape %s to Array", tuple(value.shape))
    return Array.from_(value)
