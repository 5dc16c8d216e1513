"""Angle and unit conversion helpers.

These helpers wrap the ``use_degrees`` convention used throughout
skyframes, providing JAX-traceable degree/radian conversion via
``jnp.where``, and the arcminute/arcsecond conversions used when quoting
small angles.
"""

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from skyframes.constants import AM2RAD, AS2RAD


def to_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle to radians if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle value.
        use_degrees (bool): If ``True``, treat ``angle`` as degrees and convert.

    Returns:
        Angle in radians.
    """
    angle = jnp.asarray(angle)
    return jnp.where(use_degrees, jnp.deg2rad(angle), angle)


def from_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle from radians to degrees if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle in radians.
        use_degrees (bool): If ``True``, convert to degrees.

    Returns:
        Angle in radians or degrees.
    """
    angle = jnp.asarray(angle)
    return jnp.where(use_degrees, jnp.rad2deg(angle), angle)


def arcsec_to_degrees(angle: ArrayLike) -> Array:
    """Convert arcseconds to degrees.

    Args:
        angle (ArrayLike): Angle in arcseconds.

    Returns:
        Angle in degrees.
    """
    return jnp.asarray(angle) / 3600.0


def arcmin_to_degrees(angle: ArrayLike) -> Array:
    """Convert arcminutes to degrees.

    Args:
        angle (ArrayLike): Angle in arcminutes.

    Returns:
        Angle in degrees.
    """
    return jnp.asarray(angle) / 60.0


def arcsec_to_radians(angle: ArrayLike) -> Array:
    """Convert arcseconds to radians."""
    return jnp.asarray(angle) * AS2RAD


def arcmin_to_radians(angle: ArrayLike) -> Array:
    """Convert arcminutes to radians."""
    return jnp.asarray(angle) * AM2RAD
