"""Point transformations between the galactic, ICRS and ecliptic frames.

A sky position is lifted onto the unit sphere, rotated with the frame
matrix from :mod:`skyframes.frames._registry`, and projected back to
longitude and latitude.  Both frames are inertial and share an origin, so
the transformation is a pure rotation; no epoch or proper-motion terms are
involved.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from skyframes.coordinates import (
    position_cartesian_to_spherical,
    position_spherical_to_cartesian,
)
from skyframes.frames._registry import FrameTransformation, resolve_frame_matrix
from skyframes.linalg import dot


def transform_cartesian(name: str | FrameTransformation, xyz: ArrayLike) -> Array:
    """Rotate Cartesian vectors from one frame into another.

    Args:
        name: Transformation name (e.g. ``"GAL2ICRS"``, case-insensitive)
            or a :class:`FrameTransformation`.
        xyz: Cartesian vector(s), shape ``(3,)`` or ``(3, N)``.

    Returns:
        jax.Array: Rotated vector(s) with the same shape as ``xyz``.

    Raises:
        UnknownTransformationError: If the name is not recognised.
        DimensionMismatchError: If ``xyz`` does not have 3 rows.

    Examples:
        ```python
        from skyframes.frames import transform_cartesian
        transform_cartesian("ICRS2ECL", [0.0, 0.0, 1.0])
        ```
    """
    return dot(resolve_frame_matrix(name), xyz)


def transform(
    name: str | FrameTransformation,
    lon: ArrayLike,
    lat: ArrayLike,
    use_degrees: bool = True,
) -> Array:
    """Transform sky positions from one frame into another.

    Args:
        name: Transformation name, one of ``GAL2ICRS``, ``ICRS2GAL``,
            ``ECL2ICRS``, ``ICRS2ECL``, ``GAL2ECL``, ``ECL2GAL``
            (case-insensitive), or a :class:`FrameTransformation`.
        lon: Longitude-like angle in the source frame, scalar or 1-D array.
        lat: Latitude-like angle in the source frame, scalar or 1-D array.
        use_degrees: If ``True`` (default), angles are given and returned in
            degrees, otherwise in radians.

    Returns:
        jax.Array: ``[lon, lat]`` in the target frame, shape ``(2,)`` or
            ``(2, N)``.  Longitude is in ``(-180, 180]`` degrees
            (``(-pi, pi]`` rad).

    Raises:
        UnknownTransformationError: If the name is not recognised.

    Examples:
        ```python
        from skyframes.frames import transform
        l, b = transform("ICRS2GAL", 266.40499, -28.93617)
        ```
    """
    xyz = position_spherical_to_cartesian(1.0, lon, lat, use_degrees=use_degrees)
    xyz_rot = transform_cartesian(name, xyz)
    _, lon_out, lat_out = position_cartesian_to_spherical(xyz_rot, use_degrees=use_degrees)
    return jnp.stack([lon_out, lat_out])
