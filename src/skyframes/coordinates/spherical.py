"""Spherical-Cartesian coordinate conversions on the celestial sphere.

Converts between spherical coordinates ``[r, lon, lat]`` and Cartesian
coordinates ``[x, y, z]``.  The latitude-like angle follows the
astronomical elevation convention (declination, galactic or ecliptic
latitude, measured from the equatorial plane in ``[-pi/2, pi/2]``), not the
co-latitude measured from the pole.

Inputs may be scalars or arrays of points.  Cartesian arrays carry the
components along the first axis, shape ``(3,)`` or ``(3, N)``.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from skyframes.config import get_dtype
from skyframes.errors import DegenerateOriginError, DimensionMismatchError
from skyframes.utils import from_radians, to_radians


def position_spherical_to_cartesian(
    r: ArrayLike,
    lon: ArrayLike,
    lat: ArrayLike,
    use_degrees: bool = False,
) -> Array:
    """Convert spherical coordinates to Cartesian coordinates.

    Args:
        r: Radius (length of the Cartesian vector).
        lon: Longitude-like angle (right ascension, galactic or ecliptic
            longitude) in *rad* (or *deg* if ``use_degrees=True``).
        lat: Latitude-like angle (declination, galactic or ecliptic
            latitude) in *rad* (or *deg* if ``use_degrees=True``).
        use_degrees: If ``True``, interpret ``lon`` and ``lat`` as degrees.

    Returns:
        jax.Array: Cartesian position ``[x, y, z]``.

    Example:
        >>> from skyframes.coordinates import position_spherical_to_cartesian
        >>> xyz = position_spherical_to_cartesian(1.0, 0.0, 90.0, use_degrees=True)
        >>> float(xyz[2])
        1.0
    """
    _float = get_dtype()
    r = jnp.asarray(r, dtype=_float)
    lon = jnp.asarray(to_radians(lon, use_degrees), dtype=_float)
    lat = jnp.asarray(to_radians(lat, use_degrees), dtype=_float)

    clat = jnp.cos(lat)
    x = r * jnp.cos(lon) * clat
    y = r * jnp.sin(lon) * clat
    z = r * jnp.sin(lat)

    return jnp.stack(jnp.broadcast_arrays(x, y, z))


def position_cartesian_to_spherical(
    xyz: ArrayLike,
    use_degrees: bool = False,
) -> Array:
    """Convert Cartesian coordinates to spherical coordinates.

    Longitude is returned in ``(-pi, pi]`` and latitude in ``[-pi/2, pi/2]``.

    The origin has no defined direction.  A point whose computed radius is
    exactly ``0.0`` raises :class:`DegenerateOriginError`.  The check needs
    concrete values, so it is skipped while the function is being traced
    by ``jax.jit``; there the origin maps to ``[0, 0, 0]``.

    Args:
        xyz: Cartesian position ``[x, y, z]``, shape ``(3,)`` or ``(3, N)``.
        use_degrees: If ``True``, return longitude and latitude in degrees.

    Returns:
        jax.Array: Spherical coordinates ``[r, lon, lat]``.

    Raises:
        DimensionMismatchError: If the first axis of ``xyz`` is not of length 3.
        DegenerateOriginError: If any point is at the origin.

    Example:
        >>> import jax.numpy as jnp
        >>> from skyframes.coordinates import position_cartesian_to_spherical
        >>> rlonlat = position_cartesian_to_spherical(jnp.array([0.0, 2.0, 0.0]), use_degrees=True)
        >>> float(rlonlat[1])
        90.0
    """
    xyz = jnp.asarray(xyz, dtype=get_dtype())
    if xyz.ndim == 0 or xyz.shape[0] != 3:
        raise DimensionMismatchError(
            f"Cartesian position must have 3 components along the first axis, got shape {xyz.shape}"
        )

    x = xyz[0]
    y = xyz[1]
    z = xyz[2]

    r_cyl_sq = x * x + y * y
    r = jnp.sqrt(r_cyl_sq + z * z)
    try:
        at_origin = bool(jnp.any(r == 0.0))
    except jax.errors.ConcretizationTypeError:
        # traced under jit, no concrete radius to check
        at_origin = False
    if at_origin:
        raise DegenerateOriginError("Point is at distance zero; longitude and latitude are undefined")

    lon = from_radians(jnp.arctan2(y, x), use_degrees)
    lat = from_radians(jnp.arctan2(z, jnp.sqrt(r_cyl_sq)), use_degrees)

    return jnp.stack([r, lon, lat])
