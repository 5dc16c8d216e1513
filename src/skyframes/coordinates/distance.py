"""Angular separation between two points on the celestial sphere."""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from skyframes.config import get_dtype
from skyframes.utils import from_radians, to_radians


def spherical_distance(
    lon1: ArrayLike,
    lat1: ArrayLike,
    lon2: ArrayLike,
    lat2: ArrayLike,
    use_degrees: bool = True,
) -> Array:
    """Great-circle distance between two points given by longitude and latitude.

    Uses the haversine formula

    ``d = 2 asin(sqrt(sin²(Δlat/2) + cos(lat1) cos(lat2) sin²(Δlon/2)))``

    which stays accurate for small separations where the arccos form of
    the spherical law of cosines loses precision.  The computation is done
    in radians; ``use_degrees`` only selects the units at the boundary.

    Args:
        lon1: Longitude of the first point (e.g. right ascension).
        lat1: Latitude of the first point (e.g. declination).
        lon2: Longitude of the second point.
        lat2: Latitude of the second point.
        use_degrees: If ``True`` (default), inputs and the result are in
            degrees, otherwise in radians.

    Returns:
        jax.Array: Angular distance between the two points.

    Examples:
        ```python
        from skyframes.coordinates import spherical_distance
        spherical_distance(0.0, 0.0, 90.0, 0.0)  # 90.0
        ```
    """
    _float = get_dtype()
    lon1 = jnp.asarray(to_radians(lon1, use_degrees), dtype=_float)
    lat1 = jnp.asarray(to_radians(lat1, use_degrees), dtype=_float)
    lon2 = jnp.asarray(to_radians(lon2, use_degrees), dtype=_float)
    lat2 = jnp.asarray(to_radians(lat2, use_degrees), dtype=_float)

    sin_dlat = jnp.sin((lat1 - lat2) / 2.0)
    sin_dlon = jnp.sin((lon1 - lon2) / 2.0)
    hav = sin_dlat * sin_dlat + jnp.cos(lat1) * jnp.cos(lat2) * (sin_dlon * sin_dlon)
    # rounding can push antipodal points just above 1
    hav = jnp.minimum(hav, 1.0)

    return from_radians(2.0 * jnp.arcsin(jnp.sqrt(hav)), use_degrees)
