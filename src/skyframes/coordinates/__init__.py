"""Coordinate representations on the celestial sphere.

This sub-module provides:

- **Spherical**: ``[r, lon, lat]`` ↔ Cartesian ``[x, y, z]`` using the
  astronomical elevation convention for latitude
- **Distance**: haversine great-circle separation of two sky positions
"""

from .distance import spherical_distance
from .spherical import (
    position_cartesian_to_spherical,
    position_spherical_to_cartesian,
)

__all__ = [
    "position_spherical_to_cartesian",
    "position_cartesian_to_spherical",
    "spherical_distance",
]
