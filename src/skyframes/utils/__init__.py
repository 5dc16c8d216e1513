"""Shared utility functions for skyframes.

Provides angle and unit conversion helpers and sexagesimal string parsing.
"""

from skyframes.utils._angle import (
    arcmin_to_degrees,
    arcmin_to_radians,
    arcsec_to_degrees,
    arcsec_to_radians,
    from_radians,
    to_radians,
)
from skyframes.utils._parsing import parse_dms_to_degrees, parse_hms_to_degrees

__all__ = [
    "arcmin_to_degrees",
    "arcmin_to_radians",
    "arcsec_to_degrees",
    "arcsec_to_radians",
    "from_radians",
    "parse_dms_to_degrees",
    "parse_hms_to_degrees",
    "to_radians",
]
