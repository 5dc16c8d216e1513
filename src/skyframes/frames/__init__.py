"""Frame transformations.

This sub-module converts positions between the three celestial reference
frames supported by skyframes:

- **Galactic**: aligned with the Milky Way plane and centre (J2000 pole)
- **ICRS**: the International Celestial Reference System (equatorial)
- **Ecliptic**: aligned with Earth's orbital plane (J2000 obliquity)

Transformations are fixed rotations, addressed by a
:class:`FrameTransformation` member or its case-insensitive name.
"""

from ._registry import (
    FrameTransformation,
    resolve_frame_matrix,
)
from .transform import (
    transform,
    transform_cartesian,
)

__all__ = [
    "FrameTransformation",
    "resolve_frame_matrix",
    "transform",
    "transform_cartesian",
]
