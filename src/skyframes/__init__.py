"""
skyframes converts celestial coordinates between the galactic, ICRS and ecliptic reference frames, implemented in JAX.
"""

from .constants import (
    DEG2RAD,
    RAD2DEG,
    AM2RAD,
    AS2RAD,
    RAD2AS,
    HOUR2DEG,
    GALACTIC_POLE_RA,
    GALACTIC_POLE_DEC,
    GALACTIC_NODE_LON,
    OBLIQUITY_J2000,
)

from .config import set_dtype, get_dtype

from .errors import (
    SkyframesError,
    DimensionMismatchError,
    InvalidAxisError,
    UnknownTransformationError,
    DegenerateOriginError,
    MalformedAngleStringError,
)

from .linalg import dot, transpose

from .rotations import (
    Rx,
    Ry,
    Rz,
    elementary_rotation,
    is_rotation_matrix,
)

from .coordinates import (
    position_spherical_to_cartesian,
    position_cartesian_to_spherical,
    spherical_distance,
)

from .frames import (
    FrameTransformation,
    resolve_frame_matrix,
    transform,
    transform_cartesian,
)

from .utils import (
    to_radians,
    from_radians,
    arcsec_to_degrees,
    arcmin_to_degrees,
    arcsec_to_radians,
    arcmin_to_radians,
    parse_dms_to_degrees,
    parse_hms_to_degrees,
)

__all__ = [
    # Constants
    "DEG2RAD",
    "RAD2DEG",
    "AM2RAD",
    "AS2RAD",
    "RAD2AS",
    "HOUR2DEG",
    "GALACTIC_POLE_RA",
    "GALACTIC_POLE_DEC",
    "GALACTIC_NODE_LON",
    "OBLIQUITY_J2000",
    # Config
    "set_dtype",
    "get_dtype",
    # Errors
    "SkyframesError",
    "DimensionMismatchError",
    "InvalidAxisError",
    "UnknownTransformationError",
    "DegenerateOriginError",
    "MalformedAngleStringError",
    # Linear algebra
    "dot",
    "transpose",
    # Rotations
    "Rx",
    "Ry",
    "Rz",
    "elementary_rotation",
    "is_rotation_matrix",
    # Coordinates
    "position_spherical_to_cartesian",
    "position_cartesian_to_spherical",
    "spherical_distance",
    # Frames
    "FrameTransformation",
    "resolve_frame_matrix",
    "transform",
    "transform_cartesian",
    # Utilities
    "to_radians",
    "from_radians",
    "arcsec_to_degrees",
    "arcmin_to_degrees",
    "arcsec_to_radians",
    "arcmin_to_radians",
    "parse_dms_to_degrees",
    "parse_hms_to_degrees",
]
