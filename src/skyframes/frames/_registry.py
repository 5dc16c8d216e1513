"""Registry of the fixed galactic, ICRS and ecliptic rotation matrices.

The six frame-to-frame rotations are built once, when this module is
imported, from the J2000 galactic pole and ecliptic obliquity constants
using the elementary rotations.  They are stored as immutable JAX arrays
and never modified afterwards, so they can be shared freely between
threads.

Galactic frame (Hipparcos Vol. 1, Sec. 1.5.3; Murray 1983, Sec. 10.2)::

    ICRS2GAL = Rz(-omega) . Rx(pi/2 - dec_G) . Rz(pi/2 + ra_G)

Ecliptic frame (van Altena et al. 2012, Sec. 4.5)::

    ICRS2ECL = Rx(eps)

The reverse directions are exact transposes and the galactic-ecliptic
matrices go through ICRS.
"""

from __future__ import annotations

import enum
import logging

import jax
import jax.numpy as jnp

from skyframes.config import get_dtype
from skyframes.constants import (
    AS2RAD,
    DEG2RAD,
    GALACTIC_NODE_LON,
    GALACTIC_POLE_DEC,
    GALACTIC_POLE_RA,
    OBLIQUITY_J2000,
    PI,
)
from skyframes.errors import UnknownTransformationError
from skyframes.linalg import dot, transpose
from skyframes.rotations import elementary_rotation, is_rotation_matrix

logger = logging.getLogger(__name__)

_FRAME_LABELS = {
    "GAL": "galactic",
    "ICRS": "ICRS",
    "ECL": "ecliptic",
}


class FrameTransformation(enum.IntEnum):
    """The six supported frame-to-frame transformations.

    Each member is named ``<FROM>2<TO>`` with ``GAL`` (galactic), ``ICRS``
    and ``ECL`` (ecliptic) as frame abbreviations.

    Attributes:
        GAL2ICRS: Galactic to ICRS (index 0).
        ICRS2GAL: ICRS to galactic (index 1).
        ECL2ICRS: Ecliptic to ICRS (index 2).
        ICRS2ECL: ICRS to ecliptic (index 3).
        GAL2ECL: Galactic to ecliptic (index 4).
        ECL2GAL: Ecliptic to galactic (index 5).
    """

    GAL2ICRS = 0
    ICRS2GAL = 1
    ECL2ICRS = 2
    ICRS2ECL = 3
    GAL2ECL = 4
    ECL2GAL = 5

    @classmethod
    def from_name(cls, name: str | FrameTransformation) -> FrameTransformation:
        """Look up a transformation by name, ignoring case.

        Args:
            name (str | FrameTransformation): Transformation name such as
                ``"icrs2gal"``, or an existing member.

        Returns:
            FrameTransformation: The matching member.

        Raises:
            UnknownTransformationError: If the name is not recognised.
        """
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            member = cls.__members__.get(name.strip().upper())
            if member is not None:
                return member
        raise UnknownTransformationError(
            f"Cannot find transformation {name!r}. Must be one of: "
            + ", ".join(cls.__members__)
        )

    @property
    def source(self) -> str:
        """Name of the frame the transformation starts from."""
        return _FRAME_LABELS[self.name.split("2")[0]]

    @property
    def target(self) -> str:
        """Name of the frame the transformation ends in."""
        return _FRAME_LABELS[self.name.split("2")[1]]

    @property
    def inverse(self) -> FrameTransformation:
        """The transformation in the opposite direction."""
        src, dst = self.name.split("2")
        return FrameTransformation[f"{dst}2{src}"]


def _build_frame_matrices() -> dict[FrameTransformation, jax.Array]:
    ra_g = GALACTIC_POLE_RA * DEG2RAD
    dec_g = GALACTIC_POLE_DEC * DEG2RAD
    omega = GALACTIC_NODE_LON * DEG2RAD
    eps = OBLIQUITY_J2000 * AS2RAD

    icrs2gal = dot(
        elementary_rotation("z", -omega),
        dot(elementary_rotation("x", PI / 2.0 - dec_g), elementary_rotation("z", PI / 2.0 + ra_g)),
    )
    icrs2ecl = elementary_rotation("x", eps)
    gal2icrs = transpose(icrs2gal)
    gal2ecl = dot(icrs2ecl, gal2icrs)

    matrices = {
        FrameTransformation.GAL2ICRS: gal2icrs,
        FrameTransformation.ICRS2GAL: icrs2gal,
        FrameTransformation.ECL2ICRS: transpose(icrs2ecl),
        FrameTransformation.ICRS2ECL: icrs2ecl,
        FrameTransformation.GAL2ECL: gal2ecl,
        FrameTransformation.ECL2GAL: transpose(gal2ecl),
    }

    for transformation, matrix in matrices.items():
        if not is_rotation_matrix(matrix):
            raise ValueError(f"{transformation.name} matrix is not a proper rotation")

    logger.debug(
        "Built %d frame rotation matrices (pole ra=%s dec=%s, node lon=%s, obliquity=%s as)",
        len(matrices),
        GALACTIC_POLE_RA,
        GALACTIC_POLE_DEC,
        GALACTIC_NODE_LON,
        OBLIQUITY_J2000,
    )
    return matrices


# Built while the package is first imported, before set_dtype can be
# called, so the table is always float64.
_FRAME_MATRICES = _build_frame_matrices()


def resolve_frame_matrix(name: str | FrameTransformation) -> jax.Array:
    """Return the 3x3 rotation matrix of a named frame transformation.

    Args:
        name (str | FrameTransformation): One of ``GAL2ICRS``, ``ICRS2GAL``,
            ``ECL2ICRS``, ``ICRS2ECL``, ``GAL2ECL``, ``ECL2GAL``
            (case-insensitive), or a :class:`FrameTransformation`.

    Returns:
        jax.Array: Rotation matrix in the active dtype.

    Raises:
        UnknownTransformationError: If the name is not recognised.

    Examples:
        ```python
        from skyframes.frames import resolve_frame_matrix
        R = resolve_frame_matrix("icrs2gal")
        R.shape  # (3, 3)
        ```
    """
    transformation = FrameTransformation.from_name(name)
    return jnp.asarray(_FRAME_MATRICES[transformation], dtype=get_dtype())
