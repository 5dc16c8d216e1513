"""Elementary rotations.

Provides the single-axis rotation matrices :func:`Rx`, :func:`Ry`,
:func:`Rz`, the axis-name dispatcher :func:`elementary_rotation`, and
:func:`is_rotation_matrix` for validating proper rotations.
"""

from .elementary import (
    Rx,
    Ry,
    Rz,
    elementary_rotation,
    is_rotation_matrix,
)

__all__ = [
    "Rx",
    "Ry",
    "Rz",
    "elementary_rotation",
    "is_rotation_matrix",
]
