"""Elementary single-axis rotation matrices.

Each matrix rotates the coordinate frame (not the vector) counter-clockwise
about one axis, as seen looking back along the positive axis direction.
Applied to a vector expressed in the original frame, it yields the same
vector expressed in the rotated frame.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp
from jax.typing import ArrayLike

from skyframes.config import get_dtype
from skyframes.errors import InvalidAxisError
from skyframes.rotations._tolerance import get_rotation_epsilon
from skyframes.utils import to_radians


def _cos_sin(angle: ArrayLike, use_degrees: bool) -> tuple[jax.Array, jax.Array]:
    angle = jnp.asarray(to_radians(angle, use_degrees), dtype=get_dtype())
    return jnp.cos(angle), jnp.sin(angle)


def Rx(angle: float, use_degrees: bool = False) -> jnp.ndarray:
    """Rotation matrix, for a rotation about the x-axis.

    Args:
        angle (float): Counter-clockwise angle of rotation as viewed
            looking back along the postive direction of the rotation axis.
        use_degrees (bool): Handle input in degrees. Default: ``False``

    Returns:
        jnp.ndarray: Rotation matrix.

    References:

        1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and Applications*, 2012, p.27.
    """
    c, s = _cos_sin(angle, use_degrees)
    one, zero = jnp.ones_like(c), jnp.zeros_like(c)

    return jnp.array([[ one, zero, zero],
                      [zero,   +c,   +s],
                      [zero,   -s,   +c]])


def Ry(angle: float, use_degrees: bool = False) -> jnp.ndarray:
    """Rotation matrix, for a rotation about the y-axis.

    The angle-independent off-diagonal terms are zero, as for :func:`Rx`
    and :func:`Rz`, so the result is always a proper rotation.

    Args:
        angle (float): Counter-clockwise angle of rotation as viewed
            looking back along the postive direction of the rotation axis.
        use_degrees (bool): Handle input in degrees. Default: ``False``

    Returns:
        jnp.ndarray: Rotation matrix.

    References:

        1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and Applications*, 2012, p.27.
    """
    c, s = _cos_sin(angle, use_degrees)
    one, zero = jnp.ones_like(c), jnp.zeros_like(c)

    return jnp.array([[  +c, zero,   -s],
                      [zero,  one, zero],
                      [  +s, zero,   +c]])


def Rz(angle: float, use_degrees: bool = False) -> jnp.ndarray:
    """Rotation matrix, for a rotation about the z-axis.

    Args:
        angle (float): Counter-clockwise angle of rotation as viewed
            looking back along the postive direction of the rotation axis.
        use_degrees (bool): Handle input in degrees. Default: ``False``

    Returns:
        jnp.ndarray: Rotation matrix.

    References:

        1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and Applications*, 2012, p.27.
    """
    c, s = _cos_sin(angle, use_degrees)
    one, zero = jnp.ones_like(c), jnp.zeros_like(c)

    return jnp.array([[  +c,   +s, zero],
                      [  -s,   +c, zero],
                      [zero, zero,  one]])


_AXES = {
    "x": Rx,
    "y": Ry,
    "z": Rz,
}


def elementary_rotation(axis: str, angle: float, use_degrees: bool = False) -> jnp.ndarray:
    """Rotation matrix for a rotation about a named coordinate axis.

    Args:
        axis (str): ``"x"``, ``"y"`` or ``"z"`` (case-insensitive).
        angle (float): Rotation angle.
        use_degrees (bool): Handle input in degrees. Default: ``False``

    Returns:
        jnp.ndarray: 3x3 rotation matrix.

    Raises:
        InvalidAxisError: If ``axis`` is not one of ``x``, ``y``, ``z``.

    Examples:
        ```python
        from skyframes.rotations import elementary_rotation
        R = elementary_rotation("Z", 90.0, use_degrees=True)
        ```
    """
    try:
        rotation = _AXES[str(axis).lower()]
    except KeyError:
        raise InvalidAxisError(
            f"Unknown rotation axis {axis!r}. Must be one of: x, y, z"
        ) from None
    return rotation(angle, use_degrees=use_degrees)


def is_rotation_matrix(matrix: jax.Array, tol: float | None = None) -> bool:
    """Check if a matrix is a proper rotation (a member of SO(3)).

    Tests orthogonality (R^T R ≈ I) and unit determinant (det ≈ +1).

    Args:
        matrix (jax.Array): Array of shape ``(3, 3)``.
        tol (float | None): Absolute tolerance. Defaults to the
            dtype-adaptive value from ``get_rotation_epsilon``.

    Returns:
        bool: ``True`` if the matrix is a proper rotation matrix.
    """
    if tol is None:
        tol = get_rotation_epsilon()
    matrix = jnp.asarray(matrix, dtype=get_dtype())
    if matrix.shape != (3, 3):
        return False
    rtr = matrix.T @ matrix
    orth_err = jnp.max(jnp.abs(rtr - jnp.eye(3, dtype=matrix.dtype)))
    det = jnp.linalg.det(matrix)
    return bool(orth_err < tol and jnp.abs(det - 1.0) < tol)
