"""Dense linear-algebra primitives for small matrices and vectors.

Provides a shape-checked ``dot`` covering the four products used by the
frame transformations (vector-vector, matrix-matrix, matrix-vector and
vector-matrix) and ``transpose``.  Shapes are validated from the static
array shapes, so the checks also hold when the functions are traced by
``jax.jit``.

Vectors are 1-D arrays, matrices are 2-D arrays.  A vector on the left of a
matrix is treated as a row vector.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from skyframes.config import get_dtype
from skyframes.errors import DimensionMismatchError


def _as_operand(a: ArrayLike, name: str) -> Array:
    a = jnp.asarray(a, dtype=get_dtype())
    if a.ndim not in (1, 2):
        raise DimensionMismatchError(
            f"Operand {name} must be a vector or a matrix, got shape {a.shape}"
        )
    if a.size == 0:
        raise DimensionMismatchError(f"Operand {name} is empty, shape {a.shape}")
    return a


def dot(a: ArrayLike, b: ArrayLike) -> Array:
    """Dot product of two vectors, two matrices, or a matrix and a vector.

    The product is selected from the operand ranks:

    - vector · vector -> scalar inner product (lengths must match)
    - matrix · matrix -> matrix (columns of ``a`` must equal rows of ``b``)
    - matrix · vector -> vector (vector length must equal columns of ``a``)
    - vector · matrix -> vector (vector length must equal rows of ``b``)

    Args:
        a (ArrayLike): Left operand, shape ``(n,)`` or ``(m, n)``.
        b (ArrayLike): Right operand, shape ``(n,)`` or ``(n, p)``.

    Returns:
        jax.Array: The product.

    Raises:
        DimensionMismatchError: If an operand is not 1-D or 2-D, is empty,
            or the contracted dimensions differ.

    Examples:
        ```python
        from skyframes.linalg import dot
        dot([1.0, 2.0, 3.0], [4.0, 5.0, 6.0])  # 32.0
        ```
    """
    a = _as_operand(a, "a")
    b = _as_operand(b, "b")

    inner_a = a.shape[-1]
    inner_b = b.shape[0]
    if inner_a != inner_b:
        if a.ndim == 1 and b.ndim == 1:
            msg = f"Illegal vector dimensions: {a.shape} and {b.shape}"
        else:
            msg = f"Illegal matrix dimensions: {a.shape} and {b.shape}"
        raise DimensionMismatchError(msg)

    return jnp.dot(a, b)


def transpose(a: ArrayLike) -> Array:
    """Transpose a matrix.

    Args:
        a (ArrayLike): Non-empty matrix of shape ``(m, n)``.

    Returns:
        jax.Array: Matrix of shape ``(n, m)``.

    Raises:
        DimensionMismatchError: If ``a`` is not a non-empty 2-D array.
    """
    a = _as_operand(a, "a")
    if a.ndim != 2:
        raise DimensionMismatchError(f"Cannot transpose array of shape {a.shape}")
    return a.T
