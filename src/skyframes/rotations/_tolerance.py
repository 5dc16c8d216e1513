"""Dtype-adaptive tolerance for rotation-matrix validation.

A matrix built from rounded sines and cosines is only orthogonal to within
the rounding of its dtype, so ``is_rotation_matrix`` compares ``R^T R`` and
``det(R)`` against a tolerance a few times the machine epsilon of the active
dtype:

==========  ===============  =========
dtype       machine epsilon  tolerance
==========  ===============  =========
float64     2.2e-16          1e-12
float32     1.2e-7           1e-6
float16     9.8e-4           1e-3
bfloat16    7.8e-3           2e-2
==========  ===============  =========

bfloat16 keeps only 8 significand bits, so its tolerance is looser than
float16's even though both are 16-bit types.
"""

from __future__ import annotations

import jax.numpy as jnp

from skyframes.config import get_dtype

_ROTATION_EPSILON = {
    jnp.dtype(jnp.float64): 1e-12,
    jnp.dtype(jnp.float32): 1e-6,
    jnp.dtype(jnp.float16): 1e-3,
    jnp.dtype(jnp.bfloat16): 2e-2,
}


def get_rotation_epsilon() -> float:
    """Return the tolerance for rotation-matrix checks under the active dtype.

    Returns:
        float: Absolute tolerance for element-wise and determinant comparisons.
    """
    return _ROTATION_EPSILON[jnp.dtype(get_dtype())]
