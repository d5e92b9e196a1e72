"""Dense matrix and vector algebra.

Provides the dot product over vectors and matrices of any size and the
matrix transpose, with explicit shape checking.  Inputs may be anything
``jnp.asarray`` accepts (nested lists, NumPy or JAX arrays); a vector is a
1-D array and a matrix is a 2-D array in row-major order.

Shape mismatches raise :class:`~skyframes.errors.DimensionError` instead of
broadcasting, so an accidental transpose fails loudly.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from skyframes.config import get_dtype
from skyframes.errors import DimensionError


def _as_array(a: ArrayLike, name: str) -> Array:
    try:
        return jnp.asarray(a, dtype=get_dtype())
    except (ValueError, TypeError) as exc:
        raise DimensionError(f"{name} is not a rectangular array: {a!r}") from exc


def _as_operand(a: ArrayLike, name: str) -> Array:
    a = _as_array(a, name)
    if a.ndim not in (1, 2):
        raise DimensionError(
            f"{name} must be a vector or a matrix, got shape {a.shape}"
        )
    if a.size == 0:
        raise DimensionError(f"{name} is empty, got shape {a.shape}")
    return a


def dot(a: ArrayLike, b: ArrayLike) -> Array:
    """Dot product of vectors and matrices.

    The operation is selected by the dimensions of the arguments:

    - vector · vector -> scalar inner product, ``sum(a[i] * b[i])``
    - matrix · matrix -> matrix product ``C = A B``
    - matrix · vector -> vector ``y = A x``
    - vector · matrix -> vector ``y = transpose(x) A``

    Args:
        a (ArrayLike): Vector of shape ``(n,)`` or matrix of shape ``(m, n)``.
        b (ArrayLike): Vector of shape ``(n,)`` or matrix of shape ``(n, p)``.

    Returns:
        jax.Array: Scalar, vector or matrix product.

    Raises:
        DimensionError: If the inner dimensions differ or an argument is
            neither a vector nor a matrix.

    Example:
        >>> from skyframes.linalg import dot
        >>> float(dot([1.0, 2.0, 3.0], [4.0, 5.0, 6.0]))
        32.0
    """
    a = _as_operand(a, "a")
    b = _as_operand(b, "b")

    if a.ndim == 1 and b.ndim == 1:
        if a.shape[0] != b.shape[0]:
            raise DimensionError(
                f"Illegal vector dimensions: {a.shape[0]} and {b.shape[0]}"
            )
        return jnp.sum(a * b)

    if a.ndim == 2 and b.ndim == 2:
        if a.shape[1] != b.shape[0]:
            raise DimensionError(
                f"Illegal matrix dimensions: {a.shape} and {b.shape}"
            )
        return jnp.matmul(a, b)

    if a.ndim == 2:
        if a.shape[1] != b.shape[0]:
            raise DimensionError(
                f"Illegal matrix dimensions: {a.shape} and vector {b.shape}"
            )
        return jnp.matmul(a, b)

    if a.shape[0] != b.shape[0]:
        raise DimensionError(
            f"Illegal matrix dimensions: vector {a.shape} and {b.shape}"
        )
    return jnp.matmul(a, b)


def transpose(a: ArrayLike) -> Array:
    """Transpose a matrix, ``C[j][i] = A[i][j]``.

    Args:
        a (ArrayLike): Matrix of shape ``(m, n)``.

    Returns:
        jax.Array: Matrix of shape ``(n, m)``.

    Raises:
        DimensionError: If *a* is not a rectangular two-dimensional array.
    """
    a = _as_array(a, "a")
    if a.ndim != 2:
        raise DimensionError(f"Can only transpose a matrix, got shape {a.shape}")
    return a.T
