"""Rotation matrices between the galactic, ICRS and ecliptic frames.

All three frames are inertial and share their origin, so each change of
frame is a single fixed rotation.  No epoch or Earth orientation data is
needed.  The returned arrays are fresh copies of the constants in
:mod:`skyframes.frames._matrices`, in the configured dtype.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array

from skyframes.config import get_dtype
from skyframes.frames import _matrices


def rotation_galactic_to_icrs() -> Array:
    """Compute the 3x3 rotation matrix from galactic to ICRS.

    This is the transpose of :func:`rotation_icrs_to_galactic`.

    Returns:
        3x3 rotation matrix (galactic -> ICRS).

    Examples:
        ```python
        from skyframes.frames import rotation_galactic_to_icrs
        R = rotation_galactic_to_icrs()
        R.shape
        ```
    """
    return jnp.asarray(_matrices.GALACTIC_TO_ICRS, dtype=get_dtype())


def rotation_icrs_to_galactic() -> Array:
    """Compute the 3x3 rotation matrix from ICRS to galactic.

    The first row is the direction of the galactic centre in ICRS and the
    third row the north galactic pole.

    Returns:
        3x3 rotation matrix (ICRS -> galactic).
    """
    return jnp.asarray(_matrices.ICRS_TO_GALACTIC, dtype=get_dtype())


def rotation_ecliptic_to_icrs() -> Array:
    """Compute the 3x3 rotation matrix from ecliptic to ICRS.

    Equal to ``Rx(-eps)`` where eps is the J2000 obliquity.

    Returns:
        3x3 rotation matrix (ecliptic -> ICRS).
    """
    return jnp.asarray(_matrices.ECLIPTIC_TO_ICRS, dtype=get_dtype())


def rotation_icrs_to_ecliptic() -> Array:
    """Compute the 3x3 rotation matrix from ICRS to ecliptic.

    Equal to ``Rx(eps)`` where eps is the J2000 obliquity.  This is the
    transpose of :func:`rotation_ecliptic_to_icrs`.

    Returns:
        3x3 rotation matrix (ICRS -> ecliptic).
    """
    return jnp.asarray(_matrices.ICRS_TO_ECLIPTIC, dtype=get_dtype())


def rotation_galactic_to_ecliptic() -> Array:
    """Compute the 3x3 rotation matrix from galactic to ecliptic.

    Returns:
        3x3 rotation matrix (galactic -> ecliptic).
    """
    return jnp.asarray(_matrices.GALACTIC_TO_ECLIPTIC, dtype=get_dtype())


def rotation_ecliptic_to_galactic() -> Array:
    """Compute the 3x3 rotation matrix from ecliptic to galactic.

    Returns:
        3x3 rotation matrix (ecliptic -> galactic).
    """
    return jnp.asarray(_matrices.ECLIPTIC_TO_GALACTIC, dtype=get_dtype())
