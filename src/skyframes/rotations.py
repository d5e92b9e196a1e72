"""Elementary rotation matrices.

``Rx``, ``Ry`` and ``Rz`` rotate the coordinate frame (not the vector)
counter-clockwise about the named axis.  The fixed frame matrices in
:mod:`skyframes.frames` were derived by composing these rotations with the
Hipparcos galactic pole and J2000 obliquity values.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from skyframes.config import get_dtype
from skyframes.errors import UnknownTransformationError
from skyframes.utils import to_radians


def Rx(angle: ArrayLike, use_degrees: bool = False) -> Array:
    """Rotation matrix, for a rotation about the x-axis.

    Args:
        angle (float): Counter-clockwise angle of rotation as viewed
            looking back along the postive direction of the rotation axis.
        use_degrees (bool): Handle input in degrees. Default: ``False``

    Returns:
        jax.Array: Rotation matrix.

    References:

        1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and Applications*, 2012, p.27.
    """
    angle = to_radians(jnp.asarray(angle, dtype=get_dtype()), use_degrees)

    c = jnp.cos(angle)
    s = jnp.sin(angle)

    return jnp.array([[1.0,  0.0,  0.0],
                      [0.0,   +c,   +s],
                      [0.0,   -s,   +c]], dtype=get_dtype())


def Ry(angle: ArrayLike, use_degrees: bool = False) -> Array:
    """Rotation matrix, for a rotation about the y-axis.

    Args:
        angle (float): Counter-clockwise angle of rotation as viewed
            looking back along the postive direction of the rotation axis.
        use_degrees (bool): Handle input in degrees. Default: ``False``

    Returns:
        jax.Array: Rotation matrix.
    """
    angle = to_radians(jnp.asarray(angle, dtype=get_dtype()), use_degrees)

    c = jnp.cos(angle)
    s = jnp.sin(angle)

    return jnp.array([[ +c,  0.0,   -s],
                      [0.0, +1.0,  0.0],
                      [ +s,  0.0,   +c]], dtype=get_dtype())


def Rz(angle: ArrayLike, use_degrees: bool = False) -> Array:
    """Rotation matrix, for a rotation about the z-axis.

    Args:
        angle (float): Counter-clockwise angle of rotation as viewed
            looking back along the postive direction of the rotation axis.
        use_degrees (bool): Handle input in degrees. Default: ``False``

    Returns:
        jax.Array: Rotation matrix.
    """
    angle = to_radians(jnp.asarray(angle, dtype=get_dtype()), use_degrees)

    c = jnp.cos(angle)
    s = jnp.sin(angle)

    return jnp.array([[ +c,   +s,  0.0],
                      [ -s,   +c,  0.0],
                      [0.0,  0.0,  1.0]], dtype=get_dtype())


_AXES = {
    "x": Rx,
    "y": Ry,
    "z": Rz,
}


def elementary_rotation_matrix(
    axis: str, angle: ArrayLike, use_degrees: bool = False
) -> Array:
    """Rotation matrix for a rotation about one of the coordinate axes.

    Args:
        axis (str): ``"x"``, ``"y"`` or ``"z"`` (case-insensitive).
        angle (float): Rotation angle.
        use_degrees (bool): Handle input in degrees. Default: ``False``

    Returns:
        jax.Array: 3x3 rotation matrix.

    Raises:
        UnknownTransformationError: If *axis* is not one of x, y or z.
    """
    try:
        rotation = _AXES[str(axis).lower()]
    except KeyError:
        raise UnknownTransformationError(
            f"Unknown rotation axis {axis!r}. Must be one of 'x', 'y', 'z'"
        ) from None
    return rotation(angle, use_degrees)
