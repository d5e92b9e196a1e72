"""Named transformations between the galactic, ICRS and ecliptic frames.

Six transformations are available:

| name     | from     | to       |
|----------|----------|----------|
| GAL2ICRS | galactic | ICRS     |
| ICRS2GAL | ICRS     | galactic |
| ECL2ICRS | ecliptic | ICRS     |
| ICRS2ECL | ICRS     | ecliptic |
| GAL2ECL  | galactic | ecliptic |
| ECL2GAL  | ecliptic | galactic |

A position given as a longitude/latitude pair is turned into a unit
Cartesian vector, rotated with the fixed frame matrix, and turned back into
a longitude/latitude pair.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from skyframes.config import get_dtype
from skyframes.coordinates import cartesian_to_spherical, spherical_to_cartesian
from skyframes.errors import DimensionError, UnknownTransformationError
from skyframes.frames.rotation import (
    rotation_ecliptic_to_galactic,
    rotation_ecliptic_to_icrs,
    rotation_galactic_to_ecliptic,
    rotation_galactic_to_icrs,
    rotation_icrs_to_ecliptic,
    rotation_icrs_to_galactic,
)
from skyframes.linalg import dot

logger = logging.getLogger(__name__)


class Frame(Enum):
    """Celestial reference frame."""

    GALACTIC = "galactic"
    ICRS = "icrs"
    ECLIPTIC = "ecliptic"

    @classmethod
    def from_name(cls, name: str | Frame) -> Frame:
        """Resolve a frame from its name (case-insensitive).

        Args:
            name: ``"galactic"``, ``"icrs"`` or ``"ecliptic"``, or a
                :class:`Frame`.

        Returns:
            Frame: The matching frame.

        Raises:
            UnknownTransformationError: If the name is not recognised.
        """
        if isinstance(name, Frame):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise UnknownTransformationError(
                f"Unknown frame {name!r}. Must be one of: galactic, icrs, ecliptic"
            ) from None

    def __str__(self) -> str:
        return _FRAME_DISPLAY[self]


_FRAME_DISPLAY = {
    Frame.GALACTIC: "galactic",
    Frame.ICRS: "ICRS",
    Frame.ECLIPTIC: "ecliptic",
}


class Transformation(Enum):
    """Fixed rotation between two celestial reference frames."""

    GAL2ICRS = "GAL2ICRS"
    ICRS2GAL = "ICRS2GAL"
    ECL2ICRS = "ECL2ICRS"
    ICRS2ECL = "ICRS2ECL"
    GAL2ECL = "GAL2ECL"
    ECL2GAL = "ECL2GAL"

    @classmethod
    def from_name(cls, name: str | Transformation) -> Transformation:
        """Resolve a transformation from its name (case-insensitive).

        Args:
            name: One of the six transformation names, e.g. ``"icrs2gal"``,
                or a :class:`Transformation`.

        Returns:
            Transformation: The matching transformation.

        Raises:
            UnknownTransformationError: If the name is not recognised.
        """
        if isinstance(name, Transformation):
            return name
        try:
            transformation = cls(str(name).strip().upper())
        except ValueError:
            raise UnknownTransformationError(
                f"Unknown transformation {name!r}. Must be one of: "
                f"{', '.join(t.value for t in cls)}"
            ) from None
        logger.debug("Resolved transformation %r to %s", name, transformation.value)
        return transformation

    @classmethod
    def between(cls, source: str | Frame, target: str | Frame) -> Transformation:
        """Resolve the transformation from *source* frame to *target* frame.

        Args:
            source: Frame the coordinates are given in.
            target: Frame the coordinates are wanted in.

        Returns:
            Transformation: The matching transformation.

        Raises:
            UnknownTransformationError: If a frame is unknown or both frames
                are the same.
        """
        key = (Frame.from_name(source), Frame.from_name(target))
        try:
            return _BY_FRAMES[key]
        except KeyError:
            raise UnknownTransformationError(
                f"No transformation from {key[0]} to {key[1]}"
            ) from None

    @property
    def source(self) -> Frame:
        """Frame the transformation takes coordinates from."""
        return _TABLE[self][0]

    @property
    def target(self) -> Frame:
        """Frame the transformation takes coordinates to."""
        return _TABLE[self][1]

    @property
    def inverse(self) -> Transformation:
        """Transformation undoing this one."""
        return _BY_FRAMES[(self.target, self.source)]

    def matrix(self) -> Array:
        """Return the 3x3 rotation matrix of this transformation."""
        return _TABLE[self][2]()

    def apply(
        self, coord1: ArrayLike, coord2: ArrayLike, use_degrees: bool = True
    ) -> Array:
        """Apply this transformation; see :func:`apply_transformation`."""
        return apply_transformation(self, coord1, coord2, use_degrees)

    def __str__(self) -> str:
        return self.value


_TABLE: dict[Transformation, tuple[Frame, Frame, Callable[[], Array]]] = {
    Transformation.GAL2ICRS: (Frame.GALACTIC, Frame.ICRS, rotation_galactic_to_icrs),
    Transformation.ICRS2GAL: (Frame.ICRS, Frame.GALACTIC, rotation_icrs_to_galactic),
    Transformation.ECL2ICRS: (Frame.ECLIPTIC, Frame.ICRS, rotation_ecliptic_to_icrs),
    Transformation.ICRS2ECL: (Frame.ICRS, Frame.ECLIPTIC, rotation_icrs_to_ecliptic),
    Transformation.GAL2ECL: (Frame.GALACTIC, Frame.ECLIPTIC, rotation_galactic_to_ecliptic),
    Transformation.ECL2GAL: (Frame.ECLIPTIC, Frame.GALACTIC, rotation_ecliptic_to_galactic),
}

_BY_FRAMES = {(source, target): t for t, (source, target, _) in _TABLE.items()}


def apply_transformation(
    name: str | Transformation,
    coord1: ArrayLike,
    coord2: ArrayLike,
    use_degrees: bool = True,
) -> Array:
    """Transform a sky position from one frame to another.

    Args:
        name: Transformation name (case-insensitive), e.g. ``"ICRS2GAL"``,
            or a :class:`Transformation`.
        coord1: Longitude-like coordinate in *deg* (or *rad* if
            ``use_degrees=False``).
        coord2: Latitude-like coordinate in *deg* (or *rad* if
            ``use_degrees=False``).
        use_degrees: If ``True``, inputs and outputs are in degrees.
            Default: ``True``

    Returns:
        jax.Array: ``[lon, lat]`` in the target frame, in the same units as
            the input.  The longitude is in ``(-180, 180]`` degrees.

    Raises:
        UnknownTransformationError: If *name* is not recognised.

    Examples:
        ```python
        from skyframes.frames import apply_transformation
        l, b = apply_transformation("ICRS2GAL", 266.40499, -28.93617)
        ```
    """
    mat = Transformation.from_name(name).matrix()

    xyz = spherical_to_cartesian(1.0, coord1, coord2, use_degrees=use_degrees)
    xyz_rot = dot(mat, xyz)
    _, lon, lat = cartesian_to_spherical(
        xyz_rot[0], xyz_rot[1], xyz_rot[2], use_degrees=use_degrees
    )

    return jnp.array([lon, lat], dtype=get_dtype())


def transform_cartesian(name: str | Transformation, xyz: ArrayLike) -> Array:
    """Rotate a Cartesian vector from one frame to another.

    The length of the vector is preserved.

    Args:
        name: Transformation name (case-insensitive) or a
            :class:`Transformation`.
        xyz: Cartesian vector ``[x, y, z]`` in the source frame.

    Returns:
        jax.Array: Cartesian vector ``[x, y, z]`` in the target frame.

    Raises:
        UnknownTransformationError: If *name* is not recognised.
        DimensionError: If *xyz* does not have three components.
    """
    mat = Transformation.from_name(name).matrix()
    xyz = jnp.asarray(xyz, dtype=get_dtype())
    if xyz.shape != (3,):
        raise DimensionError(f"Expected a 3-vector, got shape {xyz.shape}")
    return dot(mat, xyz)
