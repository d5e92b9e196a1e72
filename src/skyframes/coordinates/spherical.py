"""Spherical-Cartesian conversions and great-circle distances.

Angles follow the astronomical convention: the latitude-like coordinate is
an elevation (declination, galactic or ecliptic latitude) measured from the
equator, not the colatitude used in most mathematical treatments.

- ``phi``: longitude-like angle (right ascension, galactic or ecliptic
  longitude), returned in ``(-pi, pi]``.
- ``theta``: latitude-like angle, in ``[-pi/2, pi/2]``.

References:
    1. ESA, *The Hipparcos and Tycho Catalogues*, SP-1200, Vol. 1, 1997,
       Sec. 1.5.
    2. R. W. Sinnott, "Virtues of the Haversine", *Sky and Telescope*,
       68(2), 1984, p. 159.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from skyframes.config import get_dtype
from skyframes.errors import DomainError
from skyframes.utils import degrees, from_radians, radians, to_radians


def spherical_to_cartesian(
    r: ArrayLike,
    phi: ArrayLike,
    theta: ArrayLike,
    use_degrees: bool = False,
) -> Array:
    """Convert spherical coordinates to Cartesian ones.

    Args:
        r: Length of the vector.
        phi: Longitude-like angle in *rad* (or *deg* if ``use_degrees=True``).
        theta: Latitude-like angle in *rad* (or *deg* if ``use_degrees=True``).
        use_degrees: If ``True``, interpret ``phi`` and ``theta`` as degrees.

    Returns:
        jax.Array: Cartesian vector ``[x, y, z]``.

    Example:
        >>> from skyframes.coordinates import spherical_to_cartesian
        >>> xyz = spherical_to_cartesian(1.0, 90.0, 0.0, use_degrees=True)
        >>> round(float(xyz[1]), 12)
        1.0
    """
    dtype = get_dtype()
    r = jnp.asarray(r, dtype=dtype)
    phi = to_radians(jnp.asarray(phi, dtype=dtype), use_degrees)
    theta = to_radians(jnp.asarray(theta, dtype=dtype), use_degrees)

    ctheta = jnp.cos(theta)
    x = r * jnp.cos(phi) * ctheta
    y = r * jnp.sin(phi) * ctheta
    z = r * jnp.sin(theta)

    return jnp.array([x, y, z])


def cartesian_to_spherical(
    x: ArrayLike,
    y: ArrayLike,
    z: ArrayLike,
    use_degrees: bool = False,
) -> Array:
    """Convert Cartesian coordinates to spherical ones.

    The zero-radius check needs concrete values, so this function is not
    traceable under ``jax.jit``.

    Args:
        x: Component along the X-axis.
        y: Component along the Y-axis.
        z: Component along the Z-axis.
        use_degrees: If ``True``, return the angles in degrees.

    Returns:
        jax.Array: ``[r, phi, theta]`` with the angles in *rad* (or *deg*).

    Raises:
        DomainError: If the point is at distance zero, where the direction
            is undefined.
    """
    dtype = get_dtype()
    x = jnp.asarray(x, dtype=dtype)
    y = jnp.asarray(y, dtype=dtype)
    z = jnp.asarray(z, dtype=dtype)

    r_cyl_sq = x * x + y * y
    r = jnp.sqrt(r_cyl_sq + z * z)
    if float(r) == 0.0:
        raise DomainError("Point is at distance zero; direction is undefined")

    phi = from_radians(jnp.arctan2(y, x), use_degrees)
    theta = from_radians(jnp.arctan2(z, jnp.sqrt(r_cyl_sq)), use_degrees)

    return jnp.array([r, phi, theta])


def spherical_distance_radians(
    lon1: ArrayLike,
    lat1: ArrayLike,
    lon2: ArrayLike,
    lat2: ArrayLike,
) -> Array:
    """Great-circle distance between two points on the sphere.

    Uses the haversine formula, which stays accurate for small
    separations.

    Args:
        lon1: First longitude in *rad*.
        lat1: First latitude in *rad*.
        lon2: Second longitude in *rad*.
        lat2: Second latitude in *rad*.

    Returns:
        jax.Array: Angular distance in *rad*, in ``[0, pi]``.
    """
    dtype = get_dtype()
    lon1 = jnp.asarray(lon1, dtype=dtype)
    lat1 = jnp.asarray(lat1, dtype=dtype)
    lon2 = jnp.asarray(lon2, dtype=dtype)
    lat2 = jnp.asarray(lat2, dtype=dtype)

    sin_dlat = jnp.sin((lat1 - lat2) / 2.0)
    sin_dlon = jnp.sin((lon1 - lon2) / 2.0)
    h = sin_dlat * sin_dlat + jnp.cos(lat1) * jnp.cos(lat2) * sin_dlon * sin_dlon

    # rounding can push h slightly above 1 for antipodal points
    return 2.0 * jnp.arcsin(jnp.sqrt(jnp.clip(h, 0.0, 1.0)))


def spherical_distance_degrees(
    lon1: ArrayLike,
    lat1: ArrayLike,
    lon2: ArrayLike,
    lat2: ArrayLike,
) -> Array:
    """Great-circle distance between two points on the sphere, in degrees.

    Args:
        lon1: First longitude in *deg*.
        lat1: First latitude in *deg*.
        lon2: Second longitude in *deg*.
        lat2: Second latitude in *deg*.

    Returns:
        jax.Array: Angular distance in *deg*, in ``[0, 180]``.

    Example:
        >>> from skyframes.coordinates import spherical_distance_degrees
        >>> round(float(spherical_distance_degrees(0.0, 0.0, 90.0, 0.0)), 9)
        90.0
    """
    return degrees(
        spherical_distance_radians(
            radians(lon1), radians(lat1), radians(lon2), radians(lat2)
        )
    )
