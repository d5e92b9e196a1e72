"""Coordinate transformations.

This sub-module provides conversions between spherical coordinates
``[r, longitude, latitude]`` and Cartesian coordinates ``[x, y, z]``, and
the great-circle angular distance between two directions on the sky.
"""

from .spherical import (
    cartesian_to_spherical,
    spherical_distance_degrees,
    spherical_distance_radians,
    spherical_to_cartesian,
)

__all__ = [
    "cartesian_to_spherical",
    "spherical_distance_degrees",
    "spherical_distance_radians",
    "spherical_to_cartesian",
]
