"""Frame transformations.

This sub-module provides conversions between the celestial reference frames
used in astrometry:

- **Galactic**: aligned with the plane and centre of the Milky Way.
- **ICRS**: the International Celestial Reference System (equatorial).
- **Ecliptic**: aligned with the plane of the Earth's orbit at J2000.

Each pair is related by a fixed rotation, exposed both as a matrix
(``rotation_*``) and as a named :class:`Transformation` applied to
longitude/latitude pairs or Cartesian vectors.
"""

from .rotation import (
    rotation_ecliptic_to_galactic,
    rotation_ecliptic_to_icrs,
    rotation_galactic_to_ecliptic,
    rotation_galactic_to_icrs,
    rotation_icrs_to_ecliptic,
    rotation_icrs_to_galactic,
)
from .transformations import (
    Frame,
    Transformation,
    apply_transformation,
    transform_cartesian,
)

__all__ = [
    # Rotation matrices
    "rotation_galactic_to_icrs",
    "rotation_icrs_to_galactic",
    "rotation_ecliptic_to_icrs",
    "rotation_icrs_to_ecliptic",
    "rotation_galactic_to_ecliptic",
    "rotation_ecliptic_to_galactic",
    # Named transformations
    "Frame",
    "Transformation",
    "apply_transformation",
    "transform_cartesian",
]
