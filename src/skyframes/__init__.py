"""
skyframes converts sky positions between the galactic, ICRS and ecliptic
reference frames, implemented in JAX.
"""

from .constants import (
    DEG2RAD,
    RAD2DEG,
    AS2RAD,
    RAD2AS,
    HOUR2DEG,
    GALACTIC_POLE_RA,
    GALACTIC_POLE_DEC,
    GALACTIC_NODE_LON,
    OBLIQUITY_J2000,
)

from .config import set_dtype, get_dtype

from .errors import (
    SkyframesError,
    DimensionError,
    FormatError,
    UnknownTransformationError,
    DomainError,
)

from .utils import (
    radians,
    degrees,
    arcsec2degrees,
    arcmin2degrees,
    arcsec2radians,
    arcmin2radians,
    parse_dms_to_degrees,
    parse_hms_to_degrees,
    parse_signed_dms_to_degrees,
)

from .linalg import dot, transpose

from .rotations import (
    Rx,
    Ry,
    Rz,
    elementary_rotation_matrix,
)

from .coordinates import (
    spherical_to_cartesian,
    cartesian_to_spherical,
    spherical_distance_radians,
    spherical_distance_degrees,
)

from .frames import (
    rotation_galactic_to_icrs,
    rotation_icrs_to_galactic,
    rotation_ecliptic_to_icrs,
    rotation_icrs_to_ecliptic,
    rotation_galactic_to_ecliptic,
    rotation_ecliptic_to_galactic,
    Frame,
    Transformation,
    apply_transformation,
    transform_cartesian,
)

__all__ = [
    # Constants
    "DEG2RAD",
    "RAD2DEG",
    "AS2RAD",
    "RAD2AS",
    "HOUR2DEG",
    "GALACTIC_POLE_RA",
    "GALACTIC_POLE_DEC",
    "GALACTIC_NODE_LON",
    "OBLIQUITY_J2000",
    # Config
    "set_dtype",
    "get_dtype",
    # Errors
    "SkyframesError",
    "DimensionError",
    "FormatError",
    "UnknownTransformationError",
    "DomainError",
    # Units and parsing
    "radians",
    "degrees",
    "arcsec2degrees",
    "arcmin2degrees",
    "arcsec2radians",
    "arcmin2radians",
    "parse_dms_to_degrees",
    "parse_hms_to_degrees",
    "parse_signed_dms_to_degrees",
    # Linear algebra
    "dot",
    "transpose",
    # Elementary rotations
    "Rx",
    "Ry",
    "Rz",
    "elementary_rotation_matrix",
    # Spherical geometry
    "spherical_to_cartesian",
    "cartesian_to_spherical",
    "spherical_distance_radians",
    "spherical_distance_degrees",
    # Frames
    "rotation_galactic_to_icrs",
    "rotation_icrs_to_galactic",
    "rotation_ecliptic_to_icrs",
    "rotation_icrs_to_ecliptic",
    "rotation_galactic_to_ecliptic",
    "rotation_ecliptic_to_galactic",
    "Frame",
    "Transformation",
    "apply_transformation",
    "transform_cartesian",
]
