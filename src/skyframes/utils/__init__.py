"""Shared utility functions for skyframes.

Provides angle unit conversions, the ``use_degrees`` helpers, sexagesimal
angle parsing and the string splitting they rely on.
"""

from skyframes.utils._angle import (
    arcmin2degrees,
    arcmin2radians,
    arcsec2degrees,
    arcsec2radians,
    degrees,
    from_radians,
    parse_dms_to_degrees,
    parse_hms_to_degrees,
    parse_signed_dms_to_degrees,
    radians,
    to_radians,
)
from skyframes.utils._strings import split_string

__all__ = [
    "arcmin2degrees",
    "arcmin2radians",
    "arcsec2degrees",
    "arcsec2radians",
    "degrees",
    "from_radians",
    "parse_dms_to_degrees",
    "parse_hms_to_degrees",
    "parse_signed_dms_to_degrees",
    "radians",
    "split_string",
    "to_radians",
]
