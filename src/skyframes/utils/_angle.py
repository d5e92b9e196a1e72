"""Angle and unit conversion helpers.

Plain conversions (``radians``, ``degrees``, ``arcsec2degrees``, ...) are
simple scalings that accept Python floats as well as arrays and are safe to
trace under JIT.  ``to_radians`` / ``from_radians`` wrap the ``use_degrees``
convention used throughout skyframes via ``jnp.where``.

The sexagesimal parsers turn ``"dd:mm:ss.s"`` / ``"hh:mm:ss.s"`` strings
into decimal degrees.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from skyframes.constants import DEG2RAD, HOUR2DEG, RAD2DEG
from skyframes.errors import FormatError
from skyframes.utils._strings import split_string


def radians(deg: ArrayLike) -> ArrayLike:
    """Convert degrees to radians.

    Args:
        deg (ArrayLike): Angle in degrees.

    Returns:
        Angle in radians.
    """
    return deg * DEG2RAD


def degrees(rad: ArrayLike) -> ArrayLike:
    """Convert radians to degrees.

    Args:
        rad (ArrayLike): Angle in radians.

    Returns:
        Angle in degrees.
    """
    return rad * RAD2DEG


def arcsec2degrees(angle: ArrayLike) -> ArrayLike:
    """Convert arcseconds to degrees."""
    return angle / 3600.0


def arcmin2degrees(angle: ArrayLike) -> ArrayLike:
    """Convert arcminutes to degrees."""
    return angle / 60.0


def arcsec2radians(angle: ArrayLike) -> ArrayLike:
    """Convert arcseconds to radians."""
    return radians(arcsec2degrees(angle))


def arcmin2radians(angle: ArrayLike) -> ArrayLike:
    """Convert arcminutes to radians."""
    return radians(arcmin2degrees(angle))


def to_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle to radians if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle value.
        use_degrees (bool): If ``True``, treat ``angle`` as degrees and convert.

    Returns:
        Angle in radians.
    """
    return jnp.where(use_degrees, radians(angle), angle)


def from_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle from radians to degrees if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle in radians.
        use_degrees (bool): If ``True``, convert to degrees.

    Returns:
        Angle in radians or degrees.
    """
    return jnp.where(use_degrees, degrees(angle), angle)


def _parse_sexagesimal_fields(text: str, delimiter: str) -> tuple[float, float, float]:
    fields = split_string(text, delimiter)
    if not fields or len(fields) > 3:
        raise FormatError(
            f"Expected 1 to 3 fields separated by {delimiter!r}, "
            f"got {len(fields)}: {text!r}"
        )

    try:
        values = [float(field) for field in fields]
    except ValueError as exc:
        raise FormatError(f"Non-numeric field in angle {text!r}") from exc

    values += [0.0] * (3 - len(values))
    return values[0], values[1], values[2]


def parse_dms_to_degrees(dms: str, delimiter: str = ":") -> float:
    """Parse a sexagesimal degrees-minutes-seconds string into degrees.

    Up to three fields are combined positionally as
    ``d + (m + s / 60) / 60``; fields that are not given contribute
    nothing, so ``"10:30"`` is 10.5 degrees.  Empty fields are dropped
    before the fields are counted.

    The minutes and seconds are always added, so ``"-10:30:00"`` is -9.5
    degrees.  Use :func:`parse_signed_dms_to_degrees` for strings where the
    sign applies to the whole angle, as in catalogue declinations.

    Args:
        dms (str): Angle such as ``"10:30:00"``.
        delimiter (str): Field separator. Default: ``":"``

    Returns:
        float: Angle in decimal degrees.

    Raises:
        FormatError: If there are no fields, more than three fields, or a
            field is not a number.

    Example:
        >>> from skyframes.utils import parse_dms_to_degrees
        >>> parse_dms_to_degrees("10:30:00")
        10.5
    """
    deg, minutes, seconds = _parse_sexagesimal_fields(dms, delimiter)
    return deg + (minutes + seconds / 60.0) / 60.0


def parse_signed_dms_to_degrees(dms: str, delimiter: str = ":") -> float:
    """Parse a sexagesimal angle whose leading sign applies to every field.

    ``"-28:56:10.2"`` is -(28 + 56/60 + 10.2/3600) degrees and
    ``"-00:30:00"`` is -0.5 degrees.  Field handling is otherwise that of
    :func:`parse_dms_to_degrees`.

    Args:
        dms (str): Angle such as ``"-28:56:10.2"``.
        delimiter (str): Field separator. Default: ``":"``

    Returns:
        float: Angle in decimal degrees.

    Raises:
        FormatError: If the string cannot be parsed.
    """
    deg, minutes, seconds = _parse_sexagesimal_fields(dms, delimiter)
    magnitude = abs(deg) + (minutes + seconds / 60.0) / 60.0
    if dms.strip().startswith("-"):
        return -magnitude
    return magnitude


def parse_hms_to_degrees(hms: str, delimiter: str = ":") -> float:
    """Parse a sexagesimal hours-minutes-seconds string into degrees.

    The string is parsed as :func:`parse_dms_to_degrees` does and the
    result is scaled by 15 degrees per hour.

    Args:
        hms (str): Angle such as ``"17:45:40.04"``.
        delimiter (str): Field separator. Default: ``":"``

    Returns:
        float: Angle in decimal degrees.

    Raises:
        FormatError: If the string cannot be parsed.
    """
    return parse_dms_to_degrees(hms, delimiter) * HOUR2DEG
