"""Exception types raised by skyframes.

Every error derives from :class:`SkyframesError`, which is itself a
``ValueError``, so callers may catch either the specific class, the
package-wide base, or plain ``ValueError``.
"""


class SkyframesError(ValueError):
    """Base class for all skyframes errors."""


class DimensionError(SkyframesError):
    """Vector or matrix shapes are incompatible for the requested operation."""


class FormatError(SkyframesError):
    """An angle string has the wrong number of fields or a non-numeric field."""


class UnknownTransformationError(SkyframesError):
    """A transformation name, frame name or rotation axis is not recognised."""


class DomainError(SkyframesError):
    """Input lies outside the domain of a conversion (e.g. zero radius)."""
