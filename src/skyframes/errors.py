"""Exceptions raised by skyframes.

Every error is raised at the point of detection and propagated unchanged.
All of them derive from :class:`SkyframesError` and from ``ValueError`` so
callers can catch either the library-specific or the builtin type.
"""


class SkyframesError(ValueError):
    """Base class for all skyframes errors."""


class DimensionMismatchError(SkyframesError):
    """Operand shapes are incompatible for a dot product or transpose."""


class InvalidAxisError(SkyframesError):
    """Elementary rotation axis is not one of ``x``, ``y`` or ``z``."""


class UnknownTransformationError(SkyframesError):
    """Frame transformation name is not one of the six known identifiers."""


class DegenerateOriginError(SkyframesError):
    """Cartesian-to-spherical conversion of a point at exactly zero radius."""


class MalformedAngleStringError(SkyframesError):
    """Sexagesimal angle string cannot be parsed."""
