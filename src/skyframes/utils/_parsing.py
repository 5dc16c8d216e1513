"""Sexagesimal angle string parsing.

Converts ``"D:M:S"`` and ``"H:M:S"`` strings into decimal degrees.  Any
single character may be used as the delimiter.  Empty fields (for example
from doubled delimiters) are skipped; one to three numeric fields are
accepted, missing minutes and seconds count as zero.  A leading minus sign
on the first field makes the whole angle negative, so ``"-0:30:00"`` is
``-0.5`` degrees.
"""

from __future__ import annotations

import math

from skyframes.constants import HOUR2DEG
from skyframes.errors import MalformedAngleStringError


def _split_fields(text: str, delimiter: str) -> list[str]:
    if len(delimiter) != 1:
        raise ValueError(f"Delimiter must be a single character, got {delimiter!r}")
    return [field.strip() for field in text.split(delimiter) if field.strip()]


def parse_dms_to_degrees(dms: str, delimiter: str = ":") -> float:
    """Parse a degrees/minutes/seconds string into decimal degrees.

    Args:
        dms (str): Angle string such as ``"12:30:45.5"`` or ``"-5:30"``.
        delimiter (str): Single-character field separator. Default: ``":"``.

    Returns:
        float: Angle in degrees.

    Raises:
        MalformedAngleStringError: If the string has no fields, more than
            three fields, or a field that is not a finite decimal
            number.

    Examples:
        ```python
        from skyframes.utils import parse_dms_to_degrees
        parse_dms_to_degrees("10:30:00")  # 10.5
        ```
    """
    fields = _split_fields(dms, delimiter)
    if not fields:
        raise MalformedAngleStringError(f"Empty angle string: {dms!r}")
    if len(fields) > 3:
        raise MalformedAngleStringError(
            f"Angle string {dms!r} has {len(fields)} fields, expected at most 3"
        )

    values = []
    for field in fields:
        try:
            value = float(field)
        except ValueError as exc:
            raise MalformedAngleStringError(
                f"Non-numeric field {field!r} in angle string {dms!r}"
            ) from exc
        if not math.isfinite(value):
            raise MalformedAngleStringError(
                f"Non-finite field {field!r} in angle string {dms!r}"
            )
        values.append(value)
    values.extend([0.0] * (3 - len(values)))

    degrees, minutes, seconds = values
    angle = abs(degrees) + (minutes + seconds / 60.0) / 60.0
    if not math.isfinite(angle):
        raise MalformedAngleStringError(f"Angle string {dms!r} overflows when converted to degrees")
    if fields[0].startswith("-"):
        angle = -angle
    return angle


def parse_hms_to_degrees(hms: str, delimiter: str = ":") -> float:
    """Parse an hours/minutes/seconds string into decimal degrees.

    One hour of right ascension is 15 degrees.

    Args:
        hms (str): Angle string such as ``"12:30:00"``.
        delimiter (str): Single-character field separator. Default: ``":"``.

    Returns:
        float: Angle in degrees.

    Raises:
        MalformedAngleStringError: If the string cannot be parsed.
    """
    angle = parse_dms_to_degrees(hms, delimiter) * HOUR2DEG
    if not math.isfinite(angle):
        raise MalformedAngleStringError(f"Angle string {hms!r} overflows when converted to degrees")
    return angle
