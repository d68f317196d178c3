"""
Feature location model and parser for the simple INSDC location forms.

Only single-span locations are understood::

    123..456
    <1..>456
    complement(123..456)
    complement(<123..456      (closing parenthesis optional)

Anything else (``join(...)``, ``order(...)``, single bases, between
positions ``12^13``, remote references ``AB000001:1..10``) is reported
as ``None``. The parser never raises for malformed text and never
returns a partially parsed value.
"""

from __future__ import annotations

from dataclasses import dataclass

COMPLEMENT_PREFIX = "complement("

# Shortest window that can hold "D..D"
MIN_LOCATION_LENGTH = 4
# Shortest window that can hold "complement(D..D"
MIN_COMPLEMENT_LENGTH = len(COMPLEMENT_PREFIX) + MIN_LOCATION_LENGTH

_DIGITS = frozenset("0123456789")

# Positions are unsigned 32-bit values; 4294967295 has ten digits
MAX_POSITION = 2**32 - 1
MAX_POSITION_DIGITS = len(str(MAX_POSITION))


@dataclass(frozen=True)
class FeatureLocation:
    """A single span on the sequence, 1-based and inclusive at both ends.

    Fuzzy boundary markers (``<``/``>``) are accepted by the parser but
    not recorded; the span holds the stated coordinates.
    """

    start: int
    end: int
    complement: bool = False

    def __post_init__(self) -> None:
        if not 1 <= self.start <= self.end:
            raise ValueError(
                f"Invalid location {self.start}..{self.end}: "
                "expected 1 <= start <= end"
            )

    @property
    def length(self) -> int:
        """Number of bases covered by the span."""
        return self.end - self.start + 1

    def __str__(self) -> str:
        span = f"{self.start}..{self.end}"
        return f"complement({span})" if self.complement else span


def parse_location(window: str) -> FeatureLocation | None:
    """Parse the location column of a feature key line.

    Args:
        window: The characters from the location column onward, as read
            from the line (trailing text after the location is ignored).

    Returns:
        The parsed ``FeatureLocation``, or ``None`` if *window* does not
        hold a valid single-span location.
    """
    count = len(window)
    if count < MIN_LOCATION_LENGTH:
        return None

    index = 0
    complement = False
    if window.startswith(COMPLEMENT_PREFIX):
        if count < MIN_COMPLEMENT_LENGTH:
            return None
        index = len(COMPLEMENT_PREFIX)
        complement = True

    if window[index] == "<":
        index += 1

    # First position; leave room for at least "..D" after it
    digits_start = index
    while index < count - 3 and window[index] in _DIGITS:
        index += 1
    range_start = _position(window[digits_start:index])
    if range_start is None:
        return None

    if window[index:index + 2] != "..":
        return None
    index += 2

    if index < count and window[index] == ">":
        index += 1

    digits_start = index
    while index < count and window[index] in _DIGITS:
        index += 1
    range_end = _position(window[digits_start:index])
    if range_end is None:
        return None

    if range_start < 1 or range_end < 1 or range_start > range_end:
        return None

    return FeatureLocation(range_start, range_end, complement)


def _position(digits: str) -> int | None:
    """Convert a digit run to a base position, or None if empty or out of range."""
    if not digits:
        return None
    significant = digits.lstrip("0")
    if len(significant) > MAX_POSITION_DIGITS:
        return None
    value = int(significant or "0")
    return value if value <= MAX_POSITION else None
