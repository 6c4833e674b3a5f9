"""Three-part firmware version parsing.

A firmware version is written as ``MAJOR.MINOR.PATCH`` where each subversion
is a 1 or 2 character token. Two character tokens that start with ``0`` and
continue with an ASCII digit are a known quirk of the device grammar: they
evaluate to the code point of the second character, so ``"05"`` is 53, not 5.
Devices in the field report versions this way, so the quirk is kept as-is.
"""

import re
import string

from pydantic import BaseModel, ConfigDict, Field

from firmware_descriptor.exceptions import (
    InvalidSubversionFormatException,
    UnmatchedSubversionException,
)

SUBVERSION_COUNT = 3

# Unsigned decimal with an optional leading plus sign, ASCII digits only
_UNSIGNED_PATTERN = re.compile(r"\+?[0-9]+")

_U8_MAX = 0xFF


def _parse_u8(token: str) -> int | None:
    """Parse an unsigned 8-bit decimal, or return None."""
    if not _UNSIGNED_PATTERN.fullmatch(token):
        return None
    value = int(token)
    if value > _U8_MAX:
        return None
    return value


def parse_subversion(token: str) -> int | None:
    """Parse a single subversion token.

    Args:
        token: One dot-separated component of a version string

    Returns:
        The subversion value, or None if the token is invalid
    """
    if len(token) == 1:
        return _parse_u8(token)

    if len(token) == 2:
        if token[0] == "0" and token[1] in string.digits:
            return ord(token[1])
        return _parse_u8(token)

    return None


class FirmwareVersion(BaseModel):
    """Immutable ``major.minor.patch`` firmware version."""

    model_config = ConfigDict(frozen=True)

    major: int = Field(default=0, ge=0, le=_U8_MAX)
    minor: int = Field(default=0, ge=0, le=_U8_MAX)
    patch: int = Field(default=0, ge=0, le=_U8_MAX)

    @classmethod
    def parse(cls, version: str) -> "FirmwareVersion":
        """Parse a dotted version string.

        Args:
            version: Version text, surrounding whitespace is ignored

        Returns:
            The parsed FirmwareVersion

        Raises:
            UnmatchedSubversionException: If there are not exactly 3 parts
            InvalidSubversionFormatException: If any part is malformed
        """
        parts = version.strip().split(".")
        if len(parts) != SUBVERSION_COUNT:
            raise UnmatchedSubversionException(version, len(parts))

        values = [parse_subversion(part) for part in parts]
        invalid = [part for part, value in zip(parts, values) if value is None]
        if invalid:
            raise InvalidSubversionFormatException(version, invalid)

        major, minor, patch = values
        return cls(major=major, minor=minor, patch=patch)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"
