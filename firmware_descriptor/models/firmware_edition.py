"""Firmware edition enumeration."""

from enum import Enum

from firmware_descriptor.exceptions import EditionParseException


class FirmwareEdition(str, Enum):
    """Firmware edition.

    STANDARD: Base firmware (default)
    PLUS: Extended feature set
    PREMIUM: Full feature set
    """

    STANDARD = "STANDARD"
    PLUS = "PLUS"
    PREMIUM = "PREMIUM"

    @classmethod
    def default(cls) -> "FirmwareEdition":
        """Edition assumed when none is specified."""
        return cls.STANDARD

    @classmethod
    def parse(cls, edition: str) -> "FirmwareEdition":
        """Parse an edition token.

        Only the upper-case and capitalized spellings are accepted, matching
        is case-sensitive otherwise.

        Raises:
            EditionParseException: If the token is not a known spelling
        """
        try:
            return _EDITION_TOKENS[edition]
        except KeyError:
            raise EditionParseException(edition) from None

    def __str__(self) -> str:
        return self.value


_EDITION_TOKENS: dict[str, FirmwareEdition] = {
    "STANDARD": FirmwareEdition.STANDARD,
    "Standard": FirmwareEdition.STANDARD,
    "PLUS": FirmwareEdition.PLUS,
    "Plus": FirmwareEdition.PLUS,
    "PREMIUM": FirmwareEdition.PREMIUM,
    "Premium": FirmwareEdition.PREMIUM,
}
