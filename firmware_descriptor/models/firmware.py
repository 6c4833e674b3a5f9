"""Firmware descriptor model."""

import logging
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from firmware_descriptor.exceptions import ValidationException
from firmware_descriptor.models.firmware_edition import FirmwareEdition
from firmware_descriptor.models.firmware_version import FirmwareVersion
from firmware_descriptor.utils.rfc3339 import parse_rfc3339

logger = logging.getLogger(__name__)

# Sizes are unsigned 64-bit byte counts
MAX_FIRMWARE_SIZE = 2**64 - 1


def format_utc_timestamp(value: datetime) -> str:
    """Render a UTC datetime as ``YYYY-MM-DD HH:MM:SS[.fff|.ffffff] UTC``.

    The fraction is omitted when zero and shortened to milliseconds when it
    has no sub-millisecond part.
    """
    text = f"{value.date().isoformat()} {value.time().isoformat(timespec='seconds')}"
    if value.microsecond % 1000 == 0:
        if value.microsecond:
            text += f".{value.microsecond // 1000:03d}"
    else:
        text += f".{value.microsecond:06d}"
    return f"{text} UTC"


class Firmware(BaseModel):
    """Validated firmware descriptor.

    Build instances with ``Firmware.assemble()``, which collapses every
    validation failure into ``None``. Instances are immutable.
    """

    model_config = ConfigDict(frozen=True)

    serial_number: str = Field(..., min_length=1, description="Firmware serial number")
    size: int = Field(..., strict=True, description="Firmware size in bytes")
    compile_time: datetime = Field(..., description="Compile timestamp (UTC)")
    edition: FirmwareEdition = Field(default_factory=FirmwareEdition.default)
    version: FirmwareVersion = Field(default_factory=FirmwareVersion)

    @field_validator("size")
    @classmethod
    def validate_size(cls, v: int) -> int:
        """Validate that size is a non-zero unsigned 64-bit byte count."""
        if not 0 < v <= MAX_FIRMWARE_SIZE:
            raise ValueError(f"size must be between 1 and {MAX_FIRMWARE_SIZE}")
        return v

    @field_validator("compile_time", mode="before")
    @classmethod
    def validate_compile_time(cls, v: Any) -> datetime:
        """Accept RFC 3339 text or an aware datetime, normalized to UTC."""
        if isinstance(v, str):
            try:
                return parse_rfc3339(v)
            except ValidationException as e:
                raise ValueError(e.message) from e
        if isinstance(v, datetime):
            if v.tzinfo is None:
                raise ValueError("compile_time must be timezone-aware")
            return v.astimezone(UTC)
        raise ValueError("compile_time must be RFC 3339 text or a datetime")

    @field_validator("edition", mode="before")
    @classmethod
    def validate_edition(cls, v: Any) -> FirmwareEdition:
        """Accept an edition token or a FirmwareEdition."""
        if isinstance(v, FirmwareEdition):
            return v
        if isinstance(v, str):
            try:
                return FirmwareEdition.parse(v)
            except ValidationException as e:
                raise ValueError(e.message) from e
        raise ValueError("edition must be an edition token")

    @field_validator("version", mode="before")
    @classmethod
    def validate_version(cls, v: Any) -> FirmwareVersion:
        """Accept a version string or a FirmwareVersion."""
        if isinstance(v, FirmwareVersion):
            return v
        if isinstance(v, str):
            try:
                return FirmwareVersion.parse(v)
            except ValidationException as e:
                raise ValueError(e.message) from e
        raise ValueError("version must be a version string")

    @classmethod
    def assemble(
        cls,
        serial_number: str,
        size: int,
        compile_time: str,
        edition: str,
        version: str,
    ) -> "Firmware | None":
        """Assemble a descriptor from raw values.

        Fields are checked in order: serial number, size, compile time,
        edition, version.

        Args:
            serial_number: Non-empty serial number
            size: Size in bytes, must be non-zero
            compile_time: RFC 3339 compile timestamp
            edition: Edition token (see FirmwareEdition.parse)
            version: Dotted version string (see FirmwareVersion.parse)

        Returns:
            The Firmware, or None if any field is invalid
        """
        try:
            return cls(
                serial_number=serial_number,
                size=size,
                compile_time=compile_time,
                edition=edition,
                version=version,
            )
        except ValidationError as e:
            first = e.errors()[0]
            logger.debug(
                "Rejected firmware descriptor %r: %s: %s",
                serial_number,
                ".".join(str(x) for x in first["loc"]),
                first["msg"],
            )
            return None

    @property
    def size_kb(self) -> int:
        """Size in whole kilobytes (floor division by 1024)."""
        return self.size // 1024

    def __str__(self) -> str:
        return (
            f"Serial Number: {self.serial_number}  Size(KB): {self.size_kb}    "
            f"Compile Time: {format_utc_timestamp(self.compile_time)}    "
            f"Version: {self.version}    Edition: {self.edition}"
        )
