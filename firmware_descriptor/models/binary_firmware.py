"""Recency record for ranking firmware by capture time."""

import math
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from firmware_descriptor.models.firmware import Firmware

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


@dataclass(frozen=True, order=False)
class BinaryFirmware:
    """Timestamped firmware snapshot, ordered most recent first.

    Equality compares both fields. Ordering compares timestamps only and is
    reversed, so ``sorted(records)`` lists the most recent record first.
    Records with the same timestamp and different serial numbers are
    equivalent under ordering (``<=`` and ``>=`` both hold, ``<`` does not)
    but are not ``==``.
    """

    timestamp: int
    serial_number: str

    def __post_init__(self) -> None:
        if not _I64_MIN <= self.timestamp <= _I64_MAX:
            raise ValueError(f"timestamp {self.timestamp} does not fit in 64 bits")

    @classmethod
    def snapshot(cls, firmware: "Firmware", now: datetime | None = None) -> "BinaryFirmware":
        """Capture a firmware's serial number at the current wall-clock time.

        The compile time of the firmware is not used.

        Args:
            firmware: Firmware to capture
            now: Capture time, defaults to the current UTC time

        Raises:
            ValueError: If ``now`` is a naive datetime
        """
        if now is None:
            now = datetime.now(UTC)
        elif now.tzinfo is None:
            raise ValueError("capture time must be timezone-aware")
        # Whole seconds, rounded towards the past
        return cls(
            timestamp=math.floor(now.timestamp()),
            serial_number=firmware.serial_number,
        )

    def compare(self, other: "BinaryFirmware") -> int:
        """Three-way comparison: negative if self is more recent than other."""
        return (other.timestamp > self.timestamp) - (other.timestamp < self.timestamp)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BinaryFirmware):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, BinaryFirmware):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, BinaryFirmware):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, BinaryFirmware):
            return NotImplemented
        return self.compare(other) >= 0
