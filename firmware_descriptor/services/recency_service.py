"""Bounded most-recent-first list of firmware records."""

import bisect
import logging
from typing import TYPE_CHECKING

from firmware_descriptor.models.binary_firmware import BinaryFirmware

if TYPE_CHECKING:
    from firmware_descriptor.models.firmware import Firmware

logger = logging.getLogger(__name__)


class RecencyService:
    """Keeps the most recent firmware records, newest first.

    Records beyond ``max_records`` are pruned oldest first. Records with equal
    timestamps keep their insertion order. Not thread-safe; the container
    provides a fresh instance per caller.
    """

    def __init__(self, max_records: int) -> None:
        """Initialize the recency list.

        Args:
            max_records: Maximum number of records to retain
        """
        if max_records <= 0:
            raise ValueError("max_records must be positive")
        self.max_records = max_records
        self._records: list[BinaryFirmware] = []

    def add(self, record: BinaryFirmware) -> None:
        """Insert a record at its recency position and enforce the bound."""
        # Insert after any records with the same timestamp
        bisect.insort_right(self._records, record)
        self._enforce_retention()

    def add_firmware(self, firmware: "Firmware") -> BinaryFirmware:
        """Snapshot a firmware at the current time and add it."""
        record = BinaryFirmware.snapshot(firmware)
        self.add(record)
        return record

    def records(self) -> list[BinaryFirmware]:
        """Return the retained records, most recent first."""
        return list(self._records)

    def latest(self) -> BinaryFirmware | None:
        """Return the most recent record, or None if empty."""
        return self._records[0] if self._records else None

    def __len__(self) -> int:
        return len(self._records)

    def _enforce_retention(self) -> None:
        if len(self._records) <= self.max_records:
            return

        pruned = self._records[self.max_records:]
        del self._records[self.max_records:]
        logger.info(
            "Recency list at capacity %d: pruned %d record(s), oldest %s",
            self.max_records,
            len(pruned),
            pruned[-1].serial_number,
        )
