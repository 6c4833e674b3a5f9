"""Firmware descriptor parsing and remote result envelope decoding."""

from firmware_descriptor.models.binary_firmware import BinaryFirmware
from firmware_descriptor.models.firmware import Firmware
from firmware_descriptor.models.firmware_edition import FirmwareEdition
from firmware_descriptor.models.firmware_version import FirmwareVersion
from firmware_descriptor.models.result_envelope import (
    FailureEnvelope,
    ResultEnvelope,
    SuccessEnvelope,
    decode_envelope,
)

__all__ = [
    "BinaryFirmware",
    "FailureEnvelope",
    "Firmware",
    "FirmwareEdition",
    "FirmwareVersion",
    "ResultEnvelope",
    "SuccessEnvelope",
    "decode_envelope",
]
