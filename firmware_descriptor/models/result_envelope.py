"""Typed success/failure result decoded from a remote call's JSON response.

The remote firmware service wraps every response in an envelope::

    {"status": true, "message": "", "data": {"version": "1.2.3"}}

An envelope that is empty, is not JSON, or lacks a boolean ``status`` breaks
the contract with the remote side. Decoding raises FatalEnvelopeException for
those, and the caller's outer boundary is expected to terminate.
"""

import json
import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar, Union

from pydantic import ValidationError

from firmware_descriptor.exceptions import FatalEnvelopeException
from firmware_descriptor.schemas.envelope import EnvelopePayloadSchema

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(f"invalid JSON constant {name}")


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"number out of range: {text}")
    return value


def _ensure_encodable(value: Any) -> None:
    """Raise UnicodeEncodeError if a decoded string holds a lone surrogate."""
    if isinstance(value, str):
        value.encode("utf-8")
    elif isinstance(value, dict):
        for key, item in value.items():
            key.encode("utf-8")
            _ensure_encodable(item)
    elif isinstance(value, list):
        for item in value:
            _ensure_encodable(item)


def serialize_data(data: dict[str, Any]) -> str:
    """Serialize a data object to compact JSON with sorted keys.

    Raises:
        ValueError: If the object holds a non-finite float
    """
    return json.dumps(
        data,
        separators=(",", ":"),
        sort_keys=True,
        ensure_ascii=False,
        allow_nan=False,
    )


@dataclass(frozen=True)
class ResultEnvelope:
    """Base class of decoded envelopes.

    ``data`` is the compact JSON text of the envelope's ``data`` object, or an
    empty string when there is none.
    """

    succeeded: ClassVar[bool]

    data: str = ""

    @property
    def failed(self) -> bool:
        return not self.succeeded

    def if_failed(
        self,
        consume: Callable[[str], None],
        or_else: Callable[[], None] | None = None,
    ) -> None:
        """Call ``consume(message)`` when failed, else ``or_else()`` if given."""
        if isinstance(self, FailureEnvelope):
            consume(self.message)
        elif or_else is not None:
            or_else()

    @classmethod
    def decode(cls, raw_text: str) -> "SuccessEnvelope | FailureEnvelope":
        """Decode a response body, see decode_envelope()."""
        return decode_envelope(raw_text)


@dataclass(frozen=True)
class SuccessEnvelope(ResultEnvelope):
    """Envelope of a call that succeeded."""

    succeeded: ClassVar[bool] = True


@dataclass(frozen=True)
class FailureEnvelope(ResultEnvelope):
    """Envelope of a call that failed, carrying the failure message."""

    succeeded: ClassVar[bool] = False

    message: str = ""


DecodedEnvelope = Union[SuccessEnvelope, FailureEnvelope]


def decode_envelope(raw_text: str) -> DecodedEnvelope:
    """Decode a remote call's response body into a typed envelope.

    Args:
        raw_text: Response body text

    Returns:
        SuccessEnvelope or FailureEnvelope depending on ``status``

    Raises:
        FatalEnvelopeException: If the body is empty, is not JSON, or has no
            boolean ``status``
    """
    if not raw_text:
        raise FatalEnvelopeException("response is empty!")

    try:
        payload = json.loads(
            raw_text,
            parse_constant=_reject_constant,
            parse_float=_parse_finite_float,
        )
        _ensure_encodable(payload)
    except (ValueError, RecursionError) as e:
        # UnicodeEncodeError from a lone surrogate is a ValueError
        logger.debug("Response body is not valid JSON: %s", e)
        raise FatalEnvelopeException("invalid json error") from e

    if not isinstance(payload, dict):
        raise FatalEnvelopeException("response status is missing or not a boolean")

    try:
        envelope = EnvelopePayloadSchema.model_validate(payload)
        data = serialize_data(envelope.data) if envelope.data is not None else ""
    except ValidationError as e:
        raise FatalEnvelopeException(
            "response status is missing or not a boolean"
        ) from e
    except (ValueError, RecursionError) as e:
        logger.debug("Response data cannot be serialized: %s", e)
        raise FatalEnvelopeException("invalid json error") from e

    if envelope.status:
        return SuccessEnvelope(data=data)

    logger.debug("Remote call failed: %s", envelope.message)
    return FailureEnvelope(data=data, message=envelope.message)
