"""Response envelope schema for remote firmware service calls."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator


class EnvelopePayloadSchema(BaseModel):
    """Wire schema of a remote call's JSON response body.

    Only ``status`` is required. A ``message`` that is not a string and a
    ``data`` value that is not an object are treated as absent.
    """

    model_config = ConfigDict(extra="ignore")

    status: StrictBool = Field(..., description="True when the remote call succeeded")
    message: str = Field(default="", description="Failure message")
    data: dict[str, Any] | None = Field(default=None, description="Result payload object")

    @field_validator("message", mode="before")
    @classmethod
    def default_non_string_message(cls, v: Any) -> str:
        """Replace a non-string message with an empty string."""
        return v if isinstance(v, str) else ""

    @field_validator("data", mode="before")
    @classmethod
    def drop_non_object_data(cls, v: Any) -> dict[str, Any] | None:
        """Treat any data value that is not a JSON object as absent."""
        return v if isinstance(v, dict) else None
