"""Domain-specific exceptions with user-ready messages for firmware descriptors."""


class BusinessLogicException(Exception):
    """Base exception class for business logic errors.

    All business logic exceptions include user-ready messages that can be
    printed directly by the CLI without further message construction.
    """

    def __init__(self, message: str, error_code: str) -> None:
        self.message = message
        self.error_code = error_code
        super().__init__(message)


class ValidationException(BusinessLogicException):
    """Exception raised when validation fails."""

    def __init__(self, message: str, error_code: str = "VALIDATION_FAILED") -> None:
        super().__init__(message, error_code=error_code)


class FirmwareVersionParseException(ValidationException):
    """Base exception for firmware version strings that cannot be parsed."""

    def __init__(self, version: str, cause: str, error_code: str) -> None:
        self.version = version
        message = f"Invalid firmware version '{version}': {cause}"
        super().__init__(message, error_code=error_code)


class UnmatchedSubversionException(FirmwareVersionParseException):
    """Exception raised when a version does not have exactly three subversions."""

    def __init__(self, version: str, count: int) -> None:
        self.count = count
        super().__init__(
            version,
            f"expected 3 subversions, got {count}",
            error_code="UNMATCHED_SUBVERSION",
        )


class InvalidSubversionFormatException(FirmwareVersionParseException):
    """Exception raised when a subversion is not a valid 1-2 character number."""

    def __init__(self, version: str, subversions: list[str]) -> None:
        self.subversions = subversions
        super().__init__(
            version,
            f"invalid subversion(s): {', '.join(repr(s) for s in subversions)}",
            error_code="INVALID_SUBVERSION_FORMAT",
        )


class EditionParseException(ValidationException):
    """Exception raised when an edition token is not recognized."""

    def __init__(self, edition: str) -> None:
        self.edition = edition
        super().__init__(
            f"Invalid firmware edition '{edition}'",
            error_code="PARSE_EDITION_ERROR",
        )


class FatalEnvelopeException(BusinessLogicException):
    """Exception raised when a remote response envelope breaks its contract.

    There is no recovery path for this condition. The outer boundary (the
    CLI) turns it into process termination.
    """

    def __init__(self, cause: str) -> None:
        self.cause = cause
        super().__init__(cause, error_code="FATAL_ENVELOPE")
