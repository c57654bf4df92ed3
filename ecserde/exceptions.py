"""ecserde exceptions hierarchy."""

from typing import Any, Optional

__all__ = [
    "EcSerdeError",
    "ValidationError",
    "CryptoError",
    "SerializationError",
    "HexParseError",
    "UnknownFieldError",
    "MissingFieldError",
    "KeyConstructionError",
]


class EcSerdeError(Exception):
    """Base exception for all ecserde errors."""

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        data: Optional[Any] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.data = data

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ValidationError(EcSerdeError):
    """Raised when an in-memory value fails validation."""
    pass


class CryptoError(EcSerdeError):
    """Raised when cryptographic operation fails."""
    pass


class SerializationError(EcSerdeError, ValueError):
    """
    Raised when serialization/deserialization fails.

    Subclasses ValueError so that pydantic validators surface it as a
    field-level validation error instead of letting it escape.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        code: Optional[int] = None,
        data: Optional[Any] = None
    ) -> None:
        super().__init__(message, code=code, data=data)
        self.field = field


class HexParseError(SerializationError):
    """Raised when text is not a valid hexadecimal integer."""
    pass


class UnknownFieldError(SerializationError):
    """Raised when an encoded public key carries an unexpected field."""

    def __init__(self, field: str) -> None:
        super().__init__(
            f"Unknown public key field {field!r}, expected 'x' or 'y'",
            field=field,
        )


class MissingFieldError(SerializationError):
    """Raised when an encoded public key lacks a coordinate (strict mode)."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing public key field {field!r}", field=field)


class KeyConstructionError(CryptoError, SerializationError):
    """Raised when the crypto core rejects a decoded scalar or point."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        data: Optional[Any] = None
    ) -> None:
        SerializationError.__init__(self, message, field=field, data=data)
