"""Exception classes for the BitMEX transport."""

from __future__ import annotations

from typing import Any
from typing import Dict
from typing import Optional


class BitMEXError(Exception):
    """Base exception for all BitMEX SDK errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize BitMEX error.

        Args:
            message: Error message
            error_code: Optional error code
            details: Optional error details
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def __str__(self) -> str:
        """String representation of the error."""
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message

    def __repr__(self) -> str:
        """Detailed representation of the error."""
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code!r}, "
            f"details={self.details!r})"
        )


class BitMEXConfigurationError(BitMEXError):
    """Configuration error, e.g. a signed call without a credential."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, "CONFIGURATION_ERROR", details)


class BitMEXURLError(BitMEXError):
    """Endpoint or query parameters do not form a valid URL."""

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize URL error.

        Args:
            message: Error message
            url: The offending URL, when one could be assembled
            details: Optional error details
        """
        super().__init__(message, "URL_ERROR", details)
        self.url = url


class BitMEXRequestError(BitMEXError):
    """Request body fields cannot be serialized."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, "REQUEST_ERROR", details)


class BitMEXTransportError(BitMEXError):
    """Connection, TLS or protocol failure below the API layer."""

    def __init__(
        self,
        message: str = "Transport failure",
        details: Optional[Dict[str, Any]] = None,
        error_code: str = "TRANSPORT_ERROR",
    ) -> None:
        super().__init__(message, error_code, details)


class BitMEXTimeoutError(BitMEXTransportError):
    """Request timeout error."""

    def __init__(
        self,
        message: str = "Request timed out",
        timeout: Optional[float] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize timeout error.

        Args:
            message: Error message
            timeout: Timeout value in seconds
            details: Optional error details
        """
        super().__init__(message, details, error_code="TIMEOUT")
        self.timeout = timeout

    def __str__(self) -> str:
        """String representation of the timeout error."""
        base = super().__str__()
        if self.timeout:
            return f"{base} (timeout: {self.timeout}s)"
        return base


class BitMEXDecodeError(BitMEXError):
    """Response payload is not JSON or does not match the expected schema."""

    def __init__(
        self,
        message: str,
        raw: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize decode error.

        Args:
            message: Error message
            raw: Raw response text, kept for diagnostics
            status_code: HTTP status code of the response
            details: Optional error details
        """
        super().__init__(message, "DECODE_ERROR", details)
        self.raw = raw
        self.status_code = status_code


class BitMEXAPIError(BitMEXError):
    """Error object reported by the exchange in the response envelope."""

    def __init__(
        self,
        message: str,
        name: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize API error.

        Args:
            message: Server-supplied error message
            name: Server-supplied error name (e.g. ``HTTPError``)
            status_code: HTTP status code of the response
            details: Optional error details
        """
        super().__init__(message, "API_ERROR", details)
        self.name = name
        self.status_code = status_code

    def __str__(self) -> str:
        """String representation of the API error."""
        base = super().__str__()
        if self.name:
            return f"{base} ({self.name})"
        return base
