"""
Gateway error types.

``ClassifiedError`` is the value produced when a gateway answers with a
business failure; the exception classes below are what callers catch.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from payments.response import RawResponse

SERVICE_UNAVAILABLE_MESSAGE = "Payment service unavailable. Please try again later."


@dataclass(frozen=True)
class ErrorDetail:
    """One indexed ``L_ERRORCODEn`` entry of an NVP response."""

    code: str
    short_message: str = ""
    long_message: str = ""
    severity: str = ""


@dataclass(frozen=True)
class ClassifiedError:
    """Failure reported in a gateway response body (``ACK`` or ``RESULT``)."""

    ack: str = ""
    code: str = ""
    short_message: str = ""
    long_message: str = ""
    severity: str = ""
    label: str = "PayPal"
    details: tuple[ErrorDetail, ...] = field(default=(), compare=False)

    @property
    def message(self) -> str:
        """Displayable message; never empty."""
        if self.code and self.short_message:
            return f"{self.label} Error {self.code}: {self.short_message}"
        if self.ack:
            return self.ack
        return SERVICE_UNAVAILABLE_MESSAGE

    def __str__(self) -> str:
        return self.message


class NVPError(Exception):
    pass


class CredentialsError(NVPError):
    pass


class TransportError(NVPError):
    """The HTTP exchange failed before a complete body was received."""


class ParseError(NVPError):
    """The response body is not a valid query string."""


class GatewayError(NVPError):
    """
    The gateway answered but reported a business failure.

    ``response`` holds the parsed exchange and ``result`` the best-effort
    typed projection (set by ``NVPClient.execute``), so callers can still
    inspect partial fields.
    """

    def __init__(
        self,
        error: ClassifiedError,
        response: "RawResponse | None" = None,
        result: Any = None,
    ):
        super().__init__(error.message)
        self.error = error
        self.response = response
        self.result = result

    @property
    def code(self) -> str:
        return self.error.code

    @property
    def ack(self) -> str:
        return self.error.ack
