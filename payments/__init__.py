"""
NVP payment gateway adapter.
Exposes the client, field container, errors and typed results.
"""

from .credentials import PartnerCredentials, SignatureCredentials
from .endpoints import ApiFamily, resolve_endpoint
from .errors import (
    ClassifiedError,
    CredentialsError,
    GatewayError,
    NVPError,
    ParseError,
    TransportError,
)
from .fields import FieldMultimap
from .nvp_client import NVPClient
from .parser import parse_response
from .response import RawResponse
from .schemas import NULL_CHAR, PayflowValues, PayPalValues

__all__ = [
    "ApiFamily",
    "ClassifiedError",
    "CredentialsError",
    "FieldMultimap",
    "GatewayError",
    "NULL_CHAR",
    "NVPClient",
    "NVPError",
    "ParseError",
    "PartnerCredentials",
    "PayPalValues",
    "PayflowValues",
    "RawResponse",
    "SignatureCredentials",
    "TransportError",
    "parse_response",
    "resolve_endpoint",
]
