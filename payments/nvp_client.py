"""
NVP Gateway Client

This module owns the request/response engine shared by the PayPal Classic
NVP API and the Payflow Pro gateway:
- Credential injection
- Form-encoded HTTP POST to the sandbox or production endpoint
- Response parsing and ack/result classification
- Projection onto typed result models

Operation-specific field building (SetExpressCheckout, DoCapture, Payflow
sales, ...) happens in the caller, which hands over a FieldMultimap carrying
METHOD or TRXTYPE.
"""

import time
from collections.abc import Iterable, Mapping
from typing import Any

import requests
import structlog

from core.dependencies import get_settings
from core.logging import BusinessEvents
from core.metrics import record_outcome
from core.settings import Settings
from core.tracing import get_tracer
from payments.credentials import Credentials, PartnerCredentials, SignatureCredentials
from payments.endpoints import ApiFamily, resolve_endpoint
from payments.errors import (
    CredentialsError,
    GatewayError,
    ParseError,
    TransportError,
)
from payments.fields import FieldMultimap
from payments.gateways import GatewayProfile, get_profile
from payments.parser import parse_response
from payments.response import RawResponse

log = structlog.get_logger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

FieldsLike = FieldMultimap | Mapping[str, Any] | Iterable[tuple[str, Any]]


class NVPClient:
    def __init__(
        self,
        credentials: Credentials,
        *,
        sandbox: bool = False,
        version: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
        settings: Settings | None = None,
    ):
        """
        Initialize an NVP gateway client.

        Args:
            credentials: SignatureCredentials (PayPal NVP) or PartnerCredentials
                (Payflow); the API family follows from the type
            sandbox: use the sandbox endpoint instead of production
            version: NVP API version, defaults to settings.NVP_VERSION
            timeout: default per-call timeout in seconds, defaults to
                settings.HTTP_TIMEOUT
            session: requests session to send through; a private one is
                created (and closed by close()) when omitted
            settings: optional settings object, defaults to the shared one
        """
        if not isinstance(credentials, (SignatureCredentials, PartnerCredentials)):
            raise CredentialsError(
                f"Unsupported credentials type: {type(credentials).__name__}"
            )
        settings = settings or get_settings()

        self._credentials = credentials
        self._profile: GatewayProfile = get_profile(credentials.family)
        self._sandbox = bool(sandbox)
        self._endpoint = resolve_endpoint(self._profile.family, self._sandbox)
        self._version = version or settings.NVP_VERSION
        self._timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT
        self._owns_session = session is None
        self._session = session or requests.Session()
        self._user_agent = settings.USER_AGENT

    @classmethod
    def paypal(
        cls, username: str, password: str, signature: str, sandbox: bool = False, **kwargs
    ) -> "NVPClient":
        """Client for the PayPal Classic NVP API."""
        return cls(
            SignatureCredentials(username, password, signature), sandbox=sandbox, **kwargs
        )

    @classmethod
    def payflow(
        cls,
        username: str,
        password: str,
        partner: str,
        vendor: str,
        sandbox: bool = False,
        **kwargs,
    ) -> "NVPClient":
        """Client for the Payflow Pro gateway."""
        return cls(
            PartnerCredentials(username, password, partner, vendor),
            sandbox=sandbox,
            **kwargs,
        )

    @property
    def family(self) -> ApiFamily:
        return self._profile.family

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def sandbox(self) -> bool:
        return self._sandbox

    @property
    def username(self) -> str:
        return self._credentials.username

    @property
    def profile(self) -> GatewayProfile:
        return self._profile

    def __repr__(self) -> str:
        return (
            f"NVPClient(family={self.family.value!r}, username={self.username!r}, "
            f"sandbox={self._sandbox})"
        )

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "NVPClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def build_request(self, fields: FieldsLike) -> FieldMultimap:
        """Copy the caller's fields and add credentials, overriding same-named keys."""
        request = FieldMultimap(fields)
        for key, value in self._credentials.as_fields(self._version):
            request.set(key, value)
        return request

    def perform_request(
        self, fields: FieldsLike, *, timeout: float | None = None
    ) -> RawResponse:
        """
        Send one NVP request and return the parsed, classified response.

        Args:
            fields: operation fields (METHOD or TRXTYPE plus its parameters)
            timeout: seconds to wait on the gateway, overriding the client default

        Raises:
            TransportError: the HTTP exchange failed or the body could not be read
            ParseError: the body is not a valid query string
            GatewayError: the gateway reported a failure; ``exc.response`` holds
                the parsed response
        """
        request = self.build_request(fields)
        family = self.family.value
        operation = request.get("METHOD") or request.get("TRXTYPE") or ""
        bound = log.bind(family=family, operation=operation, sandbox=self._sandbox)

        bound.info(BusinessEvents.GATEWAY_REQUEST, keys=request.keys())

        with get_tracer().start_as_current_span("gateway.perform_request") as span:
            span.set_attribute("gateway.family", family)
            span.set_attribute("gateway.operation", operation)
            span.set_attribute("gateway.sandbox", self._sandbox)

            started = time.perf_counter()
            try:
                # HTTP status is not checked: both gateways report failure in the body
                http_response = self._session.post(
                    self._endpoint,
                    data=request.encode(),
                    headers={
                        "Content-Type": FORM_CONTENT_TYPE,
                        "User-Agent": self._user_agent,
                    },
                    timeout=self._timeout if timeout is None else timeout,
                )
                body = http_response.content
            except requests.RequestException as e:
                duration = time.perf_counter() - started
                bound.error(BusinessEvents.GATEWAY_TRANSPORT_ERROR, error=str(e))
                record_outcome(family, "transport_error", duration)
                raise TransportError(f"{self._profile.label} request failed: {e}") from e
            duration = time.perf_counter() - started

            try:
                parsed = parse_response(body)
            except ParseError as e:
                bound.error(
                    BusinessEvents.GATEWAY_PARSE_ERROR,
                    error=str(e),
                    http_status=http_response.status_code,
                )
                record_outcome(family, "parse_error", duration)
                raise

            response = self._profile.build_response(parsed, self._sandbox)
            span.set_attribute("gateway.status", response.status)

            if response.error is not None:
                bound.warning(
                    BusinessEvents.GATEWAY_FAILURE,
                    status=response.status,
                    code=response.error.code,
                    error=response.error.message,
                    correlation_id=response.correlation_id,
                    http_status=http_response.status_code,
                )
                record_outcome(family, "failure", duration)
                raise GatewayError(response.error, response=response)

            bound.info(
                BusinessEvents.GATEWAY_SUCCESS,
                status=response.status,
                correlation_id=response.correlation_id,
                duration=round(duration, 3),
            )
            record_outcome(family, "success", duration)
            return response

    def execute(self, fields: FieldsLike, *, timeout: float | None = None):
        """
        Perform a request and project the response onto the family's typed result.

        Raises the same errors as perform_request; on GatewayError the
        best-effort projection is attached as ``exc.result``.
        """
        try:
            response = self.perform_request(fields, timeout=timeout)
        except GatewayError as e:
            if e.response is not None:
                e.result = self._profile.projector.project(e.response.fields)
            raise
        return self._profile.projector.project(response.fields)
