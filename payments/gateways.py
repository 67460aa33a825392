"""
Gateway profiles.

The PayPal NVP API and Payflow Pro share one request/response engine and
differ only in how they acknowledge a call, which keys carry the error, and
which typed result a response projects onto. A ``GatewayProfile`` bundles
those differences; ``NVPClient`` is written against the profile only.
"""

import re
from dataclasses import dataclass
from typing import Callable

from payments.endpoints import ApiFamily
from payments.errors import ClassifiedError, ErrorDetail
from payments.fields import FieldMultimap
from payments.projector import ResultProjector, payflow_projector, paypal_projector
from payments.response import RawResponse

NVP_FAILURE_ACKS = {"failure", "failurewithwarning"}

_ERROR_CODE_KEY = re.compile(r"^L_ERRORCODE(\d+)$")


@dataclass(frozen=True)
class GatewayProfile:
    family: ApiFamily
    label: str  # product name used in error messages
    status_key: str  # ACK or RESULT
    message_key: str
    is_failure: Callable[[FieldMultimap], bool]
    build_error: Callable[[FieldMultimap], ClassifiedError]
    projector: ResultProjector

    def classify(self, fields: FieldMultimap) -> ClassifiedError | None:
        """Return the failure carried by ``fields``, or None on success."""
        if self.is_failure(fields):
            return self.build_error(fields)
        return None

    def build_response(self, fields: FieldMultimap, used_sandbox: bool) -> RawResponse:
        return RawResponse(
            family=self.family,
            fields=fields,
            status=fields.get(self.status_key),
            message=fields.get(self.message_key),
            correlation_id=fields.get("CORRELATIONID"),
            timestamp=fields.get("TIMESTAMP"),
            version=fields.get("VERSION"),
            build=fields.get("BUILD"),
            used_sandbox=used_sandbox,
            error=self.classify(fields),
        )


def nvp_is_failure(fields: FieldMultimap) -> bool:
    ack = fields.get("ACK")
    # A response without ACK was never acknowledged
    if not ack:
        return True
    # Error-code presence wins over a benign-looking ACK
    if fields.get("L_ERRORCODE0"):
        return True
    return ack.lower() in NVP_FAILURE_ACKS


def nvp_error(fields: FieldMultimap) -> ClassifiedError:
    return ClassifiedError(
        ack=fields.get("ACK"),
        code=fields.get("L_ERRORCODE0"),
        short_message=fields.get("L_SHORTMESSAGE0"),
        long_message=fields.get("L_LONGMESSAGE0"),
        severity=fields.get("L_SEVERITYCODE0"),
        label="PayPal",
        details=tuple(nvp_error_details(fields)),
    )


def nvp_error_details(fields: FieldMultimap) -> list[ErrorDetail]:
    """All indexed errors (L_ERRORCODE0, L_ERRORCODE1, ...) in index order."""
    indexes = sorted(
        int(m.group(1)) for m in map(_ERROR_CODE_KEY.match, fields.keys()) if m
    )
    return [
        ErrorDetail(
            code=fields.get(f"L_ERRORCODE{n}"),
            short_message=fields.get(f"L_SHORTMESSAGE{n}"),
            long_message=fields.get(f"L_LONGMESSAGE{n}"),
            severity=fields.get(f"L_SEVERITYCODE{n}"),
        )
        for n in indexes
    ]


def payflow_is_failure(fields: FieldMultimap) -> bool:
    return fields.get("RESULT") != "0"


def payflow_error(fields: FieldMultimap) -> ClassifiedError:
    result = fields.get("RESULT")
    return ClassifiedError(
        ack=result,
        code=result,
        short_message=fields.get("RESPMSG"),
        label="Payflow",
    )


PAYPAL_NVP = GatewayProfile(
    family=ApiFamily.nvp,
    label="PayPal",
    status_key="ACK",
    message_key="L_SHORTMESSAGE0",
    is_failure=nvp_is_failure,
    build_error=nvp_error,
    projector=paypal_projector,
)

PAYFLOW = GatewayProfile(
    family=ApiFamily.payflow,
    label="Payflow",
    status_key="RESULT",
    message_key="RESPMSG",
    is_failure=payflow_is_failure,
    build_error=payflow_error,
    projector=payflow_projector,
)

PROFILES = {profile.family: profile for profile in (PAYPAL_NVP, PAYFLOW)}


def get_profile(family: ApiFamily) -> GatewayProfile:
    return PROFILES[ApiFamily(family)]
