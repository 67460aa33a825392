"""
Result projection.

A ``ResultProjector`` maps selected keys of a raw response onto a typed result
model using a static table of ``FieldSpec`` rows. Projection never fails:
absent keys take the zero value of their coercion and unparseable integers
fall back to zero with a warning log.
"""

from dataclasses import dataclass
from typing import Generic, Literal, TypeVar

import structlog
from pydantic import BaseModel

from core.logging import BusinessEvents
from payments.fields import FieldMultimap
from payments.schemas import NULL_CHAR, PayflowValues, PayPalValues

log = structlog.get_logger(__name__)

Coercion = Literal["str", "int", "char"]
ResultT = TypeVar("ResultT", bound=BaseModel)


@dataclass(frozen=True)
class FieldSpec:
    name: str  # attribute on the result model
    source_key: str  # protocol key in the raw response
    coercion: Coercion = "str"
    verbose_only: bool = False  # only returned with VERBOSITY=HIGH


def as_str(values: list[str]) -> str:
    return values[0] if values else ""


def as_int(values: list[str], source_key: str = "") -> int:
    if not values:
        return 0
    try:
        return int(values[0])
    except ValueError:
        log.warning(BusinessEvents.COERCION_FALLBACK, key=source_key, value=values[0])
        return 0


def as_char(values: list[str]) -> str:
    if values and values[0]:
        return values[0][0]
    return NULL_CHAR


class ResultProjector(Generic[ResultT]):
    def __init__(self, model: type[ResultT], specs: tuple[FieldSpec, ...]):
        unknown = [s.name for s in specs if s.name not in model.model_fields]
        if unknown:
            raise ValueError(f"{model.__name__} has no field(s): {', '.join(unknown)}")
        self.model = model
        self.specs = specs

    def project(self, fields: FieldMultimap) -> ResultT:
        values = {}
        for spec in self.specs:
            raw = fields.getlist(spec.source_key)
            if spec.coercion == "int":
                values[spec.name] = as_int(raw, spec.source_key)
            elif spec.coercion == "char":
                values[spec.name] = as_char(raw)
            else:
                values[spec.name] = as_str(raw)
        return self.model(**values)

    def verbose_fields(self) -> list[str]:
        return [s.name for s in self.specs if s.verbose_only]


PAYPAL_FIELDS = (
    FieldSpec("ack", "ACK"),
    FieldSpec("amount", "AMT"),
    FieldSpec("billing_agreement_id", "BILLINGAGREEMENTID"),
    FieldSpec("build", "BUILD"),
    FieldSpec("correlation_id", "CORRELATIONID"),
    FieldSpec("currency_code", "CURRENCYCODE"),
    FieldSpec("date_ordered", "ORDERTIME"),
    FieldSpec("error_code", "L_ERRORCODE0"),
    FieldSpec("error_message", "L_SHORTMESSAGE0"),
    FieldSpec("error_message_extended", "L_LONGMESSAGE0"),
    FieldSpec("severity_code", "L_SEVERITYCODE0"),
    FieldSpec("payment_status", "PAYMENTSTATUS"),
    FieldSpec("payment_type", "PAYMENTTYPE"),
    FieldSpec("pending_reason", "PENDINGREASON"),
    FieldSpec("protection_eligibility", "PROTECTIONELIGIBILITY"),
    FieldSpec("protection_eligibility_type", "PROTECTIONELIGIBILITYTYPE"),
    FieldSpec("reason_code", "REASONCODE"),
    FieldSpec("taxed_amount", "TAXAMT"),
    FieldSpec("timestamp", "TIMESTAMP"),
    FieldSpec("token", "TOKEN"),
    FieldSpec("payer_id", "PAYERID"),
    FieldSpec("profile_id", "PROFILEID"),
    FieldSpec("transaction_id", "TRANSACTIONID"),
    FieldSpec("transaction_type", "TRANSACTIONTYPE"),
    FieldSpec("version", "VERSION"),
)

PAYFLOW_FIELDS = (
    FieldSpec("additional_messages", "ADDLMSGS"),
    FieldSpec("amount", "AMT"),
    FieldSpec("amex_id", "AMEXID", verbose_only=True),
    FieldSpec("amex_pos_id", "AMEXPOSID", verbose_only=True),
    FieldSpec("auth_code", "AUTHCODE"),
    FieldSpec("avs_address", "AVSADDR"),
    FieldSpec("avs_zipcode", "AVSZIP"),
    FieldSpec("avs_international", "IAVS"),
    FieldSpec("card_type", "CARDTYPE", verbose_only=True),
    FieldSpec("correlation_id", "CORRELATIONID"),
    FieldSpec("cc_trans_id", "CCTRANSID"),
    FieldSpec("cc_trans_pos_data", "CCTRANS_POSDATA"),
    FieldSpec("cvv2_match", "CVV2MATCH", "char"),
    FieldSpec("date_to_settle", "DATE_TO_SETTLE"),
    FieldSpec("duplicate", "DUPLICATE"),
    FieldSpec("email_match", "EMAILMATCH", "char"),
    FieldSpec("extra_processor_message", "EXTRAPMSG"),
    FieldSpec("host_code", "HOSTCODE", verbose_only=True),
    FieldSpec("original_amount", "ORIGAMT"),
    FieldSpec("payment_advice_code", "PAYMENTADVICECODE"),
    FieldSpec("payment_type", "PAYMENTTYPE"),
    FieldSpec("phone_match", "PHONEMATCH", "char"),
    FieldSpec("pnref", "PNREF"),
    FieldSpec("ppref", "PPREF"),
    FieldSpec("proc_card_secure", "PROCCARDSECURE", "char", verbose_only=True),
    FieldSpec("processor_avs", "PROCAVS", "char", verbose_only=True),
    FieldSpec("processor_cvv2", "PROCCVV2", "char", verbose_only=True),
    FieldSpec("result", "RESULT", "int"),
    FieldSpec("response_message", "RESPMSG"),
    FieldSpec("response_text", "RESPTEXT", verbose_only=True),
    FieldSpec("time_of_transaction", "TRANSTIME"),
    FieldSpec("transaction_state", "TRANSSTATE", "int"),
)

paypal_projector = ResultProjector(PayPalValues, PAYPAL_FIELDS)
payflow_projector = ResultProjector(PayflowValues, PAYFLOW_FIELDS)
