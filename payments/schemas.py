"""
Typed Result Schemas

Pydantic models for the typed view of gateway responses. Every field has a
zero-value default so a projection of a sparse (or empty) response is always
valid. Single-character indicator fields use ``NULL_CHAR`` when absent.
"""

from pydantic import BaseModel, ConfigDict

NULL_CHAR = "\x00"


class PayPalValues(BaseModel):
    """Typed view of a PayPal Classic NVP response."""

    ack: str = ""
    amount: str = ""
    billing_agreement_id: str = ""
    build: str = ""
    correlation_id: str = ""
    currency_code: str = ""
    date_ordered: str = ""
    error_code: str = ""
    error_message: str = ""
    error_message_extended: str = ""
    severity_code: str = ""
    payment_status: str = ""
    payment_type: str = ""
    pending_reason: str = ""
    protection_eligibility: str = ""
    protection_eligibility_type: str = ""
    reason_code: str = ""
    taxed_amount: str = ""
    timestamp: str = ""
    token: str = ""  # SetExpressCheckout / GetExpressCheckoutDetails
    payer_id: str = ""
    profile_id: str = ""  # recurring payments profile
    transaction_id: str = ""
    transaction_type: str = ""
    version: str = ""

    model_config = ConfigDict(frozen=True)


class PayflowValues(BaseModel):
    """Typed view of a Payflow Pro transaction response."""

    additional_messages: str = ""
    amount: str = ""
    amex_id: str = ""
    amex_pos_id: str = ""
    auth_code: str = ""
    avs_address: str = ""
    avs_zipcode: str = ""
    avs_international: str = ""
    card_type: str = ""
    correlation_id: str = ""
    cc_trans_id: str = ""
    cc_trans_pos_data: str = ""
    cvv2_match: str = NULL_CHAR
    date_to_settle: str = ""  # inquiry transactions (TRXTYPE=I) only
    # 2: ORDERID already submitted, 1: request ID already submitted,
    # -1: gateway database unavailable, duplicate status unknown
    duplicate: str = ""
    email_match: str = NULL_CHAR
    extra_processor_message: str = ""
    host_code: str = ""
    original_amount: str = ""
    # 03 or 21: merchant must stop this recurring transaction
    payment_advice_code: str = ""
    payment_type: str = ""
    phone_match: str = NULL_CHAR
    pnref: str = ""
    ppref: str = ""
    proc_card_secure: str = NULL_CHAR
    processor_avs: str = NULL_CHAR
    processor_cvv2: str = NULL_CHAR
    result: int = 0
    response_message: str = ""
    response_text: str = ""
    time_of_transaction: str = ""
    transaction_state: int = 0

    model_config = ConfigDict(frozen=True)
