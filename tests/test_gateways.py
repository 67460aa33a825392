"""Tests for ack/result classification per gateway family."""

import pytest

from payments.endpoints import ApiFamily
from payments.errors import SERVICE_UNAVAILABLE_MESSAGE, ClassifiedError
from payments.fields import FieldMultimap
from payments.gateways import PAYFLOW, PAYPAL_NVP, get_profile
from payments.parser import parse_response


def test_nvp_success():
    assert PAYPAL_NVP.classify(FieldMultimap(ACK="Success")) is None


def test_nvp_failure_with_error_code():
    fields = FieldMultimap(
        ACK="Failure",
        L_ERRORCODE0="15005",
        L_SHORTMESSAGE0="Processor Decline",
        L_LONGMESSAGE0="This transaction cannot be processed.",
        L_SEVERITYCODE0="Error",
    )

    error = PAYPAL_NVP.classify(fields)

    assert error is not None
    assert error.code == "15005"
    assert error.ack == "Failure"
    assert error.long_message == "This transaction cannot be processed."
    assert error.severity == "Error"
    assert "Processor Decline" in error.message
    assert error.message == "PayPal Error 15005: Processor Decline"


@pytest.mark.parametrize("ack", ["failure", "FAILURE", "FailureWithWarning"])
def test_nvp_failure_acks_are_case_insensitive(ack):
    error = PAYPAL_NVP.classify(FieldMultimap(ACK=ack))
    assert error is not None
    # No code/message pair: the raw ack is the message
    assert error.message == ack


def test_nvp_error_code_wins_over_benign_ack():
    fields = FieldMultimap(
        ACK="SuccessWithWarning", L_ERRORCODE0="11607", L_SHORTMESSAGE0="Duplicate Request"
    )

    error = PAYPAL_NVP.classify(fields)

    assert error is not None
    assert error.code == "11607"


def test_nvp_empty_error_code_is_ignored():
    assert PAYPAL_NVP.classify(FieldMultimap(ACK="Success", L_ERRORCODE0="")) is None


def test_nvp_collects_every_indexed_error():
    fields = parse_response(
        "ACK=Failure"
        "&L_ERRORCODE0=10002&L_SHORTMESSAGE0=Security+error"
        "&L_ERRORCODE1=10001&L_SHORTMESSAGE1=Internal+Error&L_SEVERITYCODE1=Error"
    )

    error = PAYPAL_NVP.classify(fields)

    assert [d.code for d in error.details] == ["10002", "10001"]
    assert error.details[1].short_message == "Internal Error"
    assert error.details[1].severity == "Error"


def test_payflow_success():
    assert PAYFLOW.classify(FieldMultimap(RESULT="0", RESPMSG="Approved")) is None


def test_payflow_failure():
    error = PAYFLOW.classify(FieldMultimap(RESULT="23", RESPMSG="Invalid account number"))

    assert error is not None
    assert error.code == "23"
    assert error.short_message == "Invalid account number"
    assert error.message == "Payflow Error 23: Invalid account number"


def test_payflow_failure_without_message_uses_result():
    error = PAYFLOW.classify(FieldMultimap(RESULT="12"))
    assert error.message == "12"


@pytest.mark.parametrize("profile", [PAYPAL_NVP, PAYFLOW])
def test_empty_response_is_failure_with_fallback_message(profile):
    error = profile.classify(parse_response(b""))

    assert error is not None
    assert error.message == SERVICE_UNAVAILABLE_MESSAGE
    assert "service unavailable" in error.message.lower()


def test_message_fallback_order():
    assert ClassifiedError(ack="Failure", code="1", short_message="x").message == (
        "PayPal Error 1: x"
    )
    assert ClassifiedError(ack="Failure", code="1").message == "Failure"
    assert ClassifiedError(ack="Failure", short_message="x").message == "Failure"
    assert ClassifiedError().message == SERVICE_UNAVAILABLE_MESSAGE
    assert str(ClassifiedError(ack="Failure")) == "Failure"


def test_build_response_copies_header_fields():
    fields = parse_response(
        "ACK=Success&CORRELATIONID=abc123&TIMESTAMP=2024-01-05T10:15:00Z"
        "&VERSION=204&BUILD=2975009"
    )

    response = PAYPAL_NVP.build_response(fields, used_sandbox=True)

    assert response.ok
    assert response.status == "Success"
    assert response.correlation_id == "abc123"
    assert response.version == "204"
    assert response.build == "2975009"
    assert response.used_sandbox is True
    assert response.family == ApiFamily.nvp
    response.raise_for_ack()


def test_build_response_carries_error_exactly_once():
    response = PAYFLOW.build_response(
        FieldMultimap(RESULT="4", RESPMSG="Invalid amount"), used_sandbox=False
    )

    assert not response.ok
    assert response.status == "4"
    assert response.message == "Invalid amount"
    assert response.error.code == "4"


def test_get_profile_accepts_string_family():
    assert get_profile("payflow") is PAYFLOW
    assert get_profile(ApiFamily.nvp) is PAYPAL_NVP
