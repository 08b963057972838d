import json

import pytest

from applepay.payment.exceptions import ApplePayProtocolError
from applepay.payment.models import VerifyRequest, VerifyResponse


def test_request_round_trip_keeps_wire_names():
    data = VerifyRequest("R", "S").to_json()

    assert json.loads(data) == {"receipt-data": "R", "password": "S"}
    parsed = VerifyRequest.from_json(data)
    assert parsed.receipt_data == "R"
    assert parsed.password == "S"


def test_request_exclude_old_transactions_only_sent_when_set():
    payload = json.loads(VerifyRequest("R", "S", exclude_old_transactions=True).to_json())
    assert payload["exclude-old-transactions"] is True


def test_request_with_non_string_receipt_is_a_protocol_error():
    with pytest.raises(ApplePayProtocolError):
        VerifyRequest(b"R", "S").to_json()


def test_request_repr_hides_password():
    assert "S3cret" not in repr(VerifyRequest("R", "S3cret"))


def test_response_from_json():
    response = VerifyResponse.from_json(b'{"environment":"Production","is-retryable":true,"status":21005}')

    assert response.environment == "Production"
    assert response.is_retryable is True
    assert response.status == 21005


def test_response_defaults_for_missing_optional_fields():
    response = VerifyResponse.from_json('{"status": 0}')

    assert response.environment == ""
    assert response.is_retryable is False
    assert response.status == 0


@pytest.mark.parametrize(
    "body",
    [
        b"<html>oops</html>",
        b"",
        b"[1, 2]",
        b'{"environment": "Sandbox"}',
        b'{"status": "0"}',
        b'{"status": true}',
        b'{"status": 0, "is-retryable": "false"}',
        b'{"status": 21005, "is-retryable": 1}',
        b'{"status": 0, "environment": 1}',
    ],
)
def test_response_decode_failures(body):
    with pytest.raises(ApplePayProtocolError):
        VerifyResponse.from_json(body)


def test_response_null_optional_fields_use_defaults():
    response = VerifyResponse.from_json(b'{"status": 21005, "environment": null, "is-retryable": null}')

    assert response.environment == ""
    assert response.is_retryable is False
