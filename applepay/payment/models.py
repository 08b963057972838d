import json

from applepay.payment.exceptions import ApplePayProtocolError


class VerifyRequest:
    receipt_data: str
    password: str
    exclude_old_transactions: bool

    def __init__(self, receipt_data: str, password: str = "", exclude_old_transactions: bool = False):
        self.receipt_data = receipt_data
        self.password = password
        # Use this only for app receipts that contain auto-renewable subscriptions
        self.exclude_old_transactions = exclude_old_transactions

    def to_dict(self) -> dict:
        payload = {
            "receipt-data": self.receipt_data,  # The base64-encoded receipt
            "password": self.password,
        }
        if self.exclude_old_transactions:
            payload["exclude-old-transactions"] = True
        return payload

    def to_json(self) -> str:
        if not isinstance(self.receipt_data, str) or not isinstance(self.password, str):
            raise ApplePayProtocolError(
                f"VerifyReceipt cannot encode request, receipt-data and password must be str "
                f"(got {type(self.receipt_data).__name__}, {type(self.password).__name__})"
            )
        try:
            return json.dumps(self.to_dict())
        except (TypeError, ValueError) as e:
            raise ApplePayProtocolError(f"VerifyReceipt json encode request failed [{e}]") from e

    @classmethod
    def from_json(cls, data: str) -> "VerifyRequest":
        payload = json.loads(data)
        return cls(
            receipt_data=payload.get("receipt-data", ""),
            password=payload.get("password", ""),
            exclude_old_transactions=bool(payload.get("exclude-old-transactions", False)),
        )

    def __repr__(self):
        # password stays out of logs
        return f"VerifyRequest(receipt_data={shorten(self.receipt_data)!r}, password=***)"


class VerifyResponse:
    environment: str
    is_retryable: bool
    status: int

    def __init__(self, environment: str, is_retryable: bool, status: int, raw: dict = None):
        self.environment = environment
        self.is_retryable = is_retryable
        self.status = status
        self.raw = raw if raw is not None else {}

    @classmethod
    def from_dict(cls, payload) -> "VerifyResponse":
        if not isinstance(payload, dict):
            raise ApplePayProtocolError(f"VerifyReceipt response is not a JSON object [{payload!r}]")

        status = payload.get("status")
        # bool is an int subclass, it is not a status
        if not isinstance(status, int) or isinstance(status, bool):
            raise ApplePayProtocolError(f"VerifyReceipt response has no integer status [{status!r}]")

        # null or missing fall back to the zero value
        environment = payload.get("environment")
        if environment is None:
            environment = ""
        elif not isinstance(environment, str):
            raise ApplePayProtocolError(f"VerifyReceipt response environment is not a string [{environment!r}]")

        is_retryable = payload.get("is-retryable")
        if is_retryable is None:
            is_retryable = False
        elif not isinstance(is_retryable, bool):
            raise ApplePayProtocolError(f"VerifyReceipt response is-retryable is not a boolean [{is_retryable!r}]")

        return cls(
            environment=environment,
            is_retryable=is_retryable,
            status=status,
            raw=payload,
        )

    @classmethod
    def from_json(cls, body) -> "VerifyResponse":
        try:
            payload = json.loads(body)
        except ValueError as e:
            raise ApplePayProtocolError(f"VerifyReceipt json decode response body failed [{e}]") from e
        return cls.from_dict(payload)

    def __repr__(self):
        return (
            f"VerifyResponse(environment={self.environment!r}, "
            f"is_retryable={self.is_retryable!r}, status={self.status!r})"
        )


def shorten(value, limit: int = 32):
    if not isinstance(value, str) or len(value) <= limit:
        return value
    return value[:limit] + "..."
