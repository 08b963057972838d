from applepay.payment.apple_status import describe


class ApplePayError(Exception):
    pass


class ApplePayConfigError(ApplePayError, ValueError):
    pass


class ApplePayTransportError(ApplePayError):
    """POST to the verify url did not complete (DNS, connect, TLS, timeout)."""


class ApplePayHttpError(ApplePayError):
    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class ApplePayProtocolError(ApplePayError):
    """Request could not be encoded or the response body could not be read or decoded."""


class ApplePayStatusError(ApplePayError):
    """Well formed reply from Apple carrying a non zero status."""

    def __init__(self, status: int, environment: str = "", is_retryable: bool = False, response=None):
        self.status = status
        self.environment = environment
        self.is_retryable = is_retryable
        self.response = response
        super().__init__(f"VerifyReceipt got verify response status [{describe(status)}] => [{int(status)}]")

    @property
    def name(self) -> str:
        return describe(self.status)
