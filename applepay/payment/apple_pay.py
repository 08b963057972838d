import logging
from typing import Optional, Tuple

import requests

from applepay.payment.apple_status import ApplePayStatus
from applepay.payment.exceptions import (
    ApplePayConfigError,
    ApplePayError,
    ApplePayHttpError,
    ApplePayProtocolError,
    ApplePayStatusError,
    ApplePayTransportError,
)
from applepay.payment.models import VerifyRequest, VerifyResponse, shorten

# Apple verification URLs
APPLE_PAY_VERIFY_URL_PROD = "https://buy.itunes.apple.com/verifyReceipt"
APPLE_PAY_VERIFY_URL_SANDBOX = "https://sandbox.itunes.apple.com/verifyReceipt"

default_logger = logging.getLogger(__name__)


class ApplePay:
    """Verifies App Store receipts against one verifyReceipt endpoint.

    An instance holds the endpoint, the app shared secret and a pooled
    ``requests.Session``; it can be shared between threads. Every call does a
    single round-trip, nothing is retried.
    """

    def __init__(
        self,
        share_password: str,
        verify_url: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        exclude_old_transactions: bool = False,
        logger: Optional[logging.Logger] = None,
    ):
        self._logger = logger or default_logger
        if not verify_url:
            self._logger.error("ApplePay verify url is empty")
            raise ApplePayConfigError("ApplePay verify url is empty")

        self._verify_url = verify_url
        self._share_password = share_password or ""
        self._timeout = timeout
        self._exclude_old_transactions = exclude_old_transactions
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

    @classmethod
    def from_settings(cls, settings, **kwargs) -> "ApplePay":
        return cls(
            settings.APPLE_SHARED_SECRET,
            settings.verify_url(),
            timeout=settings.APPLE_VERIFY_TIMEOUT,
            exclude_old_transactions=settings.APPLE_EXCLUDE_OLD_TRANSACTIONS,
            **kwargs,
        )

    @property
    def verify_url(self) -> str:
        return self._verify_url

    @property
    def share_password(self) -> str:
        return self._share_password

    @property
    def timeout(self) -> Optional[float]:
        return self._timeout

    @property
    def exclude_old_transactions(self) -> bool:
        return self._exclude_old_transactions

    def verify_receipt(self, receipt: str) -> Tuple[bool, Optional[ApplePayError]]:
        """Verify one receipt.

        Returns ``(True, None)`` when Apple answers status 0, otherwise
        ``(False, err)`` where ``err`` is the ApplePayError describing the
        failure. Configuration errors never reach here, they are raised by
        the constructor.
        """
        self._logger.info("VerifyReceipt receipt [%s]", shorten(receipt))

        request = VerifyRequest(
            receipt_data=receipt,
            password=self._share_password,
            exclude_old_transactions=self._exclude_old_transactions,
        )
        try:
            response = self.post_verify_request(request)
        except ApplePayError as err:
            self._logger.error("VerifyReceipt post verify request error [%s]", err)
            return False, err

        ok, err = self._check_status(response)
        self._logger.info("VerifyReceipt receipt [%s] ok [%s]", shorten(receipt), ok)
        return ok, err

    def _check_status(self, response: VerifyResponse) -> Tuple[bool, Optional[ApplePayError]]:
        if response.status == ApplePayStatus.OK:
            return True, None

        err = ApplePayStatusError(
            response.status,
            environment=response.environment,
            is_retryable=response.is_retryable,
            response=response,
        )
        self._logger.error(
            "%s (environment [%s] retryable [%s])", err, response.environment, response.is_retryable
        )
        return False, err

    def post_verify_request(self, request: VerifyRequest) -> VerifyResponse:
        """POST one request and decode the reply. Raises ApplePayError subclasses."""
        data = request.to_json()
        headers = {"Content-Type": "application/json"}

        try:
            http_response = self._session.post(
                self._verify_url,
                data=data,
                headers=headers,
                timeout=self._timeout,
                stream=True,
            )
        except requests.RequestException as e:
            raise ApplePayTransportError(
                f"VerifyReceipt POST to [{self._verify_url}] failed [{e}]"
            ) from e

        try:
            # http status is checked before the body is touched
            if http_response.status_code != requests.codes.ok:
                raise ApplePayHttpError(
                    f"VerifyReceipt POST to [{self._verify_url}] got response status [{http_response.status_code}]",
                    http_response.status_code,
                )

            try:
                body = http_response.content
            except requests.RequestException as e:
                raise ApplePayProtocolError(
                    f"VerifyReceipt read http response body failed [{e}]"
                ) from e
        finally:
            http_response.close()

        self._logger.debug("VerifyReceipt http response [%s]", body)
        return VerifyResponse.from_json(body)

    def close(self):
        if self._owns_session:
            self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def __repr__(self):
        return f"ApplePay(verify_url={self._verify_url!r})"