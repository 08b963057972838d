from enum import IntEnum


class ApplePayStatus(IntEnum):
    OK = 0
    ERROR_JSON = 21000
    ERROR_RECEIPT_DATA = 21002
    ERROR_RECEIPT_INVALID = 21003
    ERROR_SHARE_PASSWORD = 21004
    ERROR_SERVER = 21005
    ERROR_RECEIPT_EXPIRED = 21006
    ERROR_RECEIPT_SANDBOX = 21007
    ERROR_RECEIPT_PROD = 21008
    ERROR_RECEIPT_NO_AUTH = 21010
    ERROR_INTERNAL_MIN = 21100
    ERROR_INTERNAL_MAX = 21199

    def __str__(self):
        return describe(self.value)


_NAMES = {
    ApplePayStatus.OK: "ApplePayStatus_OK",
    ApplePayStatus.ERROR_JSON: "ApplePayStatus_ErrorJson",
    ApplePayStatus.ERROR_RECEIPT_DATA: "ApplePayStatus_ErrorReceiptData",
    ApplePayStatus.ERROR_RECEIPT_INVALID: "ApplePayStatus_ErrorReceiptInvalid",
    ApplePayStatus.ERROR_SHARE_PASSWORD: "ApplePayStatus_ErrorSharePassword",
    ApplePayStatus.ERROR_SERVER: "ApplePayStatus_ErrorServer",
    ApplePayStatus.ERROR_RECEIPT_EXPIRED: "ApplePayStatus_ErrorReceiptExpired",
    ApplePayStatus.ERROR_RECEIPT_SANDBOX: "ApplePayStatus_ErrorReceiptSandbox",
    ApplePayStatus.ERROR_RECEIPT_PROD: "ApplePayStatus_ErrorReceiptProd",
    ApplePayStatus.ERROR_RECEIPT_NO_AUTH: "ApplePayStatus_ErrorReceiptNoAuth",
}

_DESCRIPTIONS = {
    ApplePayStatus.OK: "receipt is valid",
    ApplePayStatus.ERROR_JSON: "the App Store could not read the JSON object you provided",
    ApplePayStatus.ERROR_RECEIPT_DATA: "the receipt-data property was malformed or missing",
    ApplePayStatus.ERROR_RECEIPT_INVALID: "the receipt could not be authenticated",
    ApplePayStatus.ERROR_SHARE_PASSWORD: "the shared secret does not match the one on file for the account",
    ApplePayStatus.ERROR_SERVER: "the receipt server is not currently available",
    # Only returned for iOS 6 style receipts of auto-renewable subscriptions
    ApplePayStatus.ERROR_RECEIPT_EXPIRED: "the receipt is valid but the subscription has expired",
    ApplePayStatus.ERROR_RECEIPT_SANDBOX: "sandbox receipt sent to the production environment",
    ApplePayStatus.ERROR_RECEIPT_PROD: "production receipt sent to the sandbox environment",
    ApplePayStatus.ERROR_RECEIPT_NO_AUTH: "the receipt could not be authorized, treat as never purchased",
}


def is_internal_error(code: int) -> bool:
    return ApplePayStatus.ERROR_INTERNAL_MIN <= code <= ApplePayStatus.ERROR_INTERNAL_MAX


def describe(code: int) -> str:
    """Name of an App Store status code. Defined for every integer."""
    name = _NAMES.get(code)
    if name is not None:
        return name
    if is_internal_error(code):
        return f"ApplePayStatus_ErrorInternal<{int(code)}>"
    return "ApplePayStatus_Unknown"


def explain(code: int) -> str:
    """Human readable meaning of a status code."""
    if code in _DESCRIPTIONS:
        return _DESCRIPTIONS[code]
    if is_internal_error(code):
        return "internal data access error"
    return "unknown status"
