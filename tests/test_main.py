from unittest.mock import patch

import main
from applepay.payment.apple_pay import APPLE_PAY_VERIFY_URL_SANDBOX, ApplePay
from applepay.payment.exceptions import ApplePayStatusError


def test_main_ok():
    with patch.object(ApplePay, "verify_receipt", return_value=(True, None)) as verify:
        assert main.main(["MIIbWQYJKoZIhvcNAQcCoIIbSjCCG0YCAQExCzAJBgUrDgMCGgUA==", "--sandbox"]) == 0

    verify.assert_called_once_with("MIIbWQYJKoZIhvcNAQcCoIIbSjCCG0YCAQExCzAJBgUrDgMCGgUA==")


def test_main_reports_failure():
    with patch.object(ApplePay, "verify_receipt", return_value=(False, ApplePayStatusError(21007))):
        assert main.main(["R", "--secret", "A0sd1Fw9df0"]) == 1


def test_build_verifier_from_arguments():
    args = main.build_parser().parse_args(["R", "--sandbox", "--secret", "A0sd1Fw9df0"])

    with main.build_verifier(args) as pay:
        assert pay.verify_url == APPLE_PAY_VERIFY_URL_SANDBOX
        assert pay.share_password == "A0sd1Fw9df0"
