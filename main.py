import argparse
import logging
import sys

from applepay.config.settings import settings
from applepay.payment.apple_pay import APPLE_PAY_VERIFY_URL_SANDBOX, ApplePay

logging.basicConfig(
    level=logging.INFO,  # Set logging level
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",  # Log format
)
logger = logging.getLogger("main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Verify an App Store receipt")
    parser.add_argument("receipt", help="base64 encoded receipt")
    parser.add_argument("--sandbox", action="store_true", help=f"use {APPLE_PAY_VERIFY_URL_SANDBOX}")
    parser.add_argument("--url", help="verify url, defaults to APPLE_VERIFY_URL / APPLE_USE_SANDBOX")
    parser.add_argument("--secret", help="app shared secret, defaults to APPLE_SHARED_SECRET")
    return parser


def build_verifier(args) -> ApplePay:
    if args.url is None and args.secret is None and not args.sandbox:
        return ApplePay.from_settings(settings)

    if args.url:
        url = args.url
    elif args.sandbox:
        url = APPLE_PAY_VERIFY_URL_SANDBOX
    else:
        url = settings.verify_url()
    secret = args.secret if args.secret is not None else settings.APPLE_SHARED_SECRET
    return ApplePay(
        secret,
        url,
        timeout=settings.APPLE_VERIFY_TIMEOUT,
        exclude_old_transactions=settings.APPLE_EXCLUDE_OLD_TRANSACTIONS,
    )


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    with build_verifier(args) as pay:
        ok, err = pay.verify_receipt(args.receipt)

    if err is not None:
        logger.error("apple pay receipt verify error [%s]", err)
        return 1
    logger.info("apple pay receipt verify ok [%s]", ok)
    return 0


if __name__ == "__main__":
    sys.exit(main())
