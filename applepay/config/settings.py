import os
from typing import Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

from applepay.payment.apple_pay import APPLE_PAY_VERIFY_URL_PROD, APPLE_PAY_VERIFY_URL_SANDBOX

# Load environment variables from .env file
load_dotenv(dotenv_path=os.path.join(os.path.dirname(__file__), '.env'))


class AppleSettings(BaseSettings):
    # APPLE_VERIFY_TIMEOUT="" behaves like an unset variable
    model_config = SettingsConfigDict(env_ignore_empty=True)

    APPLE_SHARED_SECRET: str = os.getenv("APPLE_SHARED_SECRET", "")
    # Set explicitly to override APPLE_USE_SANDBOX
    APPLE_VERIFY_URL: Optional[str] = os.getenv("APPLE_VERIFY_URL") or None
    APPLE_USE_SANDBOX: bool = os.getenv("APPLE_USE_SANDBOX") == "true"
    APPLE_EXCLUDE_OLD_TRANSACTIONS: bool = os.getenv("APPLE_EXCLUDE_OLD_TRANSACTIONS") == "true"
    APPLE_VERIFY_TIMEOUT: Optional[float] = os.getenv("APPLE_VERIFY_TIMEOUT") or None

    def verify_url(self) -> str:
        if self.APPLE_VERIFY_URL:
            return self.APPLE_VERIFY_URL
        if self.APPLE_USE_SANDBOX:
            return APPLE_PAY_VERIFY_URL_SANDBOX
        return APPLE_PAY_VERIFY_URL_PROD


settings = AppleSettings()
