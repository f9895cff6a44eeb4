"""Account configuration for the Girosolution gateway."""

import os
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigurationError

LIVE_URL = "https://payment.girosolution.de/girocheckout/api/v2/transaction/"
TEST_URL = "https://payment.girosolution.de/girocheckout/api/v2/transaction/"

SUPPORTED_COUNTRIES = ["DE"]
DEFAULT_CURRENCY = "EUR"
MONEY_FORMAT = "cents"
SUPPORTED_CARDTYPES = ["visa", "master"]
HOMEPAGE_URL = "https://www.girosolution.de"
DISPLAY_NAME = "girosolution.de"

# option name -> environment variable
ENV_VARS = {
    "merchant_id": "GIROSOLUTION_MERCHANT_ID",
    "project_id": "GIROSOLUTION_PROJECT_ID",
    "secret": "GIROSOLUTION_SECRET",
    "merchant_tx_id": "GIROSOLUTION_MERCHANT_TX_ID",
    "amount": "GIROSOLUTION_AMOUNT",
    "currency": "GIROSOLUTION_CURRENCY",
    "purpose": "GIROSOLUTION_PURPOSE",
    "base_url": "GIROSOLUTION_BASE_URL",
    "test": "GIROSOLUTION_TEST",
    "timeout": "GIROSOLUTION_TIMEOUT",
}


class AccountCredentials(BaseModel):
    """Merchant, project and shared secret identifying the account."""
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    merchant_id: str = Field(..., min_length=1)
    project_id: str = Field(..., min_length=1)
    secret: str = Field(..., min_length=1, repr=False)


class GatewayConfig(BaseModel):
    """Immutable client configuration: credentials plus transaction defaults.

    The defaults (merchant_tx_id, amount, currency, purpose) are merged into
    every request; call options override them.
    """
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    merchant_id: str = Field(..., min_length=1)
    project_id: str = Field(..., min_length=1)
    secret: str = Field(..., min_length=1, repr=False)
    merchant_tx_id: str = Field(..., min_length=1)
    amount: str = Field(..., min_length=1, description="Amount in minor units")
    currency: str = Field(..., min_length=1)
    purpose: str = Field(..., min_length=1)
    base_url: str = LIVE_URL
    test: bool = False
    timeout: float = Field(default=30.0, gt=0)

    @classmethod
    def from_options(cls, **options: Any) -> "GatewayConfig":
        """Build a config from keyword options.

        Raises:
            ConfigurationError: If a required option is missing or invalid.
        """
        try:
            return cls(**options)
        except ValidationError as e:
            fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
            raise ConfigurationError(
                f"Invalid gateway configuration: {', '.join(fields)}"
            ) from e

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "GatewayConfig":
        """Build a config from GIROSOLUTION_* environment variables."""
        environ = os.environ if environ is None else environ
        options = {}
        for option, var in ENV_VARS.items():
            value = environ.get(var)
            if value:
                options[option] = value
        return cls.from_options(**options)

    @property
    def credentials(self) -> AccountCredentials:
        return AccountCredentials(
            merchant_id=self.merchant_id,
            project_id=self.project_id,
            secret=self.secret,
        )

    def endpoint(self, action: str) -> str:
        return f"{self.base_url.rstrip('/')}/{action}"
