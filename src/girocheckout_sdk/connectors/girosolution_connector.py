"""Girosolution (GiroCheckout) transaction connector.

Usage::

    connector = GirosolutionConnector(GatewayConfig.from_options(
        merchant_id="5103056",
        project_id="45490",
        secret="vh293izPP7De",
        merchant_tx_id="4711",
        amount=100,
        currency="EUR",
        purpose="Ihr Alvito Einkauf 4711",
    ))
    outcome = connector.start(
        type="AUTH", locale="de", mobile=True, pkn="create", recurring=False,
        url_redirect="https://alvito.com/de/checkout/after-payment/",
        url_notify="https://alvito.com/de/checkout/payment-update/",
    )
    if outcome.success:
        redirect_customer(outcome.redirect)
        connector.capture(outcome.authorization)
"""

import logging
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from ..builders import (
    TransactionContext,
    SignedRequest,
    build_start_request,
    build_capture_request,
    build_refund_request,
    build_void_request,
)
from ..config import GatewayConfig
from ..exceptions import ConfigurationError, ParseError
from ..responses import Outcome, interpret_response
from ..transport import HttpTransport, TransportBase
from .base import ConnectorBase, StartOptions

logger = logging.getLogger(__name__)


class GirosolutionConnector(ConnectorBase):
    """
    Connector for the GiroCheckout v2 transaction API. Each call builds a
    signed form, posts it to ``<base_url>/<action>`` and interprets the JSON
    reply. The connector holds no per-transaction state, so one instance can
    be shared between threads.
    """

    def __init__(self, config: GatewayConfig, transport: Optional[TransportBase] = None):
        if not isinstance(config, GatewayConfig):
            raise ConfigurationError("config must be a GatewayConfig")
        self.config = config
        self.transport = transport or HttpTransport(timeout=config.timeout)

    @classmethod
    def from_env(cls, transport: Optional[TransportBase] = None) -> "GirosolutionConnector":
        return cls(GatewayConfig.from_env(), transport=transport)

    def _defaults(self) -> TransactionContext:
        return TransactionContext(
            merchant_id=self.config.merchant_id,
            project_id=self.config.project_id,
            merchant_tx_id=self.config.merchant_tx_id,
            amount=self.config.amount,
            currency=self.config.currency,
            purpose=self.config.purpose,
        )

    def start(self, options: Union[StartOptions, Dict[str, Any], None] = None, **kwargs: Any) -> Outcome:
        if isinstance(options, StartOptions):
            options = options.model_dump(exclude_none=True)
        try:
            opts = StartOptions(**{**(options or {}), **kwargs})
        except ValidationError as e:
            fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
            raise ConfigurationError(
                f"Missing or invalid start option(s): {', '.join(fields)}"
            ) from e
        context = self._defaults().merged(opts.model_dump(exclude_none=True))
        return self._commit(build_start_request(context, self.config.secret))

    def capture(self, reference: str) -> Outcome:
        context = self._with_reference(reference)
        return self._commit(build_capture_request(context, self.config.secret))

    def refund(self, reference: str) -> Outcome:
        context = self._with_reference(reference)
        return self._commit(build_refund_request(context, self.config.secret))

    def void(self, reference: str) -> Outcome:
        context = self._with_reference(reference)
        return self._commit(build_void_request(context, self.config.secret))

    def health_check(self) -> Dict[str, Any]:
        return {"ok": True, "provider": "girosolution", "test": self.config.test}

    def _with_reference(self, reference: str) -> TransactionContext:
        if not reference:
            raise ConfigurationError("A transaction reference is required")
        return self._defaults().merged({"reference": str(reference)})

    def _commit(self, request: SignedRequest) -> Outcome:
        url = self.config.endpoint(request.action)
        merchant_tx_id = request.unsigned.get("merchantTxId")
        logger.info(f"Submitting {request.action} for merchantTxId={merchant_tx_id}")
        body = self.transport.post(url, request.fields)
        try:
            outcome = interpret_response(body, test=self.config.test)
        except ParseError as e:
            logger.error(f"{request.action} reply for merchantTxId={merchant_tx_id} is not parseable: {e}")
            raise
        if outcome.success:
            logger.info(
                f"{request.action} succeeded for merchantTxId={merchant_tx_id}, "
                f"reference={outcome.authorization}"
            )
        else:
            logger.warning(
                f"{request.action} declined for merchantTxId={merchant_tx_id}: "
                f"rc={outcome.params.get('rc')} message={outcome.message}"
            )
        return outcome


GatewayClient = GirosolutionConnector
