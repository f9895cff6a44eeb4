"""In-memory stand-in for the GiroCheckout API, for tests and local runs."""

import json
import logging
import random
import time
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .builders import HASH_FIELD
from .exceptions import TransportError
from .fields import FieldSet
from .signing import verify_hash
from .transport import TransportBase

logger = logging.getLogger(__name__)

RC_OK = 0
RC_DECLINED = 4900
RC_AUTH_FAILED = 5000
RC_INVALID_HASH = 5002
RC_MISSING_PARAMETER = 5010
RC_INVALID_PARAMETER = 5011
RC_UNKNOWN_ACTION = 5020
RC_NOT_FOUND = 5100
RC_INVALID_STATE = 5101


class SimulatorScenario(str, Enum):
    """Predefined test scenarios for the simulator."""
    SUCCESS = "success"
    DECLINE = "decline"
    TIMEOUT = "timeout"
    MALFORMED = "malformed"


@dataclass
class SimulatedTransaction:
    """In-memory representation of a simulated transaction."""
    reference: str
    merchant_tx_id: str
    amount: int
    currency: str
    status: str
    created_at: datetime = field(default_factory=datetime.utcnow)
    pkn: Optional[str] = None


@dataclass
class SimulatorConfig:
    """Configuration for simulator behavior."""
    success_rate: float = 1.0  # 0.0 to 1.0
    delay_ms: int = 0  # Simulated response delay in ms
    seed: Optional[int] = None  # Random seed for reproducibility
    redirect_base: str = "https://payment.girosolution.de/payment/start"


class SimulatorTransport(TransportBase):
    """
    Fake gateway behind the TransportBase interface.

    Features:
    - Hash verification of every request against the project secret
    - In-memory transaction lifecycle (start, capture, refund, void)
    - Configurable decline rate and response delay
    - Special merchantTxId values for specific scenarios
    """

    # Special merchantTxId values for triggering specific behaviors
    TX_DECLINE = "sim_decline"
    TX_TIMEOUT = "sim_timeout"
    TX_MALFORMED = "sim_malformed"

    def __init__(self, merchant_id: str, project_id: str, secret: str,
                 config: Optional[SimulatorConfig] = None):
        self.merchant_id = str(merchant_id)
        self.project_id = str(project_id)
        self._secret = secret
        self.config = config or SimulatorConfig()
        self._transactions: Dict[str, SimulatedTransaction] = {}
        self._rng = random.Random(self.config.seed)
        self.requests: List[Tuple[str, List[Tuple[str, str]]]] = []
        logger.info("SimulatorTransport initialized")

    def get_transaction(self, reference: str) -> Optional[SimulatedTransaction]:
        return self._transactions.get(reference)

    def _apply_delay(self) -> None:
        if self.config.delay_ms > 0:
            time.sleep(self.config.delay_ms / 1000.0)

    def _determine_scenario(self, merchant_tx_id: str) -> SimulatorScenario:
        tx_scenarios = {
            self.TX_DECLINE: SimulatorScenario.DECLINE,
            self.TX_TIMEOUT: SimulatorScenario.TIMEOUT,
            self.TX_MALFORMED: SimulatorScenario.MALFORMED,
        }
        if merchant_tx_id in tx_scenarios:
            return tx_scenarios[merchant_tx_id]
        if self._rng.random() >= self.config.success_rate:
            return SimulatorScenario.DECLINE
        return SimulatorScenario.SUCCESS

    @staticmethod
    def _reply(rc: int, message: str, **extra) -> str:
        return json.dumps({"rc": rc, "message": message, **extra})

    def post(self, url: str, fields: List[Tuple[str, str]]) -> str:
        self._apply_delay()
        fields = list(fields)
        self.requests.append((url, fields))
        action = url.rstrip("/").rsplit("/", 1)[-1]

        unsigned = FieldSet.from_pairs((k, v) for k, v in fields if k != HASH_FIELD)
        received_hash = dict(fields).get(HASH_FIELD, "")
        if not verify_hash(unsigned, self._secret, received_hash):
            logger.warning(f"Simulator rejected {action}: invalid hash")
            return self._reply(RC_INVALID_HASH, "invalid hash")
        if unsigned.get("merchantId") != self.merchant_id or unsigned.get("projectId") != self.project_id:
            return self._reply(RC_AUTH_FAILED, "authentication failed")

        scenario = self._determine_scenario(unsigned.get("merchantTxId", ""))
        if scenario == SimulatorScenario.TIMEOUT:
            raise TransportError("Simulated timeout")
        if scenario == SimulatorScenario.MALFORMED:
            return "<html>Service Unavailable</html>"
        if scenario == SimulatorScenario.DECLINE:
            return self._reply(RC_DECLINED, "transaction declined")

        handlers = {
            "start": self._start,
            "capture": self._capture,
            "refund": self._refund,
            "void": self._void,
        }
        handler = handlers.get(action)
        if handler is None:
            return self._reply(RC_UNKNOWN_ACTION, f"unknown action {action}")
        return handler(unsigned)

    def _start(self, fields: FieldSet) -> str:
        missing = [
            name for name in ("merchantTxId", "amount", "currency", "type", "urlRedirect", "urlNotify")
            if name not in fields
        ]
        if missing:
            return self._reply(RC_MISSING_PARAMETER, f"missing parameter {missing[0]}")
        if not fields.get("amount").isdigit():
            return self._reply(RC_INVALID_PARAMETER, "invalid parameter amount")
        reference = uuid.uuid4().hex
        status = "captured" if fields.get("type") == "SALE" else "authorized"
        self._transactions[reference] = SimulatedTransaction(
            reference=reference,
            merchant_tx_id=fields.get("merchantTxId"),
            amount=int(fields.get("amount")),
            currency=fields.get("currency"),
            status=status,
            pkn=fields.get("pkn"),
        )
        return self._reply(
            RC_OK, "OK", reference=reference,
            redirect=f"{self.config.redirect_base}?tx={reference}",
        )

    def _transition(self, fields: FieldSet, from_status: str, to_status: str) -> str:
        reference = fields.get("reference")
        txn = self._transactions.get(reference)
        if txn is None:
            return self._reply(RC_NOT_FOUND, "transaction not found", reference=reference)
        if txn.status != from_status:
            return self._reply(
                RC_INVALID_STATE, f"transaction is {txn.status}", reference=reference
            )
        txn.status = to_status
        return self._reply(RC_OK, "OK", reference=reference)

    def _capture(self, fields: FieldSet) -> str:
        return self._transition(fields, "authorized", "captured")

    def _refund(self, fields: FieldSet) -> str:
        return self._transition(fields, "captured", "refunded")

    def _void(self, fields: FieldSet) -> str:
        return self._transition(fields, "authorized", "voided")
