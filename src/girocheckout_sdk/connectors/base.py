from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

from ..responses import Outcome


class StartOptions(BaseModel):
    """Per-call options of the start action.

    merchant_tx_id, amount, currency and purpose override the
    account defaults when given.
    """
    model_config = ConfigDict(coerce_numbers_to_str=True)

    type: str
    locale: str
    mobile: bool
    pkn: str  # stored payment reference, or "create"
    recurring: bool
    url_redirect: str
    url_notify: str
    merchant_tx_id: Optional[str] = None
    amount: Optional[str] = None
    currency: Optional[str] = None
    purpose: Optional[str] = None


class ConnectorBase(ABC):
    """
    Minimal connector interface. Implementations should be side-effect free
    until the method makes a network call to the gateway.
    """

    @abstractmethod
    def start(self, options: Any = None, **kwargs: Any) -> Outcome:
        """
        Start (authorize) a transaction. A successful Outcome carries the
        reference used by capture, refund and void.
        """
        raise NotImplementedError

    @abstractmethod
    def capture(self, reference: str) -> Outcome:
        raise NotImplementedError

    @abstractmethod
    def refund(self, reference: str) -> Outcome:
        raise NotImplementedError

    @abstractmethod
    def void(self, reference: str) -> Outcome:
        raise NotImplementedError

    def health_check(self) -> Dict[str, Any]:
        return {"ok": True}
