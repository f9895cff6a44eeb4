"""Signed request builders for the four transaction actions."""

from typing import Any, Dict, List, Optional, Tuple, Union
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, ValidationError

from .exceptions import ConfigurationError
from .fields import FieldSet, stringify
from .signing import compute_hash

HASH_FIELD = "hash"

# (wire name, context attribute)
BASE_FIELDS = [
    ("merchantId", "merchant_id"),
    ("projectId", "project_id"),
    ("merchantTxId", "merchant_tx_id"),
    ("amount", "amount"),
    ("currency", "currency"),
]
START_FIELDS = [
    ("purpose", "purpose"),
    ("type", "type"),
    ("locale", "locale"),
    ("mobile", "mobile"),
    ("pkn", "pkn"),
    ("recurring", "recurring"),
    ("urlRedirect", "url_redirect"),
    ("urlNotify", "url_notify"),
]
REFERENCE_FIELDS = [
    ("reference", "reference"),
]
# Void carries no amount/currency, unlike capture and refund.
VOID_FIELDS = [
    ("merchantId", "merchant_id"),
    ("projectId", "project_id"),
    ("merchantTxId", "merchant_tx_id"),
    ("reference", "reference"),
]


class TransactionContext(BaseModel):
    """All fields that can describe one transaction request."""
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    merchant_id: Optional[str] = None
    project_id: Optional[str] = None
    merchant_tx_id: Optional[str] = None
    amount: Optional[str] = None
    currency: Optional[str] = None
    purpose: Optional[str] = None
    type: Optional[str] = None
    locale: Optional[str] = None
    mobile: Optional[bool] = None
    pkn: Optional[str] = None
    recurring: Optional[bool] = None
    url_redirect: Optional[str] = None
    url_notify: Optional[str] = None
    reference: Optional[str] = None

    def merged(self, overrides: Union["TransactionContext", Dict[str, Any], None]) -> "TransactionContext":
        """Return a new context with non-None ``overrides`` applied on top."""
        if overrides is None:
            return self
        if isinstance(overrides, TransactionContext):
            updates = overrides.model_dump(exclude_none=True)
        else:
            updates = {k: v for k, v in overrides.items() if v is not None}
        data = self.model_dump()
        data.update(updates)
        try:
            return TransactionContext(**data)
        except ValidationError as e:
            fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
            raise ConfigurationError(
                f"Invalid transaction field(s): {', '.join(fields)}"
            ) from e


class SignedRequest:
    """Request fields followed by the hash computed over them."""

    def __init__(self, action: str, field_set: FieldSet, hash_value: str):
        self.action = action
        self.unsigned = field_set
        self.hash = hash_value

    @classmethod
    def sign(cls, action: str, field_set: FieldSet, secret: str) -> "SignedRequest":
        return cls(action, field_set.copy(), compute_hash(field_set, secret))

    @property
    def fields(self) -> List[Tuple[str, str]]:
        return self.unsigned.items() + [(HASH_FIELD, self.hash)]

    def as_dict(self) -> Dict[str, str]:
        return dict(self.fields)

    def as_form(self) -> str:
        return urlencode(self.fields)

    def __repr__(self) -> str:
        return f"SignedRequest(action={self.action!r}, fields={self.unsigned.names()!r})"


def _require(context: TransactionContext, layout: List[Tuple[str, str]]) -> None:
    missing = [
        attr for _, attr in layout
        if not stringify(getattr(context, attr))
    ]
    if missing:
        raise ConfigurationError(f"Missing required field(s): {', '.join(missing)}")


def _build(action: str, context: TransactionContext, layout, secret: str) -> SignedRequest:
    _require(context, layout)
    field_set = FieldSet()
    for name, attr in layout:
        field_set.set(name, getattr(context, attr))
    return SignedRequest.sign(action, field_set, secret)


def build_start_request(context: TransactionContext, secret: str) -> SignedRequest:
    """Build the request that starts (authorizes) a transaction.

    ``pkn`` is either a stored payment reference or the literal ``"create"``
    to register a new one.
    """
    return _build("start", context, BASE_FIELDS + START_FIELDS, secret)


def build_capture_request(context: TransactionContext, secret: str) -> SignedRequest:
    return _build("capture", context, BASE_FIELDS + REFERENCE_FIELDS, secret)


def build_refund_request(context: TransactionContext, secret: str) -> SignedRequest:
    return _build("refund", context, BASE_FIELDS + REFERENCE_FIELDS, secret)


def build_void_request(context: TransactionContext, secret: str) -> SignedRequest:
    return _build("void", context, VOID_FIELDS, secret)


BUILDERS = {
    "start": build_start_request,
    "capture": build_capture_request,
    "refund": build_refund_request,
    "void": build_void_request,
}
