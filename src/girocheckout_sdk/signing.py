"""HMAC-MD5 request hash used by the GiroCheckout API.

The gateway verifies each request by recomputing an HMAC over the
concatenated field values. MD5 is what the remote side expects; it is kept
for wire compatibility.
"""

import hashlib
import hmac

from .exceptions import ConfigurationError
from .fields import FieldSet


def canonicalize(field_set: FieldSet) -> bytes:
    """Concatenate field values in insertion order, without names or separators."""
    return "".join(field_set.values()).encode("utf-8")


def compute_hash(field_set: FieldSet, secret: str) -> str:
    """Return the lowercase hex HMAC-MD5 of the field values.

    Args:
        field_set: Fields to sign, in the order they were set.
        secret: The project secret shared with the gateway.

    Returns:
        32 character hex digest.

    Raises:
        ConfigurationError: If the secret is empty.
    """
    if not secret:
        raise ConfigurationError("Project secret must not be empty")
    return hmac.new(
        secret.encode("utf-8"), canonicalize(field_set), hashlib.md5
    ).hexdigest()


def verify_hash(field_set: FieldSet, secret: str, candidate: str) -> bool:
    """Check a received hash against the one computed for ``field_set``."""
    expected = compute_hash(field_set, secret)
    return hmac.compare_digest(expected, (candidate or "").lower())
