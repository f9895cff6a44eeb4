"""Interpretation of GiroCheckout API replies."""

import json
import logging
import re
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from .exceptions import ParseError

logger = logging.getLogger(__name__)

RC_SUCCESS = 0
_INTEGER = re.compile(r"^\s*[+-]?\d+\s*$")


class Outcome(BaseModel):
    """Normalized result of a gateway call.

    A declined or rejected transaction is a normal Outcome with
    ``success=False``, not an exception.
    """
    success: bool
    message: Optional[Any] = Field(None, description="Message as sent by the gateway")
    params: Dict[str, Any] = Field(default_factory=dict, description="Parsed response body")
    authorization: Optional[Any] = Field(None, description="Transaction reference from the gateway")
    test: bool = False

    @property
    def reference(self) -> Optional[Any]:
        return self.authorization

    @property
    def redirect(self) -> Optional[str]:
        """Payment page URL, only returned by the start action."""
        return self.params.get("redirect")

    @property
    def result_code(self) -> Optional[int]:
        return result_code_from(self.params)


def parse(body: str) -> Dict[str, Any]:
    """Parse a response body into a dict.

    Raises:
        ParseError: If the body is not a JSON object.
    """
    try:
        parsed = json.loads(body)
    except (TypeError, ValueError) as e:
        raise ParseError(f"Response body is not valid JSON: {e}", body=body or "") from e
    if not isinstance(parsed, dict):
        raise ParseError(
            f"Expected a JSON object, got {type(parsed).__name__}", body=body
        )
    return parsed


def result_code_from(response: Dict[str, Any]) -> Optional[int]:
    """Return ``rc`` as an int, or None if it is missing or not numeric."""
    rc = response.get("rc")
    if isinstance(rc, bool):
        return None
    if isinstance(rc, int):
        return rc
    if isinstance(rc, float) and rc.is_integer():
        return int(rc)
    if isinstance(rc, str) and _INTEGER.match(rc):
        return int(rc)
    return None


def success_from(response: Dict[str, Any]) -> bool:
    return result_code_from(response) == RC_SUCCESS


def message_from(response: Dict[str, Any]) -> Optional[Any]:
    return response.get("message")


def authorization_from(response: Dict[str, Any]) -> Optional[Any]:
    return response.get("reference")


def interpret_response(body: str, test: bool = False) -> Outcome:
    """Turn a raw response body into an Outcome.

    Args:
        body: Raw response text.
        test: Whether the client runs against the test system.

    Returns:
        Outcome with success derived from ``rc == 0``.

    Raises:
        ParseError: If the body is not a JSON object.
    """
    response = parse(body)
    return Outcome(
        success=success_from(response),
        message=message_from(response),
        params=response,
        authorization=authorization_from(response),
        test=test,
    )
