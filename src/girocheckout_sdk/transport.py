"""HTTPS transport for form-encoded gateway requests."""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

import requests

from .exceptions import TransportError

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
REQUEST_HEADERS = {
    "Content-Type": FORM_CONTENT_TYPE,
    "Accept": "application/json",
}


class TransportBase(ABC):
    """Posts an ordered form to a URL and returns the raw response text."""

    @abstractmethod
    def post(self, url: str, fields: List[Tuple[str, str]]) -> str:
        raise NotImplementedError


class HttpTransport(TransportBase):
    """requests-based transport.

    Timeouts and TLS are left to requests; any failure, including a
    non-2xx status, is raised as TransportError.
    """

    def __init__(self, timeout: float = 30.0, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.session = session or requests.Session()

    def post(self, url: str, fields: List[Tuple[str, str]]) -> str:
        try:
            # a list of pairs keeps the signed order in the encoded body
            resp = self.session.post(
                url, data=list(fields), headers=REQUEST_HEADERS, timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"POST {url} failed: {e}")
            raise TransportError(f"Request to {url} failed: {e}") from e
        if not 200 <= resp.status_code < 300:
            logger.error(f"POST {url} returned HTTP {resp.status_code}")
            raise TransportError(
                f"Gateway returned HTTP {resp.status_code}", status_code=resp.status_code
            )
        return resp.text

    def close(self) -> None:
        self.session.close()
