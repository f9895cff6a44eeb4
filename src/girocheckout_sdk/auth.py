"""Bearer-token guard and rate limiting for the reference API."""

import os
import secrets
import logging

from fastapi import HTTPException, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from slowapi import Limiter
from slowapi.util import get_remote_address

logger = logging.getLogger(__name__)

API_KEY_ENV = "API_KEY"
TRANSACTION_RATE_LIMIT = "30/minute"

bearer_scheme = HTTPBearer()

# Keyed by client address; the limit applies per transaction endpoint.
limiter = Limiter(key_func=get_remote_address)


async def verify_api_key(credentials: HTTPAuthorizationCredentials = Security(bearer_scheme)) -> str:
    """Check the bearer token of a transaction call against API_KEY.

    The gateway secret is never accepted here; callers of the reference API
    hold their own key.

    Raises:
        HTTPException: 500 when API_KEY is unset, 401 when the token differs.
    """
    expected = os.getenv(API_KEY_ENV)
    if not expected:
        logger.error(f"{API_KEY_ENV} is not configured; refusing transaction calls")
        raise HTTPException(status_code=500, detail="Server configuration error")
    if not secrets.compare_digest(credentials.credentials.encode(), expected.encode()):
        logger.warning("Rejected transaction call with an invalid API key")
        raise HTTPException(status_code=401, detail="Invalid API key")
    return credentials.credentials
