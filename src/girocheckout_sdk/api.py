import logging
from functools import lru_cache

from fastapi import Depends, FastAPI, HTTPException, Request
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from .auth import TRANSACTION_RATE_LIMIT, limiter, verify_api_key
from .connectors.base import ConnectorBase, StartOptions
from .connectors.girosolution_connector import GirosolutionConnector
from .exceptions import ConfigurationError, GatewayError, ParseError, TransportError
from .responses import Outcome

logger = logging.getLogger(__name__)

app = FastAPI(title="GiroCheckout Connector - Reference API")
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@lru_cache(maxsize=1)
def get_connector() -> ConnectorBase:
    # built lazily so importing the app does not need GIROSOLUTION_* set
    return GirosolutionConnector.from_env()


def outcome_payload(outcome: Outcome) -> dict:
    payload = outcome.model_dump()
    payload["redirect"] = outcome.redirect
    return payload


def _gateway_http_error(action: str, e: GatewayError) -> HTTPException:
    if isinstance(e, ConfigurationError):
        return HTTPException(status_code=400, detail=str(e))
    if isinstance(e, (TransportError, ParseError)):
        logger.error(f"{action} failed at the gateway: {e}")
        return HTTPException(status_code=502, detail="Payment gateway unavailable")
    return HTTPException(status_code=500, detail="Internal error")


def _run(action: str, call, *args, **kwargs) -> dict:
    try:
        outcome = call(*args, **kwargs)
    except GatewayError as e:
        raise _gateway_http_error(action, e) from e
    return outcome_payload(outcome)


@app.get("/health")
async def health(connector: ConnectorBase = Depends(get_connector)):
    return connector.health_check()


@app.post("/transactions/start")
@limiter.limit(TRANSACTION_RATE_LIMIT)
def start_transaction(
    request: Request,
    body: StartOptions,
    api_key: str = Depends(verify_api_key),
    connector: ConnectorBase = Depends(get_connector),
):
    return _run("start", connector.start, body.model_dump(exclude_none=True))


@app.post("/transactions/{reference}/capture")
@limiter.limit(TRANSACTION_RATE_LIMIT)
def capture_transaction(
    request: Request,
    reference: str,
    api_key: str = Depends(verify_api_key),
    connector: ConnectorBase = Depends(get_connector),
):
    return _run("capture", connector.capture, reference)


@app.post("/transactions/{reference}/refund")
@limiter.limit(TRANSACTION_RATE_LIMIT)
def refund_transaction(
    request: Request,
    reference: str,
    api_key: str = Depends(verify_api_key),
    connector: ConnectorBase = Depends(get_connector),
):
    return _run("refund", connector.refund, reference)


@app.post("/transactions/{reference}/void")
@limiter.limit(TRANSACTION_RATE_LIMIT)
def void_transaction(
    request: Request,
    reference: str,
    api_key: str = Depends(verify_api_key),
    connector: ConnectorBase = Depends(get_connector),
):
    return _run("void", connector.void, reference)
