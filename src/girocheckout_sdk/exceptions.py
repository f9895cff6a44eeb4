"""Exceptions raised by the Girosolution client."""


class GatewayError(Exception):
    """Base class for all client-side gateway errors."""


class ConfigurationError(GatewayError, ValueError):
    """A required account or per-call field is missing or invalid.

    Raised before anything is sent over the wire.
    """


class TransportError(GatewayError):
    """The HTTPS round trip to the gateway failed."""

    def __init__(self, message: str, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(GatewayError, ValueError):
    """The gateway replied with a body that is not a JSON object."""

    def __init__(self, message: str, body: str = ""):
        super().__init__(message)
        self.body = body
