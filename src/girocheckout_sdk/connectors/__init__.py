"""Gateway connectors."""

from .base import ConnectorBase, StartOptions
from .girosolution_connector import GirosolutionConnector, GatewayClient

__all__ = [
    "ConnectorBase",
    "StartOptions",
    "GirosolutionConnector",
    "GatewayClient",
]
