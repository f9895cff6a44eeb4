# girocheckout_sdk package
__version__ = "0.1.0"

from .exceptions import GatewayError, ConfigurationError, TransportError, ParseError
from .config import AccountCredentials, GatewayConfig
from .fields import FieldSet
from .signing import canonicalize, compute_hash, verify_hash
from .builders import (
    TransactionContext,
    SignedRequest,
    build_start_request,
    build_capture_request,
    build_refund_request,
    build_void_request,
)
from .responses import Outcome, interpret_response
from .transport import TransportBase, HttpTransport
from .connectors import ConnectorBase, StartOptions, GirosolutionConnector, GatewayClient
from .simulator import SimulatorTransport, SimulatorConfig
