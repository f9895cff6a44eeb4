"""Shared test fixtures and configuration."""

import os
import json
import pytest
from unittest.mock import MagicMock
from typing import Dict, Any

# Set up test environment variables before importing modules
os.environ.setdefault("API_KEY", "test_api_key_12345")

from girocheckout_sdk.config import GatewayConfig
from girocheckout_sdk.connectors.girosolution_connector import GirosolutionConnector
from girocheckout_sdk.simulator import SimulatorTransport, SimulatorConfig
from girocheckout_sdk.transport import TransportBase


@pytest.fixture
def account_options() -> Dict[str, Any]:
    """Return the account options from the gateway documentation example."""
    return {
        "merchant_id": "5103056",
        "project_id": "45490",
        "secret": "vh293izPP7De",
        "merchant_tx_id": "4711",
        "amount": 100,
        "currency": "EUR",
        "purpose": "Ihr Alvito Einkauf 4711",
    }


@pytest.fixture
def gateway_config(account_options) -> GatewayConfig:
    return GatewayConfig.from_options(**account_options)


@pytest.fixture
def start_options() -> Dict[str, Any]:
    """Return valid start options."""
    return {
        "type": "AUTH",
        "locale": "de",
        "mobile": True,
        "pkn": "create",
        "recurring": False,
        "url_redirect": "https://alvito.com/de/checkout/after-payment/",
        "url_notify": "https://alvito.com/de/checkout/payment-update/",
    }


@pytest.fixture
def mock_transport():
    """Create a transport mock answering with a successful start reply."""
    transport = MagicMock(spec=TransportBase)
    transport.post.return_value = json.dumps({
        "rc": 0,
        "message": "",
        "reference": "6b65a235-e7c0-4d77-b7ee-1c7a1e0ad4e5",
        "redirect": "https://payment.girosolution.de/payment/start?tx=6b65a235",
    })
    return transport


@pytest.fixture
def connector(gateway_config, mock_transport) -> GirosolutionConnector:
    return GirosolutionConnector(gateway_config, transport=mock_transport)


@pytest.fixture
def simulator(account_options) -> SimulatorTransport:
    return SimulatorTransport(
        merchant_id=account_options["merchant_id"],
        project_id=account_options["project_id"],
        secret=account_options["secret"],
        config=SimulatorConfig(seed=42),
    )


@pytest.fixture
def simulated_connector(gateway_config, simulator) -> GirosolutionConnector:
    return GirosolutionConnector(gateway_config, transport=simulator)
