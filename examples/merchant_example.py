"""
Simple merchant usage example (server-side). The merchant starts a
transaction, sends the customer to the returned payment page, and later
captures, refunds or voids it using the reference from the start reply.

Set GIROSOLUTION_SIMULATE=1 to run against the in-memory simulator.
"""
import os
from girocheckout_sdk.config import GatewayConfig
from girocheckout_sdk.connectors.girosolution_connector import GirosolutionConnector
from girocheckout_sdk.simulator import SimulatorTransport


def run():
    config = GatewayConfig.from_options(
        merchant_id=os.getenv("GIROSOLUTION_MERCHANT_ID", "5103056"),
        project_id=os.getenv("GIROSOLUTION_PROJECT_ID", "45490"),
        secret=os.getenv("GIROSOLUTION_SECRET", "vh293izPP7De"),
        merchant_tx_id="4711",
        amount=100,
        currency="EUR",
        purpose="Ihr Alvito Einkauf 4711",
    )
    transport = None
    if os.getenv("GIROSOLUTION_SIMULATE"):
        transport = SimulatorTransport(config.merchant_id, config.project_id, config.secret)
    connector = GirosolutionConnector(config, transport=transport)

    resp = connector.start(
        type="AUTH",
        locale="de",
        mobile=True,
        pkn="create",
        recurring=False,
        url_redirect="https://alvito.com/de/checkout/after-payment/",
        url_notify="https://alvito.com/de/checkout/payment-update/",
    )
    print("Start:", resp.success, resp.message, resp.authorization, resp.redirect)
    if not resp.success:
        return

    resp = connector.capture(resp.authorization)
    print("Capture:", resp.model_dump_json())


if __name__ == "__main__":
    run()
