"""Payment gateway factory.

``get_gateway()`` lazily builds a ``SimulatedGateway`` from the marketplace
settings; ``set_gateway()`` swaps in another implementation (tests, a real
processor) and ``reset_gateway()`` drops the override.
"""

from marketplace.config import setting
from marketplace.payments.gateway.port import ChargeResult, PaymentGateway
from marketplace.payments.gateway.simulated_adapter import SimulatedGateway

_current_gateway: PaymentGateway | None = None


def get_gateway() -> PaymentGateway:
    global _current_gateway
    if _current_gateway is None:
        _current_gateway = SimulatedGateway(
            step_delay=float(setting("PAYMENT_STEP_DELAY")),
            success_rate=float(setting("PAYMENT_SUCCESS_RATE")),
        )
    return _current_gateway


def set_gateway(gateway: PaymentGateway) -> None:
    global _current_gateway
    _current_gateway = gateway


def reset_gateway() -> None:
    global _current_gateway
    _current_gateway = None


__all__ = ["ChargeResult", "PaymentGateway", "SimulatedGateway", "get_gateway", "reset_gateway", "set_gateway"]
