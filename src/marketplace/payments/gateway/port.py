"""Payment gateway port (abstract interface).

Checkout and direct donations charge through this contract, so the
simulated gateway used today can be replaced by a real wallet or card
processor without touching the handlers.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass

PAYMENT_STEPS = (
    "Validating payment method...",
    "Processing payment...",
    "Verifying transaction...",
    "Confirming order...",
)

PAYMENT_FAILED_MESSAGE = "Payment failed. Please try again."

# Receives (step index starting at 1, total steps, step label)
StepCallback = Callable[[int, int, str], None]


@dataclass(frozen=True)
class ChargeResult:
    """Outcome of a payment attempt."""

    success: bool
    method: str
    amount: float
    transaction_id: str | None = None
    timestamp: str | None = None
    failure_reason: str | None = None


class PaymentGateway(ABC):
    @abstractmethod
    def charge(
        self,
        amount: float,
        method: str,
        details: dict | None = None,
        on_step: StepCallback | None = None,
    ) -> ChargeResult:
        """Charge ``amount`` using ``method``."""
        ...
