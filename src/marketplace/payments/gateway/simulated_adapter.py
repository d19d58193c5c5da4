"""Simulated payment gateway.

No money moves. The gateway walks through the four payment steps with a
fixed pause after each one and then succeeds or fails at random, which is
how the storefront demonstrates EasyPaisa, JazzCash, card and cash on
delivery payments. Delay, success rate and the random source are all
configurable so tests and the ``/payments/gateway/configure`` endpoint can
make the outcome predictable.
"""

import random
import time
from datetime import UTC, datetime

import structlog

from marketplace.payments.gateway.port import (
    PAYMENT_FAILED_MESSAGE,
    PAYMENT_STEPS,
    ChargeResult,
    PaymentGateway,
    StepCallback,
)

logger = structlog.get_logger(__name__)


class SimulatedGateway(PaymentGateway):
    def __init__(
        self,
        step_delay: float = 1.0,
        success_rate: float = 0.9,
        rng: random.Random | None = None,
        sleep=time.sleep,
    ) -> None:
        self.step_delay = step_delay
        self.success_rate = success_rate
        self.rng = rng or random.Random()
        self._sleep = sleep
        self.calls: list[dict] = []

    def configure(self, success_rate: float | None = None, step_delay: float | None = None) -> None:
        """Change gateway behaviour at runtime."""
        if success_rate is not None:
            if not 0 <= success_rate <= 1:
                raise ValueError("success_rate must be between 0 and 1")
            self.success_rate = success_rate
        if step_delay is not None:
            if step_delay < 0:
                raise ValueError("step_delay cannot be negative")
            self.step_delay = step_delay

    def charge(
        self,
        amount: float,
        method: str,
        details: dict | None = None,
        on_step: StepCallback | None = None,
    ) -> ChargeResult:
        self.calls.append({"amount": amount, "method": method})

        for index, label in enumerate(PAYMENT_STEPS, start=1):
            if on_step is not None:
                on_step(index, len(PAYMENT_STEPS), label)
            if self.step_delay:
                self._sleep(self.step_delay)

        if self.rng.random() < self.success_rate:
            now = datetime.now(UTC)
            result = ChargeResult(
                success=True,
                method=method,
                amount=amount,
                transaction_id=f"TXN{int(now.timestamp() * 1000)}",
                timestamp=now.isoformat(),
            )
            logger.info("payment_succeeded", method=method, amount=amount, transaction_id=result.transaction_id)
            return result

        logger.warning("payment_declined", method=method, amount=amount)
        return ChargeResult(success=False, method=method, amount=amount, failure_reason=PAYMENT_FAILED_MESSAGE)
