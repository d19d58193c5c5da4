"""FastAPI endpoints for payment options and the simulated gateway."""

import os

from fastapi import APIRouter, HTTPException

from marketplace.config import setting
from marketplace.payments.api.schemas import (
    ConfigureGatewayRequest,
    DonationPresetsResponse,
    GatewayConfigResponse,
    PaymentMethodResponse,
)
from marketplace.payments.gateway import SimulatedGateway, get_gateway
from marketplace.payments.methods import describe_methods
from marketplace.payments.pricing import DONATION_PRESETS

router = APIRouter(prefix="/payments", tags=["payments"])


@router.get("/methods", response_model=list[PaymentMethodResponse])
def payment_methods() -> list[PaymentMethodResponse]:
    return [PaymentMethodResponse(**method) for method in describe_methods()]


@router.get("/donation-presets", response_model=DonationPresetsResponse)
def donation_presets() -> DonationPresetsResponse:
    return DonationPresetsResponse(presets=list(DONATION_PRESETS), currency=setting("CURRENCY_LABEL"))


@router.post("/gateway/configure", response_model=GatewayConfigResponse)
def configure_gateway(body: ConfigureGatewayRequest) -> GatewayConfigResponse:
    """Make the simulated gateway succeed, fail or answer instantly (non-production only)."""
    if os.environ.get("PROTEAN_ENV") == "production":
        raise HTTPException(status_code=403, detail="Gateway configuration not available in production")

    gateway = get_gateway()
    if not isinstance(gateway, SimulatedGateway):
        raise HTTPException(status_code=400, detail="Gateway configuration only available for SimulatedGateway")

    gateway.configure(success_rate=body.success_rate, step_delay=body.step_delay)
    return GatewayConfigResponse(
        gateway=type(gateway).__name__,
        success_rate=gateway.success_rate,
        step_delay=gateway.step_delay,
    )
