"""Pydantic request/response schemas for the payments API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PaymentMethodResponse(BaseModel):
    id: str
    name: str
    description: str


class DonationPresetsResponse(BaseModel):
    presets: list[int]
    currency: str


class ConfigureGatewayRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"success_rate": 0.0, "step_delay": 0.0}]}}

    success_rate: float | None = Field(None, ge=0, le=1)
    step_delay: float | None = Field(None, ge=0)


class GatewayConfigResponse(BaseModel):
    gateway: str
    success_rate: float
    step_delay: float
