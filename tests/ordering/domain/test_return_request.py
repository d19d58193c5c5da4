"""Tests for the ReturnRequest aggregate."""

import pytest
from marketplace.ordering.order.order import Order, ShippingDetails
from marketplace.ordering.returns.return_request import ReturnRequest, ReturnStatus
from protean.exceptions import ValidationError


def _order():
    return Order.place(
        customer_id="cust-001",
        items=[{"product_id": "prod-1", "product_name": "Kettle", "seller_id": "seller-a", "quantity": 2, "price": 1500.0}],
        shipping=ShippingDetails(
            first_name="Sana",
            last_name="Iqbal",
            email="sana@example.pk",
            phone="0300-7654321",
            address="House 4",
            city="Islamabad",
        ),
        payment_method="card",
        total_amount=3000.0,
        final_amount=3000.0,
    )


def _request(reason="Arrived damaged"):
    order = _order()
    return ReturnRequest.request(order, order.items[0], "cust-001", reason)


class TestRequest:
    def test_refund_is_line_total(self):
        request = _request()
        assert request.refund_amount == 3000.0
        assert request.status == ReturnStatus.PENDING.value
        assert request.is_open

    def test_reason_required(self):
        with pytest.raises(ValidationError):
            _request(reason=" ")


class TestResolution:
    def test_approve(self):
        request = _request()
        request.change_status("approved", notes="Refund issued")
        assert request.status == "approved"
        assert request.resolved_at is not None
        assert not request.is_open

    def test_in_progress_then_reject(self):
        request = _request()
        request.change_status("in_progress")
        request.change_status("rejected")
        assert request.status == "rejected"

    def test_resolved_requests_are_final(self):
        request = _request()
        request.change_status("rejected")
        with pytest.raises(ValidationError):
            request.change_status("approved")
