from datetime import UTC, datetime, timedelta

import pytest
from marketplace.identity.seller.registration import RegisterSeller
from marketplace.ordering.order.fulfillment import UpdateOrderStatus
from marketplace.ordering.order.history import customer_order, customer_orders
from marketplace.ordering.order.order import Order
from marketplace.ordering.returns.handling import RequestReturn, ResolveReturn, customer_returns, seller_returns
from marketplace.ordering.returns.return_request import ReturnRequest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError


@pytest.fixture()
def order_id(product_id, fill_cart, place_order):
    fill_cart(product_id, 2)
    return place_order()


def _order(order_id):
    return current_domain.repository_for(Order).get(order_id)


def _request_return(customer, order_id, reason="Screen arrived cracked"):
    item_id = _order(order_id).items[0].id
    return current_domain.process(
        RequestReturn(customer_id=customer["id"], order_id=order_id, order_item_id=item_id, reason=reason),
        asynchronous=False,
    )


class TestFulfillment:
    def test_seller_moves_order_to_delivered(self, order_id, deliver):
        deliver(order_id)
        order = _order(order_id)
        assert order.status == "delivered"
        assert order.delivered_at is not None

    def test_cod_is_paid_on_delivery(self, product_id, fill_cart, place_order, deliver):
        fill_cart(product_id)
        order_id = place_order(payment_method="cod", payment_details='{"name": "Sana", "phone": "0300-7654321"}')
        deliver(order_id)
        assert _order(order_id).payment_status == "paid"

    def test_other_seller_cannot_touch_the_order(self, order_id, sign_up):
        user, _ = sign_up(email="bilal@example.pk", full_name="Bilal Ahmed")
        other_seller = current_domain.process(
            RegisterSeller(
                user_id=user.id,
                email=user.email,
                full_name="Bilal Ahmed",
                business_name="Bilal Traders",
                phone="+92 321 7654321",
                address="5 Tariq Road",
                city="Karachi",
            ),
            asynchronous=False,
        )
        with pytest.raises(ValidationError) as exc:
            current_domain.process(
                UpdateOrderStatus(order_id=order_id, seller_id=other_seller, status="confirmed"), asynchronous=False
            )
        assert exc.value.messages["seller_id"] == ["This order has no items from your store"]

    def test_skipping_a_step_is_rejected(self, order_id, seller_account):
        with pytest.raises(ValidationError) as exc:
            current_domain.process(
                UpdateOrderStatus(order_id=order_id, seller_id=seller_account["seller_id"], status="delivered"),
                asynchronous=False,
            )
        assert exc.value.messages["status"] == ["Cannot change order status from pending to delivered"]


class TestOrderHistory:
    def test_customer_sees_their_orders(self, customer, order_id):
        orders = customer_orders(customer["id"])
        assert [o["order_id"] for o in orders] == [order_id]
        assert orders[0]["formatted_total"] == "Rs. 5,000"

    def test_another_customers_order_is_not_found(self, order_id):
        with pytest.raises(ObjectNotFoundError):
            customer_order(order_id, "someone-else")


class TestReturns:
    def test_only_delivered_orders(self, customer, order_id):
        with pytest.raises(ValidationError) as exc:
            _request_return(customer, order_id)
        assert exc.value.messages["order_id"] == ["Only delivered orders can be returned"]

    def test_request_is_recorded_for_the_seller(self, customer, seller_account, order_id, deliver):
        deliver(order_id)
        return_id = _request_return(customer, order_id)

        request = current_domain.repository_for(ReturnRequest).get(return_id)
        assert request.status == "pending"
        assert request.refund_amount == 5000.0
        assert [r.id for r in customer_returns(customer["id"])] == [return_id]
        assert [r.id for r in seller_returns(seller_account["seller_id"])] == [return_id]

    def test_window_has_closed(self, customer, order_id, deliver):
        deliver(order_id)
        repo = current_domain.repository_for(Order)
        order = repo.get(order_id)
        order.delivered_at = datetime.now(UTC) - timedelta(days=31)
        repo.add(order)

        with pytest.raises(ValidationError) as exc:
            _request_return(customer, order_id)
        assert exc.value.messages["order_id"] == ["The 30-day return window for this order has closed"]

    def test_duplicate_request(self, customer, order_id, deliver):
        deliver(order_id)
        _request_return(customer, order_id)
        with pytest.raises(ValidationError) as exc:
            _request_return(customer, order_id)
        assert exc.value.messages["order_item_id"] == ["A return has already been requested for this item"]

    def test_reason_is_required(self, customer, order_id, deliver):
        deliver(order_id)
        with pytest.raises(ValidationError) as exc:
            _request_return(customer, order_id, reason="  ")
        assert "reason" in exc.value.messages

    def test_seller_resolves(self, customer, seller_account, order_id, deliver):
        deliver(order_id)
        return_id = _request_return(customer, order_id)
        current_domain.process(
            ResolveReturn(return_id=return_id, seller_id=seller_account["seller_id"], status="approved", notes="Refunded"),
            asynchronous=False,
        )

        request = current_domain.repository_for(ReturnRequest).get(return_id)
        assert request.status == "approved"
        assert request.resolution_notes == "Refunded"
        assert request.resolved_at is not None

    def test_another_seller_cannot_resolve(self, customer, order_id, deliver):
        deliver(order_id)
        return_id = _request_return(customer, order_id)
        with pytest.raises(ValidationError) as exc:
            current_domain.process(
                ResolveReturn(return_id=return_id, seller_id="other-seller", status="rejected"), asynchronous=False
            )
        assert exc.value.messages["return_id"] == ["This return is for another seller's item"]
