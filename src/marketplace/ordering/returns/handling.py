"""Return requests: commands, handler and the customer's return list."""

from datetime import UTC, datetime, timedelta

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from marketplace.config import setting
from marketplace.domain import marketplace
from marketplace.ordering.order.order import Order, OrderStatus
from marketplace.ordering.returns.return_request import ReturnRequest, ReturnStatus


@marketplace.command(part_of="ReturnRequest")
class RequestReturn:
    customer_id = Identifier(required=True)
    order_id = Identifier(required=True)
    order_item_id = Identifier(required=True)
    reason = String(max_length=255)
    details = Text()


@marketplace.command(part_of="ReturnRequest")
class ResolveReturn:
    return_id = Identifier(required=True)
    seller_id = Identifier()
    status = String(required=True, max_length=20)
    notes = Text()


def return_deadline(order: Order) -> datetime | None:
    if order.delivered_at is None:
        return None
    delivered_at = order.delivered_at
    if delivered_at.tzinfo is None:
        delivered_at = delivered_at.replace(tzinfo=UTC)
    return delivered_at + timedelta(days=int(setting("RETURN_WINDOW_DAYS")))


@marketplace.command_handler(part_of=ReturnRequest)
class ReturnRequestHandler:
    @handle(RequestReturn)
    def request_return(self, command):
        order = current_domain.repository_for(Order).get(command.order_id)
        if str(order.customer_id) != str(command.customer_id):
            raise ValidationError({"order_id": ["You can only return items from your own orders"]})
        if order.status != OrderStatus.DELIVERED.value:
            raise ValidationError({"order_id": ["Only delivered orders can be returned"]})

        deadline = return_deadline(order)
        if deadline is not None and datetime.now(UTC) > deadline:
            raise ValidationError(
                {"order_id": [f"The {setting('RETURN_WINDOW_DAYS')}-day return window for this order has closed"]}
            )

        item = order.find_item(command.order_item_id)
        if item is None:
            raise ValidationError({"order_item_id": ["Item not found in this order"]})

        repo = current_domain.repository_for(ReturnRequest)
        existing = repo._dao.query.filter(order_item_id=str(item.id)).limit(None).all().items
        if any(r.is_open or r.status == ReturnStatus.APPROVED.value for r in existing):
            raise ValidationError({"order_item_id": ["A return has already been requested for this item"]})

        request = ReturnRequest.request(order, item, command.customer_id, command.reason, command.details)
        repo.add(request)
        return str(request.id)

    @handle(ResolveReturn)
    def resolve_return(self, command):
        repo = current_domain.repository_for(ReturnRequest)
        request = repo.get(command.return_id)
        if command.seller_id and str(request.seller_id) != str(command.seller_id):
            raise ValidationError({"return_id": ["This return is for another seller's item"]})
        try:
            request.change_status(command.status, notes=command.notes)
        except ValueError:
            raise ValidationError({"status": [f"Unknown return status: {command.status}"]}) from None
        repo.add(request)


def _newest_returns(**criteria) -> list[ReturnRequest]:
    query = current_domain.repository_for(ReturnRequest)._dao.query.filter(**criteria).order_by("-requested_at")
    return query.limit(None).all().items


def customer_returns(customer_id) -> list[ReturnRequest]:
    return _newest_returns(customer_id=str(customer_id))


def seller_returns(seller_id) -> list[ReturnRequest]:
    return _newest_returns(seller_id=str(seller_id))


def return_view(request: ReturnRequest) -> dict:
    return {
        "return_id": str(request.id),
        "order_id": str(request.order_id),
        "order_item_id": str(request.order_item_id),
        "product_id": str(request.product_id),
        "product_name": request.product_name,
        "quantity": request.quantity,
        "reason": request.reason,
        "details": request.details,
        "refund_amount": request.refund_amount,
        "status": request.status,
        "resolution_notes": request.resolution_notes,
        "requested_at": request.requested_at,
        "resolved_at": request.resolved_at,
    }
