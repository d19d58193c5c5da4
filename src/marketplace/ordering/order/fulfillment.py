"""Order status updates from the seller dashboard: command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.ordering.order.order import Order


@marketplace.command(part_of="Order")
class UpdateOrderStatus:
    order_id = Identifier(required=True)
    seller_id = Identifier()
    status = String(required=True, max_length=20)
    tracking_number = String(max_length=100)


@marketplace.command_handler(part_of=Order)
class UpdateOrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_status(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)

        if command.seller_id and not order.items_for_seller(command.seller_id):
            raise ValidationError({"seller_id": ["This order has no items from your store"]})

        try:
            order.change_status(command.status, tracking_number=command.tracking_number)
        except ValueError:
            raise ValidationError({"status": [f"Unknown order status: {command.status}"]}) from None
        repo.add(order)
