"""Catalogue reacts to placed orders by taking sold units out of stock."""

import json

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from marketplace.catalogue.product.product import Product
from marketplace.domain import marketplace
from marketplace.ordering.order.events import OrderPlaced

logger = structlog.get_logger(__name__)


@marketplace.event_handler(part_of=Product, stream_category="marketplace::order")
class ProductSalesEventHandler:
    @handle(OrderPlaced)
    def on_order_placed(self, event: OrderPlaced) -> None:
        repo = current_domain.repository_for(Product)
        for line in json.loads(event.items):
            try:
                product = repo.get(line["product_id"])
            except ObjectNotFoundError:
                logger.warning("sold_product_missing", order_id=str(event.order_id), product_id=line["product_id"])
                continue

            if line["quantity"] > (product.stock_quantity or 0):
                logger.warning(
                    "product_oversold",
                    order_id=str(event.order_id),
                    product_id=line["product_id"],
                    ordered=line["quantity"],
                    in_stock=product.stock_quantity,
                )
            product.record_sale(event.order_id, line["quantity"])
            repo.add(product)
