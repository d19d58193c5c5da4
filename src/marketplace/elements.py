"""Every module that registers elements with the ``marketplace`` domain.

``Domain.init()`` only loads files in the domain's own directory and one level
below it, so modules nested deeper (``ordering/cart/repository.py``,
``catalogue/product/sales.py``) would never register their repositories and
event handlers. This module sits next to ``domain.py``, so the traversal
loads it, and it imports the nested modules so they are all registered
before the domain is initialized.
"""

import marketplace.catalogue.category.category  # noqa: F401
import marketplace.catalogue.category.events  # noqa: F401
import marketplace.catalogue.category.management  # noqa: F401
import marketplace.catalogue.product.product  # noqa: F401
import marketplace.catalogue.product.events  # noqa: F401
import marketplace.catalogue.product.listing  # noqa: F401
import marketplace.catalogue.product.sales  # noqa: F401
import marketplace.catalogue.projections.product_card  # noqa: F401
import marketplace.charity.charity.charity  # noqa: F401
import marketplace.charity.charity.events  # noqa: F401
import marketplace.charity.charity.management  # noqa: F401
import marketplace.charity.charity.donation_events  # noqa: F401
import marketplace.charity.donation.donation  # noqa: F401
import marketplace.charity.donation.events  # noqa: F401
import marketplace.charity.donation.giving  # noqa: F401
import marketplace.charity.donation.checkout_donations  # noqa: F401
import marketplace.charity.goods.goods_donation  # noqa: F401
import marketplace.charity.goods.events  # noqa: F401
import marketplace.charity.goods.submission  # noqa: F401
import marketplace.charity.goods.handling  # noqa: F401
import marketplace.identity.seller.seller  # noqa: F401
import marketplace.identity.seller.events  # noqa: F401
import marketplace.identity.seller.registration  # noqa: F401
import marketplace.identity.seller.profile  # noqa: F401
import marketplace.identity.seller.repository  # noqa: F401
import marketplace.ordering.cart.cart  # noqa: F401
import marketplace.ordering.cart.events  # noqa: F401
import marketplace.ordering.cart.items  # noqa: F401
import marketplace.ordering.cart.repository  # noqa: F401
import marketplace.ordering.order.order  # noqa: F401
import marketplace.ordering.order.events  # noqa: F401
import marketplace.ordering.order.checkout  # noqa: F401
import marketplace.ordering.order.fulfillment  # noqa: F401
import marketplace.ordering.order.repository  # noqa: F401
import marketplace.ordering.returns.return_request  # noqa: F401
import marketplace.ordering.returns.events  # noqa: F401
import marketplace.ordering.returns.handling  # noqa: F401
import marketplace.promotions.discount_code  # noqa: F401
import marketplace.promotions.events  # noqa: F401
import marketplace.promotions.management  # noqa: F401
import marketplace.promotions.redemption  # noqa: F401
import marketplace.promotions.repository  # noqa: F401
