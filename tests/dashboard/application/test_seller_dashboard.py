from marketplace.catalogue.product.listing import AddProduct
from marketplace.dashboard.seller_dashboard import load_dashboard
from marketplace.identity.seller.registration import RegisterSeller
from marketplace.ordering.order.fulfillment import UpdateOrderStatus
from marketplace.ordering.order.order import Order
from protean import current_domain


def _second_store(sign_up, category_id):
    user, _ = sign_up(email="bilal@example.pk", full_name="Bilal Ahmed")
    seller_id = current_domain.process(
        RegisterSeller(
            user_id=user.id,
            email=user.email,
            full_name="Bilal Ahmed",
            business_name="Bilal Traders",
            phone="+92 321 7654321",
            address="5 Tariq Road",
            city="Karachi",
            business_type="Fashion",
            tax_id="NTN-7654321-0",
        ),
        asynchronous=False,
    )
    product_id = current_domain.process(
        AddProduct(seller_id=seller_id, name="Lawn suit", category_id=category_id, price=4000, stock_quantity=5),
        asynchronous=False,
    )
    return seller_id, product_id


class TestSellerDashboard:
    def test_only_the_sellers_share_of_a_shared_order_counts(
        self, seller_account, sign_up, category_id, product_id, fill_cart, place_order
    ):
        _, other_product = _second_store(sign_up, category_id)
        fill_cart(product_id, 2)
        fill_cart(other_product, 1)
        place_order()

        dashboard = load_dashboard(seller_account["seller_id"])

        assert dashboard["seller"]["business_name"] == "Khan Electronics"
        assert dashboard["analytics"]["total_sales"] == 5000.0
        assert dashboard["analytics"]["total_orders"] == 1
        assert dashboard["analytics"]["total_customers"] == 1
        assert dashboard["analytics"]["monthly_growth"] == 100.0

        order = dashboard["orders"][0]
        assert order["seller_total"] == 5000.0
        assert [item["product_name"] for item in order["items"]] == ["Samsung Galaxy A54"]
        assert order["shipping_city"] == "Islamabad"

    def test_products_and_stock_figures(self, seller_account, add_product, fill_cart, place_order):
        best_seller = add_product(name="Redmi Note 13", stock_quantity=12)
        add_product(name="Nokia 105", stock_quantity=0)
        fill_cart(best_seller, 3)
        place_order()

        analytics = load_dashboard(seller_account["seller_id"])["analytics"]
        assert analytics["total_products"] == 2
        assert analytics["low_stock_products"] == 2
        assert analytics["out_of_stock_products"] == 1
        assert analytics["top_products"][0] == {
            "product_id": best_seller,
            "name": "Redmi Note 13",
            "sales": 3,
            "revenue": 7500.0,
        }

    def test_cancelled_orders_do_not_count_as_sales(self, seller_account, product_id, fill_cart, place_order):
        fill_cart(product_id)
        order_id = place_order()
        current_domain.process(
            UpdateOrderStatus(order_id=order_id, seller_id=seller_account["seller_id"], status="cancelled"),
            asynchronous=False,
        )

        analytics = load_dashboard(seller_account["seller_id"])["analytics"]
        assert analytics["total_sales"] == 0
        assert analytics["total_orders"] == 1
        assert analytics["order_status_distribution"] == {"cancelled": 1}

    def test_busy_store_sees_every_order(self, seller_account, customer, add_product, fill_cart, place_order):
        product_id = add_product(stock_quantity=500)
        order_ids = []
        for _ in range(101):
            fill_cart(product_id)
            order_ids.append(place_order())

        dashboard = load_dashboard(seller_account["seller_id"])
        assert dashboard["analytics"]["total_orders"] == 101
        assert len(dashboard["orders"]) == 101

        orders = current_domain.repository_for(Order)
        assert orders.count() == 101
        mine = orders.for_customer(customer["id"])
        assert len(mine) == 101
        assert str(mine[0].id) == order_ids[-1]
