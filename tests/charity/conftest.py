import pytest
from protean import current_domain

from marketplace.charity.charity.management import RegisterCharity


@pytest.fixture()
def register_charity():
    def _register(**overrides):
        values = {"name": "Edhi Foundation", "category": "Healthcare", "target_amount": 100000, "city": "Karachi"}
        values.update(overrides)
        return current_domain.process(RegisterCharity(**values), asynchronous=False)

    return _register


@pytest.fixture()
def charity_id(register_charity):
    return register_charity()


@pytest.fixture()
def goods_offer():
    return {
        "product_name": "Winter jackets",
        "condition": "Like New",
        "category": "Fashion",
        "estimated_value": 12000,
        "quantity": 4,
        "donor_name": "Sana Iqbal",
        "donor_email": "sana@example.pk",
        "donor_phone": "0300-1234567",
        "pickup_address": "House 4, Street 9, F-7",
        "pickup_city": "Islamabad",
    }
