"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the domain's validation rules
(email and phone formats, positive prices, known payment methods) and match
the field names of the API's Pydantic request schemas.
"""

import base64
import random
import uuid

from faker import Faker

fake = Faker()

PAKISTANI_CITIES = ["Karachi", "Lahore", "Islamabad", "Rawalpindi", "Faisalabad", "Multan", "Peshawar", "Quetta"]

CATEGORY_NAMES = ["Electronics", "Fashion", "Home & Garden", "Sports", "Books", "Toys & Games", "Health & Beauty"]

CHARITY_CATEGORIES = ["Healthcare", "Education", "Social Welfare", "Environment", "Housing", "Emergency"]

GOODS_CONDITIONS = ["Brand New", "Like New", "Excellent", "Good", "Fair"]

# Smallest valid JPEG header; the server only stores the bytes.
_TINY_JPEG = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00\xff\xd9"


# ---------- Identity ----------


def valid_email() -> str:
    """Unique emails so concurrent users never collide on sign-up."""
    local = fake.user_name()[:20]
    return f"{local}.{uuid.uuid4().hex[:6]}@example.pk"


def valid_phone() -> str:
    """Mobile numbers in the local 03XX-XXXXXXX format."""
    return f"03{random.randint(0, 4)}{random.randint(0, 9)}-{random.randint(1000000, 9999999)}"


def signup_data() -> dict:
    return {"email": valid_email(), "password": f"lt-{uuid.uuid4().hex[:10]}", "full_name": fake.name()[:200]}


def seller_registration_data() -> dict:
    """RegisterSellerRequest payload."""
    return {
        "full_name": fake.name()[:200],
        "business_name": f"{fake.last_name()} {random.choice(['Traders', 'Store', 'Mart', 'Emporium'])}",
        "phone": valid_phone(),
        "address": fake.street_address()[:500],
        "city": random.choice(PAKISTANI_CITIES),
        "business_type": random.choice(CATEGORY_NAMES),
        "tax_id": f"NTN-{random.randint(1000000, 9999999)}-{random.randint(0, 9)}",
    }


# ---------- Catalogue ----------


def category_name() -> str:
    return f"{random.choice(CATEGORY_NAMES)} {uuid.uuid4().hex[:4]}"


def product_data(category_id: str | None = None) -> dict:
    """AddProductRequest payload with a sale price below the original price."""
    price = random.randrange(500, 150000, 50)
    return {
        "name": f"{fake.word().capitalize()} {fake.word().capitalize()}"[:255],
        "description": fake.paragraph(nb_sentences=3),
        "category_id": category_id,
        "price": float(price),
        "original_price": float(price + random.randrange(0, 20000, 50)),
        "stock_quantity": random.randint(20, 500),
    }


# ---------- Ordering ----------


def checkout_data(payment_method: str | None = None) -> dict:
    """PlaceOrderRequest payload with details for the chosen payment method."""
    method = payment_method or random.choice(["easypaisa", "jazzcash", "card", "cod"])
    return {
        "first_name": fake.first_name()[:100],
        "last_name": fake.last_name()[:100],
        "email": valid_email(),
        "phone": valid_phone(),
        "address": fake.street_address()[:500],
        "city": random.choice(PAKISTANI_CITIES),
        "payment_method": method,
        "payment_details": payment_details(method),
        "donation_amount": random.choice([0, 0, 0, 100, 200]),
    }


def payment_details(method: str) -> dict:
    if method in ("easypaisa", "jazzcash"):
        return {"phone": valid_phone().replace("-", ""), "otp": f"{random.randint(0, 999999):06d}"}
    if method == "card":
        return {
            "card_number": fake.credit_card_number(card_type="visa16"),
            "expiry": fake.credit_card_expire(),
            "cvv": f"{random.randint(0, 999):03d}",
            "card_name": fake.name().upper(),
        }
    return {"name": fake.name(), "phone": valid_phone()}


def return_reason() -> str:
    return random.choice(["Wrong size", "Arrived damaged", "Not as described", "Changed my mind"])


# ---------- Promotions ----------


def discount_code_data() -> dict:
    """CreateDiscountCodeRequest payload with a unique code."""
    percentage = random.random() < 0.6
    return {
        "code": f"LT{uuid.uuid4().hex[:8].upper()}",
        "discount_type": "percentage" if percentage else "fixed",
        "value": random.choice([5, 10, 15, 20]) if percentage else random.choice([100, 250, 500]),
        "min_amount": random.choice([0, 1000, 2000]),
        "description": fake.sentence(nb_words=6),
        "usage_limit": random.choice([None, 100, 1000]),
    }


# ---------- Charity ----------


def charity_data() -> dict:
    return {
        "name": f"{fake.last_name()} {random.choice(['Foundation', 'Trust', 'Welfare Society'])}",
        "description": fake.paragraph(nb_sentences=2),
        "category": random.choice(CHARITY_CATEGORIES),
        "city": random.choice(PAKISTANI_CITIES),
        "target_amount": float(random.randrange(50000, 5000000, 10000)),
    }


def donation_data(charity_id: str) -> dict:
    method = random.choice(["easypaisa", "jazzcash", "card"])
    return {
        "charity_id": charity_id,
        "amount": float(random.choice([100, 200, 500, 1000, 2500])),
        "payment_method": method,
        "payment_details": payment_details(method),
        "anonymous": random.random() < 0.3,
    }


def goods_donation_data(photos: int = 1) -> dict:
    """SubmitGoodsDonationRequest payload with base64 photos."""
    return {
        "product_name": f"{fake.word().capitalize()} {random.choice(['jacket', 'chair', 'books', 'toys', 'fan'])}",
        "description": fake.sentence(),
        "condition": random.choice(GOODS_CONDITIONS),
        "category": random.choice(CATEGORY_NAMES),
        "estimated_value": float(random.randrange(500, 50000, 500)),
        "quantity": random.randint(1, 5),
        "donor_name": fake.name()[:200],
        "donor_email": valid_email(),
        "donor_phone": valid_phone(),
        "pickup_address": fake.street_address()[:500],
        "pickup_city": random.choice(PAKISTANI_CITIES),
        "images": [
            {
                "filename": f"{uuid.uuid4().hex[:8]}.jpg",
                "content_type": "image/jpeg",
                "data": base64.b64encode(_TINY_JPEG).decode(),
            }
            for _ in range(photos)
        ],
    }
