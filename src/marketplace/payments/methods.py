"""Local payment methods and the details each one needs before paying."""

import re
from enum import Enum

from protean.exceptions import ValidationError


class PaymentMethod(Enum):
    EASYPAISA = "easypaisa"
    JAZZCASH = "jazzcash"
    CARD = "card"
    COD = "cod"


# (display name, description) per method, in the order shoppers see them
PAYMENT_METHODS = {
    PaymentMethod.EASYPAISA: ("EasyPaisa", "Pay with your EasyPaisa mobile wallet"),
    PaymentMethod.JAZZCASH: ("JazzCash", "Pay with your JazzCash mobile wallet"),
    PaymentMethod.CARD: ("Credit/Debit Card", "Visa, Mastercard, UnionPay"),
    PaymentMethod.COD: ("Cash on Delivery", "Pay when you receive your order"),
}

_REQUIRED_DETAILS = {
    PaymentMethod.EASYPAISA: {"phone": "phone number", "otp": "OTP"},
    PaymentMethod.JAZZCASH: {"phone": "phone number", "otp": "OTP"},
    PaymentMethod.CARD: {
        "card_number": "card number",
        "expiry": "expiry date",
        "cvv": "CVV",
        "card_name": "cardholder name",
    },
    PaymentMethod.COD: {"name": "name", "phone": "phone number"},
}

_OTP = re.compile(r"^\d{6}$")


def parse_method(value) -> PaymentMethod:
    if isinstance(value, PaymentMethod):
        return value
    try:
        return PaymentMethod((value or "").lower())
    except ValueError:
        raise ValidationError({"payment_method": [f"Unsupported payment method: {value!r}"]}) from None


def validate_payment_details(method, details: dict | None) -> PaymentMethod:
    """Check that ``details`` carries everything ``method`` needs.

    Returns the parsed method. Raises ``ValidationError`` keyed by
    ``payment_details`` listing what is missing.
    """
    method = parse_method(method)
    details = details or {}

    missing = [label for key, label in _REQUIRED_DETAILS[method].items() if not str(details.get(key) or "").strip()]
    if missing:
        raise ValidationError({"payment_details": [f"Please provide: {', '.join(missing)}"]})

    if "otp" in _REQUIRED_DETAILS[method] and not _OTP.match(str(details["otp"]).strip()):
        raise ValidationError({"payment_details": ["OTP must be 6 digits"]})

    return method


def describe_methods() -> list[dict]:
    return [
        {"id": method.value, "name": name, "description": description}
        for method, (name, description) in PAYMENT_METHODS.items()
    ]
