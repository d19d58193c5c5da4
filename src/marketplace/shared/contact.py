"""Validation of contact details supplied by shoppers, sellers and donors."""

import re

_EMAIL = re.compile(r"^[^@\s;,()<>\"\\]+@[^@\s;,()<>\"\\.-][^@\s;,()<>\"\\]*\.[^@\s;,()<>\"\\.]+$")
_PHONE = re.compile(r"^\+?[\d\s\-()]+$")


def is_valid_email(email: str | None) -> bool:
    """Structural check only; delivery is the auth provider's concern."""
    if not email or ".." in email:
        return False
    return bool(_EMAIL.match(email))


def is_valid_phone(number: str | None) -> bool:
    """Digits, spaces, hyphens and parentheses with an optional leading ``+``."""
    if not number or not re.search(r"\d", number):
        return False
    return bool(_PHONE.match(number))
