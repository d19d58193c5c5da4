"""Text helpers."""

import re

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(value: str) -> str:
    """Lowercase ``value`` and collapse runs of other characters into hyphens.

    ``"Home & Garden"`` becomes ``"home-garden"``.
    """
    return _NON_ALNUM.sub("-", (value or "").lower()).strip("-")


def missing_fields(values: dict, labels: dict) -> list[str]:
    """Return the labels of entries in ``values`` that are blank."""
    return [labels[name] for name in labels if not str(values.get(name) or "").strip()]
