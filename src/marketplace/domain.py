"""Marketplace domain composition root.

Every aggregate, command, event, handler and projection of the storefront,
seller dashboard and charity flows registers with the ``marketplace`` domain.
Configuration is read from ``domain.toml`` next to this module, with the
``PROTEAN_ENV`` environment variable selecting an overlay section.
"""

import structlog
from protean.domain import Domain

marketplace = Domain(name="marketplace")

logger = structlog.get_logger(__name__)
