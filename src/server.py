"""Protean Engine runner for the marketplace domain.

In production event processing is asynchronous: the API process writes
events to the MessageDB event store, and the Engine reads them from there and
runs the event handlers (stock and sales counters, discount
redemptions, checkout donations, charity totals) and projectors.

Usage:
    python src/server.py
"""

import asyncio

from protean.server.engine import Engine

from marketplace.domain import marketplace
from marketplace.utils.logging import configure_logging


async def run():
    marketplace.init()
    engine = Engine(marketplace)
    await asyncio.gather(engine.run())


def main():
    configure_logging(log_file_prefix="marketplace-engine")
    asyncio.run(run())


if __name__ == "__main__":
    main()
