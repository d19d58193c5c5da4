"""Marketplace database management CLI.

Usage:
    python src/manage.py setup-db         # Create all tables
    python src/manage.py drop-db          # Drop all tables
    python src/manage.py seed-discounts   # Create the default discount codes
"""

import argparse
import sys

from marketplace.domain import marketplace
from marketplace.utils.db import drop_db, setup_db


def setup_databases():
    """Create database schemas for every SQL provider of the domain."""
    print("Initializing marketplace domain...")
    marketplace.init()
    providers = setup_db(marketplace)
    if providers:
        print(f"  schema ready on: {', '.join(providers)}")
    else:
        print("  no SQL providers configured, nothing to create.")
    print("Done.")


def drop_databases():
    """Drop database schemas for every SQL provider of the domain."""
    print("Initializing marketplace domain...")
    marketplace.init()
    providers = drop_db(marketplace)
    if providers:
        print(f"  schema dropped on: {', '.join(providers)}")
    print("Done.")


def seed_discounts():
    from marketplace.promotions.seeding import seed_default_codes

    marketplace.init()
    with marketplace.domain_context():
        created = seed_default_codes()
    print(f"Created {len(created)} discount code(s): {', '.join(created) or '-'}")


def main():
    parser = argparse.ArgumentParser(description="Marketplace database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed-discounts", help="Create the default discount codes")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_databases()
    elif args.command == "drop-db":
        drop_databases()
    elif args.command == "seed-discounts":
        seed_discounts()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
