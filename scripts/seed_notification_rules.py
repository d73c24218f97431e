"""Utility script to seed the default notification rule catalogue."""

from __future__ import annotations

import argparse
import logging

from sqlalchemy.exc import SQLAlchemyError

from notifier.application.use_cases.notification_rules import (
    DEFAULT_RULES,
    seed_default_rules,
)
from notifier.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for rule seeding."""

    parser = argparse.ArgumentParser(
        description="Insert the default notification rules into the database.",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Reset existing rules of the catalogued event types to their defaults.",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print the catalogue without touching the database.",
    )
    return parser.parse_args()


def main() -> None:
    """Seed notification rules using the provided command line arguments."""

    args = parse_args()
    logging.basicConfig(level=logging.INFO)

    if args.list:
        for rule in DEFAULT_RULES:
            print(
                f"{rule.category:<10} {rule.event_type:<34} {rule.priority:<7} "
                f"{','.join(rule.roles):<45} {','.join(rule.channels)}"
            )
        return

    initialize_database()

    session = SessionLocal()
    try:
        created, updated = seed_default_rules(session, overwrite=args.overwrite)
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Could not seed notification rules: {exc}") from exc
    else:
        print(f"Notification rules seeded: {created} created, {updated} updated.")
    finally:
        session.close()


if __name__ == "__main__":
    main()
