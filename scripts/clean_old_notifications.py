"""Utility script to soft delete notifications past the retention period."""

from __future__ import annotations

import argparse
import logging

from sqlalchemy.exc import SQLAlchemyError

from notifier.application.use_cases.notifications import clean_old_notifications
from notifier.config import get_settings
from notifier.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the retention job."""

    parser = argparse.ArgumentParser(
        description="Soft delete notifications older than the retention period.",
    )
    parser.add_argument(
        "--days",
        type=int,
        default=None,
        help="Days of notifications to keep (default: NOTIFICATION_RETENTION_DAYS).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.INFO)
    days = args.days or get_settings().notification_retention_days

    initialize_database()

    session = SessionLocal()
    try:
        removed = clean_old_notifications(session, days_to_keep=days)
    except ValueError as exc:
        raise SystemExit(f"Invalid retention period: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Could not clean notifications: {exc}") from exc
    else:
        print(f"Soft deleted {removed} notifications older than {days} days.")
    finally:
        session.close()


if __name__ == "__main__":
    main()
