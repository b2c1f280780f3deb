#!/usr/bin/env python3
"""
Account Owner API Database Setup

Creates the `owner` / `account` tables, optionally seeds demo rows, and
verifies the result.

Usage:
    # Create tables (no-op for existing ones)
    uv run python scripts/setup_database.py init

    # Drop and recreate tables
    uv run python scripts/setup_database.py reset --yes

    # Seed demo owners and accounts
    uv run python scripts/setup_database.py seed

    # Verify setup (row counts via the sync engine)
    uv run python scripts/setup_database.py verify

Environment Variables:
    DATABASE_URL_APP      - App connection (async, used by init/reset/seed)
    DATABASE_URL_ADMIN    - Optional admin connection (sync, used by verify)
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from datetime import UTC, datetime
from pathlib import Path

from sqlalchemy import func, select

# Add app to path for imports
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))

from app.core.db import (  # noqa: E402 (import after path setup)
    create_all,
    drop_all,
    get_async_sessionmaker,
    get_db,
    reset_async_engine,
)
from app.db.models import Account, Owner  # noqa: E402
from app.repos import RepositoryWrapper  # noqa: E402


# ANSI colors for terminal output
class Colors:
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    BLUE = "\033[94m"
    END = "\033[0m"


def log_info(msg: str) -> None:
    print(f"{Colors.BLUE}[INFO]{Colors.END} {msg}")


def log_success(msg: str) -> None:
    print(f"{Colors.GREEN}[OK]{Colors.END} {msg}")


def log_warning(msg: str) -> None:
    print(f"{Colors.YELLOW}[WARN]{Colors.END} {msg}")


def log_error(msg: str) -> None:
    print(f"{Colors.RED}[ERROR]{Colors.END} {msg}")


DEMO_OWNERS = [
    ("24fd81f8-d58a-4bcc-9f35-dc6cd5641906", "John Keen", datetime(1980, 12, 5, tzinfo=UTC)),
    ("261e1685-cf26-494c-b17c-3546e65f5620", "Anna Bosh", datetime(1974, 11, 14, tzinfo=UTC)),
    ("a3c1880c-674c-4d18-8f91-5d3608a2c937", "Sam Query", datetime(1990, 4, 22, tzinfo=UTC)),
]

DEMO_ACCOUNTS = [
    ("371b93f2-f8c5-4a32-894a-fc672741aa5b", "Domestic", "24fd81f8-d58a-4bcc-9f35-dc6cd5641906"),
    ("670775db-ecc0-4b90-a9ab-37cd0d8e2801", "Savings", "24fd81f8-d58a-4bcc-9f35-dc6cd5641906"),
    ("a3fbad0b-7f48-4feb-8ac0-6d3bbc997bfc", "Domestic", "261e1685-cf26-494c-b17c-3546e65f5620"),
    ("aa15f658-04bb-4f73-82af-82db49d0fbef", "Foreign", "a3c1880c-674c-4d18-8f91-5d3608a2c937"),
]


async def cmd_init() -> None:
    await create_all()
    log_success("Tables created")


async def cmd_reset() -> None:
    await drop_all()
    await create_all()
    log_success("Tables dropped and recreated")


async def cmd_seed() -> None:
    async with get_async_sessionmaker()() as session:
        repository = RepositoryWrapper(session)

        existing = await repository.owner.all(repository.owner.find_all())
        if existing:
            log_warning(f"{len(existing)} owners already present; skipping seed")
            return

        for owner_id, name, created in DEMO_OWNERS:
            repository.owner.create(Owner(id=owner_id, name=name, date_created=created))
        for account_id, account_type, owner_id in DEMO_ACCOUNTS:
            repository.account.create(
                Account(account_id=account_id, account_type=account_type, owner_id=owner_id)
            )
        await repository.save()

    log_success(f"Seeded {len(DEMO_OWNERS)} owners and {len(DEMO_ACCOUNTS)} accounts")


def cmd_verify() -> int:
    with get_db() as db:
        owners = db.execute(select(func.count()).select_from(Owner)).scalar_one()
        accounts = db.execute(select(func.count()).select_from(Account)).scalar_one()
    log_info(f"owner rows: {owners}")
    log_info(f"account rows: {accounts}")
    log_success("Database reachable")
    return 0


async def _run_async(command: str) -> None:
    try:
        if command == "init":
            await cmd_init()
        elif command == "reset":
            await cmd_reset()
        elif command == "seed":
            await cmd_seed()
    finally:
        await reset_async_engine()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Account Owner API database setup")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("init", help="Create tables")
    reset = subparsers.add_parser("reset", help="Drop and recreate tables")
    reset.add_argument("--yes", action="store_true", help="Skip confirmation")
    subparsers.add_parser("seed", help="Insert demo owners and accounts")
    subparsers.add_parser("verify", help="Report row counts")
    args = parser.parse_args(argv)

    if args.command == "reset" and not args.yes:
        answer = input("This drops all owner/account data. Continue? [y/N] ")
        if answer.strip().lower() not in {"y", "yes"}:
            log_warning("Aborted")
            return 1

    try:
        if args.command == "verify":
            return cmd_verify()
        asyncio.run(_run_async(args.command))
    except Exception as exc:
        log_error(f"{args.command} failed: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
