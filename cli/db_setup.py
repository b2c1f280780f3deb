"""
Database setup commands.

These commands wrap scripts/setup_database.py.

Usage:
    uv run db-init      # Create tables
    uv run db-reset     # Drop and recreate tables (asks for confirmation)
    uv run db-seed      # Seed demo owners and accounts
    uv run db-verify    # Report row counts
"""

from __future__ import annotations

import sys
from pathlib import Path

from cli._runner import run

_SETUP_DB_SCRIPT = Path(__file__).parent.parent / "scripts" / "setup_database.py"


def _setup(command: str) -> None:
    run([sys.executable, str(_SETUP_DB_SCRIPT), command, *sys.argv[1:]])


def init() -> None:
    _setup("init")


def reset() -> None:
    _setup("reset")


def seed() -> None:
    _setup("seed")


def verify() -> None:
    _setup("verify")
