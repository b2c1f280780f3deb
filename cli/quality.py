"""CLI wrappers: ruff lint and format over the source trees."""

from __future__ import annotations

import sys

from cli._runner import run

_PATHS = ["app", "tests", "scripts", "cli"]


def lint() -> None:
    run([sys.executable, "-m", "ruff", "check", *_PATHS, *sys.argv[1:]])


def fmt() -> None:
    run([sys.executable, "-m", "ruff", "format", *_PATHS, *sys.argv[1:]])
