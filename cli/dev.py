"""CLI wrapper: Start development server with auto-reload."""

from __future__ import annotations

import os
import sys

from cli._runner import run


def main() -> None:
    run(
        [
            sys.executable,
            "-m",
            "uvicorn",
            "app.main:create_app",
            "--factory",
            "--reload",
            "--host",
            os.getenv("DEV_HOST", "127.0.0.1"),
            "--port",
            os.getenv("DEV_PORT", "8000"),
            *sys.argv[1:],
        ]
    )
