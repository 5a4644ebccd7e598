#!/usr/bin/env python3
"""Verify that required environment variables are set.

Loads a .env file first (already-set variables win), then checks each name.

Usage:
    python scripts/check_env.py REDIS_URL APP_HOST
    python scripts/check_env.py --env-file deploy/.env --secret API_TOKEN APP_HOST
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import find_dotenv, load_dotenv
from loguru import logger

from envtools import EnvAccessor


def check_required(names: Iterable[str], secrets: Iterable[str] = (), accessor: EnvAccessor | None = None) -> list[str]:
    """Check required variables and return the names that are missing.

    Args:
        names: Plain variables; their values are logged
        secrets: Secret variables; their values are masked in the log
        accessor: Accessor to use (default: one bound to the loguru logger)

    Returns:
        Missing names, in the order they were checked
    """
    accessor = accessor or EnvAccessor(logger)
    missing = []
    for name in names:
        _, error = accessor.get_env_or_fail(name)
        if error is not None:
            missing.append(name)
    for name in secrets:
        _, error = accessor.get_env_secret_or_fail(name)
        if error is not None:
            missing.append(name)
    return missing


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Verify that required environment variables are set.")
    parser.add_argument("names", nargs="*", metavar="NAME", help="required variable")
    parser.add_argument("--secret", action="append", default=[], metavar="NAME", help="required secret variable (repeatable)")
    parser.add_argument("--env-file", default=None, help=".env file to load (default: search from the working directory)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    env_file = args.env_file or find_dotenv(usecwd=True)
    if env_file and load_dotenv(env_file, override=False):
        logger.info(f"Loaded environment from {env_file}")

    total = len(args.names) + len(args.secret)
    if total == 0:
        logger.warning("No variables to check")
        return 0

    missing = check_required(args.names, args.secret)
    if missing:
        logger.error(f"{len(missing)} of {total} required variables missing: {', '.join(missing)}")
        return 1

    logger.success(f"✓ All {total} required variables are set")
    return 0


if __name__ == "__main__":
    # Configure simple logging
    logger.remove()
    logger.add(sys.stderr, level="INFO")

    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("\nCancelled by user")
        sys.exit(1)
