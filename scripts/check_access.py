#!/usr/bin/env python3
"""
Inspect an account's access status, or mint a development token for it.

Usage:
    python scripts/check_access.py "auth0|65f1c0..."
    python scripts/check_access.py "auth0|65f1c0..." --token --minutes 60

Environment Variables:
    DATABASE_URL: Account store
    JWT_SECRET_KEY: Signing key for --token
"""

import argparse
import asyncio
import sys
from datetime import timedelta

import dotenv

dotenv.load_dotenv()

from accessgate.core.exceptions import AccountStoreError  # noqa: E402
from accessgate.core.security import create_access_token  # noqa: E402
from accessgate.database import AsyncSessionLocal, engine  # noqa: E402
from accessgate.services.access_status_service import AccessStatusService  # noqa: E402


async def print_access_status(subject_id: str) -> int:
    """Print the access status projection for a subject."""
    try:
        async with AsyncSessionLocal() as session:
            status = await AccessStatusService().get_access_status(session, subject_id)
    except AccountStoreError as e:
        print(f"Error: {e.message} ({e.__cause__})", file=sys.stderr)
        return 1
    finally:
        await engine.dispose()

    print(status.model_dump_json(by_alias=True, indent=2))
    return 0


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Inspect an account's onboarding and subscription access",
    )
    parser.add_argument("subject_id", help="Identity provider subject (sub claim)")
    parser.add_argument(
        "--token",
        action="store_true",
        help="Print a signed development bearer token instead",
    )
    parser.add_argument(
        "--minutes",
        type=int,
        default=30,
        help="Token lifetime in minutes (default: 30)",
    )

    args = parser.parse_args()

    if args.token:
        print(
            create_access_token(
                {"sub": args.subject_id},
                expires_delta=timedelta(minutes=args.minutes),
            )
        )
        return 0

    return asyncio.run(print_access_status(args.subject_id))


if __name__ == "__main__":
    sys.exit(main())
