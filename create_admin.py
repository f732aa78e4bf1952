#!/usr/bin/env python3
"""
Admin bootstrap.

Profiles cannot sign themselves up, so the first admin has to be created
from the command line. Re-running for an existing email promotes that
profile instead of creating a duplicate.

Usage:
    python create_admin.py admin@example.com --first-name Jane --last-name Doe
"""

import argparse
import asyncio
import os
import sys

# Ensure project root is on the path
ROOT_DIR = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, ROOT_DIR)

from config import DatabaseSettings  # noqa: E402
from infrastructure.database import (  # noqa: E402
    create_engine,
    create_session_factory,
    create_tables,
)
from repositories.profile_repository import ProfileRepository  # noqa: E402
from services.profile_service import ProfileService  # noqa: E402


async def provision_admin(
    settings: DatabaseSettings,
    email: str,
    first_name: str | None = None,
    last_name: str | None = None,
) -> tuple[str, bool]:
    """Create or promote the admin profile. Returns (profile_id, created)."""
    engine = create_engine(settings)
    try:
        await create_tables(engine)
        async with create_session_factory(engine)() as session:
            repo = ProfileRepository(session)
            service = ProfileService(repo)
            existing = await repo.get_by_email(email)
            if existing is None:
                profile = await service.create(
                    {
                        "email": email,
                        "first_name": first_name,
                        "last_name": last_name,
                        "is_admin": True,
                    }
                )
                created = True
            else:
                values: dict = {"is_admin": True}
                if first_name:
                    values["first_name"] = first_name
                if last_name:
                    values["last_name"] = last_name
                profile = await service.update(existing.id, values)
                created = False
            await session.commit()
            return str(profile.id), created
    finally:
        await engine.dispose()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Create or promote an admin profile.")
    parser.add_argument("email", help="Email address the admin signs in with")
    parser.add_argument("--first-name", default=None)
    parser.add_argument("--last-name", default=None)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        profile_id, created = asyncio.run(
            provision_admin(
                DatabaseSettings(),
                args.email,
                first_name=args.first_name,
                last_name=args.last_name,
            )
        )
    except KeyboardInterrupt:
        print("\nAborted")
        return 1
    except Exception as e:
        print(f"Failed to provision admin: {e}")
        return 1

    action = "Created" if created else "Promoted"
    print(f"{action} admin {args.email} ({profile_id})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
