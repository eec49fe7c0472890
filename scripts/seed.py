"""
Seed script - populates the database with the sample roster for development.

Usage:
    python -m scripts.seed            # create missing tables, add missing fixture rows
    python -m scripts.seed --reset    # DROP every table first, then seed

Seeding is IDEMPOTENT - running it twice won't create duplicates.
Rows already present (matched by username, skill name or pair) are left alone.
"""
import argparse
import asyncio
import sys
import os

# Add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from skillroster.core.database import async_session_maker, close_db, init_db, reset_schema
from skillroster.core.logging import setup_logging
from skillroster.repositories.skill_repository import SkillRepository
from skillroster.repositories.user_repository import UserRepository
from skillroster.repositories.user_skill_repository import UserSkillRepository
from skillroster.services.seed_service import SEED_USERS, SeedService


async def seed(reset: bool = False) -> None:
    """Prepare the schema and load the fixture."""
    setup_logging()

    if reset:
        print("Resetting schema (all data dropped)...")
        await reset_schema()
    else:
        await init_db()

    async with async_session_maker() as db:
        created = await SeedService().seed(db)
        if not created:
            print("  Fixture already present, nothing to add.")
            return

        users = await UserRepository().list_users(db)
        skills = await SkillRepository().list_skills(db)
        print(f"  Users:  {', '.join(u.username for u in users)}")
        print(f"  Skills: {', '.join(s.name for s in skills)}")
        for user in users:
            held = await UserSkillRepository().get_for_user(db, user.id)
            print(f"  {user.username}: {len(held)} skill(s)")

    print()
    print("Seed complete!")
    for username, password in SEED_USERS:
        print(f"  Login: {username} / {password}")


async def main(reset: bool) -> None:
    try:
        await seed(reset=reset)
    finally:
        await close_db()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the Skill Roster database")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="drop and recreate every table before seeding",
    )
    args = parser.parse_args()
    asyncio.run(main(args.reset))
