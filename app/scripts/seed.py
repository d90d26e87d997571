"""
Database Seed Script

Creates the default accounts and the aviation course categories.
Safe to run repeatedly; existing rows are left alone.

Usage:
    python -m app.scripts.seed [--reset]
"""

import argparse
import asyncio
import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import close_db, get_session_maker, init_db
from app.core.logging_config import setup_logging
from app.core.security import hash_password
from app.models import Category, MyCourse, Note, User, UserRole, Video, WatchProgress


logger = logging.getLogger(__name__)

DEFAULT_USERS = [
    {
        "username": "admin",
        "email": "admin@jungwonflight.edu",
        "password": "admin123!",
        "role": UserRole.ADMIN,
    },
    {
        "username": "student1",
        "email": "student1@example.com",
        "password": "student123!",
        "role": UserRole.STUDENT,
    },
]

DEFAULT_CATEGORIES = [
    {"name": "ATPL(Airline Transport Pilot)", "description": "Airline transport pilot course", "icon": "Globe"},
    {"name": "CPL(Commercial Pilot)", "description": "Commercial pilot course", "icon": "Award"},
    {"name": "IFR(Instrument Flight Rule) Rating", "description": "Instrument rating course", "icon": "Radar"},
    {"name": "LSA(Light Sport Aircraft) Pilot", "description": "Light sport aircraft pilot course", "icon": "Plane"},
    {"name": "LSA(Light Sport Aircraft) Instructor Pilot", "description": "Light sport aircraft instructor course", "icon": "BookUser"},
    {"name": "Multi-Engine Rating", "description": "Multi-engine rating course", "icon": "Aperture"},
    {"name": "Mountain Flying", "description": "Mountain flying course", "icon": "Mountain"},
    {"name": "NFQP(Night Flying Qualified Pilot)", "description": "Night flying qualification course", "icon": "Moon"},
    {"name": "PPL(Private Pilot License)", "description": "Private pilot license course", "icon": "BadgeCheck"},
]


async def reset_catalog(db: AsyncSession) -> None:
    """Delete learner data, videos and categories. Accounts are kept."""
    # Children first so foreign keys hold on every backend
    for model in (MyCourse, WatchProgress, Note, Video, Category):
        await db.execute(delete(model))
        logger.info("Cleared %s", model.__tablename__)
    await db.commit()


async def seed(db: AsyncSession) -> dict:
    """
    Insert missing default accounts and categories.

    Returns:
        dict: Number of users and categories created.
    """
    created = {"users": 0, "categories": 0}

    for data in DEFAULT_USERS:
        result = await db.execute(
            select(User).where(User.username == data["username"])
        )
        if result.scalar_one_or_none() is not None:
            continue

        db.add(User(
            username=data["username"],
            email=data["email"],
            password_hash=hash_password(data["password"]),
            role=data["role"],
            is_approved=True,
        ))
        created["users"] += 1
        logger.info("Created %s account '%s'", data["role"].value.lower(), data["username"])

    for data in DEFAULT_CATEGORIES:
        result = await db.execute(
            select(Category).where(Category.name == data["name"])
        )
        if result.scalar_one_or_none() is not None:
            continue

        db.add(Category(**data))
        created["categories"] += 1
        logger.info("Created category '%s'", data["name"])

    await db.commit()
    return created


async def main(reset: bool = False) -> None:
    await init_db()

    session_maker = get_session_maker()
    try:
        async with session_maker() as db:
            if reset:
                await reset_catalog(db)
            created = await seed(db)
    finally:
        await close_db()

    logger.info(
        "Seed finished: %s users, %s categories created",
        created["users"], created["categories"],
    )


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the AviLearn database")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="delete videos, categories and learner data before seeding",
    )
    args = parser.parse_args()

    setup_logging()
    asyncio.run(main(reset=args.reset))
