"""
Seed script - populates the database with sample skills and candidates.

Usage:
    python -m scripts.seed

This script is IDEMPOTENT - running it twice won't create duplicates.
Skills and candidates are matched case-insensitively (name / email) and
only missing rows are inserted. Existing skill links are skipped by the insert.
"""
import asyncio
import sys
import os
from datetime import date
from typing import Dict

# Add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy.ext.asyncio import AsyncSession

from hr_platform.core.database import async_session_maker, init_db
from hr_platform.repositories.candidate_repository import CandidateRepository
from hr_platform.repositories.candidate_skill_repository import CandidateSkillRepository
from hr_platform.repositories.skill_repository import SkillRepository


# ─── Skills ────────────────────────────────────────────────────

SKILLS = [
    "C#",
    "Java",
    "SQL",
    "JavaScript",
    "React",
    "ASP.NET Core",
    "Docker",
    "PostgreSQL",
]


# ─── Candidates ────────────────────────────────────────────────
# Skills are referenced by name; names missing from SKILLS are ignored.

CANDIDATES = [
    {
        "full_name": "Mirko Poledica",
        "date_of_birth": date(2002, 5, 26),
        "email": "mirkop@example.com",
        "phone": "225883",
        "skills": ["C#", "PostgreSQL"],
    },
    {
        "full_name": "Ana Petrović",
        "date_of_birth": date(1997, 12, 1),
        "email": "ana@example.com",
        "phone": "+38160123456",
        "skills": ["ASP.NET Core", "C#", "Docker"],
    },
    {
        "full_name": "Marko Marković",
        "date_of_birth": date(1995, 11, 2),
        "email": "marko@example.com",
        "phone": "+38162123456",
        "skills": ["Java", "SQL"],
    },
]


async def seed_directory(db: AsyncSession) -> Dict[str, int]:
    """
    Insert whatever part of the sample data is missing.

    Returns counts of rows created in this run, so a second run reports zeros.
    """
    skill_repo = SkillRepository()
    candidate_repo = CandidateRepository()
    link_repo = CandidateSkillRepository()
    created = {"skills": 0, "candidates": 0, "links": 0}

    # ── Skills ─────────────────────────────────────────
    skill_ids: Dict[str, int] = {}
    for name in SKILLS:
        skill = await skill_repo.get_by_name(db, name)
        if skill is None:
            skill = await skill_repo.create(db, name=name)
            created["skills"] += 1
        skill_ids[name.lower()] = skill.id

    # ── Candidates + links ─────────────────────────────
    for data in CANDIDATES:
        candidate = await candidate_repo.get_by_email(db, data["email"])
        if candidate is None:
            candidate = await candidate_repo.create(
                db,
                full_name=data["full_name"],
                date_of_birth=data["date_of_birth"],
                email=data["email"],
                phone=data["phone"],
            )
            created["candidates"] += 1

        wanted = {
            skill_ids[name.lower()]
            for name in data["skills"]
            if name.lower() in skill_ids
        }
        created["links"] += await link_repo.add_links(db, candidate.id, wanted)

    await db.commit()
    return created


async def seed():
    """Run the seed process."""
    print("Seeding database...")

    # Initialize tables
    await init_db()
    print("  Tables ensured")

    async with async_session_maker() as db:
        created = await seed_directory(db)

    print(f"  Created {created['skills']} skills (of {len(SKILLS)})")
    print(f"  Created {created['candidates']} candidates (of {len(CANDIDATES)})")
    print(f"  Created {created['links']} candidate skill links")
    print()
    print("Seed complete!")


if __name__ == "__main__":
    asyncio.run(seed())
