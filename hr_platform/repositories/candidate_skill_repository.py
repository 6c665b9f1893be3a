"""
CandidateSkill repository - relation rows between candidates and skills.

Rows are looked up by either foreign key; there is no surrogate id.
"""
from typing import Iterable

from sqlalchemy import select, func, delete
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from hr_platform.models.candidate_skill import CandidateSkill

# Both dialects support INSERT ... ON CONFLICT DO NOTHING
_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class CandidateSkillRepository:
    async def add_links(
        self,
        db: AsyncSession,
        candidate_id: int,
        skill_ids: Iterable[int],
    ) -> int:
        """
        Insert one row per skill id, skipping pairs that already exist.

        Existing pairs, including ones committed by a concurrent request, are
        ignored by the database (ON CONFLICT DO NOTHING).

        Returns:
            Number of rows actually inserted
        """
        rows = [
            {"candidate_id": candidate_id, "skill_id": skill_id}
            for skill_id in sorted(set(skill_ids))
        ]
        if not rows:
            return 0

        insert = _DIALECT_INSERTS[db.get_bind().dialect.name]
        stmt = (
            insert(CandidateSkill.__table__)
            .values(rows)
            .on_conflict_do_nothing(index_elements=["candidate_id", "skill_id"])
        )
        result = await db.execute(stmt)
        return result.rowcount

    async def delete_link(
        self,
        db: AsyncSession,
        candidate_id: int,
        skill_id: int,
    ) -> bool:
        """Delete exactly one (candidate, skill) row. Returns False if there was none."""
        result = await db.execute(
            delete(CandidateSkill).where(
                CandidateSkill.candidate_id == candidate_id,
                CandidateSkill.skill_id == skill_id,
            )
        )
        return result.rowcount > 0

    async def count_for_candidate(
        self,
        db: AsyncSession,
        candidate_id: int,
    ) -> int:
        result = await db.execute(
            select(func.count()).where(CandidateSkill.candidate_id == candidate_id)
        )
        return result.scalar() or 0

    async def count_for_skill(
        self,
        db: AsyncSession,
        skill_id: int,
    ) -> int:
        result = await db.execute(
            select(func.count()).where(CandidateSkill.skill_id == skill_id)
        )
        return result.scalar() or 0
