"""
Skill repository - data access for Skill entity.
"""
from typing import Iterable, List, Optional, Set, Tuple

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from hr_platform.models.skill import Skill
from hr_platform.repositories.base import BaseRepository


class SkillRepository(BaseRepository[Skill]):
    def __init__(self):
        super().__init__(Skill)

    async def search(
        self,
        db: AsyncSession,
        *,
        query: Optional[str] = None,
        page: int = 1,
        page_size: int = 20,
    ) -> Tuple[List[Skill], int]:
        """
        Find skills whose name contains `query` (any case), ordered by name ignoring case.

        Returns:
            Tuple of (skills on the requested page, total matches)
        """
        stmt = select(Skill)

        if query:
            stmt = stmt.where(Skill.name.icontains(query, autoescape=True))

        count_stmt = select(func.count()).select_from(stmt.subquery())
        total = (await db.execute(count_stmt)).scalar() or 0

        stmt = stmt.order_by(func.lower(Skill.name), Skill.id)
        stmt = stmt.offset((page - 1) * page_size).limit(page_size)

        result = await db.execute(stmt)
        return list(result.scalars().all()), total

    async def get_by_name(
        self,
        db: AsyncSession,
        name: str,
    ) -> Optional[Skill]:
        """Find a skill by name, ignoring case."""
        result = await db.execute(
            select(Skill).where(func.lower(Skill.name) == name.lower())
        )
        return result.scalar_one_or_none()

    async def find_existing_ids(
        self,
        db: AsyncSession,
        skill_ids: Iterable[int],
    ) -> Set[int]:
        """Return the subset of `skill_ids` that exist."""
        wanted = set(skill_ids)
        if not wanted:
            return set()

        result = await db.execute(
            select(Skill.id).where(Skill.id.in_(wanted))
        )
        return set(result.scalars().all())
