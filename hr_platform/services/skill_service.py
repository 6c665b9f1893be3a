"""
Skill service - business logic for the skill directory.

Skill names are unique ignoring case. The unique index is the source of
truth: a duplicate is detected when the write is flushed, rolled back, and
reported as a conflict.
"""
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from hr_platform.core.constants import normalize_page, normalize_page_size
from hr_platform.core.database import is_unique_violation
from hr_platform.core.exceptions import SkillAlreadyExistsException, SkillNotFoundException
from hr_platform.core.logging import get_logger
from hr_platform.models.skill import Skill
from hr_platform.repositories.skill_repository import SkillRepository
from hr_platform.schemas.base import PaginatedResponse
from hr_platform.schemas.skill import SkillResponse

logger = get_logger(__name__)


class SkillService:
    """Handles skill listing, search and CRUD."""

    def __init__(self):
        self.skill_repo = SkillRepository()

    async def list_skills(
        self,
        db: AsyncSession,
        *,
        query: Optional[str] = None,
        page: Optional[int] = 1,
        page_size: Optional[int] = 20,
    ) -> PaginatedResponse[SkillResponse]:
        """Search skills by name substring, ordered by name."""
        page = normalize_page(page)
        page_size = normalize_page_size(page_size)
        term = query.strip() if query else None

        skills, total = await self.skill_repo.search(
            db,
            query=term or None,
            page=page,
            page_size=page_size,
        )

        return PaginatedResponse[SkillResponse].build(
            [self._to_response(skill) for skill in skills],
            total,
            page,
            page_size,
        )

    async def get_skill(
        self,
        db: AsyncSession,
        skill_id: int,
    ) -> SkillResponse:
        """
        Raises:
            SkillNotFoundException: If the skill doesn't exist.
        """
        skill = await self.skill_repo.get_by_id(db, skill_id)
        if not skill:
            raise SkillNotFoundException(skill_id)
        return self._to_response(skill)

    async def create_skill(
        self,
        db: AsyncSession,
        name: str,
    ) -> SkillResponse:
        """
        Create a skill with a trimmed name.

        Raises:
            SkillAlreadyExistsException: If the name exists in any casing.
        """
        name = name.strip()
        try:
            skill = await self.skill_repo.create(db, name=name)
            await db.commit()
        except IntegrityError as exc:
            await db.rollback()
            if not is_unique_violation(exc):
                raise
            logger.info("skill_conflict", name=name)
            raise SkillAlreadyExistsException(name) from exc

        logger.info("skill_created", skill_id=skill.id, name=skill.name)
        return self._to_response(skill)

    async def update_skill(
        self,
        db: AsyncSession,
        skill_id: int,
        name: str,
    ) -> SkillResponse:
        """
        Rename a skill.

        Raises:
            SkillNotFoundException: If the skill doesn't exist.
            SkillAlreadyExistsException: If another skill has the name.
        """
        skill = await self.skill_repo.get_by_id(db, skill_id)
        if not skill:
            raise SkillNotFoundException(skill_id)

        name = name.strip()
        try:
            skill = await self.skill_repo.update(db, skill, name=name)
            await db.commit()
        except IntegrityError as exc:
            await db.rollback()
            if not is_unique_violation(exc):
                raise
            logger.info("skill_conflict", name=name)
            raise SkillAlreadyExistsException(name) from exc

        logger.info("skill_updated", skill_id=skill.id, name=skill.name)
        return self._to_response(skill)

    async def delete_skill(
        self,
        db: AsyncSession,
        skill_id: int,
    ) -> None:
        """
        Delete a skill. Its candidate links are removed by the database cascade.

        Raises:
            SkillNotFoundException: If the skill doesn't exist.
        """
        deleted = await self.skill_repo.delete(db, skill_id)
        if not deleted:
            raise SkillNotFoundException(skill_id)

        await db.commit()
        logger.info("skill_deleted", skill_id=skill_id)

    def _to_response(self, skill: Skill) -> SkillResponse:
        return SkillResponse(id=skill.id, name=skill.name)
