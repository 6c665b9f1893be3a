"""
Candidate service - directory queries and candidate/skill relationship upkeep.

Every public method is one unit of work: existence checks run before anything
is written, and the operation commits once at the end or not at all.
"""
from typing import Iterable, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from hr_platform.core.constants import (
    MatchMode,
    SortDirection,
    SortField,
    normalize_page,
    normalize_page_size,
)
from hr_platform.core.database import is_unique_violation
from hr_platform.core.exceptions import (
    CandidateNotFoundException,
    EmailAlreadyExistsException,
    SkillNotAssignedException,
    SkillsNotFoundException,
)
from hr_platform.core.logging import get_logger
from hr_platform.models.candidate import Candidate
from hr_platform.models.candidate_skill import CandidateSkill
from hr_platform.repositories.candidate_repository import CandidateRepository
from hr_platform.repositories.candidate_skill_repository import CandidateSkillRepository
from hr_platform.repositories.skill_repository import SkillRepository
from hr_platform.schemas.base import PaginatedResponse
from hr_platform.schemas.candidate import (
    CandidateCreate,
    CandidateResponse,
    CandidateUpdate,
)
from hr_platform.schemas.skill import SkillResponse

logger = get_logger(__name__)


def _distinct(ids: Optional[Iterable[int]]) -> List[int]:
    """Deduplicate ids, keeping first-seen order."""
    return list(dict.fromkeys(ids or ()))


class CandidateService:
    """Handles candidate search, CRUD and skill assignment."""

    def __init__(self):
        self.candidate_repo = CandidateRepository()
        self.skill_repo = SkillRepository()
        self.link_repo = CandidateSkillRepository()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def list_candidates(
        self,
        db: AsyncSession,
        *,
        name: Optional[str] = None,
        skill_ids: Optional[Iterable[int]] = None,
        match: Optional[str] = None,
        page: Optional[int] = 1,
        page_size: Optional[int] = 20,
        sort_by: Optional[str] = None,
        sort_dir: Optional[str] = None,
    ) -> PaginatedResponse[CandidateResponse]:
        """
        Filter, sort and paginate the candidate directory.

        Raw parameters are coerced, never rejected: page < 1 is page 1, a page
        size outside [1, 100] is 20, unknown match modes mean "any", unknown
        sort keys mean "name" and anything but "desc" sorts ascending.
        """
        page = normalize_page(page)
        page_size = normalize_page_size(page_size)
        match_mode = MatchMode.parse(match)
        sort_field = SortField.parse(sort_by)
        direction = SortDirection.parse(sort_dir)
        term = name.strip() if name else None

        candidates, total = await self.candidate_repo.find_with_filters(
            db,
            name=term or None,
            skill_ids=_distinct(skill_ids),
            match_mode=match_mode,
            sort_by=sort_field,
            sort_dir=direction,
            page=page,
            page_size=page_size,
        )

        return PaginatedResponse[CandidateResponse].build(
            [self._to_response(candidate) for candidate in candidates],
            total,
            page,
            page_size,
        )

    async def get_candidate(
        self,
        db: AsyncSession,
        candidate_id: int,
    ) -> CandidateResponse:
        """
        Get one candidate with skills ordered by name.

        Raises:
            CandidateNotFoundException: If the candidate doesn't exist.
        """
        candidate = await self.candidate_repo.get_with_skills(db, candidate_id)
        if not candidate:
            raise CandidateNotFoundException(candidate_id)
        return self._to_response(candidate, sort_skills=True)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def create_candidate(
        self,
        db: AsyncSession,
        data: CandidateCreate,
    ) -> CandidateResponse:
        """
        Create a candidate, optionally with skills.

        Skill ids are validated before the candidate is written, so a bad id
        leaves nothing behind. Repeated ids produce a single link.

        Raises:
            SkillsNotFoundException: Naming every requested id that doesn't exist.
            EmailAlreadyExistsException: If the email is taken in any casing.
        """
        skill_ids = _distinct(data.skill_ids)
        await self._ensure_skills_exist(db, skill_ids)

        email = data.email.strip()
        try:
            candidate = await self.candidate_repo.create(
                db,
                full_name=data.full_name.strip(),
                date_of_birth=data.date_of_birth,
                email=email,
                phone=data.phone.strip(),
                skill_links=[CandidateSkill(skill_id=skill_id) for skill_id in skill_ids],
            )
            await db.commit()
        except IntegrityError as exc:
            await db.rollback()
            if not is_unique_violation(exc):
                raise
            logger.info("candidate_email_conflict", email=email)
            raise EmailAlreadyExistsException(email) from exc

        logger.info(
            "candidate_created",
            candidate_id=candidate.id,
            skills_count=len(skill_ids),
        )
        return await self.get_candidate(db, candidate.id)

    async def update_candidate(
        self,
        db: AsyncSession,
        candidate_id: int,
        data: CandidateUpdate,
    ) -> CandidateResponse:
        """
        Replace every candidate field. Skill links are not touched.

        Raises:
            CandidateNotFoundException: If the candidate doesn't exist.
            EmailAlreadyExistsException: If another candidate has the email.
        """
        candidate = await self.candidate_repo.get_by_id(db, candidate_id)
        if not candidate:
            raise CandidateNotFoundException(candidate_id)

        email = data.email.strip()
        try:
            await self.candidate_repo.update(
                db,
                candidate,
                full_name=data.full_name.strip(),
                date_of_birth=data.date_of_birth,
                email=email,
                phone=data.phone.strip(),
            )
            await db.commit()
        except IntegrityError as exc:
            await db.rollback()
            if not is_unique_violation(exc):
                raise
            logger.info("candidate_email_conflict", email=email)
            raise EmailAlreadyExistsException(email) from exc

        logger.info("candidate_updated", candidate_id=candidate_id)
        return await self.get_candidate(db, candidate_id)

    async def delete_candidate(
        self,
        db: AsyncSession,
        candidate_id: int,
    ) -> None:
        """
        Delete a candidate. Skill links go with it via ON DELETE CASCADE.

        Raises:
            CandidateNotFoundException: If the candidate doesn't exist.
        """
        deleted = await self.candidate_repo.delete(db, candidate_id)
        if not deleted:
            raise CandidateNotFoundException(candidate_id)

        await db.commit()
        logger.info("candidate_deleted", candidate_id=candidate_id)

    async def assign_skills(
        self,
        db: AsyncSession,
        candidate_id: int,
        skill_ids: Iterable[int],
    ) -> CandidateResponse:
        """
        Link skills to a candidate. Idempotent.

        Ids the candidate already holds are skipped silently, also when a
        concurrent request linked them first. An empty request just returns
        the current projection.

        Raises:
            CandidateNotFoundException: If the candidate doesn't exist.
            SkillsNotFoundException: Naming every requested id that doesn't
                exist. Nothing is linked in that case.
        """
        requested = _distinct(skill_ids)
        if not requested:
            return await self.get_candidate(db, candidate_id)

        if not await self.candidate_repo.exists(db, candidate_id):
            raise CandidateNotFoundException(candidate_id)

        await self._ensure_skills_exist(db, requested)

        added = await self.link_repo.add_links(db, candidate_id, requested)
        await db.commit()

        logger.info(
            "skills_assigned",
            candidate_id=candidate_id,
            requested=len(requested),
            added=added,
        )
        return await self.get_candidate(db, candidate_id)

    async def remove_skill(
        self,
        db: AsyncSession,
        candidate_id: int,
        skill_id: int,
    ) -> CandidateResponse:
        """
        Unlink one skill from a candidate.

        Raises:
            CandidateNotFoundException: If the candidate doesn't exist.
            SkillNotAssignedException: If the candidate doesn't hold the skill,
                including when it was just removed.
        """
        if not await self.candidate_repo.exists(db, candidate_id):
            raise CandidateNotFoundException(candidate_id)

        removed = await self.link_repo.delete_link(db, candidate_id, skill_id)
        if not removed:
            raise SkillNotAssignedException(candidate_id, skill_id)

        await db.commit()
        logger.info("skill_removed", candidate_id=candidate_id, skill_id=skill_id)
        return await self.get_candidate(db, candidate_id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _ensure_skills_exist(
        self,
        db: AsyncSession,
        skill_ids: List[int],
    ) -> None:
        if not skill_ids:
            return
        existing = await self.skill_repo.find_existing_ids(db, skill_ids)
        missing = [skill_id for skill_id in skill_ids if skill_id not in existing]
        if missing:
            logger.info("skills_not_found", missing_ids=missing)
            raise SkillsNotFoundException(missing)

    def _to_response(
        self,
        candidate: Candidate,
        *,
        sort_skills: bool = False,
    ) -> CandidateResponse:
        """
        Convert a Candidate with loaded links to its projection.

        Only single-candidate reads promise name-ordered skills.
        """
        skills = [
            SkillResponse(id=link.skill.id, name=link.skill.name)
            for link in candidate.skill_links
        ]
        if sort_skills:
            skills.sort(key=lambda skill: (skill.name.lower(), skill.id))

        return CandidateResponse(
            id=candidate.id,
            full_name=candidate.full_name,
            date_of_birth=candidate.date_of_birth,
            email=candidate.email,
            phone=candidate.phone,
            skills=skills,
        )
