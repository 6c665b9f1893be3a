"""
Candidate repository - data access for Candidate entity.

Owns the directory query: name filter, skill membership filter (ANY/ALL),
single-key sort and offset pagination composed into one statement.
"""
from typing import Dict, List, Optional, Sequence, Tuple

from sqlalchemy import select, func, and_, distinct
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.sql.elements import ColumnElement

from hr_platform.core.constants import MatchMode, SortDirection, SortField
from hr_platform.models.candidate import Candidate
from hr_platform.models.candidate_skill import CandidateSkill
from hr_platform.repositories.base import BaseRepository

# Sort key -> column. Emails compare ignoring case, like their unique index.
SORT_COLUMNS: Dict[SortField, ColumnElement] = {
    SortField.NAME: Candidate.full_name,
    SortField.DOB: Candidate.date_of_birth,
    SortField.EMAIL: func.lower(Candidate.email),
    SortField.PHONE: Candidate.phone,
}

_WITH_SKILLS = selectinload(Candidate.skill_links).selectinload(CandidateSkill.skill)


def skill_membership_filter(
    skill_ids: Sequence[int],
    match_mode: MatchMode,
) -> ColumnElement[bool]:
    """
    Predicate over Candidate for the requested skill ids.

    ANY: at least one relation row points at a requested skill.
    ALL: the number of distinct requested skills the candidate holds equals
    the number requested. Extra skills do not disqualify a candidate.
    """
    wanted = sorted(set(skill_ids))

    if match_mode is MatchMode.ALL:
        held = (
            select(func.count(distinct(CandidateSkill.skill_id)))
            .where(
                CandidateSkill.candidate_id == Candidate.id,
                CandidateSkill.skill_id.in_(wanted),
            )
            .correlate(Candidate)
            .scalar_subquery()
        )
        return held == len(wanted)

    return Candidate.skill_links.any(CandidateSkill.skill_id.in_(wanted))


class CandidateRepository(BaseRepository[Candidate]):
    def __init__(self):
        super().__init__(Candidate)

    async def find_with_filters(
        self,
        db: AsyncSession,
        *,
        name: Optional[str] = None,
        skill_ids: Optional[Sequence[int]] = None,
        match_mode: MatchMode = MatchMode.ANY,
        sort_by: SortField = SortField.NAME,
        sort_dir: SortDirection = SortDirection.ASC,
        page: int = 1,
        page_size: int = 20,
    ) -> Tuple[List[Candidate], int]:
        """
        Find candidates with filters, sorting, pagination and total count.

        Arguments are expected to be normalized already; blank `name` and
        empty `skill_ids` disable their filter.

        Returns:
            Tuple of (candidates with skills loaded, total filtered count)
        """
        query = select(Candidate)

        filters = []

        if name:
            filters.append(Candidate.full_name.icontains(name, autoescape=True))

        if skill_ids:
            filters.append(skill_membership_filter(skill_ids, match_mode))

        if filters:
            query = query.where(and_(*filters))

        # Total count
        count_query = select(func.count()).select_from(query.subquery())
        total_result = await db.execute(count_query)
        total = total_result.scalar() or 0

        # Sorting; id only keeps page boundaries deterministic between equal keys
        column = SORT_COLUMNS[sort_by]
        if sort_dir is SortDirection.DESC:
            query = query.order_by(column.desc(), Candidate.id.desc())
        else:
            query = query.order_by(column.asc(), Candidate.id.asc())

        # Pagination
        query = query.offset((page - 1) * page_size).limit(page_size)
        query = query.options(_WITH_SKILLS).execution_options(populate_existing=True)

        result = await db.execute(query)
        candidates = list(result.scalars().all())

        return candidates, total

    async def get_with_skills(
        self,
        db: AsyncSession,
        candidate_id: int,
    ) -> Optional[Candidate]:
        """
        Get a candidate with skill links and skills eagerly loaded.

        populate_existing makes the reload reflect rows written earlier in the
        same session instead of returning a stale identity-map copy.
        """
        result = await db.execute(
            select(Candidate)
            .options(_WITH_SKILLS)
            .where(Candidate.id == candidate_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_by_email(
        self,
        db: AsyncSession,
        email: str,
    ) -> Optional[Candidate]:
        """Find a candidate by email, ignoring case."""
        result = await db.execute(
            select(Candidate).where(func.lower(Candidate.email) == email.lower())
        )
        return result.scalar_one_or_none()
