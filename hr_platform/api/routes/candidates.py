"""
Candidate routes.

Thin controllers - CandidateService owns filtering, skill assignment and
transactions. Query parameter names follow the public API (pageSize, sortBy, dir).
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from hr_platform.api.deps import parse_skill_ids
from hr_platform.core.database import get_db
from hr_platform.core.rate_limit import RATE_DEFAULT, RATE_WRITE, limiter
from hr_platform.schemas.base import PaginatedResponse
from hr_platform.schemas.candidate import (
    AssignSkillsRequest,
    CandidateCreate,
    CandidateResponse,
    CandidateUpdate,
)
from hr_platform.services.candidate_service import CandidateService

router = APIRouter(prefix="/candidates", tags=["candidates"])

candidate_service = CandidateService()


@router.get("/", response_model=PaginatedResponse[CandidateResponse])
@limiter.limit(RATE_DEFAULT)
async def list_candidates(
    request: Request,
    response: Response,
    name: Optional[str] = Query(None, description="Substring of the full name, any case"),
    skill_ids: Optional[List[int]] = Depends(parse_skill_ids),
    match: str = Query("any", description="any | all"),
    page: int = Query(1),
    page_size: int = Query(20, alias="pageSize"),
    sort_by: str = Query("name", alias="sortBy", description="name | dob | email | phone"),
    sort_dir: str = Query("asc", alias="dir", description="asc | desc"),
    db: AsyncSession = Depends(get_db),
):
    """
    Search candidates.

    Out-of-range paging and unknown match/sort values are coerced to defaults.
    The total match count is also sent as X-Total-Count.
    """
    result = await candidate_service.list_candidates(
        db,
        name=name,
        skill_ids=skill_ids,
        match=match,
        page=page,
        page_size=page_size,
        sort_by=sort_by,
        sort_dir=sort_dir,
    )
    response.headers["X-Total-Count"] = str(result.total)
    return result


@router.get("/{candidate_id}", response_model=CandidateResponse)
@limiter.limit(RATE_DEFAULT)
async def get_candidate(
    request: Request,
    candidate_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get a candidate with skills sorted by name."""
    return await candidate_service.get_candidate(db, candidate_id)


@router.post("/", response_model=CandidateResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(RATE_WRITE)
async def create_candidate(
    request: Request,
    response: Response,
    data: CandidateCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a candidate, optionally linking existing skills."""
    created = await candidate_service.create_candidate(db, data)
    response.headers["Location"] = str(
        request.url_for("get_candidate", candidate_id=created.id)
    )
    return created


@router.put("/{candidate_id}", response_model=CandidateResponse)
@limiter.limit(RATE_WRITE)
async def update_candidate(
    request: Request,
    candidate_id: int,
    data: CandidateUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Replace a candidate's fields. Skills are unchanged."""
    return await candidate_service.update_candidate(db, candidate_id, data)


@router.delete("/{candidate_id}", status_code=status.HTTP_204_NO_CONTENT)
@limiter.limit(RATE_WRITE)
async def delete_candidate(
    request: Request,
    candidate_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Delete a candidate and its skill links."""
    await candidate_service.delete_candidate(db, candidate_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{candidate_id}/skills", response_model=CandidateResponse)
@limiter.limit(RATE_WRITE)
async def assign_skills(
    request: Request,
    candidate_id: int,
    data: AssignSkillsRequest,
    db: AsyncSession = Depends(get_db),
):
    """Link skills to a candidate. Already-linked skills are ignored."""
    return await candidate_service.assign_skills(db, candidate_id, data.skill_ids)


@router.delete("/{candidate_id}/skills/{skill_id}", response_model=CandidateResponse)
@limiter.limit(RATE_WRITE)
async def remove_skill(
    request: Request,
    candidate_id: int,
    skill_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Unlink one skill from a candidate."""
    return await candidate_service.remove_skill(db, candidate_id, skill_id)
