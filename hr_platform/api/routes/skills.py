"""
Skill routes.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from hr_platform.core.database import get_db
from hr_platform.core.rate_limit import RATE_DEFAULT, RATE_WRITE, limiter
from hr_platform.schemas.base import PaginatedResponse
from hr_platform.schemas.skill import SkillCreate, SkillResponse, SkillUpdate
from hr_platform.services.skill_service import SkillService

router = APIRouter(prefix="/skills", tags=["skills"])

skill_service = SkillService()


@router.get("/", response_model=PaginatedResponse[SkillResponse])
@limiter.limit(RATE_DEFAULT)
async def list_skills(
    request: Request,
    response: Response,
    query: Optional[str] = Query(None, description="Substring of the skill name, any case"),
    page: int = Query(1),
    page_size: int = Query(20, alias="pageSize"),
    db: AsyncSession = Depends(get_db),
):
    """List skills ordered by name. The total is also sent as X-Total-Count."""
    result = await skill_service.list_skills(
        db,
        query=query,
        page=page,
        page_size=page_size,
    )
    response.headers["X-Total-Count"] = str(result.total)
    return result


@router.get("/{skill_id}", response_model=SkillResponse)
@limiter.limit(RATE_DEFAULT)
async def get_skill(
    request: Request,
    skill_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get a single skill by ID."""
    return await skill_service.get_skill(db, skill_id)


@router.post("/", response_model=SkillResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(RATE_WRITE)
async def create_skill(
    request: Request,
    response: Response,
    data: SkillCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a skill. Names are unique ignoring case."""
    created = await skill_service.create_skill(db, data.name)
    response.headers["Location"] = str(request.url_for("get_skill", skill_id=created.id))
    return created


@router.put("/{skill_id}", response_model=SkillResponse)
@limiter.limit(RATE_WRITE)
async def update_skill(
    request: Request,
    skill_id: int,
    data: SkillUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Rename a skill."""
    return await skill_service.update_skill(db, skill_id, data.name)


@router.delete("/{skill_id}", status_code=status.HTTP_204_NO_CONTENT)
@limiter.limit(RATE_WRITE)
async def delete_skill(
    request: Request,
    skill_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Delete a skill; candidates lose it automatically."""
    await skill_service.delete_skill(db, skill_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
