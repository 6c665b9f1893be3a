"""
Pydantic schemas for API validation and serialization.
"""
from hr_platform.schemas.base import (
    BaseSchema,
    IDSchema,
    PaginatedResponse,
    ErrorResponse,
)
from hr_platform.schemas.skill import (
    SkillCreate,
    SkillUpdate,
    SkillResponse,
)
from hr_platform.schemas.candidate import (
    CandidateCreate,
    CandidateUpdate,
    CandidateResponse,
    AssignSkillsRequest,
)

__all__ = [
    # Base
    "BaseSchema",
    "IDSchema",
    "PaginatedResponse",
    "ErrorResponse",
    # Skill
    "SkillCreate",
    "SkillUpdate",
    "SkillResponse",
    # Candidate
    "CandidateCreate",
    "CandidateUpdate",
    "CandidateResponse",
    "AssignSkillsRequest",
]
