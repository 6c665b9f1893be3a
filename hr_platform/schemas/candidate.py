"""
Candidate schemas.
"""
from datetime import date
from typing import List

from pydantic import EmailStr, Field, field_validator

from hr_platform.schemas.base import BaseSchema, IDSchema
from hr_platform.schemas.skill import SkillResponse


class CandidateBase(BaseSchema):
    """Fields accepted on create and update."""

    full_name: str = Field(..., min_length=1, max_length=80)
    date_of_birth: date
    email: EmailStr  # email-validator caps addresses at 254 chars, inside the 256 column
    phone: str = Field(..., min_length=1, max_length=32)

    @field_validator("full_name", "email", "phone", mode="before")
    @classmethod
    def strip_text(cls, v):
        # Trimmed before the length limits apply; blank values then fail min_length
        if isinstance(v, str):
            return v.strip()
        return v


class CandidateCreate(CandidateBase):
    """Candidate creation schema. Skills are optional and may repeat."""

    skill_ids: List[int] = []


class CandidateUpdate(CandidateBase):
    """Candidate update schema. Every field is replaced; skills are untouched."""

    pass


class AssignSkillsRequest(BaseSchema):
    """Skill ids to link to a candidate. Already-linked ids are ignored."""

    skill_ids: List[int]


class CandidateResponse(IDSchema):
    """Candidate projection including assigned skills."""

    full_name: str
    date_of_birth: date
    email: str
    phone: str
    skills: List[SkillResponse] = []
