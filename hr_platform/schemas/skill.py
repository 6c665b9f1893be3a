"""
Skill schemas.
"""
from pydantic import Field, field_validator

from hr_platform.schemas.base import BaseSchema, IDSchema


class SkillBase(BaseSchema):
    """Base skill schema."""

    name: str = Field(..., min_length=1, max_length=100)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        # Trimmed before the length limits apply; a blank name then fails min_length
        if isinstance(v, str):
            return v.strip()
        return v


class SkillCreate(SkillBase):
    """Skill creation schema."""

    pass


class SkillUpdate(SkillBase):
    """Skill update schema. Full replace; the name is the only field."""

    pass


class SkillResponse(IDSchema):
    """Skill as returned by the API and embedded in candidates."""

    name: str
