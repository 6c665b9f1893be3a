"""
Skill model - a flat, name-unique skill.
"""
from typing import TYPE_CHECKING, List
from sqlalchemy import Index, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hr_platform.models.base import BaseModel

if TYPE_CHECKING:
    from hr_platform.models.candidate_skill import CandidateSkill


class Skill(BaseModel):
    """Skill entity. Names are unique ignoring case ("Python" == "python")."""

    __tablename__ = "skills"

    name: Mapped[str] = mapped_column(String(100), nullable=False)

    # Relationships
    candidate_links: Mapped[List["CandidateSkill"]] = relationship(
        "CandidateSkill",
        back_populates="skill",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Skill {self.name}>"


Index("uq_skills_name_lower", func.lower(Skill.name), unique=True)
