"""
CandidateSkill model - association rows linking candidates to skills.
"""
from typing import TYPE_CHECKING
from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hr_platform.core.database import Base

if TYPE_CHECKING:
    from hr_platform.models.candidate import Candidate
    from hr_platform.models.skill import Skill


class CandidateSkill(Base):
    """
    "Candidate possesses skill" relation row.

    The composite primary key makes each (candidate, skill) pair unique.
    Rows have no lifecycle of their own: both foreign keys cascade on delete.
    """

    __tablename__ = "candidate_skills"

    candidate_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("candidates.id", ondelete="CASCADE"),
        primary_key=True,
    )
    skill_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("skills.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )

    # Relationships
    candidate: Mapped["Candidate"] = relationship("Candidate", back_populates="skill_links")
    skill: Mapped["Skill"] = relationship("Skill", back_populates="candidate_links")

    def __repr__(self) -> str:
        return f"<CandidateSkill candidate_id={self.candidate_id} skill_id={self.skill_id}>"
