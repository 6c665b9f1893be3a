"""
Candidate model - a person in the talent directory.
"""
from datetime import date
from typing import TYPE_CHECKING, List
from sqlalchemy import Date, Index, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hr_platform.models.base import BaseModel

if TYPE_CHECKING:
    from hr_platform.models.candidate_skill import CandidateSkill


class Candidate(BaseModel):
    """
    Candidate entity.

    Email is unique regardless of case, enforced by a functional index on
    lower(email) so the rule holds on PostgreSQL and SQLite alike.
    """

    __tablename__ = "candidates"

    # Fields
    full_name: Mapped[str] = mapped_column(String(80), nullable=False, index=True)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    email: Mapped[str] = mapped_column(String(256), nullable=False)
    phone: Mapped[str] = mapped_column(String(32), nullable=False)

    # Relationships
    skill_links: Mapped[List["CandidateSkill"]] = relationship(
        "CandidateSkill",
        back_populates="candidate",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Candidate {self.id} {self.email}>"


Index("uq_candidates_email_lower", func.lower(Candidate.email), unique=True)
