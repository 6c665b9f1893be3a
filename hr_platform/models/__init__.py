"""
Database models for the HR platform.

Entities use integer primary keys and carry created_at/updated_at timestamps;
the candidate-skill association is keyed by its two foreign keys.
"""
from hr_platform.models.base import BaseModel, TimestampMixin, IntegerIDMixin
from hr_platform.models.candidate import Candidate
from hr_platform.models.skill import Skill
from hr_platform.models.candidate_skill import CandidateSkill

__all__ = [
    "BaseModel",
    "TimestampMixin",
    "IntegerIDMixin",
    "Candidate",
    "Skill",
    "CandidateSkill",
]
