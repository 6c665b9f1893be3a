"""
Repository layer - data access abstraction.

Repositories handle all database queries, keeping SQL/ORM logic
out of the service and route layers.
"""
from hr_platform.repositories.base import BaseRepository
from hr_platform.repositories.candidate_repository import CandidateRepository
from hr_platform.repositories.skill_repository import SkillRepository
from hr_platform.repositories.candidate_skill_repository import CandidateSkillRepository

__all__ = [
    "BaseRepository",
    "CandidateRepository",
    "SkillRepository",
    "CandidateSkillRepository",
]
