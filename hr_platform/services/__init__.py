"""
Service layer - business logic and orchestration.

Services contain the application's business logic, coordinate between
repositories, and own the transaction boundary of each operation.

RULE: Routes call services. Services call repositories. Never the reverse.
"""
from hr_platform.services.candidate_service import CandidateService
from hr_platform.services.skill_service import SkillService

__all__ = [
    "CandidateService",
    "SkillService",
]
