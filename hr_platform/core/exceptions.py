"""
Custom exceptions for the application.
All API exceptions should inherit from APIException for consistent error handling.
"""
from typing import Any, Iterable, Optional


class APIException(Exception):
    """
    Base exception for all API errors.
    Provides consistent error response format.
    """

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: Optional[Any] = None,
    ):
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details
        super().__init__(self.message)


class BadRequestException(APIException):
    """400 Bad Request"""

    def __init__(
        self,
        message: str = "Bad request",
        code: str = "BAD_REQUEST",
        details: Optional[Any] = None,
    ):
        super().__init__(400, code, message, details)


class NotFoundException(APIException):
    """404 Not Found"""

    def __init__(
        self,
        message: str = "Resource not found",
        code: str = "NOT_FOUND",
        details: Optional[Any] = None,
    ):
        super().__init__(404, code, message, details)


class ConflictException(APIException):
    """409 Conflict"""

    def __init__(
        self,
        message: str = "Resource conflict",
        code: str = "CONFLICT",
        details: Optional[Any] = None,
    ):
        super().__init__(409, code, message, details)


# Resource specific exceptions
class CandidateNotFoundException(NotFoundException):
    """Candidate not found"""

    def __init__(self, candidate_id: int):
        super().__init__(
            message=f"Candidate {candidate_id} not found",
            code="CANDIDATE_NOT_FOUND",
            details={"candidate_id": candidate_id},
        )


class SkillNotFoundException(NotFoundException):
    """Skill not found"""

    def __init__(self, skill_id: int):
        super().__init__(
            message=f"Skill {skill_id} not found",
            code="SKILL_NOT_FOUND",
            details={"skill_id": skill_id},
        )


class SkillsNotFoundException(NotFoundException):
    """One or more referenced skill ids do not exist"""

    def __init__(self, missing_ids: Iterable[int]):
        missing = sorted(set(missing_ids))
        super().__init__(
            message=f"Skills not found: {', '.join(str(i) for i in missing)}",
            code="SKILLS_NOT_FOUND",
            details={"missing_ids": missing},
        )
        self.missing_ids = missing


class SkillNotAssignedException(NotFoundException):
    """The candidate does not hold the skill"""

    def __init__(self, candidate_id: int, skill_id: int):
        super().__init__(
            message=f"Skill {skill_id} is not assigned to candidate {candidate_id}",
            code="SKILL_NOT_ASSIGNED",
            details={"candidate_id": candidate_id, "skill_id": skill_id},
        )


class EmailAlreadyExistsException(ConflictException):
    """Candidate email already in use"""

    def __init__(self, email: str):
        super().__init__(
            message=f"Email '{email}' is already in use",
            code="EMAIL_EXISTS",
        )


class SkillAlreadyExistsException(ConflictException):
    """Skill name already in use"""

    def __init__(self, name: str):
        super().__init__(
            message=f"Skill '{name}' already exists",
            code="SKILL_EXISTS",
        )


class InvalidSkillIdsException(BadRequestException):
    """The skills query parameter yielded no usable ids"""

    def __init__(self):
        super().__init__(
            message="Invalid 'skills' value. Use comma-separated skill IDs, e.g. ?skills=1,2,3",
            code="INVALID_SKILLS",
        )
