"""Core module exports."""
from hr_platform.core.config import settings, get_settings
from hr_platform.core.database import (
    Base,
    get_db,
    init_db,
    close_db,
    engine,
    async_session_maker,
    is_unique_violation,
)
from hr_platform.core.exceptions import (
    APIException,
    BadRequestException,
    NotFoundException,
    ConflictException,
    CandidateNotFoundException,
    SkillNotFoundException,
    SkillsNotFoundException,
    SkillNotAssignedException,
    EmailAlreadyExistsException,
    SkillAlreadyExistsException,
    InvalidSkillIdsException,
)

__all__ = [
    # Config
    "settings",
    "get_settings",
    # Database
    "Base",
    "get_db",
    "init_db",
    "close_db",
    "engine",
    "async_session_maker",
    "is_unique_violation",
    # Exceptions
    "APIException",
    "BadRequestException",
    "NotFoundException",
    "ConflictException",
    "CandidateNotFoundException",
    "SkillNotFoundException",
    "SkillsNotFoundException",
    "SkillNotAssignedException",
    "EmailAlreadyExistsException",
    "SkillAlreadyExistsException",
    "InvalidSkillIdsException",
]
