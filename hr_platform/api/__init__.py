"""
API package.
"""
from hr_platform.api.routes import api_router
from hr_platform.api.deps import parse_skill_ids

__all__ = [
    "api_router",
    "parse_skill_ids",
]
