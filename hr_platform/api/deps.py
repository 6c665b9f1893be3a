"""
API dependencies for dependency injection.
"""
from typing import List, Optional

from fastapi import Query

from hr_platform.core.exceptions import InvalidSkillIdsException


def parse_skill_ids(
    skills: Optional[str] = Query(
        None,
        description="Comma-separated skill IDs, e.g. 1,2,3",
    ),
) -> Optional[List[int]]:
    """
    Parse the `skills` query parameter into distinct integer ids.

    Entries that are not integers are dropped. Omitting the parameter means
    "no skill filter"; supplying it without a single usable id is an error.

    Raises:
        InvalidSkillIdsException: If `skills` is present but yields no ids.
    """
    if skills is None or not skills.strip():
        return None

    ids: List[int] = []
    for part in skills.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            skill_id = int(part)
        except ValueError:
            continue
        if skill_id not in ids:
            ids.append(skill_id)

    if not ids:
        raise InvalidSkillIdsException()
    return ids
