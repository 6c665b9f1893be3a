"""Tests for request schema trimming and length limits."""
from datetime import date

import pytest
from pydantic import ValidationError

from hr_platform.schemas.candidate import CandidateCreate
from hr_platform.schemas.skill import SkillCreate


def _candidate(**overrides):
    data = {
        "full_name": "Ana Petrovic",
        "date_of_birth": date(1998, 5, 14),
        "email": "ana@example.com",
        "phone": "+38164111222",
    }
    data.update(overrides)
    return CandidateCreate(**data)


class TestSkillSchema:
    def test_name_trimmed_before_length_check(self):
        """Surrounding whitespace does not count toward the 100 char limit."""
        skill = SkillCreate(name="  " + "x" * 100 + " ")
        assert skill.name == "x" * 100

    def test_name_too_long_after_trim(self):
        with pytest.raises(ValidationError):
            SkillCreate(name="x" * 101)

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            SkillCreate(name="   ")


class TestCandidateSchema:
    def test_fields_trimmed_before_length_check(self):
        """A full name that fits once trimmed is accepted and stored trimmed."""
        candidate = _candidate(full_name=" " + "x" * 80, phone=" 123 ", email=" ana@example.com ")
        assert candidate.full_name == "x" * 80
        assert candidate.phone == "123"
        assert candidate.email == "ana@example.com"

    def test_full_name_too_long_after_trim(self):
        with pytest.raises(ValidationError):
            _candidate(full_name="x" * 81)

    def test_blank_phone_rejected(self):
        with pytest.raises(ValidationError):
            _candidate(phone="   ")

    def test_skill_ids_default_empty(self):
        assert _candidate().skill_ids == []
