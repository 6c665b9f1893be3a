"""Tests for unique-violation detection across drivers."""
from sqlalchemy.exc import IntegrityError

from hr_platform.core.database import is_unique_violation


class _AsyncpgError(Exception):
    def __init__(self, sqlstate):
        super().__init__("driver error")
        self.sqlstate = sqlstate


class _SqliteError(Exception):
    pass


def _wrap(orig: Exception) -> IntegrityError:
    return IntegrityError("INSERT ...", {}, orig)


class TestIsUniqueViolation:
    def test_postgres_unique_sqlstate(self):
        """SQLSTATE 23505 is a unique violation."""
        assert is_unique_violation(_wrap(_AsyncpgError("23505")))

    def test_postgres_other_sqlstate(self):
        """A foreign key violation (23503) is not."""
        assert not is_unique_violation(_wrap(_AsyncpgError("23503")))

    def test_sqlite_message(self):
        assert is_unique_violation(
            _wrap(_SqliteError("UNIQUE constraint failed: index 'uq_skills_name_lower'"))
        )

    def test_sqlite_foreign_key_message(self):
        assert not is_unique_violation(_wrap(_SqliteError("FOREIGN KEY constraint failed")))
