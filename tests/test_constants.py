"""Tests for query parameter coercion."""
from hr_platform.core.constants import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    MatchMode,
    SortDirection,
    SortField,
    normalize_page,
    normalize_page_size,
)


class TestNormalizePage:
    def test_positive_page_kept(self):
        """Valid pages pass through."""
        assert normalize_page(3) == 3

    def test_zero_and_negative_become_first_page(self):
        """Pages below 1 mean page 1."""
        assert normalize_page(0) == 1
        assert normalize_page(-5) == 1

    def test_missing_page(self):
        assert normalize_page(None) == 1


class TestNormalizePageSize:
    def test_in_range_kept(self):
        """Sizes within [1, MAX_PAGE_SIZE] pass through."""
        assert normalize_page_size(1) == 1
        assert normalize_page_size(MAX_PAGE_SIZE) == MAX_PAGE_SIZE

    def test_out_of_range_falls_back_to_default(self):
        """Oversized or non-positive sizes become the default, not the max."""
        assert normalize_page_size(0) == DEFAULT_PAGE_SIZE
        assert normalize_page_size(MAX_PAGE_SIZE + 1) == DEFAULT_PAGE_SIZE
        assert normalize_page_size(999) == DEFAULT_PAGE_SIZE
        assert normalize_page_size(None) == DEFAULT_PAGE_SIZE


class TestEnumParsing:
    def test_match_mode(self):
        """Only 'all' (any case) selects ALL."""
        assert MatchMode.parse("all") is MatchMode.ALL
        assert MatchMode.parse(" ALL ") is MatchMode.ALL
        assert MatchMode.parse("any") is MatchMode.ANY
        assert MatchMode.parse("every") is MatchMode.ANY
        assert MatchMode.parse(None) is MatchMode.ANY

    def test_sort_field(self):
        """Known keys parse case-insensitively; anything else sorts by name."""
        assert SortField.parse("dob") is SortField.DOB
        assert SortField.parse("Email") is SortField.EMAIL
        assert SortField.parse("phone") is SortField.PHONE
        assert SortField.parse("salary") is SortField.NAME
        assert SortField.parse(None) is SortField.NAME

    def test_sort_direction(self):
        """Anything except 'desc' is ascending."""
        assert SortDirection.parse("desc") is SortDirection.DESC
        assert SortDirection.parse("DESC") is SortDirection.DESC
        assert SortDirection.parse("down") is SortDirection.ASC
        assert SortDirection.parse(None) is SortDirection.ASC
