from __future__ import annotations

import pytest

from payments_api.domain.models import FilterCriteria
from payments_api.errors import InvalidFiltersError
from payments_api.validation import (
    BEFORE_AND_AFTER,
    DATE_AND_RANGE,
    DATE_INVALID,
    RECIPIENT_INVALID,
    validate_filters,
)

BAD_REQUEST = 400


def _assert_invalid(params: dict, message: str) -> None:
    result = validate_filters(params)
    assert result.is_valid is False
    assert result.status == BAD_REQUEST
    assert result.body == {"error": "Invalid filters", "message": message}
    assert result.criteria is None


def test_empty_filters_are_valid():
    result = validate_filters({})
    assert result.is_valid is True
    assert result.criteria == FilterCriteria()
    assert result.body is None


@pytest.mark.parametrize(
    "params",
    [
        {"after": "2025-01-01", "before": "2025-02-01"},
        {"after": "2025-01-01", "before": "2025-02-01", "recipient": "John"},
        {"after": "garbage", "before": "garbage", "date": "2025-01-01"},
        {"after": "2025-01-01", "before": "2025-02-01", "recipient": "   "},
    ],
)
def test_after_and_before_together_is_rejected_first(params):
    _assert_invalid(params, BEFORE_AND_AFTER)


@pytest.mark.parametrize(
    "params",
    [
        {"date": "2025-01-01", "after": "2024-12-01"},
        {"date": "2025-01-01", "before": "2025-02-01"},
        {"date": "not-a-date", "before": "2025-02-01"},
    ],
)
def test_date_with_range_is_rejected(params):
    _assert_invalid(params, DATE_AND_RANGE)


@pytest.mark.parametrize(
    "value",
    # only ISO-8601 is accepted; slash and month-name forms are rejected
    ["not-a-date", "2025-13-01", "2025-02-30", "tomorrow", "07/26", "2025/07/26", "Jul 26 2025"],
)
def test_unparseable_date_is_rejected(value):
    _assert_invalid({"date": value}, DATE_INVALID)


@pytest.mark.parametrize("value", ["2025-07-26", "2025-07-26T10:30:00", "2025-07-26T10:30:00Z"])
def test_parseable_date_is_accepted(value):
    result = validate_filters({"date": value})
    assert result.is_valid is True
    assert result.criteria.date == value


@pytest.mark.parametrize("value", [" ", "\t", "   \n", 42, ["John"], {"name": "John"}])
def test_blank_or_non_string_recipient_is_rejected(value):
    _assert_invalid({"recipient": value}, RECIPIENT_INVALID)


@pytest.mark.parametrize("value", ["John", " jo ", "x"])
def test_non_blank_recipient_is_accepted(value):
    result = validate_filters({"recipient": value})
    assert result.is_valid is True
    assert result.criteria.recipient == value


def test_empty_strings_behave_as_not_provided():
    result = validate_filters({"recipient": "", "after": "", "before": "2025-01-01", "date": ""})
    assert result.is_valid is True
    assert result.criteria == FilterCriteria(before="2025-01-01")


def test_none_values_behave_as_not_provided():
    result = validate_filters({"recipient": None, "after": "2025-01-01", "before": None, "date": None})
    assert result.is_valid is True
    assert result.criteria == FilterCriteria(after="2025-01-01")


def test_unparseable_after_is_not_format_checked():
    result = validate_filters({"after": "whenever"})
    assert result.is_valid is True
    assert result.criteria.after == "whenever"


def test_accepts_filter_criteria_instance():
    result = validate_filters(FilterCriteria(after="2025-01-01", before="2025-02-01"))
    assert result.is_valid is False
    assert result.message == BEFORE_AND_AFTER


def test_raise_for_error_returns_criteria_or_raises():
    assert validate_filters({"recipient": "Jane"}).raise_for_error() == FilterCriteria(
        recipient="Jane"
    )

    with pytest.raises(InvalidFiltersError) as exc_info:
        validate_filters({"date": "nope"}).raise_for_error()
    assert exc_info.value.status == BAD_REQUEST
    assert exc_info.value.body == {"error": "Invalid filters", "message": DATE_INVALID}
