"""Tests for relative-time formatting and moment()."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any

import pytest

from tickago.domain.errors import InvalidConfigError, InvalidDateError
from tickago.domain.models import CalendarDiff
from tickago.domain.relative import format_relative, moment, select_unit


class TestSelectUnit:
    @pytest.mark.parametrize(
        "fields,expected",
        [
            ({"years": 2, "months": 3}, ("year", 2)),
            ({"months": 11, "days": 30}, ("month", 11)),
            ({"days": 3, "hours": 4}, ("day", 3)),
            ({"hours": 1}, ("hour", 1)),
            ({"minutes": 59, "seconds": 59}, ("minute", 59)),
            ({"seconds": 2}, ("second", 2)),
        ],
    )
    def test_coarsest_nonzero(self, fields: dict[str, int], expected: tuple[str, int]) -> None:
        assert select_unit(CalendarDiff(**fields)) == expected

    @pytest.mark.parametrize("seconds", [0, 1])
    def test_one_second_or_less_selects_nothing(self, seconds: int) -> None:
        assert select_unit(CalendarDiff(seconds=seconds)) is None


class TestDefaultLabels:
    @pytest.mark.parametrize(
        "diff,expected",
        [
            (CalendarDiff(days=3), "3 days ago"),
            (CalendarDiff(days=1), "1 day ago"),
            (CalendarDiff(years=1, months=11), "1 year ago"),
            (CalendarDiff(months=3, days=12), "3 months ago"),
            (CalendarDiff(seconds=45), "45 seconds ago"),
            (CalendarDiff(seconds=2), "2 seconds ago"),
            (CalendarDiff(days=2, is_future=True), "in 2 days"),
            (CalendarDiff(hours=1, is_future=True), "in 1 hour"),
        ],
    )
    def test_rendering(self, diff: CalendarDiff, expected: str) -> None:
        assert format_relative(diff) == expected

    @pytest.mark.parametrize("seconds", [0, 1])
    def test_just_now(self, seconds: int) -> None:
        assert format_relative(CalendarDiff(seconds=seconds)) == "just now"
        assert format_relative(CalendarDiff(seconds=seconds, is_future=True)) == "just now"


class TestCustomLabels:
    def test_custom_past_template(self) -> None:
        labels = {
            "past": "{value} {unit}{plural} back",
            "plural": lambda v, _unit: "" if v == 1 else "s",
        }
        assert format_relative(CalendarDiff(days=3), labels) == "3 days back"

    def test_custom_now_label(self) -> None:
        assert format_relative(CalendarDiff(), {"now": "right now"}) == "right now"

    def test_now_label_is_not_templated(self) -> None:
        assert format_relative(CalendarDiff(), {"now": "{value} now"}) == "{value} now"

    def test_unit_labels(self) -> None:
        labels = {
            "past": "vor {value} {unit}{plural}",
            "units": {"day": "Tag"},
            "plural": lambda v, _unit: "" if v == 1 else "e",
        }
        assert format_relative(CalendarDiff(days=3), labels) == "vor 3 Tage"
        assert format_relative(CalendarDiff(days=1), labels) == "vor 1 Tag"

    def test_plural_receives_value_and_unit(self) -> None:
        calls: list[tuple[int, str]] = []

        def plural(value: int, unit: str) -> str:
            calls.append((value, unit))
            return ""

        format_relative(CalendarDiff(hours=5), {"plural": plural})
        assert calls == [(5, "hour")]

    def test_only_first_occurrence_substituted(self) -> None:
        labels = {"past": "{value} {unit}{plural} ago ({value})"}
        assert format_relative(CalendarDiff(days=3), labels) == "3 days ago ({value})"

    def test_missing_plural_placeholder_falls_back(self) -> None:
        labels = {"past": "{value} {unit} back"}
        assert format_relative(CalendarDiff(days=3), labels) == "3 days ago"

    def test_missing_placeholder_in_future_falls_back(self) -> None:
        labels = {"future": "soon"}
        assert format_relative(CalendarDiff(days=3, is_future=True), labels) == "in 3 days"

    def test_fallback_only_affects_chosen_direction(self) -> None:
        labels = {"past": "broken", "future": "{value} {unit}{plural} ahead"}
        assert format_relative(CalendarDiff(days=2, is_future=True), labels) == "2 days ahead"


class TestConfigErrors:
    @pytest.mark.parametrize(
        "labels",
        [
            "not a mapping",
            {"plural": "s"},
            {"past": 1},
            {"future": ["x"]},
        ],
    )
    def test_invalid_config(self, labels: Any) -> None:
        with pytest.raises(InvalidConfigError):
            format_relative(CalendarDiff(days=1), labels)

    def test_invalid_config_raised_even_for_now(self) -> None:
        with pytest.raises(InvalidConfigError):
            format_relative(CalendarDiff(), {"plural": 1})


class TestMoment:
    def test_seconds_ago(self, noon: datetime) -> None:
        assert moment(noon - timedelta(seconds=45), now=noon) == "45 seconds ago"

    @pytest.mark.parametrize("seconds", [0, 1])
    def test_just_now_boundary(self, noon: datetime, seconds: int) -> None:
        assert moment(noon - timedelta(seconds=seconds), now=noon) == "just now"

    def test_future(self, noon: datetime) -> None:
        assert moment(noon + timedelta(days=2), now=noon) == "in 2 days"

    def test_calendar_months(self) -> None:
        assert moment("2024-01-31", now="2024-03-01") == "1 month ago"

    def test_years(self, noon: datetime) -> None:
        assert moment(datetime(2021, 6, 15, 12), now=noon) == "3 years ago"

    def test_with_format(self) -> None:
        assert moment("01/03/2024", now="04/03/2024", fmt="DD/MM/YYYY") == "3 days ago"

    def test_with_labels(self, noon: datetime) -> None:
        labels = {"past": "{value} {unit}{plural} back"}
        assert moment(noon - timedelta(days=3), labels, now=noon) == "3 days back"

    def test_defaults_to_current_time(self) -> None:
        assert moment(datetime.now() - timedelta(days=3, hours=1)) == "3 days ago"

    def test_epoch_milliseconds(self) -> None:
        now = datetime.fromtimestamp(1_700_000_000)
        assert moment(1_700_000_000_000 - 5 * 60_000, now=now) == "5 minutes ago"

    def test_invalid_timestamp(self) -> None:
        with pytest.raises(InvalidDateError):
            moment("nope")

    def test_invalid_labels(self, noon: datetime) -> None:
        with pytest.raises(InvalidConfigError):
            moment(noon, ["past"], now=noon)  # type: ignore[arg-type]
