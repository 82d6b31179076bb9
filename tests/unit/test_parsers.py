"""
test_parsers.py
---------------
Unit tests for timewdb.utils.parsers module.

Tests the data file grammar: timestamps, ranges, tags and full entries.
"""
import pytest
from datetime import datetime, timezone

from timewdb.core.exceptions import ParseError
from timewdb.dataclasses.interval import Interval
from timewdb.utils.parsers import (
    format_datetime,
    parse_datetime,
    parse_entry,
    parse_range,
    parse_tags,
)


class TestParseDatetime:
    """Test parse_datetime function."""

    def test_valid_timestamp(self):
        """Test a plain timestamp."""
        value, rest = parse_datetime("20220711T133312Z")
        assert value == datetime(2022, 7, 11, 13, 33, 12, tzinfo=timezone.utc)
        assert rest == ""

    def test_leaves_remaining_input(self):
        """Test the rest after the token is returned."""
        _, rest = parse_datetime("20220711T133312Z - 20220711T140000Z")
        assert rest == " - 20220711T140000Z"

    @pytest.mark.parametrize(
        "text",
        [
            "",
            " 20220711T133312Z",
            "2022-07-11T13:33:12Z",
            "20220711T133312",
            "20220711T133312Zx",
            "20221311T133312Z",
            "20220230T120000Z",
            "20220711T246000Z",
        ],
    )
    def test_invalid_timestamps(self, text):
        """Test malformed tokens and impossible dates."""
        with pytest.raises(ParseError):
            parse_datetime(text)

    def test_format_datetime(self):
        """Test rendering back to the literal form."""
        value = datetime(2022, 7, 11, 13, 33, 12, tzinfo=timezone.utc)
        assert format_datetime(value) == "20220711T133312Z"


class TestParseRange:
    """Test parse_range function."""

    def test_closed(self, ts):
        """Test '<datetime> - <datetime>'."""
        interval, rest = parse_range("20220101T120000Z - 20220101T130000Z # x")
        assert interval == Interval(ts("20220101T120000Z"), ts("20220101T130000Z"))
        assert rest == " # x"

    def test_open(self, ts):
        """Test a lone datetime."""
        interval, rest = parse_range("20220101T120000Z # x")
        assert interval == Interval(ts("20220101T120000Z"))
        assert rest == " # x"

    def test_reversed_falls_back_to_open(self, ts):
        """Test an invalid closed range backtracks to the open form."""
        interval, rest = parse_range("20220101T130000Z - 20220101T120000Z")
        assert interval == Interval(ts("20220101T130000Z"))
        assert rest == " - 20220101T120000Z"

    def test_period(self, now, utc):
        """Test ':week'."""
        interval, rest = parse_range(":week # x", now=now, tz=utc)
        assert interval == Interval.current_week(tz=utc, now=now)
        assert rest == " # x"

    def test_no_alternative(self):
        """Test text matching no form."""
        with pytest.raises(ParseError) as exc_info:
            parse_range("yesterday")
        assert exc_info.value.text == "yesterday"


class TestParseTags:
    """Test parse_tags function."""

    def test_bare_and_quoted(self):
        """Test a mix of bare and quoted tags."""
        assert parse_tags('tag1 "tag 2" tag3') == (["tag1", "tag 2", "tag3"], "")

    def test_empty(self):
        """Test no tags."""
        assert parse_tags("") == ([], "")

    def test_quoted_keeps_inner_spaces(self):
        """Test quoted content is kept verbatim."""
        assert parse_tags('"  spaced  out "') == (["  spaced  out "], "")

    def test_unicode(self):
        """Test non-ASCII tags."""
        assert parse_tags("プロジェクト café") == (["プロジェクト", "café"], "")

    def test_trailing_space_left_over(self):
        """Test a separator without a following tag is not consumed."""
        assert parse_tags("a ") == (["a"], " ")

    def test_unterminated_quote_left_over(self):
        """Test parsing stops at an unterminated quote."""
        tags, rest = parse_tags('a "b')
        assert tags == ["a"]
        assert rest == ' "b'

    def test_empty_quotes_not_a_tag(self):
        """Test '""' is not an empty tag."""
        assert parse_tags('""') == ([], '""')


class TestParseEntry:
    """Test parse_entry function."""

    def test_full_entry(self, ts):
        """Test a closed entry with tags."""
        interval, tags = parse_entry('inc 20220101T120000Z - 20220101T124500Z # a "b c"')
        assert interval == Interval(ts("20220101T120000Z"), ts("20220101T124500Z"))
        assert tags == ["a", "b c"]

    def test_empty_tags(self):
        """Test an entry with nothing after the separator."""
        _, tags = parse_entry("inc 20220101T120000Z - 20220101T124500Z # ")
        assert tags == []

    def test_named_period_entry(self, now, utc):
        """Test entries may use period keywords like any range."""
        interval, tags = parse_entry("inc :yesterday # x", now=now, tz=utc)
        assert interval == Interval.yesterday(tz=utc, now=now)
        assert tags == ["x"]

    @pytest.mark.parametrize(
        "line",
        [
            "inc20220101T120000Z # x",
            "INC 20220101T120000Z # x",
            "inc 20220101T120000Z #x",
            "inc 20220101T120000Z",
            "inc 20220101T120000Z # a ",
            'inc 20220101T120000Z # "open',
            "inc 20220101T130000Z - 20220101T120000Z # x",
            "inc :fortnight # x",
        ],
    )
    def test_malformed(self, line, now, utc):
        """Test deviations from the grammar."""
        with pytest.raises(ParseError):
            parse_entry(line, now=now, tz=utc)
