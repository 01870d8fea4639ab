from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from minute_events.common.exceptions.errors import MalformedTimestampError
from minute_events.core.aggregation.classifier import (
    MINUTE,
    classify,
    layout_width,
    parse_time_to,
    truncate_time,
)
from minute_events.core.types import ErrorCode
from tests.factory_builders import PARSE_LAYOUT, SUFFIX, build_log_line


def test_layout_width_matches_rendered_timestamp() -> None:
    assert layout_width(PARSE_LAYOUT) == len("[2018-04-11 03:13:25]") == 21
    assert layout_width("%Y-%m-%d %H") == len("2018-04-11 03")


def test_truncate_time_floors_to_minute() -> None:
    t = datetime(2018, 4, 11, 3, 13, 59, 999999)

    assert truncate_time(t) == datetime(2018, 4, 11, 3, 13)
    assert truncate_time(datetime(2018, 4, 11, 3, 13)) == datetime(2018, 4, 11, 3, 13)


def test_truncate_time_supports_coarser_units() -> None:
    t = datetime(2006, 1, 2, 15, 4, 5)

    assert truncate_time(t, timedelta(hours=1)) == datetime(2006, 1, 2, 15)


def test_parse_time_to_error_carries_text_and_layout() -> None:
    with pytest.raises(MalformedTimestampError) as exc_info:
        parse_time_to("2006-01-02 15:04:05", PARSE_LAYOUT, MINUTE)

    err = exc_info.value
    assert err.text == "2006-01-02 15:04:05"
    assert err.layout == PARSE_LAYOUT
    assert err.code == ErrorCode.MALFORMED_TIMESTAMP
    assert str(err).startswith(
        "failed to parse time string(2006-01-02 15:04:05), layout([%Y-%m-%d %H:%M:%S]), error: "
    )


def test_parse_time_to_hour_layout() -> None:
    t = parse_time_to("[2006-01-02 15:04:05]", PARSE_LAYOUT, timedelta(hours=1))

    assert t.strftime("[%Y-%m-%d %H]") == "[2006-01-02 15]"


def test_classify_skips_lines_shorter_than_layout() -> None:
    assert classify("", PARSE_LAYOUT, SUFFIX) is None
    assert classify("[2018-04-11 03:13:2", PARSE_LAYOUT, SUFFIX) is None


def test_classify_truncates_and_matches_suffix() -> None:
    matched = classify(build_log_line("2018-04-11 03:13:25", "NOK"), PARSE_LAYOUT, SUFFIX)
    unmatched = classify(build_log_line("2018-04-11 03:13:25", "OK"), PARSE_LAYOUT, SUFFIX)

    assert matched is not None and unmatched is not None
    assert matched.minute == datetime(2018, 4, 11, 3, 13)
    assert matched.is_match is True
    assert unmatched.is_match is False


def test_classify_suffix_is_case_sensitive_and_tail_only() -> None:
    lower = classify("[2018-04-11 03:13:25] status nok", PARSE_LAYOUT, SUFFIX)
    middle = classify("[2018-04-11 03:13:25] NOK retried", PARSE_LAYOUT, SUFFIX)

    assert lower is not None and lower.is_match is False
    assert middle is not None and middle.is_match is False


def test_classify_exact_width_line_is_parsed() -> None:
    result = classify("[2018-04-11 03:13:25]", PARSE_LAYOUT, SUFFIX)

    assert result is not None
    assert result.is_match is False


def test_classify_raises_on_malformed_prefix() -> None:
    with pytest.raises(MalformedTimestampError) as exc_info:
        classify("1214124asfasgasdfgasd tail NOK", PARSE_LAYOUT, SUFFIX)

    assert exc_info.value.text == "1214124asfasgasdfgasd"
