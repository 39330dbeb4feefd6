"""
Unit tests for feed parsing — gTLD JSON (Source A) and the TLD list (Source B).
"""

from __future__ import annotations

import json

import pytest

from certlint.domain.models import GTLDPeriod
from certlint.gtld.feeds import (
    COM_DELEGATION_DATE,
    delegated_gtlds,
    is_valid_period_date,
    parse_gtld_json,
    parse_tld_list,
    validate_gtlds,
)
from certlint.result import ErrorCode
from certlint.testing import ResultAssertions


def gtld_json(*entries: dict[str, object]) -> bytes:
    return json.dumps({"version": 2, "updated": "2024-01-01", "gTLDs": list(entries)}).encode()


# ─────────────────────── Source A ───────────────────────


class TestParseGtldJson:
    def test_entries_parsed_and_lower_cased(self) -> None:
        """
        GIVEN a feed with upper-case labels and extra registry fields
        WHEN parsed
        THEN labels are lower-cased and only the three date fields kept
        """
        raw = gtld_json(
            {
                "gTLD": "AAA",
                "registryOperator": "American Automobile Association, Inc.",
                "delegationDate": "2015-08-13",
                "removalDate": None,
                "contractTerminated": False,
            },
            {"gTLD": "xn--flw351e", "delegationDate": "2014-09-25", "removalDate": "2023-01-01"},
        )

        entries = ResultAssertions.assert_success(parse_gtld_json(raw))

        assert entries == [
            GTLDPeriod("aaa", "2015-08-13", ""),
            GTLDPeriod("xn--flw351e", "2014-09-25", "2023-01-01"),
        ]

    def test_null_delegation_date_becomes_empty(self) -> None:
        raw = gtld_json({"gTLD": "neverdelegated", "delegationDate": None, "removalDate": None})

        entries = ResultAssertions.assert_success(parse_gtld_json(raw))

        assert entries == [GTLDPeriod("neverdelegated", "", "")]

    @pytest.mark.parametrize(
        "raw",
        [b"not json", b'{"gTLDs": 3}', b'{"gTLDs": [{"delegationDate": "2015-01-01"}]}'],
    )
    def test_malformed_payload_is_parse_error(self, raw: bytes) -> None:
        result = parse_gtld_json(raw)

        ResultAssertions.assert_failure(result, ErrorCode.PARSE_ERROR)
        ResultAssertions.assert_failure_message_contains(result, "unmarshaling")

    def test_one_record_without_label_rejects_the_whole_feed(self) -> None:
        """
        GIVEN a feed where a single record lacks its gTLD label
        WHEN parsed
        THEN the whole feed is a parse error, not a partial table
        """
        raw = gtld_json(
            {"gTLD": "aaa", "delegationDate": "2015-08-13"},
            {"delegationDate": "2016-01-01"},
        )

        result = parse_gtld_json(raw)

        ResultAssertions.assert_failure(result, ErrorCode.PARSE_ERROR)


class TestDelegatedAndValidated:
    def test_undelegated_entries_dropped(self) -> None:
        entries = [GTLDPeriod("a", "2015-01-01"), GTLDPeriod("b", ""), GTLDPeriod("c", "2016-01-01")]

        assert [e.gtld for e in delegated_gtlds(entries)] == ["a", "c"]

    @pytest.mark.parametrize("value", ["2015-08-13", "1985-01-01", "2024-02-29"])
    def test_valid_dates(self, value: str) -> None:
        assert is_valid_period_date(value) is True

    @pytest.mark.parametrize(
        "value", ["", "2015-13-01", "2023-02-29", "15-08-13", "2015/08/13", "2015-08-13T00:00"]
    )
    def test_invalid_dates(self, value: str) -> None:
        assert is_valid_period_date(value) is False

    def test_valid_entries_pass_through(self) -> None:
        entries = [GTLDPeriod("a", "2015-01-01"), GTLDPeriod("b", "2015-01-01", "2020-02-02")]

        assert ResultAssertions.assert_success(validate_gtlds(entries)) == entries

    def test_bad_delegation_date_names_the_gtld(self) -> None:
        """
        GIVEN a retained entry whose delegation date does not parse
        WHEN validated
        THEN the whole list fails with VALIDATION_ERROR naming the entry
        """
        entries = [GTLDPeriod("good", "2015-01-01"), GTLDPeriod("broken", "01/02/2015")]

        result = validate_gtlds(entries)

        ResultAssertions.assert_failure(result, ErrorCode.VALIDATION_ERROR)
        ResultAssertions.assert_failure_message_contains(result, "'broken'")

    def test_bad_removal_date_is_validation_error(self) -> None:
        result = validate_gtlds([GTLDPeriod("gone", "2015-01-01", "soon")])

        ResultAssertions.assert_failure(result, ErrorCode.VALIDATION_ERROR)
        ResultAssertions.assert_failure_message_contains(result, "removal date")


# ─────────────────────── Source B ───────────────────────


class TestParseTldList:
    def test_header_and_blank_lines_skipped(self) -> None:
        """
        GIVEN the IANA list with its version comment and a trailing blank line
        WHEN parsed
        THEN every label gets the default delegation date and no removal date
        """
        raw = b"# Version 2024010100, Last Updated Mon Jan  1 07:07:01 2024 UTC\nAAA\nCOM\n\nZW\n"

        entries = ResultAssertions.assert_success(parse_tld_list(raw))

        assert entries == [
            GTLDPeriod("aaa", COM_DELEGATION_DATE, ""),
            GTLDPeriod("com", COM_DELEGATION_DATE, ""),
            GTLDPeriod("zw", COM_DELEGATION_DATE, ""),
        ]

    def test_crlf_line_endings(self) -> None:
        entries = ResultAssertions.assert_success(parse_tld_list(b"DE\r\nFR\r\n"))

        assert [e.gtld for e in entries] == ["de", "fr"]

    def test_invalid_utf8_is_parse_error(self) -> None:
        ResultAssertions.assert_failure(parse_tld_list(b"\xff\xfe\xfa"), ErrorCode.PARSE_ERROR)
