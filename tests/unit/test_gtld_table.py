"""
Unit tests for merging the two feeds into the TLD validity table, and for
the lookup helpers the DNS lint uses.
"""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from certlint.domain.models import GTLDPeriod
from certlint.gtld.feeds import COM_DELEGATION_DATE
from certlint.gtld.table import ONION_PERIOD, has_valid_tld, merge_tld_table, tld_of


def listed(*labels: str) -> list[GTLDPeriod]:
    return [GTLDPeriod(label, COM_DELEGATION_DATE) for label in labels]


class TestMergePrecedence:
    def test_source_a_dates_win(self) -> None:
        """
        GIVEN "aaa" in both feeds
        WHEN merged
        THEN the entry carries Source A's delegation and removal dates
        """
        delegated = [GTLDPeriod("aaa", "2015-08-13", "2021-01-01")]

        table = merge_tld_table(delegated, listed("aaa"))

        assert table["aaa"] == GTLDPeriod("aaa", "2015-08-13", "2021-01-01")

    def test_source_b_only_gets_default_date(self) -> None:
        table = merge_tld_table([GTLDPeriod("aaa", "2015-08-13")], listed("de", "fr"))

        assert table["de"] == GTLDPeriod("de", COM_DELEGATION_DATE, "")
        assert table["fr"].removal_date == ""

    def test_source_a_only_kept(self) -> None:
        """
        GIVEN a removed gTLD that no longer appears in the TLD list
        THEN it stays in the table with its removal date
        """
        table = merge_tld_table([GTLDPeriod("gone", "2014-01-01", "2017-01-01")], listed("com"))

        assert table["gone"].removal_date == "2017-01-01"

    def test_labels_compared_case_insensitively(self) -> None:
        table = merge_tld_table([GTLDPeriod("aaa", "2015-08-13")], listed("AAA"))

        assert list(table) == ["aaa", "onion"]
        assert table["aaa"].delegation_date == "2015-08-13"

    def test_duplicates_within_a_source_last_wins(self) -> None:
        delegated = [GTLDPeriod("dup", "2015-01-01"), GTLDPeriod("dup", "2016-01-01")]

        assert merge_tld_table(delegated, [])["dup"].delegation_date == "2016-01-01"


class TestOnion:
    @pytest.mark.parametrize(
        "delegated, listed_labels",
        [
            ([], []),
            ([GTLDPeriod("onion", "2020-01-01", "2021-01-01")], []),
            ([], ["onion"]),
        ],
    )
    def test_onion_always_forced(
        self, delegated: list[GTLDPeriod], listed_labels: list[str]
    ) -> None:
        """
        GIVEN feeds that omit .onion or give it other dates
        WHEN merged
        THEN .onion is present with 2015-02-18 and no removal date
        """
        table = merge_tld_table(delegated, listed(*listed_labels))

        assert table["onion"] == ONION_PERIOD
        assert ONION_PERIOD == GTLDPeriod("onion", "2015-02-18", "")


class TestLookup:
    TABLE = {
        "com": GTLDPeriod("com", "1985-01-01"),
        "gone": GTLDPeriod("gone", "2014-01-01", "2016-01-01"),
    }

    @pytest.mark.parametrize(
        "domain, tld",
        [("www.example.com", "com"), ("EXAMPLE.COM.", "com"), ("localhost", "localhost")],
    )
    def test_tld_of(self, domain: str, tld: str) -> None:
        assert tld_of(domain) == tld

    def test_has_valid_tld(self) -> None:
        when = datetime(2015, 1, 1, tzinfo=UTC)

        assert has_valid_tld("a.com", when, self.TABLE) is True
        assert has_valid_tld("a.gone", when, self.TABLE) is True
        assert has_valid_tld("a.gone", datetime(2016, 1, 2, tzinfo=UTC), self.TABLE) is False
        assert has_valid_tld("a.unknown", when, self.TABLE) is False
