"""
Tests for ETag and Expires computation.
"""

from datetime import datetime, timezone

import pytest

from prices.services.caching import (
    cache_control_header,
    compute_etag,
    etag_matches,
    expires_header,
    next_sunday_end,
)


class TestEtag:

    def test_quoted_and_deterministic(self):
        etag = compute_etag("<html>body</html>")

        assert etag.startswith('"') and etag.endswith('"')
        assert etag == compute_etag("<html>body</html>")

    def test_changes_with_body(self):
        assert compute_etag("a") != compute_etag("b")

    def test_matches_exact(self):
        etag = compute_etag("a")
        assert etag_matches(etag, etag)

    def test_matches_in_list(self):
        etag = compute_etag("a")
        assert etag_matches(f'"other", {etag}', etag)

    def test_matches_weak_form(self):
        etag = compute_etag("a")
        assert etag_matches(f"W/{etag}", etag)

    def test_matches_star(self):
        assert etag_matches("*", compute_etag("a"))

    def test_no_header(self):
        assert not etag_matches(None, compute_etag("a"))
        assert not etag_matches("", compute_etag("a"))

    def test_different_etag(self):
        assert not etag_matches(compute_etag("b"), compute_etag("a"))


class TestExpires:

    @pytest.mark.parametrize("now,expected_day", [
        (datetime(2024, 11, 4, 8, 0, tzinfo=timezone.utc), 10),    # Monday
        (datetime(2024, 11, 9, 23, 59, tzinfo=timezone.utc), 10),  # Saturday
        (datetime(2024, 11, 10, 0, 1, tzinfo=timezone.utc), 10),   # Sunday: same day
        (datetime(2024, 11, 10, 23, 0, tzinfo=timezone.utc), 10),  # Sunday evening
    ])
    def test_next_sunday(self, now, expected_day):
        end = next_sunday_end(now)

        assert end == datetime(2024, 11, expected_day, 23, 59, 59, tzinfo=timezone.utc)
        assert end.weekday() == 6

    def test_crosses_month(self):
        end = next_sunday_end(datetime(2024, 10, 30, 12, 0, tzinfo=timezone.utc))

        assert end == datetime(2024, 11, 3, 23, 59, 59, tzinfo=timezone.utc)

    def test_rfc1123_format(self):
        header = expires_header(datetime(2024, 11, 4, 8, 0, tzinfo=timezone.utc))

        assert header == "Sun, 10 Nov 2024 23:59:59 GMT"


def test_cache_control():
    assert cache_control_header(604800) == "public, max-age=604800, immutable"
