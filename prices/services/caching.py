"""
HTTP caching helpers for the comparison page.

The page is cacheable for a week and expires at the end of each week
(Sunday 23:59:59 UTC), when new prices are collected. The ETag is derived
from the rendered body so unchanged data revalidates with a 304.
"""

import hashlib
from datetime import datetime, timedelta, timezone as dt_timezone
from typing import Optional

from django.utils.http import http_date, parse_etags, quote_etag

SUNDAY = 6


def compute_etag(body: str) -> str:
    """Strong validator for ``body``."""
    digest = hashlib.sha256(body.encode("utf-8")).hexdigest()
    return quote_etag(digest)


def etag_matches(if_none_match: Optional[str], etag: str) -> bool:
    """True if the request's If-None-Match header covers ``etag``."""
    if not if_none_match:
        return False
    etags = parse_etags(if_none_match)
    if "*" in etags:
        return True
    # Weak comparison, as required for If-None-Match
    return any(candidate.removeprefix("W/") == etag for candidate in etags)


def next_sunday_end(now: datetime) -> datetime:
    """
    23:59:59 UTC on the upcoming Sunday.

    On a Sunday this is later the same day.
    """
    now = now.astimezone(dt_timezone.utc)
    days_until_sunday = (SUNDAY - now.weekday()) % 7
    sunday = now + timedelta(days=days_until_sunday)
    return sunday.replace(hour=23, minute=59, second=59, microsecond=0)


def expires_header(now: datetime) -> str:
    """RFC 1123 formatted Expires value."""
    return http_date(next_sunday_end(now).timestamp())


def cache_control_header(max_age: int) -> str:
    return f"public, max-age={max_age}, immutable"
