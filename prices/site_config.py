"""
Process-wide, read-only configuration for the comparison page.

Built once when the URLconf is imported and handed to the view, so the
request handler never reaches for module-level globals.
"""

import functools
import hmac
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from prices.utils.formatting import CurrencyFormatter, SEK

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SiteConfig:
    """Everything the page needs besides the request and the database."""

    admin_key: Optional[str]
    logo_svg: str
    stylesheet: str
    default_query: str = "smör"
    nav_links: Tuple[Tuple[str, str], ...] = ()
    cache_max_age: int = 604800
    price_history_enabled: bool = True
    formatter: CurrencyFormatter = field(default=SEK)

    def is_admin(self, token: Optional[str]) -> bool:
        """Exact match against the admin key. No key configured means no admin."""
        if not self.admin_key or token is None:
            return False
        return hmac.compare_digest(token.encode("utf-8"), self.admin_key.encode("utf-8"))


def _read_asset(path) -> str:
    path = Path(path)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise ImproperlyConfigured(f"Cannot read static asset {path}: {e}") from e


def load_site_config() -> SiteConfig:
    """Build the SiteConfig from Django settings and the asset files."""
    admin_key = getattr(settings, "PRICES_ADMIN_KEY", None)
    if not admin_key:
        logger.info("PRICES_ADMIN_KEY not set; unrestricted view disabled")

    nav_links: List[Tuple[str, str]] = getattr(settings, "PRICES_NAV_LINKS", [])

    return SiteConfig(
        admin_key=admin_key,
        logo_svg=_read_asset(settings.PRICES_LOGO_PATH),
        stylesheet=_read_asset(settings.PRICES_STYLESHEET_PATH),
        default_query=getattr(settings, "PRICES_DEFAULT_QUERY", "smör"),
        nav_links=tuple(tuple(link) for link in nav_links),
        cache_max_age=getattr(settings, "PRICES_CACHE_MAX_AGE", 604800),
        price_history_enabled=getattr(settings, "PRICES_PRICE_HISTORY_ENABLED", True),
    )


@functools.lru_cache(maxsize=None)
def get_site_config() -> SiteConfig:
    """The SiteConfig shared by the page and the API, built on first use."""
    return load_site_config()
