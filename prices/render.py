"""
HTML fragments for the comparison page.

Each fragment has its own template under ``prices/templates/prices/``
and is assembled into the full document by ``render_page``.
"""

from typing import List, Sequence

from django.template.loader import render_to_string
from django.utils.html import format_html_join
from django.utils.safestring import SafeString, mark_safe

from prices.services.comparison import CensoredRow, ComparisonPage, TableRow
from prices.services.pricing import Badge
from prices.site_config import SiteConfig

TABLE_HEADERS = (
    "",
    "Namn",
    "Kedja",
    "Styckpris",
    "Jämförelsepris",
)


def render_marks(marks: Sequence[Badge]) -> SafeString:
    return format_html_join(
        " ",
        '<span title="{}">{}</span>',
        ((badge.label, badge.symbol) for badge in marks),
    )


def row_cells(row: TableRow) -> list:
    if isinstance(row, CensoredRow):
        return list(row.cells)
    return [
        render_marks(row.marks),
        row.title,
        row.store_name,
        row.item_price,
        row.unit_price,
    ]


def render_savings(
    query: str,
    unit: str,
    savings_amount: str,
    savings_percent: int,
    store_name: str,
) -> SafeString:
    return mark_safe(render_to_string("prices/_savings.html", {
        "query": query,
        "unit": unit,
        "savings_amount": savings_amount,
        "savings_percent": savings_percent,
        "store_name": store_name,
    }))


def render_member_prompt(is_admin: bool, count: int) -> SafeString:
    """Paywall notice; empty for admins and when nothing is hidden."""
    if is_admin or count <= 0:
        return mark_safe("")
    return mark_safe(render_to_string("prices/_member_prompt.html", {"count": count}))


def render_table(rows: List[TableRow]) -> SafeString:
    table_rows = [
        list(zip(TABLE_HEADERS, row_cells(row)))
        for row in rows
    ]
    return mark_safe(render_to_string("prices/_table.html", {
        "headers": TABLE_HEADERS,
        "rows": table_rows,
    }))


def render_page(page: ComparisonPage, site: SiteConfig) -> str:
    """Full HTML document for ``page``."""
    return render_to_string("prices/comparison.html", {
        "query": page.query,
        "logo": mark_safe(site.logo_svg),
        "stylesheet": mark_safe(site.stylesheet),
        "nav_links": site.nav_links,
        "savings": render_savings(
            page.query,
            page.unit,
            page.savings_amount,
            page.savings_percent,
            page.best_store_name,
        ),
        "member_prompt": render_member_prompt(page.is_admin, page.censored_count),
        "table": render_table(page.rows),
        "price_history": [point.as_dict() for point in page.price_history],
    })
