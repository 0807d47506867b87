"""
Tests for the comparison page HTTP semantics.

Covers the 200/304/404 responses, caching headers and what the page
reveals to admin and non-admin callers.
"""

import re
from decimal import Decimal

import pytest

from prices.services.censor import CENSOR_ALPHABET

ADMIN = "test-admin-key"
CENSORED_RE = re.compile("[" + "".join(CENSOR_ALPHABET) + "]+")
MEMBER_PROMPT = "billigaste varorna är gömda"


def _unit_price_cells(html):
    return re.findall(r'<td data-label="Jämförelsepris">([^<]*)</td>', html)


def _as_number(cell):
    return Decimal(cell.replace("\u00a0kr", "").replace(" ", "").replace(",", "."))


class TestNotFound:

    def test_unknown_query(self, client, stores):
        response = client.get("/", {"q": "okänd"})

        assert response.status_code == 404
        assert response.content == b"Not found"

    def test_unknown_query_as_admin(self, client, stores):
        response = client.get("/", {"q": "okänd", "admin": ADMIN})

        assert response.status_code == 404
        assert response.content == b"Not found"

    def test_no_stores(self, client, make_item):
        make_item()

        response = client.get("/")

        assert response.status_code == 404


class TestSuccessfulResponse:

    def test_default_query_is_butter(self, client, butter_items):
        response = client.get("/")

        assert response.status_code == 200
        assert "<strong>smör</strong> i Arvika" in response.content.decode()

    def test_query_is_normalized(self, client, butter_items):
        response = client.get("/", {"q": "  SMÖR "})

        assert response.status_code == 200

    def test_headers(self, client, butter_items):
        response = client.get("/")

        assert response["Content-Type"].startswith("text/html")
        assert response["Cache-Control"] == "public, max-age=604800, immutable"
        assert response["Expires"].startswith("Sun, ")
        assert response["Expires"].endswith(" 23:59:59 GMT")
        assert response["ETag"].startswith('"')

    def test_unit_prices_non_decreasing(self, client, stores, make_item):
        for price in ["55.50", "12.00", "99.90", "12.00", "30.25", "7.10"]:
            make_item(unit_price=Decimal(price))

        html = client.get("/", {"admin": ADMIN}).content.decode()

        numbers = [_as_number(cell) for cell in _unit_price_cells(html)]
        assert len(numbers) == 6
        assert numbers == sorted(numbers)

    def test_savings_sentence(self, client, butter_items):
        html = client.get("/").content.decode()

        assert "Du kan spara hela 30,00\u00a0kr/kg på smör" in html
        assert '<span class="savings">75 %</span>' in html

    def test_marks_rendered(self, client, butter_items):
        html = client.get("/", {"admin": ADMIN}).content.decode()

        assert '<span title="från Sverige">🇸🇪</span>' in html


class TestNonAdmin:

    def test_cheapest_half_withheld(self, client, butter_items):
        html = client.get("/").content.decode()

        assert "Garant Smör" not in html
        assert "Bregott Original" in html
        assert "Svenskt Smör" in html
        assert len(re.findall(r"<tr>", html)) == 1 + 3  # header + synthetic + 2 real

    def test_member_prompt(self, client, butter_items):
        html = client.get("/").content.decode()

        assert f"De 1 {MEMBER_PROMPT}" in html

    def test_best_store_hidden(self, client, butter_items):
        html = client.get("/").content.decode()

        assert "hittar du denna vecka på ICA Kvantum Arvika" not in html
        assert re.search("hittar du denna vecka på " + CENSORED_RE.pattern, html)

    def test_wrong_admin_key(self, client, butter_items):
        html = client.get("/", {"admin": "nope"}).content.decode()

        assert "Garant Smör" not in html
        assert MEMBER_PROMPT in html


class TestAdmin:

    def test_everything_visible(self, client, butter_items):
        html = client.get("/", {"admin": ADMIN}).content.decode()

        assert "Garant Smör" in html
        assert not CENSORED_RE.search(html)
        assert len(re.findall(r"<tr>", html)) == 1 + 3

    def test_no_member_prompt(self, client, butter_items):
        html = client.get("/", {"admin": ADMIN}).content.decode()

        assert MEMBER_PROMPT not in html

    def test_best_store_shown(self, client, butter_items):
        html = client.get("/", {"admin": ADMIN}).content.decode()

        assert "hittar du denna vecka på ICA Kvantum Arvika" in html


class TestConditionalRequests:

    def test_identical_requests_identical_bodies(self, client, butter_items):
        first = client.get("/", {"q": "smör"})
        second = client.get("/", {"q": "smör"})

        assert first.content == second.content
        assert first["ETag"] == second["ETag"]

    def test_matching_etag_is_not_modified(self, client, butter_items):
        etag = client.get("/")["ETag"]

        response = client.get("/", HTTP_IF_NONE_MATCH=etag)

        assert response.status_code == 304
        assert response.content == b""
        assert response["ETag"] == etag
        assert not response.has_header("Expires")
        assert not response.has_header("Cache-Control")

    def test_stale_etag_gets_full_page(self, client, butter_items, make_item):
        etag = client.get("/")["ETag"]
        make_item(title="Nytt smör", unit_price=Decimal("15.00"))

        response = client.get("/", HTTP_IF_NONE_MATCH=etag)

        assert response.status_code == 200
        assert response["ETag"] != etag

    def test_admin_and_member_views_differ(self, client, butter_items):
        public = client.get("/")["ETag"]
        admin = client.get("/", {"admin": ADMIN})["ETag"]

        assert public != admin


class TestMethods:

    def test_post_not_allowed(self, client, butter_items):
        assert client.post("/").status_code == 405


class TestSingleItem:

    def test_single_item_shown_to_non_admin(self, client, stores, make_item):
        make_item(title="Ensamt smör")

        html = client.get("/").content.decode()

        assert "Ensamt smör" in html
        assert MEMBER_PROMPT not in html
        assert not CENSORED_RE.search(html.split("<table>")[1].split("</table>")[0])
