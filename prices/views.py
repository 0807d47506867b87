"""
Views for the grocery price comparison site.

Includes the comparison page and the health check endpoint for
monitoring and load balancer checks.
"""

import logging

from django.db import connection
from django.http import HttpResponse, HttpResponseNotFound, HttpResponseNotModified, JsonResponse
from django.utils import timezone
from django.views import View

from prices.render import render_page
from prices.services.caching import (
    cache_control_header,
    compute_etag,
    etag_matches,
    expires_header,
)
from prices.services.comparison import build_comparison, normalize_query
from prices.site_config import SiteConfig

logger = logging.getLogger(__name__)


class ComparisonView(View):
    """
    Unit price comparison page.

    Endpoint: GET /?q=<search key>&admin=<token>

    Responses:
        200: HTML page with week-long public caching headers
        304: body unchanged since the ETag sent in If-None-Match
        404: no items or no stores for the search key
    """

    http_method_names = ["get", "head"]

    # Injected through as_view(site=...)
    site: SiteConfig = None

    def get(self, request):
        site = self.site
        query = normalize_query(request.GET.get("q"), site.default_query)
        is_admin = site.is_admin(request.GET.get("admin"))

        page = build_comparison(query, is_admin, site)
        if page is None:
            return HttpResponseNotFound("Not found", content_type="text/plain; charset=utf-8")

        body = render_page(page, site)
        etag = compute_etag(body)

        if etag_matches(request.headers.get("If-None-Match"), etag):
            response = HttpResponseNotModified()
            response["ETag"] = etag
            return response

        response = HttpResponse(body, content_type="text/html; charset=utf-8")
        response["Cache-Control"] = cache_control_header(site.cache_max_age)
        response["Expires"] = expires_header(timezone.now())
        response["ETag"] = etag
        return response


def health_check(request):
    """
    Health check endpoint.

    Endpoint: GET /api/health/
    No authentication required (for load balancer checks).

    Returns:
        JsonResponse: {"status": "healthy"|"unhealthy", "database": "connected"|"error"}
        HTTP 200 for healthy, HTTP 503 for unhealthy
    """
    status = "healthy"
    http_status = 200

    database_status = "connected"
    try:
        connection.ensure_connection()
    except Exception as e:
        logger.error("Health check database connection failed: %s", e)
        database_status = "error"
        status = "unhealthy"
        http_status = 503

    return JsonResponse(
        {"status": status, "database": database_status},
        status=http_status,
    )
