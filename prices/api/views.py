"""
Price history API.

Exposes the same daily lowest-price series the comparison page charts,
for clients that want to draw their own.
"""

import logging

from rest_framework.decorators import api_view, permission_classes, throttle_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from prices.api.throttling import PriceHistoryThrottle
from prices.services import repository
from prices.services.comparison import normalize_query
from prices.services.price_history import fetch_price_history
from prices.site_config import get_site_config

logger = logging.getLogger(__name__)


@extend_schema(
    tags=['Prices'],
    summary='Daily lowest unit price for a search key',
    parameters=[
        OpenApiParameter(
            name='q',
            type=OpenApiTypes.STR,
            location=OpenApiParameter.QUERY,
            description='Search key, e.g. "mjölk". Defaults to the site default.',
        ),
    ],
    responses={
        200: {
            'description': 'Price history, oldest first',
            'content': {
                'application/json': {
                    'example': {
                        'q': 'smör',
                        'points': [
                            {'date': '2024-11-04', 'min_price': 89.9, 'store_name': None},
                        ],
                    }
                }
            }
        },
        404: {'description': 'No price history for the search key'},
    },
)
@api_view(['GET'])
@permission_classes([AllowAny])
@throttle_classes([PriceHistoryThrottle])
def price_history(request):
    """
    Return the lowest unit price per day for ``q``.

    Store names are withheld; they are part of the member view.
    """
    query = normalize_query(request.query_params.get('q'), get_site_config().default_query)

    stores = repository.stores_by_uuid(repository.fetch_stores())
    points = fetch_price_history(query, stores)

    if not points:
        return Response({'error': 'Not found', 'q': query}, status=404)

    return Response({
        'q': query,
        'points': [
            {**point.as_dict(), 'store_name': None}
            for point in points
        ],
    })
