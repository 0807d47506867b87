"""
API throttling classes.
"""

from rest_framework.throttling import AnonRateThrottle


class PriceHistoryThrottle(AnonRateThrottle):
    """
    Throttle for the public price history endpoint.

    Rate: 120 requests per minute per client IP.
    """

    rate = '120/minute'
    scope = 'price_history'
