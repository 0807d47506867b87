"""
Grocery price comparison Django application.

Serves the unit price comparison page and the price history API
backed by the items and stores tables.
"""
