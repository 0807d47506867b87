"""
Utility helpers for the prices app.
"""
