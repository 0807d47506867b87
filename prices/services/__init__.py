"""
Services for the grocery price comparison pipeline.
"""
