"""Trendiwear marketplace API."""
