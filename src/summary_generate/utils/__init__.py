"""Utility helpers for summary-generate."""
