"""Utility helpers for docmark."""
