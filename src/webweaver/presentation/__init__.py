"""Presentation helpers for projected save data."""
