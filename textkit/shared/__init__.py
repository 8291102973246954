"""Shared helpers used by every textkit tool."""
