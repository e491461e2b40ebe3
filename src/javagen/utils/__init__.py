"""Shared helpers used by the renderers."""
