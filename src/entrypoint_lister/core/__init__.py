"""Core entities, errors and ports."""
