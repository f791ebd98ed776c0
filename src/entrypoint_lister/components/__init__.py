"""Manifest-building components."""
