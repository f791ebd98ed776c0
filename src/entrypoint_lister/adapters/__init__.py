"""Adapters for the filesystem and build tools."""
