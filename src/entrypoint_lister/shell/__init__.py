"""Imperative shell: host integration."""
