"""Shared helpers for the smoke, E2E and unit suites."""
