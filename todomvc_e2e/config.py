"""
Test suite configuration module.

This module defines configuration classes for the environments the
to-do suite can target (the public demo, a local copy, CI). Values are
loaded from environment variables with sensible defaults.
"""

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent.parent


def _optional_int(name: str) -> int | None:
    value = os.environ.get(name)
    return int(value) if value else None


class Config:
    """Base configuration with default settings."""

    BASE_URL: str = os.environ.get("TODO_APP_URL", "https://demo.playwright.dev/todomvc")

    # Key under which the app persists its JSON-encoded to-do list
    STORAGE_KEY: str = os.environ.get("TODO_STORAGE_KEY", "react-todos")

    # None leaves Playwright's own action and assertion timeouts in place
    DEFAULT_TIMEOUT_MS: int | None = _optional_int("TODO_DEFAULT_TIMEOUT_MS")

    # Seconds to wait for the target to answer before any scenario runs
    REACHABILITY_TIMEOUT: int = int(os.environ.get("TODO_REACHABILITY_TIMEOUT", "30"))

    VIEWPORT: dict = {"width": 1280, "height": 720}
    SCREENSHOT_DIR: str = str(BASE_DIR / "test-results" / "screenshots")


class DemoConfig(Config):
    """Public demo deployment."""


class LocalConfig(Config):
    """Self-hosted copy of the demo app."""

    BASE_URL: str = os.environ.get("TODO_APP_URL", "http://localhost:8080/todomvc")
    REACHABILITY_TIMEOUT: int = int(os.environ.get("TODO_REACHABILITY_TIMEOUT", "10"))


class CIConfig(Config):
    """CI runners reach the demo over slower, shared networks."""

    REACHABILITY_TIMEOUT: int = int(os.environ.get("TODO_REACHABILITY_TIMEOUT", "120"))


# Configuration mapping for easy access
config = {
    "demo": DemoConfig,
    "local": LocalConfig,
    "ci": CIConfig,
    "default": DemoConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (demo, local, ci).
             If None, uses TODO_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("TODO_ENV", "demo")
    return config.get(env, config["default"])
