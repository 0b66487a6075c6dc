"""Reachability helpers for the to-do app the smoke and E2E suites target."""

from __future__ import annotations

import logging
import time

import requests

logger = logging.getLogger(__name__)


def is_app_reachable(url: str, timeout: int = 2) -> bool:
    """Return True when the app URL responds with 200."""
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException:
        return False
    return response.status_code == 200


def wait_for_app_reachable(url: str, timeout: int = 30, interval: int = 1) -> None:
    """Poll the app URL until it answers or the timeout elapses."""
    logger.info("Waiting up to %ss for %s", timeout, url)
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_app_reachable(url):
            logger.info("%s is reachable", url)
            return
        time.sleep(interval)
    raise RuntimeError(f"To-do app at {url} not reachable after {timeout}s")
