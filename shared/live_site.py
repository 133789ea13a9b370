"""Live-site helpers shared by the browser and API suites."""

from __future__ import annotations

import logging
import re
import time
from collections.abc import Generator, Iterable

import pytest
import requests

logger = logging.getLogger(__name__)


def is_site_ready(url: str, api_url: str | None = None, timeout: int = 5) -> bool:
    """Return True when the home page (and the API, if given) respond with 200."""
    try:
        home_response = requests.get(f"{url}/", timeout=timeout)
        if home_response.status_code != 200:
            return False
        if api_url:
            api_response = requests.get(f"{api_url}/brandsList", timeout=timeout)
            return api_response.status_code == 200
    except requests.RequestException:
        return False
    return True


def wait_for_site_reachable(
    url: str,
    api_url: str | None = None,
    timeout: int = 60,
    interval: int = 2,
) -> None:
    """Poll the site until it answers or timeout."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_site_ready(url, api_url):
            return
        time.sleep(interval)
    raise RuntimeError(f"Site at {url} not reachable after {timeout}s")


def live_site_url(
    *,
    base_url: str,
    suite_name: str,
    api_url: str | None = None,
    timeout: int = 60,
) -> Generator[str, None, None]:
    """
    Yield the base URL of a reachable shop deployment.

    When the site does not answer within ``timeout`` seconds every test
    depending on it is skipped instead of failing on the first locator.
    """
    logger.info("Checking %s reachability for %s tests", base_url, suite_name)
    try:
        wait_for_site_reachable(base_url, api_url, timeout=timeout)
    except RuntimeError as exc:
        pytest.skip(f"{exc}; set E2E_BASE_URL to run {suite_name} tests")
    yield base_url


def blocked_hosts_pattern(hosts: Iterable[str]) -> re.Pattern[str]:
    """
    Compile a URL pattern matching any request to one of ``hosts`` or their subdomains.

    Used with ``BrowserContext.route`` to abort ad and tracker traffic.
    """
    alternatives = "|".join(re.escape(host) for host in hosts)
    if not alternatives:
        # Matches nothing.
        return re.compile(r"(?!)")
    return re.compile(rf"^https?://([^/]+\.)?({alternatives})(:\d+)?(/|$)")
