"""
Suite configuration module.

This module defines configuration classes for the environments the
suite runs in (local workstation, CI). Values are loaded from environment
variables with sensible defaults so the suite can be pointed at another
deployment of the shop without code changes.
"""

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent


class Config:
    """Base configuration with default settings."""

    BASE_URL: str = os.environ.get("E2E_BASE_URL", "https://automationexercise.com").rstrip("/")
    API_URL: str = os.environ.get("E2E_API_URL", f"{BASE_URL}/api").rstrip("/")

    # Playwright timeouts, milliseconds
    DEFAULT_TIMEOUT_MS: int = int(os.environ.get("E2E_TIMEOUT_MS", "10000"))
    NAVIGATION_TIMEOUT_MS: int = int(os.environ.get("E2E_NAVIGATION_TIMEOUT_MS", "30000"))
    EXPECT_TIMEOUT_MS: int = int(os.environ.get("E2E_EXPECT_TIMEOUT_MS", "5000"))

    # Seconds to wait for the site before the browser/API suites are skipped
    SITE_READY_TIMEOUT_S: int = int(os.environ.get("E2E_SITE_READY_TIMEOUT", "20"))
    API_TIMEOUT_S: float = float(os.environ.get("E2E_API_TIMEOUT", "15"))

    SCREENSHOT_DIR: Path = BASE_DIR / "test-results" / "screenshots"
    DOWNLOAD_DIR: Path = BASE_DIR / "test-results" / "downloads"

    # The shared demo account used by the signup-or-login flows
    DEMO_USER_NAME: str = os.environ.get("E2E_USER_NAME", "AE Demo User")
    DEMO_USER_EMAIL: str = os.environ.get("E2E_USER_EMAIL", "ae.demo.user@example.com")
    DEMO_USER_PASSWORD: str = os.environ.get("E2E_USER_PASSWORD", "DemoPass123!")

    VIEWPORT: dict = {"width": 1280, "height": 720}

    # Ad and tracking hosts aborted by request interception; their overlays
    # cover the page and intercept clicks.
    BLOCKED_HOSTS: tuple[str, ...] = (
        "googlesyndication.com",
        "doubleclick.net",
        "googleadservices.com",
        "adservice.google.com",
        "google-analytics.com",
        "googletagmanager.com",
        "fundingchoicesmessages.google.com",
    )


class LocalConfig(Config):
    """Local workstation configuration."""

    CI: bool = False


class CIConfig(Config):
    """CI configuration: slower shared runners get longer waits."""

    CI: bool = True

    DEFAULT_TIMEOUT_MS: int = int(os.environ.get("E2E_TIMEOUT_MS", "20000"))
    NAVIGATION_TIMEOUT_MS: int = int(os.environ.get("E2E_NAVIGATION_TIMEOUT_MS", "60000"))
    EXPECT_TIMEOUT_MS: int = int(os.environ.get("E2E_EXPECT_TIMEOUT_MS", "10000"))
    SITE_READY_TIMEOUT_S: int = int(os.environ.get("E2E_SITE_READY_TIMEOUT", "60"))


# Configuration mapping for easy access
config = {
    "local": LocalConfig,
    "ci": CIConfig,
    "default": LocalConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (local, ci).
             If None, uses E2E_ENV, falling back to "ci" when the CI
             variable is set.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("E2E_ENV") or ("ci" if os.environ.get("CI") else "local")
    return config.get(env, config["default"])
