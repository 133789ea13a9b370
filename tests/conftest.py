"""
Shared pytest fixtures for the shop test suite.

Fixtures here are available to every package (unit, api, e2e) and
provide settings, the live-site gate, the API client and fake data.
"""

from __future__ import annotations

from collections.abc import Generator

import pytest
from faker import Faker

from config import Config, get_config
from shared.api_client import AutomationExerciseAPI
from shared.live_site import live_site_url
from shared.test_data import (
    DEFAULT_CARD,
    CartLine,
    PaymentCard,
    UserProfile,
    build_user_profile,
)


# -----------------------------------------------------------------------------
# Live Site Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def settings() -> type[Config]:
    return get_config()


@pytest.fixture(scope="session")
def live_site(settings: type[Config]) -> Generator[str, None, None]:
    """Base URL of a reachable shop; dependent tests are skipped when it is down."""
    yield from live_site_url(
        base_url=settings.BASE_URL,
        api_url=settings.API_URL,
        suite_name="live",
        timeout=settings.SITE_READY_TIMEOUT_S,
    )


@pytest.fixture(scope="session")
def api(live_site: str, settings: type[Config]) -> Generator[AutomationExerciseAPI, None, None]:
    """API client for setting up data and cross-checking what the UI did."""
    client = AutomationExerciseAPI(settings.API_URL, timeout=settings.API_TIMEOUT_S)
    yield client
    client.close()


# -----------------------------------------------------------------------------
# Test Data Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def fake() -> Faker:
    """
    Faker instance seeded once per session.

    Returns:
        Faker generating en_US data.
    """
    Faker.seed(0)
    return Faker()


@pytest.fixture
def sample_profile() -> UserProfile:
    """A deterministic profile with a unique email."""
    return build_user_profile("sample")


@pytest.fixture
def sample_card() -> PaymentCard:
    return DEFAULT_CARD


@pytest.fixture
def sample_cart_lines() -> list[CartLine]:
    """
    Cart lines with mixed quantities.

    Returns:
        Lines totalling 500*2 + 400*1 + 1000*3 = 4400.
    """
    return [
        CartLine(name="Blue Top", price=500, quantity=2, product_id=1),
        CartLine(name="Men Tshirt", price=400, quantity=1, product_id=2),
        CartLine(name="Sleeveless Dress", price=1000, quantity=3, product_id=3),
    ]
