"""Fixtures for the shop API tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from shared.api_client import AutomationExerciseAPI
from shared.test_data import UserProfile, build_user_profile


@pytest.fixture
def new_profile(api: AutomationExerciseAPI) -> Generator[UserProfile, None, None]:
    """A unique, not yet registered profile; deleted after the test if it was created."""
    profile = build_user_profile("api")
    yield profile
    api.cleanup_accounts([profile])


@pytest.fixture
def created_profile(
    api: AutomationExerciseAPI, new_profile: UserProfile
) -> UserProfile:
    api.create_account(new_profile).assert_response_code(201)
    return new_profile
