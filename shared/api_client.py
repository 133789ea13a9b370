"""API client for cross-checking UI state against the shop backend.

The shop API answers every request with HTTP 200 and reports the real
outcome in the ``responseCode`` field of a JSON body. This module wraps
those calls so tests can assert on that code directly.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

import requests

from shared.test_data import UserProfile

logger = logging.getLogger(__name__)

API_TIMEOUT = 15.0


@dataclass
class ApiResponse:
    """Parsed API reply."""

    http_status: int
    response_code: int | None
    message: str | None = None
    payload: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_response(cls, response: requests.Response) -> "ApiResponse":
        """
        Parse a raw ``requests`` response.

        Raises:
            AssertionError: If the body is not a JSON object.
        """
        try:
            payload = response.json()
        except ValueError as exc:
            raise AssertionError(
                f"{response.request.method} {response.url} returned a non-JSON body: "
                f"{response.text[:200]!r}"
            ) from exc
        if not isinstance(payload, dict):
            raise AssertionError(
                f"{response.request.method} {response.url} returned {type(payload).__name__}, "
                "expected a JSON object"
            )
        return cls(
            http_status=response.status_code,
            response_code=payload.get("responseCode"),
            message=payload.get("message"),
            payload=payload,
        )

    def assert_response_code(self, expected: int) -> "ApiResponse":
        assert self.response_code == expected, (
            f"Expected responseCode {expected}, got {self.response_code} "
            f"(message={self.message!r})"
        )
        return self

    def assert_message(self, expected: str) -> "ApiResponse":
        assert self.message == expected, f"Expected message {expected!r}, got {self.message!r}"
        return self


class AutomationExerciseAPI:
    """Thin wrapper over the shop's public ``/api`` endpoints."""

    def __init__(self, base_url: str, timeout: float = API_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "AutomationExerciseAPI":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _request(
        self,
        method: str,
        path: str,
        *,
        data: dict[str, str] | None = None,
        params: dict[str, str] | None = None,
    ) -> ApiResponse:
        url = f"{self.base_url}{path}"
        response = self.session.request(
            method, url, data=data, params=params, timeout=self.timeout
        )
        result = ApiResponse.from_response(response)
        logger.info(
            "%s %s -> http=%s responseCode=%s", method, path, result.http_status, result.response_code
        )
        return result

    # -------------------------------------------------------------------------
    # Products and Brands
    # -------------------------------------------------------------------------

    def get_products(self) -> ApiResponse:
        return self._request("GET", "/productsList")

    def post_products(self) -> ApiResponse:
        """Unsupported method; the API answers 405."""
        return self._request("POST", "/productsList")

    def get_brands(self) -> ApiResponse:
        return self._request("GET", "/brandsList")

    def put_brands(self) -> ApiResponse:
        """Unsupported method; the API answers 405."""
        return self._request("PUT", "/brandsList")

    def search_product(self, term: str | None) -> ApiResponse:
        """Search products by name; ``None`` omits the parameter entirely."""
        data = None if term is None else {"search_product": term}
        return self._request("POST", "/searchProduct", data=data)

    # -------------------------------------------------------------------------
    # Accounts
    # -------------------------------------------------------------------------

    def verify_login(self, email: str | None, password: str | None) -> ApiResponse:
        """Check credentials; a ``None`` field is left out of the request."""
        data = {}
        if email is not None:
            data["email"] = email
        if password is not None:
            data["password"] = password
        return self._request("POST", "/verifyLogin", data=data)

    def delete_verify_login(self) -> ApiResponse:
        """Unsupported method; the API answers 405."""
        return self._request("DELETE", "/verifyLogin")

    def account_exists(self, email: str, password: str) -> bool:
        return self.verify_login(email, password).response_code == 200

    def create_account(self, profile: UserProfile) -> ApiResponse:
        return self._request("POST", "/createAccount", data=profile.as_api_form())

    def update_account(self, profile: UserProfile) -> ApiResponse:
        return self._request("PUT", "/updateAccount", data=profile.as_api_form())

    def delete_account(self, email: str, password: str) -> ApiResponse:
        return self._request(
            "DELETE", "/deleteAccount", data={"email": email, "password": password}
        )

    def cleanup_accounts(self, profiles: Iterable[UserProfile]) -> list[str]:
        """
        Delete every account in ``profiles``, carrying on past failures.

        Returns:
            Emails whose deletion could not be confirmed.
        """
        failed = []
        for profile in profiles:
            try:
                result = self.delete_account(profile.email, profile.password)
            except (requests.RequestException, AssertionError) as exc:
                logger.warning("Cleanup of %s failed: %s", profile.email, exc)
                failed.append(profile.email)
                continue
            logger.info("Cleanup of %s: responseCode=%s", profile.email, result.response_code)
        return failed

    def get_user_detail_by_email(self, email: str) -> ApiResponse:
        return self._request("GET", "/getUserDetailByEmail", params={"email": email})
