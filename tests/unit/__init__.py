"""
Unit tests for the suite's own helpers.

These run without a browser or network access:
- Test data builders and pricing arithmetic
- The API client, with ``requests`` mocked out
- Site readiness polling and request blocking patterns
- The signup-or-login branch, with page objects mocked out
"""
