"""Tests for the exception hierarchy and HTTP mapping."""

import pytest

from realbrand_commons.core.exceptions import (
    CacheConfigurationError,
    CacheConnectionError,
    CacheError,
    CacheSerializationError,
    RealBrandError,
    create_error_response,
    get_http_status_code,
)


class TestExceptions:
    """Error codes, details and status mapping."""

    def test_defaults(self):
        error = CacheError("boom")

        assert isinstance(error, RealBrandError)
        assert error.error_code == "CacheError"
        assert error.details == {}
        assert str(error) == "boom"

    @pytest.mark.parametrize("error, status_code", [
        (CacheSerializationError("bad payload"), 422),
        (CacheConfigurationError("bad config"), 500),
        (CacheConnectionError("down"), 503),
        (CacheError("generic"), 500),
        (RealBrandError("unmapped"), 500),
        (ValueError("not ours"), 500),
    ])
    def test_http_status_code(self, error, status_code):
        assert get_http_status_code(error) == status_code

    def test_error_response(self):
        error = CacheConfigurationError(
            "Invalid write policy",
            error_code="INVALID_POLICY",
            details={"allowed": ["write-through"]},
        )

        assert create_error_response(error) == {
            "error": {
                "code": "INVALID_POLICY",
                "message": "Invalid write policy",
                "details": {"allowed": ["write-through"]},
                "type": "CacheConfigurationError",
            }
        }
