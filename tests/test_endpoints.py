import pytest

from config.tradier import (
    TRADIER_LIVE_API_URL,
    TRADIER_SANDBOX_API_URL,
    default_endpoint,
    endpoint_for_mode,
    ensure_endpoint,
    is_sandbox,
)


def test_default_endpoint_is_sandbox():
    assert default_endpoint() == "https://sandbox.tradier.com/v1/"
    assert default_endpoint() == TRADIER_SANDBOX_API_URL


def test_default_endpoint_is_stable():
    assert default_endpoint() == default_endpoint()


@pytest.mark.parametrize("mode, expected", [
    ("paper", TRADIER_SANDBOX_API_URL),
    ("sandbox", TRADIER_SANDBOX_API_URL),
    ("live", TRADIER_LIVE_API_URL),
    (" LIVE ", TRADIER_LIVE_API_URL),
])
def test_endpoint_for_mode(mode, expected):
    assert endpoint_for_mode(mode) == expected


def test_endpoint_for_unknown_mode():
    with pytest.raises(ValueError, match="Invalid mode"):
        endpoint_for_mode("staging")


def test_ensure_endpoint_accepts_any_non_empty_string():
    # No URL validation at this layer
    assert ensure_endpoint("not-a-url") == "not-a-url"


@pytest.mark.parametrize("value", ["", "   ", None])
def test_ensure_endpoint_rejects_empty(value):
    with pytest.raises(ValueError):
        ensure_endpoint(value)


def test_is_sandbox():
    assert is_sandbox(TRADIER_SANDBOX_API_URL)
    assert not is_sandbox(TRADIER_LIVE_API_URL)
