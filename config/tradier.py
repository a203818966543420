"""
Tradier Endpoint Configuration
Base URLs for the sandbox and live Tradier REST APIs
"""

# === Tradier API URLs (Constants) ===
TRADIER_LIVE_API_URL = 'https://api.tradier.com/v1/'
TRADIER_SANDBOX_API_URL = 'https://sandbox.tradier.com/v1/'

# Mode names accepted on the command line
MODE_ENDPOINTS = {
    'live': TRADIER_LIVE_API_URL,
    'paper': TRADIER_SANDBOX_API_URL,
    'sandbox': TRADIER_SANDBOX_API_URL,
}


# === Utility Functions ===

def default_endpoint() -> str:
    """Sandbox base URL; nothing points at live trading without an explicit override"""
    return TRADIER_SANDBOX_API_URL


def endpoint_for_mode(mode: str) -> str:
    """
    Get the base URL for a trading mode

    Args:
        mode: 'live', 'paper' or 'sandbox'

    Returns:
        Base URL for the mode
    """
    key = (mode or '').strip().lower()
    if key not in MODE_ENDPOINTS:
        raise ValueError(f"Invalid mode: {mode}. Must be one of {sorted(MODE_ENDPOINTS)}")
    return MODE_ENDPOINTS[key]


def ensure_endpoint(endpoint: str) -> str:
    """
    Validate an endpoint override

    Only emptiness is checked; URL well-formedness is left to the HTTP layer.
    """
    if not isinstance(endpoint, str) or not endpoint.strip():
        raise ValueError("Endpoint must be a non-empty string")
    return endpoint


def is_sandbox(endpoint: str) -> bool:
    """True when the endpoint points at the Tradier sandbox"""
    return 'sandbox' in endpoint
