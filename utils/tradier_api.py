# tradier_api.py

import logging
import requests
from typing import Dict, Optional

from config.tradier import is_sandbox
from core.config_loader import TradierRestApiConfig

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


# === Tradier API Client Class ===
class TradierAPI:
    """Tradier API client built on a TradierRestApiConfig"""

    def __init__(self, config: TradierRestApiConfig, timeout: float = DEFAULT_TIMEOUT):
        # Held by reference so an endpoint switch on the config is picked up
        self.config = config
        self.timeout = timeout

    def __repr__(self):
        return f"TradierAPI(endpoint={self.config.endpoint!r})"

    @property
    def api_url(self) -> str:
        return self.config.endpoint

    def url(self, path: str) -> str:
        """Join the configured endpoint and a relative API path"""
        return f"{self.config.endpoint.rstrip('/')}/{path.lstrip('/')}"

    def auth_headers(self) -> Dict[str, str]:
        """Request headers; the token is revealed only here"""
        return {
            "Authorization": f"Bearer {self.config.access_token.expose_secret()}",
            "Accept": "application/json"
        }

    def request(self, path: str, params: Optional[Dict] = None) -> Dict:
        """Make a single GET request to the Tradier API and return the JSON body"""
        response = requests.get(
            self.url(path),
            headers=self.auth_headers(),
            params=params,
            timeout=self.timeout
        )
        response.raise_for_status()
        return response.json()

    def test_connection(self) -> bool:
        """Check that the endpoint accepts the access token"""
        logger.info(f"Testing Tradier API connection ({self.config.endpoint})")
        logger.info(f"Is test account: {'Yes' if is_sandbox(self.config.endpoint) else 'No'}")

        try:
            data = self.request("user/profile")
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else 'N/A'
            logger.error(f"Tradier API rejected the request (HTTP {status})")
            if status == 401:
                logger.error("Check that TRADIER_API_ACCESS_TOKEN matches the selected endpoint")
            return False
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Error testing connection: {e.__class__.__name__}: {e}")
            return False

        profile = data.get("profile", {}) if isinstance(data, dict) else {}
        account = profile.get("account", {})
        # Single-account profiles come back as a dict
        if isinstance(account, dict):
            account = [account] if account else []

        logger.info(f"Connected to Tradier API as {profile.get('name', 'N/A')}")
        for acc in account:
            logger.info(f"Account {acc.get('account_number', 'N/A')} ({acc.get('type', 'N/A')}, {acc.get('status', 'N/A')})")
        return True
