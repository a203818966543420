"""
Tradier REST API Configuration Loader
Resolves the API endpoint and access token at process start
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from config.tradier import default_endpoint, ensure_endpoint
from utils.secret_string import SecretString, wrap

logger = logging.getLogger(__name__)

TRADIER_ACCESS_TOKEN_ENV = 'TRADIER_API_ACCESS_TOKEN'
DEFAULT_ENV_FILE = '.env'


class MissingCredential(LookupError):
    """Raised when the access token variable is not set"""

    def __init__(self, var_name: str = TRADIER_ACCESS_TOKEN_ENV):
        super().__init__(f"Missing required environment variable: {var_name}")
        self.var_name = var_name


@dataclass
class TradierRestApiConfig:
    """
    Endpoint and access token for the Tradier REST API

    ``endpoint`` is a plain string and may be reassigned (e.g. sandbox to
    live). ``access_token`` is a SecretString; call ``expose_secret()`` only
    when building an authenticated request.
    """
    endpoint: str
    access_token: SecretString

    def __post_init__(self):
        ensure_endpoint(self.endpoint)
        if not isinstance(self.access_token, SecretString):
            raise TypeError("access_token must be a SecretString")
        if not self.access_token:
            raise ValueError("Access token must be a non-empty string")


def from_parts(endpoint: str, token: Union[str, SecretString]) -> TradierRestApiConfig:
    """
    Build a config from values the caller already has

    Args:
        endpoint: Base URL, e.g. 'https://api.tradier.com/v1/'
        token: Plaintext token or an existing SecretString

    Returns:
        TradierRestApiConfig (no environment access)
    """
    access_token = token if isinstance(token, SecretString) else wrap(token)
    return TradierRestApiConfig(endpoint=endpoint, access_token=access_token)


def merge_env_file(env_file: Optional[Union[str, Path]] = None) -> bool:
    """
    Merge a local .env file into os.environ

    Variables already set in the environment win. A missing or unreadable
    file merges nothing.

    Returns:
        True if a file was read
    """
    path = Path(env_file) if env_file is not None else Path.cwd() / DEFAULT_ENV_FILE
    if not path.is_file():
        logger.debug(f"No env file at {path}")
        return False
    try:
        loaded = load_dotenv(dotenv_path=path, override=False)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read env file {path}: {e.__class__.__name__}")
        return False
    if loaded:
        logger.info(f"Merged environment from {path}")
    return loaded


def load_from_env_sync(env_file: Optional[Union[str, Path]] = None) -> TradierRestApiConfig:
    """
    Load the config from the process environment

    Reads TRADIER_API_ACCESS_TOKEN (after merging an optional .env file) and
    pairs it with the sandbox endpoint.

    Raises:
        MissingCredential: the variable is unset or blank
    """
    merge_env_file(env_file)

    raw_token = os.environ.get(TRADIER_ACCESS_TOKEN_ENV)
    if raw_token is None or not raw_token.strip():
        raise MissingCredential(TRADIER_ACCESS_TOKEN_ENV)

    config = TradierRestApiConfig(endpoint=default_endpoint(), access_token=wrap(raw_token))
    logger.info(f"Tradier API config loaded (endpoint: {config.endpoint})")
    return config


async def load_from_env(env_file: Optional[Union[str, Path]] = None) -> TradierRestApiConfig:
    """Awaitable form of load_from_env_sync() for use inside an event loop"""
    return load_from_env_sync(env_file)
