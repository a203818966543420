"""
Logging Setup
Console/file logging plus a filter that keeps access tokens out of log output
"""

import logging
import os
from collections.abc import Mapping
from logging.handlers import RotatingFileHandler
from typing import Optional

from utils.secret_string import SecretString

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
TOKEN_PLACEHOLDER = '<hidden>'
HTTP_CLIENT_LOGGER_NAMES = ('urllib3', 'urllib3.connectionpool', 'requests')
MIN_REDACT_LENGTH = 4

_TRACEBACK_FORMATTER = logging.Formatter()

logger = logging.getLogger(__name__)

# Rotation settings for the optional log file
MAX_LOG_SIZE_MB = 100
BACKUP_COUNT = 5


def setup_logging(level: str = 'INFO', log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the root logger

    Args:
        level: Log level name, e.g. 'INFO' or 'DEBUG'
        log_file: Optional path for a rotating log file

    Returns:
        The root logger
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in list(root.handlers):
        root.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file, maxBytes=MAX_LOG_SIZE_MB * 1024 * 1024, backupCount=BACKUP_COUNT, encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    return root


class TokenRedactingFilter(logging.Filter):
    """Mask an access token in log records, including tracebacks"""

    def __init__(self, secret: SecretString):
        super().__init__()
        self._secret = secret

    @property
    def active(self) -> bool:
        """Tokens shorter than MIN_REDACT_LENGTH would blank unrelated text"""
        return bool(self._secret) and len(self._secret) >= MIN_REDACT_LENGTH

    def filter(self, record: logging.LogRecord) -> bool:
        if not self.active:
            return True

        token = self._secret.expose_secret()
        self._sanitize_traceback(record, token)

        rendered = record.getMessage()
        if token in rendered:
            sanitized = rendered.replace(token, TOKEN_PLACEHOLDER)
            record.msg = sanitized
            record.args = ()
            record.message = sanitized
            return True

        record.args = self._sanitize(record.args, token)
        return True

    def _sanitize_traceback(self, record, token):
        if record.exc_info:
            if not record.exc_text:
                record.exc_text = _TRACEBACK_FORMATTER.formatException(record.exc_info)
            # exc_text is what formatters print once exc_info is gone
            record.exc_info = None
        if record.exc_text and token in record.exc_text:
            record.exc_text = record.exc_text.replace(token, TOKEN_PLACEHOLDER)
        if record.stack_info and token in record.stack_info:
            record.stack_info = record.stack_info.replace(token, TOKEN_PLACEHOLDER)

    def _sanitize(self, value, token):
        if isinstance(value, str) and token in value:
            return value.replace(token, TOKEN_PLACEHOLDER)
        if isinstance(value, tuple):
            return tuple(self._sanitize(item, token) for item in value)
        if isinstance(value, list):
            return [self._sanitize(item, token) for item in value]
        if isinstance(value, Mapping):
            return {key: self._sanitize(item, token) for key, item in value.items()}
        return value


def install_token_redaction(secret: SecretString) -> TokenRedactingFilter:
    """Attach a TokenRedactingFilter to root handlers and HTTP client loggers"""
    token_filter = TokenRedactingFilter(secret)
    if secret and not token_filter.active:
        logger.warning(f"Access token shorter than {MIN_REDACT_LENGTH} bytes; log redaction disabled")

    root = logging.getLogger()
    if token_filter not in root.filters:
        root.addFilter(token_filter)
    for handler in root.handlers:
        handler.addFilter(token_filter)

    for name in HTTP_CLIENT_LOGGER_NAMES:
        logging.getLogger(name).addFilter(token_filter)

    return token_filter
