"""Google service account credentials.

The service account JSON is supplied base64-encoded in a single
environment variable so it survives platforms that mangle newlines in
the private key.
"""

import base64
import binascii
import json
from functools import lru_cache
from typing import Any

import gspread
import structlog
from google.oauth2.service_account import Credentials

from ..domain.exceptions import ConfigurationError

logger = structlog.get_logger()

SPREADSHEETS_SCOPE = "https://www.googleapis.com/auth/spreadsheets"
REQUIRED_KEYS = ("client_email", "private_key")


def decode_service_account(encoded: str) -> dict[str, Any]:
    """
    Decode a base64 service account JSON document.

    Raises:
        ConfigurationError: If the value is not base64 JSON with the
            keys needed to sign requests
    """
    try:
        raw = base64.b64decode(encoded, validate=True)
        info = json.loads(raw.decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ConfigurationError(
            "GOOGLE_SERVICE_ACCOUNT_BASE64 is not valid base64-encoded JSON"
        ) from e

    if not isinstance(info, dict):
        raise ConfigurationError("GOOGLE_SERVICE_ACCOUNT_BASE64 must encode a JSON object")

    missing = [key for key in REQUIRED_KEYS if not info.get(key)]
    if missing:
        raise ConfigurationError(f"Service account is missing keys: {missing}")

    return info


@lru_cache(maxsize=4)
def build_sheets_client(encoded: str) -> gspread.Client:
    """Authorize a gspread client; cached per credential for warm invocations."""
    info = decode_service_account(encoded)
    try:
        credentials = Credentials.from_service_account_info(info, scopes=[SPREADSHEETS_SCOPE])
    except ValueError as e:
        raise ConfigurationError(f"Invalid service account credentials: {e}") from e

    logger.info("Sheets client authorized", client_email=info["client_email"])
    return gspread.authorize(credentials)
