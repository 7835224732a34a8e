"""
Google OAuth for the Slides API.

Reuses a saved authorized-user token when possible, refreshes it when expired,
and otherwise runs the installed-app consent flow once and saves the result.
"""

import logging
import os
from typing import Any, Optional, Type

from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials as OAuthCredentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build

from config import SlidesConfig
from errors import SessionStateError

logger = logging.getLogger(__name__)


def _load_saved_credentials(token_file: str, scopes) -> Optional[OAuthCredentials]:
    if not os.path.exists(token_file):
        return None
    try:
        creds = OAuthCredentials.from_authorized_user_file(token_file, scopes)
        logger.debug(f"✅ Loaded OAuth token from {token_file}")
        return creds
    except (ValueError, OSError) as e:
        logger.warning(f"⚠️ Could not load token file: {e}")
        return None


def _save_credentials(creds: OAuthCredentials, token_file: str) -> None:
    try:
        with open(token_file, 'w') as token:
            token.write(creds.to_json())
        logger.info(f"💾 Saved OAuth token to {token_file}")
    except OSError as e:
        logger.warning(f"⚠️ Could not save token: {e}")


def _build_flow(config: Type[SlidesConfig]) -> InstalledAppFlow:
    scopes = config.GOOGLE_SCOPES
    if os.path.exists(config.GOOGLE_CREDENTIALS_PATH):
        return InstalledAppFlow.from_client_secrets_file(config.GOOGLE_CREDENTIALS_PATH, scopes)

    client_id = config.GOOGLE_OAUTH_CLIENT_ID
    client_secret = config.GOOGLE_OAUTH_CLIENT_SECRET
    if not client_id or not client_secret:
        raise SessionStateError(
            "OAuth credentials not configured. Either:\n"
            f"  1. Place an OAuth client secrets file at {config.GOOGLE_CREDENTIALS_PATH}, or\n"
            "  2. Set GOOGLE_OAUTH_CLIENT_ID and GOOGLE_OAUTH_CLIENT_SECRET\n"
            "\n"
            "Create a Desktop app OAuth client at https://console.cloud.google.com/apis/credentials"
        )
    client_config = {
        "installed": {
            "client_id": client_id,
            "client_secret": client_secret,
            "auth_uri": "https://accounts.google.com/o/oauth2/auth",
            "token_uri": "https://oauth2.googleapis.com/token",
            "auth_provider_x509_cert_url": "https://www.googleapis.com/oauth2/v1/certs",
            "redirect_uris": ["http://localhost"],
        }
    }
    return InstalledAppFlow.from_client_config(client_config, scopes)


def _log_authorization_url(flow: InstalledAppFlow) -> None:
    """Log the consent URL when the local-server flow builds it."""
    authorization_url = flow.authorization_url

    def logged_authorization_url(**kwargs):
        url, state = authorization_url(**kwargs)
        logger.warning(f"🔐 Authorize this application by visiting: {url}")
        return url, state

    flow.authorization_url = logged_authorization_url


def get_credentials(config: Type[SlidesConfig] = SlidesConfig) -> OAuthCredentials:
    """
    Get OAuth 2.0 credentials, prompting for authorization if needed.

    Raises:
        SessionStateError: no client configuration, or the consent flow failed
    """
    token_file = config.GOOGLE_OAUTH_TOKEN_FILE
    creds = _load_saved_credentials(token_file, config.GOOGLE_SCOPES)

    if creds and creds.valid:
        return creds

    if creds and creds.expired and creds.refresh_token:
        try:
            creds.refresh(Request())
            logger.info("✅ Refreshed OAuth token")
            _save_credentials(creds, token_file)
            return creds
        except GoogleAuthError as e:
            logger.warning(f"⚠️ Token refresh failed: {e}, requesting new authorization")

    flow = _build_flow(config)
    _log_authorization_url(flow)
    try:
        # stdout carries the MCP stdio transport; the URL is logged instead of printed
        creds = flow.run_local_server(
            port=config.GOOGLE_OAUTH_PORT,
            open_browser=config.GOOGLE_OAUTH_OPEN_BROWSER,
            authorization_prompt_message="",
        )
    except Exception as e:
        raise SessionStateError(f"OAuth authorization failed: {e}") from e
    logger.info("✅ OAuth authorization completed")

    if creds:
        _save_credentials(creds, token_file)
    return creds


def build_slides_client(creds: Any) -> Any:
    return build('slides', 'v1', credentials=creds, cache_discovery=False)


def authorize(config: Type[SlidesConfig] = SlidesConfig) -> Any:
    """Return an authorized Slides API client (googleapiclient Resource)."""
    creds = get_credentials(config)
    try:
        client = build_slides_client(creds)
    except Exception as e:
        raise SessionStateError(f"Could not build Slides client: {e}") from e
    logger.info("✅ Google Slides client initialized")
    return client
