"""
Slide Deck Configuration

Environment-driven settings for the Google Slides deck builder: OAuth files,
deck naming, CSV lookup defaults, and logging. Visual constants (layouts,
fonts, bullet presets) live in slides_template_config.py.
"""

import os
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() not in ("0", "false", "no", "off")


class SlidesConfig:
    """Deck builder configuration used across the runtime."""

    # Google OAuth
    GOOGLE_CREDENTIALS_PATH = os.getenv("SLIDES_CREDENTIALS_PATH", "credentials.json")
    GOOGLE_OAUTH_TOKEN_FILE = os.getenv("SLIDES_TOKEN_FILE", "token.json")
    GOOGLE_OAUTH_CLIENT_ID = os.getenv("GOOGLE_OAUTH_CLIENT_ID")
    GOOGLE_OAUTH_CLIENT_SECRET = os.getenv("GOOGLE_OAUTH_CLIENT_SECRET")
    # 0 lets the local consent server pick any free port
    GOOGLE_OAUTH_PORT = int(os.getenv("SLIDES_OAUTH_PORT", "0"))
    GOOGLE_OAUTH_OPEN_BROWSER = _env_flag("SLIDES_OAUTH_OPEN_BROWSER", "true")
    GOOGLE_SCOPES: List[str] = [
        scope.strip()
        for scope in os.getenv(
            "SLIDES_SCOPES", "https://www.googleapis.com/auth/presentations"
        ).split(",")
        if scope.strip()
    ]

    # Deck naming
    DECK_TITLE_SUFFIX = os.getenv("SLIDES_DECK_TITLE_SUFFIX", " Slide Deck")
    CREATED_LABEL = os.getenv("SLIDES_CREATED_LABEL", "Created")
    OVERVIEW_SLIDE_TITLE = os.getenv("SLIDES_OVERVIEW_TITLE", "Overview")
    ENABLE_PRESET_SLIDES = _env_flag("SLIDES_ENABLE_PRESETS", "true")

    # Company data source
    COMPANY_KEY_COLUMN = os.getenv("SLIDES_COMPANY_KEY_COLUMN", "companyName")
    DEFAULT_CSV_PATH = os.getenv("SLIDES_CSV_PATH")
    CSV_ENCODING = os.getenv("SLIDES_CSV_ENCODING", "utf-8-sig")

    # Runtime
    LOG_LEVEL = os.getenv("SLIDES_LOG_LEVEL", "INFO").upper()
    LOG_DIR = os.getenv("SLIDES_LOG_DIR")
    MCP_SERVER_NAME = os.getenv("SLIDES_MCP_SERVER_NAME", "GoogleSlidesDeck")
    MAX_CACHED_RECORDS = int(os.getenv("SLIDES_MAX_CACHED_RECORDS", "32"))

    @classmethod
    def deck_title(cls, company_name: str) -> str:
        return f"{company_name}{cls.DECK_TITLE_SUFFIX}"
