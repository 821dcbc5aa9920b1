"""Centralised settings for plain.

The tool is configured only through its command-line flags; these are the
fixed defaults those flags and the fetcher fall back on.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_URL = "https://en.wikipedia.org/wiki/%22Hello,_World!%22_program"


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Fetcher
    # ------------------------------------------------------------------
    default_url: str = DEFAULT_URL
    user_agent: str = "plain/0.1 (+https://github.com/plain-text/plain)"

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = "WARNING"


# Module-level singleton; import this everywhere:
#   from plain.config import settings
settings = Settings()
