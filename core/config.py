# =============================================================================
# core/config.py  —  Runtime Settings
# =============================================================================
#
# The only knob exposed to operators is the API base URL:
#
#   ATLAS_API_URL   →  base URL every request path is appended to
#                      (default: the production Atlas host)
#
# main.py loads a .env file (python-dotenv) before this module reads the
# environment, so a local .env works the same as exported variables.
# =============================================================================

import os
from dataclasses import dataclass

DEFAULT_API_URL = "https://atlas.cartograph.app/api"


@dataclass(frozen=True)
class Settings:
    """Settings shared by every invocation."""

    api_url: str = DEFAULT_API_URL     # No trailing slash
    root_page_paths: bool = False      # Prefix "/" onto bare page names


def load_settings() -> Settings:
    """Build Settings from the current environment."""
    api_url = os.environ.get("ATLAS_API_URL") or DEFAULT_API_URL
    return Settings(api_url=api_url.rstrip("/"))
