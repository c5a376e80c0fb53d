"""
Debug (non-minified) asset mode.

Debug mode is on when the application-wide flag is set or when the current
request asks for it with ``?_debugScripts=1``. The request override only ever
turns debug mode on; it cannot switch off a global setting.
"""

from __future__ import annotations

import logging

from .conf import DEBUG_QUERY_PARAM, AssetConfig, get_asset_config

logger = logging.getLogger(__name__)


def is_debug(config: AssetConfig, request_override: bool = False) -> bool:
    """Return True if non-minified assets should be served."""
    return config.debug_enabled or request_override


def debug_override_from_request(request) -> bool:
    """Return True if the request's query string forces debug mode."""
    if request is None:
        return False
    return request.GET.get(DEBUG_QUERY_PARAM) == "1"


def set_global_debug(disable: bool = False, *, config: AssetConfig | None = None) -> None:
    """
    Switch to non-minified assets for the whole application.

    Args:
        disable: Pass True to go back to minified assets.
        config: Config to update; defaults to the app's config.
    """
    if config is None:
        config = get_asset_config()
    config.debug_enabled = not disable
    logger.info(
        f"Global asset debug mode {'enabled' if config.debug_enabled else 'disabled'}"
    )
