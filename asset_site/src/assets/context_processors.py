"""
Context processors for asset URL helpers.
"""

from .conf import get_asset_config
from .debug import debug_override_from_request, is_debug


def asset_settings(request):
    """Add the application version and this request's debug mode to templates."""
    asset_config = get_asset_config()
    return {
        "asset_version": asset_config.version,
        "asset_debug": is_debug(asset_config, debug_override_from_request(request)),
    }
