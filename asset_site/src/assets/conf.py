"""Startup configuration for asset URL helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version as distribution_version

from django.apps import apps
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)

# Query string parameter that switches a single page to non-minified assets.
DEBUG_QUERY_PARAM = "_debugScripts"

ASSET_SETTINGS = (
    "ASSET_VERSION",
    "ASSET_VERSION_DISTRIBUTION",
    "ASSET_DEBUG",
)


@dataclass
class AssetConfig:
    """Application-wide asset settings, built once at startup."""

    version: str | None = None
    debug_enabled: bool = False


def _read_version() -> str | None:
    value = getattr(settings, "ASSET_VERSION", None)
    if value is not None and not isinstance(value, str):
        raise ImproperlyConfigured(
            f"ASSET_VERSION must be a string or None, got {type(value).__name__}"
        )
    if value:
        return value

    distribution = getattr(settings, "ASSET_VERSION_DISTRIBUTION", None)
    if not distribution:
        return None

    try:
        return distribution_version(distribution)
    except PackageNotFoundError:
        logger.warning(
            f"ASSET_VERSION_DISTRIBUTION '{distribution}' is not installed; "
            "asset URLs will not be versioned"
        )
        return None


def _read_debug() -> bool:
    value = getattr(settings, "ASSET_DEBUG", False)
    if isinstance(value, str):
        return value.strip() == "1"
    return bool(value)


def load_asset_config() -> AssetConfig:
    """Build an AssetConfig from Django settings."""
    asset_config = AssetConfig(version=_read_version(), debug_enabled=_read_debug())
    logger.debug(
        f"Asset config loaded: version={asset_config.version!r}, "
        f"debug={asset_config.debug_enabled}"
    )
    return asset_config


def get_asset_config() -> AssetConfig:
    """Return the config instance owned by the assets app."""
    app_config = apps.get_app_config("assets")
    if app_config.asset_config is None:
        app_config.asset_config = load_asset_config()
    return app_config.asset_config


def reload_asset_config() -> AssetConfig:
    """Rebuild the app's config from the current settings."""
    app_config = apps.get_app_config("assets")
    app_config.asset_config = load_asset_config()
    return app_config.asset_config
