"""Assets app configuration."""

from django.apps import AppConfig


class AssetsConfig(AppConfig):
    name = "src.assets"
    label = "assets"
    verbose_name = "Assets"

    asset_config = None

    def ready(self):
        """Build the asset config once and hook settings reloads."""
        from . import signals  # noqa: F401
        from .conf import load_asset_config

        self.asset_config = load_asset_config()
