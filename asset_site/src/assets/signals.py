"""Signals for the assets app."""

from django.core.signals import setting_changed
from django.dispatch import receiver

from .conf import ASSET_SETTINGS, reload_asset_config


@receiver(setting_changed)
def reload_on_asset_setting_change(sender, setting, **kwargs):
    """Rebuild the asset config when an ASSET_* setting is overridden."""
    if setting in ASSET_SETTINGS:
        reload_asset_config()
