"""Tests for the asset_settings context processor."""

from django.test import RequestFactory, SimpleTestCase, override_settings
from src.assets.context_processors import asset_settings


@override_settings(ASSET_VERSION="2.3.0", ASSET_DEBUG=False)
class AssetSettingsTests(SimpleTestCase):
    def setUp(self):
        self.factory = RequestFactory()

    def test_exposes_version_and_debug_mode(self):
        context = asset_settings(self.factory.get("/"))

        self.assertEqual(context, {"asset_version": "2.3.0", "asset_debug": False})

    def test_debug_mode_follows_request_override(self):
        context = asset_settings(self.factory.get("/", {"_debugScripts": "1"}))

        self.assertTrue(context["asset_debug"])

    @override_settings(ASSET_DEBUG=True)
    def test_debug_mode_follows_global_flag(self):
        context = asset_settings(self.factory.get("/"))

        self.assertTrue(context["asset_debug"])
