"""Tests for the resolve_asset management command."""

from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import SimpleTestCase, override_settings


@override_settings(STATIC_URL="/static/", ASSET_VERSION="2.3.0", ASSET_DEBUG=False)
class ResolveAssetCommandTests(SimpleTestCase):
    def run_command(self, *args):
        out = StringIO()
        call_command("resolve_asset", *args, stdout=out)
        return out.getvalue().strip()

    def test_prints_script_url(self):
        self.assertEqual(
            self.run_command("js/app.min.js"), "/static/js/app.min.js?v=2.3.0"
        )

    def test_debug_flag(self):
        self.assertEqual(
            self.run_command("js/app.min.js", "--debug"), "/static/js/app.js?v=2.3.0"
        )

    def test_stylesheet_with_explicit_version(self):
        self.assertEqual(
            self.run_command(
                "css/site.min.css", "--stylesheet", "--debug", "--asset-version=4.0"
            ),
            "/static/css/site.css?v=4.0",
        )

    def test_no_debug_version(self):
        self.assertEqual(
            self.run_command("js/vendor.min.js", "--debug", "--no-debug-version"),
            "/static/js/vendor.min.js?v=2.3.0",
        )

    def test_empty_path_is_rejected(self):
        with self.assertRaises(CommandError):
            call_command("resolve_asset", "  ", stdout=StringIO())
