"""
Management command to print the URL an asset helper would render.

Usage:
    python manage.py resolve_asset js/app.min.js
    python manage.py resolve_asset css/site.min.css --stylesheet --debug
    python manage.py resolve_asset js/jquery.min.js --asset-version 1.9.1 --no-debug-version
"""

from django.core.management.base import BaseCommand, CommandError

from src.assets.resolver import resolve_script_url, resolve_stylesheet_url


class Command(BaseCommand):
    help = "Print the versioned URL of a static script or stylesheet"

    def add_arguments(self, parser):
        parser.add_argument("path", type=str, help="Static path, e.g. js/app.min.js")
        parser.add_argument(
            "--stylesheet",
            action="store_true",
            help="Treat the path as a stylesheet (.min.css) instead of a script",
        )
        parser.add_argument(
            "--asset-version",
            dest="asset_version",
            type=str,
            help="Explicit asset version (defaults to the application version)",
        )
        parser.add_argument(
            "--debug",
            action="store_true",
            help="Resolve as if the request asked for non-minified assets",
        )
        parser.add_argument(
            "--no-debug-version",
            action="store_true",
            help="The asset has no non-minified variant deployed",
        )

    def handle(self, *args, **options):
        path = options["path"].strip()
        if not path:
            raise CommandError("Asset path must not be empty")

        resolve = (
            resolve_stylesheet_url if options["stylesheet"] else resolve_script_url
        )
        url = resolve(
            path,
            options.get("asset_version"),
            options["no_debug_version"],
            debug_override=options["debug"],
        )
        self.stdout.write(url)
