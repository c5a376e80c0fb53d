"""
Asset URL resolution.

Builds the final URL of a script or stylesheet:

1. In debug mode the minified variant (``app.min.js``) is swapped for the
   full one (``app.js``), unless the caller says no full variant is deployed.
2. The path goes through Django's static files storage. Absolute URLs
   (CDN assets) are kept as they are.
3. A version token is appended as ``v=<version>``. An explicit version (e.g.
   the version of a third-party package) wins over the application version.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import urlsplit

from django.templatetags.static import static

from .conf import AssetConfig, get_asset_config
from .debug import is_debug


@dataclass(frozen=True)
class MinifiedSuffix:
    """Suffix of a minified asset and what it becomes in debug mode."""

    pattern: re.Pattern
    replacement: str

    def to_full(self, path: str) -> str:
        return self.pattern.sub(self.replacement, path)


SCRIPT = MinifiedSuffix(re.compile(r"\.min\.js$", re.IGNORECASE), ".js")
STYLESHEET = MinifiedSuffix(re.compile(r"\.min\.css$", re.IGNORECASE), ".css")


def _is_absolute(path: str) -> bool:
    return path.startswith("//") or bool(urlsplit(path).scheme)


def _append_version(url: str, version: str) -> str:
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}v={version}"


def resolve_asset_url(
    path: str,
    suffix: MinifiedSuffix,
    version: str | None = None,
    no_debug_version: bool = False,
    *,
    config: AssetConfig | None = None,
    debug_override: bool = False,
) -> str:
    """
    Return the URL of a static asset with version and debug switch applied.

    Args:
        path: Static path of the minified asset, like "js/app.min.js".
            A non-minified path is fine too; it is never rewritten.
        suffix: Minified suffix to swap in debug mode (SCRIPT or STYLESHEET).
        version: Explicit version, used for package assets like "1.9.1".
            Defaults to the application version.
        no_debug_version: True when only the minified file is deployed.
        config: Asset config; defaults to the app's config.
        debug_override: Per-request debug switch read by the caller.

    Returns:
        URL with "?v=<version>" appended when a version is known.
    """
    if config is None:
        config = get_asset_config()

    path = path.strip()
    if not no_debug_version and is_debug(config, debug_override):
        path = suffix.to_full(path)

    url = path if _is_absolute(path) else static(path).strip()

    if version is None:
        version = config.version

    if version:
        url = _append_version(url, version)

    return url


def resolve_script_url(
    path: str,
    version: str | None = None,
    no_debug_version: bool = False,
    **kwargs,
) -> str:
    """Resolve a ``.min.js`` script URL. See resolve_asset_url."""
    return resolve_asset_url(path, SCRIPT, version, no_debug_version, **kwargs)


def resolve_stylesheet_url(
    path: str,
    version: str | None = None,
    no_debug_version: bool = False,
    **kwargs,
) -> str:
    """The same as resolve_script_url, but for ``.min.css`` stylesheets."""
    return resolve_asset_url(path, STYLESHEET, version, no_debug_version, **kwargs)
