"""Template tags for versioned, debug-switchable static scripts and stylesheets."""

from django import template
from django.utils.html import format_html

from ..debug import debug_override_from_request
from ..resolver import resolve_script_url, resolve_stylesheet_url

register = template.Library()


def _debug_override(context):
    return debug_override_from_request(context.get("request"))


@register.simple_tag(takes_context=True)
def script_url(context, path, version=None, no_debug_version=False):
    """
    Return the versioned URL of a script, switched to the full build in debug mode.

    Usage: {% script_url 'js/app.min.js' %}
    Returns: '/static/js/app.min.js?v=2.3.0', or '/static/js/app.js?v=2.3.0'
    in debug mode

    Usage: {% script_url 'js/jquery.min.js' version='1.9.1' no_debug_version=True %}
    Returns: '/static/js/jquery.min.js?v=1.9.1'
    """
    return resolve_script_url(
        path, version, no_debug_version, debug_override=_debug_override(context)
    )


@register.simple_tag(takes_context=True)
def stylesheet_url(context, path, version=None, no_debug_version=False):
    """
    The same as script_url, but for stylesheets.

    Usage: {% stylesheet_url 'css/site.min.css' %}
    """
    return resolve_stylesheet_url(
        path, version, no_debug_version, debug_override=_debug_override(context)
    )


@register.simple_tag(takes_context=True)
def script_tag(context, path, version=None, no_debug_version=False):
    """
    Render a <script> element for script_url.

    Usage: {% script_tag 'js/app.min.js' %}
    """
    url = script_url(context, path, version, no_debug_version)
    return format_html('<script src="{}"></script>', url)


@register.simple_tag(takes_context=True)
def stylesheet_tag(context, path, version=None, no_debug_version=False):
    """
    Render a <link rel="stylesheet"> element for stylesheet_url.

    Usage: {% stylesheet_tag 'css/site.min.css' %}
    """
    url = stylesheet_url(context, path, version, no_debug_version)
    return format_html('<link rel="stylesheet" href="{}">', url)
