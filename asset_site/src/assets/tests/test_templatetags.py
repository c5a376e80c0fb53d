"""Tests for the minified_static template tags."""

from django.template import Context, Template
from django.test import RequestFactory, SimpleTestCase, override_settings


@override_settings(STATIC_URL="/static/", ASSET_VERSION="2.3.0", ASSET_DEBUG=False)
class MinifiedStaticTagsTests(SimpleTestCase):
    def setUp(self):
        self.factory = RequestFactory()

    def render(self, source, request=None):
        template = Template("{% load minified_static %}" + source)
        context = {} if request is None else {"request": request}
        return template.render(Context(context))

    def test_script_url(self):
        self.assertEqual(
            self.render("{% script_url 'js/app.min.js' %}", self.factory.get("/")),
            "/static/js/app.min.js?v=2.3.0",
        )

    def test_script_url_without_request_in_context(self):
        self.assertEqual(
            self.render("{% script_url 'js/app.min.js' %}"),
            "/static/js/app.min.js?v=2.3.0",
        )

    def test_script_url_with_request_debug_override(self):
        request = self.factory.get("/", {"_debugScripts": "1"})
        self.assertEqual(
            self.render("{% script_url 'js/app.min.js' %}", request),
            "/static/js/app.js?v=2.3.0",
        )

    def test_request_override_zero_does_not_disable_global_debug(self):
        request = self.factory.get("/", {"_debugScripts": "0"})
        with self.settings(ASSET_DEBUG=True):
            rendered = self.render("{% script_url 'js/app.min.js' %}", request)
        self.assertEqual(rendered, "/static/js/app.js?v=2.3.0")

    def test_script_url_with_explicit_version_and_no_debug_version(self):
        request = self.factory.get("/", {"_debugScripts": "1"})
        rendered = self.render(
            "{% script_url 'js/jquery.min.js' version='1.9.1' no_debug_version=True %}",
            request,
        )
        self.assertEqual(rendered, "/static/js/jquery.min.js?v=1.9.1")

    def test_stylesheet_url(self):
        request = self.factory.get("/", {"_debugScripts": "1"})
        self.assertEqual(
            self.render("{% stylesheet_url 'css/site.min.css' %}", request),
            "/static/css/site.css?v=2.3.0",
        )

    def test_script_tag(self):
        self.assertEqual(
            self.render("{% script_tag 'js/app.min.js' %}", self.factory.get("/")),
            '<script src="/static/js/app.min.js?v=2.3.0"></script>',
        )

    def test_stylesheet_tag(self):
        self.assertEqual(
            self.render(
                "{% stylesheet_tag 'css/site.min.css' version='4.0' %}",
                self.factory.get("/"),
            ),
            '<link rel="stylesheet" href="/static/css/site.min.css?v=4.0">',
        )

    def test_tag_escapes_query_separator(self):
        rendered = self.render(
            "{% script_tag 'https://cdn.example.com/lib.min.js?build=7' %}",
            self.factory.get("/"),
        )
        self.assertEqual(
            rendered,
            '<script src="https://cdn.example.com/lib.min.js?build=7&amp;v=2.3.0"></script>',
        )
