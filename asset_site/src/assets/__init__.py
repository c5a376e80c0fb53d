"""Versioned, debug-switchable URLs for static scripts and stylesheets."""
