"""Minimal Flask site: templated homepage, two text routes, static files and a 404 fallback."""
from hello_web.app import create_app

__all__ = ["create_app"]
