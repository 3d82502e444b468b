"""Web server for the DevOps Bootcamp marketing site."""

from .api_server import create_app
from .config import SiteConfig

__all__ = ["create_app", "SiteConfig"]
