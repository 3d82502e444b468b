import os
from pathlib import Path
from typing import Mapping, Optional

from .exceptions import ConfigError

PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_STATIC_DIR = PACKAGE_DIR / "static"


class SiteConfig:
    """Configuration for the bootcamp site server"""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        env = os.environ if environ is None else environ

        # Network
        self.HOST = env.get("HOST") or "0.0.0.0"
        self.PORT = _parse_port(env.get("PORT") or "3000")

        # Tag added to every log line and the health payload
        self.INSTANCE_ID = env.get("INSTANCE_ID") or "standalone"

        # Static site root
        self.STATIC_DIR = Path(env.get("STATIC_DIR") or DEFAULT_STATIC_DIR).resolve()
        self.INDEX_FILE = "index.html"

        # Simulated processing time for contact submissions (seconds)
        self.CONTACT_DELAY = _parse_delay(env.get("CONTACT_DELAY") or "1.0")

        self.LOG_LEVEL = (env.get("LOG_LEVEL") or "INFO").upper()

    def __repr__(self) -> str:
        return (
            f"SiteConfig(host={self.HOST!r}, port={self.PORT}, "
            f"instance_id={self.INSTANCE_ID!r}, static_dir={str(self.STATIC_DIR)!r})"
        )


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except (TypeError, ValueError):
        raise ConfigError(f"PORT must be an integer, got {raw!r}")
    if not 0 <= port <= 65535:
        raise ConfigError(f"PORT out of range: {port}")
    return port


def _parse_delay(raw: str) -> float:
    try:
        delay = float(raw)
    except (TypeError, ValueError):
        raise ConfigError(f"CONTACT_DELAY must be a number of seconds, got {raw!r}")
    if delay < 0:
        raise ConfigError(f"CONTACT_DELAY cannot be negative: {delay}")
    return delay
