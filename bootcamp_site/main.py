import argparse
import logging
import signal
import sys
from typing import List, Optional

import uvicorn

from .api_server import ENDPOINTS, create_app
from .config import SiteConfig
from .logger import configure_logging

logger = logging.getLogger(__name__)

SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def log_startup_banner(config: SiteConfig) -> None:
    logger.info(f"🚀 DevOps Bootcamp server is running on port {config.PORT}")
    logger.info(f"📱 Local: http://localhost:{config.PORT}")
    logger.info(f"🌐 Network: http://{config.HOST}:{config.PORT}")
    logger.info(f"📊 Health check: http://localhost:{config.PORT}/health")
    logger.info("---")
    logger.info("Available endpoints:")
    for method, path, description in ENDPOINTS:
        logger.info(f"  {method:<4} {path:<15} - {description}")
    logger.info("---")


class SiteServer(uvicorn.Server):
    """uvicorn server that announces when it is listening and why it stops."""

    def __init__(self, config: uvicorn.Config, site_config: SiteConfig) -> None:
        super().__init__(config)
        self.site_config = site_config

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        # should_exit is set when binding failed
        if not self.should_exit:
            log_startup_banner(self.site_config)

    def handle_exit(self, sig: int, frame) -> None:
        if not self.should_exit:
            logger.info(f"{signal.Signals(sig).name} received, shutting down gracefully")
        super().handle_exit(sig, frame)


def _exit_cleanly(signum, frame) -> None:
    sys.exit(0)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="DevOps Bootcamp site server")
    parser.add_argument("--host", help="Bind address (default: $HOST or 0.0.0.0)")
    parser.add_argument("--port", type=int, help="Listening port (default: $PORT or 3000)")
    return parser.parse_args(argv)


def build_server(config: SiteConfig) -> SiteServer:
    server_config = uvicorn.Config(
        create_app(config),
        host=config.HOST,
        port=config.PORT,
        log_config=None,
        access_log=False,
    )
    return SiteServer(server_config, config)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    config = SiteConfig()
    if args.host:
        config.HOST = args.host
    if args.port is not None:
        config.PORT = args.port

    configure_logging(config.INSTANCE_ID, config.LOG_LEVEL)

    # uvicorn swaps in its own handlers while serving and re-raises the
    # signal once it has shut down; these make that last step exit with 0
    for sig in SHUTDOWN_SIGNALS:
        signal.signal(sig, _exit_cleanly)

    build_server(config).run()


if __name__ == "__main__":
    main()
