"""Unified entry point for the cart, order and product services.

Each invocation serves exactly one service, because all of them listen
on port 3000 by default and are meant to run as separate processes
(for example, one container each).

Configuration such as ``HOST``, ``PORT`` and ``LOG_LEVEL`` is read
from the environment by ``shop_services.app.core.config``; ``--host``
and ``--port`` override it.

Usage:
    python run.py cart
    PORT=3001 python run.py order
    python run.py product --port 3002
"""
import argparse
import asyncio
import logging
from typing import List, Optional

from uvicorn import Config, Server

from shop_services.app.core.config import settings
from shop_services.app.core.logging_config import current_service
from shop_services.app.main import APP_FACTORIES

logger = logging.getLogger("shop_services.run")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run one of the shop services.")
    parser.add_argument("service", choices=sorted(APP_FACTORIES), help="Service to run")
    parser.add_argument("--host", default=settings.host, help="Interface to bind (default: %(default)s)")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to listen on (default: %(default)s)")
    return parser.parse_args(argv)


class ShopServer(Server):
    """Uvicorn server that announces the service once its socket is bound.

    Lifespan startup handlers run before uvicorn binds, so the
    announcement is made after ``Server.startup`` instead.
    """

    def __init__(self, config: Config, service: str) -> None:
        super().__init__(config)
        self.service = service

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        if self.started and not self.should_exit:
            logger.info("%s service running on port %s", self.service.capitalize(), self.config.port)


def build_server(service: str, host: str, port: int) -> ShopServer:
    """Create a Uvicorn server for ``service`` without starting it."""
    app = APP_FACTORIES[service]()
    config = Config(app=app, host=host, port=port, reload=False, log_level=settings.log_level.lower())
    return ShopServer(config, service)


async def serve(service: str, host: str, port: int) -> None:
    current_service.set(service)
    server = build_server(service, host, port)
    await server.serve()


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    try:
        asyncio.run(serve(args.service, args.host, args.port))
    except (KeyboardInterrupt, SystemExit):
        pass


if __name__ == "__main__":
    main()
