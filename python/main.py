import argparse
import sys
import os
import logging

import uvicorn

sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from core.api_server import create_app
from core.config import Settings, load_settings
from core.context import ServerContext

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s - %(message)s'

logger = logging.getLogger("MySite.Main")


def setup_logging(level: str):
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="MySite HTTP server")
    parser.add_argument("--host", type=str, required=False, default=None)
    parser.add_argument("--port", type=int, required=False, default=None)
    parser.add_argument("--config", type=str, required=False, default=None, help="path to config.json")
    return parser.parse_args(argv)


def resolve_settings(args) -> Settings:
    settings = load_settings(args.config)
    if args.host:
        settings.host = args.host
    if args.port is not None:
        settings.port = args.port
    return settings


def run_server(settings: Settings) -> int:
    context = ServerContext.from_bind(settings.host, settings.port)
    app = create_app(settings, context=context)

    config = uvicorn.Config(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    server = uvicorn.Server(config)

    logger.info(f"Starting server on {context.server_addr}")
    try:
        server.run()
    except SystemExit as e:
        # uvicorn exits when the listener cannot be bound
        logger.error(f"error listening for server: {context.server_addr} (exit code {e.code})")
        return 1
    except OSError as e:
        logger.error(f"error listening for server: {e}")
        return 1

    if not server.started:
        logger.error(f"error listening for server: {context.server_addr}")
        return 1

    logger.info("server closed")
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)
    settings = resolve_settings(args)
    setup_logging(settings.log_level)
    return run_server(settings)


if __name__ == "__main__":
    sys.exit(main())
