"""Entry point for the Valentine backend.

Starts the FastAPI application under uvicorn.  The bind address comes
from the ``HOST`` and ``PORT`` environment variables (defaults
``127.0.0.1`` and ``8000``) and can be overridden on the command line.
Other configuration, such as ``LOG_LEVEL`` and the ``CORS_*``
variables, is read from the environment only.

Usage:
    python run.py [--host HOST] [--port PORT]
"""
import argparse
import asyncio
import logging
import sys

from uvicorn import Config, Server


def parse_args(argv=None) -> argparse.Namespace:
    from valentine_api.app.core.config import settings

    parser = argparse.ArgumentParser(description="Run the Valentine backend")
    parser.add_argument("--host", default=settings.host, help="bind address (default: %(default)s)")
    parser.add_argument("--port", type=int, default=settings.port, help="bind port (default: %(default)s)")
    return parser.parse_args(argv)


async def serve(host: str, port: int) -> None:
    """Build the application and serve it until interrupted."""
    from valentine_api.app.core.config import settings
    from valentine_api.app.main import create_app

    app = create_app(settings)
    # log_config=None keeps the handlers installed by setup_logging.
    config = Config(app=app, host=host, port=port, reload=False, log_level=settings.log_level.lower(), log_config=None)
    server = Server(config)
    await server.serve()


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        asyncio.run(serve(args.host, args.port))
    except KeyboardInterrupt:
        pass
    except Exception:
        # Includes StartupConfigurationError: fail before binding.
        logging.exception("Valentine backend failed to start")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
