"""FastAPI application entry point."""

import argparse
import logging
import sys
from contextlib import asynccontextmanager
from typing import Any

import uvicorn
from fastapi import FastAPI

from github_relay import __version__
from github_relay.config import Settings, get_settings
from github_relay.events import EventRouter
from github_relay.notifications import ChatSender, build_sender
from github_relay.webhook import router as webhook_router

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    """Configure structured logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    settings: Settings = app.state.settings
    event_router: EventRouter = app.state.event_router
    setup_logging(settings.log_level)
    logger.info(
        f"GitHub relay starting up, relaying {', '.join(event_router.event_types)} events "
        f"to channel '{settings.chat_channel}' via {settings.chat_backend}"
    )
    yield
    logger.info("GitHub relay shutting down")


def create_app(settings: Settings | None = None, sender: ChatSender | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use, defaults to the environment
        sender: Chat sender, defaults to the backend named in settings
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="GitHub Chat Relay",
        description="Relays GitHub webhook events to a chat team",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.event_router = EventRouter(sender or build_sender(settings))

    app.include_router(webhook_router, tags=["webhook"])

    @app.get("/health")
    async def health_check() -> dict[str, Any]:
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app


def cli() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Relay GitHub webhook events to a chat team")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Start the webhook server")
    serve_parser.add_argument("--host", default=None, help="Host to bind to")
    serve_parser.add_argument("--port", type=int, default=None, help="Port to bind to")
    serve_parser.add_argument("--channel", default=None, help="Channel to send messages to")
    serve_parser.add_argument("--keybase", default=None, help="keybase command")

    args = parser.parse_args()

    if args.command == "serve":
        overrides = {
            "host": args.host,
            "port": args.port,
            "chat_channel": args.channel,
            "keybase_command": args.keybase,
        }
        settings = Settings(**{key: value for key, value in overrides.items() if value is not None})
        setup_logging(settings.log_level)
        uvicorn.run(create_app(settings), host=settings.host, port=settings.port)
    else:
        parser.print_help()


if __name__ == "__main__":
    cli()
