"""
Main entrypoint for the Valentine backend.

This module assembles the FastAPI application: logging, the
cross‑origin policy, the 404 handler, the quote selector and the route
table.  ``create_app`` builds and configures the app, which is then
instantiated at module import time as ``app``, so it can be served
with uvicorn directly::

    uvicorn valentine_api.app.main:app

An invalid cross‑origin configuration raises
``StartupConfigurationError`` from ``create_app``, before any server
gets to bind its listener.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.cors import build_cors_policy
from .core.errors import http_exception_handler
from .core.logging_config import setup_logging
from .services.quote_service import DEFAULT_QUOTE_BANK, Selector

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, selector: Optional[Selector] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use; defaults to the module‑level ``settings``.
    selector : Optional[Selector]
        Quote selector shared by all requests.  Defaults to a selector
        over ``DEFAULT_QUOTE_BANK`` with system randomness.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.

    Raises
    ------
    StartupConfigurationError
        If the cross‑origin policy cannot be built.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_format)

    # Build the policy first so a bad configuration never yields an app.
    cors_policy = build_cors_policy(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.add_middleware(CORSMiddleware, **cors_policy.middleware_kwargs())
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    app.state.selector = selector or Selector(DEFAULT_QUOTE_BANK)
    app.include_router(router)

    logger.info("Created %s %s with %s quotes", settings.project_name, settings.api_version, len(app.state.selector.bank))
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
