"""
Logging setup for the service and its uvicorn server.

Application loggers and uvicorn's ``uvicorn``, ``uvicorn.error`` and
``uvicorn.access`` loggers all end up on one console handler, so
request lines and application messages share the format taken from
``Settings.log_format``.  ``run.py`` starts uvicorn with
``log_config=None`` so that uvicorn does not replace this setup.
"""

import logging
from typing import Optional

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "INFO", fmt: Optional[str] = None) -> logging.Handler:
    """Attach the service's console handler to the root logger.

    Calling this more than once reuses the handler installed the first
    time and only updates the level, so repeated ``create_app`` calls do
    not duplicate output.  Unknown level names fall back to ``INFO``.

    Returns the console handler.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = next((h for h in root.handlers if getattr(h, "_valentine", False)), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler._valentine = True
        handler.setFormatter(logging.Formatter(fmt=fmt or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)

    # uvicorn installs its own handlers; send its records to the root one.
    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True

    return handler
