"""
Error types and handlers.

Only two things can go wrong in this service: the cross‑origin policy
cannot be built at startup (fatal), or a request does not match the
route table (answered with 404).
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


class StartupConfigurationError(RuntimeError):
    """Raised when the application cannot be configured at startup."""


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors, folding 405 into 404.

    The route table only holds terminal ``GET``/``HEAD`` routes, so a
    known path requested with another method is treated the same as an
    unknown path.
    """
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": "Not Found"})
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=getattr(exc, "headers", None),
    )
