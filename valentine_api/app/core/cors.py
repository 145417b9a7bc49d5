"""
Cross‑origin policy.

The policy is built once from ``Settings`` when the application is
created and handed to Starlette's ``CORSMiddleware``.  Any problem with
the configured values raises ``StartupConfigurationError`` so that the
process stops before the listener is bound, instead of serving
responses without cross‑origin headers.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple
from urllib.parse import urlparse

from .config import Settings
from .errors import StartupConfigurationError

logger = logging.getLogger(__name__)

KNOWN_METHODS = {"GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "CONNECT"}


@dataclass(frozen=True)
class CorsPolicy:
    """Validated cross‑origin settings."""

    allow_origins: Tuple[str, ...] = ("*",)
    allow_methods: Tuple[str, ...] = ("*",)
    allow_headers: Tuple[str, ...] = ("*",)
    allow_credentials: bool = False

    def middleware_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for ``CORSMiddleware``."""
        return {
            "allow_origins": list(self.allow_origins),
            "allow_methods": list(self.allow_methods),
            "allow_headers": list(self.allow_headers),
            "allow_credentials": self.allow_credentials,
        }


def _split(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _validate_origin(origin: str) -> str:
    parsed = urlparse(origin)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise StartupConfigurationError(f"Invalid CORS origin: {origin!r}")
    if parsed.path not in ("", "/") or parsed.query or parsed.fragment:
        raise StartupConfigurationError(f"CORS origin must not carry a path: {origin!r}")
    return f"{parsed.scheme}://{parsed.netloc}"


def build_cors_policy(settings: Settings) -> CorsPolicy:
    """Build the process‑wide cross‑origin policy.

    Parameters
    ----------
    settings : Settings
        Application settings; ``cors_allowed_origins`` and
        ``cors_allowed_methods`` are comma‑separated lists where ``*``
        means "any".

    Raises
    ------
    StartupConfigurationError
        If either list is empty, mixes ``*`` with explicit entries,
        names a malformed origin or an unknown HTTP method.
    """
    origins = _split(settings.cors_allowed_origins)
    if not origins:
        raise StartupConfigurationError("CORS_ALLOWED_ORIGINS is empty")
    if "*" in origins:
        if len(origins) > 1:
            raise StartupConfigurationError("CORS_ALLOWED_ORIGINS mixes '*' with explicit origins")
    else:
        origins = [_validate_origin(origin) for origin in origins]

    methods = [method.upper() for method in _split(settings.cors_allowed_methods)]
    if not methods:
        raise StartupConfigurationError("CORS_ALLOWED_METHODS is empty")
    if "*" in methods:
        if len(methods) > 1:
            raise StartupConfigurationError("CORS_ALLOWED_METHODS mixes '*' with explicit methods")
    else:
        unknown = sorted(set(methods) - KNOWN_METHODS)
        if unknown:
            raise StartupConfigurationError(f"Unknown HTTP methods in CORS_ALLOWED_METHODS: {', '.join(unknown)}")

    policy = CorsPolicy(allow_origins=tuple(origins), allow_methods=tuple(methods))
    logger.debug("CORS policy: origins=%s methods=%s", policy.allow_origins, policy.allow_methods)
    return policy
