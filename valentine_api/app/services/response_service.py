"""
Response builders for the two endpoints.

Each call constructs a fresh response model; nothing is cached or
shared between requests.
"""

from valentine_api.app.schemas.health import HealthStatus
from valentine_api.app.schemas.valentine import ValentineMessage
from valentine_api.app.services.quote_service import Selector

SERVICE_NAME = "valentine-backend"
VALENTINE_SENDER = "Your Valentine"


class ResponseService:
    """Build the health and valentine response records."""

    @classmethod
    def build_health(cls) -> HealthStatus:
        """Return the constant liveness record."""
        return HealthStatus(status="ok", service=SERVICE_NAME)

    @classmethod
    def build_valentine(cls, selector: Selector) -> ValentineMessage:
        """Pick a quote with ``selector`` and sign it."""
        return ValentineMessage(message=selector.pick(), from_=VALENTINE_SENDER)
