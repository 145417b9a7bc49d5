"""
Valentine endpoint.

Returns a randomly chosen love quote signed by "Your Valentine".  The
``Selector`` lives on ``app.state`` (set up by ``create_app``) and is
handed to the handler through a dependency, so an application can be
built with a deterministic selector for testing.
"""

from fastapi import APIRouter, Depends, Request

from valentine_api.app.schemas.valentine import ValentineMessage
from valentine_api.app.services.quote_service import Selector
from valentine_api.app.services.response_service import ResponseService

router = APIRouter()


def get_selector(request: Request) -> Selector:
    """Return the application's selector."""
    return request.app.state.selector


@router.api_route("/valentine", methods=["GET", "HEAD"], response_model=ValentineMessage)
async def get_valentine(selector: Selector = Depends(get_selector)) -> ValentineMessage:
    """Return a random love quote."""
    return ResponseService.build_valentine(selector)
