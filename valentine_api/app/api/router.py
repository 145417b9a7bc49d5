"""
Route table.

Only two routes exist, both answering ``GET`` and ``HEAD``:

* ``/health``        -> ``endpoints.health.get_health``
* ``/api/valentine`` -> ``endpoints.valentine.get_valentine``

Anything else is answered with 404 by the handler registered in
``main.create_app``.
"""

from fastapi import APIRouter

from .endpoints import health, valentine

router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(valentine.router, prefix="/api", tags=["valentine"])
