"""
API package.

``router.py`` holds the route table; each module in ``endpoints``
defines an ``APIRouter`` for one resource.
"""
