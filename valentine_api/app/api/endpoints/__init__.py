"""
Endpoint modules.

Each module defines an APIRouter for a single resource.  The routers
are aggregated in ``router.py`` at the package level and then included
in the main application.
"""
