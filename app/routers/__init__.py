# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoint
# - albums.py: Album listing, search and CRUD endpoints
# - stats.py: Catalog statistics endpoint
#
# Each router is mounted in main.py.
# =============================================================================

from . import health
from . import albums
from . import stats

__all__ = [
    "health",
    "albums",
    "stats",
]
