"""
Public routers - No authentication required.
- /api/health - Health check
- /api/config, /api/e-numbers/{code} - Form UI lookups
"""

from .health import router as health_router
from .lookups import router as lookups_router

__all__ = ["health_router", "lookups_router"]
