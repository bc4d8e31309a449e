"""External-facing routers (non-versioned API endpoints).

Routes outside the versioned API contract, such as health checks.
"""

from src.presentation.routers.system import system_router

__all__ = ["system_router"]
