"""External-facing routers outside the /api/auth contract.

Examples: service banner and health check.
"""

from src.presentation.routers.system import system_router

__all__ = ["system_router"]
