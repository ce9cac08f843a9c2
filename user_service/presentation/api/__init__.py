"""
API Routers - FastAPI endpoint definitions.
"""

from user_service.presentation.api.users import router as users_router
from user_service.presentation.api.metrics import router as metrics_router

__all__ = [
    "users_router",
    "metrics_router",
]
