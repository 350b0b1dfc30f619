"""
ROUTERS - FastAPI Router Modules

Usage:
    from routers import sync_six_router

    app.include_router(sync_six_router)
"""

from .sync_six import router as sync_six_router

__all__ = [
    'sync_six_router',
]
