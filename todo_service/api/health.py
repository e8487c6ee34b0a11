# todo_service/api/health.py
"""
Health check endpoint.
"""
from fastapi import APIRouter, Depends, Request

from todo_service.api.deps import get_store
from todo_service.db.store import TodoStore

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health(request: Request, store: TodoStore = Depends(get_store)):
    """API health check. Reports the database state without failing."""
    return {
        "status": "healthy",
        "version": request.app.state.settings.VERSION,
        "database": "connected" if store.is_connected else "disconnected",
    }
