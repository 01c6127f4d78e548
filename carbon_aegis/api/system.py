"""
Service info and health endpoints.
"""
from fastapi import APIRouter, Request

router = APIRouter(tags=["System"])


@router.get("/")
async def root(request: Request):
    """Root endpoint."""
    return {
        "message": request.app.title,
        "version": request.app.version,
        "docs": "/docs",
        "redoc": "/redoc",
    }


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "carbon-aegis"}
