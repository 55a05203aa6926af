from fastapi import APIRouter

from .checkpoint import router as checkpoint_router
from .embedding import router as embedding_router

router = APIRouter(prefix="/v1")
router.include_router(checkpoint_router)
router.include_router(embedding_router)


@router.get(
    "/health",
    summary="API Health Check",
    description="Simple health check endpoint for monitoring and container orchestration.",
    responses={
        200: {"description": "API is healthy and responding"},
    },
)
async def health_check():
    """Health check endpoint for Docker health checks."""
    return {"status": "healthy", "message": "Code Checkpoint API is running"}
