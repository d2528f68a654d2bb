"""Health Probe — liveness endpoint with store record counts.

Invariants:
    - GET /health always returns 200 if the process is up
"""

from fastapi import APIRouter, status

from app.infrastructure.stores import dish_store, order_store

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe."""
    return {
        "status": "healthy",
        "service": "grubdash-api",
        "version": "1.0.0",
        "records": {"dishes": len(dish_store), "orders": len(order_store)},
    }
