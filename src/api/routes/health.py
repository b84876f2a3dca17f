"""
Health check API route
"""

from datetime import datetime, timezone
from fastapi import APIRouter, HTTPException, Depends

from services.clients_service import ClientsService, get_clients_service

router = APIRouter()

@router.get("/health")
async def health_check(clients_service: ClientsService = Depends(get_clients_service)):
    """Health check - reports unhealthy when the managed backend cannot be queried"""
    result = await clients_service.read(limit=1)

    if not result.success:
        raise HTTPException(status_code=503, detail=f"Health check failed: {result.error}")

    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": "connected"
    }
