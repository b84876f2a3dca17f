"""
Client API routes
"""

import logging
from typing import Any
from fastapi import APIRouter, Body, HTTPException, Depends

from services.clients_service import ClientsService, get_clients_service

router = APIRouter()
logger = logging.getLogger(__name__)

MISSING_FIELDS = "Les champs name et email sont requis"
DUPLICATE_EMAIL = "Un client avec cet email existe déjà"

@router.get("/")
async def list_clients(clients_service: ClientsService = Depends(get_clients_service)):
    """Get all clients ordered by creation date, newest first"""
    result = await clients_service.list_clients()

    if not result.success:
        raise HTTPException(status_code=500, detail=result.error)

    return result.data

@router.post("/", status_code=201)
async def create_client(
    payload: Any = Body(None),
    clients_service: ClientsService = Depends(get_clients_service)
):
    """Create a new client; the email must not already be registered"""
    # Only presence is checked, any non-empty value is passed through
    if not isinstance(payload, dict):
        payload = {}
    name = payload.get("name")
    email = payload.get("email")
    if not name or not email:
        raise HTTPException(status_code=400, detail=MISSING_FIELDS)

    existing = await clients_service.find_by_email(email)
    if not existing.success:
        raise HTTPException(status_code=500, detail=existing.error)
    if existing.data:
        logger.info(f"Rejected duplicate client email: {email}")
        raise HTTPException(status_code=409, detail=DUPLICATE_EMAIL)

    result = await clients_service.create_client(name, email)

    if not result.success:
        # Concurrent creation caught by the backend's unique constraint
        if result.error_type == "CONFLICT":
            raise HTTPException(status_code=409, detail=DUPLICATE_EMAIL)
        raise HTTPException(status_code=500, detail=result.error)

    return result.data[0]
