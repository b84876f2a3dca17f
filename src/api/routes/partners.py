"""
Partner API routes
"""

import logging
from typing import Any, Dict
from fastapi import APIRouter, Body, Depends, Response

from services.partners_service import PartnersService, get_partners_service
from utils.error_handling import raise_for_result
from utils.helpers import parse_record_id, to_record
from utils.validation import parse_partner

router = APIRouter()
logger = logging.getLogger(__name__)

NOT_FOUND = "Partenaire non trouvé"

@router.get("/")
async def list_partners(partners_service: PartnersService = Depends(get_partners_service)):
    """Get all partners sorted by name"""
    result = await partners_service.list_partners()
    raise_for_result(result)
    return result.data

@router.get("/{partner_id}")
async def get_partner(
    partner_id: str,
    partners_service: PartnersService = Depends(get_partners_service)
):
    result = await partners_service.get_by_id(parse_record_id(partner_id))
    raise_for_result(result, NOT_FOUND)
    return result.data[0]

@router.post("/", status_code=201)
async def create_partner(
    payload: Dict[str, Any] = Body(...),
    partners_service: PartnersService = Depends(get_partners_service)
):
    partner = parse_partner(payload)

    logger.info(f"Creating partner: {partner.nom}")
    result = await partners_service.create(to_record(partner))
    raise_for_result(result)
    return result.data[0]

@router.put("/{partner_id}")
async def update_partner(
    partner_id: str,
    payload: Dict[str, Any] = Body(...),
    partners_service: PartnersService = Depends(get_partners_service)
):
    record_id = parse_record_id(partner_id)
    partner = parse_partner(payload)

    result = await partners_service.update(record_id, to_record(partner, replace=True))
    raise_for_result(result, NOT_FOUND)
    return result.data[0]

@router.delete("/{partner_id}", status_code=204)
async def delete_partner(
    partner_id: str,
    partners_service: PartnersService = Depends(get_partners_service)
):
    result = await partners_service.delete(parse_record_id(partner_id))
    raise_for_result(result, NOT_FOUND)
    return Response(status_code=204)
