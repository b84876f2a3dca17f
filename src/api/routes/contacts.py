"""
Contact API routes
"""

import logging
from typing import Any, Dict
from fastapi import APIRouter, Body, Depends, Response

from services.contacts_service import ContactsService, get_contacts_service
from utils.error_handling import raise_for_result
from utils.helpers import parse_record_id, to_record
from utils.validation import parse_contact

router = APIRouter()
logger = logging.getLogger(__name__)

NOT_FOUND = "Contact non trouvé"

@router.get("/")
async def list_contacts(contacts_service: ContactsService = Depends(get_contacts_service)):
    """Get all contacts, most recently created first"""
    result = await contacts_service.list_contacts()
    raise_for_result(result)
    return result.data

@router.get("/{contact_id}")
async def get_contact(
    contact_id: str,
    contacts_service: ContactsService = Depends(get_contacts_service)
):
    result = await contacts_service.get_by_id(parse_record_id(contact_id))
    raise_for_result(result, NOT_FOUND)
    return result.data[0]

@router.post("/", status_code=201)
async def create_contact(
    payload: Dict[str, Any] = Body(...),
    contacts_service: ContactsService = Depends(get_contacts_service)
):
    """Create a contact after schema validation"""
    contact = parse_contact(payload)

    result = await contacts_service.create_contact(to_record(contact))
    raise_for_result(result)
    return result.data[0]

@router.put("/{contact_id}")
async def update_contact(
    contact_id: str,
    payload: Dict[str, Any] = Body(...),
    contacts_service: ContactsService = Depends(get_contacts_service)
):
    """Replace a contact's fields after schema validation"""
    record_id = parse_record_id(contact_id)
    contact = parse_contact(payload)

    result = await contacts_service.update(record_id, to_record(contact, replace=True))
    raise_for_result(result, NOT_FOUND)
    return result.data[0]

@router.delete("/{contact_id}", status_code=204)
async def delete_contact(
    contact_id: str,
    contacts_service: ContactsService = Depends(get_contacts_service)
):
    result = await contacts_service.delete(parse_record_id(contact_id))
    raise_for_result(result, NOT_FOUND)
    return Response(status_code=204)
