"""
Contacts service - prospects and clients of the brokerage
"""

import logging
from typing import Any, Dict
from fastapi import Depends

from database.connection import get_backend
from models.enums import ContactStatus
from services.base_service import BaseService, ServiceResult

logger = logging.getLogger(__name__)

class ContactsService(BaseService):
    """Service for contact operations"""

    def __init__(self, backend):
        super().__init__(backend, "contacts")

    async def list_contacts(self) -> ServiceResult:
        return await self.read(order_by=[{"field": "dateCreation", "dir": "desc"}])

    async def create_contact(self, data: Dict[str, Any]) -> ServiceResult:
        logger.info(f"Creating new contact: {data.get('email')}")
        return await self.create(data)

    async def promote_to_client(self, contact_id: Any) -> ServiceResult:
        """
        Switch a contact from prospect to client

        Contacts that are already clients are left untouched.

        Args:
            contact_id: Primary key of the contact

        Returns:
            ServiceResult with the contact as it now stands
        """
        result = await self.get_by_id(contact_id)
        if not result.success:
            return result

        contact = result.data[0]
        if contact.get("statut") != ContactStatus.PROSPECT.value:
            return result

        logger.info(f"Promoting contact {contact_id} from prospect to client")
        return await self.update(contact_id, {"statut": ContactStatus.CLIENT.value})


def get_contacts_service(backend=Depends(get_backend)) -> ContactsService:
    return ContactsService(backend)
