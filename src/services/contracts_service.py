"""
Contracts service - insurance contracts placed with partners
"""

import logging
import random
from datetime import datetime
from typing import Any, Dict, Optional
from fastapi import Depends

from database.connection import get_backend
from services.base_service import BaseService, ServiceResult
from services.contacts_service import ContactsService

logger = logging.getLogger(__name__)


def generate_reference(now: Optional[datetime] = None) -> str:
    """Build a contract reference such as ``CONT-2024_03_0421``"""
    now = now or datetime.now()
    return f"CONT-{now.year}_{now.month:02d}_{random.randint(0, 9999):04d}"


class ContractsService(BaseService):
    """Service for contract operations"""

    def __init__(self, backend):
        super().__init__(backend, "contrats")
        self.contacts = ContactsService(backend)

    async def list_contracts(self) -> ServiceResult:
        return await self.read(order_by=[{"field": "dateDebut", "dir": "desc"}])

    async def create_contract(self, data: Dict[str, Any]) -> ServiceResult:
        """
        Insert a contract and promote its owner from prospect to client

        The promotion is a separate backend call made after the insert. Its
        failure is logged but does not undo or fail the contract creation.

        Args:
            data: Validated contract fields

        Returns:
            ServiceResult with the inserted contract
        """
        record = dict(data)
        record["reference"] = generate_reference()

        logger.info(f"Creating contract {record['reference']} for contact {record.get('clientId')}")
        result = await self.create(record)
        if not result.success:
            return result

        promotion = await self.contacts.promote_to_client(record["clientId"])
        if not promotion.success and promotion.error_type != "RESOURCE_NOT_FOUND":
            logger.warning(f"Contract {record['reference']} created but owner promotion failed: {promotion.error}")

        return result


def get_contracts_service(backend=Depends(get_backend)) -> ContractsService:
    return ContractsService(backend)
