"""
Clients service - business logic for the brokerage client list
"""

import logging
from fastapi import Depends

from database.connection import get_backend
from services.base_service import BaseService, ServiceResult

logger = logging.getLogger(__name__)

class ClientsService(BaseService):
    """Service for client operations"""

    def __init__(self, backend):
        super().__init__(backend, "client")

    async def list_clients(self) -> ServiceResult:
        """Get all clients, newest first"""
        return await self.read(order_by=[{"field": "createdAt", "dir": "desc"}])

    async def find_by_email(self, email: str) -> ServiceResult:
        """
        Look up a client by email address

        Returns:
            ServiceResult whose data holds at most one record
        """
        return await self.get_by_field("email", email, limit=1)

    async def create_client(self, name: str, email: str) -> ServiceResult:
        """
        Insert a new client

        A unique-violation from the backend comes back with error_type CONFLICT.
        """
        logger.info(f"Creating new client: {email}")
        return await self.create({"name": name, "email": email})


def get_clients_service(backend=Depends(get_backend)) -> ClientsService:
    """FastAPI dependency building the service around the injected backend"""
    return ClientsService(backend)
