"""
Partners service - insurers and wholesale brokers
"""

from fastapi import Depends

from database.connection import get_backend
from services.base_service import BaseService, ServiceResult

class PartnersService(BaseService):
    """Service for partner operations"""

    def __init__(self, backend):
        super().__init__(backend, "partenaires")

    async def list_partners(self) -> ServiceResult:
        return await self.read(order_by=[{"field": "nom", "dir": "asc"}])


def get_partners_service(backend=Depends(get_backend)) -> PartnersService:
    return PartnersService(backend)
