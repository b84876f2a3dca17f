"""
Comments service - notes left on a contact by brokerage users
"""

import logging
from datetime import datetime, timezone
from fastapi import Depends

from database.connection import get_backend
from services.base_service import BaseService, ServiceResult

logger = logging.getLogger(__name__)

class CommentsService(BaseService):
    """Service for contact comment operations"""

    def __init__(self, backend):
        super().__init__(backend, "commentaires")

    async def list_for_contact(self, contact_id: int) -> ServiceResult:
        """Get the comments of one contact, newest first"""
        return await self.read(
            filters={"contactId": contact_id},
            order_by=[{"field": "date", "dir": "desc"}]
        )

    async def create_comment(self, contenu: str, contact_id: int, user_id: int) -> ServiceResult:
        logger.info(f"Adding comment to contact {contact_id} by user {user_id}")
        return await self.create({
            "contenu": contenu,
            "contactId": contact_id,
            "utilisateurId": user_id,
            "date": datetime.now(timezone.utc).isoformat()
        })

    async def update_content(self, comment_id: int, contenu: str) -> ServiceResult:
        return await self.update(comment_id, {"contenu": contenu})


def get_comments_service(backend=Depends(get_backend)) -> CommentsService:
    return CommentsService(backend)
