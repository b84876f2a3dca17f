"""
Contact comment API routes
"""

import logging
from typing import Any
from fastapi import APIRouter, Body, Depends, HTTPException, Response

from services.comments_service import CommentsService, get_comments_service
from utils.error_handling import raise_for_result
from utils.helpers import parse_record_id

router = APIRouter()
logger = logging.getLogger(__name__)

MISSING_FIELDS = "contenu, contactId et utilisateurId sont requis"
MISSING_CONTENT = "Le contenu est requis"
NOT_FOUND = "Commentaire non trouvé"

def _body(payload: Any) -> dict:
    return payload if isinstance(payload, dict) else {}

@router.post("/create", status_code=201)
async def create_comment(
    payload: Any = Body(None),
    comments_service: CommentsService = Depends(get_comments_service)
):
    """Attach a comment to a contact"""
    payload = _body(payload)
    contenu = payload.get("contenu")
    contact_id = payload.get("contactId")
    user_id = payload.get("utilisateurId")
    if not contenu or not contact_id or not user_id:
        raise HTTPException(status_code=400, detail=MISSING_FIELDS)

    result = await comments_service.create_comment(
        contenu,
        parse_record_id(str(contact_id)),
        parse_record_id(str(user_id))
    )
    raise_for_result(result, server_error="Erreur lors de la création du commentaire")
    return result.data[0]

@router.get("/contact/{contact_id}")
async def list_contact_comments(
    contact_id: str,
    comments_service: CommentsService = Depends(get_comments_service)
):
    """Get a contact's comments, newest first"""
    result = await comments_service.list_for_contact(parse_record_id(contact_id))
    raise_for_result(result, server_error="Erreur lors de la récupération des commentaires")
    return result.data

@router.put("/{comment_id}")
async def update_comment(
    comment_id: str,
    payload: Any = Body(None),
    comments_service: CommentsService = Depends(get_comments_service)
):
    """Replace a comment's text; nothing else about it can change"""
    record_id = parse_record_id(comment_id)
    contenu = _body(payload).get("contenu")
    if not contenu:
        raise HTTPException(status_code=400, detail=MISSING_CONTENT)

    result = await comments_service.update_content(record_id, contenu)
    raise_for_result(result, NOT_FOUND, server_error="Erreur lors de la modification du commentaire")
    return result.data[0]

@router.delete("/{comment_id}", status_code=204)
async def delete_comment(
    comment_id: str,
    comments_service: CommentsService = Depends(get_comments_service)
):
    result = await comments_service.delete(parse_record_id(comment_id))
    raise_for_result(result, NOT_FOUND, server_error="Erreur lors de la suppression du commentaire")
    return Response(status_code=204)
