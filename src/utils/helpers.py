"""
Utility functions and helpers
"""

import logging
from typing import Any, Dict
from fastapi import HTTPException
from pydantic import BaseModel

logger = logging.getLogger(__name__)

def parse_record_id(raw_id: str) -> int:
    """Parse an integer path ID, rejecting anything else with HTTP 400"""
    try:
        return int(raw_id, 10)
    except (TypeError, ValueError):
        logger.info(f"Rejected non-integer record ID: {raw_id!r}")
        raise HTTPException(status_code=400, detail="ID invalide")

def to_record(model: BaseModel, replace: bool = False) -> Dict[str, Any]:
    """
    Dump a validated payload to the JSON-ready dict sent to the backend

    With ``replace`` every field is written, omitted optional ones as null,
    so an update clears columns the new payload no longer carries.
    """
    return model.model_dump(mode="json", exclude_unset=not replace)
