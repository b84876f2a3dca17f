"""
Maintenance API routes
"""

import logging
from fastapi import APIRouter, Depends

from services.test_data_service import TestDataService, get_test_data_service

router = APIRouter()
logger = logging.getLogger(__name__)

@router.post("/test-data")
async def insert_test_data(test_data_service: TestDataService = Depends(get_test_data_service)):
    """Reset test clients and reseed them; a failing step aborts the rest (502)"""
    steps = await test_data_service.insert_test_data()
    return {
        "message": "Données de test insérées avec succès",
        "steps": steps
    }
