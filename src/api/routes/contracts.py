"""
Contract API routes
"""

import logging
from typing import Any, Dict
from fastapi import APIRouter, Body, Depends, Response

from services.contracts_service import ContractsService, get_contracts_service
from utils.error_handling import raise_for_result
from utils.helpers import parse_record_id, to_record
from utils.validation import parse_contract

router = APIRouter()
logger = logging.getLogger(__name__)

NOT_FOUND = "Contrat non trouvé"

@router.get("/")
async def list_contracts(contracts_service: ContractsService = Depends(get_contracts_service)):
    """Get all contracts, latest start date first"""
    result = await contracts_service.list_contracts()
    raise_for_result(result)
    return result.data

@router.get("/{contract_id}")
async def get_contract(
    contract_id: str,
    contracts_service: ContractsService = Depends(get_contracts_service)
):
    result = await contracts_service.get_by_id(parse_record_id(contract_id))
    raise_for_result(result, NOT_FOUND)
    return result.data[0]

@router.post("/", status_code=201)
async def create_contract(
    payload: Dict[str, Any] = Body(...),
    contracts_service: ContractsService = Depends(get_contracts_service)
):
    """
    Create a contract after schema validation

    A reference is generated server-side and a prospect owner becomes a client.
    """
    contract = parse_contract(payload)

    result = await contracts_service.create_contract(to_record(contract))
    raise_for_result(result)
    return result.data[0]

@router.put("/{contract_id}")
async def update_contract(
    contract_id: str,
    payload: Dict[str, Any] = Body(...),
    contracts_service: ContractsService = Depends(get_contracts_service)
):
    record_id = parse_record_id(contract_id)
    contract = parse_contract(payload)

    result = await contracts_service.update(record_id, to_record(contract, replace=True))
    raise_for_result(result, NOT_FOUND)
    return result.data[0]

@router.delete("/{contract_id}", status_code=204)
async def delete_contract(
    contract_id: str,
    contracts_service: ContractsService = Depends(get_contracts_service)
):
    result = await contracts_service.delete(parse_record_id(contract_id))
    raise_for_result(result, NOT_FOUND)
    return Response(status_code=204)
