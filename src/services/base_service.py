"""
Base service layer for unified data access through the managed backend
"""

import logging
from typing import Dict, Any, List, Optional
from dataclasses import dataclass

from postgrest.exceptions import APIError

logger = logging.getLogger(__name__)

# PostgreSQL error codes surfaced by PostgREST
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"

@dataclass
class ServiceResult:
    """Result from service operation"""
    success: bool
    data: Optional[List[Dict[str, Any]]] = None
    count: int = 0
    error: Optional[str] = None
    error_type: Optional[str] = None

class BaseService:
    """Base service that wraps a backend table for unified data access"""

    def __init__(self, backend, resource_name: str, primary_key: str = "id"):
        self.backend = backend
        self.resource_name = resource_name
        self.primary_key = primary_key

    def _table(self):
        return self.backend.table(self.resource_name)

    def _error_result(self, operation: str, error: Exception) -> ServiceResult:
        """Map a backend failure to a ServiceResult carrying the backend message"""
        if isinstance(error, APIError):
            message = error.message or str(error)
            if error.code == UNIQUE_VIOLATION:
                error_type = "CONFLICT"
            elif error.code == FOREIGN_KEY_VIOLATION:
                error_type = "FOREIGN_KEY_ERROR"
            else:
                error_type = "DATABASE_ERROR"
        else:
            message = str(error)
            error_type = "EXECUTION_ERROR"

        logger.error(f"{operation} operation failed for {self.resource_name}: {message}")
        return ServiceResult(
            success=False,
            error=message,
            error_type=error_type
        )

    async def create(self, data: Dict[str, Any]) -> ServiceResult:
        """
        Insert a new record

        Args:
            data: Dictionary of field values to insert

        Returns:
            ServiceResult with the inserted record(s)
        """
        try:
            response = await self._table().insert(data).execute()
            return ServiceResult(
                success=True,
                data=response.data,
                count=len(response.data or [])
            )
        except Exception as e:
            return self._error_result("Create", e)

    async def read(
        self,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[List[Dict[str, str]]] = None,
        limit: Optional[int] = None
    ) -> ServiceResult:
        """
        Read records

        Args:
            filters: Equality filters {field_name: value}
            order_by: List of ordering specs [{"field": "createdAt", "dir": "desc"}]
            limit: Maximum number of records to return (default: no limit)

        Returns:
            ServiceResult with matched records
        """
        try:
            query = self._table().select("*")
            for field_name, value in (filters or {}).items():
                query = query.eq(field_name, value)
            for order_spec in order_by or []:
                query = query.order(order_spec["field"], desc=order_spec.get("dir", "asc") == "desc")
            if limit is not None:
                query = query.limit(limit)

            response = await query.execute()
            return ServiceResult(
                success=True,
                data=response.data,
                count=len(response.data or [])
            )
        except Exception as e:
            return self._error_result("Read", e)

    async def get_by_id(self, record_id: Any) -> ServiceResult:
        """Get a single record by primary key; RESOURCE_NOT_FOUND when absent"""
        result = await self.read(filters={self.primary_key: record_id}, limit=1)
        if result.success and not result.data:
            return ServiceResult(
                success=False,
                error=f"{self.resource_name} record not found: {record_id}",
                error_type="RESOURCE_NOT_FOUND"
            )
        return result

    async def get_by_field(self, field_name: str, value: Any, limit: Optional[int] = None) -> ServiceResult:
        return await self.read(filters={field_name: value}, limit=limit)

    async def update(self, record_id: Any, data: Dict[str, Any]) -> ServiceResult:
        """
        Update a record by primary key

        Args:
            record_id: Primary key value of record to update
            data: Dictionary of field values to update

        Returns:
            ServiceResult with updated record data
        """
        try:
            response = await self._table().update(data).eq(self.primary_key, record_id).execute()
        except Exception as e:
            return self._error_result("Update", e)

        if not response.data:
            return ServiceResult(
                success=False,
                error=f"{self.resource_name} record not found: {record_id}",
                error_type="RESOURCE_NOT_FOUND"
            )
        return ServiceResult(success=True, data=response.data, count=len(response.data))

    async def delete(self, record_id: Any) -> ServiceResult:
        """Delete a record by primary key; RESOURCE_NOT_FOUND when nothing was deleted"""
        try:
            response = await self._table().delete().eq(self.primary_key, record_id).execute()
        except Exception as e:
            return self._error_result("Delete", e)

        if not response.data:
            return ServiceResult(
                success=False,
                error=f"{self.resource_name} record not found: {record_id}",
                error_type="RESOURCE_NOT_FOUND"
            )
        return ServiceResult(success=True, data=response.data, count=len(response.data))
