"""
Test data maintenance - reset and reseed the backend through its remote functions
"""

import logging
from typing import Dict, List, Optional
import httpx

from config.settings import TEST_DATA_FUNCTIONS, require_supabase_settings

logger = logging.getLogger(__name__)

# Message used when a failing function gives no error of its own
FALLBACK_ERRORS: Dict[str, str] = {
    "delete-clients": "Erreur lors de la suppression des données",
    "seed-data": "Erreur lors de l'insertion des données",
    "historical-contracts": "Erreur lors de l'ajout de l'historique des contrats",
}


class TestDataError(Exception):
    """A remote maintenance function failed"""

    def __init__(self, function_name: str, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.function_name = function_name
        self.message = message
        self.status_code = status_code


class TestDataService:
    """Runs the delete, seed and history functions in strict sequence"""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        functions: Optional[List[str]] = None,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.functions = functions or list(TEST_DATA_FUNCTIONS)
        self._http_client = http_client

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json"
        }

    async def _invoke(self, client: httpx.AsyncClient, function_name: str) -> None:
        url = f"{self.base_url}/functions/v1/{function_name}"
        logger.info(f"Invoking remote function {function_name}")

        try:
            response = await client.post(url, headers=self._headers())
        except httpx.HTTPError as e:
            raise TestDataError(function_name, f"{FALLBACK_ERRORS.get(function_name, function_name)}: {e}") from e

        if response.is_success:
            return

        try:
            message = response.json().get("error")
        except (ValueError, AttributeError):
            message = None

        raise TestDataError(
            function_name,
            message or FALLBACK_ERRORS.get(function_name, f"Erreur lors de l'appel de {function_name}"),
            status_code=response.status_code
        )

    async def _run(self, client: httpx.AsyncClient) -> List[str]:
        completed = []
        for function_name in self.functions:
            await self._invoke(client, function_name)
            completed.append(function_name)
        logger.info(f"Test data inserted: {', '.join(completed)}")
        return completed

    async def insert_test_data(self) -> List[str]:
        """
        Delete existing test clients, seed fresh data, then append contract history

        Returns:
            Names of the functions that ran, in order

        Raises:
            TestDataError: on the first failing function; later ones are not called
        """
        if self._http_client is not None:
            return await self._run(self._http_client)
        async with httpx.AsyncClient(timeout=60.0) as client:
            return await self._run(client)


def get_test_data_service() -> TestDataService:
    url, key = require_supabase_settings()
    return TestDataService(url, key)
