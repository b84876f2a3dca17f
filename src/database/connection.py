"""
Managed backend (Supabase) client lifecycle and request-scoped access
"""

import logging
from fastapi import Request
from supabase import AsyncClient, acreate_client

from config.settings import require_supabase_settings

logger = logging.getLogger(__name__)


async def init_backend() -> AsyncClient:
    """Create the Supabase client from environment configuration"""
    url, key = require_supabase_settings()
    backend = await acreate_client(url, key)

    # Test connection
    await backend.table("client").select("id").limit(1).execute()

    logger.info("Supabase backend initialized successfully")
    return backend


async def close_backend(backend: AsyncClient):
    """Release the HTTP session held by the backend client"""
    if backend is not None:
        await backend.postgrest.aclose()
    logger.info("Supabase backend connections closed")


def get_backend(request: Request):
    """FastAPI dependency returning the backend client owned by the application"""
    return request.app.state.backend
