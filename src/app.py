"""
Brokerage CRM Backend API Server
Core functionality: Clients, Contacts, Contracts, Partners over a managed Supabase backend
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import ALLOWED_ORIGINS
from database.connection import init_backend, close_backend
from api.routes import health, clients, contacts, contracts, partners, comments, maintenance
from utils.error_handling import setup_error_handling

logger = logging.getLogger(__name__)

def create_app(backend=None) -> FastAPI:
    """
    Build the FastAPI application

    Args:
        backend: Supabase client (or a test double). When omitted, the lifespan
            creates one from the environment and closes it on shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager"""
        owns_backend = getattr(app.state, "backend", None) is None
        if owns_backend:
            app.state.backend = await init_backend()
        yield
        if owns_backend:
            await close_backend(app.state.backend)
            app.state.backend = None

    app = FastAPI(
        title="Courtage CRM Backend",
        description="Backend API for clients, contacts, contracts and partners of an insurance brokerage",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.backend = backend

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # Setup centralized error handling
    setup_error_handling(app)

    # Include API routes
    app.include_router(health.router, tags=["Health"])
    app.include_router(clients.router, prefix="/api/clients", tags=["Clients"])
    app.include_router(contacts.router, prefix="/api/contacts", tags=["Contacts"])
    app.include_router(contracts.router, prefix="/api/contrats", tags=["Contracts"])
    app.include_router(partners.router, prefix="/api/partenaires", tags=["Partners"])
    app.include_router(comments.router, prefix="/api/commentaires", tags=["Comments"])
    app.include_router(maintenance.router, prefix="/api/maintenance", tags=["Maintenance"])

    return app

# FastAPI app instance is exported for use by uvicorn
# Server startup is handled by main.py at the project root
app = create_app()
