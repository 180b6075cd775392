"""FastAPI application serving tender data as JSON."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tenderwatch import __version__
from tenderwatch.core.config.models import AppConfig
from tenderwatch.core.portals import EpmsPortal
from . import tenders


def create_app(config: AppConfig | None = None, portal: EpmsPortal | None = None) -> FastAPI:
    """Build the API application.
    
    Args:
        config: Application configuration (default: built-in defaults)
        portal: Portal client (default: one built from config)
        
    Returns:
        Configured FastAPI app
    """
    config = config or AppConfig()
    portal = portal or EpmsPortal(config.portal)
    
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.portal.close()
    
    app = FastAPI(
        title="TenderWatch API",
        description="Public procurement notices from the PPRA portal as JSON",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.portal = portal
    app.state.config = config
    
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.api.cors_origins,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    
    app.include_router(tenders.router)
    
    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "ok"}
    
    return app
