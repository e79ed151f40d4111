"""
FastAPI main application.
"""

from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from loadplanner import __version__

from .routers import aircraft, catalog, planning


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    application = FastAPI(
        title="ULD Load Planner API",
        description="""
        ULD load planning for aircraft cargo decks.

        Assigns ULDs to contiguous deck slots while keeping the load close to a
        target balance arm.

        ## Features

        - **Aircraft**: Deck geometry, balance arms and nose/tail positions
        - **Catalog**: ULD slot widths by identifier prefix
        - **Planning**: Greedy load planning with JSON and text reports
        """,
        version=__version__,
    )

    # CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    application.include_router(
        aircraft.router,
        prefix="/api/v1/aircraft",
        tags=["Aircraft"],
    )
    application.include_router(
        catalog.router,
        prefix="/api/v1/catalog",
        tags=["Catalog"],
    )
    application.include_router(
        planning.router,
        prefix="/api/v1/plans",
        tags=["Planning"],
    )

    @application.get("/", tags=["Health"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "ULD Load Planner API",
            "version": __version__,
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    @application.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "services": {
                "aircraft": "available",
                "catalog": "available",
                "planning": "available",
            },
        }

    return application


# Create default app instance
app = create_app()
