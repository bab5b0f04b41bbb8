from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shelfgraph.api.endpoints import get_endpoints_router
from shelfgraph.config import settings
from shelfgraph.engine import AnalysisEngine


def create_app(*, engine: AnalysisEngine) -> FastAPI:
    """Create FastAPI app."""
    app = FastAPI(title="shelfgraph")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router=get_endpoints_router(engine=engine))

    return app
