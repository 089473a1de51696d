from fastapi import FastAPI

from wedexpense.api.routes import router
from wedexpense.ingestion.orchestrator import IngestionOrchestrator


def create_app(orchestrator: IngestionOrchestrator) -> FastAPI:
    """Build the HTTP application around a ready orchestrator."""
    app = FastAPI(title="WedExpense receipt intake")
    app.state.orchestrator = orchestrator
    app.include_router(router, prefix="/api", tags=["receipts"])
    return app
