import uvicorn

from wedexpense.api.app import create_app
from wedexpense.config.settings import Settings
from wedexpense.ingestion.orchestrator import build_orchestrator
from wedexpense.logging.logger import Log


def main() -> None:
    """Entry point: load settings -> build dependencies -> serve the API."""
    settings = Settings()
    Log.configure(settings.log_level)

    orchestrator = build_orchestrator(settings)
    app = create_app(orchestrator)
    Log.info(f"Starting receipt intake API on {settings.api_host}:{settings.api_port}")
    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
