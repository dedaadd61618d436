from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dupscan import __version__
from dupscan.api.routes import router
from dupscan.config.settings import Settings
from dupscan.processor.processor import build_processor


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application with its processor and routes."""
    settings = settings or Settings()

    app = FastAPI(
        title="dupscan",
        description="Finds duplicate text files in an uploaded batch",
        version=__version__,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.processor = build_processor(settings)

    @app.get("/health")
    def health_check() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(router)
    return app
