"""FastAPI application entrypoint for the problem details service."""

from fastapi import FastAPI

from problem_details.api.handlers import register_problem_handlers
from problem_details.core.config import get_settings
from problem_details.core.logging import configure_logging


def create_app() -> FastAPI:
    """Build the app with logging and problem details handlers configured."""
    settings = get_settings()
    configure_logging(settings)

    app = FastAPI(title=settings.service_name)
    register_problem_handlers(app)

    @app.get("/health")
    def health() -> dict[str, str]:
        """Health check endpoint for service readiness."""
        return {"status": "ok"}

    return app


app = create_app()
