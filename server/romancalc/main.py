from fastapi import FastAPI

from romancalc.api.routes import calculator
from romancalc.core.config import get_settings
from romancalc.core.exceptions import register_exception_handlers
from romancalc.core.logging import configure_logging
from romancalc.core.middleware import CorrelationIdMiddleware


def create_app() -> FastAPI:
    """
    Application factory exposing the Roman/Arabic calculator over HTTP.
    """

    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.api_title,
        description="Binary arithmetic on Arabic (1-10) or Roman (I-X) operands.",
        version=settings.api_version,
    )

    register_exception_handlers(app)
    app.add_middleware(CorrelationIdMiddleware)

    app.include_router(calculator.router)

    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
