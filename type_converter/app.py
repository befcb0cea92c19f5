import logging
from datetime import datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .controller.hello import router as hello_router
from .core.config import Config
from .core.errors import ConversionError, MissingParameterError
from .core.middleware import (
    conversion_exception_handler,
    global_exception_handler,
    log_requests,
    missing_parameter_handler,
)
from .web_config import build_conversion_service

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Build the FastAPI application.

    - Registers the converters on ``app.state.conversion_service``
    - Installs CORS and request logging middleware
    - Maps conversion failures to 400 and anything else to 500
    """
    app = FastAPI(title="Type Converter API")

    app.state.conversion_service = build_conversion_service()
    logger.info(f"Registered converters: {', '.join(app.state.conversion_service.pairs())}")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.allowed_origins(),
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def _log_requests(request, call_next):
        return await log_requests(request, call_next)

    app.add_exception_handler(ConversionError, conversion_exception_handler)
    app.add_exception_handler(MissingParameterError, missing_parameter_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    app.include_router(hello_router)

    @app.get("/health")
    async def health_check():
        """Basic health check listing the registered conversions."""
        return {
            "status": "healthy",
            "service": "type-converter-api",
            "environment": Config.ENVIRONMENT,
            "converters": app.state.conversion_service.pairs(),
            "timestamp": datetime.now().isoformat(),
        }

    return app

