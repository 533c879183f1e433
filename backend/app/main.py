"""
Supplier Evaluation Engine - HTTP host.

Mounts the comparison and readiness routers under /api. The engine is
stateless, so startup only wires logging and middleware.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api import router
from app.core import EvaluationBaseException, Settings, get_logger, settings

APP_TITLE = "Supplier Evaluation Engine"
APP_VERSION = "0.1.0"

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    config: Settings = app.state.settings
    logger.info(
        f"{APP_TITLE} v{APP_VERSION} arrancando [{config.app_env}] "
        f"(max cohort: {config.max_cohort_size})"
    )
    yield
    logger.info(f"{APP_TITLE} detenido")


async def evaluation_error_handler(request: Request, exc: EvaluationBaseException):
    """Errores del motor que escapan a los routers: 500 con el mensaje propio."""
    logger.error(f"[{request.url.path}] {type(exc).__name__}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": exc.message},
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"[{request.url.path}] Unhandled exception: {type(exc).__name__}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def create_app(config: Settings = settings) -> FastAPI:
    """Construye la aplicación con la configuración dada."""
    application = FastAPI(title=APP_TITLE, version=APP_VERSION, lifespan=lifespan)
    application.state.settings = config

    application.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    application.add_exception_handler(EvaluationBaseException, evaluation_error_handler)
    application.add_exception_handler(Exception, unhandled_error_handler)

    application.include_router(router, prefix="/api", tags=["Supplier Evaluation"])

    @application.get("/health")
    async def health_check():
        return {
            "status": "ok",
            "env": config.app_env,
            "version": APP_VERSION,
            "max_cohort_size": config.max_cohort_size,
        }

    return application


app = create_app()
