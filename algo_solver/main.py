from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from algo_solver import __version__
from algo_solver.config import Settings, get_settings
from algo_solver.logger import setup_logger
from algo_solver.models import HealthResponse, SolveRequest, SolveResponse
from algo_solver.solver import SolveService, internal_error
from algo_solver.utils.exceptions import AlgoSolverError
from algo_solver.utils.http import build_http_client

logger = setup_logger(__name__)


def _envelope(response: SolveResponse) -> JSONResponse:
    # Logical failures are reported in the body; the transport status stays 200.
    return JSONResponse(status_code=200, content=response.model_dump())


def _describe_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())[1:])
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts)


def create_app(
    settings: Optional[Settings] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Service settings (defaults to the environment)
        http_client: Outbound client to share between upstream calls
            (defaults to one built from settings)
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifecycle manager: startup and shutdown."""
        logger.info("🚀 Starting AlgoSolver API")
        logger.info(
            f"   Config: platform={settings.supported_platform}, "
            f"model={settings.gemini_model}, gemini_key_set={settings.gemini_configured}"
        )
        if not settings.gemini_configured:
            logger.warning("⚠️ GEMINI_API_KEY is not set; every solve request will fail")

        client = http_client or build_http_client(settings)
        app.state.solve_service = SolveService(settings, client)
        yield
        logger.info("🛑 Shutting down service")
        await client.aclose()

    app = FastAPI(title="AlgoSolver API", version=__version__, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.post("/api/solve", response_model=SolveResponse)
    async def solve_problem(body: SolveRequest, request: Request) -> SolveResponse:
        """
        Generate solution code for a LeetCode problem.

        Args:
            body: SolveRequest containing platform, slug and language

        Returns:
            SolveResponse with `code` on success, `error` otherwise
        """
        service: SolveService = request.app.state.solve_service
        return await service.solve(body)

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        """Health check endpoint."""
        return HealthResponse(
            status="healthy",
            platform=settings.supported_platform,
            llm_model=settings.gemini_model,
            llm_configured=settings.gemini_configured,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Report malformed request bodies in the usual response envelope."""
        detail = _describe_validation_error(exc)
        logger.warning(f"⚠️ Invalid request body: {detail}")
        return _envelope(SolveResponse.failure(f"Invalid request: {detail}"))

    @app.exception_handler(AlgoSolverError)
    async def solver_exception_handler(request: Request, exc: AlgoSolverError):
        """Handle custom application exceptions."""
        logger.error(f"🔥 Application Error: {exc}")
        return _envelope(internal_error(str(exc)))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.error(f"🔥 Unexpected Error: {exc}", exc_info=True)
        return _envelope(internal_error(str(exc)))

    return app


app = create_app()
