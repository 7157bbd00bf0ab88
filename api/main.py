"""
FastAPI application principal.

Expone endpoints REST para:
- Health check
- Consulta de un proyecto por CUI
- Consulta batch de varios CUIs (procesados en secuencia)
"""

import json
import logging
from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api import __version__
from api.config import settings
from api.models import (
    BatchRequest, ErrorResponse, HealthResponse, ProjectErrorResponse, RootResponse
)
from scraper.exceptions import ScraperError, ValidationError
from scraper.fetcher import MEFFetcher
from scraper.models import BatchResult, ProjectRecord
from scraper.orchestrator import ProjectOrchestrator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"🚀 API ejecutándose en el puerto {settings.port} ({settings.environment})")
    yield
    logger.info("🔒 API detenida")


# Inicializar FastAPI
app = FastAPI(
    title="API Proyectos MEF",
    description="API REST para extraer datos financieros de proyectos de inversión desde el SSI del MEF",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Habilitar CORS para que Excel / Sheets puedan acceder
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"]
)


# Dependency: orquestador configurado desde settings
def get_orchestrator() -> ProjectOrchestrator:
    fetcher = MEFFetcher(
        base_url=settings.mef_base_url,
        timeout=settings.request_timeout_seconds,
        user_agent=settings.user_agent
    )
    return ProjectOrchestrator(fetcher=fetcher)


def parse_batch_request(payload: Any) -> BatchRequest:
    """
    Valida el body de /api/projects.

    Raises:
        ValidationError: Si `cuis` falta o no es una lista
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("cuis"), list):
        raise ValidationError("Se requiere un array de CUIs")

    anio = payload.get("anio")
    if anio is not None and (isinstance(anio, bool) or not isinstance(anio, int)):
        raise ValidationError("El campo anio debe ser un número entero")

    return BatchRequest(cuis=[str(cui) for cui in payload["cuis"]], anio=anio)


# Root endpoint
@app.get("/", response_model=RootResponse, tags=["Health"])
async def root():
    """Descripción de la API y sus endpoints."""
    return RootResponse(
        status="ok",
        message="API para extraer datos de proyectos del MEF",
        endpoints={
            "/api/project/:cui": "Obtiene datos de un proyecto específico por CUI",
            "/api/projects": "Obtiene datos de múltiples proyectos (POST con array de CUIs)"
        }
    )


# Healthcheck endpoint
@app.get(
    "/healthz",
    response_model=HealthResponse,
    tags=["Health"],
    summary="Health check"
)
async def health_check():
    """Verifica que la API está funcionando."""
    return HealthResponse(status="healthy", version=__version__)


# ====================================================================
# ENDPOINTS PRINCIPALES
# ====================================================================

@app.get(
    "/api/project/{cui}",
    response_model=ProjectRecord,
    responses={500: {"model": ProjectErrorResponse}},
    tags=["Proyectos"],
    summary="Datos de un proyecto",
    description="Descarga la ficha SSI del CUI y devuelve los montos del año en curso."
)
async def get_project(
    cui: str,
    anio: Optional[int] = None,
    orchestrator: ProjectOrchestrator = Depends(get_orchestrator)
):
    """
    Obtiene los datos financieros de un proyecto.

    Un CUI inexistente también responde 500 (no 404), igual que cualquier
    otro error del pipeline.
    """
    try:
        return await orchestrator.fetch_project(cui, year=anio)
    except ScraperError as e:
        logger.error(f"❌ Error al obtener datos del CUI {cui}: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ProjectErrorResponse(
                error="Error al obtener datos del proyecto",
                message=str(e),
                cui=cui
            ).model_dump()
        )


@app.post(
    "/api/projects",
    response_model=BatchResult,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    tags=["Proyectos"],
    summary="Datos de varios proyectos",
    description="Consulta los CUIs uno a uno, en orden. Los fallos por CUI se reportan en `errors`.",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": BatchRequest.model_json_schema()}}
        }
    }
)
async def get_projects(
    request: Request,
    orchestrator: ProjectOrchestrator = Depends(get_orchestrator)
):
    """
    Procesa una lista de CUIs en secuencia.

    Returns:
        BatchResult con resultados, errores y contadores
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        payload = None

    batch_request = parse_batch_request(payload)
    return await orchestrator.fetch_projects(batch_request.cuis, year=batch_request.anio)


# Exception handlers
@app.exception_handler(ValidationError)
async def validation_exception_handler(request, exc: ValidationError):
    """Handler para bodies inválidos."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": str(exc)}
    )


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request, exc: RequestValidationError):
    """Handler para parámetros inválidos (ej: anio no numérico)."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(
            error="Parámetros inválidos",
            message="; ".join(error["msg"] for error in exc.errors())
        ).model_dump()
    )


@app.exception_handler(Exception)
async def general_exception_handler(request, exc: Exception):
    """Handler para excepciones no controladas."""
    logger.exception(f"❌ Error no controlado en {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Error en el procesamiento de proyectos", "message": str(exc)}
    )


def run_server(host: str = None, port: int = None) -> None:
    """Levanta la API con uvicorn usando settings."""
    import uvicorn

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )
    uvicorn.run(app, host=host or settings.host, port=port or settings.port)


if __name__ == "__main__":
    run_server()
