"""
Modelos de datos (DTOs) para la API REST.
Define request/response schemas usando Pydantic.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class RootResponse(BaseModel):
    """Response del endpoint raíz."""

    status: str = Field(..., description="Estado del servicio")
    message: str = Field(..., description="Descripción de la API")
    endpoints: Dict[str, str] = Field(..., description="Endpoints disponibles")


class HealthResponse(BaseModel):
    """Response del endpoint /healthz."""

    status: str = Field(..., description="Estado del servicio")
    version: str = Field(..., description="Versión de la API")

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "status": "healthy",
            "version": "1.0.0"
        }
    })


class BatchRequest(BaseModel):
    """Request body para /api/projects."""

    cuis: List[str] = Field(..., description="CUIs a consultar, en orden")
    anio: Optional[int] = Field(
        None,
        description="Año del historial a usar (si es None se usa el año actual)"
    )

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "cuis": ["2595080", "2234567"]
        }
    })


class ProjectErrorResponse(BaseModel):
    """Response de error de /api/project/{cui}."""

    error: str = Field(..., description="Tipo de error")
    message: str = Field(..., description="Detalle del error")
    cui: str = Field(..., description="CUI consultado")

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "error": "Error al obtener datos del proyecto",
            "message": "Error al extraer datos: No se encontró proyecto con CUI 0000000",
            "cui": "0000000"
        }
    })


class ErrorResponse(BaseModel):
    """Response estándar de error."""

    error: str = Field(..., description="Mensaje de error")
    message: Optional[str] = Field(None, description="Detalle del error")

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "error": "Se requiere un array de CUIs"
        }
    })
