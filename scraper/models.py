"""Modelos de datos del proceso de consulta de proyectos."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ProjectRecord(BaseModel):
    """Datos financieros de un proyecto para el año en curso."""

    model_config = ConfigDict(frozen=True)

    cui: str = Field(..., description="Código Único de Inversión")
    nombre: str = Field(..., description="Nombre del proyecto")
    pim: float = Field(0.0, description="Presupuesto Institucional Modificado del año")
    certificacion: float = Field(0.0, description="Monto certificado")
    compromiso_anual: float = Field(0.0, description="Compromiso anual")
    devengado: float = Field(0.0, description="Monto devengado")
    porcentaje_cert: float = Field(0.0, description="certificacion / pim * 100")
    porcentaje_comp: float = Field(0.0, description="compromiso_anual / pim * 100")
    porcentaje_dev: float = Field(0.0, description="devengado / pim * 100")


class BatchError(BaseModel):
    """CUI que falló dentro de un batch."""
    cui: str
    error: str


class BatchResult(BaseModel):
    """Resultado de procesar una lista de CUIs."""
    results: List[ProjectRecord] = Field(default_factory=list)
    errors: List[BatchError] = Field(default_factory=list)
    total: int = 0
    successful: int = 0
    failed: int = 0

    @classmethod
    def from_items(cls, results: List[ProjectRecord], errors: List[BatchError]) -> "BatchResult":
        """Construye el resultado calculando los contadores."""
        return cls(
            results=results,
            errors=errors,
            total=len(results) + len(errors),
            successful=len(results),
            failed=len(errors)
        )
