"""
Módulo de scraping y extracción de proyectos del SSI del MEF.

Componentes:
- fetcher: Descarga de la ficha del proyecto
- extractor: Extracción de nombre y montos del año desde el HTML
- builder: Construcción de registros y porcentajes
- orchestrator: Coordinador del proceso (uno o varios CUIs)
- validator: Validación de registros contra schema
- models: Modelos de datos
"""

from scraper.exceptions import FetchError, NotFoundError, ScraperError, ValidationError
from scraper.extractor import ProjectExtractor, parse_amount
from scraper.fetcher import MEFFetcher
from scraper.models import BatchError, BatchResult, ProjectRecord
from scraper.orchestrator import ProjectOrchestrator
from scraper.validator import RecordValidator

__all__ = [
    "MEFFetcher",
    "ProjectExtractor",
    "ProjectOrchestrator",
    "RecordValidator",
    "parse_amount",
    "ProjectRecord",
    "BatchResult",
    "BatchError",
    "ScraperError",
    "FetchError",
    "NotFoundError",
    "ValidationError",
]
