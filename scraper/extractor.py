"""Extractor de datos de la ficha SSI - genera ProjectRecord normalizado."""

import logging
import math
import re
from datetime import datetime
from typing import List, Optional

from config.mef_selectors import HISTORY_COLUMNS, HISTORY_SELECTORS, PROJECT_SELECTORS
from scraper.builder import build_empty_record, build_record
from scraper.document import HTMLDocument
from scraper.exceptions import NotFoundError
from scraper.models import ProjectRecord

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s")


def parse_amount(text: Optional[str]) -> float:
    """
    Convierte un monto del MEF ("1,234.50") a float.

    Returns: 0.0 si el texto está vacío o no es numérico.
    """
    clean = _WHITESPACE.sub("", (text or "").strip().replace(",", ""))
    if not clean:
        return 0.0
    try:
        value = float(clean)
    except ValueError:
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return value


class ProjectExtractor:
    """Extrae nombre y montos del año en curso desde el HTML del MEF."""

    def extract(self, cui: str, html: str, year: Optional[int] = None) -> ProjectRecord:
        """
        Extrae y normaliza los datos de un proyecto.

        Args:
            cui: Código Único de Inversión consultado
            html: HTML de la ficha del proyecto
            year: Año a buscar en el historial (default: año actual)

        Returns:
            ProjectRecord con montos en 0 si no hay datos del año

        Raises:
            NotFoundError: Si la ficha no tiene nombre de proyecto
        """
        document = HTMLDocument(html)

        nombre = document.find_text(PROJECT_SELECTORS["nombre"])
        if not nombre:
            raise NotFoundError(cui)

        record = build_empty_record(cui, nombre)

        if not document.exists(HISTORY_SELECTORS["tabla"]):
            # Sin tabla la página carga los montos con una segunda petición (no implementada)
            logger.warning(
                f"⚠️  Datos financieros no disponibles directamente para CUI {cui}, "
                "se requiere una segunda petición"
            )
            return record

        target_year = str(year if year is not None else datetime.now().year)

        for cells in document.find_rows(HISTORY_SELECTORS["filas"]):
            if self._cell(cells, "anio").strip() != target_year:
                continue
            record = build_record(
                cui=cui,
                nombre=nombre,
                pim=parse_amount(self._cell(cells, "pim")),
                certificacion=parse_amount(self._cell(cells, "certificacion")),
                compromiso_anual=parse_amount(self._cell(cells, "compromiso_anual")),
                devengado=parse_amount(self._cell(cells, "devengado"))
            )

        return record

    def _cell(self, cells: List[str], column: str) -> str:
        index = HISTORY_COLUMNS[column]
        if index < len(cells):
            return cells[index]
        return ""
