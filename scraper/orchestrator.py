"""Orquestador del proceso de consulta: fetch → extracción → registro."""

import asyncio
import logging
from typing import Iterable, Optional

from scraper.exceptions import FetchError, NotFoundError, ScraperError
from scraper.extractor import ProjectExtractor
from scraper.fetcher import MEFFetcher
from scraper.models import BatchError, BatchResult, ProjectRecord

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Error al extraer datos: "


class ProjectOrchestrator:
    """Orquesta la consulta de uno o varios CUIs contra el MEF."""

    def __init__(
        self,
        fetcher: Optional[MEFFetcher] = None,
        extractor: Optional[ProjectExtractor] = None
    ):
        """
        Inicializa el orquestador.

        Args:
            fetcher: Cliente del portal MEF (default: MEFFetcher())
            extractor: Extractor de la ficha (default: ProjectExtractor())
        """
        self.fetcher = fetcher or MEFFetcher()
        self.extractor = extractor or ProjectExtractor()

    async def fetch_project(self, cui: str, year: Optional[int] = None) -> ProjectRecord:
        """
        Ejecuta el pipeline completo para un CUI.

        Todos los errores llevan el prefijo "Error al extraer datos: " y
        conservan su tipo.

        Args:
            cui: Código Único de Inversión
            year: Año del historial a usar (default: año actual)

        Returns:
            ProjectRecord del proyecto

        Raises:
            FetchError: Si no se pudo descargar la ficha
            NotFoundError: Si el CUI no tiene proyecto
            ScraperError: Si el HTML no se pudo procesar
        """
        logger.info(f"🔍 Consultando CUI {cui}")

        try:
            html = await self.fetcher.fetch(cui)
            # BeautifulSoup es síncrono; se parsea fuera del event loop
            record = await asyncio.to_thread(self.extractor.extract, cui, html, year)
        except FetchError as e:
            raise FetchError(f"{ERROR_PREFIX}{e}", cause=e.cause) from e
        except NotFoundError as e:
            raise NotFoundError(e.cui, f"{ERROR_PREFIX}{e}") from e
        except Exception as e:
            logger.error(f"❌ Error al extraer datos del CUI {cui}: {e}")
            raise ScraperError(f"{ERROR_PREFIX}{e}") from e

        logger.info(f"✅ CUI {cui}: {record.nombre[:60]} (PIM {record.pim:,.2f})")
        return record

    async def fetch_projects(self, cuis: Iterable[str], year: Optional[int] = None) -> BatchResult:
        """
        Consulta una lista de CUIs en secuencia.

        Cada CUI termina (o falla) antes de iniciar el siguiente para no
        sobrecargar el portal ni gatillar bloqueos. Un fallo no detiene el batch.

        Args:
            cuis: CUIs en el orden a procesar
            year: Año del historial a usar (default: año actual)

        Returns:
            BatchResult con resultados, errores y contadores
        """
        cuis = list(cuis)
        logger.info(f"🚀 Iniciando batch de {len(cuis)} CUIs")

        results = []
        errors = []

        for idx, cui in enumerate(cuis, 1):
            logger.info(f"[{idx}/{len(cuis)}] CUI {cui}")
            try:
                results.append(await self.fetch_project(cui, year=year))
            except Exception as e:
                logger.error(f"❌ Error al obtener datos del CUI {cui}: {e}")
                errors.append(BatchError(cui=cui, error=str(e)))

        batch = BatchResult.from_items(results, errors)
        logger.info(
            f"🎉 Batch completado: {batch.successful}/{batch.total} exitosos, "
            f"{batch.failed} fallidos"
        )
        return batch
