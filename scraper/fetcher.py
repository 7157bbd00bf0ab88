"""
Cliente HTTP para el portal SSI del MEF.

Una sola petición GET por CUI, sin reintentos.
"""

import logging
from typing import Optional
from urllib.parse import urlencode

import httpx

from config.mef_selectors import BASE_URL, QUERY_TIPO, REQUEST_TIMEOUT_SECONDS, USER_AGENT
from scraper.exceptions import FetchError

logger = logging.getLogger(__name__)


class MEFFetcher:
    """Descarga el HTML de la ficha de un proyecto."""

    def __init__(
        self,
        base_url: str = None,
        timeout: float = None,
        user_agent: str = None,
        client: Optional[httpx.AsyncClient] = None
    ):
        """
        Inicializa el fetcher.

        Args:
            base_url: Endpoint del portal (default: BASE_URL)
            timeout: Timeout en segundos (default: 10)
            user_agent: Header User-Agent tipo navegador
            client: AsyncClient ya creado (tests); si es None se crea uno por petición
        """
        self.base_url = base_url or BASE_URL
        self.timeout = timeout or REQUEST_TIMEOUT_SECONDS
        self.headers = {
            "User-Agent": user_agent or USER_AGENT
        }
        self._client = client

    def build_url(self, cui: str) -> str:
        """URL de consulta para un CUI."""
        query = urlencode({"codigo": cui, "tipo": QUERY_TIPO})
        return f"{self.base_url}?{query}"

    async def fetch(self, cui: str) -> str:
        """
        Obtiene el HTML de la ficha del proyecto.

        Args:
            cui: Código Único de Inversión

        Returns:
            Cuerpo de la respuesta como texto

        Raises:
            FetchError: Error de red, timeout o status HTTP no exitoso
        """
        url = self.build_url(cui)
        logger.debug(f"🌐 GET {url}")

        try:
            if self._client is not None:
                response = await self._get(self._client, url)
            else:
                async with httpx.AsyncClient() as client:
                    response = await self._get(client, url)
        except httpx.TimeoutException as e:
            raise FetchError(f"Timeout al consultar el MEF para CUI {cui}: {e}", cause=e) from e
        except httpx.HTTPError as e:
            raise FetchError(f"Error al consultar el MEF para CUI {cui}: {e}", cause=e) from e

        return response.text

    async def _get(self, client: httpx.AsyncClient, url: str) -> httpx.Response:
        response = await client.get(
            url, headers=self.headers, timeout=self.timeout, follow_redirects=True
        )
        response.raise_for_status()
        return response
