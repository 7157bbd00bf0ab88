"""Errores del pipeline de consulta de proyectos."""


class ScraperError(Exception):
    """Error base del pipeline fetch → extracción."""


class FetchError(ScraperError):
    """No se pudo obtener la página del MEF (red, timeout o status HTTP)."""

    def __init__(self, message: str, cause: Exception = None):
        super().__init__(message)
        self.cause = cause


class NotFoundError(ScraperError):
    """La página cargó pero no contiene nombre de proyecto para el CUI."""

    def __init__(self, cui: str, message: str = None):
        super().__init__(message or f"No se encontró proyecto con CUI {cui}")
        self.cui = cui


class ValidationError(ScraperError):
    """Body inválido en una solicitud batch."""
