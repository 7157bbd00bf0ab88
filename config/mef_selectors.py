"""
Selectores y constantes del portal SSI del MEF (Seguimiento de Inversiones).
Identificados mediante exploración manual del sitio.

Fuente: https://ofi5.mef.gob.pe/ssi/Ssi/Index?codigo=<CUI>&tipo=2

El HTML pertenece al MEF y puede cambiar sin aviso.
"""

# ============================================================================
# CONSULTA DE PROYECTO
# ============================================================================

BASE_URL = "https://ofi5.mef.gob.pe/ssi/Ssi/Index"

# tipo=2 => búsqueda por CUI
QUERY_TIPO = "2"

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)

REQUEST_TIMEOUT_SECONDS = 10.0

# ============================================================================
# DATOS GENERALES
# ============================================================================

PROJECT_SELECTORS = {
    "nombre": "#td_nominv",
}

# ============================================================================
# HISTORIAL ANUAL (pestaña financiera)
# ============================================================================

HISTORY_SELECTORS = {
    "tabla": "#tb_hist_anual",
    "filas": "#tb_hist_anual .fil_hisfinan",
}

# Posiciones (base 0) de las celdas de cada fila del historial
HISTORY_COLUMNS = {
    "anio": 0,
    "pim": 2,
    "certificacion": 3,
    "compromiso_anual": 4,
    "devengado": 5,
}
