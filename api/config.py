"""
Configuración del microservicio usando Pydantic Settings.
Lee variables de entorno o .env file.
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

from config.mef_selectors import BASE_URL, REQUEST_TIMEOUT_SECONDS, USER_AGENT


class Settings(BaseSettings):
    """Settings de la API de proyectos MEF."""

    # Servidor
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    environment: str = "development"  # development | production

    # CORS (Excel / Google Sheets consumen la API desde el navegador)
    cors_origins: List[str] = ["*"]

    # Portal MEF
    mef_base_url: str = BASE_URL
    request_timeout_seconds: float = REQUEST_TIMEOUT_SECONDS
    user_agent: str = USER_AGENT

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )


# Singleton
settings = Settings()
