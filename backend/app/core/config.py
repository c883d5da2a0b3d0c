"""
Este archivo contiene la configuración de la aplicación.
"""

from pydantic_settings import BaseSettings
from typing import List, Optional
from pathlib import Path
import os

# Apunta al directorio 'backend/'
BASE_DIR = Path(__file__).resolve().parent.parent.parent

class Settings(BaseSettings):
    """
    Configuración de la aplicación usando Pydantic BaseSettings.
    Variables sensibles desde .env, defaults seguros para el resto.
    """
    # Configuración general del proyecto
    BASE_DIR: Path = BASE_DIR
    API_PREFIX: str = ""
    PROJECT_NAME: str = "API de Freelancer"
    PROJECT_VERSION: str = "1.0.0"

    # Configuración de la base de datos (PostgreSQL de Supabase)
    POSTGRES_SERVER: str = os.getenv("POSTGRES_SERVER", "localhost")
    POSTGRES_USER: str = os.getenv("POSTGRES_USER", "postgres")
    POSTGRES_PASSWORD: str = os.getenv("POSTGRES_PASSWORD", "postgres")
    POSTGRES_DB: str = os.getenv("POSTGRES_DB", "postgres")
    POSTGRES_PORT: str = os.getenv("POSTGRES_PORT", "5432")

    # URL completa opcional, tiene prioridad sobre las variables POSTGRES_*
    SQLALCHEMY_DATABASE_URI: Optional[str] = None
    DB_ECHO: bool = False
    # Solo para desarrollo local: crea las tablas al arrancar (no hay migraciones)
    DB_CREATE_TABLES: bool = False

    @property
    def DATABASE_URL(self) -> str:
        """URL de conexión a la base de datos asíncrona."""
        if self.SQLALCHEMY_DATABASE_URI:
            return self.SQLALCHEMY_DATABASE_URI
        return f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    # Errores: "legacy" responde siempre 500, "typed" distingue 404/409/503
    ERROR_STATUS_MODE: str = "legacy"

    # CORS y archivos estáticos del dashboard
    CORS_ORIGINS: List[str] = ["*"]
    STATIC_DIR: Optional[Path] = None

    @property
    def STATIC_PATH(self) -> Optional[Path]:
        """Directorio estático resuelto; una ruta relativa se toma desde 'backend/'."""
        if self.STATIC_DIR is None:
            return None
        if self.STATIC_DIR.is_absolute():
            return self.STATIC_DIR
        return self.BASE_DIR / self.STATIC_DIR

    # Logging - Defaults seguros
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Server - Del .env con defaults
    HOST: str = "0.0.0.0"
    PORT: int = 3005

    class Config:
        env_file = ".env"
        case_sensitive = False

# Instancia global de la configuración
settings = Settings()
