# backend/app/db/database.py

"""
Configuración principal de la base de datos para la aplicación.

Este módulo establece la conexión con PostgreSQL usando SQLAlchemy y define
los componentes básicos que serán utilizados por toda la aplicación:
- Motor de base de datos (engine)
- Fábrica de sesiones (AsyncSessionLocal)
- Clase base para modelos (Base)

La dependencia get_db() vive en app/api/deps.py.
"""

import logging

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import declarative_base
from app.core.config import settings # Importamos nuestra configuración

logger = logging.getLogger(__name__)

# Clase base declarativa para todos los modelos ORM
Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite no aplica las claves foráneas si no se activan por conexión
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str, **kwargs) -> AsyncEngine:
    """
    Crea un motor asíncrono para la URL dada.

    Con SQLite se activan las claves foráneas en cada conexión para que el
    almacén haga cumplir la integridad referencial igual que PostgreSQL.
    """
    engine = create_async_engine(url, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker:
    # expire_on_commit=False es importante para que los objetos sigan siendo utilizables
    # después de que la transacción se haya confirmado.
    return async_sessionmaker(
        bind=bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def create_tables(bind: AsyncEngine) -> None:
    """Crea las seis tablas si no existen. Pensado para desarrollo y tests."""
    # Importa los modelos para registrarlos en Base.metadata
    from app.db import models  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("🗄️ BD: Tablas verificadas/creadas")


# Crear el motor de base de datos asíncrono
engine = build_engine(settings.DATABASE_URL, pool_pre_ping=True, echo=settings.DB_ECHO)

# Crear un sessionmaker asíncrono
AsyncSessionLocal = build_session_factory(engine)
