# backend/app/api/deps.py
"""
Módulo de dependencias para FastAPI.

Este archivo centraliza todas las dependencias que pueden ser inyectadas
en los endpoints de la API. Los tests sobrescriben get_session_factory para
apuntar la aplicación a otra base de datos.
"""

from typing import AsyncGenerator
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from app.db.database import AsyncSessionLocal


def get_session_factory() -> async_sessionmaker:
    """
    Dependencia de FastAPI que entrega la fábrica de sesiones.

    El volcado completo la necesita para abrir una sesión por cada consulta
    concurrente.
    """
    return AsyncSessionLocal


async def get_db(
    session_factory: async_sessionmaker = Depends(get_session_factory),
) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependencia de FastAPI para obtener una sesión de base de datos asíncrona.
    Se asegura de que la sesión se cierre siempre después de la petición.
    """
    async with session_factory() as session:
        yield session

