"""
Endpoints globales: volcado completo de las tablas y estructura de la base de datos.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import async_sessionmaker

from app.api import deps
from app.schemas import tablas_schema
from app.services.marketplace_service import marketplace_service

router = APIRouter()


@router.get("/tablas", response_model=tablas_schema.TablasResponse)
async def read_tablas(session_factory: async_sessionmaker = Depends(deps.get_session_factory)):
    """
    Devuelve TODA la información de todas las tablas y sus totales.

    Las seis consultas se lanzan de forma concurrente; si una falla, falla
    la petición completa.
    """
    return await marketplace_service.get_tablas(session_factory)


@router.get("/schema", response_model=tablas_schema.SchemaResponse)
async def read_schema():
    """Devuelve la estructura de la base de datos (descripción estática)."""
    return marketplace_service.get_esquema()
