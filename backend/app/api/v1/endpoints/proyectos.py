"""
Endpoints REST para proyectos.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api import deps
from app.schemas import proyecto_schema
from app.services.marketplace_service import marketplace_service

router = APIRouter()


@router.get("", response_model=proyecto_schema.ProyectoListResponse)
async def read_proyectos(db: AsyncSession = Depends(deps.get_db)):
    """Lista todos los proyectos con el cliente que los publicó."""
    return await marketplace_service.listar_proyectos(db)


@router.get("/{id_proyecto}", response_model=proyecto_schema.ProyectoDetalle)
async def read_proyecto(id_proyecto: int, db: AsyncSession = Depends(deps.get_db)):
    """Obtiene un proyecto con su cliente y las aplicaciones recibidas."""
    return await marketplace_service.obtener_proyecto(db, id_proyecto)


@router.post("", response_model=List[proyecto_schema.ProyectoResponse], status_code=status.HTTP_201_CREATED)
async def create_proyecto(
    proyecto_in: proyecto_schema.ProyectoCreate,
    db: AsyncSession = Depends(deps.get_db),
):
    return await marketplace_service.crear_proyecto(db, proyecto_in)
