"""
Endpoints REST para las aplicaciones de freelancers a proyectos.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api import deps
from app.schemas import aplicacion_schema
from app.services.marketplace_service import marketplace_service

router = APIRouter()


@router.get("", response_model=aplicacion_schema.AplicacionListResponse)
async def read_aplicaciones(db: AsyncSession = Depends(deps.get_db)):
    """Lista las aplicaciones con el freelancer y el proyecto (y su cliente)."""
    return await marketplace_service.listar_aplicaciones(db)


@router.post("", response_model=List[aplicacion_schema.AplicacionResponse], status_code=status.HTTP_201_CREATED)
async def create_aplicacion(
    aplicacion_in: aplicacion_schema.AplicacionCreate,
    db: AsyncSession = Depends(deps.get_db),
):
    return await marketplace_service.crear_aplicacion(db, aplicacion_in)


@router.patch("/{id_aplicacion}", response_model=List[aplicacion_schema.AplicacionResponse])
async def update_aplicacion(
    id_aplicacion: int,
    aplicacion_in: aplicacion_schema.AplicacionUpdate,
    db: AsyncSession = Depends(deps.get_db),
):
    """Actualiza el estado de una aplicación (pendiente, aceptado, rechazado)."""
    return await marketplace_service.actualizar_aplicacion(db, id_aplicacion, aplicacion_in)
