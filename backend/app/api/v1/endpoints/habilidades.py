"""
Endpoints REST para el catálogo de habilidades.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api import deps
from app.schemas import habilidad_schema
from app.services.marketplace_service import marketplace_service

router = APIRouter()


@router.get("", response_model=habilidad_schema.HabilidadListResponse)
async def read_habilidades(db: AsyncSession = Depends(deps.get_db)):
    return await marketplace_service.listar_habilidades(db)


@router.post("", response_model=List[habilidad_schema.HabilidadResponse], status_code=status.HTTP_201_CREATED)
async def create_habilidad(
    habilidad_in: habilidad_schema.HabilidadCreate,
    db: AsyncSession = Depends(deps.get_db),
):
    return await marketplace_service.crear_habilidad(db, habilidad_in)
