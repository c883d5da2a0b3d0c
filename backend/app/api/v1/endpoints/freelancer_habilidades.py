"""
Endpoints REST para la relación freelancer-habilidades.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api import deps
from app.schemas import freelancer_habilidad_schema
from app.services.marketplace_service import marketplace_service

router = APIRouter()


@router.get("", response_model=freelancer_habilidad_schema.RelacionListResponse)
async def read_relaciones(db: AsyncSession = Depends(deps.get_db)):
    return await marketplace_service.listar_relaciones(db)


@router.post(
    "",
    response_model=List[freelancer_habilidad_schema.FreelancerHabilidadResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_relacion(
    relacion_in: freelancer_habilidad_schema.FreelancerHabilidadCreate,
    db: AsyncSession = Depends(deps.get_db),
):
    return await marketplace_service.crear_relacion(db, relacion_in)
