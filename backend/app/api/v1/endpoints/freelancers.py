"""
Endpoints REST para freelancers.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api import deps
from app.schemas import freelancer_schema
from app.services.marketplace_service import marketplace_service

router = APIRouter()


@router.get("", response_model=freelancer_schema.FreelancerListResponse)
async def read_freelancers(db: AsyncSession = Depends(deps.get_db)):
    """Lista todos los freelancers."""
    return await marketplace_service.listar_freelancers(db)


@router.get("/{id_freelancer}", response_model=freelancer_schema.FreelancerDetalle)
async def read_freelancer(id_freelancer: int, db: AsyncSession = Depends(deps.get_db)):
    """Obtiene un freelancer con sus habilidades (años de experiencia, nivel y nombre)."""
    return await marketplace_service.obtener_freelancer(db, id_freelancer)


@router.post("", response_model=List[freelancer_schema.FreelancerResponse], status_code=status.HTTP_201_CREATED)
async def create_freelancer(
    freelancer_in: freelancer_schema.FreelancerCreate,
    db: AsyncSession = Depends(deps.get_db),
):
    return await marketplace_service.crear_freelancer(db, freelancer_in)
