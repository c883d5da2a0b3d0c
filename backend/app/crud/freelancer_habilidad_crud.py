# backend/app/crud/freelancer_habilidad_crud.py
"""
Operaciones CRUD para la relación freelancer-habilidad.
"""

from typing import Any, Dict, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.db.models import Freelancer, FreelancerHabilidad, Habilidad


async def get_relaciones(db: AsyncSession) -> List[FreelancerHabilidad]:
    """Obtiene todas las relaciones con el freelancer (nombre, correo) y la habilidad (nombre)."""
    result = await db.execute(
        select(FreelancerHabilidad)
        .options(
            selectinload(FreelancerHabilidad.freelancer).load_only(Freelancer.nombre, Freelancer.correo),
            selectinload(FreelancerHabilidad.habilidad).load_only(Habilidad.nombre),
        )
        .order_by(FreelancerHabilidad.id_freelancer, FreelancerHabilidad.id_habilidad)
    )
    return result.scalars().all()


async def create_relacion(db: AsyncSession, datos: Dict[str, Any]) -> FreelancerHabilidad:
    db_relacion = FreelancerHabilidad(**datos)
    db.add(db_relacion)
    await db.commit()
    await db.refresh(db_relacion)
    return db_relacion
