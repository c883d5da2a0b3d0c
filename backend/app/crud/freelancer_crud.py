# backend/app/crud/freelancer_crud.py
"""
Operaciones CRUD para el modelo Freelancer.

El detalle de un freelancer se carga junto con sus filas de freelancer_habilidad
y la habilidad de cada una, usando selectinload para evitar consultas N+1.
"""

from typing import Any, Dict, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.db.models import Freelancer, FreelancerHabilidad, Habilidad


async def get_freelancers(db: AsyncSession) -> List[Freelancer]:
    result = await db.execute(select(Freelancer).order_by(Freelancer.id_freelancer))
    return result.scalars().all()


async def get_freelancer_con_habilidades(db: AsyncSession, id_freelancer: int) -> Freelancer:
    """Obtiene exactamente un freelancer con sus habilidades embebidas (NoResultFound si no existe)."""
    result = await db.execute(
        select(Freelancer)
        .options(
            selectinload(Freelancer.freelancer_habilidad)
            .selectinload(FreelancerHabilidad.habilidad)
            .load_only(Habilidad.nombre)
        )
        .filter(Freelancer.id_freelancer == id_freelancer)
    )
    return result.scalars().one()


async def create_freelancer(db: AsyncSession, datos: Dict[str, Any]) -> Freelancer:
    db_freelancer = Freelancer(**datos)
    db.add(db_freelancer)
    await db.commit()
    await db.refresh(db_freelancer)  # Recarga fecha_registro asignada por la BD
    return db_freelancer
