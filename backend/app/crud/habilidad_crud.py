# backend/app/crud/habilidad_crud.py
"""
Operaciones CRUD para el catálogo de habilidades.
"""

from typing import Any, Dict, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models import Habilidad


async def get_habilidades(db: AsyncSession) -> List[Habilidad]:
    result = await db.execute(select(Habilidad).order_by(Habilidad.id_habilidad))
    return result.scalars().all()


async def create_habilidad(db: AsyncSession, datos: Dict[str, Any]) -> Habilidad:
    db_habilidad = Habilidad(**datos)
    db.add(db_habilidad)
    await db.commit()
    await db.refresh(db_habilidad)
    return db_habilidad
