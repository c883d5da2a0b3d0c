# backend/app/crud/proyecto_crud.py
"""
Operaciones CRUD para el modelo Proyecto.

Funcionalidades principales:
- Listado con el cliente propietario embebido (nombre, correo)
- Detalle con el cliente (nombre, correo, telefono) y las aplicaciones
  recibidas, cada una con el freelancer que la envió
- Inserción de nuevos proyectos

Las relaciones embebidas se cargan con selectinload; en las hojas se limita
la proyección con load_only.
"""

from typing import Any, Dict, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.db.models import Aplicacion, Cliente, Freelancer, Proyecto


async def get_proyectos(db: AsyncSession) -> List[Proyecto]:
    """Obtiene todos los proyectos con su cliente propietario."""
    result = await db.execute(
        select(Proyecto)
        .options(selectinload(Proyecto.cliente).load_only(Cliente.nombre, Cliente.correo))
        .order_by(Proyecto.id_proyecto)
    )
    return result.scalars().all()


async def get_proyecto_detalle(db: AsyncSession, id_proyecto: int) -> Proyecto:
    """
    Obtiene exactamente un proyecto con cliente y aplicaciones embebidos.

    Lanza NoResultFound si el ID no existe.
    """
    result = await db.execute(
        select(Proyecto)
        .options(
            selectinload(Proyecto.cliente).load_only(
                Cliente.nombre, Cliente.correo, Cliente.telefono
            ),
            selectinload(Proyecto.aplicaciones)
            .selectinload(Aplicacion.freelancer)
            .load_only(Freelancer.nombre, Freelancer.correo),
        )
        .filter(Proyecto.id_proyecto == id_proyecto)
    )
    return result.scalars().one()


async def create_proyecto(db: AsyncSession, datos: Dict[str, Any]) -> Proyecto:
    db_proyecto = Proyecto(**datos)
    db.add(db_proyecto)
    await db.commit()
    await db.refresh(db_proyecto)  # Recarga estado y fecha_publicacion por defecto
    return db_proyecto
