# backend/app/crud/aplicacion_crud.py
"""
Operaciones CRUD para las aplicaciones de freelancers a proyectos.
"""

from typing import Any, Dict, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.db.models import Aplicacion, Cliente, Freelancer, Proyecto


async def get_aplicaciones(db: AsyncSession) -> List[Aplicacion]:
    """
    Obtiene todas las aplicaciones con el freelancer (nombre, correo) y el
    proyecto (titulo, presupuesto y nombre de su cliente).
    """
    result = await db.execute(
        select(Aplicacion)
        .options(
            selectinload(Aplicacion.freelancer).load_only(Freelancer.nombre, Freelancer.correo),
            selectinload(Aplicacion.proyecto)
            .load_only(Proyecto.titulo, Proyecto.presupuesto, Proyecto.id_cliente)
            .selectinload(Proyecto.cliente)
            .load_only(Cliente.nombre),
        )
        .order_by(Aplicacion.id_aplicacion)
    )
    return result.scalars().all()


async def create_aplicacion(db: AsyncSession, datos: Dict[str, Any]) -> Aplicacion:
    db_aplicacion = Aplicacion(**datos)
    db.add(db_aplicacion)
    await db.commit()
    await db.refresh(db_aplicacion)  # Recarga el estado por defecto ('pendiente')
    return db_aplicacion


async def update_aplicacion(db: AsyncSession, id_aplicacion: int, datos: Dict[str, Any]) -> List[Aplicacion]:
    """
    Actualiza las aplicaciones que coinciden con el ID y devuelve las filas
    actualizadas. Sin control de concurrencia: gana la última escritura.

    Devuelve una lista vacía si ningún registro coincide.
    """
    result = await db.execute(select(Aplicacion).filter(Aplicacion.id_aplicacion == id_aplicacion))
    db_aplicaciones = result.scalars().all()
    for db_aplicacion in db_aplicaciones:
        for key, value in datos.items():
            setattr(db_aplicacion, key, value)
        db.add(db_aplicacion)
    await db.commit()
    for db_aplicacion in db_aplicaciones:
        await db.refresh(db_aplicacion)
    return db_aplicaciones
