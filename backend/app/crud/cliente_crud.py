# backend/app/crud/cliente_crud.py
"""
Este archivo contiene las operaciones CRUD para el modelo Cliente.
"""

from typing import Any, Dict, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models import Cliente


async def get_clientes(db: AsyncSession) -> List[Cliente]:
    """Obtiene todos los clientes, sin paginación."""
    result = await db.execute(select(Cliente).order_by(Cliente.id_cliente))
    return result.scalars().all()


async def get_cliente(db: AsyncSession, id_cliente: int) -> Cliente:
    """
    Obtiene exactamente un cliente por su ID.

    Lanza NoResultFound si no existe: el llamador decide cómo reportarlo.
    """
    result = await db.execute(select(Cliente).filter(Cliente.id_cliente == id_cliente))
    return result.scalars().one()


async def create_cliente(db: AsyncSession, datos: Dict[str, Any]) -> Cliente:
    """Inserta un cliente. Solo se envían los campos presentes en `datos`."""
    db_cliente = Cliente(**datos)
    db.add(db_cliente)
    await db.commit()
    await db.refresh(db_cliente)
    return db_cliente
