"""
Endpoints REST para clientes.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api import deps
from app.schemas import cliente_schema
from app.services.marketplace_service import marketplace_service

router = APIRouter()


@router.get("", response_model=cliente_schema.ClienteListResponse)
async def read_clientes(db: AsyncSession = Depends(deps.get_db)):
    """Lista todos los clientes."""
    return await marketplace_service.listar_clientes(db)


@router.get("/{id_cliente}", response_model=cliente_schema.ClienteResponse)
async def read_cliente(id_cliente: int, db: AsyncSession = Depends(deps.get_db)):
    """Obtiene un cliente por su ID. Si no existe se reporta como falla del almacén."""
    return await marketplace_service.obtener_cliente(db, id_cliente)


@router.post("", response_model=List[cliente_schema.ClienteResponse], status_code=status.HTTP_201_CREATED)
async def create_cliente(
    cliente_in: cliente_schema.ClienteCreate,
    db: AsyncSession = Depends(deps.get_db),
):
    """Crea un cliente y devuelve la fila insertada."""
    return await marketplace_service.crear_cliente(db, cliente_in)
