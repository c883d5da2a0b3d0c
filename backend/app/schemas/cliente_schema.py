# backend/app/schemas/cliente_schema.py

"""
Esquemas Pydantic para el modelo Cliente.

Patrón de esquemas utilizado:
- ClienteCreate: campos aceptados al crear (POST)
- ClienteResponse: fila completa tal como la devuelve el almacén
- ClienteResumen / ClienteContacto / ClienteNombre: proyecciones usadas
  cuando el cliente va embebido dentro de otra fila
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict


class ClienteCreate(BaseModel):
    """Campos aceptados al crear un cliente. Lo omitido queda al default del almacén."""
    nombre: Optional[str] = None
    correo: Optional[str] = None
    telefono: Optional[str] = None
    contrasena: Optional[str] = None


class ClienteResponse(BaseModel):
    id_cliente: int
    nombre: Optional[str] = None
    correo: Optional[str] = None
    telefono: Optional[str] = None
    contrasena: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class ClienteListResponse(BaseModel):
    total: int
    clientes: List[ClienteResponse]


# ========================================
# PROYECCIONES EMBEBIDAS
# ========================================

class ClienteNombre(BaseModel):
    nombre: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class ClienteResumen(ClienteNombre):
    correo: Optional[str] = None


class ClienteContacto(ClienteResumen):
    telefono: Optional[str] = None
