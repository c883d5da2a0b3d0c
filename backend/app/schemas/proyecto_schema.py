# backend/app/schemas/proyecto_schema.py

"""
Esquemas Pydantic para el modelo Proyecto.

- ProyectoListItem: fila + cliente propietario (nombre, correo)
- ProyectoDetalle: fila + cliente (nombre, correo, telefono) + aplicaciones
  recibidas, cada una con el freelancer que la envió
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from .cliente_schema import ClienteContacto, ClienteNombre, ClienteResumen
from .freelancer_schema import FreelancerResumen


class ProyectoCreate(BaseModel):
    titulo: Optional[str] = None
    descripcion: Optional[str] = None
    presupuesto: Optional[float] = None
    id_cliente: Optional[int] = None


class ProyectoResponse(BaseModel):
    id_proyecto: int
    titulo: Optional[str] = None
    descripcion: Optional[str] = None
    presupuesto: Optional[float] = None
    id_cliente: Optional[int] = None
    fecha_publicacion: Optional[datetime] = None
    estado: Optional[str] = None

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class ProyectoListItem(ProyectoResponse):
    clientes: Optional[ClienteResumen] = Field(None, validation_alias="cliente")


class ProyectoListResponse(BaseModel):
    total: int
    proyectos: List[ProyectoListItem]


class AplicacionDeProyecto(BaseModel):
    """Aplicación recibida por un proyecto, con el freelancer que la envió."""
    id_aplicacion: int
    estado: Optional[str] = None
    mensaje_propuesta: Optional[str] = None
    freelancers: Optional[FreelancerResumen] = Field(None, validation_alias="freelancer")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class ProyectoDetalle(ProyectoResponse):
    clientes: Optional[ClienteContacto] = Field(None, validation_alias="cliente")
    aplicaciones: List[AplicacionDeProyecto] = []


# ========================================
# PROYECCIONES EMBEBIDAS
# ========================================

class ProyectoTitulo(BaseModel):
    titulo: Optional[str] = None

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class ProyectoResumen(ProyectoTitulo):
    presupuesto: Optional[float] = None
    clientes: Optional[ClienteNombre] = Field(None, validation_alias="cliente")
