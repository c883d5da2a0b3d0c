# backend/app/schemas/freelancer_schema.py

"""
Esquemas Pydantic para el modelo Freelancer.

El detalle de un freelancer embebe sus filas de freelancer_habilidad y, dentro
de cada una, el nombre de la habilidad. Las claves embebidas usan el nombre de
la tabla relacionada para mantener la forma JSON que ya consumen los clientes.
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from .habilidad_schema import HabilidadNombre


class FreelancerCreate(BaseModel):
    """Campos aceptados al crear un freelancer."""
    nombre: Optional[str] = None
    telefono: Optional[str] = None
    correo: Optional[str] = None
    contrasena: Optional[str] = None
    biografia: Optional[str] = None


class FreelancerResponse(BaseModel):
    id_freelancer: int
    nombre: Optional[str] = None
    telefono: Optional[str] = None
    correo: Optional[str] = None
    contrasena: Optional[str] = None
    biografia: Optional[str] = None
    fecha_registro: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class FreelancerListResponse(BaseModel):
    total: int
    freelancers: List[FreelancerResponse]


class HabilidadDeFreelancer(BaseModel):
    """Fila de freelancer_habilidad vista desde el freelancer."""
    anios_experiencia: Optional[int] = None
    nivel: Optional[str] = None
    habilidades: Optional[HabilidadNombre] = Field(None, validation_alias="habilidad")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class FreelancerDetalle(FreelancerResponse):
    freelancer_habilidad: List[HabilidadDeFreelancer] = []


# ========================================
# PROYECCIONES EMBEBIDAS
# ========================================

class FreelancerNombre(BaseModel):
    nombre: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class FreelancerResumen(FreelancerNombre):
    correo: Optional[str] = None
