# backend/app/schemas/aplicacion_schema.py

"""
Esquemas Pydantic para las aplicaciones de freelancers a proyectos.
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from .freelancer_schema import FreelancerResumen
from .proyecto_schema import ProyectoResumen, ProyectoTitulo


class AplicacionCreate(BaseModel):
    id_freelancer: Optional[int] = None
    id_proyecto: Optional[int] = None
    mensaje_propuesta: Optional[str] = None


class AplicacionUpdate(BaseModel):
    """Único campo modificable de una aplicación."""
    estado: Optional[str] = None


class AplicacionResponse(BaseModel):
    id_aplicacion: int
    id_freelancer: Optional[int] = None
    id_proyecto: Optional[int] = None
    estado: Optional[str] = None
    mensaje_propuesta: Optional[str] = None

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class AplicacionListItem(AplicacionResponse):
    freelancers: Optional[FreelancerResumen] = Field(None, validation_alias="freelancer")
    proyectos: Optional[ProyectoResumen] = Field(None, validation_alias="proyecto")


class AplicacionListResponse(BaseModel):
    total: int
    aplicaciones: List[AplicacionListItem]


class AplicacionVolcado(AplicacionResponse):
    """Forma usada en el volcado completo: proyecto reducido a su título."""
    freelancers: Optional[FreelancerResumen] = Field(None, validation_alias="freelancer")
    proyectos: Optional[ProyectoTitulo] = Field(None, validation_alias="proyecto")
