# backend/app/schemas/freelancer_habilidad_schema.py

"""
Esquemas Pydantic para la relación freelancer-habilidad.
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from .freelancer_schema import FreelancerNombre, FreelancerResumen
from .habilidad_schema import HabilidadNombre


class FreelancerHabilidadCreate(BaseModel):
    id_freelancer: Optional[int] = None
    id_habilidad: Optional[int] = None
    anios_experiencia: Optional[int] = None
    nivel: Optional[str] = None


class FreelancerHabilidadResponse(BaseModel):
    id_freelancer: int
    id_habilidad: int
    anios_experiencia: Optional[int] = None
    nivel: Optional[str] = None

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class FreelancerHabilidadListItem(FreelancerHabilidadResponse):
    freelancers: Optional[FreelancerResumen] = Field(None, validation_alias="freelancer")
    habilidades: Optional[HabilidadNombre] = Field(None, validation_alias="habilidad")


class RelacionListResponse(BaseModel):
    total: int
    relaciones: List[FreelancerHabilidadListItem]


class FreelancerHabilidadVolcado(FreelancerHabilidadResponse):
    freelancers: Optional[FreelancerNombre] = Field(None, validation_alias="freelancer")
    habilidades: Optional[HabilidadNombre] = Field(None, validation_alias="habilidad")
