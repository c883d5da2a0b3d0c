# backend/app/schemas/habilidad_schema.py

"""
Esquemas Pydantic para el catálogo de habilidades.
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict


class HabilidadCreate(BaseModel):
    nombre: Optional[str] = None


class HabilidadNombre(BaseModel):
    """Proyección usada cuando la habilidad va embebida."""
    nombre: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class HabilidadResponse(HabilidadNombre):
    id_habilidad: int


class HabilidadListResponse(BaseModel):
    total: int
    habilidades: List[HabilidadResponse]
