# backend/app/schemas/tablas_schema.py

"""
Esquemas de las respuestas que no corresponden a una sola tabla:
el índice de rutas, el volcado completo (/tablas) y la estructura (/schema).
"""

from typing import Dict, List
from pydantic import BaseModel

from .aplicacion_schema import AplicacionVolcado
from .cliente_schema import ClienteResponse
from .freelancer_habilidad_schema import FreelancerHabilidadVolcado
from .freelancer_schema import FreelancerResponse
from .habilidad_schema import HabilidadResponse
from .proyecto_schema import ProyectoListItem


class IndiceResponse(BaseModel):
    mensaje: str
    rutas: Dict[str, str]


class Estadisticas(BaseModel):
    total_clientes: int
    total_freelancers: int
    total_proyectos: int
    total_habilidades: int
    total_aplicaciones: int
    total_relaciones_habilidades: int


class DatosTablas(BaseModel):
    clientes: List[ClienteResponse]
    freelancers: List[FreelancerResponse]
    proyectos: List[ProyectoListItem]
    habilidades: List[HabilidadResponse]
    aplicaciones: List[AplicacionVolcado]
    freelancer_habilidad: List[FreelancerHabilidadVolcado]


class TablasResponse(BaseModel):
    mensaje: str
    estadisticas: Estadisticas
    datos: DatosTablas


class TablaDescripcion(BaseModel):
    descripcion: str
    columnas: Dict[str, str]


class SchemaResponse(BaseModel):
    mensaje: str
    tablas: Dict[str, TablaDescripcion]
