# backend/app/api/v1/api_router.py
"""
Este archivo contiene el router principal de la API.

Se encarga de registrar todos los routers por recurso.
"""

from fastapi import APIRouter

# Importación de routers especializados por tabla
from app.api.v1.endpoints import (
    tablas,
    clientes,
    freelancers,
    proyectos,
    habilidades,
    aplicaciones,
    freelancer_habilidades,
)

api_router_v1 = APIRouter()

# ROUTER GLOBAL: /tablas y /schema
api_router_v1.include_router(tablas.router, tags=["Tablas"])

api_router_v1.include_router(
    clientes.router,
    prefix="/clientes",
    tags=["Clientes"]
)

api_router_v1.include_router(
    freelancers.router,
    prefix="/freelancers",
    tags=["Freelancers"]
)

api_router_v1.include_router(
    proyectos.router,
    prefix="/proyectos",
    tags=["Proyectos"]
)

api_router_v1.include_router(
    habilidades.router,
    prefix="/habilidades",
    tags=["Habilidades"]
)

# ROUTER DE APLICACIONES
# Único recurso con actualización (PATCH del estado)
api_router_v1.include_router(
    aplicaciones.router,
    prefix="/aplicaciones",
    tags=["Aplicaciones"]
)

api_router_v1.include_router(
    freelancer_habilidades.router,
    prefix="/freelancer-habilidades",
    tags=["Freelancer-Habilidades"]
)
