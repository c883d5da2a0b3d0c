# backend/app/db/models/__init__.py
# Registra todos los modelos en Base.metadata para que las relaciones por nombre se resuelvan.

from app.db.models.cliente_model import Cliente
from app.db.models.freelancer_model import Freelancer, FreelancerHabilidad
from app.db.models.habilidad_model import Habilidad
from app.db.models.proyecto_model import Proyecto, Aplicacion

__all__ = [
    "Cliente",
    "Freelancer",
    "Habilidad",
    "FreelancerHabilidad",
    "Proyecto",
    "Aplicacion",
]
