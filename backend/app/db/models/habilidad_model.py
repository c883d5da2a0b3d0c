"""
Se encarga de definir el modelo del catálogo de habilidades.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from app.db.database import Base

class Habilidad(Base):
    __tablename__ = "habilidades"

    id_habilidad = Column(Integer, primary_key=True, index=True)
    nombre = Column(String(255), nullable=False)

    freelancer_habilidad = relationship("FreelancerHabilidad", back_populates="habilidad")

    def __repr__(self):
        return f"<Habilidad(id={self.id_habilidad}, nombre='{self.nombre}')>"
