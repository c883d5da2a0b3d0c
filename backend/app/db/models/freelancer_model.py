"""
Se encarga de definir los modelos de freelancer y de su relación con habilidades.
"""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.db.database import Base


class Freelancer(Base):
    __tablename__ = "freelancers"

    id_freelancer = Column(Integer, primary_key=True, index=True)
    nombre = Column(String(255), nullable=False)
    telefono = Column(String(50))
    correo = Column(String(255), unique=True, index=True, nullable=False)
    contrasena = Column(String(255), nullable=False)
    biografia = Column(Text)
    fecha_registro = Column(DateTime(timezone=True), server_default=func.now())

    freelancer_habilidad = relationship("FreelancerHabilidad", back_populates="freelancer")
    aplicaciones = relationship("Aplicacion", back_populates="freelancer")

    def __repr__(self):
        return f"<Freelancer(id={self.id_freelancer}, correo='{self.correo}')>"


class FreelancerHabilidad(Base):
    """
    Tabla de asociación freelancer-habilidad con datos propios
    (años de experiencia y nivel). Clave primaria compuesta.
    """
    __tablename__ = "freelancer_habilidad"

    id_freelancer = Column(Integer, ForeignKey("freelancers.id_freelancer"), primary_key=True)
    id_habilidad = Column(Integer, ForeignKey("habilidades.id_habilidad"), primary_key=True)
    anios_experiencia = Column(Integer)
    nivel = Column(String(20))

    freelancer = relationship("Freelancer", back_populates="freelancer_habilidad")
    habilidad = relationship("Habilidad", back_populates="freelancer_habilidad")

    __table_args__ = (
        CheckConstraint(
            "nivel IN ('bajo', 'intermedio', 'avanzado')",
            name="ck_freelancer_habilidad_nivel",
        ),
    )

    def __repr__(self):
        return f"<FreelancerHabilidad(freelancer={self.id_freelancer}, habilidad={self.id_habilidad}, nivel='{self.nivel}')>"
