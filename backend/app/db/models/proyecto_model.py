"""
Este archivo contiene los modelos de proyecto y de aplicación a proyectos.
"""

from sqlalchemy import (
    Column, Integer, String, Numeric, Text, DateTime, ForeignKey, CheckConstraint
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.db.database import Base


class Proyecto(Base):
    __tablename__ = "proyectos"

    id_proyecto = Column(Integer, primary_key=True, index=True)
    titulo = Column(String(255), nullable=False)
    descripcion = Column(Text)
    presupuesto = Column(Numeric(12, 2))
    id_cliente = Column(Integer, ForeignKey("clientes.id_cliente"))
    fecha_publicacion = Column(DateTime(timezone=True), server_default=func.now())
    estado = Column(String(20), server_default="activo")

    cliente = relationship("Cliente", back_populates="proyectos")
    aplicaciones = relationship("Aplicacion", back_populates="proyecto")

    __table_args__ = (
        CheckConstraint(
            "estado IN ('activo', 'cerrado', 'en_progreso')",
            name="ck_proyectos_estado",
        ),
    )

    def __repr__(self):
        return f"<Proyecto(id={self.id_proyecto}, titulo='{self.titulo}', estado='{self.estado}')>"


class Aplicacion(Base):
    __tablename__ = "aplicaciones"

    id_aplicacion = Column(Integer, primary_key=True, index=True)
    id_freelancer = Column(Integer, ForeignKey("freelancers.id_freelancer"))
    id_proyecto = Column(Integer, ForeignKey("proyectos.id_proyecto"))
    estado = Column(String(20), server_default="pendiente")
    mensaje_propuesta = Column(Text)

    freelancer = relationship("Freelancer", back_populates="aplicaciones")
    proyecto = relationship("Proyecto", back_populates="aplicaciones")

    __table_args__ = (
        CheckConstraint(
            "estado IN ('pendiente', 'aceptado', 'rechazado')",
            name="ck_aplicaciones_estado",
        ),
    )

    def __repr__(self):
        return f"<Aplicacion(id={self.id_aplicacion}, estado='{self.estado}')>"
