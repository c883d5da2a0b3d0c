"""
Se encarga de definir el modelo de cliente para la aplicación.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from app.db.database import Base

class Cliente(Base):
    __tablename__ = "clientes"

    id_cliente = Column(Integer, primary_key=True, index=True)
    nombre = Column(String(255), nullable=False)
    correo = Column(String(255), unique=True, index=True, nullable=False)
    telefono = Column(String(50))
    contrasena = Column(String(255), nullable=False)

    # Relación con los proyectos publicados
    proyectos = relationship("Proyecto", back_populates="cliente")

    def __repr__(self):
        return f"<Cliente(id={self.id_cliente}, correo='{self.correo}')>"
