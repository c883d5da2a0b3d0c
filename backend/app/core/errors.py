"""
Errores del almacén relacional y su traducción a respuestas HTTP.

Toda falla del almacén es un StoreOperationError. Las subclases etiquetan
la causa para que el modo "typed" pueda responder con códigos distintos;
en el modo "legacy" todas se responden con 500 y el mensaje original.
"""

import asyncio
import logging
from typing import Optional

from sqlalchemy.exc import (
    DBAPIError,
    IntegrityError,
    InterfaceError,
    MultipleResultsFound,
    NoResultFound,
    OperationalError,
    SQLAlchemyError,
)

logger = logging.getLogger(__name__)


class StoreOperationError(Exception):
    """Falla genérica reportada por el almacén relacional."""

    status_code_typed = 500

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.operation = operation

    def status_code(self, mode: str = "legacy") -> int:
        if mode == "typed":
            return self.status_code_typed
        return 500


class RegistroNoEncontrado(StoreOperationError):
    """La lectura de una sola fila no encontró exactamente un registro."""

    status_code_typed = 404


class ViolacionRestriccion(StoreOperationError):
    """Violación de clave foránea, unicidad, NOT NULL o CHECK."""

    status_code_typed = 409


class FalloConexion(StoreOperationError):
    """El almacén no está accesible o la conexión se perdió."""

    status_code_typed = 503


def store_message(exc: BaseException) -> str:
    """Devuelve el mensaje del almacén tal cual, sin el envoltorio de SQLAlchemy."""
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


def translate_store_error(exc: BaseException, operation: Optional[str] = None) -> StoreOperationError:
    """Clasifica una excepción del almacén en la jerarquía StoreOperationError."""
    message = store_message(exc)
    if isinstance(exc, (NoResultFound, MultipleResultsFound)):
        return RegistroNoEncontrado(message, operation)
    if isinstance(exc, IntegrityError):
        return ViolacionRestriccion(message, operation)
    if isinstance(exc, (OperationalError, InterfaceError, OSError, asyncio.TimeoutError)):
        return FalloConexion(message, operation)
    return StoreOperationError(message, operation)


# Excepciones que se consideran fallas del almacén en el límite de cada operación
STORE_EXCEPTIONS = (SQLAlchemyError, OSError, asyncio.TimeoutError)
