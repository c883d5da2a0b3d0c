# backend/app/services/marketplace_service.py
"""
Fachada de acceso a datos del marketplace de freelancers.

Este servicio traduce cada operación de la API en una o más consultas al
almacén relacional (app/crud), da forma a las filas con los esquemas Pydantic
y convierte cualquier falla del almacén en un StoreOperationError.

Características:
- Sin estado entre peticiones: cada llamada vuelve a leer el almacén
- Listados sin paginación, envueltos en {total, <tabla>}
- Lectura de una sola fila con semántica "exactamente una"
- Volcado completo con seis consultas concurrentes (fan-out/fan-in)
- Sin reintentos ni compensaciones ante fallas
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, Awaitable, Callable, List, Optional, Sequence, Type

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.errors import STORE_EXCEPTIONS, translate_store_error
from app.crud import (
    aplicacion_crud,
    cliente_crud,
    freelancer_crud,
    freelancer_habilidad_crud,
    habilidad_crud,
    proyecto_crud,
)
from app.schemas import (
    aplicacion_schema,
    cliente_schema,
    freelancer_habilidad_schema,
    freelancer_schema,
    habilidad_schema,
    proyecto_schema,
    tablas_schema,
)
from app.services.schema_catalog import ESQUEMA_TABLAS, RUTAS

logger = logging.getLogger(__name__)


def _dar_forma(filas: Sequence[Any], esquema: Type[BaseModel]) -> List[BaseModel]:
    return [esquema.model_validate(fila) for fila in filas]


class MarketplaceService:
    """
    Servicio con una operación por cada par (entidad, patrón de acceso).

    Todas las operaciones reciben la sesión (o la fábrica de sesiones en el
    caso del volcado) desde la capa de endpoints.
    """

    @asynccontextmanager
    async def _operacion(self, nombre: str, db: Optional[AsyncSession] = None):
        """
        Límite de cada operación: cualquier falla del almacén se registra,
        revierte la sesión si hay una y se relanza como StoreOperationError
        con el mensaje original.
        """
        try:
            yield
        except STORE_EXCEPTIONS as exc:
            logger.error(f"❌ ERROR: {nombre} falló: {exc}")
            if db is not None:
                await db.rollback()
            raise translate_store_error(exc, operation=nombre) from exc

    # ========================================
    # ÍNDICE Y ESTRUCTURA
    # ========================================

    def get_indice(self) -> tablas_schema.IndiceResponse:
        return tablas_schema.IndiceResponse(
            mensaje="API de Freelancer conectada a Supabase",
            rutas=dict(RUTAS),
        )

    def get_esquema(self) -> tablas_schema.SchemaResponse:
        """Devuelve la descripción escrita a mano de las seis tablas. No consulta el almacén."""
        return tablas_schema.SchemaResponse(
            mensaje="Estructura de la base de datos",
            tablas=dict(ESQUEMA_TABLAS),
        )

    # ========================================
    # VOLCADO COMPLETO
    # ========================================

    async def _leer_tabla(
        self,
        session_factory: async_sessionmaker,
        consulta: Callable[[AsyncSession], Awaitable[Sequence[Any]]],
        esquema: Type[BaseModel],
    ) -> List[BaseModel]:
        # Cada consulta concurrente usa su propia sesión: una AsyncSession no admite
        # operaciones simultáneas.
        async with session_factory() as db:
            filas = await consulta(db)
            return _dar_forma(filas, esquema)

    async def get_tablas(self, session_factory: async_sessionmaker) -> tablas_schema.TablasResponse:
        """
        Lee las seis tablas de forma concurrente y las devuelve con sus totales.

        Espera a que terminen todas las consultas. Si alguna falló, la operación
        completa falla con el primer error en el orden de las tablas y no se
        devuelve ningún resultado parcial.
        """
        async with self._operacion("volcado de tablas"):
            resultados = await asyncio.gather(
                self._leer_tabla(session_factory, cliente_crud.get_clientes, cliente_schema.ClienteResponse),
                self._leer_tabla(session_factory, freelancer_crud.get_freelancers, freelancer_schema.FreelancerResponse),
                self._leer_tabla(session_factory, proyecto_crud.get_proyectos, proyecto_schema.ProyectoListItem),
                self._leer_tabla(session_factory, habilidad_crud.get_habilidades, habilidad_schema.HabilidadResponse),
                self._leer_tabla(session_factory, aplicacion_crud.get_aplicaciones, aplicacion_schema.AplicacionVolcado),
                self._leer_tabla(
                    session_factory,
                    freelancer_habilidad_crud.get_relaciones,
                    freelancer_habilidad_schema.FreelancerHabilidadVolcado,
                ),
                return_exceptions=True,
            )
            for resultado in resultados:
                if isinstance(resultado, BaseException):
                    raise resultado

        clientes, freelancers, proyectos, habilidades, aplicaciones, relaciones = resultados
        logger.info(
            f"📊 TABLAS: {len(clientes)} clientes, {len(freelancers)} freelancers, "
            f"{len(proyectos)} proyectos, {len(aplicaciones)} aplicaciones"
        )
        return tablas_schema.TablasResponse(
            mensaje="Información completa de todas las tablas",
            estadisticas=tablas_schema.Estadisticas(
                total_clientes=len(clientes),
                total_freelancers=len(freelancers),
                total_proyectos=len(proyectos),
                total_habilidades=len(habilidades),
                total_aplicaciones=len(aplicaciones),
                total_relaciones_habilidades=len(relaciones),
            ),
            datos=tablas_schema.DatosTablas(
                clientes=clientes,
                freelancers=freelancers,
                proyectos=proyectos,
                habilidades=habilidades,
                aplicaciones=aplicaciones,
                freelancer_habilidad=relaciones,
            ),
        )

    # ========================================
    # CLIENTES
    # ========================================

    async def listar_clientes(self, db: AsyncSession) -> cliente_schema.ClienteListResponse:
        async with self._operacion("listar clientes", db):
            clientes = _dar_forma(await cliente_crud.get_clientes(db), cliente_schema.ClienteResponse)
        return cliente_schema.ClienteListResponse(total=len(clientes), clientes=clientes)

    async def obtener_cliente(self, db: AsyncSession, id_cliente: int) -> cliente_schema.ClienteResponse:
        async with self._operacion(f"obtener cliente {id_cliente}", db):
            cliente = await cliente_crud.get_cliente(db, id_cliente)
            return cliente_schema.ClienteResponse.model_validate(cliente)

    async def crear_cliente(
        self, db: AsyncSession, cliente_in: cliente_schema.ClienteCreate
    ) -> List[cliente_schema.ClienteResponse]:
        async with self._operacion("crear cliente", db):
            cliente = await cliente_crud.create_cliente(db, cliente_in.model_dump(exclude_unset=True))
        logger.info(f"🆕 CLIENTE: Creado cliente {cliente.id_cliente}")
        return [cliente_schema.ClienteResponse.model_validate(cliente)]

    # ========================================
    # FREELANCERS
    # ========================================

    async def listar_freelancers(self, db: AsyncSession) -> freelancer_schema.FreelancerListResponse:
        async with self._operacion("listar freelancers", db):
            freelancers = _dar_forma(await freelancer_crud.get_freelancers(db), freelancer_schema.FreelancerResponse)
        return freelancer_schema.FreelancerListResponse(total=len(freelancers), freelancers=freelancers)

    async def obtener_freelancer(self, db: AsyncSession, id_freelancer: int) -> freelancer_schema.FreelancerDetalle:
        async with self._operacion(f"obtener freelancer {id_freelancer}", db):
            freelancer = await freelancer_crud.get_freelancer_con_habilidades(db, id_freelancer)
            return freelancer_schema.FreelancerDetalle.model_validate(freelancer)

    async def crear_freelancer(
        self, db: AsyncSession, freelancer_in: freelancer_schema.FreelancerCreate
    ) -> List[freelancer_schema.FreelancerResponse]:
        async with self._operacion("crear freelancer", db):
            freelancer = await freelancer_crud.create_freelancer(db, freelancer_in.model_dump(exclude_unset=True))
        logger.info(f"🆕 FREELANCER: Creado freelancer {freelancer.id_freelancer}")
        return [freelancer_schema.FreelancerResponse.model_validate(freelancer)]

    # ========================================
    # PROYECTOS
    # ========================================

    async def listar_proyectos(self, db: AsyncSession) -> proyecto_schema.ProyectoListResponse:
        async with self._operacion("listar proyectos", db):
            proyectos = _dar_forma(await proyecto_crud.get_proyectos(db), proyecto_schema.ProyectoListItem)
        return proyecto_schema.ProyectoListResponse(total=len(proyectos), proyectos=proyectos)

    async def obtener_proyecto(self, db: AsyncSession, id_proyecto: int) -> proyecto_schema.ProyectoDetalle:
        async with self._operacion(f"obtener proyecto {id_proyecto}", db):
            proyecto = await proyecto_crud.get_proyecto_detalle(db, id_proyecto)
            return proyecto_schema.ProyectoDetalle.model_validate(proyecto)

    async def crear_proyecto(
        self, db: AsyncSession, proyecto_in: proyecto_schema.ProyectoCreate
    ) -> List[proyecto_schema.ProyectoResponse]:
        async with self._operacion("crear proyecto", db):
            proyecto = await proyecto_crud.create_proyecto(db, proyecto_in.model_dump(exclude_unset=True))
        logger.info(f"🆕 PROYECTO: Creado proyecto {proyecto.id_proyecto}")
        return [proyecto_schema.ProyectoResponse.model_validate(proyecto)]

    # ========================================
    # HABILIDADES
    # ========================================

    async def listar_habilidades(self, db: AsyncSession) -> habilidad_schema.HabilidadListResponse:
        async with self._operacion("listar habilidades", db):
            habilidades = _dar_forma(await habilidad_crud.get_habilidades(db), habilidad_schema.HabilidadResponse)
        return habilidad_schema.HabilidadListResponse(total=len(habilidades), habilidades=habilidades)

    async def crear_habilidad(
        self, db: AsyncSession, habilidad_in: habilidad_schema.HabilidadCreate
    ) -> List[habilidad_schema.HabilidadResponse]:
        async with self._operacion("crear habilidad", db):
            habilidad = await habilidad_crud.create_habilidad(db, habilidad_in.model_dump(exclude_unset=True))
        return [habilidad_schema.HabilidadResponse.model_validate(habilidad)]

    # ========================================
    # APLICACIONES
    # ========================================

    async def listar_aplicaciones(self, db: AsyncSession) -> aplicacion_schema.AplicacionListResponse:
        async with self._operacion("listar aplicaciones", db):
            aplicaciones = _dar_forma(await aplicacion_crud.get_aplicaciones(db), aplicacion_schema.AplicacionListItem)
        return aplicacion_schema.AplicacionListResponse(total=len(aplicaciones), aplicaciones=aplicaciones)

    async def crear_aplicacion(
        self, db: AsyncSession, aplicacion_in: aplicacion_schema.AplicacionCreate
    ) -> List[aplicacion_schema.AplicacionResponse]:
        async with self._operacion("crear aplicación", db):
            aplicacion = await aplicacion_crud.create_aplicacion(db, aplicacion_in.model_dump(exclude_unset=True))
        logger.info(f"🆕 APLICACIÓN: Creada aplicación {aplicacion.id_aplicacion}")
        return [aplicacion_schema.AplicacionResponse.model_validate(aplicacion)]

    async def actualizar_aplicacion(
        self, db: AsyncSession, id_aplicacion: int, aplicacion_in: aplicacion_schema.AplicacionUpdate
    ) -> List[aplicacion_schema.AplicacionResponse]:
        """Cambia el estado de una aplicación. Devuelve las filas actualizadas (posiblemente ninguna)."""
        async with self._operacion(f"actualizar aplicación {id_aplicacion}", db):
            aplicaciones = await aplicacion_crud.update_aplicacion(
                db, id_aplicacion, aplicacion_in.model_dump(exclude_unset=True)
            )
        logger.info(f"🔄 APLICACIÓN: {len(aplicaciones)} fila(s) actualizada(s) para id {id_aplicacion}")
        return _dar_forma(aplicaciones, aplicacion_schema.AplicacionResponse)

    # ========================================
    # FREELANCER-HABILIDADES
    # ========================================

    async def listar_relaciones(self, db: AsyncSession) -> freelancer_habilidad_schema.RelacionListResponse:
        async with self._operacion("listar relaciones freelancer-habilidad", db):
            relaciones = _dar_forma(
                await freelancer_habilidad_crud.get_relaciones(db),
                freelancer_habilidad_schema.FreelancerHabilidadListItem,
            )
        return freelancer_habilidad_schema.RelacionListResponse(total=len(relaciones), relaciones=relaciones)

    async def crear_relacion(
        self, db: AsyncSession, relacion_in: freelancer_habilidad_schema.FreelancerHabilidadCreate
    ) -> List[freelancer_habilidad_schema.FreelancerHabilidadResponse]:
        async with self._operacion("crear relación freelancer-habilidad", db):
            relacion = await freelancer_habilidad_crud.create_relacion(db, relacion_in.model_dump(exclude_unset=True))
        return [freelancer_habilidad_schema.FreelancerHabilidadResponse.model_validate(relacion)]


marketplace_service = MarketplaceService()
