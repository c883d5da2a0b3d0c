# backend/app/main.py
"""
Punto de entrada principal de la aplicación FastAPI.

Este módulo configura y inicializa la aplicación completa:
- Registro de routers de la API
- Middleware CORS
- Traducción de fallas del almacén a respuestas {"error": mensaje}
- Archivos estáticos del dashboard (opcional)
- Eventos del ciclo de vida de la aplicación (startup)
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from app.core.config import settings  # Configuración centralizada de la aplicación
from app.core.errors import StoreOperationError
from app.api.v1.api_router import api_router_v1
from app.db.database import create_tables, engine
from app.schemas.tablas_schema import IndiceResponse
from app.services.marketplace_service import marketplace_service

logging.basicConfig(level=settings.LOG_LEVEL, format=settings.LOG_FORMAT)
logger = logging.getLogger(__name__)

# ========================================
# CONFIGURACIÓN DE LA APLICACIÓN FASTAPI
# ========================================

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.PROJECT_VERSION,
    description="API para el marketplace de freelancers: clientes, proyectos, habilidades y aplicaciones"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ========================================
# MANEJO DE ERRORES
# ========================================

@app.exception_handler(StoreOperationError)
async def store_error_handler(request: Request, exc: StoreOperationError):
    """
    Respuesta uniforme ante cualquier falla del almacén.

    En modo "legacy" siempre es 500; en modo "typed" el código depende del tipo
    de falla. El mensaje del almacén se entrega sin cambios.
    """
    return JSONResponse(
        status_code=exc.status_code(settings.ERROR_STATUS_MODE),
        content={"error": exc.message},
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    mensaje = "; ".join(
        f"{'.'.join(str(parte) for parte in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    logger.warning(f"⚠️ PETICIÓN: {request.method} {request.url.path} rechazada: {mensaje}")
    status_code = 422 if settings.ERROR_STATUS_MODE == "typed" else 500
    return JSONResponse(status_code=status_code, content={"error": mensaje})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    """Cualquier otra excepción también se responde como {"error": mensaje} con 500."""
    logger.exception(f"❌ ERROR: {request.method} {request.url.path} falló: {exc}")
    return JSONResponse(status_code=500, content={"error": str(exc)})

# ========================================
# REGISTRO DE ROUTERS DE LA API
# ========================================

app.include_router(api_router_v1, prefix=settings.API_PREFIX)


@app.get("/", tags=["Root"], response_model=IndiceResponse)
async def read_root():
    """
    Endpoint raíz: confirma que la API está operativa y lista las rutas disponibles.

    Example:
        GET /
        Response: {"mensaje": "API de Freelancer conectada a Supabase", "rutas": {...}}
    """
    return marketplace_service.get_indice()

# ========================================
# DASHBOARD Y ARCHIVOS ESTÁTICOS
# ========================================

if settings.STATIC_PATH:
    @app.get("/dashboard", include_in_schema=False)
    async def read_dashboard():
        return FileResponse(settings.STATIC_PATH / "freelancer-dashboard.html")

    # Se monta al final para que las rutas de la API tengan prioridad
    app.mount("/", StaticFiles(directory=settings.STATIC_PATH), name="static")

# ========================================
# EVENTOS DEL CICLO DE VIDA DE LA APLICACIÓN
# ========================================

@app.on_event("startup")
async def startup_event():
    """
    Evento ejecutado al iniciar la aplicación.

    Crea las tablas si DB_CREATE_TABLES está activo (solo desarrollo local)
    y registra las URLs principales.
    """
    if settings.DB_CREATE_TABLES:
        await create_tables(engine)

    base_url = f"http://localhost:{settings.PORT}{settings.API_PREFIX}"
    logger.info(f"🚀 Servidor corriendo en {base_url}")
    logger.info(f"📊 Ver TODA la información: {base_url}/tablas")
    logger.info(f"📋 Ver estructura: {base_url}/schema")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)
