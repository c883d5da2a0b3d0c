"""Configuración de pytest y fixtures compartidas.

Cada test usa un archivo SQLite nuevo (aiosqlite) con las seis tablas creadas,
de modo que los tests quedan aislados y no dejan artefactos.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import NullPool

from app.api import deps
from app.core.config import settings
from app.db.database import build_engine, build_session_factory, create_tables
from app.main import app


@pytest.fixture
def engine(tmp_path):
    # NullPool: ninguna conexión queda atada al event loop que la creó
    db_engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'freelance.db'}", poolclass=NullPool)
    asyncio.run(create_tables(db_engine))
    yield db_engine
    asyncio.run(db_engine.dispose())


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def client(session_factory, monkeypatch):
    monkeypatch.setattr(settings, "ERROR_STATUS_MODE", "legacy")
    app.dependency_overrides[deps.get_session_factory] = lambda: session_factory
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def lenient_client(session_factory, monkeypatch):
    """Cliente que entrega la respuesta 500 en lugar de relanzar la excepción del servidor."""
    monkeypatch.setattr(settings, "ERROR_STATUS_MODE", "legacy")
    app.dependency_overrides[deps.get_session_factory] = lambda: session_factory
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def typed_errors(monkeypatch):
    monkeypatch.setattr(settings, "ERROR_STATUS_MODE", "typed")


# ---------------------------------------------------------------------------
# Helpers para sembrar datos a través de la propia API
# ---------------------------------------------------------------------------

def crear(client, ruta, **campos):
    response = client.post(ruta, json=campos)
    assert response.status_code == 201, response.text
    filas = response.json()
    assert len(filas) == 1
    return filas[0]


@pytest.fixture
def marketplace(client):
    """Un cliente con un proyecto, un freelancer con una habilidad y una aplicación."""
    cliente = crear(client, "/clientes", nombre="Ana", correo="ana@x.com", telefono="555", contrasena="pw")
    freelancer = crear(
        client,
        "/freelancers",
        nombre="Luis",
        telefono="777",
        correo="luis@x.com",
        contrasena="secreta",
        biografia="Desarrollador backend",
    )
    habilidad = crear(client, "/habilidades", nombre="Python")
    relacion = crear(
        client,
        "/freelancer-habilidades",
        id_freelancer=freelancer["id_freelancer"],
        id_habilidad=habilidad["id_habilidad"],
        anios_experiencia=5,
        nivel="avanzado",
    )
    proyecto = crear(
        client,
        "/proyectos",
        titulo="Tienda online",
        descripcion="E-commerce con pagos",
        presupuesto=1500.5,
        id_cliente=cliente["id_cliente"],
    )
    aplicacion = crear(
        client,
        "/aplicaciones",
        id_freelancer=freelancer["id_freelancer"],
        id_proyecto=proyecto["id_proyecto"],
        mensaje_propuesta="Lo entrego en dos semanas",
    )
    return {
        "cliente": cliente,
        "freelancer": freelancer,
        "habilidad": habilidad,
        "relacion": relacion,
        "proyecto": proyecto,
        "aplicacion": aplicacion,
    }
