"""Tests del índice, del volcado completo (/tablas) y de la estructura (/schema)."""

import asyncio

import pytest
from sqlalchemy.exc import OperationalError

from app.core.errors import FalloConexion, StoreOperationError
from app.crud import (
    aplicacion_crud,
    cliente_crud,
    freelancer_crud,
    freelancer_habilidad_crud,
    habilidad_crud,
    proyecto_crud,
)
from app.services.marketplace_service import MarketplaceService
from app.services.schema_catalog import ESQUEMA_TABLAS

TOTALES = {
    "total_clientes": "clientes",
    "total_freelancers": "freelancers",
    "total_proyectos": "proyectos",
    "total_habilidades": "habilidades",
    "total_aplicaciones": "aplicaciones",
    "total_relaciones_habilidades": "freelancer_habilidad",
}


def test_root_lists_routes(client):
    body = client.get("/").json()

    assert body["mensaje"] == "API de Freelancer conectada a Supabase"
    assert "/tablas" in body["rutas"]
    assert "/freelancer-habilidades" in body["rutas"]


def test_tablas_empty_store(client):
    response = client.get("/tablas")

    assert response.status_code == 200
    body = response.json()
    assert set(body["estadisticas"]) == set(TOTALES)
    assert all(total == 0 for total in body["estadisticas"].values())
    assert all(filas == [] for filas in body["datos"].values())


def test_tablas_counts_match_rows(client, marketplace):
    client.post("/clientes", json={"nombre": "Beto", "correo": "beto@x.com", "contrasena": "pw"})

    body = client.get("/tablas").json()

    for total, tabla in TOTALES.items():
        assert body["estadisticas"][total] == len(body["datos"][tabla])
    assert body["estadisticas"]["total_clientes"] == 2


def test_tablas_embeddings(client, marketplace):
    datos = client.get("/tablas").json()["datos"]

    assert datos["proyectos"][0]["clientes"] == {"nombre": "Ana", "correo": "ana@x.com"}
    assert datos["aplicaciones"][0]["freelancers"] == {"nombre": "Luis", "correo": "luis@x.com"}
    assert datos["aplicaciones"][0]["proyectos"] == {"titulo": "Tienda online"}
    assert datos["freelancer_habilidad"][0]["freelancers"] == {"nombre": "Luis"}
    assert datos["freelancer_habilidad"][0]["habilidades"] == {"nombre": "Python"}


def test_schema_is_static_description(client):
    body = client.get("/schema").json()

    assert body["mensaje"] == "Estructura de la base de datos"
    assert set(body["tablas"]) == set(TOTALES.values())
    assert body["tablas"]["aplicaciones"]["columnas"]["estado"] == "varchar (pendiente, aceptado, rechazado)"
    assert body["tablas"] == {nombre: dict(tabla) for nombre, tabla in ESQUEMA_TABLAS.items()}


# ---------------------------------------------------------------------------
# Fan-out / fan-in
# ---------------------------------------------------------------------------

LECTURAS = [
    (cliente_crud, "get_clientes"),
    (freelancer_crud, "get_freelancers"),
    (proyecto_crud, "get_proyectos"),
    (habilidad_crud, "get_habilidades"),
    (aplicacion_crud, "get_aplicaciones"),
    (freelancer_habilidad_crud, "get_relaciones"),
]


def test_tablas_issues_reads_concurrently(session_factory, monkeypatch):
    iniciadas = []

    async def scenario():
        todas = asyncio.Event()

        def lectura_lenta(nombre):
            async def leer(db):
                iniciadas.append(nombre)
                if len(iniciadas) == len(LECTURAS):
                    todas.set()
                # Solo termina si las seis lecturas están en vuelo a la vez
                await asyncio.wait_for(todas.wait(), timeout=2)
                return []
            return leer

        for modulo, funcion in LECTURAS:
            monkeypatch.setattr(modulo, funcion, lectura_lenta(funcion))
        return await MarketplaceService().get_tablas(session_factory)

    resultado = asyncio.run(scenario())

    assert len(iniciadas) == 6
    assert resultado.estadisticas.total_clientes == 0


def test_tablas_first_error_wins_in_table_order(session_factory, monkeypatch):
    terminadas = []

    def falla(mensaje, demora):
        async def leer(db):
            await asyncio.sleep(demora)
            terminadas.append(mensaje)
            raise OperationalError("SELECT", {}, Exception(mensaje))
        return leer

    async def vacia(db):
        terminadas.append("ok")
        return []

    for modulo, funcion in LECTURAS:
        monkeypatch.setattr(modulo, funcion, vacia)
    # freelancers falla después que aplicaciones, pero va antes en el orden de tablas
    monkeypatch.setattr(freelancer_crud, "get_freelancers", falla("freelancers caído", 0.05))
    monkeypatch.setattr(aplicacion_crud, "get_aplicaciones", falla("aplicaciones caído", 0))

    with pytest.raises(StoreOperationError) as excinfo:
        asyncio.run(MarketplaceService().get_tablas(session_factory))

    assert isinstance(excinfo.value, FalloConexion)
    assert excinfo.value.message == "freelancers caído"
    # Se esperó a que terminaran todas las lecturas
    assert len(terminadas) == 6


def test_tablas_failure_is_500_without_partial_data(client, monkeypatch):
    async def caida(db):
        raise OperationalError("SELECT", {}, Exception("could not connect to server"))

    monkeypatch.setattr(habilidad_crud, "get_habilidades", caida)

    response = client.get("/tablas")

    assert response.status_code == 500
    assert response.json() == {"error": "could not connect to server"}
