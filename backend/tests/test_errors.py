"""Tests de la clasificación de fallas del almacén y de los modos de respuesta."""

import pytest
from sqlalchemy.exc import IntegrityError, InterfaceError, NoResultFound, OperationalError, ProgrammingError

from app.core.errors import (
    FalloConexion,
    RegistroNoEncontrado,
    StoreOperationError,
    ViolacionRestriccion,
    translate_store_error,
)
from app.crud import cliente_crud


@pytest.mark.parametrize(
    "exc, esperado, status_typed",
    [
        (NoResultFound("No row was found when one was required"), RegistroNoEncontrado, 404),
        (IntegrityError("INSERT", {}, Exception("duplicate key")), ViolacionRestriccion, 409),
        (OperationalError("SELECT", {}, Exception("connection refused")), FalloConexion, 503),
        (InterfaceError("SELECT", {}, Exception("connection is closed")), FalloConexion, 503),
        (ConnectionRefusedError("refused"), FalloConexion, 503),
        (ProgrammingError("SELECT", {}, Exception("syntax error")), StoreOperationError, 500),
    ],
)
def test_translate_store_error(exc, esperado, status_typed):
    error = translate_store_error(exc, operation="prueba")

    assert type(error) is esperado
    assert error.operation == "prueba"
    assert error.status_code("legacy") == 500
    assert error.status_code("typed") == status_typed


def test_dbapi_message_is_passed_verbatim():
    error = translate_store_error(IntegrityError("INSERT ...", {}, Exception('duplicate key value violates unique constraint "clientes_correo_key"')))

    assert error.message == 'duplicate key value violates unique constraint "clientes_correo_key"'


def test_typed_mode_not_found_is_404(client, typed_errors):
    response = client.get("/clientes/12345")

    assert response.status_code == 404
    assert "error" in response.json()


def test_typed_mode_constraint_violation_is_409(client, typed_errors):
    datos = {"nombre": "Ana", "correo": "ana@x.com", "contrasena": "pw"}
    assert client.post("/clientes", json=datos).status_code == 201

    response = client.post("/clientes", json=datos)

    assert response.status_code == 409


def test_typed_mode_connectivity_failure_is_503(client, typed_errors, monkeypatch):
    async def caida(db):
        raise OperationalError("SELECT", {}, Exception("server closed the connection"))

    monkeypatch.setattr(cliente_crud, "get_clientes", caida)

    response = client.get("/clientes")

    assert response.status_code == 503
    assert response.json() == {"error": "server closed the connection"}


def test_unparseable_body_uses_error_shape(client):
    response = client.post("/proyectos", json={"titulo": "X", "presupuesto": "mucho"})

    assert response.status_code == 500
    assert "presupuesto" in response.json()["error"]


def test_unparseable_body_typed_mode_is_422(client, typed_errors):
    response = client.post("/proyectos", json={"titulo": "X", "presupuesto": "mucho"})

    assert response.status_code == 422


def test_non_numeric_id_is_500(client):
    response = client.get("/clientes/abc")

    assert response.status_code == 500
    assert "error" in response.json()


def test_unexpected_exception_uses_error_shape(lenient_client, monkeypatch):
    async def rota(db):
        raise ValueError("fila con formato inesperado")

    monkeypatch.setattr(cliente_crud, "get_clientes", rota)

    response = lenient_client.get("/clientes")

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == {"error": "fila con formato inesperado"}


def test_id_out_of_driver_range_uses_error_shape(lenient_client):
    response = lenient_client.get("/clientes/99999999999999999999999")

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("application/json")
    assert response.json()["error"]


def test_unexpected_exception_in_tablas_uses_error_shape(lenient_client, monkeypatch):
    async def rota(db):
        raise RuntimeError("lectura interrumpida")

    monkeypatch.setattr(cliente_crud, "get_clientes", rota)

    response = lenient_client.get("/tablas")

    assert response.status_code == 500
    assert response.json() == {"error": "lectura interrumpida"}
