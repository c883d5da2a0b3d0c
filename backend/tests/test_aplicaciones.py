"""Tests de los endpoints de aplicaciones, incluido el PATCH del estado."""


def test_create_aplicacion_defaults_to_pendiente(client, marketplace):
    aplicacion = marketplace["aplicacion"]

    assert aplicacion["estado"] == "pendiente"
    assert aplicacion["id_freelancer"] == marketplace["freelancer"]["id_freelancer"]


def test_aplicacion_with_unknown_freelancer_is_500(client, marketplace):
    response = client.post(
        "/aplicaciones",
        json={
            "id_freelancer": 9999,
            "id_proyecto": marketplace["proyecto"]["id_proyecto"],
            "mensaje_propuesta": "Hola",
        },
    )

    assert response.status_code == 500
    assert "error" in response.json()
    assert client.get("/aplicaciones").json()["total"] == 1


def test_list_aplicaciones_embeds_freelancer_and_project(client, marketplace):
    body = client.get("/aplicaciones").json()

    assert body["total"] == 1
    aplicacion = body["aplicaciones"][0]
    assert aplicacion["freelancers"] == {"nombre": "Luis", "correo": "luis@x.com"}
    assert aplicacion["proyectos"] == {
        "titulo": "Tienda online",
        "presupuesto": 1500.5,
        "clientes": {"nombre": "Ana"},
    }


def test_patch_updates_only_estado(client, marketplace):
    original = marketplace["aplicacion"]

    response = client.patch(f"/aplicaciones/{original['id_aplicacion']}", json={"estado": "aceptado"})

    assert response.status_code == 200
    filas = response.json()
    assert len(filas) == 1
    assert filas[0] == {**original, "estado": "aceptado"}


def test_patch_ignores_other_fields(client, marketplace):
    original = marketplace["aplicacion"]

    response = client.patch(
        f"/aplicaciones/{original['id_aplicacion']}",
        json={"estado": "rechazado", "mensaje_propuesta": "cambiado", "id_proyecto": 77},
    )

    assert response.json()[0] == {**original, "estado": "rechazado"}


def test_patch_invalid_estado_keeps_row(client, marketplace):
    original = marketplace["aplicacion"]

    response = client.patch(f"/aplicaciones/{original['id_aplicacion']}", json={"estado": "archivado"})

    assert response.status_code == 500
    assert "CHECK" in response.json()["error"]
    fila = client.get("/aplicaciones").json()["aplicaciones"][0]
    assert fila["estado"] == "pendiente"


def test_patch_unknown_id_returns_empty_list(client):
    response = client.patch("/aplicaciones/555", json={"estado": "aceptado"})

    assert response.status_code == 200
    assert response.json() == []
