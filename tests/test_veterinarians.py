"""
Tests for veterinarian endpoints.
"""
import pytest


@pytest.fixture
def vet_user(make_user):
    return make_user(email="vet@example.com", password="vet12345", nombre="Dra. Rosa")


def create_vet(client, headers, usuario_id, especialidad="Cirugía", telefono="555-0101"):
    return client.post(
        "/api/veterinarios",
        json={"usuario_id": usuario_id, "especialidad": especialidad, "telefono": telefono},
        headers=headers,
    )


def test_create_veterinarian_copies_user_details(client, admin, vet_user, auth_headers):
    headers = auth_headers(admin)

    response = create_vet(client, headers, vet_user.id)

    assert response.status_code == 200
    assert response.json()["ok"] is True
    vet_id = response.json()["id"]

    listing = client.get("/api/veterinarios", headers=headers).json()
    assert listing["ok"] is True
    assert listing["veterinarios"] == [{
        "id": vet_id,
        "usuario_id": vet_user.id,
        "nombre": "Dra. Rosa",
        "email": "vet@example.com",
        "especialidad": "Cirugía",
        "telefono": "555-0101",
    }]


def test_veterinarian_name_is_a_snapshot(client, db, admin, vet_user, auth_headers):
    headers = auth_headers(admin)
    create_vet(client, headers, vet_user.id)

    vet_user.nombre = "Rosa Renamed"
    db.commit()

    listing = client.get("/api/veterinarios", headers=headers).json()
    assert listing["veterinarios"][0]["nombre"] == "Dra. Rosa"


def test_create_veterinarian_for_unknown_user(client, admin, auth_headers):
    response = create_vet(client, auth_headers(admin), 999)

    assert response.status_code == 404
    assert response.json() == {"ok": False, "msg": "Usuario no encontrado"}


def test_veterinarian_admin_routes_are_admin_only(client, client_user, vet_user, auth_headers):
    headers = auth_headers(client_user)
    assert create_vet(client, headers, vet_user.id).status_code == 403
    assert client.get("/api/veterinarios", headers=headers).status_code == 403
    assert client.get("/api/veterinarios/1/citas-count", headers=headers).status_code == 403


def test_public_listing_hides_contact_details(client, admin, client_user, vet_user, auth_headers):
    create_vet(client, auth_headers(admin), vet_user.id)

    response = client.get("/api/public/veterinarios", headers=auth_headers(client_user))

    assert response.status_code == 200
    assert response.json()["veterinarios"] == [{"id": 1, "nombre": "Dra. Rosa", "especialidad": "Cirugía"}]


def test_public_listing_requires_token(client):
    assert client.get("/api/public/veterinarios").status_code == 401


def test_appointment_count(client, admin, client_user, vet_user, auth_headers):
    admin_headers = auth_headers(admin)
    vet_id = create_vet(client, admin_headers, vet_user.id).json()["id"]
    pet_id = client.post(
        "/api/mascotas",
        json={"usuario_id": client_user.id, "nombre": "Toby", "especie": "Perro"},
        headers=admin_headers,
    ).json()["id"]

    assert client.get(f"/api/veterinarios/{vet_id}/citas-count", headers=admin_headers).json() == {"ok": True, "total": 0}

    for fecha in ("2026-11-02T10:00:00", "2026-11-03T11:30:00"):
        client.post(
            "/api/cliente/citas",
            json={"mascota_id": pet_id, "veterinario_id": vet_id, "fecha": fecha, "motivo": "Vacuna"},
            headers=auth_headers(client_user),
        )

    assert client.get(f"/api/veterinarios/{vet_id}/citas-count", headers=admin_headers).json() == {"ok": True, "total": 2}
