"""
Tests for appointment endpoints.
"""
import pytest


@pytest.fixture
def booking(client, admin, client_user, make_user, auth_headers):
    """A veterinarian and a client pet, ready to book."""
    admin_headers = auth_headers(admin)
    vet_user = make_user(email="vet@example.com", nombre="Dr. Luis")
    vet_id = client.post(
        "/api/veterinarios",
        json={"usuario_id": vet_user.id, "especialidad": "General"},
        headers=admin_headers,
    ).json()["id"]
    pet_id = client.post(
        "/api/cliente/mascotas",
        json={"usuario_id": client_user.id, "nombre": "Toby", "especie": "Perro"},
        headers=auth_headers(client_user),
    ).json()["id"]
    return {"vet_id": vet_id, "pet_id": pet_id, "admin": admin_headers, "client": auth_headers(client_user), "user": client_user}


def book(client, booking, fecha="2026-11-02T10:00:00", motivo="Vacuna"):
    return client.post(
        "/api/cliente/citas",
        json={"mascota_id": booking["pet_id"], "veterinario_id": booking["vet_id"], "fecha": fecha, "motivo": motivo},
        headers=booking["client"],
    )


def test_client_books_pending_appointment(client, booking):
    response = book(client, booking)

    assert response.status_code == 200
    assert response.json()["ok"] is True
    assert response.json()["msg"] == "Cita creada correctamente"

    citas = client.get(f"/api/cliente/citas/{booking['user'].id}", headers=booking["client"]).json()["citas"]
    assert len(citas) == 1
    assert citas[0]["estado"] == "PENDIENTE"
    assert citas[0]["mascota"] == "Toby"
    assert citas[0]["veterinario"] == "Dr. Luis"
    assert citas[0]["id"] == response.json()["id"]


def test_client_appointments_latest_first(client, booking):
    book(client, booking, fecha="2026-11-01T09:00:00", motivo="Control")
    book(client, booking, fecha="2026-12-01T09:00:00", motivo="Vacuna")

    citas = client.get(f"/api/cliente/citas/{booking['user'].id}", headers=booking["client"]).json()["citas"]
    assert [c["motivo"] for c in citas] == ["Vacuna", "Control"]


@pytest.mark.parametrize("missing", ["mascota_id", "veterinario_id", "fecha", "motivo"])
def test_booking_requires_every_field(client, booking, missing):
    body = {"mascota_id": booking["pet_id"], "veterinario_id": booking["vet_id"], "fecha": "2026-11-02T10:00:00", "motivo": "Vacuna"}
    body.pop(missing)

    response = client.post("/api/cliente/citas", json=body, headers=booking["client"])

    assert response.status_code == 400
    assert response.json() == {"ok": False, "msg": "Faltan datos para crear la cita"}


def test_booking_unknown_veterinarian(client, booking):
    response = client.post(
        "/api/cliente/citas",
        json={"mascota_id": booking["pet_id"], "veterinario_id": 999, "fecha": "2026-11-02T10:00:00", "motivo": "Vacuna"},
        headers=booking["client"],
    )
    assert response.status_code == 404


def test_admin_lists_and_deletes_appointments(client, booking):
    first = book(client, booking, motivo="Control").json()["id"]
    second = book(client, booking, motivo="Vacuna").json()["id"]

    listing = client.get("/api/citas", headers=booking["admin"]).json()
    assert [c["id"] for c in listing["citas"]] == [second, first]
    assert set(listing["citas"][0]) == {"id", "mascota", "veterinario", "fecha", "motivo"}

    deleted = client.delete(f"/api/citas/{first}", headers=booking["admin"])
    assert deleted.json() == {"ok": True, "msg": "Cita eliminada"}

    listing = client.get("/api/citas", headers=booking["admin"]).json()
    assert [c["id"] for c in listing["citas"]] == [second]


def test_delete_missing_appointment(client, booking):
    response = client.delete("/api/citas/999", headers=booking["admin"])
    assert response.status_code == 404


def test_admin_appointment_routes_reject_clients(client, booking):
    cita = book(client, booking).json()["id"]
    assert client.get("/api/citas", headers=booking["client"]).status_code == 403
    assert client.delete(f"/api/citas/{cita}", headers=booking["client"]).status_code == 403


def test_client_appointment_routes_require_token(client, booking):
    assert client.get(f"/api/cliente/citas/{booking['user'].id}").status_code == 401
    assert client.post("/api/cliente/citas", json={}).status_code == 401
