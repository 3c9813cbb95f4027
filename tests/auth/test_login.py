"""
Tests for local and Google login.
"""
from sqlalchemy import func, select

from vetclinic.auth import service
from vetclinic.auth.models import AuthProvider, RoleName, User, UserRole
from vetclinic.core import security


def test_login_returns_token_that_round_trips(client, client_user, token_service):
    response = client.post("/api/auth/login-admin", json={"email": "cliente@example.com", "password": "secreto1"})

    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is True
    assert data["rol"] == RoleName.CLIENTE
    assert data["user"]["email"] == "cliente@example.com"
    assert "password" not in data["user"]

    subject = token_service.verify(data["token"])
    assert subject.id == client_user.id
    assert subject.email == "cliente@example.com"


def test_admin_login_reports_admin_role(client, admin):
    response = client.post("/api/auth/login-admin", json={"email": "admin@example.com", "password": "admin123"})
    assert response.json()["rol"] == RoleName.ADMIN


def test_unknown_email_and_wrong_password_look_the_same(client, client_user):
    unknown = client.post("/api/auth/login-admin", json={"email": "nadie@example.com", "password": "secreto1"})
    wrong = client.post("/api/auth/login-admin", json={"email": "cliente@example.com", "password": "otra"})

    assert unknown.status_code == wrong.status_code == 401
    assert unknown.json() == wrong.json() == {"ok": False, "msg": "Credenciales inválidas"}


def count_dummy_checks(monkeypatch):
    calls = []
    real = security.pwd_context.dummy_verify

    def dummy_verify(*args, **kwargs):
        calls.append(1)
        return real(*args, **kwargs)

    monkeypatch.setattr(security.pwd_context, "dummy_verify", dummy_verify)
    return calls


def test_unknown_email_still_pays_for_a_hash_check(client, monkeypatch):
    calls = count_dummy_checks(monkeypatch)

    response = client.post("/api/auth/login-admin", json={"email": "nadie@example.com", "password": "secreto1"})

    assert response.status_code == 401
    assert calls == [1]


def test_wrong_password_does_not_use_the_dummy_check(client, client_user, monkeypatch):
    calls = count_dummy_checks(monkeypatch)

    response = client.post("/api/auth/login-admin", json={"email": "cliente@example.com", "password": "otra"})

    assert response.status_code == 401
    assert calls == []


def test_login_without_fields_is_invalid_credentials(client):
    response = client.post("/api/auth/login-admin", json={})
    assert response.status_code == 401


def test_google_user_cannot_use_password_login(client, fake_verifier):
    fake_verifier.add("g-token", "g@example.com")
    client.post("/api/auth/google", json={"credential": "g-token"})

    response = client.post("/api/auth/login-admin", json={"email": "g@example.com", "password": ""})
    assert response.status_code == 401


def test_registration_scenario(client):
    """Register, log in, then get refused on an administrator route."""
    registered = client.post("/api/auth/register", json={"nombre": "Ana", "email": "a@x.com", "password": "p1"})
    assert registered.json()["ok"] is True

    login = client.post("/api/auth/login-admin", json={"email": "a@x.com", "password": "p1"})
    assert login.json()["ok"] is True
    assert login.json()["rol"] == "CLIENTE"

    response = client.get("/api/usuarios", headers={"Authorization": f"Bearer {login.json()['token']}"})
    assert response.status_code == 403
    assert response.json()["ok"] is False


def test_google_login_creates_one_user_with_one_role(client, fake_verifier, db, token_service):
    fake_verifier.add("g-token", "nuevo@gmail.com", name="Nuevo", picture="https://example.com/n.png")

    first = client.post("/api/auth/google", json={"credential": "g-token"})
    second = client.post("/api/auth/google", json={"id_token": "g-token"})

    assert first.status_code == second.status_code == 200
    assert first.json()["rol"] == second.json()["rol"] == RoleName.CLIENTE
    assert first.json()["user"]["id"] == second.json()["user"]["id"]

    users = db.scalars(select(User).where(User.email == "nuevo@gmail.com")).all()
    assert len(users) == 1
    user = users[0]
    assert user.proveedor == AuthProvider.GOOGLE
    assert user.password is None
    assert user.foto_perfil == "https://example.com/n.png"
    assert db.scalar(select(func.count()).select_from(UserRole).where(UserRole.usuario_id == user.id)) == 1

    assert token_service.verify(first.json()["token"]).id == user.id


def test_google_login_reuses_local_account(client, fake_verifier, client_user, db):
    fake_verifier.add("g-token", "cliente@example.com")

    response = client.post("/api/auth/google", json={"credential": "g-token"})

    assert response.json()["user"]["id"] == client_user.id
    assert db.scalar(select(func.count()).select_from(User)) == 1


def test_google_login_reports_resolved_role(client, fake_verifier, admin):
    fake_verifier.add("g-token", "admin@example.com")

    response = client.post("/api/auth/google", json={"credential": "g-token"})

    assert response.json()["rol"] == RoleName.ADMIN


def test_google_login_with_bad_token(client, db):
    response = client.post("/api/auth/google", json={"credential": "forged"})

    assert response.status_code == 401
    assert response.json() == {"ok": False, "msg": "Token de Google inválido"}
    assert db.scalar(select(func.count()).select_from(User)) == 0


def test_concurrent_first_google_login_reuses_the_winner(db, fake_verifier, token_service, monkeypatch):
    fake_verifier.add("g-token", "nuevo@gmail.com", name="Nuevo")
    winner = service.login_google(db, token_service, fake_verifier, "g-token")["user"]

    # The first lookup misses, as if another request inserted in between
    real_lookup = service.get_user_by_email
    lookups = []

    def lookup(*args, **kwargs):
        lookups.append(1)
        if len(lookups) == 1:
            return None
        return real_lookup(*args, **kwargs)

    monkeypatch.setattr(service, "get_user_by_email", lookup)

    payload = service.login_google(db, token_service, fake_verifier, "g-token")

    assert payload["user"].id == winner.id
    assert payload["rol"] == RoleName.CLIENTE
    assert db.scalar(select(func.count()).select_from(User)) == 1
    assert db.scalar(select(func.count()).select_from(UserRole)) == 1
