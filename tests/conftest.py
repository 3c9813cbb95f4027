"""
Test configuration for the veterinary clinic backend.
"""
import os

# Settings are read on first use; point them at an in-memory database
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["GOOGLE_CLIENT_ID"] = "test-client-id.apps.googleusercontent.com"
os.environ.pop("BOOTSTRAP_ADMIN_EMAIL", None)
os.environ.pop("BOOTSTRAP_ADMIN_PASSWORD", None)

import pytest
from fastapi.testclient import TestClient

from vetclinic.auth.dependencies import get_identity_verifier, get_token_service
from vetclinic.auth.exceptions import InvalidFederatedTokenException
from vetclinic.auth.federated import FederatedIdentity
from vetclinic.auth.models import AuthProvider, RoleName, User
from vetclinic.auth.roles import assign_role
from vetclinic.core.bootstrap import seed_roles
from vetclinic.core.security import TokenService, hash_password
from vetclinic.database import Base, get_db, get_engine, get_session_factory
from vetclinic.main import app

TEST_SECRET = "test-secret-key"


class FakeIdentityVerifier:
    """Stands in for Google: maps raw tokens to identities."""

    def __init__(self):
        self.identities = {}

    def verify(self, raw_token):
        if raw_token not in self.identities:
            raise InvalidFederatedTokenException()
        return self.identities[raw_token]

    def add(self, raw_token, email, name="Google User", picture=None):
        self.identities[raw_token] = FederatedIdentity(email=email, display_name=name, picture_url=picture)


@pytest.fixture(scope="function")
def db():
    """
    Create a fresh database for each test.
    """
    engine = get_engine()
    Base.metadata.create_all(bind=engine)

    db = get_session_factory()()
    seed_roles(db)
    try:
        yield db
    finally:
        db.close()

    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def token_service():
    return TokenService(TEST_SECRET)


@pytest.fixture
def fake_verifier():
    return FakeIdentityVerifier()


@pytest.fixture(scope="function")
def client(db, token_service, fake_verifier):
    """
    Create a test client with a test database session.
    """
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_token_service] = lambda: token_service
    app.dependency_overrides[get_identity_verifier] = lambda: fake_verifier

    with TestClient(app) as client:
        yield client

    app.dependency_overrides = {}


@pytest.fixture
def make_user(db):
    """Create a local user holding the given roles."""
    def _make_user(email="cliente@example.com", password="secreto1", nombre="Cliente", roles=(RoleName.CLIENTE,)):
        user = User(nombre=nombre, email=email, password=hash_password(password), proveedor=AuthProvider.LOCAL)
        db.add(user)
        db.flush()
        for role_name in roles:
            assign_role(db, user.id, role_name)
        db.commit()
        db.refresh(user)
        return user
    return _make_user


@pytest.fixture
def auth_headers(token_service):
    """Build an Authorization header for a user."""
    def _auth_headers(user):
        return {"Authorization": f"Bearer {token_service.issue(user.id, user.email)}"}
    return _auth_headers


@pytest.fixture
def admin(make_user):
    return make_user(email="admin@example.com", password="admin123", nombre="Admin", roles=(RoleName.ADMIN,))


@pytest.fixture
def client_user(make_user):
    return make_user()
