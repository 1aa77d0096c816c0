import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from reelgen.auth import hash_password, verify_password
from reelgen.db.session import get_db
from reelgen.main import app


@pytest.fixture
def tableless_client(client):
    """API whose database has no schema, so every query fails."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    factory = sessionmaker(bind=engine, autocommit=False, autoflush=False)

    def broken_db():
        session = factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = broken_db
    yield client
    engine.dispose()


def test_password_hash_round_trip():
    stored = hash_password("segredo123")

    assert stored.startswith("pbkdf2_sha256$")
    assert verify_password("segredo123", stored)
    assert not verify_password("outra", stored)
    assert not verify_password("segredo123", "lixo")


def test_sign_up_then_sign_in(client):
    response = client.post(
        "/auth/signup",
        json={"email": "Dona@Clinica.com", "password": "segredo123", "displayName": "Dona"},
    )
    assert response.status_code == 201
    assert response.json()["email"] == "dona@clinica.com"
    assert response.json()["displayName"] == "Dona"

    response = client.post("/auth/signin", json={"email": "dona@clinica.com", "password": "segredo123"})
    assert response.status_code == 200
    body = response.json()
    assert body["accessToken"]
    assert body["user"]["email"] == "dona@clinica.com"


def test_duplicate_sign_up_is_rejected(client):
    payload = {"email": "dona@clinica.com", "password": "segredo123"}
    client.post("/auth/signup", json=payload)

    response = client.post("/auth/signup", json=payload)

    assert response.status_code == 409
    assert response.json() == {"error": "User already registered"}


def test_short_password_is_rejected(client):
    response = client.post("/auth/signup", json={"email": "dona@clinica.com", "password": "123"})

    assert response.status_code == 422


def test_wrong_password_is_rejected(client):
    client.post("/auth/signup", json={"email": "dona@clinica.com", "password": "segredo123"})

    response = client.post("/auth/signin", json={"email": "dona@clinica.com", "password": "errada"})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid login credentials"}


def test_current_user_requires_token(client, auth_headers):
    assert client.get("/auth/user").status_code == 401
    assert client.get("/auth/user", headers={"Authorization": "Bearer desconhecido"}).status_code == 401

    response = client.get("/auth/user", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["email"] == "dona@clinica.com"


def test_sign_out_revokes_token(client, auth_headers):
    assert client.post("/auth/signout", headers=auth_headers).status_code == 204

    response = client.get("/auth/user", headers=auth_headers)
    assert response.status_code == 401
    assert response.json() == {"error": "Authentication required"}


@pytest.mark.parametrize(
    "method, path, body",
    [
        ("post", "/auth/signup", {"email": "dona@clinica.com", "password": "segredo123"}),
        ("post", "/auth/signin", {"email": "dona@clinica.com", "password": "segredo123"}),
        ("get", "/auth/user", None),
        ("get", "/reels", None),
    ],
)
def test_database_failure_returns_error_body(tableless_client, method, path, body):
    kwargs = {"headers": {"Authorization": "Bearer qualquer"}}
    if body is not None:
        kwargs["json"] = body

    response = getattr(tableless_client, method)(path, **kwargs)

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("application/json")
    assert "error" in response.json()
