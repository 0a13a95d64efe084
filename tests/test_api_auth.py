import pytest
from fastapi import status
from jose import jwt

from p3_academy.core.config import settings


def test_register_and_login(client):
    payload = {"email": "lina@example.com", "username": "lina", "password": "s3cretpass", "first_name": "Lina"}
    response = client.post("/api/auth/register", json=payload)

    assert response.status_code == status.HTTP_201_CREATED
    body = response.json()
    assert body["data"]["username"] == "lina"
    assert body["data"]["role"] == "user"
    assert "hashed_password" not in body["data"]

    response = client.post("/api/auth/login", data={"username": "lina@example.com", "password": "s3cretpass"})
    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["data"]["token_type"] == "bearer"
    assert body["meta"]["user"]["username"] == "lina"

    token = body["data"]["access_token"]
    response = client.get("/api/auth/user", headers={"Authorization": f"Bearer {token}"})
    assert response.json()["data"]["email"] == "lina@example.com"


def test_login_with_username(client, user):
    response = client.post("/api/auth/login", data={"username": "candidate", "password": "password123"})
    assert response.status_code == status.HTTP_200_OK


def test_duplicate_registration_is_rejected(client, user):
    response = client.post(
        "/api/auth/register",
        json={"email": user.email, "username": "another", "password": "password123"},
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "Email already registered"

    response = client.post(
        "/api/auth/register",
        json={"email": "new@example.com", "username": user.username, "password": "password123"},
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "Username already taken"


def test_wrong_password(client, user):
    response = client.post("/api/auth/login", data={"username": "candidate", "password": "wrong-password"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_protected_route_requires_token(client):
    assert client.get("/api/auth/user").status_code == status.HTTP_401_UNAUTHORIZED

    response = client.get("/api/auth/user", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.parametrize("claims", [{"type": "access"}, {"type": "access", "sub": "abc"}])
def test_token_without_usable_subject_is_unauthorized(client, claims):
    token = jwt.encode(claims, settings.JWT_SECRET_KEY, algorithm=settings.ALGORITHM)
    response = client.get("/api/auth/user", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
