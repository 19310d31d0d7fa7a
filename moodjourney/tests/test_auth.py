"""
Tests for authentication and profile endpoints.
"""
from moodjourney.core.security import create_access_token, decode_access_token


def test_signup(client):
    """Test user signup."""
    response = client.post(
        "/api/auth/signup",
        json={
            "username": "testuser",
            "email": "test@example.com",
            "password": "testpassword123"
        }
    )
    assert response.status_code == 201
    assert response.json()["username"] == "testuser"
    assert "hashed_password" not in response.json()


def test_signup_duplicate_username(client):
    payload = {"username": "testuser", "email": "test@example.com", "password": "testpassword123"}
    client.post("/api/auth/signup", json=payload)
    response = client.post("/api/auth/signup", json={**payload, "email": "other@example.com"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Username already exists"


def test_login(client):
    """Test user login."""
    client.post(
        "/api/auth/signup",
        json={
            "username": "testuser2",
            "email": "test2@example.com",
            "password": "testpassword123"
        }
    )

    response = client.post(
        "/api/auth/login",
        json={
            "username": "testuser2",
            "password": "testpassword123"
        }
    )
    assert response.status_code == 200
    assert "access_token" in response.json()


def test_login_invalid_credentials(client):
    """Test login with invalid credentials."""
    response = client.post(
        "/api/auth/login",
        json={
            "username": "nonexistent",
            "password": "wrongpassword"
        }
    )
    assert response.status_code == 401


def test_protected_route_requires_token(client):
    response = client.get("/api/users/me")
    assert response.status_code == 401


def test_protected_route_rejects_bad_token(client):
    response = client.get("/api/users/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401


def test_update_profile(client, auth_headers):
    response = client.put(
        "/api/users/me",
        json={"full_name": "Robin Example", "location": "Lisbon"},
        headers=auth_headers
    )
    assert response.status_code == 200
    assert response.json()["full_name"] == "Robin Example"

    me = client.get("/api/users/me", headers=auth_headers).json()
    assert me["location"] == "Lisbon"
    assert me["username"] == "moodtester"


def test_login_token_carries_user_id_and_email(client):
    signup = client.post(
        "/api/auth/signup",
        json={"username": "tokenuser", "email": "token@example.com", "password": "testpassword123"}
    ).json()
    token = client.post(
        "/api/auth/login",
        json={"username": "tokenuser", "password": "testpassword123"}
    ).json()["access_token"]

    payload = decode_access_token(token)
    assert payload["sub"] == str(signup["id"])
    assert payload["email"] == "token@example.com"
    assert "user_id" not in payload


def test_token_with_non_numeric_subject_is_rejected(client, auth_headers):
    token = create_access_token(data={"sub": "moodtester", "email": "mood@example.com"})
    response = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_token_for_unknown_user_is_rejected(client, auth_headers):
    token = create_access_token(data={"sub": "9999", "email": "mood@example.com"})
    response = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_token_email_must_match_user(client, auth_headers):
    me = client.get("/api/users/me", headers=auth_headers).json()
    token = create_access_token(data={"sub": str(me["id"]), "email": "someone@example.com"})
    response = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
