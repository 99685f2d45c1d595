# File: tests/test_auth.py

import pytest


def test_register_returns_public_fields_only(register):
    resp = register("alice", "alice@example.com", "hunter22")

    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "User registered successfully"
    assert set(body["user"]) == {"id", "username", "email"}
    assert body["user"]["username"] == "alice"
    assert body["user"]["email"] == "alice@example.com"
    assert "password" not in resp.text
    assert "hunter22" not in resp.text


def test_register_duplicate_email_is_rejected(register):
    assert register("alice", "alice@example.com").status_code == 201

    for username in ("alice2", "alice3"):
        resp = register(username, "alice@example.com")
        assert resp.status_code == 400
        assert resp.json()["detail"] == "User already exists with that email or username"


def test_register_duplicate_username_is_rejected(register):
    assert register("alice", "alice@example.com").status_code == 201

    resp = register("alice", "other@example.com")
    assert resp.status_code == 400


@pytest.mark.parametrize(
    "payload",
    [
        {"email": "bob@example.com", "password": "pw"},
        {"username": "bob", "password": "pw"},
        {"username": "bob", "email": "bob@example.com"},
        {"username": "", "email": "bob@example.com", "password": "pw"},
        {"username": "bob", "email": "bob@example.com", "password": "   "},
        {"username": "bob", "email": "not-an-email", "password": "pw"},
    ],
)
def test_register_validates_input(client, payload):
    resp = client.post("/auth/register", json=payload)
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Invalid request"


def test_login_returns_token_and_user(register, client):
    user_id = register("alice", "alice@example.com").json()["user"]["id"]

    resp = client.post(
        "/auth/login",
        json={"email": "alice@example.com", "password": "s3cret-pass"},
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["user"] == {"id": user_id, "username": "alice", "email": "alice@example.com"}
    assert body["token_type"] == "bearer"
    assert body["token"]


def test_login_failures_are_indistinguishable(register, client):
    register("alice", "alice@example.com")

    wrong_password = client.post(
        "/auth/login",
        json={"email": "alice@example.com", "password": "nope"},
    )
    unknown_email = client.post(
        "/auth/login",
        json={"email": "nobody@example.com", "password": "nope"},
    )

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {"detail": "Invalid email or password"}


def test_email_is_case_insensitive(register, client):
    resp = register("alice", "Alice@Example.com")
    assert resp.status_code == 201
    assert resp.json()["user"]["email"] == "alice@example.com"

    assert register("alice2", "ALICE@example.com").status_code == 400

    login = client.post(
        "/auth/login",
        json={"email": "ALICE@EXAMPLE.COM", "password": "s3cret-pass"},
    )
    assert login.status_code == 200
