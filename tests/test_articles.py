# File: tests/test_articles.py

from datetime import timedelta

import pytest

from articles_api.core.security import create_access_token

ARTICLE = {"title": "Hello", "body": "First post", "category": "news"}


@pytest.fixture()
def alice(register, login):
    user_id = register("alice", "alice@example.com").json()["user"]["id"]
    return user_id, login("alice@example.com")


def test_create_article_stamps_author(client, bearer, alice):
    user_id, token = alice

    resp = client.post(
        "/articles",
        json={**ARTICLE, "submitted_by": 999},
        headers=bearer(token),
    )

    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "Article created"
    assert body["article"]["submitted_by"] == user_id
    assert body["article"]["title"] == "Hello"
    assert body["article"]["created_at"]


@pytest.mark.parametrize("missing", ["title", "body", "category"])
def test_create_article_requires_fields(client, bearer, alice, missing):
    _, token = alice
    payload = {k: v for k, v in ARTICLE.items() if k != missing}

    resp = client.post("/articles", json=payload, headers=bearer(token))

    assert resp.status_code == 400


@pytest.mark.parametrize(
    "headers",
    [
        {},
        {"Authorization": "Bearer"},
        {"Authorization": "Basic YWxpY2U6cHc="},
        {"Authorization": "Bearer not-a-token"},
    ],
)
def test_protected_route_rejects_bad_credentials_without_side_effects(client, headers):
    resp = client.post("/articles", json=ARTICLE, headers=headers)

    assert resp.status_code == 401
    assert resp.headers["www-authenticate"] == "Bearer"
    assert client.get("/articles").json() == []


def test_expired_token_is_rejected(client, bearer, settings, alice):
    user_id, _ = alice
    expired = create_access_token(user_id, settings, expires_delta=timedelta(minutes=-5))

    resp = client.post("/articles", json=ARTICLE, headers=bearer(expired))

    assert resp.status_code == 401
    assert resp.json()["detail"] == "Token has expired"
    assert client.get("/articles").json() == []


def test_list_articles_newest_first(client, bearer, alice):
    _, token = alice
    for title in ("one", "two", "three"):
        client.post("/articles", json={**ARTICLE, "title": title}, headers=bearer(token))

    resp = client.get("/articles")

    assert resp.status_code == 200
    assert [a["title"] for a in resp.json()] == ["three", "two", "one"]


def test_articles_by_user(client, bearer, register, login, alice):
    alice_id, alice_token = alice
    bob_id = register("bob", "bob@example.com").json()["user"]["id"]
    bob_token = login("bob@example.com")

    client.post("/articles", json=ARTICLE, headers=bearer(alice_token))
    client.post("/articles", json={**ARTICLE, "title": "Bob's"}, headers=bearer(bob_token))

    resp = client.get(f"/users/{bob_id}/articles")

    assert resp.status_code == 200
    assert [(a["title"], a["submitted_by"]) for a in resp.json()] == [("Bob's", bob_id)]


def test_articles_for_unknown_user_is_empty_list(client):
    resp = client.get("/users/9999/articles")

    assert resp.status_code == 200
    assert resp.json() == []


def test_posts_with_user_includes_author(client, bearer, alice):
    user_id, token = alice
    client.post("/articles", json=ARTICLE, headers=bearer(token))

    resp = client.get(f"/users/{user_id}/posts-with-user")

    assert resp.status_code == 200
    [post] = resp.json()
    assert post["title"] == "Hello"
    assert post["author_username"] == "alice"
    assert post["author_email"] == "alice@example.com"
