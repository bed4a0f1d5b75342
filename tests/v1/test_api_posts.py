# tests/v1/test_api_posts.py
"""HTTP tests for the post endpoints."""

from collections.abc import Callable

from fastapi import status
from fastapi.testclient import TestClient


def _bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok"}


def test_create_post_scrubs_and_returns_201(client: TestClient, api_login: Callable[..., dict]) -> None:
    session = api_login("a@x.com")

    response = client.post(
        "/api/v1/posts",
        json={"body": "I had a kerfuffle today"},
        headers=_bearer(session["token"]),
    )

    assert response.status_code == status.HTTP_201_CREATED
    assert response.json() == {"id": 1, "body": "I had a **** today", "author_id": session["id"]}


def test_create_post_too_long(client: TestClient, api_login: Callable[..., dict]) -> None:
    session = api_login("a@x.com")

    response = client.post(
        "/api/v1/posts",
        json={"body": "x" * 141},
        headers=_bearer(session["token"]),
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error"]["code"] == "validation_error"


def test_create_post_requires_credentials(client: TestClient) -> None:
    response = client.post("/api/v1/posts", json={"body": "hello"})

    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_create_post_with_forged_token(client: TestClient) -> None:
    response = client.post(
        "/api/v1/posts",
        json={"body": "hello"},
        headers=_bearer("not.a.valid.jwt"),
    )

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["error"]["code"] == "authentication_failed"


def test_create_post_missing_body_field(client: TestClient, api_login: Callable[..., dict]) -> None:
    session = api_login("a@x.com")

    response = client.post("/api/v1/posts", json={}, headers=_bearer(session["token"]))

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error"]["details"][0]["field"] == "body.body"


def test_list_and_get_posts(client: TestClient, api_login: Callable[..., dict]) -> None:
    session = api_login("a@x.com")
    for body in ("one", "two", "three"):
        client.post("/api/v1/posts", json={"body": body}, headers=_bearer(session["token"]))

    listed = client.get("/api/v1/posts")
    single = client.get("/api/v1/posts/2")

    assert listed.status_code == status.HTTP_200_OK
    assert [post["body"] for post in listed.json()] == ["one", "two", "three"]
    assert single.json() == {"id": 2, "body": "two", "author_id": session["id"]}


def test_get_missing_post(client: TestClient) -> None:
    response = client.get("/api/v1/posts/42")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"error": {"code": "not_found", "message": "Post not found"}}


def test_only_author_may_delete(client: TestClient, api_login: Callable[..., dict]) -> None:
    author = api_login("a@x.com")
    intruder = api_login("b@x.com")
    client.post("/api/v1/posts", json={"body": "mine"}, headers=_bearer(author["token"]))

    forbidden = client.delete("/api/v1/posts/1", headers=_bearer(intruder["token"]))
    assert forbidden.status_code == status.HTTP_403_FORBIDDEN
    assert client.get("/api/v1/posts/1").status_code == status.HTTP_200_OK

    deleted = client.delete("/api/v1/posts/1", headers=_bearer(author["token"]))
    assert deleted.status_code == status.HTTP_204_NO_CONTENT
    assert client.get("/api/v1/posts/1").status_code == status.HTTP_404_NOT_FOUND


def test_delete_missing_post_succeeds(client: TestClient, api_login: Callable[..., dict]) -> None:
    session = api_login("a@x.com")

    response = client.delete("/api/v1/posts/7", headers=_bearer(session["token"]))

    assert response.status_code == status.HTTP_204_NO_CONTENT
