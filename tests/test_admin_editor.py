"""
Tests for the admin index and post editor
"""
import pytest

from src.apps.blog.repositories.post_repository import PostRepository


def submit(client, path_slug, **fields):
    return client.post(f"/posts/admin/{path_slug}", data=fields, follow_redirects=False)


# ----------------- index / load ----------------- #
def test_admin_index_links_to_new(admin_client):
    response = admin_client.get("/posts/admin")

    assert response.status_code == 200
    assert response.json()["data"] == {"links": {"create": "/posts/admin/new"}}


def test_load_new_returns_blank_template(admin_client):
    response = admin_client.get("/posts/admin/new")

    assert response.status_code == 200
    assert response.json()["data"] == {"post": None, "is_new": True, "actions": ["create"]}


def test_load_existing_post(admin_client, post):
    response = admin_client.get("/posts/admin/hello")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["is_new"] is False
    assert data["actions"] == ["delete", "update"]
    assert data["post"]["slug"] == "hello"
    assert data["post"]["title"] == "Hello"
    assert data["post"]["markdown"] == "# Hi"


def test_load_missing_post_is_not_found(admin_client):
    response = admin_client.get("/posts/admin/nope")

    assert response.status_code == 404
    assert response.json()["message"] == 'The post with the slug "nope" doesn\'t exist!'


# ----------------- submit ----------------- #
def test_create_post(admin_client, get_post):
    response = submit(
        admin_client, "new", intent="create", title="First", slug="first", markdown="Body"
    )

    assert response.status_code == 302
    assert response.headers["location"] == "/posts/admin"
    created = get_post("first")
    assert created is not None
    assert created.title == "First"
    assert get_post("new") is None


def test_create_with_empty_title_returns_field_errors(admin_client, get_post):
    response = submit(admin_client, "new", intent="create", title="", slug="abc", markdown="x")

    assert response.status_code == 400
    body = response.json()
    assert body["error_code"] == "VALIDATION_ERROR"
    assert body["errors"]["title"] == "Title is required"
    assert body["errors"]["slug"] is None
    assert body["errors"]["markdown"] is None
    assert [d["field"] for d in body["error_details"]] == ["title"]
    assert get_post("abc") is None


def test_create_with_no_fields(admin_client):
    response = submit(admin_client, "new", intent="create")

    assert response.status_code == 400
    assert response.json()["errors"] == {
        "title": "Title is required",
        "slug": "Slug is required",
        "markdown": "Markdown is required",
    }


def test_update_post(admin_client, post, get_post):
    response = submit(
        admin_client, "hello", intent="update", title="Hello again", slug="hello", markdown="## Bye"
    )

    assert response.status_code == 302
    updated = get_post("hello")
    assert updated.title == "Hello again"
    assert updated.markdown == "## Bye"
    assert admin_client.get("/posts/hello").json()["data"]["html"] == "<h2>Bye</h2>"


def test_update_with_new_slug_renames_post(admin_client, post, get_post):
    response = submit(
        admin_client, "hello", intent="update", title="Hello", slug="greetings", markdown="# Hi"
    )

    assert response.status_code == 302
    assert get_post("hello") is None
    assert get_post("greetings") is not None
    assert admin_client.get("/posts/hello").status_code == 404
    assert admin_client.get("/posts/greetings").status_code == 200


def test_update_missing_post_is_not_found(admin_client):
    response = submit(admin_client, "ghost", intent="update", title="T", slug="ghost", markdown="x")
    assert response.status_code == 404


def test_update_validation_failure_leaves_post_untouched(admin_client, post, get_post):
    response = submit(admin_client, "hello", intent="update", title="Changed", slug="", markdown="x")

    assert response.status_code == 400
    assert response.json()["errors"]["slug"] == "Slug is required"
    assert get_post("hello").title == "Hello"


def test_delete_post(admin_client, post, get_post):
    response = submit(admin_client, "hello", intent="delete")

    assert response.status_code == 302
    assert response.headers["location"] == "/posts/admin"
    assert get_post("hello") is None


def test_delete_ignores_other_fields(admin_client, post, get_post):
    response = submit(admin_client, "hello", intent="delete", title="", slug="")

    assert response.status_code == 302
    assert get_post("hello") is None


def test_delete_missing_post_is_noop(admin_client):
    response = submit(admin_client, "ghost", intent="delete")

    assert response.status_code == 302
    assert response.headers["location"] == "/posts/admin"


def test_duplicate_slug_is_a_server_error(post, users, admin_credentials):
    from fastapi.testclient import TestClient

    from src.main import app

    with TestClient(app, raise_server_exceptions=False) as client:
        client.post("/login", data=admin_credentials)
        response = submit(client, "new", intent="create", title="Dup", slug="hello", markdown="x")

    assert response.status_code == 500
    assert response.json()["error_code"] == "INTERNAL_ERROR"


# ----------------- guard ----------------- #
@pytest.mark.parametrize(
    "method,path",
    [
        ("get", "/posts/admin"),
        ("get", "/posts/admin/new"),
        ("get", "/posts/admin/hello"),
        ("post", "/posts/admin/hello"),
        ("post", "/posts/admin/new"),
    ],
)
def test_anonymous_is_redirected_to_login(client, method, path):
    response = client.request(method, path, follow_redirects=False)

    assert response.status_code == 302
    assert response.headers["location"].startswith("/login?redirect_to=")


@pytest.mark.parametrize("path", ["/posts/admin", "/posts/admin/hello"])
def test_non_admin_is_redirected_home(user_client, path):
    response = user_client.get(path, follow_redirects=False)

    assert response.status_code == 302
    assert response.headers["location"] == "/"


@pytest.mark.parametrize(
    "fields",
    [
        {"intent": "delete"},
        {"intent": "update", "title": "Taken", "slug": "taken", "markdown": "x"},
    ],
)
def test_non_admin_submit_is_redirected_home(user_client, post, get_post, fields):
    response = submit(user_client, "hello", **fields)

    assert response.status_code == 302
    assert response.headers["location"] == "/"
    assert get_post("hello").title == "Hello"
    assert get_post("taken") is None


def test_anonymous_requests_never_reach_store(client, monkeypatch):
    async def fail(*args, **kwargs):
        raise AssertionError("store was called")

    for name in ("get", "create", "update", "delete"):
        monkeypatch.setattr(PostRepository, name, fail)

    assert client.get("/posts/admin/hello", follow_redirects=False).status_code == 302
    assert submit(client, "hello", intent="delete").status_code == 302
    assert submit(
        client, "new", intent="create", title="T", slug="t", markdown="x"
    ).status_code == 302
