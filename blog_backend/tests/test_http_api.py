from __future__ import annotations

import io

import pytest
from flask import Flask

from blog_backend.application.use_cases.posts.create_post import CreatePostUseCase
from blog_backend.application.use_cases.posts.delete_post import DeletePostUseCase
from blog_backend.application.use_cases.posts.get_post import GetPostUseCase
from blog_backend.application.use_cases.posts.list_posts import ListPostsUseCase
from blog_backend.application.use_cases.posts.update_post import UpdatePostUseCase
from blog_backend.application.use_cases.users.get_profile import GetProfileUseCase
from blog_backend.application.use_cases.users.login_user import LoginUserUseCase
from blog_backend.application.use_cases.users.register_user import RegisterUserUseCase
from blog_backend.interfaces.http.controllers.auth_controller import AuthController
from blog_backend.interfaces.http.controllers.posts_controller import PostsController
from blog_backend.shared.middleware.error_handler import configure_error_handling


@pytest.fixture()
def app(users, posts, storage, hasher, tokens, guard):
    app = Flask(__name__)
    app.config["TESTING"] = True
    configure_error_handling(app)

    auth = AuthController(
        register_use_case=RegisterUserUseCase(users=users, password_hasher=hasher),
        login_use_case=LoginUserUseCase(users=users, tokens=tokens, password_hasher=hasher),
        profile_use_case=GetProfileUseCase(tokens=tokens),
    )
    posts_controller = PostsController(
        list_use_case=ListPostsUseCase(posts=posts),
        get_use_case=GetPostUseCase(posts=posts),
        create_use_case=CreatePostUseCase(guard=guard, posts=posts, storage=storage),
        update_use_case=UpdatePostUseCase(guard=guard, posts=posts, storage=storage),
        delete_use_case=DeletePostUseCase(guard=guard, posts=posts, storage=storage),
    )
    app.register_blueprint(auth.as_blueprint())
    app.register_blueprint(posts_controller.as_blueprint())
    return app


@pytest.fixture()
def client(app):
    return app.test_client()


def _signup_and_signin(client, name: str, password: str = "pw") -> dict:
    client.post("/auth/signup", json={"username": name, "password": password})
    resp = client.post("/auth/signin", json={"username": name, "password": password})
    assert resp.status_code == 200
    return resp.get_json()


def _post_form(**overrides) -> dict:
    form = {
        "title": "Hello",
        "summary": "Summary",
        "content": "Body",
        "imgCredit": "Photo by me",
        "file": (io.BytesIO(b"img"), "cover.png"),
    }
    form.update(overrides)
    return {k: v for k, v in form.items() if v is not None}


def _create_post(client) -> dict:
    resp = client.post("/posts", data=_post_form(), content_type="multipart/form-data")
    assert resp.status_code == 201
    return resp.get_json()


def test_signup_returns_public_user(client):
    resp = client.post("/auth/signup", json={"username": "alice", "password": "pw1"})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["name"] == "alice"
    assert set(body) == {"id", "name"}


def test_signup_duplicate_name(client):
    client.post("/auth/signup", json={"username": "alice", "password": "pw1"})

    resp = client.post("/auth/signup", json={"username": "alice", "password": "pw2"})

    assert resp.status_code == 409
    assert resp.get_json()["error"] == "user_already_exists"


def test_signup_requires_both_fields(client):
    resp = client.post("/auth/signup", json={"username": "alice"})

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "validation_error"


def test_signin_sets_http_only_cookie(client):
    client.post("/auth/signup", json={"username": "alice", "password": "pw1"})

    resp = client.post("/auth/signin", json={"username": "alice", "password": "pw1"})

    assert resp.status_code == 200
    set_cookie = resp.headers["Set-Cookie"]
    assert set_cookie.startswith("token=")
    assert "HttpOnly" in set_cookie
    assert client.get_cookie("token") is not None


def test_signin_failures(client):
    client.post("/auth/signup", json={"username": "alice", "password": "pw1"})

    wrong = client.post("/auth/signin", json={"username": "alice", "password": "nope"})
    unknown = client.post("/auth/signin", json={"username": "bob", "password": "pw1"})

    assert wrong.status_code == 401
    assert wrong.get_json()["error"] == "invalid_credentials"
    assert unknown.status_code == 404
    assert client.get_cookie("token") is None


def test_profile_requires_session(client):
    resp = client.get("/auth/profile")

    assert resp.status_code == 401
    assert resp.get_json()["error"] == "no_token"


def test_profile_rejects_forged_cookie(client):
    client.set_cookie("token", "forged")

    resp = client.get("/auth/profile")

    assert resp.status_code == 401
    assert resp.get_json()["error"] == "invalid_token"


def test_profile_and_signout(client):
    user = _signup_and_signin(client, "alice")

    profile = client.get("/auth/profile")
    assert profile.status_code == 200
    assert profile.get_json() == user

    out = client.post("/auth/signout")
    assert out.status_code == 200
    assert out.get_json() == {"message": "Success: User signed out"}
    assert client.get_cookie("token") is None
    assert client.get("/auth/profile").status_code == 401


def test_create_post_payload_shape(client):
    user = _signup_and_signin(client, "alice")

    post = _create_post(client)

    assert set(post) == {
        "id",
        "title",
        "summary",
        "content",
        "imgCredit",
        "cover",
        "published",
        "createdAt",
        "authorId",
        "author",
    }
    assert post["authorId"] == user["id"]
    assert post["author"] == {"name": "alice"}
    assert post["published"] is True


def test_create_without_file(client):
    _signup_and_signin(client, "alice")

    resp = client.post(
        "/posts", data=_post_form(file=None), content_type="multipart/form-data"
    )

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "no_file_uploaded"


def test_create_without_session(client, storage):
    resp = client.post("/posts", data=_post_form(), content_type="multipart/form-data")

    assert resp.status_code == 401
    assert storage.objects == {}


def test_create_with_missing_title(client):
    _signup_and_signin(client, "alice")

    resp = client.post(
        "/posts", data=_post_form(title=None), content_type="multipart/form-data"
    )

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "validation_error"


def test_create_without_session_and_bad_form(client, storage):
    resp = client.post(
        "/posts", data=_post_form(title=None), content_type="multipart/form-data"
    )

    assert resp.status_code == 401
    assert resp.get_json()["error"] == "no_token"
    assert storage.objects == {}


def test_update_without_session_and_bad_form(app):
    owner = app.test_client()
    _signup_and_signin(owner, "alice")
    post = _create_post(owner)
    anonymous = app.test_client()

    resp = anonymous.put(
        f"/posts/{post['id']}",
        data={"title": "x" * 300},
        content_type="multipart/form-data",
    )

    assert resp.status_code == 401
    assert owner.get(f"/posts/{post['id']}").get_json()["title"] == post["title"]


def test_update_with_bad_form_after_checks(app):
    owner = app.test_client()
    _signup_and_signin(owner, "alice")
    post = _create_post(owner)
    other = app.test_client()
    _signup_and_signin(other, "bob")
    long_title = {"title": "x" * 300}

    assert other.put("/posts/99999", data=long_title).status_code == 404
    assert other.put(f"/posts/{post['id']}", data=long_title).status_code == 403
    resp = owner.put(f"/posts/{post['id']}", data=long_title)
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "validation_error"


def test_get_post_errors(client):
    assert client.get("/posts/abc").status_code == 400
    assert client.get("/posts/12345").status_code == 404


def test_list_posts_newest_first(client):
    _signup_and_signin(client, "alice")
    first = _create_post(client)
    second = _create_post(client)

    listed = client.get("/posts").get_json()

    assert [p["id"] for p in listed] == [second["id"], first["id"]]


def test_update_partial_form(client):
    _signup_and_signin(client, "alice")
    post = _create_post(client)

    resp = client.put(
        f"/posts/{post['id']}",
        data={"title": "Renamed", "summary": ""},
        content_type="multipart/form-data",
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["title"] == "Renamed"
    assert body["summary"] == post["summary"]
    assert body["cover"] == post["cover"]


def test_mutation_status_precedence(app):
    owner = app.test_client()
    _signup_and_signin(owner, "alice")
    post = _create_post(owner)

    anonymous = app.test_client()
    other = app.test_client()
    _signup_and_signin(other, "bob")

    assert anonymous.delete("/posts/99999").status_code == 401
    assert anonymous.put(f"/posts/{post['id']}", data={}).status_code == 401
    assert other.delete("/posts/99999").status_code == 404
    assert other.delete("/posts/abc").status_code == 400
    forbidden = other.delete(f"/posts/{post['id']}")
    assert forbidden.status_code == 403
    assert forbidden.get_json()["error"] == "not_post_author"
    assert owner.get(f"/posts/{post['id']}").status_code == 200


def test_delete_post(client, storage):
    _signup_and_signin(client, "alice")
    post = _create_post(client)

    resp = client.delete(f"/posts/{post['id']}")

    assert resp.status_code == 200
    assert resp.get_json() == {"message": "Post deleted successfully"}
    assert client.get(f"/posts/{post['id']}").status_code == 404
    assert storage.objects == {}
