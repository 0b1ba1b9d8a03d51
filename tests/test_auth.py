from sqlmodel import select

from todo_app.core.identity import decode_identity
from todo_app.db.session import session_scope
from todo_app.models.user import User

from helpers import add_task, register


def _user(username: str) -> User:
    with session_scope() as db:
        return db.exec(select(User).where(User.username == username)).first()


def test_register_sets_identity_of_inserted_row(client):
    resp = register(client, "keith")
    assert resp.status_code == 303
    assert resp.headers["location"] == "/"

    user = _user("keith")
    identity = decode_identity(client.cookies.get("identity"))
    assert identity.id == user.id
    assert identity.username == "keith"

    home = client.get("/")
    assert home.status_code == 200
    assert "Signed in as keith" in home.text


def test_duplicate_registration_is_a_conflict(client, make_client):
    register(client, "keith")

    other = make_client()
    resp = register(other, "keith")
    assert resp.status_code == 409
    assert "Username already exists" in resp.text
    assert "identity" not in other.cookies


def test_login_with_unknown_username_is_rejected(client):
    resp = client.post("/login", data={"username": "nobody"}, follow_redirects=False)
    assert resp.status_code == 400
    assert "User not found!" in resp.text
    assert "identity" not in client.cookies


def test_login_sets_identity(client, make_client):
    register(client, "keith")
    user = _user("keith")

    fresh = make_client()
    resp = fresh.post("/login", data={"username": "keith"}, follow_redirects=False)
    assert resp.status_code == 303
    assert resp.headers["location"] == "/"
    assert decode_identity(fresh.cookies.get("identity")).id == user.id


def test_logout_returns_to_anonymous(client):
    register(client, "keith")
    add_task(client, title="Buy milk")

    resp = client.post("/logout", follow_redirects=False)
    assert resp.status_code == 303
    assert "identity" not in client.cookies

    home = client.get("/")
    assert home.status_code == 200
    assert "Buy milk" not in home.text
    assert "Log in" in home.text


def test_forged_plain_json_cookie_is_ignored(client):
    register(client, "keith")
    add_task(client, title="Buy milk")

    client.cookies.clear()
    client.cookies.set("identity", '{"id": 1, "username": "keith"}')
    home = client.get("/")
    assert home.status_code == 200
    assert "Buy milk" not in home.text


def test_forms_render(client):
    assert client.get("/login").status_code == 200
    assert client.get("/register").status_code == 200
