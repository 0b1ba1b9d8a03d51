# tests/helpers.py
from fastapi.testclient import TestClient

from todo_app.db.session import session_scope
from todo_app.models.task import Task


def register(client: TestClient, username: str):
    return client.post("/register", data={"username": username}, follow_redirects=False)


def add_task(client: TestClient, **fields) -> int:
    resp = client.post("/add", data=fields, follow_redirects=False)
    assert resp.status_code == 303
    return int(resp.headers["location"].rsplit("/", 1)[-1])


def load_task(task_id: int):
    with session_scope() as db:
        return db.get(Task, task_id)
