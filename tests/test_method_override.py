from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from todo_app.core.method_override import MethodOverrideMiddleware

echo = FastAPI()
echo.add_middleware(MethodOverrideMiddleware)


@echo.api_route("/echo", methods=["POST", "PUT", "PATCH", "DELETE"])
async def _echo(request: Request):
    body = await request.body()
    return {"method": request.method, "body": body.decode()}


client = TestClient(echo)


def test_form_field_overrides_method_and_body_is_replayed():
    resp = client.post("/echo", data={"_method": "put", "title": "Buy milk"})
    assert resp.json()["method"] == "PUT"
    assert "title=Buy+milk" in resp.json()["body"]


def test_query_parameter_overrides_method():
    resp = client.post("/echo?_method=DELETE")
    assert resp.json()["method"] == "DELETE"


def test_unsupported_override_is_ignored():
    resp = client.post("/echo", data={"_method": "GET"})
    assert resp.json()["method"] == "POST"


def test_json_body_is_not_inspected():
    resp = client.post("/echo", json={"_method": "DELETE"})
    assert resp.json()["method"] == "POST"
    assert "_method" in resp.json()["body"]


def test_patch_is_not_an_override_target():
    resp = client.post("/echo", data={"_method": "PATCH"})
    assert resp.json()["method"] == "POST"
