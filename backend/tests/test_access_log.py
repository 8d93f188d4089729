import logging

from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.middleware.access_log import AccessLogMiddleware


def build_app():
    app = FastAPI()
    app.add_middleware(AccessLogMiddleware)

    @app.get("/ok")
    def ok():
        return {"status": "ok"}

    @app.get("/boom")
    def boom():
        raise RuntimeError("falha inesperada")

    return app


def access_lines(caplog):
    return [r.getMessage() for r in caplog.records if r.name == "app.access"]


def test_logs_successful_request(caplog):
    client = TestClient(build_app())

    with caplog.at_level(logging.INFO, logger="app.access"):
        client.get("/ok?a=1")

    assert any('"GET /ok?a=1" 200' in line for line in access_lines(caplog))


def test_logs_unhandled_exception_as_500(caplog):
    client = TestClient(build_app(), raise_server_exceptions=False)

    with caplog.at_level(logging.INFO, logger="app.access"):
        response = client.get("/boom")

    assert response.status_code == 500
    assert any('"GET /boom" 500' in line for line in access_lines(caplog))
