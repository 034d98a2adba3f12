import pytest

from app.dashboard import create_app
from app.dashboard.db import create_schema


@pytest.fixture()
def client(tmp_path, monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "test-secret")
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path/'test.db'}")
    monkeypatch.setenv("ENV", "test")

    app = create_app()
    create_schema(app)
    return app.test_client()


def test_healthz_ok(client):
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.json == {"ok": True}


def test_index_redirects_to_customers(client):
    r = client.get("/", follow_redirects=False)
    assert r.status_code == 302
    assert r.headers["Location"].endswith("/dashboard/customers")


def test_post_without_csrf_token_is_rejected(client):
    r = client.post(
        "/dashboard/customers/create",
        data={"name": "Alice", "email": "a@b.com", "image_url": "/x.png"},
    )
    assert r.status_code == 400
    assert b"CSRF token missing or invalid." in r.data


def test_unknown_path_renders_404(client):
    r = client.get("/dashboard/nope")
    assert r.status_code == 404
    assert b"Not Found" in r.data


def test_production_requires_postgres(monkeypatch):
    monkeypatch.setenv("ENV", "production")
    monkeypatch.setenv("SECRET_KEY", "a-strong-secret")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///prod.db")
    with pytest.raises(RuntimeError, match="Postgres"):
        create_app()


def test_production_rejects_default_secret(monkeypatch):
    monkeypatch.setenv("ENV", "production")
    monkeypatch.setenv("SECRET_KEY", "change-me")
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg://u:p@localhost/dashboard")
    with pytest.raises(RuntimeError, match="SECRET_KEY"):
        create_app()
