"""Tests for the customers persistence gateway."""
import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from app.dashboard import create_app
from app.dashboard.db import create_schema, session_scope
from app.dashboard.modules.customers.models import Customer
from app.dashboard.modules.customers.service import CustomerGateway, StorageError


@pytest.fixture()
def app(tmp_path, monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "test-secret")
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path/'test.db'}")
    monkeypatch.setenv("ENV", "test")

    app = create_app()
    create_schema(app)
    return app


def _count(app) -> int:
    with session_scope(app) as s:
        return s.scalar(select(func.count()).select_from(Customer))


def test_insert_assigns_id_and_round_trips(app):
    with session_scope(app) as s:
        new_id = CustomerGateway(s).insert("Alice", "alice@example.com", "/alice.png")

    assert isinstance(new_id, str) and len(new_id) == 36

    with session_scope(app) as s:
        c = CustomerGateway(s).get(new_id)
        assert (c.name, c.email, c.image_url) == ("Alice", "alice@example.com", "/alice.png")


def test_insert_ids_are_unique(app):
    with session_scope(app) as s:
        gw = CustomerGateway(s)
        ids = {gw.insert(f"Customer {i}", f"c{i}@example.com", "/c.png") for i in range(5)}
    assert len(ids) == 5


def test_update_replaces_all_fields(app):
    with session_scope(app) as s:
        gw = CustomerGateway(s)
        cid = gw.insert("Alice", "alice@example.com", "/alice.png")
        gw.update(cid, "Alicia", "alicia@example.com", "/alicia.png")
        c = gw.get(cid)
        assert (c.id, c.name, c.email, c.image_url) == (cid, "Alicia", "alicia@example.com", "/alicia.png")


def test_update_twice_is_idempotent(app):
    with session_scope(app) as s:
        gw = CustomerGateway(s)
        cid = gw.insert("Alice", "alice@example.com", "/alice.png")
        gw.update(cid, "Bob", "bob@example.com", "/bob.png")
        once = [(c.id, c.name, c.email, c.image_url) for c in gw.list()]
        gw.update(cid, "Bob", "bob@example.com", "/bob.png")
        twice = [(c.id, c.name, c.email, c.image_url) for c in gw.list()]
    assert once == twice


def test_update_missing_id_is_a_silent_noop(app, caplog):
    caplog.set_level("INFO")
    with session_scope(app) as s:
        CustomerGateway(s).update("42", "Bob", "bob@b.com", "/y.png")
    assert _count(app) == 0
    assert "matched no rows id=42" in caplog.text


def test_delete_removes_row(app):
    with session_scope(app) as s:
        gw = CustomerGateway(s)
        keep = gw.insert("Keep Me", "keep@example.com", "/k.png")
        drop = gw.insert("Drop Me", "drop@example.com", "/d.png")
        gw.delete(drop)
        assert gw.get(drop) is None
        assert [c.id for c in gw.list()] == [keep]


def test_delete_missing_id_is_a_silent_noop(app):
    with session_scope(app) as s:
        gw = CustomerGateway(s)
        gw.insert("Alice", "alice@example.com", "/alice.png")
        gw.delete("does-not-exist")
    assert _count(app) == 1


def test_values_are_bound_not_interpolated(app):
    hostile = "Robert'); DROP TABLE customers;--"
    with session_scope(app) as s:
        gw = CustomerGateway(s)
        cid = gw.insert(hostile, "bobby@tables.com", "/b.png")
        gw.delete("x' OR '1'='1")
        assert gw.get(cid).name == hostile
    assert _count(app) == 1


def test_list_orders_by_name_and_filters(app):
    with session_scope(app) as s:
        gw = CustomerGateway(s)
        gw.insert("Zed", "zed@example.com", "/z.png")
        gw.insert("Alice", "alice@corp.com", "/a.png")
        gw.insert("Mallory", "mallory@corp.com", "/m.png")

        assert [c.name for c in gw.list()] == ["Alice", "Mallory", "Zed"]
        assert [c.name for c in gw.list("CORP")] == ["Alice", "Mallory"]
        assert [c.name for c in gw.list("  zed ")] == ["Zed"]


def test_constraint_violation_becomes_storage_error(app):
    with session_scope(app) as s:
        gw = CustomerGateway(s)
        with pytest.raises(StorageError) as exc_info:
            gw.insert(None, "alice@example.com", "/alice.png")
        assert isinstance(exc_info.value.__cause__, SQLAlchemyError)

        # Session is usable again after the rollback.
        gw.insert("Alice", "alice@example.com", "/alice.png")
    assert _count(app) == 1


@pytest.mark.parametrize("op", ["insert", "update", "delete"])
def test_missing_table_becomes_storage_error(app, op):
    Customer.__table__.drop(bind=app.extensions["sqlalchemy_engine"])
    with session_scope(app) as s:
        gw = CustomerGateway(s)
        with pytest.raises(StorageError):
            if op == "insert":
                gw.insert("Alice", "alice@example.com", "/alice.png")
            elif op == "update":
                gw.update("7", "Alice", "alice@example.com", "/alice.png")
            else:
                gw.delete("7")
