from __future__ import annotations

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


def load_module_models() -> type[DeclarativeBase]:
    """
    Import every module's models so Base.metadata includes their tables.
    Called lazily to keep module models free to import Base at load time.
    """
    from app.dashboard.modules.customers import models as _customers  # noqa: F401

    return Base
