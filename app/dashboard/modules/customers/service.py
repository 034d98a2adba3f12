from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from sqlalchemy import delete, insert, or_, select, update
from sqlalchemy.exc import SQLAlchemyError

from app.dashboard.modules.customers.models import Customer

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

customers_table = Customer.__table__


class StorageError(Exception):
    """A statement against the customers table failed. The driver error is chained as __cause__."""


class CustomerGateway:
    """
    Single-statement persistence for customers.

    Writes go out as Core statements with bound parameters, each committed on
    its own. A failure rolls the session back and surfaces as StorageError.
    Update and delete do not distinguish "no such id" from success.
    """

    def __init__(self, s: "Session") -> None:
        self.s = s

    @contextmanager
    def _statement(self, op: str) -> Generator["Session", None, None]:
        try:
            yield self.s
            self.s.commit()
        except SQLAlchemyError as e:
            self.s.rollback()
            raise StorageError(f"customer {op} failed") from e

    def insert(self, name: str, email: str, image_url: str) -> str:
        stmt = insert(customers_table).values(name=name, email=email, image_url=image_url)
        with self._statement("insert") as s:
            result = s.execute(stmt)
            customer_id = result.inserted_primary_key[0]
        logger.info("Customer inserted id=%s", customer_id)
        return customer_id

    def update(self, customer_id: str, name: str, email: str, image_url: str) -> None:
        stmt = (
            update(customers_table)
            .where(customers_table.c.id == customer_id)
            .values(name=name, email=email, image_url=image_url)
        )
        with self._statement("update") as s:
            result = s.execute(stmt)
        if result.rowcount == 0:
            logger.info("Customer update matched no rows id=%s", customer_id)

    def delete(self, customer_id: str) -> None:
        stmt = delete(customers_table).where(customers_table.c.id == customer_id)
        with self._statement("delete") as s:
            result = s.execute(stmt)
        if result.rowcount == 0:
            logger.info("Customer delete matched no rows id=%s", customer_id)

    def get(self, customer_id: str) -> Customer | None:
        # Core writes bypass the identity map; always reload from the table.
        return self.s.get(Customer, customer_id, populate_existing=True)

    def list(self, query: str = "") -> list[Customer]:
        stmt = select(Customer)
        query = (query or "").strip()
        if query:
            like = f"%{query}%"
            stmt = stmt.where(or_(Customer.name.ilike(like), Customer.email.ilike(like)))
        stmt = stmt.order_by(Customer.name.asc(), Customer.id.asc()).execution_options(populate_existing=True)
        return list(self.s.scalars(stmt).all())
