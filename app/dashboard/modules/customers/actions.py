"""
Customer mutations: validate -> persist -> invalidate list cache -> navigate.

Each mutation ends in exactly one of three ways:
- validation failed: FormState with field errors and a "Missing Fields" message
- storage failed: FormState with a "Database Error" message only
- persisted: the list cache is invalidated; create/update then hand control
  to the navigator, delete returns None
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol

from app.dashboard.modules.customers.service import CustomerGateway, StorageError
from app.dashboard.modules.customers.validation import validate_customer_form

logger = logging.getLogger(__name__)

CUSTOMERS_LIST_PATH = "/dashboard/customers"


class CacheInvalidator(Protocol):
    def invalidate(self, path: str) -> None: ...


class Navigator(Protocol):
    def navigate_to(self, path: str) -> None: ...


@dataclass(frozen=True)
class FormState:
    errors: dict[str, list[str]] = field(default_factory=dict)
    message: str | None = None


def missing_fields_message(op: str) -> str:
    return f"Missing Fields. Failed to {op} Customer."


def database_error_message(op: str) -> str:
    return f"Database Error: Failed to {op} Customer."


class CustomerActions:
    def __init__(
        self,
        gateway: CustomerGateway,
        invalidator: CacheInvalidator,
        navigator: Navigator,
        list_path: str = CUSTOMERS_LIST_PATH,
    ) -> None:
        self.gateway = gateway
        self.invalidator = invalidator
        self.navigator = navigator
        self.list_path = list_path

    def create_customer(self, form: Mapping[str, str | None]) -> FormState | None:
        result = validate_customer_form(form)
        if not result.success:
            return FormState(errors=result.field_errors(), message=missing_fields_message("Create"))
        data = result.data

        try:
            self.gateway.insert(data.name, data.email, data.image_url)
        except StorageError:
            logger.exception("Create customer failed (email=%s)", data.email)
            return FormState(message=database_error_message("Create"))

        self.invalidator.invalidate(self.list_path)
        self.navigator.navigate_to(self.list_path)
        return None

    def update_customer(self, customer_id: str, form: Mapping[str, str | None]) -> FormState | None:
        result = validate_customer_form(form)
        if not result.success:
            return FormState(errors=result.field_errors(), message=missing_fields_message("Update"))
        data = result.data

        try:
            self.gateway.update(customer_id, data.name, data.email, data.image_url)
        except StorageError:
            logger.exception("Update customer failed (id=%s)", customer_id)
            return FormState(message=database_error_message("Update"))

        self.invalidator.invalidate(self.list_path)
        self.navigator.navigate_to(self.list_path)
        return None

    def delete_customer(self, customer_id: str) -> FormState | None:
        try:
            self.gateway.delete(customer_id)
        except StorageError:
            logger.exception("Delete customer failed (id=%s)", customer_id)
            return FormState(message=database_error_message("Delete"))

        self.invalidator.invalidate(self.list_path)
        return None
