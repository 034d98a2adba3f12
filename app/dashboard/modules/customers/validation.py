"""
Customer form validation.

`validate_customer_form` is pure: raw form values in, a ValidationResult out.
Values are stripped before any rule runs; a missing field counts as empty.
Each field reports at most one message (the first rule it fails).
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass

CUSTOMER_FIELDS = ("name", "email", "image_url")

NAME_MIN_LENGTH = 3

# local@domain.tld; no leading dot and no ".." anywhere, alphabetic TLD of 2+ chars.
EMAIL_RE = re.compile(
    r"^(?!\.)(?!.*\.\.)([A-Z0-9_'+\-.]*)[A-Z0-9_+-]@([A-Z0-9][A-Z0-9\-]*\.)+[A-Z]{2,}$",
    re.IGNORECASE | re.ASCII,
)

MSG_NAME_EMPTY = "Name cannot be empty"
MSG_NAME_TOO_SHORT = f"Name must be at least {NAME_MIN_LENGTH} characters long"
MSG_EMAIL_INVALID = "Enter a valid email address"
MSG_IMAGE_URL_EMPTY = "Image URL cannot be empty"


@dataclass(frozen=True)
class CustomerFields:
    name: str
    email: str
    image_url: str


@dataclass(frozen=True)
class ValidationError:
    field: str
    message: str


@dataclass(frozen=True)
class ValidationResult:
    data: CustomerFields | None = None
    errors: tuple[ValidationError, ...] = ()

    @property
    def success(self) -> bool:
        return self.data is not None

    def field_errors(self) -> dict[str, list[str]]:
        """Group messages by field, preserving rule order."""
        grouped: dict[str, list[str]] = {}
        for e in self.errors:
            grouped.setdefault(e.field, []).append(e.message)
        return grouped


def is_valid_email(value: str) -> bool:
    return EMAIL_RE.fullmatch(value or "") is not None


def _clean(form: Mapping[str, str | None], key: str) -> str:
    return str(form.get(key) or "").strip()


def validate_customer_form(form: Mapping[str, str | None]) -> ValidationResult:
    name = _clean(form, "name")
    email = _clean(form, "email")
    image_url = _clean(form, "image_url")

    errs: list[ValidationError] = []
    if not name:
        errs.append(ValidationError("name", MSG_NAME_EMPTY))
    elif len(name) < NAME_MIN_LENGTH:
        errs.append(ValidationError("name", MSG_NAME_TOO_SHORT))

    if not is_valid_email(email):
        errs.append(ValidationError("email", MSG_EMAIL_INVALID))

    if not image_url:
        errs.append(ValidationError("image_url", MSG_IMAGE_URL_EMPTY))

    if errs:
        return ValidationResult(errors=tuple(errs))
    return ValidationResult(data=CustomerFields(name=name, email=email, image_url=image_url))
