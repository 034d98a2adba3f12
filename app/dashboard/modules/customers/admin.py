from __future__ import annotations

from flask import Blueprint, flash, redirect, render_template, request, url_for

from app.dashboard.cache import page_cache
from app.dashboard.db import db_session
from app.dashboard.modules.customers.actions import CustomerActions, FormState
from app.dashboard.modules.customers.service import CustomerGateway
from app.dashboard.navigation import FlaskNavigator

bp = Blueprint("customers", __name__)


def _list_path() -> str:
    return url_for("customers.customers_list")


def _actions() -> CustomerActions:
    return CustomerActions(
        CustomerGateway(db_session()),
        page_cache(),
        FlaskNavigator(),
        list_path=_list_path(),
    )


def _render_form(*, customer_id: str | None, values, state: FormState):
    return render_template(
        "customers/form.html",
        customer_id=customer_id,
        values=values,
        state=state,
    )


# ---------- List ----------
@bp.get("/customers")
def customers_list():
    q = (request.args.get("q") or "").strip()
    cache = page_cache()
    list_path = _list_path()

    # Only the unfiltered table is cached, keyed by the same path mutations invalidate.
    table_html = None if q else cache.get(list_path)
    if table_html is None:
        customers = CustomerGateway(db_session()).list(q)
        table_html = render_template("customers/_table.html", customers=customers)
        if not q:
            cache.set(list_path, table_html)

    return render_template("customers/list.html", q=q, table_html=table_html)


# ---------- Create ----------
@bp.get("/customers/create")
def customers_create_get():
    return _render_form(customer_id=None, values={}, state=FormState())


@bp.post("/customers/create")
def customers_create_post():
    state = _actions().create_customer(request.form)
    if state is None:
        return redirect(_list_path())
    return _render_form(customer_id=None, values=request.form, state=state)


# ---------- Edit ----------
@bp.get("/customers/<customer_id>/edit")
def customer_edit_get(customer_id: str):
    c = CustomerGateway(db_session()).get(customer_id)
    if not c:
        flash("Customer not found.", "danger")
        return redirect(_list_path())
    values = {"name": c.name, "email": c.email, "image_url": c.image_url}
    return _render_form(customer_id=c.id, values=values, state=FormState())


@bp.post("/customers/<customer_id>/edit")
def customer_edit_post(customer_id: str):
    state = _actions().update_customer(customer_id, request.form)
    if state is None:
        return redirect(_list_path())
    return _render_form(customer_id=customer_id, values=request.form, state=state)


# ---------- Delete ----------
@bp.post("/customers/<customer_id>/delete")
def customer_delete_post(customer_id: str):
    state = _actions().delete_customer(customer_id)
    if state is not None:
        flash(state.message, "danger")
    else:
        flash("Customer deleted.", "success")
    return redirect(_list_path())
