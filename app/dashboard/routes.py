from flask import Blueprint, redirect, url_for

bp = Blueprint("routes", __name__)


@bp.get("/")
def index():
    return redirect(url_for("customers.customers_list"))


@bp.get("/healthz")
def healthz():
    """Liveness check for the load balancer; never touches the database."""
    return {"ok": True}
