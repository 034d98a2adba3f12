"""
Create the dashboard tables (idempotent) and optionally seed demo customers.

Usage:
  python scripts/init_db.py [--database-url URL] [--seed]
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

# Ensure repo root is on sys.path when running as a script (Windows-friendly).
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.dashboard.models import load_module_models
from app.dashboard.modules.customers.service import CustomerGateway
from scripts._db_utils import script_engine, script_session

DEMO_CUSTOMERS = (
    ("Evil Rabbit", "evil@rabbit.com", "/customers/evil-rabbit.png"),
    ("Delba de Oliveira", "delba@oliveira.com", "/customers/delba-de-oliveira.png"),
    ("Lee Robinson", "lee@robinson.com", "/customers/lee-robinson.png"),
    ("Michael Novotny", "michael@novotny.com", "/customers/michael-novotny.png"),
)


def init_db(*, database_url: str | None = None, seed: bool = False) -> None:
    db_url = (database_url or os.environ.get("DATABASE_URL") or "sqlite:///dashboard.db").strip()

    with script_engine(db_url) as engine:
        load_module_models().metadata.create_all(bind=engine)
        print("Tables created (existing tables left untouched).")

        if not seed:
            return
        with script_session(engine) as s:
            gateway = CustomerGateway(s)
            existing = {c.email for c in gateway.list()}
            added = 0
            for name, email, image_url in DEMO_CUSTOMERS:
                if email in existing:
                    continue
                gateway.insert(name, email, image_url)
                added += 1
        print(f"Seeded {added} demo customer(s).")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--database-url", default=None, help="Defaults to $DATABASE_URL.")
    parser.add_argument("--seed", action="store_true", help="Insert demo customers missing by email.")
    args = parser.parse_args()
    init_db(database_url=args.database_url, seed=args.seed)


if __name__ == "__main__":
    main()
