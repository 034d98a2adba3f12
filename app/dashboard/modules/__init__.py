"""
Feature modules live under this package.

Each module owns its routes, models and templates and reuses the platform
primitives (DB session, page cache, navigator, CSRF guard).
"""
