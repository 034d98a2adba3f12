"""
Customers module.

Scope:
- Customers list (search + cached table)
- Create / update / delete through validated single-statement writes
- Form re-render with per-field errors on failure
"""
