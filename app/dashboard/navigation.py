from __future__ import annotations

from typing import NoReturn

from flask import abort, redirect


class FlaskNavigator:
    """
    Transfers control to another view by aborting the current request with a
    302. Code after `navigate_to` never runs inside a request.
    """

    def navigate_to(self, path: str) -> NoReturn:
        abort(redirect(path))
