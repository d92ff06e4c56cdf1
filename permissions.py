# permissions.py
"""
Access rules for the staff site.

- admin_required : decorator for review routes (login required, then admin check).
- can_* helpers for templates: they mirror which navigation links are shown.

Admins are not a stored role: a user is an admin when the lowercase username
is one of ``ADMIN_USERNAMES`` from the configuration.
"""

from functools import wraps

from flask import abort, flash, redirect, request, url_for
from flask_login import UserMixin, current_user, login_required


class StaffPrincipal(UserMixin):
    """Flask-Login wrapper around a record store ``Session``."""

    def __init__(self, session) -> None:
        self.session = session
        self.username = session.username
        self.is_admin = session.is_admin

    def get_id(self) -> str:
        return self.username

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<StaffPrincipal {self.username}>"


def admin_required(view_func):
    """
    Restrict a view to admins.

    - Not logged in → redirect to the login page (Flask-Login).
    - Logged in without admin rights → 403 for JSON clients, otherwise a
      flash message and a redirect to the home page.
    """

    @wraps(view_func)
    @login_required
    def wrapped(*args, **kwargs):
        if getattr(current_user, "is_admin", False):
            return view_func(*args, **kwargs)

        wants_json = request.accept_mimetypes.accept_json and not request.accept_mimetypes.accept_html
        if wants_json:
            abort(403)

        flash("Only admins can review applications.", "warning")
        return redirect(url_for("staff.home"))

    return wrapped


def _logged_in() -> bool:
    return bool(current_user and current_user.is_authenticated)


def is_admin() -> bool:
    return _logged_in() and getattr(current_user, "is_admin", False)


# ---- navigation ----
def can_register(): return not _logged_in()
def can_login():    return not _logged_in()
def can_apply():    return _logged_in() and not is_admin()
def can_review():   return is_admin()
def can_logout():   return _logged_in()
