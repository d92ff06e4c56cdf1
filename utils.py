from flask import request
from markupsafe import Markup, escape

STATUS_BADGES = {'accepted': 'success', 'rejected': 'danger'}


def form_value(name, strip=True):
    """Read a submitted form field; missing fields come back as ''."""
    value = request.form.get(name) or ''
    return value.strip() if strip else value


def status_badge(status):
    """Bootstrap colour for an application status badge."""
    value = getattr(status, 'value', status)
    return STATUS_BADGES.get(value, 'warning')


def nl2br(text):
    """Escape free text and keep its line breaks."""
    return Markup('<br>').join(escape(line) for line in str(text or '').splitlines())
