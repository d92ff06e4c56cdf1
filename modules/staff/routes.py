"""HTTP routes for registration, staff applications and the admin panel."""

import csv
import io
from datetime import datetime, timezone

from flask import current_app, flash, make_response, redirect, render_template, request, url_for
from flask_login import current_user, login_required
from openpyxl import Workbook

from extensions import login_manager
from permissions import StaffPrincipal, admin_required
from utils import form_value

from . import bp, get_store
from .errors import RecordStoreError

EXPORT_HEADER = ["#", "Username", "Minecraft username", "Age", "Status", "Submitted", "Why", "Experience"]


@login_manager.request_loader
def load_user_from_pointer(_request):
    """Resolve the logged-in user from the session pointer slot."""

    session = get_store().current_session()
    if session is None:
        return None
    return StaffPrincipal(session)


@bp.route("/")
def home():
    return render_template("home.html")


@bp.route("/register", methods=["GET", "POST"])
def register():
    if current_user.is_authenticated:
        return redirect(url_for("staff.home"))

    if request.method == "POST":
        username = form_value("username")
        email = form_value("email")
        password = form_value("password", strip=False)
        try:
            get_store().register(username, email, password)
        except RecordStoreError as exc:
            flash(str(exc), "danger")
            return render_template("register.html", username=username, email=email), 400

        flash("Registration successful! Please log in.", "success")
        return redirect(url_for("staff.login"))

    return render_template("register.html")


@bp.route("/login", methods=["GET", "POST"])
def login():
    if request.method == "POST":
        username = form_value("username")
        password = form_value("password", strip=False)
        try:
            session = get_store().authenticate(username, password)
        except RecordStoreError as exc:
            flash(str(exc), "danger")
            return render_template("login.html", username=username), 401

        flash("Login successful!", "success")
        if session.is_admin:
            return redirect(url_for("staff.admin_panel"))
        return redirect(url_for("staff.application"))

    return render_template("login.html")


@bp.route("/logout")
def logout():
    get_store().logout()
    return redirect(url_for("staff.home"))


@bp.route("/application", methods=["GET", "POST"])
@login_required
def application():
    store = get_store()

    if request.method == "POST":
        fields = {
            "why": form_value("why"),
            "experience": form_value("experience"),
            "age": form_value("age", strip=False),
            "mc_username": form_value("mc_username"),
        }
        try:
            store.submit_application(current_user.session, fields)
        except RecordStoreError as exc:
            flash(str(exc), "danger")
            return render_template("application.html", fields=fields, existing=None), 400

        flash("Application submitted successfully! Thank you.", "success")
        return redirect(url_for("staff.application"))

    existing = store.application_for(current_user.username)
    return render_template("application.html", fields={}, existing=existing)


# ---------- Admin panel ----------
@bp.route("/admin")
@admin_required
def admin_panel():
    applications = get_store().load_applications()
    return render_template("admin.html", applications=list(enumerate(applications)))


def _admin_action(action, index: int, done: str):
    try:
        application = action(index)
    except RecordStoreError as exc:
        flash(str(exc), "warning")
    else:
        current_app.logger.info("%s %s application of %s", current_user.username, done, application.username)
        flash(f"Application of {application.username} {done}.", "success")
    return redirect(url_for("staff.admin_panel"))


@bp.route("/admin/<int:index>/accept", methods=["POST"])
@admin_required
def accept_application(index: int):
    return _admin_action(get_store().accept_application, index, "accepted")


@bp.route("/admin/<int:index>/reject", methods=["POST"])
@admin_required
def reject_application(index: int):
    return _admin_action(get_store().reject_application, index, "rejected")


@bp.route("/admin/<int:index>/delete", methods=["POST"])
@admin_required
def delete_application(index: int):
    return _admin_action(get_store().delete_application, index, "deleted")


# ---------- Export ----------
def _export_rows():
    for index, app in enumerate(get_store().load_applications()):
        yield [
            index,
            app.username,
            app.mc_username,
            app.age,
            app.status.value,
            app.submitted_at,
            app.why,
            app.experience,
        ]


def _attachment(resp, extension: str):
    resp.headers["Content-Disposition"] = (
        f"attachment; filename=applications_{datetime.now(timezone.utc):%Y%m%d_%H%M%S}.{extension}"
    )
    return resp


@bp.route("/admin/export.csv")
@admin_required
def export_csv():
    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(EXPORT_HEADER)
    writer.writerows(_export_rows())
    data = ("\ufeff" + out.getvalue()).encode("utf-8")
    resp = make_response(data)
    resp.headers["Content-Type"] = "text/csv; charset=utf-8"
    return _attachment(resp, "csv")


@bp.route("/admin/export.xlsx")
@admin_required
def export_xlsx():
    wb = Workbook()
    ws = wb.active
    ws.title = "Applications"
    ws.append(EXPORT_HEADER)
    for row in _export_rows():
        ws.append(row)

    out = io.BytesIO()
    wb.save(out)
    resp = make_response(out.getvalue())
    resp.headers["Content-Type"] = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    return _attachment(resp, "xlsx")
