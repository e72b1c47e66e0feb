from flask import Blueprint, redirect, request
from app.controllers.home_controller import home_index, health_check, view_entry
from app.utils.auth import admin_page_redirect, current_session

home_bp = Blueprint("home", __name__)

ADMIN_PAGE_PREFIX = "/admin"

@home_bp.before_app_request
def guard_admin_pages():
    path = request.path
    if path != ADMIN_PAGE_PREFIX and not path.startswith(ADMIN_PAGE_PREFIX + "/"):
        return None
    target = admin_page_redirect(current_session())
    if target:
        return redirect(target)
    return None

@home_bp.route("/")
def home():
    return home_index()

@home_bp.route("/health")
def health():
    return health_check()

@home_bp.route("/login")
def login_page():
    return view_entry("login")

@home_bp.route("/dashboard")
def dashboard_page():
    return view_entry("dashboard")

@home_bp.route("/admin")
def admin_page():
    return view_entry("admin")

@home_bp.route("/admin/dashboard")
def admin_dashboard_page():
    return view_entry("admin-dashboard")
