from flask import current_app
from app.services.dashboard_service import get_dashboard_stats
from app.utils.http import ok

def get_stats_handler():
    return ok(get_dashboard_stats(mode=current_app.config["ATTENDANCE_TRENDS_MODE"]))
