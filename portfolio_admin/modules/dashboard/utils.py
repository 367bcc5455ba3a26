from functools import wraps

from flask import current_app, redirect, request, session, url_for

from ...client.resource_client import ResourceClient
from ...client.session import FlaskSessionStore
from ...core.config import Config, get_config_value


def get_client():
    """ResourceClient bound to the current Flask session.

    ``PORTFOLIO_API_HTTP`` in app.config swaps the transport (tests use a
    fake; production leaves it unset and calls the requests module directly).
    """
    return ResourceClient(
        base_url=get_config_value('API_BASE_URL', Config.API_BASE_URL),
        session_store=FlaskSessionStore(),
        http=current_app.config.get('PORTFOLIO_API_HTTP'),
    )


def admin_required(f):
    """Redirect to the admin login page when no API token is in the session"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not session.get(Config.SESSION_TOKEN_KEY):
            return redirect(url_for('admin.login', next=request.path))
        return f(*args, **kwargs)
    return decorated_function
