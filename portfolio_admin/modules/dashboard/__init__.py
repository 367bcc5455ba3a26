"""
Dashboard Module
================

Admin dashboard interface for the portfolio admin console.

Provides core admin functionality:
- Admin login/logout against the content API
- Session check
- Landing page linking to the enabled content editors

This is the foundation module that the content editors plug into.
"""

from flask import Blueprint

# Note: Blueprint name is 'admin' so editors can redirect to 'admin.login'
dashboard_bp = Blueprint(
    'admin',
    __name__,
    url_prefix='/admin',
    template_folder='templates',
)

# Import routes after blueprint is created
from . import routes

__all__ = ['dashboard_bp']
