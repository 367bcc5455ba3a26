"""
Admin Dashboard Routes
======================

Login is delegated to the content API: the returned token is kept in the
Flask session and sent as a bearer token by every editor request.
"""

from datetime import datetime

from flask import current_app, flash, jsonify, redirect, render_template, request, session, url_for

from ...core.logging_service import LoggingService
from ...presenters.formatting import format_date, format_month, level_text
from . import dashboard_bp
from .utils import admin_required, get_client


def _is_safe_next(target):
    return bool(target) and target.startswith('/') and not target.startswith('//')


@dashboard_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Admin login route"""
    if request.method == 'POST':
        email = request.form.get('email', '').strip().lower()
        password = request.form.get('password', '')

        if not email or not password:
            flash('Please enter both email and password', 'error')
            return render_template('dashboard/login.html'), 400

        client = get_client()
        result = client.login(email, password)
        if result.ok:
            session['admin_email'] = email
            LoggingService.log_user_action('auth', 'admin login', user_id=email)
            flash('Login successful', 'success')

            next_page = request.args.get('next')
            if not _is_safe_next(next_page):
                next_page = url_for('admin.dashboard')
            return redirect(next_page)

        LoggingService.warning('auth', 'Failed admin login', {'email': email, 'error': result.message})
        flash(result.message, 'error')

    return render_template('dashboard/login.html')


@dashboard_bp.route('/logout')
def logout():
    """Admin logout route"""
    get_client().logout()
    session.pop('admin_email', None)
    flash('You have been logged out', 'info')
    return redirect(url_for('admin.login'))


@dashboard_bp.route('/')
@dashboard_bp.route('/dashboard')
@admin_required
def dashboard():
    """Admin landing page listing the enabled editors"""
    me = get_client().me()
    admin = me.payload if me.ok and isinstance(me.payload, dict) else {}
    ext = current_app.extensions.get('portfolio_admin')
    definitions = ext.get_definitions() if ext else []
    return render_template(
        'dashboard/dashboard.html',
        admin=admin,
        definitions=definitions,
    )


@dashboard_bp.route('/status')
def status():
    """Session check for the current browser"""
    client = get_client()
    if not client.is_authenticated:
        return jsonify({'logged_in': False}), 401

    me = client.me()
    if not me.ok:
        return jsonify({'logged_in': False, 'error': me.message}), 401
    return jsonify({
        'logged_in': True,
        'admin_email': session.get('admin_email'),
        'admin': me.payload,
    })


@dashboard_bp.app_template_filter('format_date')
def format_date_filter(value):
    return format_date(value)


@dashboard_bp.app_template_filter('format_month')
def format_month_filter(value):
    return format_month(value)


@dashboard_bp.app_template_filter('level_text')
def level_text_filter(value):
    return level_text(value)


@dashboard_bp.app_template_filter('date_input')
def date_input_filter(value):
    """Stored timestamp -> YYYY-MM-DD for <input type=date>"""
    return str(value)[:10] if value else ''


@dashboard_bp.app_context_processor
def utility_processor():
    """
    Add utility functions to template context
    """
    def current_year():
        """Return current year for footer"""
        return datetime.now().year

    return dict(current_year=current_year)


@dashboard_bp.app_template_filter('image_url')
def image_url_filter(value):
    """Stored image reference -> URL served by the content API"""
    return get_client().image_url(value)
