"""
Portfolio Admin - A Flask Admin Console for Portfolio Sites
===========================================================

Admin screens for a personal portfolio whose content lives behind a
remote HTTP API:
- Projects (with thumbnail upload and technology tags)
- Skills grouped by category
- Work and education experience

Usage:
    from portfolio_admin import PortfolioAdmin

    app = Flask(__name__)
    PortfolioAdmin(app, {'features': {'skills': False}})
"""

__version__ = '0.1.0'

from .core.config import Config

DEFAULT_FEATURES = {
    'projects': True,
    'skills': True,
    'experience': True,
}


class PortfolioAdmin:
    """Flask extension registering the dashboard and the content editors."""

    def __init__(self, app=None, config=None):
        self._config = dict(config or {})
        self._registered = []
        self._definitions = []
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        if not app.config.get('SECRET_KEY'):
            app.config['SECRET_KEY'] = Config.SECRET_KEY
        app.config.setdefault('API_BASE_URL', self._config.get('api_base_url', Config.API_BASE_URL))
        app.config.setdefault('ADMIN_LOG_DB', Config.ADMIN_LOG_DB)
        app.config.setdefault('BRAND_NAME', self._config.get('brand_name', Config.BRAND_NAME))

        from .modules.dashboard import dashboard_bp
        app.register_blueprint(dashboard_bp)
        self._registered.append('dashboard')

        features = {**DEFAULT_FEATURES, **self._config.get('features', {})}
        for name, enabled in features.items():
            if not enabled:
                continue
            bp, definition = self._load_module(name)
            app.register_blueprint(bp)
            self._registered.append(name)
            self._definitions.append(definition)

        @app.context_processor
        def inject_admin_context():
            return dict(
                brand_name=app.config['BRAND_NAME'],
                admin_definitions=self._definitions,
            )

        app.extensions['portfolio_admin'] = self

    @staticmethod
    def _load_module(name):
        if name == 'projects':
            from .modules.projects import projects_bp, projects_definition
            return projects_bp, projects_definition
        if name == 'skills':
            from .modules.skills import skills_bp, skills_definition
            return skills_bp, skills_definition
        if name == 'experience':
            from .modules.experience import experience_bp, experience_definition
            return experience_bp, experience_definition
        raise ValueError(f"Unknown feature module: {name}")

    def get_registered_modules(self):
        return list(self._registered)

    def get_definitions(self):
        return list(self._definitions)


__all__ = ['PortfolioAdmin', 'Config']
