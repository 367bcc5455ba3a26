"""
Content Editor Module
=====================

Blueprint factory behind the projects, skills and experience editors.

Provides:
- Grouped list view with edit/delete actions
- Create and edit forms driven by the resource's field schema
- Deferred image upload for resources with an attachment field
"""

from flask import Blueprint

from .controller import ResourceListController
from .routes import register_routes


def create_editor_blueprint(definition):
    bp = Blueprint(
        f'{definition.name}_admin',
        __name__,
        url_prefix=f'/admin/{definition.name}',
        template_folder='templates',
    )
    register_routes(bp, definition)
    return bp


__all__ = ['create_editor_blueprint', 'ResourceListController']
