"""
Projects Admin Module
=====================

Admin interface for project portfolio management.
Plugs into the admin dashboard module.

Provides:
- Project creation and editing
- Featured flag and display order
- Image upload for project thumbnails
- Technologies tagging
"""

from ...core.resources import ResourceDefinition
from ...forms.fields import BOOL, INT, LIST, TEXT, Field
from ..editor import create_editor_blueprint

projects_definition = ResourceDefinition(
    name='projects',
    label='Project',
    title_field='title',
    attachment_field='image',
    fields=[
        Field('title', TEXT, label='Title', required=True),
        Field('description', TEXT, label='Description', required=True),
        Field('image', TEXT, label='Project Image'),
        Field('liveUrl', TEXT, label='Live Demo URL'),
        Field('githubUrl', TEXT, label='GitHub URL'),
        Field('technologies', LIST, label='Technologies'),
        Field('featured', BOOL, label='Featured Project'),
        Field('order', INT, label='Display Order'),
    ],
)

projects_bp = create_editor_blueprint(projects_definition)

__all__ = ['projects_bp', 'projects_definition']
