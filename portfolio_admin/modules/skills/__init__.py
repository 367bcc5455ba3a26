"""
Skills Admin Module
===================

Skills grouped by category, each with a 1-5 proficiency level.
"""

from ...core.resources import ResourceDefinition
from ...forms.fields import INT, TEXT, Field
from ..editor import create_editor_blueprint

skills_definition = ResourceDefinition(
    name='skills',
    label='Skill',
    title_field='name',
    discriminant='category',
    fields=[
        Field('name', TEXT, label='Name', required=True),
        Field('category', TEXT, label='Category', required=True),
        Field('level', INT, label='Level', choices=[1, 2, 3, 4, 5]),
        Field('icon', TEXT, label='Icon'),
        Field('order', INT, label='Display Order'),
    ],
    empty_message='Get started by adding your first skill.',
)

skills_bp = create_editor_blueprint(skills_definition)

__all__ = ['skills_bp', 'skills_definition']
