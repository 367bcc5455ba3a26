"""
Experience Admin Module
=======================

Work history and education entries, listed in two fixed sections.
"""

from ...core.resources import GroupSpec, ResourceDefinition
from ...forms.fields import BOOL, DATE, INT, TEXT, Field
from ..editor import create_editor_blueprint

experience_definition = ResourceDefinition(
    name='experience',
    label='Experience',
    plural_label='Experience',
    title_field='title',
    discriminant='type',
    groups=[
        GroupSpec('work', 'Work Experience', 'No work experience added yet.'),
        GroupSpec('education', 'Education', 'No education records added yet.'),
    ],
    fields=[
        Field('title', TEXT, label='Title', required=True),
        Field('company', TEXT, label='Company', required=True),
        Field('type', TEXT, label='Type', choices=['work', 'education']),
        Field('location', TEXT, label='Location'),
        Field('startDate', DATE, label='Start Date'),
        Field('endDate', DATE, label='End Date'),
        Field('current', BOOL, label='Current'),
        Field('description', TEXT, label='Description'),
        Field('order', INT, label='Display Order'),
    ],
    empty_title='No experience yet',
    empty_message='Get started by adding your first work experience or education.',
)

experience_bp = create_editor_blueprint(experience_definition)

__all__ = ['experience_bp', 'experience_definition']
