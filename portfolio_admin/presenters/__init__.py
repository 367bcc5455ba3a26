"""
List Presenters
===============

Grouped list view models, edit/delete intents and display formatting.
"""

from .formatting import format_date, format_month, is_updated, level_text
from .list_presenter import Group, Intent, IntentKind, ListPresenter, ListView, RecordView

__all__ = [
    'format_date', 'format_month', 'is_updated', 'level_text',
    'Group', 'Intent', 'IntentKind', 'ListPresenter', 'ListView', 'RecordView',
]
