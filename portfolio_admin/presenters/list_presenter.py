"""
List/Edit Presenter
===================

Turns a collection of records into grouped view models and emits edit /
delete intents. It performs no I/O: the owning controller consumes the
intents and talks to the content API.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..forms.fields import parse_int
from .formatting import format_date, is_updated

OTHER_GROUP = 'other'
UNCATEGORIZED = 'Uncategorized'


class IntentKind(Enum):
    EDIT = 'edit'
    DELETE = 'delete'


@dataclass(frozen=True)
class Intent:
    kind: IntentKind
    record: Any = None
    record_id: Any = None


class RecordView:
    def __init__(self, record, title_field):
        self.record = record
        self.id = record.get('id')
        self.title = record.get(title_field) or ''
        self.order = record.get('order', 0)
        self.created = format_date(record.get('createdAt'))
        self.show_updated = is_updated(record)
        self.updated = format_date(record.get('updatedAt')) if self.show_updated else ''


class Group:
    def __init__(self, key, title, items, empty_message=''):
        self.key = key
        self.title = title
        self.items = items
        self.empty_message = empty_message

    @property
    def is_empty(self):
        return not self.items

    @property
    def count(self):
        return len(self.items)


class ListView:
    def __init__(self, groups, empty_title='', empty_message=''):
        self.groups = groups
        self.empty_title = empty_title
        self.empty_message = empty_message

    @property
    def total(self):
        return sum(g.count for g in self.groups)

    @property
    def is_empty(self):
        return self.total == 0


class ListPresenter:
    def __init__(self, definition):
        self.definition = definition

    def normalize(self, records):
        """Flatten the input into a list of records.

        Accepts a list, or a mapping of discriminant value -> records (the
        shape the skills endpoint answers with).
        """
        if not records:
            return []
        if not isinstance(records, Mapping):
            return list(records)

        disc = self.definition.discriminant
        flat = []
        for key, items in records.items():
            for record in items or []:
                if disc and record.get(disc) is None:
                    record = {**record, disc: key}
                flat.append(record)
        return flat

    def present(self, records):
        definition = self.definition
        records = self.normalize(records)
        if not records:
            return ListView([], definition.empty_title, definition.empty_message)

        # Dynamic sections follow the source order, before any sorting
        section_keys = self._section_keys(records)

        # sorted() is stable: equal orders keep the source order
        records = sorted(records, key=lambda r: parse_int(r.get('order')))
        views = [RecordView(r, definition.title_field) for r in records]

        if not definition.discriminant:
            groups = [Group(None, definition.plural_label, views, definition.empty_message)]
        elif definition.groups:
            groups = self._fixed_groups(views)
        else:
            groups = self._dynamic_groups(views, section_keys)

        return ListView(groups, definition.empty_title, definition.empty_message)

    def _fixed_groups(self, views):
        disc = self.definition.discriminant
        known = {spec.key for spec in self.definition.groups}
        groups = [
            Group(spec.key, spec.title,
                  [v for v in views if v.record.get(disc) == spec.key],
                  spec.empty_message)
            for spec in self.definition.groups
        ]
        leftovers = [v for v in views if v.record.get(disc) not in known]
        if leftovers:
            groups.append(Group(OTHER_GROUP, 'Other', leftovers))
        return groups

    def _section_keys(self, records):
        """Discriminant values in first-seen order"""
        disc = self.definition.discriminant
        if not disc:
            return []
        keys = []
        for record in records:
            key = record.get(disc) or UNCATEGORIZED
            if key not in keys:
                keys.append(key)
        return keys

    def _dynamic_groups(self, views, keys):
        disc = self.definition.discriminant
        grouped = {key: [] for key in keys}
        for view in views:
            grouped[view.record.get(disc) or UNCATEGORIZED].append(view)
        return [Group(key, key, items) for key, items in grouped.items()]

    # ===== Intents =====

    def edit_intent(self, record):
        return Intent(IntentKind.EDIT, record=record, record_id=record.get('id'))

    def delete_intent(self, record):
        return Intent(IntentKind.DELETE, record_id=record.get('id'))
