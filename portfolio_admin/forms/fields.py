"""
Field schema for entity forms.

Each field knows its zero value, how to copy a stored value into a draft
and how to coerce raw form input into the value sent to the content API.
"""

import re

TEXT = 'text'
INT = 'int'
BOOL = 'bool'
LIST = 'list'
DATE = 'date'

_LEADING_INT = re.compile(r'^\s*([-+]?\d+)')
_TRUE_VALUES = {'1', 'true', 'on', 'yes'}


def parse_int(value, default=0):
    """Leading integer of the input, ``default`` when there is none.

    '12' -> 12, '3.7' -> 3, ' 4px' -> 4, 'abc' -> 0, None -> 0
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if value is None:
        return default
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else default


def parse_bool(value):
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in _TRUE_VALUES


def split_items(value):
    """Split comma or newline separated text into trimmed, unique items"""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        raw = value
    else:
        raw = re.split(r'[,\n]', str(value))

    items = []
    for item in raw:
        item = str(item).strip()
        if item and item not in items:
            items.append(item)
    return items


class Field:
    def __init__(self, name, kind=TEXT, label=None, required=False, choices=None):
        self.name = name
        self.kind = kind
        self.label = label or name.replace('_', ' ').title()
        self.required = required
        self.choices = choices

    def __repr__(self):
        return f"Field({self.name!r}, {self.kind!r})"

    @property
    def required_message(self):
        return f"{self.label} is required"

    def zero_value(self):
        if self.kind == INT:
            return 0
        if self.kind == BOOL:
            return False
        if self.kind == LIST:
            return []
        return ''

    def copy_value(self, value):
        """Value stored on a record -> draft value (lists copied, never shared)"""
        if value is None:
            return self.zero_value()
        if self.kind == LIST:
            return list(value)
        return value

    def is_blank(self, value):
        if value is None:
            return True
        if self.kind == LIST:
            return len(value) == 0
        if isinstance(value, str):
            return not value.strip()
        return False

    def to_payload(self, value):
        """Draft value -> value sent to the content API"""
        if self.kind == INT:
            return parse_int(value)
        if self.kind == BOOL:
            return parse_bool(value)
        if self.kind == LIST:
            return split_items(value)
        if self.kind == DATE:
            return value.strip() if isinstance(value, str) and value.strip() else None
        return value.strip() if isinstance(value, str) else value

    def from_form(self, form):
        """Read this field from a werkzeug MultiDict (request.form)"""
        if self.kind == BOOL:
            return parse_bool(form.get(self.name))
        if self.kind == LIST:
            return split_items(form.get(self.name, ''))
        return form.get(self.name, '')
