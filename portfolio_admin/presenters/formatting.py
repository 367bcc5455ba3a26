"""
Display helpers used by the list views and registered as Jinja filters.
"""

from datetime import datetime

LEVELS = {
    1: 'Beginner',
    2: 'Basic',
    3: 'Intermediate',
    4: 'Advanced',
    5: 'Expert',
}


def parse_timestamp(value):
    """ISO-8601 string (a trailing Z allowed) -> datetime, None if unparseable"""
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    text = str(value).strip()
    if text.endswith('Z'):
        text = text[:-1] + '+00:00'
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def format_date(value):
    """'2024-01-05T10:00:00Z' -> 'Jan 5, 2024'"""
    dt = parse_timestamp(value)
    if dt is None:
        return value or ''
    return f"{dt:%b} {dt.day}, {dt.year}"


def format_month(value):
    """'2024-01-05' -> 'Jan 2024'; blank means the entry is still running"""
    if not value:
        return 'Present'
    dt = parse_timestamp(value)
    if dt is None:
        return str(value)
    return f"{dt:%b %Y}"


def level_text(level):
    try:
        return LEVELS.get(int(level), 'Unknown')
    except (TypeError, ValueError):
        return 'Unknown'


def is_updated(record):
    """True once the record has been mutated after creation"""
    return record.get('updatedAt') != record.get('createdAt')
