"""
Session stores hold the admin bearer token.

The store is handed to ResourceClient explicitly; the client never reaches
for ambient state on its own.
"""

from flask import session

from ..core.config import Config


class MemorySessionStore:
    """Token held in a plain dict. Used by scripts and tests."""

    def __init__(self, token=None, key=Config.SESSION_TOKEN_KEY):
        self.key = key
        self._data = {}
        if token:
            self._data[key] = token

    def get_token(self):
        return self._data.get(self.key)

    def set_token(self, token):
        self._data[self.key] = token

    def clear(self):
        self._data.pop(self.key, None)


class FlaskSessionStore:
    """Token persisted in the Flask session cookie under ``adminToken``."""

    def __init__(self, key=Config.SESSION_TOKEN_KEY):
        self.key = key

    def get_token(self):
        return session.get(self.key)

    def set_token(self, token):
        session[self.key] = token

    def clear(self):
        session.pop(self.key, None)
