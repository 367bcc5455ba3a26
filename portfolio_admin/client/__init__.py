"""
Content API Client
==================

Resource client, endpoint map, session stores and result types used by
every admin screen.
"""

from .endpoints import API_ENDPOINTS, resolve_endpoint
from .resource_client import ResourceClient, decode_response
from .result import Err, ErrorKind, Ok
from .session import FlaskSessionStore, MemorySessionStore

__all__ = [
    'API_ENDPOINTS', 'resolve_endpoint', 'ResourceClient', 'decode_response',
    'Ok', 'Err', 'ErrorKind', 'FlaskSessionStore', 'MemorySessionStore',
]
