"""
Resource Client
===============

Thin wrapper around the content API:
- builds absolute URLs from the configured base and a logical endpoint
- attaches the JSON content type and the admin bearer token
- decodes every response once into Ok(payload) or Err(kind, message)
"""

import requests

from ..core.config import Config, get_config_value
from ..core.logging_service import LoggingService
from .endpoints import collection_path, item_path, resolve_endpoint
from .result import Err, ErrorKind, Ok
from .session import MemorySessionStore

GENERIC_ERROR = 'Request failed'


def decode_response(response, fallback=GENERIC_ERROR):
    """Decode a requests.Response into Ok or Err.

    The content API answers ``{success, data|file, error}``. A 2xx body
    with ``success: false`` is still a failure; non-2xx bodies carrying an
    ``error`` string surface that message, anything else is a generic
    transport failure.
    """
    status = response.status_code
    try:
        body = response.json()
    except ValueError:
        body = None

    if not isinstance(body, dict):
        return Err(ErrorKind.TRANSPORT, fallback, status)

    if not 200 <= status < 300:
        message = body.get('error')
        if isinstance(message, str) and message:
            return Err(ErrorKind.SERVER, message, status)
        return Err(ErrorKind.TRANSPORT, fallback, status)

    if 'success' not in body:
        return Err(ErrorKind.TRANSPORT, fallback, status)

    if not body['success']:
        return Err(ErrorKind.SERVER, body.get('error') or fallback, status)

    if 'data' in body:
        return Ok(body['data'])
    if 'file' in body:
        return Ok(body['file'])
    return Ok(body)


class ResourceClient:
    """HTTP client for the portfolio content API."""

    def __init__(self, base_url=None, session_store=None, timeout=None, http=None):
        self.base_url = (base_url or get_config_value('API_BASE_URL', Config.API_BASE_URL)).rstrip('/')
        self.session_store = session_store if session_store is not None else MemorySessionStore()
        self.timeout = timeout or Config.API_TIMEOUT
        # Anything with requests' request() signature; the requests module itself by default
        self.http = http or requests

    def get_api_url(self, endpoint, *args):
        """Absolute URL for a logical endpoint name or raw path"""
        return f"{self.base_url}{resolve_endpoint(endpoint, *args)}"

    def get_auth_headers(self, json_body=True):
        """Default headers plus the bearer token when one is stored.

        Multipart requests leave Content-Type to requests so the boundary
        parameter is filled in.
        """
        headers = dict(Config.DEFAULT_HEADERS) if json_body else {}
        token = self.session_store.get_token()
        if token:
            headers['Authorization'] = f"Bearer {token}"
        return headers

    def request(self, method, endpoint, body=None, files=None, fallback=GENERIC_ERROR):
        """Perform one call against the content API and decode the answer."""
        url = self.get_api_url(endpoint)
        headers = self.get_auth_headers(json_body=files is None)

        try:
            response = self.http.request(
                method,
                url,
                headers=headers,
                json=body if files is None else None,
                files=files,
                timeout=self.timeout,
            )
        except requests.Timeout as e:
            LoggingService.log_api_call('api_client', url, method, None, {'error': f'timeout: {e}'})
            return Err(ErrorKind.TRANSPORT, fallback)
        except requests.RequestException as e:
            LoggingService.log_error_with_traceback('api_client', e, {'method': method, 'url': url})
            return Err(ErrorKind.TRANSPORT, fallback)

        LoggingService.log_api_call('api_client', url, method, response.status_code)
        return decode_response(response, fallback)

    # ===== Resource CRUD =====
    # ``noun`` words the generic failure message; defaults to the resource name

    def list(self, resource, noun=None):
        return self.request('GET', collection_path(resource),
                            fallback=f'Failed to load {noun or resource}')

    def get(self, resource, record_id, noun=None):
        return self.request('GET', item_path(resource, record_id),
                            fallback=f'Failed to load {noun or resource}')

    def create(self, resource, body, noun=None):
        return self.request('POST', collection_path(resource), body,
                            fallback=f'Failed to save {noun or resource}')

    def update(self, resource, record_id, body, noun=None):
        return self.request('PUT', item_path(resource, record_id), body,
                            fallback=f'Failed to save {noun or resource}')

    def delete(self, resource, record_id, noun=None):
        return self.request('DELETE', item_path(resource, record_id),
                            fallback=f'Failed to delete {noun or resource}')

    # ===== Uploads =====

    def upload_image(self, filename, data, content_type):
        """Upload an image as multipart field ``image``.

        Returns Ok(file) where file carries at least ``url``.
        """
        files = {Config.IMAGE_FIELD_NAME: (filename, data, content_type)}
        result = self.request(
            'POST', resolve_endpoint('UPLOAD_IMAGE'), files=files,
            fallback='Failed to upload image'
        )
        if result.ok and not (isinstance(result.payload, dict) and result.payload.get('url')):
            return Err(ErrorKind.TRANSPORT, 'Failed to upload image')
        return result

    def delete_image(self, filename):
        return self.request('DELETE', resolve_endpoint('DELETE_IMAGE', filename),
                            fallback='Failed to delete image')

    def image_url(self, reference):
        """Stored image reference -> URL a browser can load.

        Server paths such as ``/uploads/a.png`` live on the content API, so
        they are joined onto the API base; absolute and data: URLs pass through.
        """
        if not reference:
            return ''
        if reference.startswith(('http://', 'https://', '//', 'data:')):
            return reference
        return f"{self.base_url}/{reference.lstrip('/')}"

    # ===== Admin session =====

    def login(self, email, password):
        """Exchange credentials for a token and keep it in the session store"""
        result = self.request(
            'POST', resolve_endpoint('ADMIN_LOGIN'),
            {'email': email, 'password': password},
            fallback='Login failed'
        )
        if not result.ok:
            return result

        token = _extract_token(result.payload)
        if not token:
            return Err(ErrorKind.TRANSPORT, 'Login failed')

        self.session_store.set_token(token)
        return result

    def me(self):
        return self.request('GET', resolve_endpoint('ADMIN_ME'), fallback='Session check failed')

    def logout(self):
        self.session_store.clear()

    @property
    def is_authenticated(self):
        return bool(self.session_store.get_token())


def _extract_token(payload):
    if not isinstance(payload, dict):
        return None
    if payload.get('token'):
        return payload['token']
    admin = payload.get('admin')
    if isinstance(admin, dict):
        return admin.get('token')
    return None
