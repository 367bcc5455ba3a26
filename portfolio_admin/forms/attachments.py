"""
Attachment Upload Flow
======================

Selecting a file only validates it and builds a local data-URI preview.
The upload itself is deferred until the owning form is submitted.
"""

import base64

from ..core.config import Config
from ..client.result import Ok, validation_error


class PendingFile:
    def __init__(self, filename, content_type, data):
        self.filename = filename
        self.content_type = content_type
        self.data = data

    @property
    def size(self):
        return len(self.data)


def make_preview(content_type, data):
    """Renderable data: URI for an image held only in memory"""
    encoded = base64.b64encode(data).decode('ascii')
    return f"data:{content_type};base64,{encoded}"


class AttachmentUpload:
    """Image attachment state for one draft."""

    def __init__(self, client, max_size=None):
        self.client = client
        self.max_size = max_size or Config.MAX_IMAGE_SIZE
        self.pending = None
        self.preview = None
        self.error = ''
        # Bumped on clear() so templates render a fresh, empty file input
        self.picker_version = 0

    @property
    def has_pending(self):
        return self.pending is not None

    @property
    def reference(self):
        """Current attachment reference: '' , a data: preview or a server URL"""
        return self.preview or ''

    @property
    def is_local_preview(self):
        return bool(self.preview) and self.preview.startswith('data:')

    def load_existing(self, url):
        self.pending = None
        self.preview = url or None
        self.error = ''

    def select(self, filename, content_type, data):
        """Validate a picked file. Returns Ok(preview) or a validation Err."""
        if not content_type or not content_type.startswith('image/'):
            self.error = 'Please select an image file'
            return validation_error(self.error)

        if len(data) > self.max_size:
            self.error = f'Image size must be less than {self.max_size // (1024 * 1024)}MB'
            return validation_error(self.error)

        self.pending = PendingFile(filename, content_type, data)
        self.preview = make_preview(content_type, data)
        self.error = ''
        return Ok(self.preview)

    def select_storage(self, storage):
        """Adapter for a werkzeug FileStorage from request.files"""
        if storage is None or not storage.filename:
            return None
        return self.select(storage.filename, storage.mimetype, storage.read())

    def clear(self):
        self.pending = None
        self.preview = None
        self.error = ''
        self.picker_version += 1

    def resolve(self):
        """Upload the pending file, if any, and return Ok(reference).

        On success the server URL replaces the preview and the pending file
        is dropped, so a later retry reuses the uploaded reference.
        """
        if self.pending is None:
            if self.is_local_preview:
                # A preview without its file cannot be persisted
                return Ok('')
            return Ok(self.reference)

        result = self.client.upload_image(
            self.pending.filename, self.pending.data, self.pending.content_type
        )
        if not result.ok:
            self.error = result.message
            return result

        self.pending = None
        self.preview = result.payload['url']
        self.error = ''
        return Ok(self.preview)
