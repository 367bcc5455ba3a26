"""
Entity Forms
============

Field schema, draft controller and deferred image upload shared by the
project, skill and experience editors.
"""

from .attachments import AttachmentUpload
from .controller import EntityFormController, FormState
from .fields import Field

__all__ = ['AttachmentUpload', 'EntityFormController', 'FormState', 'Field']
