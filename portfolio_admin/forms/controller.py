"""
Entity Form Controller
======================

Owns the draft of a single record while it is being created or edited.

    EMPTY -> EDITING -> SUBMITTING -> EDITING (failure, draft kept)
                                   -> SAVED   (success, caller notified)
"""

from enum import Enum

from ..client.result import validation_error
from ..core.logging_service import LoggingService
from .attachments import AttachmentUpload
from .fields import LIST, split_items


class FormState(Enum):
    EMPTY = 'empty'
    EDITING = 'editing'
    SUBMITTING = 'submitting'
    SAVED = 'saved'


class EntityFormController:
    """Draft state machine for one record of ``definition``.

    Args:
        client: ResourceClient used for the upload and the record write
        definition: core.resources.ResourceDefinition
        record: existing record to edit; None starts a new draft
        on_save: called with the saved payload after a successful write
    """

    def __init__(self, client, definition, record=None, on_save=None):
        self.client = client
        self.definition = definition
        self.on_save = on_save
        self.state = FormState.EMPTY
        self.draft = {}
        self.record_id = None
        self.errors = {}
        self.error = ''
        self.attachment = AttachmentUpload(client) if definition.attachment_field else None
        self.load(record)

    @property
    def is_new(self):
        return self.record_id is None

    @property
    def is_submitting(self):
        return self.state is FormState.SUBMITTING

    def load(self, record=None):
        """Populate the draft from ``record``, or reset every field to zero."""
        fields = self.definition.fields
        self.draft = {f.name: f.zero_value() for f in fields}
        self.record_id = None
        self.errors = {}
        self.error = ''
        if self.attachment is not None:
            self.attachment.clear()

        if record is not None:
            for f in fields:
                self.draft[f.name] = f.copy_value(record.get(f.name))
            self.record_id = record.get('id')
            if self.attachment is not None:
                self.attachment.load_existing(record.get(self.definition.attachment_field))

        self.state = FormState.EDITING

    def cancel(self):
        self.draft = {}
        self.record_id = None
        self.errors = {}
        self.error = ''
        self.state = FormState.EMPTY

    # ===== Draft editing =====

    def set_field(self, name, value):
        field = self.definition.field(name)
        if field.kind == LIST:
            value = split_items(value)
        self.draft[name] = value
        self.errors.pop(name, None)

    def update_fields(self, values):
        for name, value in values.items():
            self.set_field(name, value)

    def add_item(self, name, value):
        """Append a trimmed, non-blank, not-yet-present item to a list field"""
        value = (value or '').strip()
        items = self.draft[name]
        if not value or value in items:
            return False
        items.append(value)
        return True

    def remove_item(self, name, index):
        items = self.draft[name]
        if 0 <= index < len(items):
            items.pop(index)
            return True
        return False

    # ===== Validation & submission =====

    def validate(self):
        self.errors = {
            f.name: f.required_message
            for f in self.definition.required_fields
            if f.is_blank(self.draft.get(f.name))
        }
        return self.errors

    def build_payload(self):
        payload = {f.name: f.to_payload(self.draft.get(f.name)) for f in self.definition.fields}
        if self.attachment is not None:
            payload[self.definition.attachment_field] = self.attachment.reference or None
        return payload

    def submit(self):
        """Validate, upload a pending attachment, then create or update.

        Returns the client result (Ok with the saved payload, or Err).
        """
        if self.state is FormState.SUBMITTING:
            return validation_error('A save is already in progress')
        if self.state is not FormState.EDITING:
            return validation_error('Nothing to save')

        self.error = ''
        if self.validate():
            self.error = next(iter(self.errors.values()))
            return validation_error(self.error)

        self.state = FormState.SUBMITTING
        try:
            if self.attachment is not None:
                uploaded = self.attachment.resolve()
                if not uploaded.ok:
                    self.error = uploaded.message
                    return uploaded
                self.draft[self.definition.attachment_field] = uploaded.payload

            payload = self.build_payload()
            resource = self.definition.name
            noun = self.definition.label.lower()
            if self.record_id is not None:
                result = self.client.update(resource, self.record_id, payload, noun=noun)
            else:
                result = self.client.create(resource, payload, noun=noun)

            if not result.ok:
                self.error = result.message or f'Failed to save {noun}'
                return result

            self.state = FormState.SAVED
            action = 'created' if self.record_id is None else 'updated'
            saved_id = result.payload.get('id') if isinstance(result.payload, dict) else None
            LoggingService.log_user_action(resource, f"{self.definition.label} {action}",
                                           details={'id': saved_id or self.record_id})
            if self.on_save is not None:
                self.on_save(result.payload)
            return result
        finally:
            if self.state is FormState.SUBMITTING:
                self.state = FormState.EDITING
