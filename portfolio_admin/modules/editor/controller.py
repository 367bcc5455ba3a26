"""
Resource list controller: owns the authoritative collection for one
resource and consumes the intents emitted by its ListPresenter.
"""

from ...core.logging_service import LoggingService
from ...forms.controller import EntityFormController
from ...presenters.list_presenter import IntentKind, ListPresenter


class ResourceListController:

    def __init__(self, client, definition):
        self.client = client
        self.definition = definition
        self.presenter = ListPresenter(definition)
        self.records = []
        self.error = ''

    def refresh(self):
        """Re-fetch the collection. On failure the previous list is kept."""
        result = self.client.list(self.definition.name, noun=self.definition.plural_label.lower())
        if result.ok:
            self.records = self.presenter.normalize(result.payload)
            self.error = ''
        else:
            self.error = result.message
        return result

    def find(self, record_id):
        for record in self.records:
            if str(record.get('id')) == str(record_id):
                return record
        return None

    def view(self):
        return self.presenter.present(self.records)

    def new_form(self):
        return EntityFormController(self.client, self.definition, on_save=self._patch_saved)

    def dispatch(self, intent):
        """Single entry point for presenter intents.

        EDIT returns a form controller pre-populated with the record;
        DELETE issues the delete call and returns its result.
        """
        if intent.kind is IntentKind.EDIT:
            return EntityFormController(
                self.client, self.definition, record=intent.record, on_save=self._patch_saved
            )

        if intent.kind is IntentKind.DELETE:
            result = self.client.delete(self.definition.name, intent.record_id,
                                        noun=self.definition.label.lower())
            if result.ok:
                self.records = [r for r in self.records if str(r.get('id')) != str(intent.record_id)]
                LoggingService.log_user_action(
                    self.definition.name, f"{self.definition.label} deleted",
                    details={'id': intent.record_id}
                )
            return result

        raise ValueError(f"Unknown intent: {intent.kind}")

    def _patch_saved(self, saved):
        """Replace or append the saved record in the local collection"""
        if not isinstance(saved, dict) or saved.get('id') is None:
            return
        for index, record in enumerate(self.records):
            if str(record.get('id')) == str(saved['id']):
                self.records[index] = saved
                return
        self.records.append(saved)
