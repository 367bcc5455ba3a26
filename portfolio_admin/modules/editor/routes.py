"""
Editor Routes
=============

List / create / edit / delete screens shared by every content resource.
Each resource module calls create_editor_blueprint() with its definition.
"""

from flask import flash, redirect, render_template, request, url_for

from ...presenters.list_presenter import Intent, IntentKind
from ..dashboard.utils import admin_required, get_client
from .controller import ResourceListController


def register_routes(bp, definition):
    """Attach the editor routes for ``definition`` to blueprint ``bp``"""

    def _controller():
        return ResourceListController(get_client(), definition)

    def _render_form(form, record=None):
        return render_template(
            'editor/form.html',
            definition=definition,
            form=form,
            record=record,
        )

    def _handle_post(form):
        """Apply the posted fields and attachment, then submit.

        Returns True when the record was saved.
        """
        values = {
            f.name: f.from_form(request.form)
            for f in definition.fields
            if f.name != definition.attachment_field
        }
        form.update_fields(values)

        if form.attachment is not None:
            if request.form.get('clear_image'):
                form.attachment.clear()
            selected = form.attachment.select_storage(request.files.get('image'))
            if selected is not None and not selected.ok:
                form.error = selected.message
                return False

        return form.submit().ok

    @bp.route('/')
    @admin_required
    def list_view():
        controller = _controller()
        controller.refresh()
        if controller.error:
            flash(controller.error, 'error')
        return render_template(
            'editor/list.html',
            definition=definition,
            view=controller.view(),
        )

    @bp.route('/new', methods=['GET', 'POST'])
    @admin_required
    def new_record():
        form = _controller().new_form()

        if request.method == 'POST' and _handle_post(form):
            flash(f'{definition.label} created successfully', 'success')
            return redirect(url_for('.list_view'))

        return _render_form(form)

    @bp.route('/<record_id>/edit', methods=['GET', 'POST'])
    @admin_required
    def edit_record(record_id):
        controller = _controller()
        controller.refresh()
        record = controller.find(record_id)
        if record is None:
            flash(controller.error or f'{definition.label} not found', 'error')
            return redirect(url_for('.list_view'))

        form = controller.dispatch(controller.presenter.edit_intent(record))

        if request.method == 'POST' and _handle_post(form):
            flash(f'{definition.label} updated successfully', 'success')
            return redirect(url_for('.list_view'))

        return _render_form(form, record)

    @bp.route('/<record_id>/delete', methods=['POST'])
    @admin_required
    def delete_record(record_id):
        result = _controller().dispatch(Intent(IntentKind.DELETE, record_id=record_id))
        if result.ok:
            flash(f'{definition.label} deleted', 'success')
        else:
            flash(result.message, 'error')
        return redirect(url_for('.list_view'))
