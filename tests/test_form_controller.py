"""
Entity form controller tests: draft lifecycle, validation and submission.
"""

from portfolio_admin.client import ErrorKind
from portfolio_admin.forms import EntityFormController, FormState
from portfolio_admin.forms.fields import parse_int
from portfolio_admin.modules.experience import experience_definition
from portfolio_admin.modules.projects import projects_definition
from portfolio_admin.modules.skills import skills_definition

from conftest import FakeResponse, make_project


def project_form(api, record=None, on_save=None):
    return EntityFormController(api, projects_definition, record=record, on_save=on_save)


# ---------------------------------------------------------------------------
# Initialisation
# ---------------------------------------------------------------------------

def test_new_draft_uses_zero_values(api):
    form = project_form(api)

    assert form.state is FormState.EDITING
    assert form.is_new
    assert form.draft == {
        "title": "", "description": "", "image": "", "liveUrl": "", "githubUrl": "",
        "technologies": [], "featured": False, "order": 0,
    }


def test_draft_copies_record_without_aliasing_lists(api):
    record = make_project(technologies=["Flask"], order=3, featured=True)
    form = project_form(api, record)

    form.draft["technologies"].append("Redis")
    form.add_item("technologies", "Celery")

    assert record["technologies"] == ["Flask"]
    assert form.draft["order"] == 3
    assert form.draft["featured"] is True
    assert form.record_id == 7


def test_reload_without_record_clears_previous_state(api):
    form = project_form(api, make_project(image="/uploads/a.png"))

    form.load()

    assert form.record_id is None
    assert form.draft["title"] == ""
    assert form.draft["technologies"] == []
    assert form.attachment.reference == ""


def test_experience_discriminant_and_dates_are_copied(api):
    record = {"id": 2, "title": "Engineer", "company": "Acme", "type": "education",
              "startDate": "2020-09-01", "endDate": None, "current": True, "order": 1}
    form = EntityFormController(api, experience_definition, record=record)

    assert form.draft["type"] == "education"
    assert form.draft["startDate"] == "2020-09-01"
    assert form.draft["endDate"] == ""
    assert form.attachment is None


# ---------------------------------------------------------------------------
# Draft editing
# ---------------------------------------------------------------------------

def test_add_item_trims_and_ignores_blanks_and_duplicates(api):
    form = project_form(api)

    assert form.add_item("technologies", "  React ")
    assert not form.add_item("technologies", "React")
    assert not form.add_item("technologies", "   ")
    assert form.remove_item("technologies", 0)
    assert not form.remove_item("technologies", 5)
    assert form.draft["technologies"] == []


def test_set_field_splits_list_text(api):
    form = project_form(api)
    form.set_field("technologies", "Flask, React\nFlask")
    assert form.draft["technologies"] == ["Flask", "React"]


def test_parse_int_is_lenient():
    assert parse_int("12") == 12
    assert parse_int("3.7") == 3
    assert parse_int("4px") == 4
    assert parse_int("abc") == 0
    assert parse_int("") == 0
    assert parse_int(None) == 0


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def test_missing_title_fails_locally_without_network(api, http):
    form = project_form(api)
    form.update_fields({"title": "", "description": "x"})

    result = form.submit()

    assert result.kind is ErrorKind.VALIDATION
    assert result.message == "Title is required"
    assert form.errors == {"title": "Title is required"}
    assert form.state is FormState.EDITING
    assert http.calls == []


def test_whitespace_only_required_field_is_blank(api, http):
    form = EntityFormController(api, skills_definition)
    form.update_fields({"name": "Python", "category": "   "})

    assert not form.submit().ok
    assert form.errors == {"category": "Category is required"}
    assert http.calls == []


# ---------------------------------------------------------------------------
# Submission
# ---------------------------------------------------------------------------

def test_create_coerces_non_numeric_order_to_zero(api, http):
    saved = []
    http.ok("POST", "/api/projects", status=201, data={"id": 11, "title": "Site"})
    form = project_form(api, on_save=saved.append)
    form.update_fields({"title": "Site", "description": "d", "order": "abc"})

    result = form.submit()

    assert result.ok
    assert form.state is FormState.SAVED
    assert saved == [{"id": 11, "title": "Site"}]
    payload = http.calls_to("POST", "/api/projects")[0].json
    assert payload["order"] == 0
    assert payload["image"] is None
    assert payload["featured"] is False


def test_existing_record_is_updated_with_put(api, http):
    http.ok("PUT", "/api/projects/7", data=make_project(updated="2024-02-01T00:00:00Z"))
    form = project_form(api, make_project())
    form.set_field("title", "Site v2")

    assert form.submit().ok

    call = http.calls[0]
    assert call.method == "PUT"
    assert call.json["title"] == "Site v2"
    assert http.calls_to("POST", "/api/projects") == []


def test_server_error_keeps_draft_for_retry(api, http):
    http.respond(
        "POST", "/api/projects",
        FakeResponse(400, {"success": False, "error": "Slug already taken"}),
        FakeResponse(200, {"success": True, "data": {"id": 12}}),
    )
    form = project_form(api)
    form.update_fields({"title": "Site", "description": "d", "technologies": "Flask"})

    first = form.submit()

    assert first.message == "Slug already taken"
    assert form.error == "Slug already taken"
    assert form.state is FormState.EDITING
    assert form.draft["title"] == "Site"

    assert form.submit().ok
    assert len(http.calls_to("POST", "/api/projects")) == 2


def test_transport_error_uses_generic_message(api, http):
    http.respond("POST", "/api/projects", FakeResponse(503, text="Service Unavailable"))
    form = project_form(api)
    form.update_fields({"title": "Site", "description": "d"})

    result = form.submit()

    assert result.kind is ErrorKind.TRANSPORT
    assert form.error == "Failed to save project"
    assert form.state is FormState.EDITING


def test_resubmission_while_submitting_is_rejected(api, http):
    form = project_form(api)
    form.update_fields({"title": "Site", "description": "d"})
    nested = []

    def resubmit(call):
        nested.append(form.submit())

    http.on_request = resubmit
    http.ok("POST", "/api/projects", data={"id": 1})

    assert form.submit().ok
    assert nested[0].message == "A save is already in progress"
    assert len(http.calls) == 1


def test_saved_or_cancelled_form_does_not_submit_again(api, http):
    http.ok("POST", "/api/projects", data={"id": 1})
    form = project_form(api)
    form.update_fields({"title": "Site", "description": "d"})
    form.submit()

    assert form.submit().message == "Nothing to save"

    form.cancel()
    assert form.state is FormState.EMPTY
    assert not form.submit().ok
    assert len(http.calls) == 1
