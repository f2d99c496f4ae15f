import logging

import pytest

from ats_config.controls import FormState, FormStateError, describe_document
from ats_config.schema import parse_config


def _document(*fields: dict):
    return parse_config({"config": {"fields": list(fields)}})


@pytest.fixture()
def form() -> FormState:
    document = _document(
        {"type": "header", "id": "intro", "label": "Intro"},
        {"type": "checkbox", "id": "notify", "label": "Notify", "value": True},
        {"type": "text", "id": "project", "label": "Project"},
        {
            "type": "select",
            "id": "center",
            "label": "Center",
            "options": [{"id": "cc-1", "label": "One"}, {"id": "cc-2", "label": "Two"}],
        },
        {"type": "select", "id": "empty", "label": "Empty"},
        {"type": "text", "id": "ref", "label": "Ref", "value": "R-1", "disabled": True},
    )
    return FormState.from_document(document)


def test_initial_values_cover_rendered_interactive_controls(form: FormState) -> None:
    assert form.values == {"notify": True, "project": "", "center": "", "ref": "R-1"}
    assert "intro" not in form
    assert "empty" not in form


def test_update_and_webhook_data(form: FormState) -> None:
    form.update("project", "Spring hiring")
    form.update("center", "cc-2")
    form.update("notify", False)
    assert form.webhook_data() == {"notify": False, "project": "Spring hiring", "center": "cc-2", "ref": "R-1"}


@pytest.mark.parametrize(
    ("field_id", "value"),
    [
        ("missing", "x"),
        ("ref", "R-2"),
        ("notify", "yes"),
        ("project", True),
        ("center", "cc-9"),
        ("intro", "x"),
    ],
)
def test_update_rejects_invalid_values(form: FormState, field_id: str, value) -> None:
    with pytest.raises(FormStateError) as excinfo:
        form.update(field_id, value)
    assert excinfo.value.field_id == field_id


def test_apply_is_all_or_nothing(form: FormState) -> None:
    with pytest.raises(FormStateError):
        form.apply({"project": "Kept?", "notify": "no"})
    assert form.get("project") == ""


def test_select_can_be_cleared(form: FormState) -> None:
    form.update("center", "cc-1")
    form.update("center", "")
    assert form.get("center") == ""


def test_duplicate_ids_keep_last(caplog: pytest.LogCaptureFixture) -> None:
    document = _document(
        {"type": "text", "id": "dup", "label": "First", "value": "a"},
        {"type": "checkbox", "id": "dup", "label": "Second", "value": True},
    )
    with caplog.at_level(logging.WARNING, logger="ats_config.controls.form_state"):
        form = FormState.from_descriptors(describe_document(document))
    assert form.values == {"dup": True}
    assert any("duplicate" in record.getMessage() for record in caplog.records)
