import pytest

from ats_config.controls import describe_document
from ats_config.schema import (
    FIELD_TYPES,
    CheckboxField,
    ConfigDocument,
    FieldShapeError,
    ParagraphField,
    SelectField,
    StructuralError,
    TextField,
    drop_nulls,
    parse_config,
    validate_config,
)


def _doc(*fields: dict) -> dict:
    return {"config": {"fields": list(fields)}}


def test_drop_nulls_only_removes_null_keys() -> None:
    assert drop_nulls({"a": None, "b": False, "c": "", "d": 0}) == {"b": False, "c": "", "d": 0}
    assert drop_nulls(["x", None]) == ["x", None]


def test_null_and_absent_keys_parse_identically() -> None:
    with_nulls = _doc(
        {
            "type": "text",
            "id": "project",
            "label": "Project",
            "value": None,
            "placeholder": None,
            "disabled": None,
        },
        {"type": "paragraph", "id": "help", "label": "Help", "label-markdown": None, "label-class": None},
    )
    without = _doc(
        {"type": "text", "id": "project", "label": "Project"},
        {"type": "paragraph", "id": "help", "label": "Help"},
    )
    assert parse_config(with_nulls) == parse_config(without)


def test_fields_keep_document_order_and_types() -> None:
    document = parse_config(
        _doc(
            {"type": "header", "id": "h", "label": "Heading"},
            {"type": "checkbox", "id": "c", "label": "Check", "value": True},
            {"type": "select", "id": "s", "label": "Pick", "options": [{"id": "a", "label": "A"}]},
            {"type": "text", "id": "t", "label": "Name", "placeholder": "Jane"},
        )
    )
    assert [field.id for field in document.fields] == ["h", "c", "s", "t"]
    assert isinstance(document.fields[1], CheckboxField)
    assert isinstance(document.fields[2], SelectField)
    assert document.fields[2].options[0].label == "A"
    assert isinstance(document.fields[3], TextField)
    assert document.fields[3].placeholder == "Jane"


def test_every_field_type_is_accepted() -> None:
    fields = [{"type": tag, "id": f"f-{tag}", "label": tag} for tag in FIELD_TYPES]
    document = parse_config(_doc(*fields))
    assert tuple(field.type for field in document.fields) == FIELD_TYPES


def test_checkbox_string_value_is_dropped() -> None:
    document = parse_config(_doc({"type": "checkbox", "id": "c", "label": "Check", "value": "yes"}))
    assert document.fields[0].value is None


def test_numeric_text_value_is_dropped() -> None:
    document = parse_config(_doc({"type": "text", "id": "t", "label": "Count", "value": 3}))
    assert document.fields[0].value is None


def test_label_fields_read_hyphenated_keys() -> None:
    document = parse_config(
        _doc(
            {
                "type": "paragraph",
                "id": "p",
                "label": "plain",
                "label-markdown": "**rich**",
                "label-html": "<b>rich</b>",
                "label-class": "warning",
            }
        )
    )
    field = document.fields[0]
    assert isinstance(field, ParagraphField)
    assert field.label_markdown == "**rich**"
    assert field.label_html == "<b>rich</b>"
    assert field.label_class == "warning"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("INFO", "info"),
        (" Success ", "success"),
        ("warn", "warning"),
        ("danger", "error"),
        ("purple", "default"),
        (7, "default"),
    ],
)
def test_label_class_is_normalized(raw, expected) -> None:
    document = parse_config(_doc({"type": "header", "id": "h", "label": "H", "label-class": raw}))
    assert document.fields[0].label_class == expected


def test_unknown_keys_are_ignored() -> None:
    document = parse_config(
        _doc({"type": "header", "id": "h", "label": "H", "value": "x", "options": [], "tooltip": "?"})
    )
    assert document.fields[0].id == "h"


def test_unknown_field_type_rejects_whole_document() -> None:
    raw = _doc(
        {"type": "text", "id": "ok", "label": "Fine"},
        {"type": "bogus", "id": "x", "label": "Broken"},
    )
    result = validate_config(raw)
    assert not result.ok
    assert result.document is None
    assert isinstance(result.error, FieldShapeError)
    assert result.error.field_index == 1
    assert result.error.field_id == "x"


def test_legacy_hidden_type_has_dedicated_message() -> None:
    with pytest.raises(FieldShapeError) as excinfo:
        parse_config(_doc({"type": "hidden", "id": "secret", "label": "Secret", "value": "1"}))
    issue = excinfo.value.issues[0]
    assert issue.message == "field type 'hidden' is no longer supported"
    assert issue.location == "config.fields[0]"


def test_missing_label_reports_field_location() -> None:
    with pytest.raises(FieldShapeError) as excinfo:
        parse_config(_doc({"type": "select", "id": "s"}))
    assert excinfo.value.issues[0].location == "config.fields[0].label"
    assert excinfo.value.field_id == "s"


def test_empty_id_is_rejected() -> None:
    with pytest.raises(FieldShapeError):
        parse_config(_doc({"type": "text", "id": "", "label": "Name"}))


@pytest.mark.parametrize(
    "raw",
    [
        [],
        {},
        {"config": None},
        {"config": {"fields": None}},
        {"config": {"fields": "nope"}},
    ],
)
def test_structural_errors(raw) -> None:
    result = validate_config(raw)
    assert isinstance(result.error, StructuralError)
    assert result.error.kind == "structural"
    with pytest.raises(StructuralError):
        result.unwrap()


def test_to_wire_uses_hyphenated_keys_and_omits_absent() -> None:
    document = ConfigDocument.model_validate(
        _doc({"type": "subheader", "id": "s", "label": "Sub", "label-class": "info", "label-markdown": None})
    )
    assert document.to_wire() == {
        "config": {"fields": [{"type": "subheader", "id": "s", "label": "Sub", "label-class": "info"}]}
    }


_OPTIONAL_ATTRIBUTES = {
    "select": ("value", "options", "disabled"),
    "checkbox": ("value", "disabled"),
    "text": ("value", "placeholder", "disabled"),
    "header": ("label-markdown", "label-html", "label-class"),
    "subheader": ("label-markdown", "label-html", "label-class"),
    "paragraph": ("label-markdown", "label-html", "label-class"),
}


def test_optional_attributes_cover_every_field_type() -> None:
    assert set(_OPTIONAL_ATTRIBUTES) == set(FIELD_TYPES)


@pytest.mark.parametrize("tag", FIELD_TYPES)
def test_every_optional_attribute_accepts_null(tag: str) -> None:
    base = {"type": tag, "id": f"f-{tag}", "label": tag}
    with_nulls = _doc({**base, **{key: None for key in _OPTIONAL_ATTRIBUTES[tag]}})
    with_nulls["config"]["unused"] = None
    without = _doc(base)
    assert parse_config(with_nulls) == parse_config(without)
    assert describe_document(parse_config(with_nulls)) == describe_document(parse_config(without))


def test_nested_option_nulls_are_absent() -> None:
    options = [{"id": "a", "label": "A", "hint": None}, {"id": "b", "label": "B"}]
    with_nulls = _doc({"type": "select", "id": "s", "label": "Pick", "value": None, "options": options})
    without = _doc(
        {"type": "select", "id": "s", "label": "Pick", "options": [{"id": "a", "label": "A"}, {"id": "b", "label": "B"}]}
    )
    assert parse_config(with_nulls) == parse_config(without)
    assert describe_document(parse_config(with_nulls)) == describe_document(parse_config(without))


@pytest.mark.parametrize("flag", ["yes", "maybe", "true", 1, 0, [], {"on": True}])
def test_non_boolean_disabled_falls_back_to_enabled(flag) -> None:
    document = parse_config(_doc({"type": "text", "id": "t", "label": "Name", "disabled": flag}))
    assert document.fields[0].disabled is False
    assert describe_document(document)[0].disabled is False


def test_boolean_disabled_is_kept() -> None:
    document = parse_config(_doc({"type": "checkbox", "id": "c", "label": "Check", "disabled": True}))
    assert document.fields[0].disabled is True
