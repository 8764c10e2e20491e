import pytest
from pydantic import ValidationError

from project_report_api.app import validators
from project_report_api.app.api.responses import reasons_from_request_errors
from project_report_api.app.schemas.project import ProjectCreate, ProjectUpdate
from project_report_api.app.schemas.report import ReportCreate, ReportUpdate


def reasons(model, payload):
    with pytest.raises(ValidationError) as exc_info:
        model.model_validate(payload)
    return reasons_from_request_errors(exc_info.value.errors())


def test_project_update_requires_name_or_description():
    expected = ["Either the key 'name' or 'description' is required to update the project"]
    assert reasons(ProjectUpdate, {}) == expected
    assert reasons(ProjectUpdate, {"name": None, "description": None}) == expected


def test_project_update_with_only_description_is_valid():
    update = ProjectUpdate.model_validate({"description": "new"})
    assert update.name is None
    assert update.description == "new"
    assert ProjectUpdate.model_validate({"description": ""}).description == ""


def test_project_update_collects_every_reason():
    assert reasons(ProjectUpdate, {"name": "   ", "description": 5}) == [
        "Key 'name' must be a non-empty string",
        "Key 'description' must be a string if provided",
    ]


@pytest.mark.parametrize("name", ["", "   ", 3, ["a"]])
def test_project_create_rejects_bad_names(name):
    assert reasons(ProjectCreate, {"name": name}) == ["Key 'name' must be a non-empty string"]


def test_project_create_requires_name():
    assert reasons(ProjectCreate, {"description": "d"}) == ["Key 'name' is required"]
    assert reasons(ProjectCreate, {"name": None}) == ["Key 'name' is required"]


def test_project_create_defaults_description():
    assert ProjectCreate.model_validate({"name": "Alpha"}).description == ""
    assert ProjectCreate.model_validate({"name": "Alpha", "description": None}).description == ""


@pytest.mark.parametrize(
    "payload, reason",
    [
        ({}, "Key 'text' is required"),
        ({"text": None}, "Key 'text' is required"),
        ({"text": ""}, "Key 'text' must be a non-empty string"),
        ({"text": " \n\t"}, "Key 'text' must be a non-empty string"),
        ({"text": 42}, "Key 'text' must be a non-empty string"),
    ],
)
def test_report_text_rules(payload, reason):
    assert reasons(ReportCreate, payload) == [reason]
    assert reasons(ReportUpdate, payload) == [reason]


def test_non_object_bodies_are_rejected():
    for model in (ProjectCreate, ProjectUpdate, ReportCreate):
        assert reasons(model, ["text"]) == [validators.BODY_NOT_OBJECT]


def test_id_errors():
    assert validators.id_errors("abc") == []
    assert validators.id_errors("  ") == [validators.EMPTY_ID]
    assert validators.id_errors("") == [validators.EMPTY_ID]


def test_unknown_request_errors_keep_location():
    errors = [{"type": "string_too_long", "loc": ("body", "name"), "msg": "String should be short"}]
    assert reasons_from_request_errors(errors) == ["name: String should be short"]
    assert reasons_from_request_errors([{"type": "missing", "loc": ("body",), "msg": "Field required"}]) == [
        validators.BODY_REQUIRED
    ]
