"""Tests for the replacement service pipeline."""

import pytest

from replacement.core.domain import ReplacementResponse
from replacement.core.exceptions import ConfigurationError
from replacement.service import pipeline
from replacement.service.pipeline import replace_json


@pytest.fixture(autouse=True)
def _defaults(fresh_defaults, monkeypatch):
    monkeypatch.setattr(pipeline.settings, "defaults_file", None)
    monkeypatch.setattr(pipeline.settings, "default_max_replacements", None)


def test_explicit_values():
    response = replace_json(
        {
            "payload": {"count": 5, "total": 10, "remaining": 5},
            "targetValue": 5,
            "replacementValue": 0,
        }
    )

    assert isinstance(response, ReplacementResponse)
    assert response.result == {"count": 0, "total": 10, "remaining": 0}
    assert response.replacement_count == 2
    assert response.metadata["status"] == "ok"


def test_defaults_fill_missing_values():
    response = replace_json({"payload": {"animal": "dog", "pet": "dog"}})

    assert response.result == {"animal": "cat", "pet": "cat"}
    assert response.replacement_count == 2


def test_explicit_null_target_is_honoured():
    response = replace_json({"payload": [None, "dog"], "targetValue": None})

    assert response.result == ["cat", "dog"]
    assert response.replacement_count == 1


def test_request_limit():
    response = replace_json(
        {"payload": ["dog", "dog", "dog"], "maxReplacements": 2}
    )

    assert response.result == ["cat", "cat", "dog"]
    assert response.metadata["max_replacements"] == 2


def test_configured_default_limit(monkeypatch):
    monkeypatch.setattr(pipeline.settings, "default_max_replacements", 1)

    response = replace_json({"payload": ["dog", "dog"]})

    assert response.result == ["cat", "dog"]
    assert response.replacement_count == 1


def test_explicit_null_limit_is_unlimited(monkeypatch):
    monkeypatch.setattr(pipeline.settings, "default_max_replacements", 1)

    response = replace_json({"payload": ["dog", "dog"], "maxReplacements": None})

    assert response.replacement_count == 2


def test_zero_limit():
    payload = {"animal": "dog"}
    response = replace_json({"payload": payload, "maxReplacements": 0})

    assert response.result is payload
    assert response.replacement_count == 0


def test_custom_defaults_file(monkeypatch, tmp_path):
    path = tmp_path / "defaults.yaml"
    path.write_text("target_value: active\nreplacement_value: inactive\n")
    monkeypatch.setattr(pipeline.settings, "defaults_file", path)

    response = replace_json({"payload": {"status": "active"}})

    assert response.result == {"status": "inactive"}


def test_missing_payload():
    response = replace_json({"targetValue": "dog"})

    assert response.metadata["error"] == "payload is required"
    assert response.metadata["status"] == "failed"
    assert response.metadata["error_type"] == "ValidationError"
    assert response.replacement_count == 0


def test_invalid_body():
    response = replace_json("not a body")

    assert response.metadata["status"] == "failed"
    assert response.result is None


def test_configuration_error_is_hidden(monkeypatch, tmp_path):
    monkeypatch.setattr(pipeline.settings, "defaults_file", tmp_path / "absent.yaml")
    payload = {"a": "dog"}

    response = replace_json({"payload": payload})

    assert response.result is payload
    assert response.metadata["status"] == "failed"
    assert response.metadata["error_type"] == ConfigurationError.__name__
    assert "absent" not in response.metadata["error"]


def test_explicit_values_skip_defaults_file(monkeypatch, tmp_path):
    monkeypatch.setattr(pipeline.settings, "defaults_file", tmp_path / "absent.yaml")

    response = replace_json(
        {"payload": ["a"], "targetValue": "a", "replacementValue": "b"}
    )

    assert response.result == ["b"]


def test_unexpected_error(monkeypatch):
    def explode(*args):
        raise RuntimeError("internal detail")

    monkeypatch.setattr(pipeline, "replace_in_json", explode)

    response = replace_json({"payload": {}, "targetValue": 1, "replacementValue": 2})

    assert response.metadata == {
        "error": "An unexpected system error occurred.",
        "status": "failed",
    }
