"""Tests for schema models."""

import json
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from game_code_normalizer import CodeInput, NormalizeOptions, NormalizeResult

CREATED_AT = datetime(2025, 12, 28, tzinfo=timezone.utc)


def _result(**extra) -> NormalizeResult:
    return NormalizeResult(
        normalized="30IKES",
        raw=" 30IKES ",
        is_valid_format=True,
        probable_type="class_reroll",
        hints=("PREFIX:IKES",),
        length=6,
        created_at=CREATED_AT,
        **extra,
    )


def test_result_defaults():
    result = _result()
    assert result.status == "unknown"
    assert result.meta is None
    assert result.has_meta is False


def test_result_to_dict_uses_camel_case_and_omits_meta():
    data = _result().to_dict()
    assert set(data) == {
        "normalized",
        "raw",
        "isValidFormat",
        "probableType",
        "hints",
        "status",
        "length",
        "createdAt",
    }
    assert data["hints"] == ["PREFIX:IKES"]


def test_result_to_dict_includes_supplied_meta():
    data = _result(meta={"source": "discord"}).to_dict()
    assert data["meta"] == {"source": "discord"}


def test_result_to_json_omits_absent_meta():
    payload = json.loads(_result().to_json())
    assert "meta" not in payload
    assert payload["probableType"] == "class_reroll"


def test_result_to_json_keeps_empty_meta():
    payload = json.loads(_result(meta={}).to_json())
    assert payload["meta"] == {}


def test_result_is_frozen():
    result = _result()
    with pytest.raises(ValidationError):
        result.normalized = "OTHER"


def test_result_accepts_camel_case_fields():
    result = NormalizeResult.model_validate(
        {
            "normalized": "ABCD",
            "raw": "abcd",
            "isValidFormat": True,
            "probableType": "unknown",
            "length": 4,
            "createdAt": "2025-12-28T00:00:00Z",
        }
    )
    assert result.is_valid_format is True
    assert result.hints == ()
    assert result.created_at == CREATED_AT


def test_code_input_tracks_meta_presence():
    assert "meta" not in CodeInput(code="X").model_fields_set
    assert "meta" in CodeInput(code="X", meta=None).model_fields_set


def test_options_accept_both_name_styles():
    camel = NormalizeOptions.model_validate({"minLength": 2, "maxLength": 8})
    snake = NormalizeOptions(min_length=2, max_length=8)
    assert camel == snake
    assert camel.prefixes is None


def test_model_dump_omits_absent_meta():
    assert "meta" not in _result().model_dump()
    assert "meta" not in json.loads(_result().model_dump_json())
    assert _result(meta=None).model_dump()["meta"] is None
