from __future__ import annotations

import pytest
from pydantic import ValidationError

from rosette_api.base import WireModel
from rosette_api.enums import AccuracyMode, LanguageCode, PartOfSpeechTagSet
from rosette_api.exceptions import RosetteDecodeError, RosetteValidationError
from rosette_api.options import (
    EntitiesOptions,
    LanguageOptions,
    MorphologyOptions,
    RelationshipsOptions,
    SentimentOptions,
)


MORPHOLOGY_SAMPLES = {
    "disambiguate": True,
    "query": False,
    "tokenize_for_script": True,
    "min_non_primary_script_region_length": 3,
    "include_hebrew_roots": False,
    "nfkc_normalize": True,
    "fst_tokenize": False,
    "default_tokenization_language": LanguageCode.JAPANESE,
    "part_of_speech_tag_set": PartOfSpeechTagSet.BASIS,
}

FIELD_SAMPLES: dict[type[WireModel], dict[str, object]] = {
    LanguageOptions: {"multilingual": True, "min_valid_chars": 20},
    MorphologyOptions: MORPHOLOGY_SAMPLES,
    EntitiesOptions: {"calculate_confidence": True, "link_entities": False, "max_entities": 5},
    SentimentOptions: {"explain": True, "language_detection": False},
    RelationshipsOptions: {"accuracy_mode": AccuracyMode.PRECISION},
}

ALL_OPTIONS = list(FIELD_SAMPLES)

SINGLE_FIELD_CASES = [
    (options_cls, field) for options_cls, samples in FIELD_SAMPLES.items() for field in samples
]


def test_empty_options_serialize_to_empty_object() -> None:
    for options_cls in ALL_OPTIONS:
        assert options_cls().to_json() == {}
        assert options_cls().to_json_string() == "{}"


def test_absent_fields_are_omitted_and_falsy_values_kept() -> None:
    options = MorphologyOptions(disambiguate=True, query=None, fst_tokenize=False)

    assert options.to_json() == {"disambiguate": True, "fstTokenize": False}


def test_full_construction_uses_camel_case_wire_names() -> None:
    options = MorphologyOptions(**MORPHOLOGY_SAMPLES)

    assert options.to_json() == {
        "disambiguate": True,
        "query": False,
        "tokenizeForScript": True,
        "minNonPrimaryScriptRegionLength": 3,
        "includeHebrewRoots": False,
        "nfkcNormalize": True,
        "fstTokenize": False,
        "defaultTokenizationLanguage": "jpn",
        "partOfSpeechTagSet": "basis",
    }


@pytest.mark.parametrize(("options_cls", "field"), SINGLE_FIELD_CASES)
def test_single_field_round_trips(options_cls: type[WireModel], field: str) -> None:
    value = FIELD_SAMPLES[options_cls][field]
    options = options_cls(**{field: value})

    decoded = options_cls.from_json(options.to_json())

    assert decoded == options
    assert decoded.to_json() == options.to_json()
    assert getattr(decoded, field) == value
    others = set(options_cls.model_fields) - {field}
    assert all(getattr(decoded, name) is None for name in others)


def test_round_trip_through_json_text() -> None:
    options = EntitiesOptions(calculate_confidence=True, max_entities=10)

    assert EntitiesOptions.from_json(options.to_json_string()) == options
    assert RelationshipsOptions.from_json(b'{"accuracyMode": "RECALL"}') == RelationshipsOptions(
        accuracy_mode=AccuracyMode.RECALL
    )


def test_missing_and_null_wire_fields_decode_as_absent() -> None:
    options = MorphologyOptions.from_json({"disambiguate": None, "query": False})

    assert options.disambiguate is None
    assert options.query is False
    assert options == MorphologyOptions(query=False)


def test_unknown_wire_fields_are_ignored() -> None:
    options = SentimentOptions.from_json({"explain": True, "modelVersion": "2"})

    assert options == SentimentOptions(explain=True)


def test_bound_violation_at_construction_names_field_value_and_bound() -> None:
    with pytest.raises(RosetteValidationError, match="min_non_primary_script_region_length") as excinfo:
        MorphologyOptions(min_non_primary_script_region_length=0)

    assert excinfo.value.field == "min_non_primary_script_region_length"
    assert excinfo.value.value == 0
    assert excinfo.value.bound == 1


def test_bound_violation_while_decoding_names_wire_field() -> None:
    with pytest.raises(RosetteValidationError) as excinfo:
        LanguageOptions.from_json({"minValidChars": 0})

    assert excinfo.value.field == "minValidChars"
    assert excinfo.value.bound == 1


def test_minimum_bound_value_is_accepted() -> None:
    assert MorphologyOptions(min_non_primary_script_region_length=1).min_non_primary_script_region_length == 1


def test_malformed_enum_value_raises_decode_error() -> None:
    with pytest.raises(RosetteDecodeError, match="defaultTokenizationLanguage") as excinfo:
        MorphologyOptions.from_json({"defaultTokenizationLanguage": "klingon"})

    assert excinfo.value.field == "defaultTokenizationLanguage"
    assert excinfo.value.value == "klingon"


def test_malformed_boolean_raises_decode_error() -> None:
    with pytest.raises(RosetteDecodeError) as excinfo:
        SentimentOptions.from_json({"explain": "sometimes"})

    assert excinfo.value.field == "explain"


@pytest.mark.parametrize(
    ("options_cls", "payload", "wire_field"),
    [
        (SentimentOptions, {"explain": "true"}, "explain"),
        (EntitiesOptions, {"linkEntities": 1}, "linkEntities"),
        (EntitiesOptions, {"maxEntities": True}, "maxEntities"),
        (LanguageOptions, {"minValidChars": "5"}, "minValidChars"),
        (MorphologyOptions, {"minNonPrimaryScriptRegionLength": 2.0}, "minNonPrimaryScriptRegionLength"),
    ],
)
def test_wire_values_are_not_coerced(options_cls: type[WireModel], payload: dict[str, object], wire_field: str) -> None:
    with pytest.raises(RosetteDecodeError) as excinfo:
        options_cls.from_json(payload)

    assert excinfo.value.field == wire_field
    assert excinfo.value.value == payload[wire_field]


def test_constructor_does_not_coerce_scalars() -> None:
    with pytest.raises(RosetteValidationError) as excinfo:
        MorphologyOptions(disambiguate="yes")
    assert excinfo.value.field == "disambiguate"

    with pytest.raises(RosetteValidationError) as excinfo:
        MorphologyOptions(min_non_primary_script_region_length=2.0)
    assert excinfo.value.field == "min_non_primary_script_region_length"


def test_non_object_payload_raises_decode_error() -> None:
    with pytest.raises(RosetteDecodeError, match="not valid JSON"):
        MorphologyOptions.from_json("{disambiguate")
    with pytest.raises(RosetteDecodeError, match="expected a JSON object"):
        MorphologyOptions.from_json("[1, 2]")


def test_unknown_constructor_argument_is_rejected() -> None:
    with pytest.raises(RosetteValidationError) as excinfo:
        MorphologyOptions(disambiguation=True)

    assert excinfo.value.field == "disambiguation"


def test_equality_requires_every_field_to_match() -> None:
    base = MorphologyOptions(disambiguate=True, query=False, fst_tokenize=True)

    assert base == MorphologyOptions(disambiguate=True, query=False, fst_tokenize=True)
    assert base != MorphologyOptions(disambiguate=True, query=True, fst_tokenize=True)
    assert base != MorphologyOptions(disambiguate=False, query=False, fst_tokenize=True)
    assert base != MorphologyOptions(disambiguate=True, query=False, fst_tokenize=False)
    assert base != MorphologyOptions(disambiguate=True, query=False, fst_tokenize=True, nfkc_normalize=True)


def test_absent_is_not_equal_to_false() -> None:
    assert MorphologyOptions(query=False) != MorphologyOptions()
    assert MorphologyOptions() == MorphologyOptions()


def test_different_option_types_are_never_equal() -> None:
    assert LanguageOptions() != SentimentOptions()
    assert SentimentOptions(explain=True) != {"explain": True}


def test_equal_options_have_equal_hashes() -> None:
    first = MorphologyOptions(**MORPHOLOGY_SAMPLES)
    second = MorphologyOptions.from_json(first.to_json())

    assert hash(first) == hash(second)
    assert hash(MorphologyOptions()) == hash(MorphologyOptions())
    assert len({first, second, MorphologyOptions()}) == 2


def test_options_are_immutable() -> None:
    options = MorphologyOptions(disambiguate=True)

    with pytest.raises(ValidationError):
        options.disambiguate = False  # type: ignore[misc]


def test_with_changes_returns_new_validated_instance() -> None:
    options = MorphologyOptions(disambiguate=True)

    changed = options.with_changes(query=True)
    reset = changed.with_changes(disambiguate=None)

    assert options == MorphologyOptions(disambiguate=True)
    assert changed == MorphologyOptions(disambiguate=True, query=True)
    assert reset.to_json() == {"query": True}
    with pytest.raises(RosetteValidationError, match="minimum of 1"):
        options.with_changes(min_non_primary_script_region_length=0)


def test_enum_values_are_accepted_as_strings() -> None:
    options = MorphologyOptions(default_tokenization_language="eng", part_of_speech_tag_set="upt16")

    assert options.default_tokenization_language is LanguageCode.ENGLISH
    assert options.part_of_speech_tag_set is PartOfSpeechTagSet.UPT16


@pytest.mark.parametrize("options_cls", ALL_OPTIONS)
def test_wire_names_cover_every_field(options_cls: type[WireModel]) -> None:
    assert set(options_cls.wire_names) == set(options_cls.model_fields)
    assert len(set(options_cls.wire_names.values())) == len(options_cls.wire_names)
    assert set(FIELD_SAMPLES[options_cls]) == set(options_cls.model_fields)


def test_incomplete_wire_table_is_rejected_at_class_definition() -> None:
    with pytest.raises(TypeError, match="unmapped"):

        class BrokenOptions(WireModel):
            explain: bool | None = None
            verbose: bool | None = None

            wire_names = {"explain": "explain"}
