"""Per-endpoint option objects.

Every field defaults to ``None``, which means "let the service decide". An
options object built with no arguments therefore serializes to ``{}``.
"""

from __future__ import annotations

from pydantic import Field, StrictBool, StrictInt

from .base import WireModel
from .enums import AccuracyMode, LanguageCode, PartOfSpeechTagSet


class LanguageOptions(WireModel):
    """Options for language identification.

    ``multilingual`` asks the service to report language regions inside mixed
    text; ``min_valid_chars`` is the shortest input it will attempt to classify.
    """

    multilingual: StrictBool | None = None
    min_valid_chars: StrictInt | None = Field(default=None, ge=1)

    wire_names = {
        "multilingual": "multilingual",
        "min_valid_chars": "minValidChars",
    }


class MorphologyOptions(WireModel):
    """Options for morphological analysis.

    Attributes
    ----------
    disambiguate
        Whether the linguistic analysis should pick a single analysis per token.
    query
        Treat the input as a search query rather than running text. Queries are
        rarely full sentences, so this typically disables disambiguation.
    tokenize_for_script
        Use a different tokenizer per script. When false, the tokenizer for
        ``default_tokenization_language`` is used. Applies only to Chinese,
        Japanese and Thai.
    min_non_primary_script_region_length
        Shortest run of non-Han text in Chinese or Japanese (or non-Thai text in
        Thai) that is tokenized separately. Must be at least 1.
    include_hebrew_roots
        Include Hebrew triliteral roots in the results.
    nfkc_normalize
        Apply Unicode NFKC normalization before tokenization.
    fst_tokenize
        Use the FST tokenizer, kept for compatibility, on supported languages.
    default_tokenization_language
        Language used for non-Han text embedded in Chinese or Japanese and
        non-Thai text embedded in Thai.
    part_of_speech_tag_set
        Tag repertoire for part-of-speech results.
    """

    disambiguate: StrictBool | None = None
    query: StrictBool | None = None
    tokenize_for_script: StrictBool | None = None
    min_non_primary_script_region_length: StrictInt | None = Field(default=None, ge=1)
    include_hebrew_roots: StrictBool | None = None
    nfkc_normalize: StrictBool | None = None
    fst_tokenize: StrictBool | None = None
    default_tokenization_language: LanguageCode | None = None
    part_of_speech_tag_set: PartOfSpeechTagSet | None = None

    wire_names = {
        "disambiguate": "disambiguate",
        "query": "query",
        "tokenize_for_script": "tokenizeForScript",
        "min_non_primary_script_region_length": "minNonPrimaryScriptRegionLength",
        "include_hebrew_roots": "includeHebrewRoots",
        "nfkc_normalize": "nfkcNormalize",
        "fst_tokenize": "fstTokenize",
        "default_tokenization_language": "defaultTokenizationLanguage",
        "part_of_speech_tag_set": "partOfSpeechTagSet",
    }


class EntitiesOptions(WireModel):
    calculate_confidence: StrictBool | None = None
    link_entities: StrictBool | None = None
    max_entities: StrictInt | None = Field(default=None, ge=1)

    wire_names = {
        "calculate_confidence": "calculateConfidence",
        "link_entities": "linkEntities",
        "max_entities": "maxEntities",
    }


class SentimentOptions(WireModel):
    """``explain`` returns the evidence behind each sentiment label."""

    explain: StrictBool | None = None
    language_detection: StrictBool | None = None

    wire_names = {
        "explain": "explain",
        "language_detection": "languageDetection",
    }


class RelationshipsOptions(WireModel):
    accuracy_mode: AccuracyMode | None = None

    wire_names = {"accuracy_mode": "accuracyMode"}
