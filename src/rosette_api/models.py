"""Request and response models for the Rosette REST endpoints."""

from __future__ import annotations

from pydantic import StrictFloat, model_validator

from .base import WireModel
from .enums import InputUnit, LanguageCode
from .exceptions import RosetteConfigurationError
from .options import (
    EntitiesOptions,
    LanguageOptions,
    MorphologyOptions,
    RelationshipsOptions,
    SentimentOptions,
)


class DocumentRequest(WireModel):
    """A document to analyze, given inline or by reference.

    Exactly one of ``content`` and ``content_uri`` must be set. ``unit`` selects
    whether the service treats the input as one document or as a single
    sentence.

    The base type carries no options; endpoints that accept them narrow
    ``options`` to their own options class.
    """

    content: str | None = None
    content_uri: str | None = None
    content_type: str | None = None
    unit: InputUnit | None = None
    options: None = None

    wire_names = {
        "content": "content",
        "content_uri": "contentUri",
        "content_type": "contentType",
        "unit": "unit",
        "options": "options",
    }

    @model_validator(mode="after")
    def _check_content_source(self) -> "DocumentRequest":
        if self.content is not None and self.content_uri is not None:
            raise RosetteConfigurationError(
                f"{type(self).__name__}: content and content_uri are mutually exclusive",
                field="content_uri",
                value=self.content_uri,
            )
        if self.content is None and self.content_uri is None:
            raise RosetteConfigurationError(
                f"{type(self).__name__}: one of content or content_uri is required",
                field="content",
            )
        return self


class LanguageRequest(DocumentRequest):
    options: LanguageOptions | None = None


class MorphologyRequest(DocumentRequest):
    options: MorphologyOptions | None = None


class EntitiesRequest(DocumentRequest):
    options: EntitiesOptions | None = None


class SentimentRequest(DocumentRequest):
    options: SentimentOptions | None = None


class RelationshipsRequest(DocumentRequest):
    options: RelationshipsOptions | None = None


class CategoriesRequest(DocumentRequest):
    pass


class TokensRequest(DocumentRequest):
    pass


class SentencesRequest(DocumentRequest):
    pass


class NameTranslationRequest(WireModel):
    """Transliterate or translate a name into ``target_language``.

    Scripts are ISO 15924 codes such as ``Arab`` or ``Latn``. ``target_scheme``
    names the transliteration scheme, for example ``IC``.
    """

    name: str
    target_language: LanguageCode
    entity_type: str | None = None
    source_script: str | None = None
    source_language_of_origin: LanguageCode | None = None
    source_language_of_use: LanguageCode | None = None
    target_script: str | None = None
    target_scheme: str | None = None

    wire_names = {
        "name": "name",
        "target_language": "targetLanguage",
        "entity_type": "entityType",
        "source_script": "sourceScript",
        "source_language_of_origin": "sourceLanguageOfOrigin",
        "source_language_of_use": "sourceLanguageOfUse",
        "target_script": "targetScript",
        "target_scheme": "targetScheme",
    }


class ErrorResponse(WireModel):
    code: str | None = None
    message: str | None = None

    wire_names = {"code": "code", "message": "message"}


class LanguageDetection(WireModel):
    language: LanguageCode
    confidence: StrictFloat | None = None

    wire_names = {"language": "language", "confidence": "confidence"}


class LanguageResponse(WireModel):
    request_id: str | None = None
    language_detections: tuple[LanguageDetection, ...] = ()

    wire_names = {
        "request_id": "requestId",
        "language_detections": "languageDetections",
    }


class TranslatedNameResult(WireModel):
    translation: str | None = None
    target_language: LanguageCode | None = None
    target_script: str | None = None
    target_scheme: str | None = None
    confidence: StrictFloat | None = None

    wire_names = {
        "translation": "translation",
        "target_language": "targetLanguage",
        "target_script": "targetScript",
        "target_scheme": "targetScheme",
        "confidence": "confidence",
    }


class TranslatedNameResponse(WireModel):
    request_id: str | None = None
    result: TranslatedNameResult | None = None

    wire_names = {"request_id": "requestId", "result": "result"}
