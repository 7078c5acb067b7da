"""Python bindings for the Rosette text analytics REST API."""

from .client import AsyncRosetteClient, RosetteClient
from .enums import AccuracyMode, InputUnit, LanguageCode, MorphologyFeature, PartOfSpeechTagSet
from .exceptions import (
    RosetteAuthError,
    RosetteConfigurationError,
    RosetteDecodeError,
    RosetteError,
    RosetteHTTPError,
    RosetteNetworkError,
    RosetteRateLimitError,
    RosetteTimeoutError,
    RosetteValidationError,
)
from .models import (
    CategoriesRequest,
    DocumentRequest,
    EntitiesRequest,
    ErrorResponse,
    LanguageDetection,
    LanguageRequest,
    LanguageResponse,
    MorphologyRequest,
    NameTranslationRequest,
    RelationshipsRequest,
    SentencesRequest,
    SentimentRequest,
    TokensRequest,
    TranslatedNameResponse,
    TranslatedNameResult,
)
from .options import (
    EntitiesOptions,
    LanguageOptions,
    MorphologyOptions,
    RelationshipsOptions,
    SentimentOptions,
)
from .request_options import RequestOptions

__version__ = "0.1.0"

__all__ = [
    "AccuracyMode",
    "AsyncRosetteClient",
    "CategoriesRequest",
    "DocumentRequest",
    "EntitiesOptions",
    "EntitiesRequest",
    "ErrorResponse",
    "InputUnit",
    "LanguageCode",
    "LanguageDetection",
    "LanguageOptions",
    "LanguageRequest",
    "LanguageResponse",
    "MorphologyFeature",
    "MorphologyOptions",
    "MorphologyRequest",
    "NameTranslationRequest",
    "PartOfSpeechTagSet",
    "RelationshipsOptions",
    "RelationshipsRequest",
    "RequestOptions",
    "RosetteAuthError",
    "RosetteClient",
    "RosetteConfigurationError",
    "RosetteDecodeError",
    "RosetteError",
    "RosetteHTTPError",
    "RosetteNetworkError",
    "RosetteRateLimitError",
    "RosetteTimeoutError",
    "RosetteValidationError",
    "SentencesRequest",
    "SentimentOptions",
    "SentimentRequest",
    "TokensRequest",
    "TranslatedNameResponse",
    "TranslatedNameResult",
]
