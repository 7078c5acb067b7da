"""Closed value domains used by options, requests and responses."""

from __future__ import annotations

from enum import Enum


class LanguageCode(str, Enum):
    """ISO 639-3 language codes recognized by the service."""

    UNKNOWN = "xxx"
    ARABIC = "ara"
    BENGALI = "ben"
    BULGARIAN = "bul"
    CHINESE = "zho"
    CROATIAN = "hrv"
    CZECH = "ces"
    DANISH = "dan"
    DUTCH = "nld"
    ENGLISH = "eng"
    ESTONIAN = "est"
    FINNISH = "fin"
    FRENCH = "fra"
    GERMAN = "deu"
    GREEK = "ell"
    HEBREW = "heb"
    HINDI = "hin"
    HUNGARIAN = "hun"
    INDONESIAN = "ind"
    ITALIAN = "ita"
    JAPANESE = "jpn"
    KOREAN = "kor"
    LATVIAN = "lav"
    LITHUANIAN = "lit"
    MALAY = "msa"
    NORWEGIAN = "nor"
    PASHTO = "pus"
    PERSIAN = "fas"
    POLISH = "pol"
    PORTUGUESE = "por"
    ROMANIAN = "ron"
    RUSSIAN = "rus"
    SERBIAN = "srp"
    SLOVAK = "slk"
    SLOVENIAN = "slv"
    SPANISH = "spa"
    SWEDISH = "swe"
    TAGALOG = "tgl"
    THAI = "tha"
    TURKISH = "tur"
    UKRAINIAN = "ukr"
    URDU = "urd"
    VIETNAMESE = "vie"


class PartOfSpeechTagSet(str, Enum):
    """Tag repertoire for part-of-speech results. The service default is ``upt16``."""

    UPT16 = "upt16"
    BASIS = "basis"


class InputUnit(str, Enum):
    """Granularity at which the service analyzes content."""

    DOC = "doc"
    SENTENCE = "sentence"


class AccuracyMode(str, Enum):
    PRECISION = "PRECISION"
    RECALL = "RECALL"


class MorphologyFeature(str, Enum):
    """Path suffix selecting which morphology results are returned."""

    COMPLETE = "complete"
    LEMMAS = "lemmas"
    PARTS_OF_SPEECH = "parts-of-speech"
    COMPOUND_COMPONENTS = "compound-components"
    HAN_READINGS = "han-readings"
