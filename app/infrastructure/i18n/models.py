"""Translation models for i18n system.

Defines core data structures for managing translations and locales, and the
tagged node representation used to flatten decoded JSON bundles.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Mapping, Tuple, Union


class Locale(str, Enum):
    """Well-known locale identifiers.

    Mirrors the locale tags used by chat platforms (IETF BCP 47 style,
    e.g. en-US, pt-BR, or a bare language such as ru). Catalogs accept any
    string tag; this enum only names the common ones.
    """

    ID = "id"
    DA = "da"
    DE = "de"
    EN_GB = "en-GB"
    EN_US = "en-US"
    ES_ES = "es-ES"
    FR = "fr"
    HR = "hr"
    IT = "it"
    LT = "lt"
    HU = "hu"
    NL = "nl"
    NO = "no"
    PL = "pl"
    PT_BR = "pt-BR"
    RO = "ro"
    FI = "fi"
    SV_SE = "sv-SE"
    VI = "vi"
    TR = "tr"
    CS = "cs"
    EL = "el"
    BG = "bg"
    RU = "ru"
    UK = "uk"
    HI = "hi"
    TH = "th"
    ZH_CN = "zh-CN"
    JA = "ja"
    ZH_TW = "zh-TW"
    KO = "ko"


LocaleLike = Union[Locale, str]

# Dotted key -> ordered variants. Every key maps to at least one variant.
Bundle = Dict[str, List[str]]

Variables = Mapping[str, Any]

DEFAULT_LOCALE = Locale.EN_US.value


def locale_tag(locale: LocaleLike) -> str:
    """Normalize a locale to its plain string tag.

    Catalog state is keyed by plain strings so that Locale members and raw
    tags such as "en-US" address the same entry.

    Args:
        locale: Locale enum member or string tag.

    Returns:
        The string tag.
    """
    if isinstance(locale, Locale):
        return locale.value
    return str(locale)


@dataclass(frozen=True)
class ScalarNode:
    """A leaf value (string, number, boolean, null or anything unrecognized)."""

    value: Any


@dataclass(frozen=True)
class SequenceNode:
    """An array; each element becomes one variant."""

    items: Tuple[Any, ...]


@dataclass(frozen=True)
class ObjectNode:
    """A JSON object with its children in source order."""

    fields: Tuple[Tuple[str, "Node"], ...]


Node = Union[ScalarNode, SequenceNode, ObjectNode]


def to_node(value: Any) -> Node:
    """Classify a decoded JSON value into a tagged node.

    Objects are classified recursively; array elements are kept raw since
    they are only ever stringified.
    """
    if isinstance(value, Mapping):
        return ObjectNode(
            fields=tuple((str(key), to_node(child)) for key, child in value.items())
        )
    if isinstance(value, (list, tuple)):
        return SequenceNode(items=tuple(value))
    return ScalarNode(value=value)
