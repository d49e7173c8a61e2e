"""Message catalog loading and locale-aware message resolution.

The catalog is a versioned JSON document mapping ``locale -> key -> value``
where a value is either a template string (optionally holding one ``%s``
placeholder) or an ordered list of strings. It is loaded once and frozen, so
concurrent readers never observe mutation.

Resolution tries the full locale tag (``es-es``), then its primary language
subtag (``es``), then the catalog's fallback locale, per key.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

from duck_curiosities.core.config import config
from duck_curiosities.core.exceptions import UnknownLocalizationKeyError
from duck_curiosities.core.logging import get_logger
from duck_curiosities.core.models import LocalizedValue, Translator

logger = get_logger(__name__)

# Message key constants
WELCOME_MESSAGE = "WELCOME_MESSAGE"
HELLO_MESSAGE = "HELLO_MESSAGE"
HELP_MESSAGE = "HELP_MESSAGE"
GOODBYE_MESSAGE = "GOODBYE_MESSAGE"
REFLECTOR_MESSAGE = "REFLECTOR_MESSAGE"
FALLBACK_MESSAGE = "FALLBACK_MESSAGE"
ERROR_MESSAGE = "ERROR_MESSAGE"
GET_FACTS_MSG = "GET_FACTS_MSG"
FACTS = "FACTS"

DEFAULT_CATALOG_PATH = Path(__file__).parent / "messages_data.json"


@dataclass(frozen=True, slots=True)
class MessageCatalog:
    """Immutable, versioned table of localized messages."""

    version: str
    fallback_locale: str
    locales: Mapping[str, Mapping[str, LocalizedValue]]

    def available_locales(self) -> list[str]:
        """Return the locale codes present in the catalog."""
        return sorted(self.locales)


def normalize_locale(tag: Optional[str]) -> str:
    """Lowercase a locale tag and use ``-`` as the subtag separator."""
    if not tag:
        return ""
    return str(tag).strip().replace("_", "-").lower()


def _freeze_value(locale: str, key: str, value: Any) -> LocalizedValue:
    if isinstance(value, str):
        return value
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return tuple(value)
    raise ValueError(f"message {key!r} in locale {locale!r} must be a string or list of strings")


def build_catalog(
    locales: Mapping[str, Mapping[str, Any]],
    *,
    fallback_locale: str = "en",
    version: str = "0",
) -> MessageCatalog:
    """Freeze raw locale tables into a :class:`MessageCatalog`."""
    frozen: dict[str, Mapping[str, LocalizedValue]] = {}
    for locale, messages in locales.items():
        code = normalize_locale(locale)
        frozen[code] = MappingProxyType(
            {key: _freeze_value(code, key, value) for key, value in messages.items()}
        )

    fallback = normalize_locale(fallback_locale)
    if fallback not in frozen:
        raise ValueError(f"fallback locale {fallback!r} is missing from the message catalog")

    return MessageCatalog(
        version=str(version),
        fallback_locale=fallback,
        locales=MappingProxyType(frozen),
    )


def load_catalog(
    path: Optional[Path] = None, *, fallback_locale: Optional[str] = None
) -> MessageCatalog:
    """Load and freeze the message catalog stored at ``path``.

    Args:
        path: JSON file to read; defaults to the packaged catalog
        fallback_locale: Overrides the fallback locale declared in the file

    Returns:
        The frozen catalog
    """
    catalog_path = Path(path) if path is not None else DEFAULT_CATALOG_PATH
    with open(catalog_path, encoding="utf-8") as catalog_file:
        data = json.load(catalog_file)

    locales = data.get("locales")
    if not isinstance(locales, dict) or not locales:
        raise ValueError(f"message catalog {catalog_path} declares no locales")

    catalog = build_catalog(
        locales,
        fallback_locale=fallback_locale or data.get("fallback_locale") or "en",
        version=data.get("version", "0"),
    )
    logger.info(
        "Loaded message catalog version %s with locales %s",
        catalog.version,
        ", ".join(catalog.available_locales()),
    )
    return catalog


@lru_cache(maxsize=1)
def get_default_catalog() -> MessageCatalog:
    """Return the process-wide catalog configured through settings."""
    return load_catalog(config.MESSAGE_CATALOG_PATH, fallback_locale=config.FALLBACK_LOCALE)


def candidate_locales(catalog: MessageCatalog, locale: Optional[str]) -> list[str]:
    """Return the locales consulted for ``locale``, most specific first."""
    candidates: list[str] = []
    code = normalize_locale(locale)
    if code:
        candidates.append(code)
        language = code.split("-", 1)[0]
        if language not in candidates:
            candidates.append(language)
    if catalog.fallback_locale not in candidates:
        candidates.append(catalog.fallback_locale)
    return candidates


def _format(template: str, key: str, args: tuple[Any, ...]) -> str:
    try:
        return template % args
    except (TypeError, ValueError) as e:
        logger.warning("Format arguments do not fit message '%s' (%s): %s", key, e, template)
        return template


def resolve(catalog: MessageCatalog, locale: Optional[str], key: str, *args: Any) -> LocalizedValue:
    """Resolve ``key`` for ``locale`` falling back to the catalog's default locale.

    Template strings are formatted positionally when ``args`` are given; list
    values are returned unmodified.

    Raises:
        UnknownLocalizationKeyError: ``key`` is absent from every candidate locale
    """
    for code in candidate_locales(catalog, locale):
        messages = catalog.locales.get(code)
        if messages is None or key not in messages:
            continue
        value = messages[key]
        if isinstance(value, str) and args:
            return _format(value, key, args)
        return value

    raise UnknownLocalizationKeyError(key, normalize_locale(locale) or catalog.fallback_locale)


def translator_for(catalog: MessageCatalog, locale: Optional[str]) -> Translator:
    """Return a lookup function bound to ``catalog`` and ``locale``."""

    def translate(key: str, *args: Any) -> LocalizedValue:
        return resolve(catalog, locale, key, *args)

    return translate


__all__ = [
    # Message key constants
    "WELCOME_MESSAGE",
    "HELLO_MESSAGE",
    "HELP_MESSAGE",
    "GOODBYE_MESSAGE",
    "REFLECTOR_MESSAGE",
    "FALLBACK_MESSAGE",
    "ERROR_MESSAGE",
    "GET_FACTS_MSG",
    "FACTS",
    # Catalog
    "DEFAULT_CATALOG_PATH",
    "MessageCatalog",
    "build_catalog",
    "load_catalog",
    "get_default_catalog",
    # Resolution
    "normalize_locale",
    "candidate_locales",
    "resolve",
    "translator_for",
]
