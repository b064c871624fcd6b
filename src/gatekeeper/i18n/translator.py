"""Translation resolution with locale fallback.

Translation tables are nested YAML mappings, one file per locale,
addressed with dot-separated keys (``collections.roles.description``).
Lookups never fail: an unknown locale resolves against the baseline
locale, a missing key falls back to the baseline table and finally to
the key itself. Each fallback is logged as a warning.
"""

import re
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from functools import lru_cache
from importlib.resources import files
from typing import Any

import structlog
import yaml

from gatekeeper.core.constants import BASELINE_LOCALE


logger = structlog.get_logger()

PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)\}\}")

TranslationValues = Mapping[str, str | int | float]

DEFAULT_LOCALE = BASELINE_LOCALE


def load_translations() -> dict[str, dict[str, Any]]:
    """Load every bundled ``<locale>.yaml`` translation table.

    Returns:
        Mapping of locale code to its nested string table
    """
    directory = files("gatekeeper.i18n").joinpath("translations")
    tables: dict[str, dict[str, Any]] = {}

    for resource in sorted(directory.iterdir(), key=lambda r: r.name):
        if not resource.name.endswith(".yaml"):
            continue
        locale = resource.name.removesuffix(".yaml")
        tables[locale] = yaml.safe_load(resource.read_text(encoding="utf-8")) or {}

    return tables


def interpolate(template: str, values: TranslationValues | None = None) -> str:
    """Replace ``{{name}}`` placeholders with values.

    Placeholders without a matching value are left untouched.
    """
    if not values:
        return template

    def replace(match: re.Match[str]) -> str:
        value = values.get(match.group(1))
        return match.group(0) if value is None else str(value)

    return PLACEHOLDER_PATTERN.sub(replace, template)


class Translator:
    """Resolves translation keys against a set of locale tables."""

    def __init__(
        self,
        tables: Mapping[str, Mapping[str, Any]],
        baseline: str = BASELINE_LOCALE,
    ) -> None:
        """Initialize the translator.

        Args:
            tables: Mapping of locale code to nested string table
            baseline: Locale used when a locale or key is unavailable

        Raises:
            ValueError: If the baseline locale has no table
        """
        if baseline not in tables:
            raise ValueError(f"Baseline locale '{baseline}' has no translation table")
        self._tables = dict(tables)
        self.baseline = baseline

    @property
    def locales(self) -> tuple[str, ...]:
        return tuple(self._tables)

    def has_locale(self, locale: str | None) -> bool:
        return locale in self._tables

    def lookup(self, key: str, locale: str) -> str | None:
        """Find the string stored at ``key`` for a single locale.

        Returns:
            The stored string, or None if the path is absent, empty,
            or points at a nested table
        """
        current: Any = self._tables.get(locale)
        for part in key.split("."):
            if isinstance(current, Mapping) and part in current:
                current = current[part]
            else:
                return None
        return current if isinstance(current, str) and current else None

    def translate(
        self,
        key: str,
        values: TranslationValues | None = None,
        locale: str | None = None,
    ) -> str:
        """Resolve a key to a human-readable string.

        Args:
            key: Dot-separated translation key
            values: Optional placeholder values
            locale: Target locale (baseline if omitted)

        Returns:
            Translated string, or the key itself if no table has it
        """
        target = locale or self.baseline
        if not self.has_locale(target):
            logger.warning("locale_not_found", locale=target, fallback=self.baseline)
            target = self.baseline

        translated = self.lookup(key, target)
        if translated is None and target != self.baseline:
            translated = self.lookup(key, self.baseline)

        if translated is None:
            logger.warning("translation_key_missing", key=key, locale=target)
            return key

        return interpolate(translated, values)


# ============================================================
# Process-wide locale
# ============================================================

_current_locale: str = DEFAULT_LOCALE

# Request-scoped override; takes precedence over the process-wide locale
_scoped_locale: ContextVar[str | None] = ContextVar("gatekeeper_locale", default=None)


@lru_cache
def get_translator() -> Translator:
    """Get the shared translator over the bundled tables."""
    return Translator(load_translations())


def available_locales() -> tuple[str, ...]:
    return get_translator().locales


def set_locale(locale: str) -> None:
    """Set the process-wide locale.

    An unknown locale is not an error: a warning is logged and the
    locale is reset to the baseline.
    """
    global _current_locale

    if get_translator().has_locale(locale):
        _current_locale = locale
    else:
        logger.warning("locale_not_found", locale=locale, fallback=DEFAULT_LOCALE)
        _current_locale = DEFAULT_LOCALE


def get_locale() -> str:
    """Get the active locale (request-scoped if set, else process-wide)."""
    scoped = _scoped_locale.get()
    return scoped if scoped is not None else _current_locale


def init_i18n(locale: str = DEFAULT_LOCALE) -> None:
    """Initialize i18n with a locale."""
    set_locale(locale)


@contextmanager
def use_locale(locale: str) -> Iterator[str]:
    """Activate a locale for the current context only.

    Usage:
        with use_locale("de"):
            message = translate("messages.createdRole", {"name": "editor"})

    Yields:
        The locale actually in effect (baseline if ``locale`` is unknown)
    """
    translator = get_translator()
    if not translator.has_locale(locale):
        logger.warning("locale_not_found", locale=locale, fallback=translator.baseline)
        locale = translator.baseline

    token = _scoped_locale.set(locale)
    try:
        yield locale
    finally:
        _scoped_locale.reset(token)


def translate(
    key: str,
    values: TranslationValues | None = None,
    locale: str | None = None,
) -> str:
    """Translate a key using the explicit locale or the active one.

    Args:
        key: Translation key in dot notation
            (e.g., 'components.protectedRoleNotice.title')
        values: Optional values to replace ``{{placeholders}}``
        locale: Optional locale override

    Returns:
        Translated string or the key if translation not found
    """
    return get_translator().translate(key, values, locale or get_locale())


t = translate
