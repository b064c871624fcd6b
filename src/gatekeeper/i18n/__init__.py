"""Internationalization: translation lookup and locale state."""

from gatekeeper.i18n.translator import (
    DEFAULT_LOCALE,
    Translator,
    available_locales,
    get_locale,
    get_translator,
    init_i18n,
    interpolate,
    set_locale,
    t,
    translate,
    use_locale,
)


__all__ = [
    "DEFAULT_LOCALE",
    "Translator",
    "available_locales",
    "get_locale",
    "get_translator",
    "init_i18n",
    "interpolate",
    "set_locale",
    "t",
    "translate",
    "use_locale",
]
