"""Internationalization support for the trainer.

Usage:
    from taiwan_mahjong.ui.i18n import t, set_language, translate_fan

    set_language("en")             # Switch to English
    t("msg.correct")               # -> "Correct!"
    t("label.total", points=5)     # -> "Total: 5 tai"
    translate_fan(fan_result)      # -> "Seat wind (East)"
"""

from taiwan_mahjong.rules.fan import FanResult

SUPPORTED_LANGUAGES = ("zh", "en")


class I18n:
    """Singleton internationalization manager."""

    _lang: str = "zh"
    _translations: dict = {}
    _loaded: bool = False

    @classmethod
    def set_language(cls, lang: str):
        """Set the active language."""
        if lang not in SUPPORTED_LANGUAGES:
            raise ValueError(f"unsupported language {lang!r}")
        cls._lang = lang
        cls._load_translations()

    @classmethod
    def _load_translations(cls):
        """Load translations for the current language."""
        if cls._lang == "en":
            from taiwan_mahjong.ui.locales.en import TRANSLATIONS
        else:
            from taiwan_mahjong.ui.locales.zh import TRANSLATIONS
        cls._translations = TRANSLATIONS
        cls._loaded = True

    @classmethod
    def get(cls, key: str, **kwargs) -> str:
        """Get a translated string by key, with optional format arguments."""
        if not cls._loaded:
            cls._load_translations()
        text = cls._translations.get(key, key)
        if kwargs:
            try:
                return text.format(**kwargs)
            except (KeyError, IndexError):
                return text
        return text

    @classmethod
    def has(cls, key: str) -> bool:
        if not cls._loaded:
            cls._load_translations()
        return key in cls._translations

    @classmethod
    def get_language(cls) -> str:
        """Get the current language code."""
        return cls._lang


def t(key: str, **kwargs) -> str:
    """Global translation function."""
    return I18n.get(key, **kwargs)


def set_language(lang: str):
    """Set the active language."""
    I18n.set_language(lang)


def get_language() -> str:
    """Get the current language code."""
    return I18n.get_language()


def translate_fan(fan: FanResult) -> str:
    """Label of a fan in the current language.

    Chinese labels come straight from the rule engine; other languages
    rebuild the label from the fan id and its detail.
    """
    if I18n.get_language() == "zh":
        return fan.name
    detail_key = f"detail.{fan.detail}"
    detail = t(detail_key) if I18n.has(detail_key) else fan.detail
    return t(f"fan.{fan.fan_id.value}", detail=detail)
