# -*- coding: utf-8 -*-
"""
Centralized Translation Manager for user-facing messages.

Controllers never build message text themselves: they call tr(key, **kwargs)
and the active catalog (French by default, English on demand) supplies it.
"""

from typing import Callable, Dict, List, Tuple

from app.config import Config
from services.translations.en import EN_TRANSLATIONS
from services.translations.fr import FR_TRANSLATIONS
from utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_LANGUAGE = "fr"


class TranslationManager:
    """Singleton message catalog (French / English)."""

    CATALOGS: Dict[str, Dict[str, str]] = {
        "fr": FR_TRANSLATIONS,
        "en": EN_TRANSLATIONS,
    }

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._listeners: List[Callable[[str], None]] = []
            instance._language = cls._resolve(Config.LANGUAGE)
            cls._instance = instance
        return cls._instance

    @classmethod
    def _resolve(cls, lang_code: str) -> str:
        code = (lang_code or "").strip().lower()
        if code in cls.CATALOGS:
            return code
        logger.warning(f"Unsupported language '{lang_code}', using '{DEFAULT_LANGUAGE}'")
        return DEFAULT_LANGUAGE

    @property
    def languages(self) -> Tuple[str, ...]:
        return tuple(self.CATALOGS)

    def on_language_changed(self, callback: Callable[[str], None]):
        """Register a callback receiving the new language code."""
        self._listeners.append(callback)

    def set_language(self, lang_code: str):
        code = self._resolve(lang_code)
        if code == self._language:
            return
        self._language = code
        logger.info(f"Message language: {code}")
        for callback in list(self._listeners):
            try:
                callback(code)
            except Exception as e:
                logger.error(f"Language change callback failed: {e}")

    def get_language(self) -> str:
        return self._language

    def tr(self, key: str, **kwargs) -> str:
        """Message for key in the active language; French, then the key itself, as fallbacks."""
        template = self.CATALOGS[self._language].get(key)
        if template is None:
            template = self.CATALOGS[DEFAULT_LANGUAGE].get(key)
        if template is None:
            logger.debug(f"Missing message key: {key}")
            return key
        if not kwargs:
            return template
        try:
            return template.format(**kwargs)
        except (KeyError, IndexError, ValueError):
            logger.warning(f"Bad arguments for message '{key}': {kwargs}")
            return template


_translator = TranslationManager()


def tr(key: str, **kwargs) -> str:
    return _translator.tr(key, **kwargs)


def set_language(lang_code: str):
    _translator.set_language(lang_code)


def get_language() -> str:
    return _translator.get_language()


def on_language_changed(callback: Callable[[str], None]):
    _translator.on_language_changed(callback)
