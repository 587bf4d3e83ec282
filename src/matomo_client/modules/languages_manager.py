"""
LanguagesManager API.

Available UI languages and per-user language settings.
"""

from matomo_client.modules.base import Flag, ModuleBase


class LanguagesManagerModule(ModuleBase):
    """Façade for the ``LanguagesManager`` namespace."""

    namespace = "LanguagesManager"

    def is_language_available(self, language_code: str):
        return self._call("isLanguageAvailable", {"languageCode": language_code})

    def get_available_languages(self):
        return self._call("getAvailableLanguages")

    def get_available_languages_info(self, exclude_non_core_plugins: Flag = None):
        """Get each language with its translation completeness."""
        return self._call(
            "getAvailableLanguagesInfo",
            optional={"excludeNonCorePlugins": exclude_non_core_plugins},
        )

    def get_available_language_names(self):
        return self._call("getAvailableLanguageNames")

    def get_translations_for_language(self, language_code: str):
        return self._call("getTranslationsForLanguage", {"languageCode": language_code})

    def get_language_for_user(self, login: str):
        return self._call("getLanguageForUser", {"login": login})

    def set_language_for_user(self, login: str, language_code: str):
        return self._call("setLanguageForUser", {"login": login, "languageCode": language_code})

    def uses_12_hour_clock_for_user(self, login: str):
        return self._call("uses12HourClockForUser", {"login": login})

    def set_12_hour_clock_for_user(self, login: str, use_12_hour_clock: bool):
        return self._call(
            "set12HourClockForUser", {"login": login, "use12HourClock": use_12_hour_clock}
        )
