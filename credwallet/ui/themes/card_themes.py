"""Credential card theme registry and matcher."""

from __future__ import annotations

from functools import lru_cache
import logging
import re

from credwallet.ui.themes.defaults import default_card_theme
from credwallet.ui.themes.models import CardTheme, CardThemeMatcher, CredentialMatchInfo

logger = logging.getLogger(__name__)

_FIELD_BY_PATTERN_TYPE: dict[str, str] = {
    "credDefId": "cred_def_id",
    "issuerName": "issuer_name",
    "schemaName": "schema_name",
    "connectionLabel": "connection_label",
}


@lru_cache(maxsize=256)
def _compile(regex: str) -> re.Pattern[str] | None:
    try:
        return re.compile(regex, re.IGNORECASE)
    except re.error as exc:
        logger.warning("Ignoring invalid card theme pattern %r: %s", regex, exc)
        return None


def matches_credential(matcher: CardThemeMatcher, credential: CredentialMatchInfo) -> bool:
    """Return True when any pattern of ``matcher`` matches ``credential``.

    A matcher without patterns never matches, and a credential field that is
    ``None`` never satisfies a pattern, not even ``.*``. An empty string is a
    present value and is searched like any other.
    """
    if not matcher.patterns:
        return False

    for pattern in matcher.patterns:
        attr = _FIELD_BY_PATTERN_TYPE.get(pattern.type)
        if attr is None:
            continue
        value = getattr(credential, attr)
        if value is None:  # "" is present
            continue
        compiled = _compile(pattern.regex)
        if compiled is not None and compiled.search(value):
            return True
    return False


class CardThemeRegistry:
    """Stores card themes and picks one for a credential.

    Themes are scanned in registration order and the first match wins.
    Fallback themes never take part in the scan; the most recently
    registered one becomes the default returned when nothing matches.
    """

    def __init__(self) -> None:
        self._themes: dict[str, CardTheme] = {}
        self._default = default_card_theme()

    # -- registration --

    def register(self, theme: CardTheme) -> None:
        self._themes[theme.id] = theme
        if theme.matcher.fallback:
            self._default = theme

    def unregister(self, theme_id: str) -> None:
        theme = self._themes.pop(theme_id, None)
        if theme is not None and theme.matcher.fallback:
            self._default = default_card_theme()

    def clear(self) -> None:
        self._themes.clear()
        self._default = default_card_theme()

    # -- retrieval --

    def get_theme(self, credential: CredentialMatchInfo) -> CardTheme:
        for theme in self._themes.values():
            if theme.matcher.fallback:
                continue
            if matches_credential(theme.matcher, credential):
                return theme
        return self._default

    def get_by_id(self, theme_id: str) -> CardTheme | None:
        return self._themes.get(theme_id)

    def get_default(self) -> CardTheme:
        return self._default

    def list(self) -> list[CardTheme]:
        return list(self._themes.values())

    # -- configuration --

    def set_default(self, theme: CardTheme) -> None:
        self._default = theme
