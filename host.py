from __future__ import annotations

import gettext
import logging
from pathlib import Path
from typing import Any, Callable

from persistence.interfaces import OptionsBackend

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 10


class Host:
    """
    The runtime a plugin is loaded into.

    Provides the pieces a plugin is allowed to touch:

    - an action registry (``add_action`` / ``do_action`` / ``did_action``)
    - translation catalogs (``load_textdomain`` / ``gettext``)
    - the options backend (``options``)

    One Host is built per application by the composition root.
    """

    def __init__(self, options: OptionsBackend, *, locale: str | None = None):
        self.options = options
        self.locale = locale
        self._actions: dict[str, list[tuple[int, int, Callable[..., Any]]]] = {}
        self._fired: dict[str, int] = {}
        self._translations: dict[str, gettext.NullTranslations] = {}
        self._seq = 0

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------
    def add_action(self, hook: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY) -> bool:
        entries = self._actions.setdefault(hook, [])
        # One entry per (callback, priority).
        if any(p == int(priority) and cb == callback for p, _, cb in entries):
            return True
        self._seq += 1
        entries.append((int(priority), self._seq, callback))
        logger.debug("ACTION ADD: %s -> %r (priority=%s)", hook, callback, priority)
        return True

    def has_action(self, hook: str, callback: Callable[..., Any] | None = None) -> bool:
        entries = self._actions.get(hook, [])
        if callback is None:
            return bool(entries)
        return any(cb == callback for _, _, cb in entries)

    def do_action(self, hook: str, *args: Any) -> None:
        """Run every callback for ``hook``: lower priority first, then registration order."""
        self._fired[hook] = self._fired.get(hook, 0) + 1
        for _, _, callback in sorted(self._actions.get(hook, []), key=lambda e: (e[0], e[1])):
            callback(*args)

    def did_action(self, hook: str) -> int:
        return self._fired.get(hook, 0)

    # ------------------------------------------------------------------
    # i18n
    # ------------------------------------------------------------------
    def load_textdomain(self, domain: str, languages_dir: Path) -> bool:
        """
        Load ``<languages_dir>/<locale>/LC_MESSAGES/<domain>.mo``.

        Falls back to untranslated strings when no catalog exists; returns True
        only when a real catalog was loaded.
        """
        languages = [self.locale] if self.locale else None
        translation = gettext.translation(
            domain,
            localedir=str(languages_dir),
            languages=languages,
            fallback=True,
        )
        self._translations[domain] = translation
        loaded = isinstance(translation, gettext.GNUTranslations)
        if not loaded:
            logger.debug("TEXTDOMAIN: no catalog for %s in %s", domain, languages_dir)
        return loaded

    def translations(self, domain: str) -> gettext.NullTranslations:
        return self._translations.get(domain) or gettext.NullTranslations()

    def gettext(self, text: str, domain: str = "default") -> str:
        return self.translations(domain).gettext(text)
