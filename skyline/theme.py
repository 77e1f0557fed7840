# ABOUTME: Light/dark theme preference: persisted key-value storage and the document-level theme flag.
# ABOUTME: Independent of the weather pipeline; initialized once at startup.

import json
import logging
from pathlib import Path
from typing import Protocol

from skyline.models import Theme

logger = logging.getLogger(__name__)

THEME_KEY = "skyline-theme"


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    """Non-durable store, for tests and throwaway sessions."""

    def __init__(self, data: dict[str, str] | None = None):
        self.data = dict(data or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonFileStore:
    """Durable store backed by a single JSON object file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def get(self, key: str) -> str | None:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")

    def _read(self) -> dict:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except json.JSONDecodeError:
            logger.warning("Ignoring unreadable settings file %s", self.path)
            return {}
        return data if isinstance(data, dict) else {}


class ThemeManager:
    """Reads, applies, and persists the light/dark preference.

    ``data_theme`` is the document-wide presentation flag: "light" when the
    light theme is active, None for dark.
    """

    def __init__(self, store: KeyValueStore, platform_hint: str = "dark"):
        self.store = store
        self.platform_hint = platform_hint
        self.data_theme: str | None = None

    def current_theme(self) -> Theme:
        """Stored preference if valid, otherwise the platform light/dark hint."""
        stored = self.store.get(THEME_KEY)
        if stored in (Theme.LIGHT.value, Theme.DARK.value):
            return Theme(stored)
        return Theme.LIGHT if self.platform_hint == Theme.LIGHT.value else Theme.DARK

    def apply_theme(self, theme: Theme) -> None:
        theme = Theme(theme)
        self.data_theme = Theme.LIGHT.value if theme is Theme.LIGHT else None
        self.store.set(THEME_KEY, theme.value)
        logger.debug("Applied %s theme", theme.value)

    def toggle(self) -> Theme:
        """Flip the active theme and persist the new choice."""
        theme = Theme.DARK if self.data_theme == Theme.LIGHT.value else Theme.LIGHT
        self.apply_theme(theme)
        return theme

    def initialize(self) -> Theme:
        theme = self.current_theme()
        self.apply_theme(theme)
        return theme
