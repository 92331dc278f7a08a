"""
Runtime site configuration.

Admin-editable settings (forum name, announcement, censored words) that can
change while the process is running. Seeded from environment settings at
startup; writes made through the admin interface replace values in place.
"""

import threading
from collections.abc import Mapping

from app.config import ConfigKey, Settings, settings
from app.core.logging import get_logger

logger = get_logger(__name__)


class SiteConfig:
    """Thread-safe key/value store for runtime settings."""

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._lock = threading.Lock()
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str, default: str = "") -> str:
        with self._lock:
            return self._values.get(key, default)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._values[key] = value
        logger.info("site_config_updated", key=key)

    def update(self, values: Mapping[str, str]) -> None:
        """Write several keys at once. Readers see either none or all of them."""
        with self._lock:
            self._values.update(values)
        logger.info("site_config_updated", keys=sorted(values))

    def snapshot(self) -> dict[str, str]:
        with self._lock:
            return dict(self._values)

    def censored_words(self) -> str:
        """Current comma-separated censored word list."""
        return self.get(ConfigKey.CENSORED_WORDS)


def build_site_config(source: Settings) -> SiteConfig:
    """Create a SiteConfig seeded from environment settings."""
    return SiteConfig(
        {
            ConfigKey.FORUM_NAME: source.FORUM_NAME,
            ConfigKey.HEADER_MSG: source.HEADER_MSG,
            ConfigKey.CENSORED_WORDS: source.CENSORED_WORDS,
        }
    )


site_config = build_site_config(settings)
