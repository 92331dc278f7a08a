"""
Censor filter for rendered HTML and plain text fields.

The forbidden word list lives in the runtime site configuration and can be
edited by admins at any time, so the compiled pattern is cached against the
exact list string it was built from and rebuilt whenever that string changes.
This runs once per rendered field per request, so the cache matters.
"""

import re
import threading
from collections.abc import Callable
from dataclasses import dataclass

from app.config import settings
from app.core.logging import get_logger
from app.core.site_config import site_config

logger = get_logger(__name__)


@dataclass(frozen=True)
class CompiledMatcher:
    """
    A compiled censor pattern and the word list string it was built from.

    Published as a single object so a reader never sees a pattern paired
    with a different source string.
    """

    source: str
    pattern: re.Pattern[str] | None

    @property
    def is_active(self) -> bool:
        return self.pattern is not None


def parse_word_list(source: str) -> list[str]:
    """Split a comma-separated word list, trimming entries and dropping empty ones."""
    return [word for word in (part.strip() for part in source.split(",")) if word]


def build_matcher(source: str) -> CompiledMatcher:
    """
    Compile a case-insensitive alternation over the words in source.

    Entries are matched as literal substrings (regex metacharacters are
    escaped) and are not anchored to word boundaries.
    """
    words = parse_word_list(source)
    if not words:
        return CompiledMatcher(source=source, pattern=None)
    pattern = re.compile("|".join(re.escape(word) for word in words), re.IGNORECASE)
    return CompiledMatcher(source=source, pattern=pattern)


class CensorFilter:
    """
    Masks configured words with a fixed placeholder.

    Holds a single-entry cache keyed by the last word list string seen.
    Safe to share between threads.

    Args:
        word_source: Returns the live comma-separated word list
        placeholder: Replacement for every match, regardless of its length
    """

    def __init__(
        self,
        word_source: Callable[[], str],
        placeholder: str = settings.CENSOR_PLACEHOLDER,
    ) -> None:
        self._word_source = word_source
        self._placeholder = placeholder
        self._lock = threading.Lock()
        self._matcher: CompiledMatcher | None = None

    @property
    def placeholder(self) -> str:
        return self._placeholder

    def matcher(self) -> CompiledMatcher:
        """Return a matcher for the current word list, rebuilding it if the list changed."""
        source = self._word_source()

        matcher = self._matcher
        if matcher is not None and matcher.source == source:
            return matcher

        with self._lock:
            # Another thread may have rebuilt while we waited
            matcher = self._matcher
            if matcher is None or matcher.source != source:
                matcher = build_matcher(source)
                self._matcher = matcher
                logger.info(
                    "censor_matcher_rebuilt",
                    term_count=len(parse_word_list(source)),
                    active=matcher.is_active,
                )
        return matcher

    def censor(self, text: str) -> str:
        """Replace every configured word in text with the placeholder."""
        pattern = self.matcher().pattern
        if pattern is None:
            return text
        return pattern.sub(lambda _match: self._placeholder, text)

    def contains_censored(self, text: str) -> bool:
        pattern = self.matcher().pattern
        return pattern is not None and pattern.search(text) is not None

    def invalidate(self) -> None:
        """Drop the cached matcher. The next call rebuilds from the live list."""
        with self._lock:
            self._matcher = None


_default_filter = CensorFilter(site_config.censored_words)


def get_censor_filter() -> CensorFilter:
    """Get the process-wide filter bound to the live site configuration."""
    return _default_filter


def censor(text: str) -> str:
    """Censor text with the process-wide filter."""
    return _default_filter.censor(text)
