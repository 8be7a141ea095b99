"""
Field Change Highlighter
Tracks which fields were recently recalculated so the UI can flash them
"""
import time
from typing import Callable, Dict, Set

# How long a recalculated field stays highlighted
HIGHLIGHT_DURATION_MS = 2000


class FieldChangeHighlighter:
    """
    Per-field "recently changed" flags.

    Each mark stores an expiry time instead of scheduling a timer; a field
    reads as highlighted while the current time is before its expiry.
    """

    def __init__(self, duration_ms: int = HIGHLIGHT_DURATION_MS,
                 clock: Callable[[], float] = time.monotonic):
        self.duration = duration_ms / 1000.0
        self._clock = clock
        self._expiry: Dict[str, float] = {}

    def mark_changed(self, field_name: str):
        """Highlight a field for the configured duration from now"""
        expires_at = self._clock() + self.duration
        # A later mark extends the highlight, an earlier pending one is never shortened
        self._expiry[field_name] = max(self._expiry.get(field_name, expires_at), expires_at)

    def is_highlighted(self, field_name: str) -> bool:
        expires_at = self._expiry.get(field_name)
        if expires_at is None:
            return False
        if self._clock() < expires_at:
            return True
        del self._expiry[field_name]
        return False

    def highlighted_fields(self) -> Set[str]:
        """Names of all fields currently highlighted"""
        return {name for name in list(self._expiry) if self.is_highlighted(name)}

    def clear(self):
        """Drop all pending highlights"""
        self._expiry.clear()
