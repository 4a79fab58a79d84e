"""
Context Windower

Bounded "nearby prose" around a match position. Shared by the monetary
extractor, the indicator scanner and the item identifier.

Truncation at document edges is silent: no padding, no ellipsis markers.
"""

from __future__ import annotations

DEFAULT_CONTEXT_RADIUS = 100


def context_window(text: str, index: int, radius: int = DEFAULT_CONTEXT_RADIUS) -> str:
    """Return text[index - radius : index + radius], clipped to the document."""
    radius = max(0, radius)
    start = max(0, index - radius)
    end = min(len(text), index + radius)
    return text[start:end]
