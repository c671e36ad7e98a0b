"""
Responders module - what to say when the local engine is not confident.
"""

from medibot.responders.fallback import (
    CONSULT_NOTE,
    CannedFallbackResponder,
    get_fallback_responder,
)

__all__ = [
    "CONSULT_NOTE",
    "CannedFallbackResponder",
    "get_fallback_responder",
]
