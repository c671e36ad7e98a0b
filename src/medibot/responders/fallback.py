"""
Fallback responders - answers for queries the local engine can't handle.

Only the canned local responder ships. Network responders (local model
server, hosted LLM, drug-label lookup) are disabled in this deployment,
so the factory always returns the canned one.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from medibot.schemas import ChatResponse, SafetyNote

if TYPE_CHECKING:
    from medibot.config import MedibotConfig
    from medibot.core import FallbackResponder

logger = logging.getLogger(__name__)


CONSULT_NOTE = SafetyNote(
    message="For medical concerns, please consult with a healthcare professional.",
    type="consult_professional",
)


class CannedFallbackResponder:
    """Admits the knowledge base has nothing useful to say."""

    def respond(self, query: str) -> ChatResponse:
        return ChatResponse(
            source="fallback",
            query=query,
            message=(
                "I don't have enough data in my medical records to answer "
                f'this question about "{query}".'
            ),
            safety_notes=[CONSULT_NOTE],
        )


def get_fallback_responder(config: MedibotConfig | None = None) -> FallbackResponder:
    """
    Factory function to get the fallback responder.

    Args:
        config: Chatbot config (global config if not provided)
    """
    if config is None:
        from medibot.config import get_config

        config = get_config()

    if not config.local_only:
        logger.warning("External responders are not available, using canned fallback")
    return CannedFallbackResponder()
