"""
Schemas - pydantic contracts for the dataset and for chatbot answers.
"""

from medibot.schemas.chat_response import ChatResponse, ResponseSection, SafetyNote
from medibot.schemas.document import Document

__all__ = [
    "ChatResponse",
    "Document",
    "ResponseSection",
    "SafetyNote",
]
