"""
Agent module - the chatbot that turns engine output into answers.

USAGE:
------
from medibot.agent import create_chatbot

bot = create_chatbot()
response = bot.answer("What are the symptoms of asthma?")
"""

from medibot.agent.chatbot import Analysis, MedicalChatbot, create_chatbot
from medibot.agent.response import EDUCATIONAL_NOTE, build_response

__all__ = [
    "Analysis",
    "EDUCATIONAL_NOTE",
    "MedicalChatbot",
    "build_response",
    "create_chatbot",
]
