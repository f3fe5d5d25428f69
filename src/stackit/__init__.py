"""StackIt AI - Gemini-backed writing and moderation helpers for the StackIt Q&A platform."""

__version__ = "1.0.0"
__author__ = "StackIt Team"

from .core.models import *
from .core.config import settings
from .services.ai_service import AIService, AIServiceFactory
from .services.gemini_client import GeminiClient

__all__ = [
    "settings",
    "AIService",
    "AIServiceFactory",
    "GeminiClient",
]
