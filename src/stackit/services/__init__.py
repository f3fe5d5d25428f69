"""Services for StackIt AI."""

from .ai_service import AIService, AIServiceFactory
from .gemini_client import GeminiClient

__all__ = [
    "AIService",
    "AIServiceFactory",
    "GeminiClient",
]
