"""Core modules for StackIt AI."""

from .models import *
from .config import settings

__all__ = [
    "settings",
    "Severity",
    "Capability",
    "QuestionAnalysis",
    "AnswerSuggestion",
    "ContentImprovement",
    "SpamDetection",
    "ModerationResult",
    "PlatformInsights",
    "ChatReply",
    "AIResponse",
]
