"""Data models for StackIt AI."""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Optional, List, Dict, Any


class Severity(str, Enum):
    """Severity of a spam or moderation verdict."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Capability(str, Enum):
    """Capabilities exposed by the AI service."""
    ANALYZE_QUESTION = "analyze_question"
    GENERATE_ANSWER = "generate_answer"
    IMPROVE_CONTENT = "improve_content"
    DETECT_SPAM = "detect_spam"
    GENERATE_TAGS = "generate_tags"
    PLATFORM_INSIGHTS = "platform_insights"
    MODERATE_CONTENT = "moderate_content"
    CHAT = "chat"


# Content kinds accepted by improve_content and moderate_content
IMPROVABLE_KINDS = ("question", "answer")
MODERATABLE_KINDS = ("question", "answer", "comment")


@dataclass
class QuestionAnalysis:
    """Quality analysis of a question."""
    clarity: float
    completeness: float
    quality_score: float
    readability_score: float
    technical_depth: float
    suggestions: List[str]
    improved_title: str
    tags: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "clarity": self.clarity,
            "completeness": self.completeness,
            "qualityScore": self.quality_score,
            "readabilityScore": self.readability_score,
            "technicalDepth": self.technical_depth,
            "suggestions": list(self.suggestions),
            "improvedTitle": self.improved_title,
            "tags": list(self.tags),
        }


@dataclass
class AnswerSuggestion:
    """A generated answer rendered as HTML."""
    content: str
    confidence: float
    sources: List[str]
    code_examples: List[str] = field(default_factory=list)
    related_topics: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "content": self.content,
            "confidence": self.confidence,
            "sources": list(self.sources),
            "codeExamples": list(self.code_examples),
            "relatedTopics": list(self.related_topics),
        }


@dataclass
class ContentImprovement:
    """Rewritten question or answer content."""
    original: str
    improved: str
    changes: List[str]
    improvement_score: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "original": self.original,
            "improved": self.improved,
            "changes": list(self.changes),
            "improvementScore": self.improvement_score,
        }


@dataclass
class SpamDetection:
    """Spam verdict for a piece of content."""
    is_spam: bool
    confidence: float
    severity: Severity
    reasons: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "isSpam": self.is_spam,
            "confidence": self.confidence,
            "severity": self.severity.value,
            "reasons": list(self.reasons),
        }


@dataclass
class ModerationResult:
    """Policy moderation verdict for a piece of content."""
    approved: bool
    confidence: float
    severity: Severity
    issues: List[str]
    recommendations: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "approved": self.approved,
            "confidence": self.confidence,
            "issues": list(self.issues),
            "severity": self.severity.value,
            "recommendations": list(self.recommendations),
        }


@dataclass
class PlatformInsights:
    """Platform-wide trends and recommendations."""
    trending_topics: List[str]
    quality_trends: str
    user_engagement: str
    recommendations: List[str]
    platform_health: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "trendingTopics": list(self.trending_topics),
            "qualityTrends": self.quality_trends,
            "userEngagement": self.user_engagement,
            "recommendations": list(self.recommendations),
            "platformHealth": self.platform_health,
        }


@dataclass
class ChatReply:
    """Assistant reply in the chat widget."""
    content: str
    confidence: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class AIResponse:
    """Uniform envelope returned by every capability.

    ``synthetic`` marks data produced by the fallback path instead of the model.
    """
    success: bool
    data: Any = None
    error: Optional[str] = None
    synthetic: bool = False

    def to_dict(self) -> Dict[str, Any]:
        payload = {
            "success": self.success,
            "data": _serialize(self.data),
            "synthetic": self.synthetic,
        }
        if self.error is not None:
            payload["error"] = self.error
        return payload


def _serialize(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, list):
        return [_serialize(item) for item in value]
    return value
