"""Pure normalization of parsed model output into typed results.

Nothing here touches the network or raises on malformed input: every field
is coerced, clamped, or replaced by its default.
"""

import re
from typing import Any, Dict, List

from ..core.constants import FallbackConstants, PromptConstants, ScoreConstants, TagConstants
from ..core.models import (
    AnswerSuggestion,
    ChatReply,
    ContentImprovement,
    ModerationResult,
    PlatformInsights,
    QuestionAnalysis,
    Severity,
    SpamDetection,
)
from ..utils.formatting import extract_code_examples, extract_related_topics, format_as_html
from .parsing import (
    canonicalize_tags,
    clamp_score,
    coerce_bool,
    coerce_text,
    parse_tag_list,
    string_list,
)

_BARE_NUMBER_RE = re.compile(r"\d+%?")


def coerce_severity(value: Any) -> Severity:
    if isinstance(value, str):
        try:
            return Severity(value.strip().lower())
        except ValueError:
            pass
    return Severity.LOW


def keyword_tags(text: str) -> List[str]:
    """Tags whose names appear in the text, or the first few defaults."""
    text_lower = (text or "").lower()
    matched = [tag for tag in TagConstants.FALLBACK_TAGS if tag.lower() in text_lower]
    if matched:
        return matched[:PromptConstants.MAX_TAGS]
    return TagConstants.FALLBACK_TAGS[:TagConstants.DEFAULT_TAG_COUNT]


def normalize_analysis(data: Dict[str, Any], title: str, content: str) -> QuestionAnalysis:
    raw_tags = data.get("tags") if isinstance(data.get("tags"), list) else []
    tags = canonicalize_tags(raw_tags, TagConstants.ANALYSIS_TAGS)
    if not tags:
        tags = keyword_tags(f"{title} {content}")
    
    return QuestionAnalysis(
        clarity=clamp_score(data.get("clarity"), ScoreConstants.CLARITY_DEFAULT),
        completeness=clamp_score(data.get("completeness"), ScoreConstants.COMPLETENESS_DEFAULT),
        quality_score=clamp_score(data.get("qualityScore"), ScoreConstants.QUALITY_DEFAULT),
        readability_score=clamp_score(data.get("readabilityScore"), ScoreConstants.READABILITY_DEFAULT),
        technical_depth=clamp_score(data.get("technicalDepth"), ScoreConstants.TECHNICAL_DEPTH_DEFAULT),
        suggestions=string_list(data.get("suggestions"), PromptConstants.MAX_SUGGESTIONS),
        improved_title=coerce_text(data.get("improvedTitle"), coerce_text(title, FallbackConstants.DEFAULT_IMPROVED_TITLE)),
        tags=tags,
    )


def normalize_answer(text: str, confidence: float) -> AnswerSuggestion:
    return AnswerSuggestion(
        content=format_as_html(text),
        confidence=clamp_score(confidence, ScoreConstants.ANSWER_CONFIDENCE_RANGE[0]),
        sources=list(FallbackConstants.ANSWER_SOURCES),
        code_examples=extract_code_examples(text),
        related_topics=extract_related_topics(text),
    )


def normalize_improvement(data: Dict[str, Any], original: str, raw: str) -> ContentImprovement:
    changes = string_list(data.get("changes"))
    return ContentImprovement(
        original=original,
        improved=coerce_text(data.get("improved"), format_as_html(raw)),
        changes=changes or list(FallbackConstants.DEFAULT_CHANGES),
        improvement_score=clamp_score(data.get("improvementScore"), ScoreConstants.IMPROVEMENT_DEFAULT),
    )


def normalize_spam(data: Dict[str, Any]) -> SpamDetection:
    return SpamDetection(
        is_spam=coerce_bool(data.get("isSpam"), False),
        confidence=clamp_score(data.get("confidence"), ScoreConstants.SPAM_CONFIDENCE_DEFAULT),
        severity=coerce_severity(data.get("severity")),
        reasons=string_list(data.get("reasons")),
    )


def normalize_tags(text: str) -> List[str]:
    return parse_tag_list(text, TagConstants.EXTENDED_TAGS)


def normalize_insights(data: Dict[str, Any]) -> PlatformInsights:
    return PlatformInsights(
        trending_topics=string_list(data.get("trendingTopics")) or list(FallbackConstants.TRENDING_TOPICS),
        quality_trends=coerce_text(data.get("qualityTrends"), FallbackConstants.QUALITY_TRENDS),
        user_engagement=coerce_text(data.get("userEngagement"), FallbackConstants.USER_ENGAGEMENT),
        recommendations=string_list(data.get("recommendations")) or list(FallbackConstants.INSIGHT_RECOMMENDATIONS),
        platform_health=clamp_score(data.get("platformHealth"), ScoreConstants.PLATFORM_HEALTH_DEFAULT),
    )


def normalize_moderation(data: Dict[str, Any]) -> ModerationResult:
    return ModerationResult(
        approved=coerce_bool(data.get("approved"), True),
        confidence=clamp_score(data.get("confidence"), ScoreConstants.MODERATION_CONFIDENCE_DEFAULT),
        severity=coerce_severity(data.get("severity")),
        issues=string_list(data.get("issues")),
        recommendations=string_list(data.get("recommendations")),
    )


def normalize_chat(text: str, confidence: float) -> ChatReply:
    content = text.strip()
    # a bare number such as "85%" is not a reply
    if _BARE_NUMBER_RE.fullmatch(content):
        content = FallbackConstants.CHAT_UNUSABLE_REPLY
    return ChatReply(content=content, confidence=clamp_score(confidence, 0))
