"""Tests for normalization of parsed model output."""

from stackit.core.constants import FallbackConstants, TagConstants
from stackit.core.models import Severity
from stackit.services.normalizers import (
    coerce_severity,
    keyword_tags,
    normalize_analysis,
    normalize_chat,
    normalize_answer,
    normalize_improvement,
    normalize_insights,
    normalize_moderation,
    normalize_spam,
    normalize_tags,
)


class TestNormalizeAnalysis:
    """Question analysis clamping and defaults."""

    def test_scores_clamped_and_defaults_filled(self):
        data = {
            "clarity": 150,
            "completeness": -3,
            "suggestions": [f"tip {i}" for i in range(7)],
            "improvedTitle": "",
            "tags": ["react", "Nope", "DEBUGGING"],
        }
        analysis = normalize_analysis(data, "bug", "it breaks")

        assert analysis.clarity == 100.0
        assert analysis.completeness == 0.0
        assert analysis.quality_score == 75.0
        assert analysis.readability_score == 80.0
        assert analysis.technical_depth == 70.0
        assert len(analysis.suggestions) == 5
        assert analysis.improved_title == "bug"
        assert analysis.tags == ["React", "Debugging"]

    def test_unknown_tags_replaced_by_keyword_tags(self):
        analysis = normalize_analysis({"tags": ["Blockchain"]}, "Python import error", "")
        assert analysis.tags == ["Python"]

    def test_non_list_fields_ignored(self):
        analysis = normalize_analysis({"suggestions": "write more", "tags": "React"}, "t", "c")
        assert analysis.suggestions == []
        assert set(analysis.tags) <= set(TagConstants.ANALYSIS_TAGS)


def test_keyword_tags():
    assert keyword_tags("My React app has a CSS issue") == ["React", "CSS"]
    assert keyword_tags("zzz") == ["JavaScript", "React", "TypeScript"]
    assert keyword_tags("") == ["JavaScript", "React", "TypeScript"]


def test_normalize_answer():
    text = "Use React.\n\n```js\nx()\n```"
    suggestion = normalize_answer(text, 90)

    assert "<pre><code>x()</code></pre>" in suggestion.content
    assert suggestion.code_examples == ["x()"]
    assert suggestion.related_topics == ["React"]
    assert suggestion.sources == FallbackConstants.ANSWER_SOURCES
    assert suggestion.confidence == 90.0


def test_normalize_improvement_with_model_html():
    improvement = normalize_improvement({"improved": "<p>Better</p>", "changes": []}, "orig", "raw")
    assert improvement.original == "orig"
    assert improvement.improved == "<p>Better</p>"
    assert improvement.changes == FallbackConstants.DEFAULT_CHANGES
    assert improvement.improvement_score == 85.0


def test_normalize_improvement_formats_raw_text_when_missing():
    improvement = normalize_improvement({"improvementScore": 300}, "orig", "Plain **text**")
    assert improvement.improved == "<p>Plain <strong>text</strong></p>"
    assert improvement.improvement_score == 100.0


def test_normalize_spam():
    detection = normalize_spam({
        "isSpam": "true",
        "confidence": 250,
        "severity": "HIGH",
        "reasons": ["ads"] * 8,
    })
    assert detection.is_spam is True
    assert detection.confidence == 100.0
    assert detection.severity is Severity.HIGH
    assert len(detection.reasons) == 5


def test_normalize_spam_defaults():
    detection = normalize_spam({})
    assert detection.is_spam is False
    assert detection.confidence == 0.0
    assert detection.severity is Severity.LOW
    assert detection.reasons == []


def test_coerce_severity():
    assert coerce_severity("medium") is Severity.MEDIUM
    assert coerce_severity("critical") is Severity.LOW
    assert coerce_severity(3) is Severity.LOW


def test_normalize_moderation_defaults():
    moderation = normalize_moderation({})
    assert moderation.approved is True
    assert moderation.confidence == 90.0
    assert moderation.severity is Severity.LOW
    assert moderation.issues == []
    assert moderation.recommendations == []


def test_normalize_moderation_rejection():
    moderation = normalize_moderation({
        "approved": False,
        "confidence": 97,
        "severity": "high",
        "issues": ["Harassment"],
        "recommendations": ["Remove the post"],
    })
    assert moderation.approved is False
    assert moderation.severity is Severity.HIGH
    assert moderation.issues == ["Harassment"]


def test_normalize_insights():
    insights = normalize_insights({"platformHealth": 140, "trendingTopics": "Python", "qualityTrends": "Rising"})
    assert insights.platform_health == 100.0
    assert insights.trending_topics == FallbackConstants.TRENDING_TOPICS
    assert insights.quality_trends == "Rising"
    assert insights.user_engagement == FallbackConstants.USER_ENGAGEMENT
    assert insights.recommendations == FallbackConstants.INSIGHT_RECOMMENDATIONS


def test_normalize_tags():
    assert normalize_tags("React, Blockchain, Docker") == ["React", "Docker"]
    assert normalize_tags("I cannot help with that") == []


def test_normalize_chat_replaces_bare_numbers():
    assert normalize_chat("  92% ", 95).content == FallbackConstants.CHAT_UNUSABLE_REPLY
    assert normalize_chat("Use 2 tags", 95).content == "Use 2 tags"
