"""Mock results used whenever the model cannot be used.

``FallbackService.select`` is the single entry point: it is keyed by
capability and receives the parse outcome, so prose that failed to parse can
still feed a heuristic instead of a canned payload.
"""

import html
import logging
import random
from textwrap import dedent
from typing import Any, Optional

from ..core.constants import FallbackConstants, MockDataConstants, ScoreConstants
from ..core.models import (
    AnswerSuggestion,
    Capability,
    ChatReply,
    ContentImprovement,
    ModerationResult,
    PlatformInsights,
    QuestionAnalysis,
    Severity,
    SpamDetection,
)
from ..utils.formatting import format_as_html
from .normalizers import keyword_tags
from .parsing import ParsedResponse, ParseStatus

logger = logging.getLogger(__name__)

MOCK_ANSWER_HTML = dedent("""
<h3>Solution Overview</h3>
<p>Based on your question about "{title}", here's a comprehensive solution:</p>
<h3>Implementation Approach</h3>
<p>The most straightforward way to handle this is by implementing the following pattern:</p>
<pre><code>// Example implementation
const solution = () =&gt; {{
  // Your code here
  return result;
}};</code></pre>
<h3>Best Practices</h3>
<ul>
  <li>Always validate your inputs</li>
  <li>Handle edge cases appropriately</li>
  <li>Consider performance implications</li>
  <li>Write comprehensive tests</li>
</ul>
<h3>Additional Considerations</h3>
<p>When implementing this solution, also consider accessibility, browser compatibility, and maintainability.</p>
""").strip()

MOCK_IMPROVED_QUESTION = (
    "<h3>Problem Description</h3><p>{content}</p>"
    "<h3>Expected Outcome</h3><p>I expect the solution to provide a clear, working "
    "implementation with proper error handling.</p>"
    "<h3>What I've Tried</h3><p>I've researched the documentation but need guidance "
    "on the best approach.</p>"
)

MOCK_IMPROVED_ANSWER = (
    "<h3>Solution Overview</h3><p>{content}</p>"
    "<h3>Implementation Details</h3><p>Here's a step-by-step breakdown of the solution "
    "with code examples and best practices.</p>"
    "<h3>Additional Resources</h3><p>For further reading, check the official "
    "documentation and related tutorials.</p>"
)

CHAT_FALLBACK_REPLY = dedent("""
I'm having a little trouble connecting to my AI brain right now, but I'm still here to help!

**For great questions:**
- Be specific with your problem
- Include relevant code examples
- Mention what you've already tried
- Use clear, descriptive titles

**For better visibility:**
- Choose relevant tags carefully
- Search existing questions first
- Provide context about your environment

**For building reputation:**
- Answer questions in your expertise area
- Provide detailed, helpful responses
- Engage positively with the community

Try chatting with me again in just a moment!
""").strip()


class FallbackService:
    """Deterministic or range-bounded stand-ins for every capability."""
    
    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self._handlers = {
            Capability.ANALYZE_QUESTION: self.question_analysis,
            Capability.GENERATE_ANSWER: self.answer_suggestion,
            Capability.IMPROVE_CONTENT: self.content_improvement,
            Capability.DETECT_SPAM: self.spam_detection,
            Capability.GENERATE_TAGS: self.tags,
            Capability.PLATFORM_INSIGHTS: self.platform_insights,
            Capability.MODERATE_CONTENT: self.moderation,
            Capability.CHAT: self.chat_reply,
        }
    
    def select(self, capability: Capability, parsed: ParsedResponse, **context: Any):
        """Pick the fallback result for a capability."""
        logger.info(f"Using fallback for {capability.value} ({parsed.status.value})")
        return self._handlers[Capability(capability)](parsed, **context)
    
    def _uniform(self, bounds) -> float:
        low, high = bounds
        return self.rng.uniform(low, high)
    
    def question_analysis(self, parsed: ParsedResponse, title: str = "", content: str = "", **_) -> QuestionAnalysis:
        suggestion_count = self.rng.randint(1, len(MockDataConstants.MOCK_SUGGESTIONS))
        return QuestionAnalysis(
            clarity=self._uniform(MockDataConstants.CLARITY_RANGE),
            completeness=self._uniform(MockDataConstants.COMPLETENESS_RANGE),
            quality_score=self._uniform(MockDataConstants.QUALITY_RANGE),
            readability_score=self._uniform(MockDataConstants.READABILITY_RANGE),
            technical_depth=self._uniform(MockDataConstants.TECHNICAL_DEPTH_RANGE),
            suggestions=MockDataConstants.MOCK_SUGGESTIONS[:suggestion_count],
            improved_title=f"How to {title.strip().lower()}?" if title.strip() else FallbackConstants.DEFAULT_IMPROVED_TITLE,
            tags=keyword_tags(f"{title} {content}"),
        )
    
    def answer_suggestion(self, parsed: ParsedResponse, title: str = "", **_):
        suggestion = AnswerSuggestion(
            content=MOCK_ANSWER_HTML.format(title=html.escape(title)),
            confidence=self._uniform(MockDataConstants.ANSWER_CONFIDENCE_RANGE),
            sources=list(FallbackConstants.MOCK_ANSWER_SOURCES),
            code_examples=list(FallbackConstants.MOCK_CODE_EXAMPLES),
            related_topics=list(FallbackConstants.MOCK_RELATED_TOPICS),
        )
        return [suggestion]
    
    def content_improvement(self, parsed: ParsedResponse, content: str = "", kind: str = "question", **_) -> ContentImprovement:
        if parsed.status is ParseStatus.UNPARSABLE:
            # The model answered in prose; keep its text instead of the template
            return ContentImprovement(
                original=content,
                improved=format_as_html(parsed.raw),
                changes=list(FallbackConstants.DEFAULT_CHANGES),
                improvement_score=float(ScoreConstants.IMPROVEMENT_DEFAULT),
            )
        
        template = MOCK_IMPROVED_QUESTION if kind == "question" else MOCK_IMPROVED_ANSWER
        return ContentImprovement(
            original=content,
            improved=template.format(content=content),
            changes=list(FallbackConstants.MOCK_CHANGES),
            improvement_score=self._uniform(MockDataConstants.IMPROVEMENT_RANGE),
        )
    
    def spam_detection(self, parsed: ParsedResponse, **_) -> SpamDetection:
        if parsed.status is ParseStatus.UNPARSABLE:
            text_lower = parsed.raw.lower()
            is_spam = any(keyword in text_lower for keyword in ScoreConstants.SPAM_KEYWORDS)
            return SpamDetection(
                is_spam=is_spam,
                confidence=float(
                    ScoreConstants.HEURISTIC_SPAM_CONFIDENCE if is_spam else ScoreConstants.HEURISTIC_CLEAN_CONFIDENCE
                ),
                severity=Severity.MEDIUM if is_spam else Severity.LOW,
                reasons=[FallbackConstants.SPAM_HEURISTIC_REASON] if is_spam else [],
            )
        
        return SpamDetection(is_spam=False, confidence=0.0, severity=Severity.LOW, reasons=[])
    
    def tags(self, parsed: ParsedResponse, content: str = "", **_):
        return keyword_tags(content)
    
    def platform_insights(self, parsed: ParsedResponse, **_) -> PlatformInsights:
        return PlatformInsights(
            trending_topics=list(FallbackConstants.TRENDING_TOPICS),
            quality_trends=FallbackConstants.QUALITY_TRENDS,
            user_engagement=FallbackConstants.USER_ENGAGEMENT,
            recommendations=list(FallbackConstants.INSIGHT_RECOMMENDATIONS),
            platform_health=float(ScoreConstants.PLATFORM_HEALTH_DEFAULT),
        )
    
    def moderation(self, parsed: ParsedResponse, **_) -> ModerationResult:
        return ModerationResult(
            approved=True,
            confidence=float(ScoreConstants.MODERATION_CONFIDENCE_DEFAULT),
            severity=Severity.LOW,
            issues=[],
            recommendations=[],
        )
    
    def chat_reply(self, parsed: ParsedResponse, **_) -> ChatReply:
        if parsed.status is ParseStatus.ERROR:
            return ChatReply(content=CHAT_FALLBACK_REPLY, confidence=float(MockDataConstants.CHAT_ERROR_CONFIDENCE))
        return ChatReply(content=FallbackConstants.CHAT_NO_REPLY, confidence=float(MockDataConstants.CHAT_CONFIDENCE))
