"""AI writing and moderation service for StackIt."""

import logging
import random
import time
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from diskcache import Cache

from ..core.config import Settings, settings
from ..core.constants import ScoreConstants
from ..core.models import AIResponse, Capability, IMPROVABLE_KINDS, MODERATABLE_KINDS
from . import normalizers, prompts
from .fallbacks import FallbackService
from .gemini_client import GeminiClient
from .parsing import ParsedResponse, ParseStatus, parse_model_output, wrap_text

logger = logging.getLogger(__name__)


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    try:
        return str(value)
    except Exception as e:
        logger.warning(f"Could not read text input, using empty string: {e}")
        return ""


def _as_list(value: Any) -> List[Any]:
    if value is None or isinstance(value, (str, bytes, dict)):
        return []
    try:
        return list(value)
    except TypeError:
        logger.warning(f"Expected a list of questions, got {type(value).__name__}")
        return []


def _check_kind(kind: Any, allowed: Sequence[str]) -> str:
    if isinstance(kind, str) and kind.strip().lower() in allowed:
        return kind.strip().lower()
    shown = kind if isinstance(kind, str) else type(kind).__name__
    logger.warning(f"Unknown content kind {shown!r}, using {allowed[0]!r}")
    return allowed[0]


class AIService:
    """Gemini-backed capabilities that always return a well-formed ``AIResponse``.

    The client only needs a ``generate(prompt) -> Optional[str]`` method, so
    tests can pass a fake transport.
    """
    
    def __init__(
        self,
        client,
        rng: Optional[random.Random] = None,
        mock_latency: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.client = client
        self.rng = rng or random.Random()
        self.mock_latency = mock_latency
        self.sleep = sleep
        self.fallbacks = FallbackService(self.rng)
    
    def call_model(self, prompt: str) -> Optional[str]:
        """Raw model call used by the chat widget."""
        try:
            return self.client.generate(prompt)
        except Exception as e:
            logger.error(f"Model call failed: {e}")
            return None
    
    def analyze_question(self, title: str, content: str) -> AIResponse:
        title, content = _as_text(title), _as_text(content)
        return self._execute(
            Capability.ANALYZE_QUESTION,
            lambda: prompts.build_analysis_prompt(title, content),
            lambda parsed: normalizers.normalize_analysis(parsed.data, title, content),
            {"title": title, "content": content},
        )
    
    def generate_answer_suggestion(self, question_title: str, question_content: str) -> AIResponse:
        title, content = _as_text(question_title), _as_text(question_content)
        
        def normalize(parsed: ParsedResponse):
            confidence = self.rng.uniform(*ScoreConstants.ANSWER_CONFIDENCE_RANGE)
            return [normalizers.normalize_answer(parsed.raw, confidence)]
        
        return self._execute(
            Capability.GENERATE_ANSWER,
            lambda: prompts.build_answer_prompt(title, content),
            normalize,
            {"title": title, "content": content},
            parse=wrap_text,
        )
    
    def improve_content(self, content: str, kind: str = "question") -> AIResponse:
        content = _as_text(content)
        kind = _check_kind(kind, IMPROVABLE_KINDS)
        return self._execute(
            Capability.IMPROVE_CONTENT,
            lambda: prompts.build_improvement_prompt(content, kind),
            lambda parsed: normalizers.normalize_improvement(parsed.data, content, parsed.raw),
            {"content": content, "kind": kind},
        )
    
    def detect_spam(self, content: str) -> AIResponse:
        content = _as_text(content)
        return self._execute(
            Capability.DETECT_SPAM,
            lambda: prompts.build_spam_prompt(content),
            lambda parsed: normalizers.normalize_spam(parsed.data),
            {"content": content},
        )
    
    def generate_tags(self, content: str) -> AIResponse:
        content = _as_text(content)
        return self._execute(
            Capability.GENERATE_TAGS,
            lambda: prompts.build_tags_prompt(content),
            lambda parsed: normalizers.normalize_tags(parsed.raw) or None,
            {"content": content},
            parse=wrap_text,
        )
    
    def generate_platform_insights(self, questions_data: Optional[Iterable[Any]]) -> AIResponse:
        questions = _as_list(questions_data)
        return self._execute(
            Capability.PLATFORM_INSIGHTS,
            lambda: prompts.build_insights_prompt(questions),
            lambda parsed: normalizers.normalize_insights(parsed.data),
            {"questions": questions},
        )
    
    def moderate_content(self, content: str, kind: str = "question") -> AIResponse:
        content = _as_text(content)
        kind = _check_kind(kind, MODERATABLE_KINDS)
        return self._execute(
            Capability.MODERATE_CONTENT,
            lambda: prompts.build_moderation_prompt(content, kind),
            lambda parsed: normalizers.normalize_moderation(parsed.data),
            {"content": content, "kind": kind},
        )
    
    def chat(self, message: str, username: Optional[str] = None, reputation: Optional[int] = None) -> AIResponse:
        message = _as_text(message)
        
        def normalize(parsed: ParsedResponse):
            confidence = self.rng.uniform(*ScoreConstants.CHAT_CONFIDENCE_RANGE)
            return normalizers.normalize_chat(parsed.raw, confidence)
        
        return self._execute(
            Capability.CHAT,
            lambda: prompts.build_chat_prompt(message, username, reputation),
            normalize,
            {"message": message},
            parse=wrap_text,
        )
    
    def _execute(
        self,
        capability: Capability,
        build_prompt: Callable[[], str],
        normalize: Callable[[ParsedResponse], Any],
        context: Dict[str, Any],
        parse: Callable[[Optional[str]], ParsedResponse] = parse_model_output,
    ) -> AIResponse:
        """Prompt, call, parse and normalize; any failure goes to the fallback."""
        try:
            parsed = parse(self.client.generate(build_prompt()))
            if parsed.ok:
                data = normalize(parsed)
                if data is not None:
                    return AIResponse(success=True, data=data)
        except Exception as e:
            logger.error(f"{capability.value} failed: {e}")
            parsed = ParsedResponse(ParseStatus.ERROR)
        
        return self._fallback(capability, parsed, context)
    
    def _fallback(self, capability: Capability, parsed: ParsedResponse, context: Dict[str, Any]) -> AIResponse:
        if self.mock_latency > 0:
            self.sleep(self.mock_latency)
        data = self.fallbacks.select(capability, parsed, **context)
        return AIResponse(success=True, data=data, synthetic=True)


class AIServiceFactory:
    """Factory for creating AI services."""
    
    @staticmethod
    def create(config: Optional[Settings] = None) -> AIService:
        """Create an AI service from settings."""
        config = config or settings
        cache = Cache(config.cache_dir) if config.cache_enabled else None
        client = GeminiClient(
            api_key=config.effective_gemini_key,
            model=config.gemini_model,
            base_url=config.gemini_base_url,
            timeout=config.request_timeout,
            max_attempts=config.max_retries,
            retry_delay=config.retry_delay,
            retry_backoff=config.retry_backoff,
            cache=cache,
            cache_ttl_hours=config.cache_ttl_hours,
        )
        if client.is_configured:
            logger.info(f"Gemini service initialized with model {config.gemini_model}")
        else:
            logger.warning("Gemini API key not provided, using mock data")
        return AIService(client, mock_latency=config.mock_latency)
