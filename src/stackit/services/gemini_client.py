"""Gemini generateContent client.

Every failure mode (missing key, HTTP error, empty candidate list, network or
decode error) is reported as ``None`` so callers can switch to mock data.
"""

import hashlib
import logging
from typing import Any, Dict, Optional

import requests
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from ..core.constants import GenerationConstants, PromptConstants, FileConstants

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"


class GeminiTransientError(Exception):
    """Raised for HTTP statuses worth retrying (rate limits, server errors)."""

    def __init__(self, status_code: int):
        super().__init__(f"Gemini API returned HTTP {status_code}")
        self.status_code = status_code


def build_generation_payload(prompt: str) -> Dict[str, Any]:
    """Request body for a single-prompt generateContent call."""
    return {
        "contents": [
            {"parts": [{"text": prompt}]}
        ],
        "generationConfig": {
            "temperature": GenerationConstants.TEMPERATURE,
            "topP": GenerationConstants.TOP_P,
            "maxOutputTokens": GenerationConstants.MAX_OUTPUT_TOKENS,
            "candidateCount": GenerationConstants.CANDIDATE_COUNT,
        },
        "safetySettings": [
            {"category": category, "threshold": GenerationConstants.SAFETY_THRESHOLD}
            for category in GenerationConstants.SAFETY_CATEGORIES
        ],
    }


class GeminiClient:
    """Thin wrapper around the Gemini REST endpoint."""
    
    def __init__(
        self,
        api_key: Optional[str],
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        max_attempts: int = 1,
        retry_delay: float = 1.0,
        retry_backoff: float = 2.0,
        session: Optional[requests.Session] = None,
        cache=None,
        cache_ttl_hours: int = 24,
    ):
        self.api_key = api_key or None
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_attempts = max(1, int(max_attempts))
        self.retry_delay = retry_delay
        self.retry_backoff = retry_backoff
        self.session = session or requests.Session()
        self.cache = cache
        self.cache_ttl_hours = cache_ttl_hours
    
    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)
    
    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/{self.model}:generateContent"
    
    def generate(self, prompt: str) -> Optional[str]:
        """Send one prompt and return the first candidate's text, or None."""
        if not self.api_key:
            return None
        if not prompt or not prompt.strip():
            logger.warning("Empty prompt passed to Gemini client, skipping request")
            return None
        
        cache_key = self._cache_key(prompt)
        cached = self._cache_get(cache_key)
        if cached:
            logger.debug(f"Cache hit for Gemini request: {cache_key[:FileConstants.CACHE_KEY_LENGTH]}...")
            return cached
        
        try:
            text = self._request_with_retry(prompt)
        except GeminiTransientError as e:
            logger.warning(f"Gemini API unavailable ({e.status_code}), falling back to mock data")
            return None
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"Gemini API call failed, falling back to mock data: {e}")
            return None
        
        if text:
            self._cache_set(cache_key, text)
        return text
    
    def _cache_get(self, cache_key: str) -> Optional[str]:
        if self.cache is None:
            return None
        try:
            return self.cache.get(cache_key)
        except Exception as e:
            logger.warning(f"Response cache read failed, calling Gemini: {e}")
            return None
    
    def _cache_set(self, cache_key: str, text: str):
        if self.cache is None:
            return
        try:
            self.cache.set(cache_key, text, expire=3600 * self.cache_ttl_hours)
            logger.debug(f"Cached Gemini response: {cache_key[:FileConstants.CACHE_KEY_LENGTH]}...")
        except Exception as e:
            logger.warning(f"Response cache write failed: {e}")
    
    def _request_with_retry(self, prompt: str) -> Optional[str]:
        retryer = Retrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=self.retry_delay, max=self.retry_backoff * 10),
            retry=retry_if_exception_type(
                (GeminiTransientError, requests.ConnectionError, requests.Timeout)
            ),
            reraise=True,
        )
        return retryer(self._request, prompt)
    
    def _request(self, prompt: str) -> Optional[str]:
        response = self.session.post(
            self.endpoint,
            headers={
                "Content-Type": "application/json",
                GenerationConstants.API_KEY_HEADER: self.api_key,
            },
            json=build_generation_payload(prompt),
            timeout=self.timeout,
        )
        
        status = response.status_code
        if status in GenerationConstants.RETRYABLE_STATUS_CODES:
            raise GeminiTransientError(status)
        if not 200 <= status < 300:
            logger.warning(f"Gemini API unavailable ({status}), falling back to mock data")
            return None
        
        return self._extract_text(response.json())
    
    @staticmethod
    def _extract_text(data: Any) -> Optional[str]:
        candidates = data.get("candidates") if isinstance(data, dict) else None
        if not candidates:
            logger.warning("No response from Gemini API, falling back to mock data")
            return None
        
        try:
            text = candidates[0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            logger.warning("Gemini candidate had no text part, falling back to mock data")
            return None
        
        if not isinstance(text, str) or not text.strip():
            logger.warning("Gemini returned empty text, falling back to mock data")
            return None
        return text
    
    def _cache_key(self, prompt: str) -> str:
        return hashlib.md5(
            f"{self.model}|{prompt}|{PromptConstants.PROMPT_VERSION}".encode()
        ).hexdigest()
