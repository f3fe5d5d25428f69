"""Configuration management for StackIt AI."""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings."""
    
    # Gemini API
    gemini_api_key: str = Field("", description="Gemini API key")
    VITE_GEMINI_API_KEY: str = Field("", description="Gemini API key (front-end naming)")
    gemini_model: str = Field("gemini-2.0-flash", description="Gemini model name")
    gemini_base_url: str = Field(
        "https://generativelanguage.googleapis.com/v1beta/models",
        description="Base URL for the generateContent endpoint"
    )
    
    @property
    def effective_gemini_key(self) -> str:
        """Get the effective Gemini API key from either field."""
        return self.gemini_api_key or self.VITE_GEMINI_API_KEY
    
    # Logging
    log_level: str = Field("INFO", description="Logging level")
    
    # Networking
    request_timeout: float = Field(30.0, description="Timeout for a single API request in seconds")
    max_retries: int = Field(1, description="Maximum attempts per API call (1 = no retry)")
    retry_delay: float = Field(1.0, description="Base retry delay in seconds")
    retry_backoff: float = Field(2.0, description="Retry backoff multiplier")
    
    # Fallback behaviour
    mock_latency: float = Field(1.0, description="Simulated latency for mock results in seconds")
    
    # Response cache
    cache_enabled: bool = Field(False, description="Cache successful model responses on disk")
    cache_dir: str = Field("cache/gemini_cache", description="Directory for the response cache")
    cache_ttl_hours: int = Field(24, description="Cache time-to-live in hours")
    
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Global settings instance
settings = Settings()
