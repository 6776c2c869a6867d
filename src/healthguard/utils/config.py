"""Configuration management."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
    
    # Anthropic (preferred for chat, insights and image reading)
    anthropic_api_key: Optional[str] = None
    claude_model: str = Field(default="claude-sonnet-4-20250514")
    
    # OpenAI (text fallback, plus image generation and speech)
    openai_api_key: Optional[str] = None
    openai_model: str = Field(default="gpt-4o")
    openai_image_model: str = Field(default="dall-e-3")
    openai_tts_model: str = Field(default="tts-1")
    openai_tts_voice: str = Field(default="nova")
    
    # Location used for "nearby" searches (Portland, OR)
    default_latitude: Optional[float] = Field(default=45.5152)
    default_longitude: Optional[float] = Field(default=-122.6784)
    
    # Daily defaults
    default_step_goal: int = Field(default=10000)
    default_water_goal: int = Field(default=8)  # glasses (~250ml)
    hydration_reminder_minutes: int = Field(default=30)
    
    # Safety resources
    helpline_number: str = Field(default="988")
    
    # Data storage
    data_dir: Path = Field(default=Path("data"))
    
    @property
    def has_claude(self) -> bool:
        return self.anthropic_api_key is not None
    
    @property
    def has_openai(self) -> bool:
        return self.openai_api_key is not None
    
    @property
    def has_location(self) -> bool:
        return self.default_latitude is not None and self.default_longitude is not None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
