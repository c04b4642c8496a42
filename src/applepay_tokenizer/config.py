"""Configuration management for the Apple Pay tokenizer."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    # Stripe
    publishable_key: str = Field(default="", description="Stripe publishable key (pk_test_... or pk_live_...)")
    api_base_url: str = Field(default="https://api.stripe.com/v1", description="Stripe API base URL")
    api_version: str = Field(default="2015-10-12", description="Value sent in the Stripe-Version header")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=True, description="Render logs as JSON")

    model_config = SettingsConfigDict(
        env_prefix="APPLEPAY_TOKENIZER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


# Global settings instance
settings = Settings()
