"""
Configuration settings for the YouTube caption summarizer application.
"""

import os
from typing import Dict, Any
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "YouTube Caption Summarizer"
    APP_VERSION = "0.1.0"

    # API keys are read from the environment by the summarizer on every
    # request (see PROVIDER_API_KEYS). OPENAI_PROJECT_ID is picked up by the
    # OpenAI client directly.

    # Default models
    MODEL_PROVIDER = os.getenv("MODEL_PROVIDER", "openai")
    DEFAULT_SUMMARY_MODEL = os.getenv("SUMMARY_MODEL", "gpt-3.5-turbo")
    DEFAULT_SUMMARY_MODE = os.getenv("SUMMARY_MODE", "concise")
    TEMPERATURE = float(os.getenv("TEMPERATURE", "0.0"))

    # Outbound HTTP
    REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "30"))
    USER_AGENT = os.getenv(
        "USER_AGENT",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/124.0 Safari/537.36",
    )
    ACCEPT_LANGUAGE = os.getenv("ACCEPT_LANGUAGE", "en-US,en;q=0.9")

    PUBLIC_URL = os.getenv("PUBLIC_URL", "http://localhost:8000")

    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        # Validate required environment variables
        key_env = cls.api_key_env_var()
        if not key_env or not os.getenv(key_env):
            print(f"WARNING: no API key set for model provider '{cls.MODEL_PROVIDER}'.")
            print("Please set it in the .env file or environment variables.")

        if cls.DEFAULT_SUMMARY_MODE not in SUMMARY_MODES:
            print(f"WARNING: unknown SUMMARY_MODE '{cls.DEFAULT_SUMMARY_MODE}', using 'concise'.")
            cls.DEFAULT_SUMMARY_MODE = "concise"

    @classmethod
    def api_key_env_var(cls) -> str:
        """Name of the environment variable holding the backend API key."""
        return PROVIDER_API_KEYS.get(cls.MODEL_PROVIDER, "")

    @classmethod
    def get_http_headers(cls) -> Dict[str, Any]:
        """Headers sent with every outbound page and caption request."""
        return {
            "User-Agent": cls.USER_AGENT,
            "Accept-Language": cls.ACCEPT_LANGUAGE,
        }


# Environment variable holding the API key for each supported provider
PROVIDER_API_KEYS = {
    "openai": "OPENAI_API_KEY",
    "groq": "GROQ_API_KEY",
}

# Values accepted for SUMMARY_MODE (SummaryMode in models.schemas)
SUMMARY_MODES = ("concise", "structured")


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = "INFO"


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
config.initialize()
