"""
Configuration management system using Pydantic Settings.
Supports environment-based configuration for different deployment environments.
"""

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings
from typing import Optional, Dict, Any, List
from enum import Enum
from pathlib import Path
import os


class Environment(str, Enum):
    """Supported deployment environments"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Supported log levels"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class GeminiSettings(BaseSettings):
    """Generative backend configuration (model identifiers are constants here)"""

    api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "GOOGLE_API_KEY", "API_KEY"),
        description="Google AI Studio / Gemini API key",
    )

    # Lookup: strict-schema model, then the lower-tier model on 404
    lookup_model: str = Field(default="gemini-3-pro-preview")
    lookup_fallback_model: str = Field(default="gemini-3-flash-preview")

    image_model: str = Field(default="gemini-2.5-flash-image")
    vision_model: str = Field(default="gemini-2.5-flash")
    story_model: str = Field(default="gemini-2.5-flash")
    chat_model: str = Field(default="gemini-2.5-flash")

    # Speech synthesis returns raw 16-bit mono PCM
    tts_model: str = Field(default="gemini-2.5-flash-preview-tts")
    tts_voice: str = Field(default="Kore")
    tts_sample_rate: int = Field(default=24000, ge=8000, le=48000)

    model_config = {
        "env_prefix": "GEMINI_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
        "extra": "ignore",
    }


class StorageSettings(BaseSettings):
    """Local persistence for the app state and synthesized audio"""

    config_path: str = Field(default="data/lingopop_config.json")
    config_key: str = Field(default="lingopop_config")
    audio_output_dir: str = Field(default="temp/audio")

    model_config = {"env_prefix": "STORAGE_", "extra": "ignore"}


class SecuritySettings(BaseSettings):
    """CORS configuration"""

    cors_origins: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = Field(default=True)
    cors_allow_methods: List[str] = Field(
        default_factory=lambda: ["GET", "POST", "PUT"]
    )
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from environment variable or list"""
        if isinstance(v, str):
            origin_list = v.split(",")
            return [origin.strip() for origin in origin_list if origin.strip()]
        return v or ["*"]

    model_config = {"env_prefix": "SECURITY_", "extra": "ignore"}


class Settings(BaseSettings):
    """Main application settings"""

    # Application Configuration
    app_name: str = Field(default="LingoPop Backend")
    app_version: str = Field(default="1.0.0")
    environment: Environment = Field(default=Environment.DEVELOPMENT)
    debug: bool = Field(default=False)

    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000, ge=1, le=65535)
    reload: bool = Field(default=False)
    workers: int = Field(default=1, ge=1, le=16)

    # Logging Configuration
    log_level: LogLevel = Field(default=LogLevel.INFO)
    log_json: bool = Field(default=True, description="Emit JSON log lines instead of plain text")

    # Nested Settings
    gemini: GeminiSettings = Field(default_factory=GeminiSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)

    @field_validator('environment', mode='before')
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment setting"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    def get_config_path(self) -> Path:
        """Absolute path of the persisted app-state file"""
        return Path(self.storage.config_path).resolve()

    def get_audio_output_dir(self) -> Path:
        return Path(self.storage.audio_output_dir).resolve()

    def get_cors_config(self) -> Dict[str, Any]:
        """Get CORS configuration for FastAPI"""
        return {
            "allow_origins": self.security.cors_origins,
            "allow_credentials": self.security.cors_allow_credentials,
            "allow_methods": self.security.cors_allow_methods,
            "allow_headers": self.security.cors_allow_headers,
        }

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


def build_settings(env_file: Optional[str] = ".env", **overrides) -> Settings:
    """
    Build settings whose nested sections read the same env file as the top
    level. Nested `BaseSettings` defaults otherwise only see the process
    environment.
    """
    sections: Dict[str, Any] = {
        "gemini": GeminiSettings(_env_file=env_file),
        "storage": StorageSettings(_env_file=env_file),
        "security": SecuritySettings(_env_file=env_file),
    }
    sections.update(overrides)
    return Settings(_env_file=env_file, **sections)


def environment_env_file() -> str:
    """`.env.<ENVIRONMENT>` when that file exists, else `.env`"""
    environment = os.getenv("ENVIRONMENT")
    if environment:
        candidate = Path(f".env.{environment.lower()}")
        if candidate.exists():
            return str(candidate)
    return ".env"


# Global settings instance
settings = build_settings(environment_env_file())


def get_settings() -> Settings:
    """Get application settings instance"""
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment and files"""
    global settings
    settings = build_settings(environment_env_file())
    return settings
