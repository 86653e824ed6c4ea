"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from typing import Optional

from pydantic import BaseModel, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# LLM Provider Configuration Models
# =====================================================================


class OpenAIConfig(BaseModel):
    """OpenAI (or OpenAI-compatible) chat completions configuration."""

    api_key: Optional[SecretStr] = Field(
        default=None, alias="OPENAI_API_KEY", description="OpenAI API key for authentication"
    )
    model: str = Field(default="gpt-4o-mini", alias="OPENAI_MODEL", description="Default OpenAI model to use")
    base_url: str = Field(
        default="https://api.openai.com/v1",
        alias="OPENAI_BASE_URL",
        description="OpenAI-compatible API base URL (e.g. a Groq or OpenRouter endpoint)",
    )

    model_config = {"populate_by_name": True}


class AnthropicConfig(BaseModel):
    """Anthropic API configuration."""

    api_key: Optional[SecretStr] = Field(
        default=None, alias="ANTHROPIC_API_KEY", description="Anthropic API key for authentication"
    )
    model: str = Field(
        default="claude-3-5-haiku-latest", alias="ANTHROPIC_MODEL", description="Default Anthropic model to use"
    )
    base_url: str = Field(
        default="https://api.anthropic.com/v1", alias="ANTHROPIC_BASE_URL", description="Anthropic API base URL"
    )

    model_config = {"populate_by_name": True}


class GoogleConfig(BaseModel):
    """Google Gemini API configuration."""

    api_key: Optional[SecretStr] = Field(
        default=None, alias="GOOGLE_API_KEY", description="Google API key for authentication"
    )
    model: str = Field(default="gemini-1.5-flash", alias="GOOGLE_MODEL", description="Default Google model to use")
    base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        alias="GOOGLE_BASE_URL",
        description="Gemini API base URL",
    )

    model_config = {"populate_by_name": True}


class OllamaConfig(BaseModel):
    """Local Ollama server configuration."""

    enabled: bool = Field(default=True, alias="OLLAMA_ENABLED", description="Whether the local Ollama server is used")
    base_url: Optional[str] = Field(
        default="http://localhost:11434", alias="OLLAMA_BASE_URL", description="Ollama server base URL"
    )
    model: str = Field(default="phi3:mini", alias="OLLAMA_MODEL", description="Ollama model tag")

    model_config = {"populate_by_name": True}


class AIRoutingConfig(BaseModel):
    """How chat requests are routed across LLM providers."""

    provider_order: list[str] = Field(
        default=["openai", "anthropic", "google", "ollama"],
        alias="AI_PROVIDER_ORDER",
        description="Order in which configured providers are tried",
    )
    preferred_provider: Optional[str] = Field(
        default=None, alias="AI_PREFERRED_PROVIDER", description="Provider tried first when configured"
    )
    request_timeout: float = Field(
        default=30.0, alias="AI_REQUEST_TIMEOUT", description="Timeout in seconds for a single LLM request"
    )
    temperature: float = Field(default=0.7, alias="AI_TEMPERATURE", description="Sampling temperature")
    top_p: float = Field(default=0.9, alias="AI_TOP_P", description="Nucleus sampling probability")
    max_tokens: int = Field(default=200, alias="AI_MAX_TOKENS", description="Maximum tokens per coaching reply")

    model_config = {"populate_by_name": True}


# =====================================================================
# Third-party Service Configuration Models
# =====================================================================


class PrayerTimesConfig(BaseModel):
    """Prayer-time calculation API configuration."""

    base_url: str = Field(
        default="https://api.aladhan.com/v1", alias="PRAYER_TIMES_API_URL", description="Prayer-time API base URL"
    )
    method: int = Field(default=2, alias="PRAYER_TIMES_METHOD", description="Default calculation method id")
    timeout: float = Field(default=10.0, alias="PRAYER_TIMES_TIMEOUT", description="Request timeout in seconds")

    model_config = {"populate_by_name": True}


class MicrosoftGraphConfig(BaseModel):
    """Microsoft Graph (To-Do) client-credentials configuration."""

    client_id: Optional[str] = Field(default=None, alias="GRAPH_CLIENT_ID", description="Azure AD application id")
    client_secret: Optional[SecretStr] = Field(
        default=None, alias="GRAPH_CLIENT_SECRET", description="Azure AD application secret"
    )
    tenant_id: Optional[str] = Field(default=None, alias="GRAPH_TENANT_ID", description="Azure AD tenant id")
    authority_url: str = Field(
        default="https://login.microsoftonline.com",
        alias="GRAPH_AUTHORITY_URL",
        description="Microsoft identity platform base URL",
    )
    base_url: str = Field(
        default="https://graph.microsoft.com/v1.0", alias="GRAPH_BASE_URL", description="Microsoft Graph base URL"
    )
    timeout: float = Field(default=15.0, alias="GRAPH_TIMEOUT", description="Request timeout in seconds")

    model_config = {"populate_by_name": True}


class CoquiTTSConfig(BaseModel):
    """Coqui TTS server configuration."""

    server_url: Optional[str] = Field(
        default=None, alias="COQUI_TTS_SERVER_URL", description="Coqui TTS server base URL (unset disables it)"
    )
    timeout: float = Field(default=30.0, alias="COQUI_TTS_TIMEOUT", description="Synthesis timeout in seconds")
    status_timeout: float = Field(
        default=5.0, alias="COQUI_TTS_STATUS_TIMEOUT", description="Timeout for the availability probe"
    )

    model_config = {"populate_by_name": True}


class CORSConfig(BaseModel):
    """CORS configuration."""

    origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS", description="Allowed CORS origins (use * for all)")
    allow_credentials: bool = Field(
        default=True, alias="CORS_ALLOW_CREDENTIALS", description="Allow credentials in CORS requests"
    )
    allow_methods: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_METHODS", description="Allowed HTTP methods (use * for all)"
    )
    allow_headers: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_HEADERS", description="Allowed HTTP headers (use * for all)"
    )

    model_config = {"populate_by_name": True}


class SingleUserConfig(BaseModel):
    """Default account used when requests carry no user header."""

    email: str = Field(
        default="owner@localhost", alias="DEFAULT_USER_EMAIL", description="Email of the single-user mode account"
    )
    name: str = Field(default="Owner", alias="DEFAULT_USER_NAME", description="Display name of the default account")

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    # =====================================================================
    # Pydantic Configuration
    # =====================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Accountability AI Server Configuration
    # =====================================================================
    server_host: str = Field(
        default="0.0.0.0",
        description="Server host address to bind to",
        alias="ACCOUNTABILITY_AI_SERVER_HOST",
    )
    server_port: int = Field(
        default=8000,
        description="Server port number",
        alias="ACCOUNTABILITY_AI_SERVER_PORT",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="ACCOUNTABILITY_AI_LOG_LEVEL",
    )

    # =====================================================================
    # Database Configuration
    # =====================================================================
    database_url: str = Field(
        default="sqlite+aiosqlite:///./accountability_ai.db",
        description="Async SQLAlchemy connection URL for the application database",
        alias="DATABASE_URL",
    )

    # =====================================================================
    # Flat provider fields (grouped through the properties below)
    # =====================================================================
    OPENAI_API_KEY: Optional[SecretStr] = None
    OPENAI_MODEL: str = "gpt-4o-mini"
    OPENAI_BASE_URL: str = "https://api.openai.com/v1"

    ANTHROPIC_API_KEY: Optional[SecretStr] = None
    ANTHROPIC_MODEL: str = "claude-3-5-haiku-latest"
    ANTHROPIC_BASE_URL: str = "https://api.anthropic.com/v1"

    GOOGLE_API_KEY: Optional[SecretStr] = None
    GOOGLE_MODEL: str = "gemini-1.5-flash"
    GOOGLE_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta"

    OLLAMA_ENABLED: bool = True
    OLLAMA_BASE_URL: Optional[str] = "http://localhost:11434"
    OLLAMA_MODEL: str = "phi3:mini"

    AI_PROVIDER_ORDER: list[str] = ["openai", "anthropic", "google", "ollama"]
    AI_PREFERRED_PROVIDER: Optional[str] = None
    AI_REQUEST_TIMEOUT: float = 30.0
    AI_TEMPERATURE: float = 0.7
    AI_TOP_P: float = 0.9
    AI_MAX_TOKENS: int = 200

    PRAYER_TIMES_API_URL: str = "https://api.aladhan.com/v1"
    PRAYER_TIMES_METHOD: int = 2
    PRAYER_TIMES_TIMEOUT: float = 10.0

    GRAPH_CLIENT_ID: Optional[str] = None
    GRAPH_CLIENT_SECRET: Optional[SecretStr] = None
    GRAPH_TENANT_ID: Optional[str] = None
    GRAPH_AUTHORITY_URL: str = "https://login.microsoftonline.com"
    GRAPH_BASE_URL: str = "https://graph.microsoft.com/v1.0"
    GRAPH_TIMEOUT: float = 15.0

    COQUI_TTS_SERVER_URL: Optional[str] = None
    COQUI_TTS_TIMEOUT: float = 30.0
    COQUI_TTS_STATUS_TIMEOUT: float = 5.0

    CORS_ORIGINS: list[str] = ["*"]
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: list[str] = ["*"]
    CORS_ALLOW_HEADERS: list[str] = ["*"]

    DEFAULT_USER_EMAIL: str = "owner@localhost"
    DEFAULT_USER_NAME: str = "Owner"

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def openai(self) -> OpenAIConfig:
        """Get OpenAI configuration from environment variables."""
        return OpenAIConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def anthropic(self) -> AnthropicConfig:
        """Get Anthropic configuration from environment variables."""
        return AnthropicConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def google(self) -> GoogleConfig:
        """Get Google configuration from environment variables."""
        return GoogleConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def ollama(self) -> OllamaConfig:
        """Get Ollama configuration from environment variables."""
        return OllamaConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def ai_routing(self) -> AIRoutingConfig:
        """Get LLM routing configuration from environment variables."""
        return AIRoutingConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def prayer_times(self) -> PrayerTimesConfig:
        """Get prayer-time API configuration from environment variables."""
        return PrayerTimesConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def microsoft_graph(self) -> MicrosoftGraphConfig:
        """Get Microsoft Graph configuration from environment variables."""
        return MicrosoftGraphConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def coqui_tts(self) -> CoquiTTSConfig:
        """Get Coqui TTS configuration from environment variables."""
        return CoquiTTSConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def cors(self) -> CORSConfig:
        """Get CORS configuration from environment variables."""
        return CORSConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def single_user(self) -> SingleUserConfig:
        """Get single-user mode configuration from environment variables."""
        return SingleUserConfig.model_validate(self.model_dump(by_alias=True))


settings = Settings()
