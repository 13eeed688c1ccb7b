"""Typed runtime settings with dotenv support and startup validation."""

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for the status server runtime.

    Environment variable names map directly to field names in uppercase.
    Example: `service_name` reads from `SERVICE_NAME`. The listen port reads
    from `PORT` first and falls back to `APPLICATION_PORT`.

    Attributes:
        application_host: Host interface for web server binding.
        application_port: Web server port.
        service_name: Service identifier reported by status and info endpoints.
        shutdown_timeout_seconds: Upper bound for graceful shutdown before a forced exit.
        log_level: Root logging level name.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    application_host: str = Field(default="0.0.0.0")
    application_port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("port", "application_port"),
    )
    service_name: str = Field(default="devops-assignment", min_length=1)
    shutdown_timeout_seconds: float = Field(default=10.0, gt=0)
    log_level: str = Field(default="INFO")

    @field_validator("service_name")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError("log_level must be one of CRITICAL, ERROR, WARNING, INFO, DEBUG")
        return normalized_value


class ActionSettings(BaseSettings):
    """Settings model for the one-shot README sync job.

    GitHub Actions exposes step inputs as `INPUT_<NAME>` environment variables,
    so the `api-url` input arrives as `INPUT_API-URL`. A plain `API_URL` is
    accepted for local runs.

    Attributes:
        api_url: Status endpoint polled by the sync job.
        github_workspace: Repository checkout root containing `README.md`.
        github_output: Optional path of the runner output file.
        request_timeout_seconds: HTTP request timeout in seconds.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    api_url: str = Field(validation_alias=AliasChoices("input_api-url", "api_url"))
    github_workspace: str = Field(default=".")
    github_output: str | None = Field(default=None)
    request_timeout_seconds: float = Field(default=30.0, gt=0)

    @field_validator("api_url", "github_workspace")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("github_output")
    @classmethod
    def _normalize_optional_path(cls, value: str | None) -> str | None:
        if value is None:
            return None
        stripped_value = value.strip()
        return stripped_value or None


def config_load_settings() -> AppSettings:
    """Load and validate status server settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when required settings are missing or invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error


def config_load_action_settings(**overrides: str) -> ActionSettings:
    """Load and validate README sync settings, applying explicit overrides.

    Args:
        overrides: Field values that take precedence over the environment,
            typically command-line arguments. `None` values are ignored.

    Returns:
        ActionSettings: Validated sync job settings.

    Raises:
        SettingsLoadError: Raised when the API URL is missing or settings are invalid.
    """

    explicit_values = {key: value for key, value in overrides.items() if value is not None}
    try:
        return ActionSettings(**explicit_values)
    except ValidationError as error:
        raise SettingsLoadError(
            f"Action configuration validation failed. Provide the api-url input. Details: {error}"
        ) from error
