from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    max_content_length: int = 10000
    remove_boilerplate: bool = True
    extract_key_info: bool = True
    summarize_long_sections: bool = True
    preserve_costs: bool = True
    combined_content_budget: int = 12000
    preprocess_max_workers: int = 1

    pdf_engine: str = "pdfplumber"

    usage_log_max_entries: int = 1000
    input_price_per_1k_tokens: float = 0.03
    output_price_per_1k_tokens: float = 0.06

    analysis_provider: str = "openai"
    analysis_openai_api_key: str = ""
    analysis_openai_model_name: str = "gpt-4-turbo-preview"
    analysis_openai_timeout_seconds: int = 60
    analysis_temperature: float = 0.1
    analysis_max_tokens: int = 4000
    analysis_max_retries: int = 3

    @field_validator(
        "max_content_length",
        "combined_content_budget",
        "preprocess_max_workers",
        "usage_log_max_entries",
        "analysis_max_tokens",
        "analysis_max_retries",
    )
    @classmethod
    def _positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("must be at least 1")
        return value

    @field_validator("analysis_temperature")
    @classmethod
    def _temperature_range(cls, value: float) -> float:
        if not 0.0 <= value <= 1.0:
            raise ValueError("must be between 0 and 1")
        return value
