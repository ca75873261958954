from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
	openai_api_key: str | None = Field(default=None, validation_alias="OPENAI_API_KEY")
	# Model to use for every explanation
	openai_model: str = Field(default="gpt-4.1-mini", validation_alias="OPENAI_MODEL")
	openai_base_url: str = Field(default="https://api.openai.com/v1", validation_alias="OPENAI_BASE_URL")
	openai_timeout_seconds: float = Field(default=60.0, validation_alias="OPENAI_TIMEOUT_SECONDS")

	# Reject parsed results that are missing one of the six section keys
	strict_result: bool = Field(default=False, validation_alias="EXPLAIN_STRICT_RESULT")
	min_chars: int = Field(default=3, validation_alias="EXPLAIN_MIN_CHARS")

	# Comma-separated list of origins allowed to call the API from a browser
	cors_origins: str = Field(default="http://localhost:8501", validation_alias="CORS_ORIGINS")

	# Where the Streamlit page sends its requests
	explainer_api_url: str = Field(default="http://localhost:8000", validation_alias="EXPLAINER_API_URL")

	log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

	# pydantic-settings v2 style config
	model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
