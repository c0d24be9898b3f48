from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    gemini_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("gemini_api_key", "api_key"),
    )
    gemini_model: str = "gemini-2.5-flash"
    redis_url: str = ""
    tick_interval_ms: int = 100
    suggestion_debounce_ms: int = 500

    model_config = {"env_prefix": "", "case_sensitive": False}


settings = Settings()
