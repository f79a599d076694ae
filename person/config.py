"""Runtime configuration for the person assistant.

Settings are loaded in priority order:
  1. Environment variables (highest priority)
  2. .env file in the project root
  3. Field defaults, or a validation error if a required variable is missing

Only the agent and its tools read these settings; ``person.age`` and
``person.datediff`` take everything as arguments.

Usage::

    from person.config import settings

    print(settings.model_arn, settings.age_format, settings.adult_age)
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    model_arn: str = Field(
        ...,
        alias="MODEL_ARN",
        description="AWS Bedrock application inference profile ARN.",
    )
    age_format: str = Field(
        "%Y %M %D",
        alias="AGE_FORMAT",
        description="Default dates difference format used by calculate_age.",
    )
    adult_age: int = Field(
        18,
        ge=0,
        alias="ADULT_AGE",
        description="Default age in years at which a person is an adult.",
    )


settings = Settings()
