"""Configuration management using Pydantic Settings"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from experience_score.domain.models import ScoringConfig


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Scoring rules
    period_length_days: int = Field(180, gt=0)
    points_per_period: float = Field(4.5, ge=0)
    degree_bonus: float = Field(10.0, ge=0)

    # Presentation
    decimal_separator: str = ","

    # Service
    service_name: str = "experience-score"
    log_level: str = "INFO"

    def scoring_config(self) -> ScoringConfig:
        return ScoringConfig(
            period_length_days=self.period_length_days,
            points_per_period=self.points_per_period,
            degree_bonus=self.degree_bonus,
        )


settings = Settings()
