from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    env: str = Field(default="development", alias="ENV")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_to_file: bool = Field(default=False, alias="LOG_TO_FILE")
    log_dir: str = Field(default="logs", alias="LOG_DIR")

    min_courses: int = Field(default=1, ge=1, alias="GPA_MIN_COURSES")
    max_courses: int = Field(default=20, ge=1, alias="GPA_MAX_COURSES")
    min_credits: float = Field(default=0.5, gt=0, alias="GPA_MIN_CREDITS")
    max_credits: float = Field(default=10.0, gt=0, alias="GPA_MAX_CREDITS")
    high_achievement_gpa: float = Field(default=4.0, ge=0, alias="GPA_HIGH_ACHIEVEMENT")

    # JSON object in the environment, e.g. GPA_GRADE_SCALE='{"A": 5, "B": 3}'
    grade_scale: dict[str, float] = Field(
        default_factory=lambda: {"A": 5.0, "B+": 4.0, "B": 3.0, "C": 2.0, "D": 1.0, "E": 0.5},
        alias="GPA_GRADE_SCALE",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
