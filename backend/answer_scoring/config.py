"""Application configuration."""

from pydantic import model_validator
from pydantic_settings import BaseSettings

_DEFAULT_UNCLEAR_WARNING = (
    "Achtung: Bitte denken Sie daran, dass {shown} und {associated} bei dieser "
    "Karte die einzigen validen Optionen sind!\n"
    "(Ihr Partner/Ihre Partnerin sieht diese Warnung nicht)"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Development mode; when False, hides error details from responses
    dev_mode: bool = True

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "https://localhost:3000",
        "https://localhost:5173",
    ]

    # Scoring
    distance_threshold: int = 3  # answers closer than this count as a match
    near_miss_margin: int = 2
    near_miss_associated: bool = False

    # Respondent-facing warning for unclear answers
    unclear_warning_template: str = _DEFAULT_UNCLEAR_WARNING

    # Request limits (read once when the request models are defined)
    max_input_length: int = 200
    max_label_length: int = 100

    # Batch scoring
    max_batch_size: int = 500

    # Logging
    log_level: str = "info"

    @model_validator(mode="after")
    def _validate_scoring(self) -> "Settings":
        if self.distance_threshold < 0:
            raise ValueError("DISTANCE_THRESHOLD must not be negative")
        if self.near_miss_margin < 0:
            raise ValueError("NEAR_MISS_MARGIN must not be negative")
        if self.max_input_length < 1 or self.max_label_length < 1:
            raise ValueError("MAX_INPUT_LENGTH and MAX_LABEL_LENGTH must be at least 1")
        if self.max_batch_size < 1:
            raise ValueError("MAX_BATCH_SIZE must be at least 1")
        return self

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
